"""Validation state handed to validation routines.

Provides ValidationState, the scoped handle a validation routine uses to
record and clear error messages in a validator's error store.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Mapping

from field_validation.errors import ValidationErrors, has_errors
from field_validation.events import ObservableMixin, ValidationEventType

__all__ = ["Condition", "Rule", "ValidationState"]

Condition = bool | Callable[[], bool]
"""A failure condition: a plain bool or a zero-argument predicate."""

Rule = Callable[[], str | None]
"""A field rule returning an error message, or None/"" when the field is valid."""


class ValidationState(ObservableMixin):
    """State management for validation passed to a validation routine.

    Wraps an error store it does not own. Every operation mutates that
    store in place, so the owning validator sees the results once the
    routine returns.

    ``check`` accumulates and never clears. ``clear_errors`` and
    ``single_check`` reset a field first. ``check_rules`` runs a rule table
    over several fields, optionally restricted to a subset.

    Example:
        def validate_user(user, state, fields_to_check=None):
            state.clear_errors("password")
            state.check("password", lambda: len(user.password) < 8, "Too short")
            state.check("password", lambda: user.password.isalpha(), "Needs a digit")
            state.single_check("email", not user.email, "Email is required")
    """

    def __init__(self, errors: ValidationErrors) -> None:
        """Initialize the state.

        Args:
            errors: Error store to record messages in. Not copied.
        """
        self._errors = errors

    def check(self, field: str, condition: Condition, message: str) -> None:
        """Add ``message`` to ``field`` if the condition holds.

        A callable condition is invoked exactly once, here. Existing
        messages for the field are kept.

        Args:
            field: Name of the field being checked.
            condition: True (or a predicate returning True) when the field is invalid.
            message: Error message to record on failure.
        """
        failed = condition() if callable(condition) else condition
        if failed:
            self.add_error(field, message)

    def clear_errors(self, field: str) -> None:
        """Clear all errors for ``field``, creating an empty list if needed.

        Usually called before a series of ``check`` calls on the field.
        Not needed before ``single_check``.
        """
        messages = self._errors.setdefault(field, [])
        cleared = len(messages)
        messages.clear()
        self._emit(ValidationEventType.ERRORS_CLEARED, field=field, cleared=cleared)

    def single_check(self, field: str, condition: Condition, message: str) -> None:
        """Clear ``field`` and then check it, for fields with a single rule."""
        self.clear_errors(field)
        self.check(field, condition, message)

    def add_error(self, field: str, message: str) -> None:
        """Add an error message for a field.

        Args:
            field: Name of the field with the error.
            message: Error message describing the issue.
        """
        self._errors.setdefault(field, []).append(message)
        self._emit(ValidationEventType.ERROR_ADDED, field=field, message=message)

    def check_rules(
        self,
        rules: Mapping[str, Rule],
        fields_to_check: Collection[str] | None = None,
    ) -> None:
        """Run a rule for each selected field.

        Rules run in mapping order. Each selected field is cleared before
        its rule runs, and a non-empty returned message becomes that
        field's only error. Fields not selected keep whatever errors they
        already had.

        Args:
            rules: Mapping of field name to a zero-argument rule.
            fields_to_check: Fields to run rules for. None runs every rule;
                an empty collection runs none.

        Raises:
            TypeError: If ``fields_to_check`` is a single string.

        Example:
            state.check_rules(
                {
                    "name": lambda: None if user.name else "Name is required",
                    "age": lambda: "Too young" if user.age < 18 else None,
                },
                fields_to_check,
            )
        """
        _reject_bare_string(fields_to_check)
        selected = None if fields_to_check is None else frozenset(fields_to_check)
        for field, rule in rules.items():
            if not self.should_check(field, selected):
                continue

            self.clear_errors(field)
            message = rule()
            if message:
                self.add_error(field, message)

            self._emit(ValidationEventType.RULE_CHECKED, field=field, message=message or None)

    @staticmethod
    def should_check(field: str, fields_to_check: Collection[str] | None) -> bool:
        """Check whether ``field`` is selected by ``fields_to_check``.

        None selects every field. Any collection, including an empty one,
        selects only its members. A bare string raises TypeError.
        """
        _reject_bare_string(fields_to_check)
        return fields_to_check is None or field in fields_to_check

    def errors(self) -> ValidationErrors:
        """Return the error store. This is the live store, not a copy."""
        return self._errors

    def errors_for(self, field: str) -> list[str]:
        """Return the messages recorded for ``field``, or an empty list."""
        return self._errors.get(field, [])

    def has_errors(self) -> bool:
        """Check if any field currently has an error."""
        return has_errors(self._errors)

    def __repr__(self) -> str:
        return f"ValidationState(fields={list(self._errors)!r})"


def _reject_bare_string(fields_to_check: object) -> None:
    """Raise TypeError for a str passed where a collection of field names belongs."""
    if isinstance(fields_to_check, str):
        raise TypeError(
            f"fields_to_check must be a collection of field names, not a string "
            f"({fields_to_check!r}); use [{fields_to_check!r}]"
        )
