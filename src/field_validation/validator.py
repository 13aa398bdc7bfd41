"""Validator wrapping a validation routine around a persistent error store.

Provides Validator, which runs a caller-supplied validation routine
against a model and keeps the resulting errors between calls so that
individual fields can be re-validated on their own.
"""

from __future__ import annotations

import time
from collections.abc import Collection
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from field_validation.errors import (
    FieldError,
    ValidationErrors,
    count_errors,
    flatten,
    has_errors,
)
from field_validation.events import ObservableMixin, ValidationEventType
from field_validation.report import ValidationReport
from field_validation.state import ValidationState, _reject_bare_string

if TYPE_CHECKING:
    from field_validation.protocols import ValidationCallback

__all__ = ["Validator"]

T = TypeVar("T")


class Validator(ObservableMixin, Generic[T]):
    """Validator for any plain object, dict, or model instance.

    Generic over T, the type of model being validated. The error store is
    created empty and then only ever mutated by the validation routine,
    one field at a time. Errors for fields a call does not check are left
    as the previous call recorded them.

    Supports the Observer pattern - observers receive VALIDATION_STARTED
    and VALIDATION_COMPLETED from the validator, plus ERROR_ADDED,
    ERRORS_CLEARED and RULE_CHECKED from the state it hands to the routine.

    Example:
        from field_validation import Validator

        def validate_signup(form, state, fields_to_check=None):
            state.check_rules(
                {
                    "email": lambda: None if "@" in form["email"] else "Invalid email",
                    "age": lambda: "Must be 18 or older" if form["age"] < 18 else None,
                },
                fields_to_check,
            )

        validator = Validator(validate_signup, name="signup")
        validator.validate({"email": "nope", "age": 30})   # False
        validator.errors_for("email")                      # ["Invalid email"]

        # Re-check a single field after the user edits it
        validator.validate({"email": "a@b.c", "age": 30}, ["email"])  # True
    """

    def __init__(self, validating: ValidationCallback[T], *, name: str = "validator") -> None:
        """Initialize the validator.

        Args:
            validating: Routine called as ``validating(model, state, fields_to_check)``.
            name: Name for this validator. Defaults to "validator".

        Raises:
            TypeError: If ``validating`` is not callable.
        """
        if not callable(validating):
            raise TypeError(
                f"validating must be callable, got {type(validating).__name__}"
            )
        self._errors: ValidationErrors = {}
        self._validating = validating
        self._name = name

    @property
    def name(self) -> str:
        """Name of this validator."""
        return self._name

    def validate(self, model: T, fields_to_check: Collection[str] | None = None) -> bool:
        """Validate a model.

        If ``fields_to_check`` is passed only those fields are checked, but
        the result may still be False because of errors other fields kept
        from earlier calls.

        Args:
            model: Model to validate.
            fields_to_check: Fields to check. None checks everything, an
                empty collection checks nothing.

        Returns:
            True if no field has any errors after the routine runs.

        Raises:
            TypeError: If ``fields_to_check`` is a single string.

        Note:
            Exceptions raised by the routine propagate unchanged and no
            VALIDATION_COMPLETED event is emitted for that call.
        """
        _reject_bare_string(fields_to_check)
        start_time = time.perf_counter()

        self._emit(
            ValidationEventType.VALIDATION_STARTED,
            model=model,
            validator_name=self._name,
            fields_to_check=fields_to_check,
        )

        state = ValidationState(self._errors)
        for observer in self.observers:
            state.add_observer(observer)

        self._validating(model, state, fields_to_check)

        is_valid = not self.has_errors()
        duration_ms = (time.perf_counter() - start_time) * 1000

        self._emit(
            ValidationEventType.VALIDATION_COMPLETED,
            model=model,
            validator_name=self._name,
            is_valid=is_valid,
            error_count=self.error_count,
            duration_ms=duration_ms,
        )

        return is_valid

    def errors(self) -> ValidationErrors:
        """Return the errors found by the validator. This is the live store."""
        return self._errors

    def errors_for(self, field_name: str) -> list[str]:
        """Return the errors found for ``field_name``, or an empty list."""
        return self._errors.get(field_name, [])

    def has_errors(self) -> bool:
        """Check if any field has errors, from this call or earlier ones."""
        return has_errors(self._errors)

    @property
    def error_count(self) -> int:
        """Get the total number of error messages."""
        return count_errors(self._errors)

    @property
    def fields_with_errors(self) -> list[str]:
        """Get names of fields that currently have errors."""
        return [field for field, messages in self._errors.items() if messages]

    def flatten(self) -> list[FieldError]:
        """Get all errors as FieldError records in store order."""
        return flatten(self._errors)

    def report(self, **extra: Any) -> ValidationReport:
        """Take an immutable snapshot of the current errors.

        Args:
            **extra: Additional ValidationReport fields (e.g. ``source``).

        Returns:
            ValidationReport isolated from later changes to the store.
        """
        return ValidationReport.from_errors(self._errors, validator=self._name, **extra)

    def __repr__(self) -> str:
        return (
            f"Validator(name={self._name!r}, "
            f"fields={len(self._errors)}, errors={self.error_count})"
        )
