"""Validation protocols for type checking.

Structural types for validation routines and for anything that behaves
like a Validator.
"""

from __future__ import annotations

from collections.abc import Collection
from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from field_validation.errors import ValidationErrors
    from field_validation.state import ValidationState

T_contra = TypeVar("T_contra", contravariant=True)

__all__ = ["ValidationCallback", "ValidatorProtocol"]


class ValidationCallback(Protocol[T_contra]):
    """Shape of a validation routine.

    The routine records errors through ``state`` and returns nothing.
    ``fields_to_check`` is None when every field should be checked.
    """

    def __call__(
        self,
        model: T_contra,
        state: ValidationState,
        fields_to_check: Collection[str] | None = None,
    ) -> None: ...


@runtime_checkable
class ValidatorProtocol(Protocol[T_contra]):
    """Protocol for validator implementations.

    Use this for type hints when accepting any validator.
    Generic over the type of model being validated.
    """

    def validate(self, model: T_contra, fields_to_check: Collection[str] | None = None) -> bool:
        """Validate a model."""
        ...

    def errors(self) -> ValidationErrors:
        """Return the current error store."""
        ...

    def errors_for(self, field_name: str) -> list[str]:
        """Return the errors for a single field."""
        ...

    def has_errors(self) -> bool:
        """Check if any field has errors."""
        ...
