"""Serializable snapshots of a validator's errors.

Provides Pydantic models for exporting validation results outside the
validator, e.g. as a JSON API response body.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from field_validation.errors import FieldError, ValidationErrors, flatten

__all__ = ["ValidationReport"]


class ValidationReport(BaseModel):
    """Immutable snapshot of an error store.

    Attributes:
        validator: Name of the validator the snapshot was taken from.
        source: Optional identifier of what was validated (form id, request path).
        is_valid: Whether no field had errors at snapshot time.
        errors: Copy of the store with empty fields dropped, messages as tuples.
        error_count: Total number of messages.
        created_at: ISO format timestamp of when the snapshot was taken.
    """

    model_config = ConfigDict(frozen=True)

    validator: str
    source: str | None = None
    is_valid: bool
    errors: dict[str, tuple[str, ...]] = Field(default_factory=dict)
    error_count: int = 0
    created_at: str = Field(default_factory=lambda: datetime.now().isoformat())

    @classmethod
    def from_errors(
        cls,
        errors: ValidationErrors,
        validator: str = "validator",
        **extra: Any,
    ) -> ValidationReport:
        """Build a report from an error store.

        Args:
            errors: Error store to snapshot. Messages are copied.
            validator: Name of the validator that owns the store.
            **extra: Additional report fields (e.g. ``source``).

        Returns:
            A new ValidationReport.
        """
        copied = {field: tuple(messages) for field, messages in errors.items() if messages}
        return cls(
            validator=validator,
            is_valid=not copied,
            errors=copied,
            error_count=sum(len(messages) for messages in copied.values()),
            **extra,
        )

    def errors_for(self, field: str) -> list[str]:
        """Return the messages recorded for ``field``, or an empty list."""
        return list(self.errors.get(field, []))

    def flatten(self) -> list[FieldError]:
        """Get all errors as FieldError records."""
        return flatten(self.errors)

    def summary(self) -> dict[str, int]:
        """Get the number of messages per field."""
        return {field: len(messages) for field, messages in self.errors.items()}
