"""Error store containers.

The error store maps field names to the ordered list of messages recorded
for that field. A missing key and an empty list both mean "no errors".
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

__all__ = ["FieldError", "ValidationErrors", "count_errors", "flatten", "has_errors"]

ValidationErrors = dict[str, list[str]]
"""Collection of validation error messages indexed by field name."""


@dataclass(frozen=True)
class FieldError:
    """A single validation error message for a field."""

    field: str
    message: str


def has_errors(errors: Mapping[str, Sequence[str]]) -> bool:
    """Check if any field in the store has at least one message."""
    return any(messages for messages in errors.values())


def count_errors(errors: Mapping[str, Sequence[str]]) -> int:
    """Get the total number of messages across all fields."""
    return sum(len(messages) for messages in errors.values())


def flatten(errors: Mapping[str, Sequence[str]]) -> list[FieldError]:
    """Flatten the store into FieldError records.

    Fields keep their insertion order and messages keep append order.

    Args:
        errors: Error store to flatten.

    Returns:
        One FieldError per recorded message.
    """
    return [
        FieldError(field=field, message=message)
        for field, messages in errors.items()
        for message in messages
    ]
