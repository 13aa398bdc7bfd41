"""Field-keyed validation error accumulation for forms and request models."""

from field_validation.errors import FieldError, ValidationErrors
from field_validation.events import (
    ObservableMixin,
    ValidationEvent,
    ValidationEventType,
    ValidationObserver,
)
from field_validation.protocols import ValidationCallback, ValidatorProtocol
from field_validation.report import ValidationReport
from field_validation.rich_observers import ConsoleEventObserver, render_errors
from field_validation.state import Condition, Rule, ValidationState
from field_validation.validator import Validator

__all__ = [
    # Error store
    "FieldError",
    "ValidationErrors",
    # Validation state
    "Condition",
    "Rule",
    "ValidationState",
    # Validator
    "Validator",
    "ValidationCallback",
    "ValidatorProtocol",
    # Snapshots
    "ValidationReport",
    # Observer pattern
    "ObservableMixin",
    "ValidationEvent",
    "ValidationEventType",
    "ValidationObserver",
    # Rich output
    "ConsoleEventObserver",
    "render_errors",
]

__version__ = "0.1.0"
