"""Observer pattern implementation for validation events.

Provides event types, observer protocol, and mixin for adding observer
support to validators and validation state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "ValidationEventType",
    "ValidationEvent",
    "ValidationObserver",
    "ObservableMixin",
]


class ValidationEventType(Enum):
    """Types of validation events that can be observed."""

    VALIDATION_STARTED = auto()
    """Emitted before a validator invokes its validation routine."""

    VALIDATION_COMPLETED = auto()
    """Emitted after the validation routine returns."""

    ERROR_ADDED = auto()
    """Emitted when a message is appended to a field's error list."""

    ERRORS_CLEARED = auto()
    """Emitted when a field's error list is cleared."""

    RULE_CHECKED = auto()
    """Emitted after a single rule in a rules mapping has run."""


@dataclass
class ValidationEvent:
    """A validation event that can be observed.

    Attributes:
        event_type: The type of event that occurred.
        source: The object that emitted the event (validator or state).
        data: Event-specific data dictionary.

    Example:
        event = ValidationEvent(
            event_type=ValidationEventType.ERROR_ADDED,
            source=state,
            data={"field": "email", "message": "Email is required"},
        )
    """

    event_type: ValidationEventType
    source: object
    data: dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class ValidationObserver(Protocol):
    """Protocol for validation event observers.

    Implement this protocol to receive validation events.

    Example:
        class PrintingObserver:
            def on_event(self, event: ValidationEvent) -> None:
                print(f"{event.event_type.name}: {event.data}")
    """

    def on_event(self, event: ValidationEvent) -> None:
        """Handle a validation event.

        Args:
            event: The validation event to handle.
        """
        ...


class ObservableMixin:
    """Observer registry shared by Validator and ValidationState.

    The list is created on first use, so subclasses need no __init__ call.
    """

    _observers: list[ValidationObserver]

    def _observer_list(self) -> list[ValidationObserver]:
        return self.__dict__.setdefault("_observers", [])

    def add_observer(self, observer: ValidationObserver) -> None:
        """Subscribe ``observer``. Adding the same observer twice is a no-op."""
        registered = self._observer_list()
        if observer not in registered:
            registered.append(observer)

    def remove_observer(self, observer: ValidationObserver) -> None:
        """Unsubscribe ``observer`` if it is registered."""
        registered = self._observer_list()
        if observer in registered:
            registered.remove(observer)

    def notify(self, event: ValidationEvent) -> None:
        """Deliver ``event`` to every observer in subscription order.

        Exceptions raised by an observer propagate to the caller.
        """
        for observer in self._observer_list():
            observer.on_event(event)

    def _emit(self, event_type: ValidationEventType, **data: Any) -> None:
        # No event object is built when nothing is subscribed
        if self._observer_list():
            self.notify(ValidationEvent(event_type=event_type, source=self, data=data))

    @property
    def observers(self) -> list[ValidationObserver]:
        """Snapshot of the subscribed observers."""
        return list(self._observer_list())

    def clear_observers(self) -> None:
        """Unsubscribe every observer."""
        self._observer_list().clear()
