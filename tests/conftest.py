"""Shared fixtures and Hypothesis strategies for tests."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass

import pytest
from hypothesis import strategies as st

from field_validation import ValidationEvent, ValidationEventType, ValidationState, Validator
from field_validation.errors import ValidationErrors

# -----------------------------------------------------------------------------
# Hypothesis Strategies
# -----------------------------------------------------------------------------

# Strategy for valid field names (letters and numbers only)
field_names = st.text(
    min_size=1,
    max_size=30,
    alphabet=st.characters(whitelist_categories=("L", "N")),
)

# Strategy for messages
messages = st.text(min_size=1, max_size=100)


# -----------------------------------------------------------------------------
# Test Models
# -----------------------------------------------------------------------------


@dataclass
class SignupForm:
    """Simple model for testing Validator functionality."""

    username: str = "alice"
    email: str = "alice@example.com"
    password: str = "s3cretpass"
    age: int = 30


def validate_signup(
    form: SignupForm,
    state: ValidationState,
    fields_to_check: Collection[str] | None = None,
) -> None:
    """Validation routine mixing rules, single checks and accumulated checks."""
    state.check_rules(
        {
            "username": lambda: None if form.username else "Username is required",
            "email": lambda: None if "@" in form.email else "Invalid email",
        },
        fields_to_check,
    )

    if state.should_check("password", fields_to_check):
        state.clear_errors("password")
        state.check("password", lambda: len(form.password) < 8, "Password is too short")
        state.check("password", lambda: form.password.isalpha(), "Password needs a digit")

    if state.should_check("age", fields_to_check):
        state.single_check("age", form.age < 18, "Must be 18 or older")


# -----------------------------------------------------------------------------
# Test Observers
# -----------------------------------------------------------------------------


class RecordingObserver:
    """Observer that records all events for testing."""

    def __init__(self) -> None:
        self.events: list[ValidationEvent] = []

    def on_event(self, event: ValidationEvent) -> None:
        self.events.append(event)

    @property
    def event_types(self) -> list[ValidationEventType]:
        return [e.event_type for e in self.events]

    def of_type(self, event_type: ValidationEventType) -> list[ValidationEvent]:
        return [e for e in self.events if e.event_type == event_type]


# -----------------------------------------------------------------------------
# Pytest Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def error_store() -> ValidationErrors:
    """Create a fresh empty error store."""
    return {}


@pytest.fixture
def state(error_store: ValidationErrors) -> ValidationState:
    """Create a ValidationState bound to the error_store fixture."""
    return ValidationState(error_store)


@pytest.fixture
def signup_validator() -> Validator[SignupForm]:
    """Create a Validator running validate_signup."""
    return Validator(validate_signup, name="signup")


@pytest.fixture
def recording_observer() -> RecordingObserver:
    """Create a RecordingObserver instance."""
    return RecordingObserver()
