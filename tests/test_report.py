"""Tests for ValidationReport."""

from __future__ import annotations

import json

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError

from field_validation import FieldError, ValidationReport

from .conftest import field_names, messages


class TestValidationReport:
    """Unit tests for ValidationReport."""

    def test_from_empty_store(self) -> None:
        """Test that an empty store gives a valid report."""
        report = ValidationReport.from_errors({})

        assert report.is_valid
        assert report.errors == {}
        assert report.error_count == 0
        assert report.validator == "validator"
        assert report.source is None

    def test_drops_empty_fields(self) -> None:
        """Test that fields without messages are left out."""
        report = ValidationReport.from_errors({"a": [], "b": ["bad"]}, validator="form")

        assert report.errors == {"b": ("bad",)}
        assert report.error_count == 1
        assert not report.is_valid

    def test_copies_messages(self) -> None:
        """Test that later store mutations do not leak into the report."""
        store = {"a": ["bad"]}
        report = ValidationReport.from_errors(store)

        store["a"].append("worse")
        store["b"] = ["new"]

        assert report.errors == {"a": ("bad",)}

    def test_frozen(self) -> None:
        """Test that report fields cannot be reassigned."""
        report = ValidationReport.from_errors({})

        with pytest.raises(ValidationError):
            report.is_valid = False  # type: ignore[misc]

    def test_messages_cannot_be_mutated(self) -> None:
        """Test that a report's per-field messages are read-only."""
        report = ValidationReport.from_errors({"a": ["x"]})

        with pytest.raises(AttributeError):
            report.errors["a"].append("y")  # type: ignore[attr-defined]

        assert report.errors == {"a": ("x",)}
        assert isinstance(report.errors["a"], tuple)

    def test_errors_for_returns_list_copy(self) -> None:
        """Test that errors_for hands out a list the report does not share."""
        report = ValidationReport.from_errors({"a": ["x"]})

        report.errors_for("a").append("y")

        assert report.errors_for("a") == ["x"]

    def test_errors_for(self) -> None:
        """Test per-field lookup with a missing field."""
        report = ValidationReport.from_errors({"a": ["bad"]})

        assert report.errors_for("a") == ["bad"]
        assert report.errors_for("missing") == []

    def test_flatten(self) -> None:
        """Test flattening into FieldError records."""
        report = ValidationReport.from_errors({"a": ["x", "y"]})

        assert report.flatten() == [FieldError("a", "x"), FieldError("a", "y")]

    def test_summary(self) -> None:
        """Test message counts per field."""
        report = ValidationReport.from_errors({"a": ["x", "y"], "b": ["z"], "c": []})

        assert report.summary() == {"a": 2, "b": 1}

    def test_json_round_trip(self) -> None:
        """Test that reports serialize to JSON and back."""
        report = ValidationReport.from_errors({"a": ["bad"]}, validator="form", source="req-1")

        payload = json.loads(report.model_dump_json())

        assert payload["validator"] == "form"
        assert payload["source"] == "req-1"
        assert payload["errors"] == {"a": ["bad"]}
        assert ValidationReport.model_validate(payload) == report

    def test_created_at_is_iso(self) -> None:
        """Test that created_at is an ISO timestamp."""
        from datetime import datetime

        report = ValidationReport.from_errors({})

        assert datetime.fromisoformat(report.created_at)


class TestValidationReportProperties:
    """Property-based tests for ValidationReport."""

    @given(store=st.dictionaries(field_names, st.lists(messages, max_size=4), max_size=6))
    @settings(max_examples=50)
    def test_counts_consistent(self, store: dict[str, list[str]]) -> None:
        """error_count, is_valid and errors agree with each other."""
        report = ValidationReport.from_errors(store)

        assert report.error_count == sum(len(m) for m in store.values())
        assert report.is_valid == (report.error_count == 0)
        assert all(report.errors.values())
