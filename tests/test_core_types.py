"""Tests for core/types.py and core/exceptions.py modules.

Covers:
- PropertyData numeric coercion and delta
- DispatchResult constructors and predicates
- Exception context rendering
"""

import pytest

from motionkit.core.exceptions import (
    AdapterError,
    AdapterNotFoundError,
    GenerationError,
    MotionkitError,
    RetrievalError,
)
from motionkit.core.types import DispatchResult, Outcome, PropertyData


class TestPropertyData:
    """Tests for PropertyData."""

    def test_defaults(self):
        prop = PropertyData(path="alpha")

        assert prop.target is None
        assert prop.target_object is None
        assert prop.current == 0.0
        assert prop.parent_path is None
        assert prop.replace_parent is False

    def test_numeric_fields_are_floats(self):
        prop = PropertyData(path="x", current=1, start=2, end=5)

        assert isinstance(prop.current, float)
        assert isinstance(prop.start, float)
        assert isinstance(prop.end, float)

    def test_delta(self):
        assert PropertyData(path="x", start=2, end=5).delta == 3.0


class TestDispatchResult:
    """Tests for DispatchResult."""

    def test_handled(self):
        result = DispatchResult.handled(1.5, "numeric")

        assert result.outcome is Outcome.HANDLED
        assert result.is_handled
        assert result.has_value
        assert result.adapter_name == "numeric"

    def test_handled_without_value(self):
        result = DispatchResult.handled(None)

        assert result.is_handled
        assert not result.has_value

    def test_not_handled(self):
        result = DispatchResult.not_handled()

        assert result.outcome is Outcome.NOT_HANDLED
        assert not result.is_handled
        assert result.value is None

    def test_failed(self):
        error = GenerationError("nope")
        result = DispatchResult.failed(error, "struct")

        assert result.outcome is Outcome.FAILED
        assert result.error is error
        assert not result.is_handled
        assert not result.has_value


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_str_includes_context(self):
        error = MotionkitError("Something failed", {"path": "a.b"})

        assert str(error) == "Something failed (path=a.b)"

    def test_str_without_context(self):
        assert str(MotionkitError("Plain")) == "Plain"

    def test_str_names_raising_adapter(self):
        error = MotionkitError("No field", {"path": "a"}, raised_by="struct")

        assert error.raised_by == "struct"
        assert str(error) == "[struct] No field (path=a)"

    def test_raised_by_defaults_to_none(self):
        assert RetrievalError("no").raised_by is None

    def test_adapter_not_found(self):
        error = AdapterNotFoundError("vector", ["numeric", "color"])

        assert isinstance(error, AdapterError)
        assert error.adapter_name == "vector"
        assert error.available == ["numeric", "color"]
        assert "vector" in str(error)

    def test_generation_error_is_adapter_error(self):
        with pytest.raises(AdapterError):
            raise GenerationError("cannot generate")
