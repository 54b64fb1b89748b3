"""
Unit tests for the exceptions module.
"""

from __future__ import annotations

import pytest

from symfunc.exceptions import (
    ArgumentCountError,
    DeclarationError,
    DivisionByZeroError,
    ExpressionEvaluationError,
    NoSuchVariableError,
    SymFuncException,
    UnboundVariableError,
    annotate_side,
)


@pytest.mark.parametrize(
    ("exc", "parent"),
    [
        pytest.param(NoSuchVariableError("x"), DeclarationError, id="no_such_variable"),
        pytest.param(DivisionByZeroError(), ExpressionEvaluationError, id="division"),
        pytest.param(UnboundVariableError("x"), ExpressionEvaluationError, id="unbound"),
        pytest.param(ArgumentCountError(1, 2), ExpressionEvaluationError, id="count"),
    ],
)
def test_hierarchy(exc, parent):
    """Test every error derives from its category and the package root."""
    assert isinstance(exc, parent)
    assert isinstance(exc, SymFuncException)


class TestAnnotateSide:
    """Test the annotate_side context manager."""

    def test_records_sides_outward(self):
        """Test sides accumulate innermost first."""
        with pytest.raises(DivisionByZeroError) as excinfo:  # noqa: PT012
            with annotate_side("left"):
                with annotate_side("right"):
                    raise DivisionByZeroError

        assert excinfo.value.sides == ["right", "left"]
        assert excinfo.value.path == ("left", "right")
        assert str(excinfo.value) == "Cannot divide by zero! (at left.right)"

    def test_other_errors_untouched(self):
        """Test unrelated exceptions pass through without annotation."""
        with pytest.raises(KeyError), annotate_side("left"):
            raise KeyError("x")

    def test_no_error(self):
        """Test the block runs normally when nothing fails."""
        with annotate_side("right"):
            result = 1 + 1
        assert result == 2
