"""
Unit tests for the bindings module.
"""

from __future__ import annotations

import pytest

from symfunc.bindings import Bindings
from symfunc.exceptions import ArgumentCountError, UnboundVariableError


class TestBindings:
    """Test the Bindings mapping."""

    def test_mapping_interface(self):
        """Test dictionary-like access."""
        bindings = Bindings({"x": 1, "y": 2.5})
        assert bindings["x"] == 1.0
        assert isinstance(bindings["x"], float)
        assert "y" in bindings
        assert "z" not in bindings
        assert len(bindings) == 2
        assert list(bindings) == ["x", "y"]
        assert dict(bindings.items()) == {"x": 1.0, "y": 2.5}
        assert bindings.get("z") is None

    def test_empty(self):
        """Test bindings with no data."""
        assert len(Bindings()) == 0

    def test_missing_variable(self):
        """Test missing variables raise UnboundVariableError."""
        with pytest.raises(UnboundVariableError, match="The variable z has no bound value"):
            Bindings({"x": 1.0})["z"]


class TestFromArguments:
    """Test positional binding."""

    def test_equal_lengths(self):
        """Test arguments and values pair up in order."""
        bindings = Bindings.from_arguments(["x", "y"], [1.0, 2.0])
        assert dict(bindings) == {"x": 1.0, "y": 2.0}

    @pytest.mark.parametrize(
        ("arguments", "values", "expected"),
        [
            pytest.param(["x", "y", "z"], [1.0], {"x": 1.0}, id="too_few_values"),
            pytest.param(["x"], [1.0, 2.0, 3.0], {"x": 1.0}, id="too_many_values"),
            pytest.param(["x"], [], {}, id="no_values"),
        ],
    )
    def test_truncation(self, arguments, values, expected):
        """Test pairs are truncated to the shorter sequence."""
        assert dict(Bindings.from_arguments(arguments, values)) == expected

    def test_accepts_iterators(self):
        """Test values may be any iterable."""
        bindings = Bindings.from_arguments(["a", "b"], iter(range(2)))
        assert dict(bindings) == {"a": 0.0, "b": 1.0}

    @pytest.mark.parametrize(
        "values",
        [
            pytest.param([1.0], id="too_few_values"),
            pytest.param([1.0, 2.0, 3.0], id="too_many_values"),
        ],
    )
    def test_strict(self, values):
        """Test strict binding rejects mismatched lengths."""
        with pytest.raises(ArgumentCountError, match="Expected 2") as excinfo:
            Bindings.from_arguments(["x", "y"], values, strict=True)
        assert excinfo.value.expected == 2
        assert excinfo.value.received == len(values)
