"""
Bindings for variable resolution.

Provides a read-only, dictionary-like view of the numeric values assigned to
the variables of a function for a single evaluation.
"""

from __future__ import annotations

from collections.abc import (
    ItemsView,
    Iterable,
    Iterator,
    KeysView,
    Mapping,
    Sequence,
    ValuesView,
)

from symfunc.exceptions import ArgumentCountError, UnboundVariableError


class Bindings(Mapping[str, float]):
    """
    Bindings of variable names to numeric values.

    Wraps a dictionary of variable names to floats. Looking up a name that has
    no value raises :class:`~symfunc.exceptions.UnboundVariableError` rather
    than :class:`KeyError`.
    """

    def __init__(self, data: Mapping[str, float] | None = None) -> None:
        """
        Initialize bindings with variable data.

        Args:
            data: Mapping of variable names to numeric values
        """
        self._data = {name: float(value) for name, value in (data or {}).items()}

    @classmethod
    def from_arguments(
        cls,
        arguments: Sequence[str],
        values: Iterable[float],
        *,
        strict: bool = False,
    ) -> Bindings:
        """
        Pair declared arguments with values by position.

        Pairs are truncated to the shorter of the two sequences unless
        ``strict`` is set.

        Args:
            arguments: Declared argument names, in order
            values: Values to assign, in the same order
            strict: Raise instead of truncating when the lengths differ

        Returns:
            Bindings: The positional assignment

        Raises:
            ArgumentCountError: If ``strict`` and the lengths differ
        """
        values = list(values)
        if strict and len(values) != len(arguments):
            raise ArgumentCountError(len(arguments), len(values))
        return cls(dict(zip(arguments, values, strict=False)))

    def __getitem__(self, key: str) -> float:
        """
        Get the value bound to a variable.

        Args:
            key: Variable name (str)

        Returns:
            float: The bound value
        """
        try:
            return self._data[key]
        except KeyError:
            raise UnboundVariableError(key) from None

    def __contains__(self, key: object) -> bool:
        """Check if variable name has a value."""
        return key in self._data

    def get(self, key: str, default: float | None = None) -> float | None:  # type: ignore[override]
        """Get the value bound to a variable, or ``default`` when it has none."""
        return self._data.get(key, default)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def keys(self) -> KeysView[str]:
        """Get variable names."""
        return self._data.keys()

    def values(self) -> ValuesView[float]:
        """Get bound values."""
        return self._data.values()

    def items(self) -> ItemsView[str, float]:
        """Get variable name-value pairs."""
        return self._data.items()
