"""
Function terms.

Provides the nodes of general expression trees: free variable references,
wrapped closed values, and binary calculations over other terms. Terms are
solved against bindings that assign a value to every variable they reference.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Annotated, Any, Literal

import sympy as sp
from pydantic import BaseModel, ConfigDict, Field, field_validator

from symfunc.bindings import Bindings
from symfunc.exceptions import annotate_side
from symfunc.operations import Operation
from symfunc.values import (
    CalculationValue,
    LiteralValue,
    Value,
    as_value,
    combine_sympy,
)

log = logging.getLogger(__name__)


def _as_bindings(bindings: Mapping[str, float]) -> Bindings:
    if isinstance(bindings, Bindings):
        return bindings
    return Bindings(bindings)


class Variable(BaseModel):
    """
    A free reference to a function argument, resolved when the term is solved.

    Variables are normally obtained through
    :meth:`symfunc.function.Function.variable`, which checks that the name is
    a declared argument.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["variable"] = Field(default="variable", repr=False)
    name: str

    def solve(self, bindings: Mapping[str, float]) -> float:
        """
        Look up the value bound to this variable.

        Raises:
            UnboundVariableError: If ``bindings`` has no value for the variable.
        """
        return _as_bindings(bindings)[self.name]

    def variables(self) -> set[str]:
        """Names of the variables referenced by the term."""
        return {self.name}

    def to_sympy(self) -> sp.Expr:
        """Symbolic form of the term."""
        return sp.Symbol(self.name)

    def __str__(self) -> str:
        return self.name


class ValueTerm(BaseModel):
    """A closed value used as a term."""

    model_config = ConfigDict(frozen=True)

    type: Literal["value"] = Field(default="value", repr=False)
    value: Value

    @field_validator("value", mode="before")
    @classmethod
    def _wrap_numbers(cls, value: Any) -> Any:
        return as_value(value)

    def solve(self, _: Mapping[str, float]) -> float:
        """Evaluate the wrapped value; bindings are not consulted."""
        return self.value.get()

    def variables(self) -> set[str]:
        """Names of the variables referenced by the term."""
        return set()

    def to_sympy(self) -> sp.Expr:
        """Symbolic form of the term."""
        return self.value.to_sympy()

    def __str__(self) -> str:
        return str(self.value)


class Calculation(BaseModel):
    """
    A binary calculation over two terms.

    Plain numbers given for either side are wrapped in a :class:`ValueTerm`.

    Examples:
        >>> term = Calculation(left=Variable(name="x"), right=2, operation="power")
        >>> term.solve({"x": 3.0})
        9.0
        >>> str(term)
        '(x ^ 2)'
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["calculation"] = Field(default="calculation", repr=False)
    left: FunctionTerm
    right: FunctionTerm
    operation: Operation

    @field_validator("left", "right", mode="before")
    @classmethod
    def _wrap_numbers(cls, value: Any) -> Any:
        return as_term(value)

    def solve(self, bindings: Mapping[str, float]) -> float:
        """
        Solve both sides, left first, and combine them.

        Args:
            bindings: Mapping of variable names to values.

        Returns:
            float: The value of the calculation.

        Raises:
            ExpressionEvaluationError: If either side or the operation fails.
                The failing side is recorded on the error.
        """
        bindings = _as_bindings(bindings)
        with annotate_side("left"):
            left = self.left.solve(bindings)
        with annotate_side("right"):
            right = self.right.solve(bindings)
        result = self.operation.apply(left, right)
        log.debug("%s %s %s = %s", left, self.operation.symbol, right, result)
        return result

    def variables(self) -> set[str]:
        """Names of the variables referenced by the term."""
        return self.left.variables() | self.right.variables()

    def to_sympy(self) -> sp.Expr:
        """Symbolic form of the term."""
        return combine_sympy(
            self.operation, self.left.to_sympy(), self.right.to_sympy()
        )

    def __str__(self) -> str:
        return f"({self.left} {self.operation.symbol} {self.right})"


# Type alias for all term types using discriminated union
FunctionTerm = Annotated[
    Variable | ValueTerm | Calculation,
    Field(discriminator="type"),
]

Calculation.model_rebuild()


def as_term(value: Any) -> Any:
    """
    Wrap plain numbers and closed values in a :class:`ValueTerm`.

    Numbers become a literal first. Anything else is returned untouched for
    pydantic to validate.

    >>> as_term(2)
    ValueTerm(value=LiteralValue(value=2.0))
    >>> as_term(LiteralValue(value=0.5))
    ValueTerm(value=LiteralValue(value=0.5))
    """
    wrapped = as_value(value)
    if isinstance(wrapped, LiteralValue | CalculationValue):
        return ValueTerm(value=wrapped)
    return value
