"""
Closed numeric expressions.

Provides the literal and calculation nodes of expressions that contain no
variable references and can therefore be evaluated without any bindings.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Literal

import sympy as sp
from pydantic import BaseModel, ConfigDict, Field, field_validator

from symfunc.exceptions import annotate_side
from symfunc.operations import Operation

log = logging.getLogger(__name__)


class LiteralValue(BaseModel):
    """A numeric literal."""

    model_config = ConfigDict(frozen=True)

    type: Literal["literal"] = Field(default="literal", repr=False)
    value: float

    def get(self) -> float:
        """Return the literal."""
        return self.value

    def to_sympy(self) -> sp.Expr:
        """Symbolic form of the literal, as an integer when it is integral."""
        if self.value.is_integer():
            return sp.Integer(int(self.value))
        return sp.Float(self.value)

    def __str__(self) -> str:
        return format_number(self.value)


class CalculationValue(BaseModel):
    """
    A binary calculation over two closed values.

    Plain numbers given for either side are wrapped in :class:`LiteralValue`.

    Examples:
        >>> CalculationValue(left=6, right=4, operation="divide").get()
        1.5
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["calculation"] = Field(default="calculation", repr=False)
    left: Value
    right: Value
    operation: Operation

    @field_validator("left", "right", mode="before")
    @classmethod
    def _wrap_numbers(cls, value: Any) -> Any:
        return as_value(value)

    def get(self) -> float:
        """
        Evaluate both sides, left first, and combine them.

        Returns:
            float: The value of the calculation.

        Raises:
            ExpressionEvaluationError: If either side or the operation fails.
                The failing side is recorded on the error.
        """
        with annotate_side("left"):
            left = self.left.get()
        with annotate_side("right"):
            right = self.right.get()
        result = self.operation.apply(left, right)
        log.debug("%s %s %s = %s", left, self.operation.symbol, right, result)
        return result

    def to_sympy(self) -> sp.Expr:
        """Symbolic form of the calculation."""
        return combine_sympy(
            self.operation, self.left.to_sympy(), self.right.to_sympy()
        )

    def __str__(self) -> str:
        return f"({self.left} {self.operation.symbol} {self.right})"


# Type alias for all closed values using discriminated union
Value = Annotated[LiteralValue | CalculationValue, Field(discriminator="type")]

CalculationValue.model_rebuild()


def as_value(value: Any) -> Any:
    """
    Wrap plain numbers in a :class:`LiteralValue`.

    Anything else is returned untouched for pydantic to validate.
    """
    if isinstance(value, int | float) and not isinstance(value, bool):
        return LiteralValue(value=value)
    return value


def format_number(value: float) -> str:
    """
    Render a float, dropping the fractional part of integral values.

    >>> format_number(9.0)
    '9'
    >>> format_number(0.5)
    '0.5'
    """
    if value.is_integer():
        return str(int(value))
    return repr(value)


# Nodes are built unevaluated so SymPy does not cancel terms such as ``x / x``
# or ``x - x`` whose value differs from the tree's at singular points.
_SYMPY_COMBINE = {
    Operation.ADD: lambda a, b: sp.Add(a, b, evaluate=False),
    Operation.SUBTRACT: lambda a, b: sp.Add(
        a, sp.Mul(sp.Integer(-1), b, evaluate=False), evaluate=False
    ),
    Operation.MULTIPLY: lambda a, b: sp.Mul(a, b, evaluate=False),
    Operation.DIVIDE: lambda a, b: sp.Mul(
        a, sp.Pow(b, sp.Integer(-1), evaluate=False), evaluate=False
    ),
    Operation.POWER: lambda a, b: sp.Pow(a, b, evaluate=False),
}


def combine_sympy(operation: Operation, left: sp.Expr, right: sp.Expr) -> sp.Expr:
    """
    Combine two SymPy expressions with an operation, without simplifying.

    Args:
        operation: The operation to apply.
        left: Symbolic left hand side.
        right: Symbolic right hand side.

    Returns:
        Unevaluated SymPy expression for ``left <operation> right``.
    """
    return _SYMPY_COMBINE[operation](left, right)
