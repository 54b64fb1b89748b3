"""
Binary arithmetic operations.

Defines the closed set of operators that calculations in an expression tree
can combine their operands with.
"""

from __future__ import annotations

from enum import Enum

import numpy as np

from symfunc.exceptions import DivisionByZeroError


class Operation(str, Enum):
    """
    Enumeration of the binary arithmetic operators.

    Arithmetic follows IEEE-754 double precision: overflow produces ``inf`` and
    ill-defined results (such as a negative base with a fractional exponent)
    produce ``nan``. The only trapped case is division by an exact zero.

    Examples:
        >>> Operation.POWER.apply(3.0, 2.0)
        9.0
        >>> Operation("divide").apply(1.0, 4.0)
        0.25
    """

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    POWER = "power"

    @property
    def symbol(self) -> str:
        """Infix symbol used when rendering a calculation."""
        return _SYMBOLS[self]

    def apply(self, left: float, right: float) -> float:
        """
        Combine two operands.

        Args:
            left: The left hand operand.
            right: The right hand operand.

        Returns:
            float: The result of the operation.

        Raises:
            DivisionByZeroError: If the operation is DIVIDE and ``right`` is zero.
        """
        lhs = np.float64(left)
        rhs = np.float64(right)
        with np.errstate(all="ignore"):
            match self:
                case Operation.ADD:
                    result = lhs + rhs
                case Operation.SUBTRACT:
                    result = lhs - rhs
                case Operation.MULTIPLY:
                    result = lhs * rhs
                case Operation.DIVIDE:
                    if rhs == 0:
                        raise DivisionByZeroError
                    result = lhs / rhs
                case Operation.POWER:
                    result = np.power(lhs, rhs)
        return float(result)

    def __str__(self) -> str:
        return self.symbol


_SYMBOLS = {
    Operation.ADD: "+",
    Operation.SUBTRACT: "-",
    Operation.MULTIPLY: "*",
    Operation.DIVIDE: "/",
    Operation.POWER: "^",
}
