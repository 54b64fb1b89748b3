"""
Exception classes for symfunc.

Custom exception hierarchy for better error handling and debugging.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Literal

log = logging.getLogger(__name__)

Side = Literal["left", "right"]


class SymFuncException(Exception):
    """
    Base exception class for all symfunc-related errors.

    This serves as the root exception that all other symfunc exceptions inherit from,
    allowing users to catch all symfunc-specific errors with a single except clause.
    """


class DeclarationError(SymFuncException):
    """
    Exception raised when a function body is assembled incorrectly.

    This typically occurs when a term references a variable that is not one
    of the function's declared arguments.
    """


class NoSuchVariableError(DeclarationError):
    """Raised when a variable name is not a declared argument of the function."""

    def __init__(self, variable: str) -> None:
        super().__init__(f"The variable {variable} does not exist for this function.")
        self.variable = variable


class ExpressionEvaluationError(SymFuncException):
    """
    Exception raised when an expression tree cannot be evaluated.

    This typically occurs when:
    - A variable is missing from the bindings supplied for evaluation
    - The expression results in mathematical errors (division by zero)
    - Positional arguments do not match the declared arguments in strict mode

    While the error propagates out of nested calculations, every enclosing
    calculation records which of its sides failed. ``sides`` holds those
    records innermost first; ``path`` gives them outermost first.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.sides: list[Side] = []

    def add_side(self, side: Side) -> None:
        """Record that the error came from the ``side`` operand of a calculation."""
        self.sides.append(side)

    @property
    def path(self) -> tuple[Side, ...]:
        """Sides from the root of the tree down to the failing node."""
        return tuple(reversed(self.sides))

    def __str__(self) -> str:
        message = super().__str__()
        if not self.sides:
            return message
        return f"{message} (at {'.'.join(self.path)})"


class DivisionByZeroError(ExpressionEvaluationError):
    """Raised when the right operand of a division is exactly zero."""

    def __init__(self) -> None:
        super().__init__("Cannot divide by zero!")


class UnboundVariableError(ExpressionEvaluationError):
    """Raised when a variable has no value in the bindings used for evaluation."""

    def __init__(self, variable: str) -> None:
        super().__init__(f"The variable {variable} has no bound value.")
        self.variable = variable


class ArgumentCountError(ExpressionEvaluationError):
    """Raised when strict positional binding receives the wrong number of values."""

    def __init__(self, expected: int, received: int) -> None:
        super().__init__(
            f"Expected {expected} positional value(s) but received {received}."
        )
        self.expected = expected
        self.received = received


@contextmanager
def annotate_side(side: Side) -> Iterator[None]:
    """
    Record the operand side on evaluation errors raised inside the block.

    The exception is re-raised unchanged apart from the extra side record, so
    callers can still catch the specific error type.

    Example:

    >>> from symfunc.exceptions import DivisionByZeroError, annotate_side
    >>> try:
    ...     with annotate_side("right"):
    ...         raise DivisionByZeroError
    ... except DivisionByZeroError as exc:
    ...     print(exc)
    Cannot divide by zero! (at right)
    """
    try:
        yield
    except ExpressionEvaluationError as exc:
        exc.add_side(side)
        log.debug("Failed to solve the %s hand side: %s", side, exc)
        raise
