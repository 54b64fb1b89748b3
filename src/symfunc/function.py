"""
Symbolic functions.

Provides the top-level :class:`Function`: an ordered list of declared
arguments and the term that forms the function body.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

import sympy as sp
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
)

from symfunc.bindings import Bindings
from symfunc.exceptions import NoSuchVariableError
from symfunc.terms import FunctionTerm, ValueTerm, Variable, as_term
from symfunc.values import LiteralValue

log = logging.getLogger(__name__)


def _placeholder() -> ValueTerm:
    return ValueTerm(value=LiteralValue(value=0.0))


def _check_declared(term: FunctionTerm, arguments: tuple[str, ...]) -> None:
    for name in sorted(term.variables()):
        if name not in arguments:
            raise NoSuchVariableError(name)


class Function(BaseModel):
    """
    A named function of declared arguments.

    A function is built in two steps. It is first created with its arguments
    and a placeholder body of zero; the body is then assigned using terms
    obtained from :meth:`variable`, which rejects names that were not
    declared. Assigning a body that references an undeclared variable is
    rejected as well, as is reassigning ``arguments`` so that the current body
    references a name that is no longer declared.

    Examples:
        Building ``f(x) = x^2``::

            f = Function.of("x")
            f.term = Calculation(left=f.variable("x"), right=2, operation="power")
            f.solve_args_in_order([3.0])  # 9.0
            f.solve_for({"x": -2.0})      # 4.0

    Attributes:
        name (str): Name of the function, used when rendering it.
        arguments (tuple[str, ...]): Declared argument names. The order
            defines positional binding.
        term (FunctionTerm): The function body.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = "f"
    arguments: tuple[str, ...] = ()
    term: FunctionTerm = Field(default_factory=_placeholder)

    @classmethod
    def of(cls, *arguments: str, name: str = "f") -> Function:
        """Create a function with the given arguments and a placeholder body."""
        return cls(name=name, arguments=arguments)

    @field_validator("arguments")
    @classmethod
    def _check_arguments(
        cls, arguments: tuple[str, ...], info: ValidationInfo
    ) -> tuple[str, ...]:
        """Ensure arguments are distinct and still cover the current body."""
        duplicates = sorted({arg for arg in arguments if arguments.count(arg) > 1})
        if duplicates:
            msg = f"Arguments must be distinct, got duplicates: {', '.join(duplicates)}"
            raise ValueError(msg)
        # only present when reassigning arguments on an existing function
        term = info.data.get("term")
        if term is not None:
            _check_declared(term, arguments)
        return arguments

    @field_validator("term", mode="before")
    @classmethod
    def _wrap_numbers(cls, value: Any) -> Any:
        return as_term(value)

    @field_validator("term")
    @classmethod
    def _check_body(cls, term: FunctionTerm, info: ValidationInfo) -> FunctionTerm:
        """Ensure the body only references declared arguments."""
        arguments = info.data.get("arguments")
        if arguments is not None:
            _check_declared(term, arguments)
        return term

    @property
    def parameters(self) -> set[str]:
        """Set of argument names the body actually references."""
        return self.term.variables()

    def variable(self, name: str) -> Variable:
        """
        Create a reference to one of the declared arguments.

        Args:
            name: The argument name.

        Returns:
            Variable: A term ready to be used in a calculation.

        Raises:
            NoSuchVariableError: If ``name`` is not a declared argument.
        """
        if name not in self.arguments:
            raise NoSuchVariableError(name)
        return Variable(name=name)

    def solve_for(self, bindings: Mapping[str, float]) -> float:
        """
        Evaluate the body with values bound by name.

        Every argument referenced by the body needs a value; unused arguments
        may be left out.

        Args:
            bindings: Mapping of argument names to values.

        Returns:
            float: The value of the function.

        Raises:
            ExpressionEvaluationError: If evaluation fails.
        """
        if not isinstance(bindings, Bindings):
            bindings = Bindings(bindings)
        log.debug("Solving %s for %s", self, bindings)
        return self.term.solve(bindings)

    def solve_args_in_order(
        self, values: Iterable[float], *, strict: bool = False
    ) -> float:
        """
        Evaluate the body with values bound by position.

        Values are paired with the declared arguments in order. Surplus values
        and arguments left without a value are dropped, unless ``strict`` is
        set.

        Args:
            values: Values in the order of the declared arguments.
            strict: Raise instead of truncating when the number of values
                differs from the number of arguments.

        Returns:
            float: The value of the function.

        Raises:
            ArgumentCountError: If ``strict`` and the lengths differ.
            ExpressionEvaluationError: If evaluation fails.
        """
        bindings = Bindings.from_arguments(self.arguments, values, strict=strict)
        return self.solve_for(bindings)

    def __call__(self, *values: float) -> float:
        """Shorthand for :meth:`solve_args_in_order`."""
        return self.solve_args_in_order(values)

    def to_sympy(self) -> sp.Expr:
        """Symbolic form of the body."""
        return self.term.to_sympy()

    def __str__(self) -> str:
        return f"{self.name}({', '.join(self.arguments)}) = {self.term}"
