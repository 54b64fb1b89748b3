"""
symfunc: symbolic functions of named variables, evaluated by tree reduction
"""

from __future__ import annotations

from symfunc._version import version as __version__
from symfunc.bindings import Bindings
from symfunc.exceptions import (
    ArgumentCountError,
    DeclarationError,
    DivisionByZeroError,
    ExpressionEvaluationError,
    NoSuchVariableError,
    SymFuncException,
    UnboundVariableError,
)
from symfunc.function import Function
from symfunc.operations import Operation
from symfunc.terms import Calculation, FunctionTerm, ValueTerm, Variable
from symfunc.values import CalculationValue, LiteralValue, Value

__all__ = [
    "ArgumentCountError",
    "Bindings",
    "Calculation",
    "CalculationValue",
    "DeclarationError",
    "DivisionByZeroError",
    "ExpressionEvaluationError",
    "Function",
    "FunctionTerm",
    "LiteralValue",
    "NoSuchVariableError",
    "Operation",
    "SymFuncException",
    "UnboundVariableError",
    "Value",
    "ValueTerm",
    "Variable",
    "__version__",
]
