from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import numpy as np
import numpy.typing as npt
import sympy as sp

from symfunc.exceptions import ExpressionEvaluationError, annotate_side
from symfunc.function import Function
from symfunc.terms import Calculation, FunctionTerm
from symfunc.values import combine_sympy

log = logging.getLogger(__name__)


def analyze_sympy_expr(sympy_expr: sp.Expr) -> dict[str, Any]:
    """
    Analyzes a SymPy expression and logs its free variables and structure
    for debugging.

    Args:
        sympy_expr: The SymPy expression to analyze.

    Returns:
        Dictionary containing analysis results with keys:
        - 'expression': The original expression
        - 'independent_vars': Set of independent variables (symbols)
        - 'simplified': The expression after SymPy simplification
    """
    independent_vars = sympy_expr.free_symbols
    simplified = sp.simplify(sympy_expr)

    log.debug("Expression: %s", sympy_expr)
    log.debug("Independent Variables: %s", independent_vars)
    log.debug("Expression Structure:\n%s", sp.pretty(sympy_expr))

    return {
        "expression": sympy_expr,
        "independent_vars": independent_vars,
        "simplified": simplified,
    }


def _folded_sympy(term: FunctionTerm) -> sp.Expr:
    # closed subterms are solved up front so they fail the same way solve_for does
    if not term.variables():
        return sp.Float(term.solve({}))
    if isinstance(term, Calculation):
        with annotate_side("left"):
            left = _folded_sympy(term.left)
        with annotate_side("right"):
            right = _folded_sympy(term.right)
        return combine_sympy(term.operation, left, right)
    return term.to_sympy()


def function_to_numpy(
    function: Function,
) -> Callable[..., npt.NDArray[np.float64]]:
    """
    Converts a function into a vectorised NumPy callable using lambdify.

    The callable takes one array-like per declared argument, in declared
    order, and broadcasts them. Subterms without variables are evaluated
    once, here, so a literal division by zero in the body raises
    :class:`~symfunc.exceptions.DivisionByZeroError` with its side path.
    The remaining tree is exported without simplification, so ``x / x`` or
    ``x - x`` keep their IEEE-754 value at singular points. Unlike
    :meth:`Function.solve_for`, a division by a zero argument value is not
    trapped and yields ``inf`` or ``nan``.

    Args:
        function: The function to convert.

    Returns:
        Callable evaluating the function body element-wise.

    Raises:
        ExpressionEvaluationError: If a closed subterm fails to evaluate or
            the expression cannot be converted.
    """
    sympy_expr = _folded_sympy(function.term)
    try:
        analyze_sympy_expr(sympy_expr)
        symbols = [sp.Symbol(name) for name in function.arguments]
        numpy_func = sp.lambdify(symbols, sympy_expr, modules="numpy")
    except Exception as exc:
        msg = f"Failed to convert {function} to NumPy. {exc}"
        raise ExpressionEvaluationError(msg) from exc

    def evaluate(*values: npt.ArrayLike) -> npt.NDArray[np.float64]:
        arrays = [np.asarray(value, dtype=np.float64) for value in values]
        with np.errstate(all="ignore"):
            result = numpy_func(*arrays)
        shape = np.broadcast_shapes(*(array.shape for array in arrays))
        return np.broadcast_to(np.asarray(result, dtype=np.float64), shape)

    return evaluate
