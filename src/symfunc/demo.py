"""
Demonstration of symfunc: tabulates ``f(x) = x^2`` over a fixed range.
"""

from __future__ import annotations

import logging

from symfunc import logging as symfunc_logging
from symfunc.function import Function
from symfunc.operations import Operation
from symfunc.terms import Calculation
from symfunc.values import format_number

log = logging.getLogger(__name__)

START = 0
STOP = 10


def square() -> Function:
    """Build ``f(x) = x^2``."""
    f = Function.of("x")
    f.term = Calculation(
        left=f.variable("x"),
        right=2,
        operation=Operation.POWER,
    )
    return f


def main() -> None:
    """Print ``f(x)`` for every integer ``x`` from START to STOP inclusive."""
    symfunc_logging.setup()
    f = square()
    log.debug("Tabulating %s", f)
    for x in map(float, range(START, STOP + 1)):
        print(f"{f.name}({format_number(x)}) = {format_number(f(x))}")


if __name__ == "__main__":
    main()
