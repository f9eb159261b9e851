from __future__ import annotations

from functools import reduce

from ..logging_config import get_logger
from ..types import Equation
from ..types import MalformedShapeInput
from ..types import NoSolutions
from ..types import SimpleHyperbolic
from ..types import Solution
from ..utils.numeric import exact_quotient
from ..utils.numeric import signed_divisors
from .classify import coerce_shape
from .linear import line_family
from .merge import collect_pairs
from .merge import merge_solutions

logger = get_logger("solver.simple_hyperbolic")


def solve_simple_hyperbolic(equation: Equation) -> Solution:
    """Solve b*x*y + d*x + e*y + f = 0 with b != 0.

    Multiplying by b gives (b*x + e) * (b*y + d) = d*e - b*f, so the
    solutions come from the divisor pairs of D = d*e - b*f. When D = 0 one
    of the factors vanishes and every solution lies on a vertical or
    horizontal line.
    """
    eq = coerce_shape(equation, SimpleHyperbolic)
    b, d, e, f = eq.b, eq.d, eq.e, eq.f
    if b == 0:
        raise MalformedShapeInput(f"Simple hyperbolic equation requires b != 0: {eq}")

    D = d * e - b * f
    if D == 0:
        lines = []
        if e % b == 0:
            lines.append(line_family(-e // b, 0, 0, 1))
        if d % b == 0:
            lines.append(line_family(0, -d // b, 1, 0))
        if not lines:
            logger.debug(f"{eq}: D = 0 but b divides neither d nor e")
            return NoSolutions()
        return reduce(merge_solutions, lines)

    pairs = []
    for d_i in signed_divisors(D):
        x = exact_quotient(d_i - e, b)
        y = exact_quotient(D // d_i - d, b)
        if x is not None and y is not None:
            pairs.append((x, y))
    logger.debug(f"{eq}: {len(pairs)} divisor pairs of D = {D} are integral")
    return collect_pairs(pairs)
