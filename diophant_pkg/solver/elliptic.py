from __future__ import annotations

from ..logging_config import get_logger
from ..types import Elliptic
from ..types import Equation
from ..types import MalformedShapeInput
from ..types import NoSolutions
from ..types import Solution
from ..utils.numeric import exact_quotient
from ..utils.numeric import integer_sqrt
from ..utils.numeric import is_perfect_square
from .classify import coerce_shape
from .merge import collect_pairs

logger = get_logger("solver.elliptic")


def x_search_range(a: int, b: int, c: int, d: int, e: int, f: int) -> tuple[int, int] | None:
    """Integer range of x for which some real y satisfies the equation.

    For fixed x the equation is quadratic in y with discriminant
    A*x^2 + B*x + C, where A = b^2 - 4ac < 0. Real y exist only between the
    roots of that quadratic. The roots are bracketed with integer square
    roots padded by one, so the range may be slightly wide but never misses
    a solution.

    Returns:
        (low, high) inclusive, or None when no real x exists
    """
    A = b * b - 4 * a * c
    B = 2 * b * e - 4 * c * d
    C = e * e - 4 * c * f
    outer = B * B - 4 * A * C
    if outer < 0:
        return None
    s = integer_sqrt(outer) + 1
    span = -2 * A
    low = (B - s) // span
    high = -(-(B + s) // span)
    return (low, high)


def solve_elliptic(equation: Equation) -> Solution:
    """Solve a*x^2 + b*x*y + c*y^2 + d*x + e*y + f = 0 with b^2 - 4ac < 0.

    The solution set is finite: every x in the bounded search range is
    tried and y is recovered exactly from the quadratic formula.
    """
    eq = coerce_shape(equation, Elliptic)
    a, b, c, d, e, f = eq.coefficients()
    if eq.discriminant >= 0:
        raise MalformedShapeInput(
            f"Elliptic equation requires b^2 - 4ac < 0, got {eq.discriminant}: {eq}"
        )

    bounds = x_search_range(a, b, c, d, e, f)
    if bounds is None:
        logger.debug(f"{eq}: no real points")
        return NoSolutions()
    low, high = bounds
    logger.debug(f"{eq}: searching x in [{low}, {high}]")

    pairs = []
    for x in range(low, high + 1):
        p = b * x + e
        delta = p * p - 4 * c * (a * x * x + d * x + f)
        if not is_perfect_square(delta):
            continue
        r = integer_sqrt(delta)
        for root in (r, -r):
            y = exact_quotient(-p + root, 2 * c)
            if y is not None:
                pairs.append((x, y))
    return collect_pairs(pairs)
