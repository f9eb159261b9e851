from __future__ import annotations

from math import gcd

from ..logging_config import get_logger
from ..types import Equation
from ..types import FiniteSet
from ..types import Hyperbolic
from ..types import Linear
from ..types import MalformedShapeInput
from ..types import NoSolutions
from ..types import Solution
from ..types import UnsupportedCase
from ..utils.numeric import exact_quotient
from ..utils.numeric import integer_sqrt
from ..utils.numeric import is_perfect_square
from ..utils.numeric import signed_divisors
from .classify import coerce_shape
from .linear import solve_linear
from .merge import collect_pairs
from .merge import merge_solutions

logger = get_logger("solver.hyperbolic")


def _factor_lines(a: int, b: int, c: int, k: int) -> tuple[Linear, Linear]:
    # 4a(ax^2 + bxy + cy^2) = (2ax + (b+k)y)(2ax + (b-k)y) with k^2 = b^2 - 4ac
    if a == 0:
        return (Linear(0, 1, 0), Linear(b, c, 0))
    return (Linear(2 * a, b + k, 0), Linear(2 * a, b - k, 0))


def _solve_factored(a: int, b: int, c: int, f: int, k: int) -> Solution:
    pairs = []
    if a == 0:
        # y * (b*x + c*y) = -f
        for y in signed_divisors(f):
            x = exact_quotient(-f // y - c * y, b)
            if x is not None:
                pairs.append((x, y))
        return collect_pairs(pairs)

    # u = 2ax + (b+k)y and v = 2ax + (b-k)y with u*v = -4af
    n = -4 * a * f
    for u in signed_divisors(n):
        v = n // u
        y = exact_quotient(u - v, 2 * k)
        if y is None:
            continue
        x = exact_quotient(u - (b + k) * y, 2 * a)
        if x is not None:
            pairs.append((x, y))
    return collect_pairs(pairs)


def solve_hyperbolic(equation: Equation) -> Solution:
    """Solve a*x^2 + b*x*y + c*y^2 + f = 0 with b^2 - 4ac > 0.

    Args:
        equation: A Hyperbolic equation, or a General one that specializes to it

    Returns:
        Two merged line families when f = 0 and the form factors, the
        single point (0, 0) when f = 0 and it does not, and the finite set
        found by divisor enumeration when f != 0 and the form factors.

    Raises:
        UnsupportedCase: f != 0, b^2 - 4ac is not a perfect square and the
            equation is not ruled out by the content of the form.
    """
    eq = coerce_shape(equation, Hyperbolic)
    a, b, c, f = eq.a, eq.b, eq.c, eq.f
    disc = eq.discriminant
    if disc <= 0:
        raise MalformedShapeInput(
            f"Hyperbolic equation requires b^2 - 4ac > 0, got {disc}: {eq}"
        )

    square = is_perfect_square(disc)
    if f == 0:
        if not square:
            return FiniteSet(((0, 0),))
        first, second = _factor_lines(a, b, c, integer_sqrt(disc))
        logger.debug(f"{eq}: factors into {first} and {second}")
        return merge_solutions(solve_linear(first), solve_linear(second))

    if square:
        return _solve_factored(a, b, c, f, integer_sqrt(disc))

    content = gcd(gcd(a, b), c)
    if f % content != 0:
        logger.debug(f"{eq}: content {content} does not divide {f}")
        return NoSolutions()
    raise UnsupportedCase(
        f"No method for {eq}: b^2 - 4ac = {disc} is not a perfect square and f != 0"
    )
