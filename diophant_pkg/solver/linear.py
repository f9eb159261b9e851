from __future__ import annotations

from functools import partial
from itertools import count
from math import gcd
from typing import Iterator

from ..logging_config import get_logger
from ..types import PARAMETER
from ..types import AllIntegers
from ..types import Equation
from ..types import Linear
from ..types import NoSolutions
from ..types import Pair
from ..types import ParametrizedFamily
from ..types import Solution
from ..utils.numeric import extended_gcd
from .classify import coerce_shape

logger = get_logger("solver.linear")


def _line_points(x0: int, y0: int, dx: int, dy: int) -> Iterator[Pair]:
    yield (x0, y0)
    for t in count(1):
        yield (x0 + dx * t, y0 + dy * t)
        yield (x0 - dx * t, y0 - dy * t)


def line_family(x0: int, y0: int, dx: int, dy: int) -> ParametrizedFamily:
    """The lattice line (x0 + dx*t, y0 + dy*t), t = 0, 1, -1, 2, -2, ...

    (dx, dy) must not be (0, 0).
    """
    return ParametrizedFamily(
        partial(_line_points, x0, y0, dx, dy),
        ((x0 + dx * PARAMETER, y0 + dy * PARAMETER),),
    )


def solve_linear(equation: Equation) -> Solution:
    """Solve d*x + e*y + f = 0.

    Args:
        equation: A Linear equation, or a General one that specializes to it

    Returns:
        AllIntegers when d = e = f = 0, NoSolutions when gcd(d, e) does not
        divide f, otherwise the full parametrized family of solutions.
    """
    eq = coerce_shape(equation, Linear)
    d, e, f = eq.d, eq.e, eq.f

    # d = e = 0 never reaches extended_gcd
    if d == 0 and e == 0:
        return AllIntegers() if f == 0 else NoSolutions()

    g = gcd(d, e)
    if f % g != 0:
        logger.debug(f"{eq}: gcd({d}, {e}) = {g} does not divide {f}")
        return NoSolutions()

    u, v = extended_gcd(d, e)
    k = -(f // g)
    return line_family(k * u, k * v, e // g, -(d // g))
