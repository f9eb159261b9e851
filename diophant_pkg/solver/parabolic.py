from __future__ import annotations

from functools import partial
from functools import reduce
from itertools import count
from math import gcd
from typing import Iterator

import sympy as sp

from ..logging_config import get_logger
from ..types import PARAMETER
from ..types import Equation
from ..types import Linear
from ..types import MalformedShapeInput
from ..types import NoSolutions
from ..types import Pair
from ..types import Parabolic
from ..types import ParametrizedFamily
from ..types import Solution
from ..utils.numeric import exact_quotient
from ..utils.numeric import integer_sqrt
from ..utils.numeric import is_perfect_square
from .classify import coerce_shape
from .linear import solve_linear
from .merge import merge_solutions

logger = get_logger("solver.parabolic")


def square_decomposition(a: int, b: int, c: int) -> tuple[int, int, int]:
    """Write a*x^2 + b*x*y + c*y^2 as g * (ra*x + rc*y)^2.

    Requires b^2 = 4ac with a, c not both zero. g = gcd(a, c) carries the
    sign of the form, ra >= 0, and rc is signed so that 2*g*ra*rc = b.
    """
    g = gcd(a, c)
    if a < 0 or (a == 0 and c < 0):
        g = -g
    ra = integer_sqrt(a // g)
    rc = integer_sqrt(c // g)
    if b * g < 0:
        rc = -rc
    return g, ra, rc


def _parabola_points(
    g: int, ra: int, rc: int, d: int, e: int, f: int, w: int, residues: tuple[int, ...]
) -> Iterator[Pair]:
    for t in count(0):
        for u in residues:
            for z in ((u,) if t == 0 else (u + w * t, u - w * t)):
                y = (ra * g * z * z + d * z + ra * f) // w
                x = -((rc * g * z * z + e * z + rc * f) // w)
                yield (x, y)


def _solve_degenerate(g: int, ra: int, rc: int, d: int, e: int, f: int) -> Solution:
    # d*x + e*y = k*z, so the equation is g*z^2 + k*z + f = 0 in z = ra*x + rc*y
    k = d // ra if ra != 0 else e // rc
    disc = k * k - 4 * g * f
    if not is_perfect_square(disc):
        return NoSolutions()
    s = integer_sqrt(disc)
    roots = []
    for numerator in (-k + s, -k - s):
        z = exact_quotient(numerator, 2 * g)
        if z is not None and z not in roots:
            roots.append(z)
    if not roots:
        return NoSolutions()
    logger.debug(f"degenerate parabola: lines {ra}*x + {rc}*y = z for z in {roots}")
    return reduce(merge_solutions, (solve_linear(Linear(ra, rc, -z)) for z in roots))


def solve_parabolic(equation: Equation) -> Solution:
    """Solve a*x^2 + b*x*y + c*y^2 + d*x + e*y + f = 0 with b^2 - 4ac = 0.

    With z = ra*x + rc*y the equation reads g*z^2 + d*x + e*y + f = 0 and,
    unless w = rc*d - ra*e vanishes, x and y are polynomials in z:

        y =  (ra*g*z^2 + d*z + ra*f) / w
        x = -(rc*g*z^2 + e*z + rc*f) / w

    Both numerators are integral exactly for z in a set of residue classes
    modulo |w|, each of which yields one infinite family. When w = 0 the
    equation splits into at most two parallel lines.
    """
    eq = coerce_shape(equation, Parabolic)
    a, b, c, d, e, f = eq.coefficients()
    if eq.discriminant != 0:
        raise MalformedShapeInput(
            f"Parabolic equation requires b^2 - 4ac = 0, got {eq.discriminant}: {eq}"
        )
    if a == 0 and c == 0:
        raise MalformedShapeInput(f"Parabolic equation has no quadratic term: {eq}")

    g, ra, rc = square_decomposition(a, b, c)
    w = rc * d - ra * e
    if w == 0:
        return _solve_degenerate(g, ra, rc, d, e, f)

    residues = tuple(
        u
        for u in range(abs(w))
        if (ra * g * u * u + d * u + ra * f) % w == 0
        and (rc * g * u * u + e * u + rc * f) % w == 0
    )
    logger.debug(f"{eq}: residues modulo {abs(w)}: {residues}")
    if not residues:
        return NoSolutions()

    parametrizations = []
    for u in residues:
        z = u + w * PARAMETER
        parametrizations.append(
            (
                sp.expand(-(rc * g * z**2 + e * z + rc * f) / w),
                sp.expand((ra * g * z**2 + d * z + ra * f) / w),
            )
        )
    return ParametrizedFamily(
        partial(_parabola_points, g, ra, rc, d, e, f, w, residues),
        tuple(parametrizations),
    )
