"""Exact integer helpers used by the solvers.

Nothing in here touches floating point: square roots go through SymPy's
``integer_nthroot`` and divisions through ``Rational`` so that arbitrarily
large coefficients never lose precision.
"""

from __future__ import annotations

import sympy as sp


def extended_gcd(a: int, b: int) -> tuple[int, int]:
    """Extended Euclidean algorithm.

    Returns (s, t) such that s*a + t*b = gcd(a, b), with gcd(a, b) >= 0.
    extended_gcd(0, 0) is (1, 0).
    """
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t
    if old_r < 0:
        return (-old_s, -old_t)
    return (old_s, old_t)


def integer_sqrt(n: int) -> int:
    """Floor of the square root of a non-negative integer."""
    if n < 0:
        raise ValueError(f"integer_sqrt is undefined for negative values: {n}")
    root, _exact = sp.integer_nthroot(n, 2)
    return int(root)


def is_perfect_square(n: int) -> bool:
    if n < 0:
        return False
    return bool(sp.integer_nthroot(n, 2)[1])


def divisors(n: int) -> list[int]:
    """Positive divisors of |n| in ascending order; empty for n = 0."""
    if n == 0:
        return []
    return [int(v) for v in sp.divisors(abs(n))]


def signed_divisors(n: int) -> list[int]:
    """Every divisor of n with both signs: [1, -1, 2, -2, ...]."""
    signed = []
    for v in divisors(n):
        signed.extend((v, -v))
    return signed


def exact_quotient(numerator: int, denominator: int) -> int | None:
    """Return numerator / denominator if it is an integer, else None."""
    if denominator == 0:
        raise ZeroDivisionError("exact_quotient with zero denominator")
    q = sp.Rational(numerator, denominator)
    if q.q != 1:
        return None
    return int(q.p)
