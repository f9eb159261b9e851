import random
from math import gcd

import pytest

from diophant_pkg.utils.numeric import divisors
from diophant_pkg.utils.numeric import exact_quotient
from diophant_pkg.utils.numeric import extended_gcd
from diophant_pkg.utils.numeric import integer_sqrt
from diophant_pkg.utils.numeric import is_perfect_square
from diophant_pkg.utils.numeric import signed_divisors


@pytest.mark.parametrize(
    "a,b",
    [(0, 0), (0, 7), (7, 0), (0, -7), (-7, 0), (12, 18), (-12, 18), (12, -18), (-12, -18), (1, 1), (3, 5)],
)
def test_extended_gcd_bezout_identity(a, b):
    s, t = extended_gcd(a, b)
    assert a * s + b * t == gcd(a, b)


def test_extended_gcd_random_large_values():
    rng = random.Random(20131)
    for _ in range(300):
        a = rng.randint(-10**30, 10**30)
        b = rng.choice([0, rng.randint(-10**30, 10**30), rng.randint(-50, 50)])
        s, t = extended_gcd(a, b)
        assert a * s + b * t == gcd(a, b)


def test_extended_gcd_of_zeros():
    assert extended_gcd(0, 0) == (1, 0)


def test_integer_sqrt_exact_for_large_squares():
    n = 10**20 + 1
    assert integer_sqrt(n * n) == n
    assert is_perfect_square(n * n)
    # A float-based test would round these to the same value
    assert not is_perfect_square(n * n - 1)
    assert not is_perfect_square(n * n + 1)
    assert integer_sqrt(n * n - 1) == n - 1


def test_integer_sqrt_small_values():
    assert [integer_sqrt(k) for k in range(10)] == [0, 1, 1, 1, 2, 2, 2, 2, 2, 3]
    assert is_perfect_square(0)
    assert not is_perfect_square(-4)


def test_integer_sqrt_rejects_negative():
    with pytest.raises(ValueError):
        integer_sqrt(-1)


def test_divisors():
    assert divisors(12) == [1, 2, 3, 4, 6, 12]
    assert divisors(-12) == [1, 2, 3, 4, 6, 12]
    assert divisors(1) == [1]
    assert divisors(36) == [1, 2, 3, 4, 6, 9, 12, 18, 36]
    assert divisors(0) == []


def test_divisors_of_large_prime():
    p = 2**61 - 1
    assert divisors(p) == [1, p]


def test_signed_divisors():
    assert signed_divisors(6) == [1, -1, 2, -2, 3, -3, 6, -6]
    assert signed_divisors(0) == []


def test_exact_quotient():
    assert exact_quotient(-6, 3) == -2
    assert exact_quotient(6, -4) is None
    assert exact_quotient(7, 2) is None
    assert exact_quotient(0, 5) == 0
    assert exact_quotient(10**40, 10**20) == 10**20
    with pytest.raises(ZeroDivisionError):
        exact_quotient(1, 0)
