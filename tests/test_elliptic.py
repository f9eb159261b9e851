import random

import pytest

from diophant_pkg.solver import solve
from diophant_pkg.solver import solve_elliptic
from diophant_pkg.solver.elliptic import x_search_range
from diophant_pkg.types import Elliptic
from diophant_pkg.types import FiniteSet
from diophant_pkg.types import General
from diophant_pkg.types import MalformedShapeInput
from diophant_pkg.types import NoSolutions


def _brute_force(equation):
    a, b, c, d, e, f = equation.coefficients()
    x_bounds = x_search_range(a, b, c, d, e, f)
    # The same bound with the roles of x and y exchanged
    y_bounds = x_search_range(c, b, a, e, d, f)
    if x_bounds is None or y_bounds is None:
        return set()
    return {
        (x, y)
        for x in range(x_bounds[0], x_bounds[1] + 1)
        for y in range(y_bounds[0], y_bounds[1] + 1)
        if equation.evaluate(x, y) == 0
    }


def test_reference_example_in_order():
    assert solve(General(1, 2, 3, 3, 5, 0)) == FiniteSet(
        ((-3, 0), (-2, -1), (0, 0), (1, -1))
    )


def test_circle_of_radius_five():
    solution = solve(General(1, 0, 1, 0, 0, -25))
    assert set(solution) == {
        (-5, 0), (5, 0), (0, 5), (0, -5),
        (3, 4), (3, -4), (-3, 4), (-3, -4),
        (4, 3), (4, -3), (-4, 3), (-4, -3),
    }
    assert len(solution) == 12


def test_mixed_term():
    equation = Elliptic(1, 1, 1, 0, 0, -3)
    solution = solve_elliptic(equation)
    assert set(solution) == {(1, 1), (-1, -1), (1, -2), (-2, 1), (2, -1), (-1, 2)}


def test_single_point():
    assert solve(General(1, 0, 1, 0, 0, 0)) == FiniteSet(((0, 0),))


def test_no_real_points():
    assert solve(General(1, 0, 1, 0, 0, 1)) == NoSolutions()


def test_real_points_but_no_lattice_points():
    assert solve(General(1, 0, 1, 0, 0, -3)) == NoSolutions()


def test_search_range_for_huge_coefficients():
    low, high = x_search_range(1, 0, 1, 0, 0, -10**40)
    assert low == -10**20 - 1
    assert high == 10**20 + 1


def test_huge_constant_with_few_candidates():
    # 10**30 * x^2 + y^2 = 10**30 only has x in {-1, 0, 1}
    solution = solve(General(10**30, 0, 1, 0, 0, -10**30))
    assert set(solution) == {(1, 0), (-1, 0), (0, 10**15), (0, -10**15)}


def test_random_ellipses_match_brute_force():
    rng = random.Random(4242)
    checked = 0
    while checked < 40:
        a, b, c = (rng.randint(-5, 5) for _ in range(3))
        if b * b - 4 * a * c >= 0:
            continue
        d, e = rng.randint(-6, 6), rng.randint(-6, 6)
        f = rng.randint(-30, 30)
        equation = Elliptic(a, b, c, d, e, f)
        solution = solve_elliptic(equation)
        found = set(solution) if isinstance(solution, FiniteSet) else set()
        assert found == _brute_force(equation), equation
        checked += 1


@pytest.mark.parametrize("equation", [Elliptic(1, 2, 1, 0, 0, 0), Elliptic(1, 0, -1, 0, 0, 1)])
def test_non_negative_discriminant_is_rejected(equation):
    with pytest.raises(MalformedShapeInput):
        solve_elliptic(equation)
