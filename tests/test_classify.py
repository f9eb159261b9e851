import pytest

from diophant_pkg.solver import specialize_equation
from diophant_pkg.types import Elliptic
from diophant_pkg.types import General
from diophant_pkg.types import Hyperbolic
from diophant_pkg.types import Linear
from diophant_pkg.types import MalformedShapeInput
from diophant_pkg.types import Parabolic
from diophant_pkg.types import SimpleHyperbolic
from diophant_pkg.types import UnclassifiableEquation


@pytest.mark.parametrize(
    "general,expected",
    [
        (General(0, 0, 0, 2, 4, 5), Linear(2, 4, 5)),
        (General(0, 0, 0, 0, 0, 0), Linear(0, 0, 0)),
        (General(0, 3, 0, 1, 2, 7), SimpleHyperbolic(3, 1, 2, 7)),
        (General(1, 2, 3, 3, 5, 0), Elliptic(1, 2, 3, 3, 5, 0)),
        (General(1, 0, 0, 3, 0, 4), Parabolic(1, 0, 0, 3, 0, 4)),
        (General(1, -2, 1, -1, 0, 0), Parabolic(1, -2, 1, -1, 0, 0)),
        (General(1, 0, -1, 0, 0, 0), Hyperbolic(1, 0, -1, 0)),
        (General(0, 1, 1, 0, 0, -2), Hyperbolic(0, 1, 1, -2)),
    ],
)
def test_specialize_general_equation(general, expected):
    assert specialize_equation(general) == expected


def test_linear_rule_takes_priority():
    assert specialize_equation(General(0, 0, 0, 7, -3, 1)) == Linear(7, -3, 1)


@pytest.mark.parametrize(
    "equation",
    [Linear(1, 2, 3), SimpleHyperbolic(0, 1, 2, 3), Elliptic(1, 5, 1, 0, 0, 0), Hyperbolic(1, 0, -1, 0)],
)
def test_specialized_equations_are_returned_unchanged(equation):
    # Even shapes that break their own preconditions pass through untouched
    assert specialize_equation(equation) is equation


def test_specialize_is_idempotent():
    for general in (
        General(0, 0, 0, 1, 1, 1),
        General(0, 2, 0, 1, 1, 1),
        General(2, 1, 2, 1, 1, 1),
        General(4, 4, 1, 1, 1, 1),
        General(1, 3, 1, 0, 0, 5),
    ):
        once = specialize_equation(general)
        assert specialize_equation(once) == once


@pytest.mark.parametrize(
    "general",
    [General(1, 0, -1, 1, 0, 0), General(1, 0, -1, 0, 1, 0), General(0, 1, 1, 2, 0, 0)],
)
def test_hyperbolic_with_linear_terms_is_unclassifiable(general):
    with pytest.raises(UnclassifiableEquation) as exc_info:
        specialize_equation(general)
    assert exc_info.value.code == "UNCLASSIFIABLE"


def test_coefficients_must_be_integers():
    with pytest.raises(MalformedShapeInput):
        General(1, 0, 0, 0, 0, 0.5)
    with pytest.raises(MalformedShapeInput):
        Linear(True, 1, 1)


def test_general_view_of_shapes():
    assert SimpleHyperbolic(3, 1, 2, 7).as_general() == General(0, 3, 0, 1, 2, 7)
    assert Hyperbolic(1, 0, -1, 4).as_general() == General(1, 0, -1, 0, 0, 4)
    assert Linear(2, 4, 5).evaluate(1, 1) == 11
