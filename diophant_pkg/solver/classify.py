from __future__ import annotations

from ..logging_config import get_logger
from ..types import Elliptic
from ..types import Equation
from ..types import General
from ..types import Hyperbolic
from ..types import Linear
from ..types import MalformedShapeInput
from ..types import Parabolic
from ..types import SimpleHyperbolic
from ..types import UnclassifiableEquation

logger = get_logger("solver.classify")


def specialize_equation(equation: Equation) -> Equation:
    """Determine which solvable shape a general equation fits.

    Non-general equations are returned unchanged. The rules are applied in
    order: linear, simple hyperbolic, then by the sign of b^2 - 4ac.

    Raises:
        UnclassifiableEquation: b^2 - 4ac > 0 with a nonzero linear term.
    """
    if not isinstance(equation, General):
        return equation

    a, b, c, d, e, f = equation.coefficients()
    disc = b * b - 4 * a * c

    if a == 0 and b == 0 and c == 0:
        shape: Equation = Linear(d, e, f)
    elif a == 0 and c == 0:
        shape = SimpleHyperbolic(b, d, e, f)
    elif disc < 0:
        shape = Elliptic(a, b, c, d, e, f)
    elif disc == 0:
        shape = Parabolic(a, b, c, d, e, f)
    elif d == 0 and e == 0:
        shape = Hyperbolic(a, b, c, f)
    else:
        raise UnclassifiableEquation(
            f"No solving method for {equation}: b^2 - 4ac = {disc} > 0 "
            "with a nonzero linear term"
        )

    logger.debug(f"Classified {equation} as {shape.kind} (b^2 - 4ac = {disc})")
    return shape


def coerce_shape(equation: Equation, shape_type: type[Equation]) -> Equation:
    """Return ``equation`` as ``shape_type``, specializing a general equation first."""
    if isinstance(equation, General):
        equation = specialize_equation(equation)
    if not isinstance(equation, shape_type):
        raise MalformedShapeInput(
            f"Expected a {shape_type.kind} equation, got {equation.kind}: {equation}"
        )
    return equation
