from __future__ import annotations

from typing import Callable

from ..logging_config import get_logger
from ..types import Elliptic
from ..types import Equation
from ..types import Hyperbolic
from ..types import Linear
from ..types import MalformedShapeInput
from ..types import Parabolic
from ..types import ParseError
from ..types import SimpleHyperbolic
from ..types import Solution
from ..types import SolveError
from ..types import SolveResult
from ..types import UnclassifiableEquation
from ..types import UnsupportedCase
from ..utils.parsing import parse_equation
from .classify import specialize_equation
from .elliptic import solve_elliptic
from .hyperbolic import solve_hyperbolic
from .linear import solve_linear
from .parabolic import solve_parabolic
from .simple_hyperbolic import solve_simple_hyperbolic

logger = get_logger("solver.dispatch")

_SOLVERS: dict[type, Callable[[Equation], Solution]] = {
    Linear: solve_linear,
    SimpleHyperbolic: solve_simple_hyperbolic,
    Elliptic: solve_elliptic,
    Parabolic: solve_parabolic,
    Hyperbolic: solve_hyperbolic,
}


def _specialize(equation: Equation) -> Equation:
    if not isinstance(equation, Equation):
        raise MalformedShapeInput(f"Expected an equation, got {equation!r}")
    return specialize_equation(equation)


def _dispatch(shape: Equation) -> Solution:
    solver = _SOLVERS.get(type(shape))
    if solver is None:
        raise MalformedShapeInput(f"No solver for {shape.kind} equations")
    logger.debug(f"Solving {shape} with {solver.__name__}")
    return solver(shape)


def solve(equation: Equation) -> Solution:
    """Classify an equation and run the matching solver.

    Example:
        >>> solve(General(1, 2, 3, 3, 5, 0))
        FiniteSet(pairs=((-3, 0), (-2, -1), (0, 0), (1, -1)))

    Raises:
        UnclassifiableEquation: the general form fits no known shape.
        UnsupportedCase: the shape is known but the case has no algorithm.
        MalformedShapeInput: the input is not an equation or breaks its shape.
    """
    return _dispatch(_specialize(equation))


def solve_equation(equation: Equation | str, limit: int | None = None) -> SolveResult:
    """Solve an equation value or equation string without raising.

    Args:
        equation: An Equation, or text such as "x^2 - y^2 = 0"
        limit: Pairs of an infinite family to render in ``to_dict()`` and
            pretty output (default: ``config.DISPLAY_LIMIT``)

    Returns:
        SolveResult with ``ok`` set; on failure ``error`` and ``error_code``
        describe the typed error that occurred.

    Raises:
        ValueError: ``limit`` is negative.
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    shape: Equation | None = None
    try:
        if isinstance(equation, str):
            equation = parse_equation(equation)
        shape = _specialize(equation)
        solution = _dispatch(shape)
    except ParseError as e:
        logger.info(f"Parse error ({e.code}): {e}")
        return SolveResult(ok=False, error=str(e), error_code=e.code, limit=limit)
    except UnclassifiableEquation as e:
        logger.info(f"Unclassifiable equation: {e}")
        return SolveResult(
            ok=False, shape="general", error=str(e), error_code=e.code, limit=limit
        )
    except UnsupportedCase as e:
        logger.warning(f"Unsupported case: {e}")
        return SolveResult(
            ok=False,
            shape=shape.kind if shape is not None else None,
            error=str(e),
            error_code=e.code,
            limit=limit,
        )
    except SolveError as e:
        logger.info(f"Solve error ({e.code}): {e}")
        return SolveResult(ok=False, error=str(e), error_code=e.code, limit=limit)
    return SolveResult(ok=True, shape=shape.kind, solution=solution, limit=limit)
