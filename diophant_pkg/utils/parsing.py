from __future__ import annotations

from tokenize import TokenError

import sympy as sp
from sympy.parsing.sympy_parser import parse_expr
from sympy.polys.polyerrors import GeneratorsError
from sympy.polys.polyerrors import PolynomialError

from .. import config
from ..logging_config import get_logger
from ..types import General
from ..types import ParseError

logger = get_logger("utils.parsing")

X, Y = sp.symbols(config.VARIABLE_NAMES)

# (x-exponent, y-exponent) of a, b, c, d, e, f in the general form
_MONOMIALS = ((2, 0), (1, 1), (0, 2), (1, 0), (0, 1), (0, 0))


def _parse_side(text: str) -> sp.Expr:
    try:
        return parse_expr(
            text,
            local_dict={"x": X, "y": Y},
            transformations=config.TRANSFORMATIONS,
        )
    except (SyntaxError, TypeError, ValueError, TokenError, sp.SympifyError) as e:
        raise ParseError(f"Failed to parse '{text.strip()}': {e}") from e


def parse_equation(text: str) -> General:
    """Turn an equation string into a General equation.

    Accepts ``lhs = rhs`` or a bare expression meaning ``expr = 0``, in the
    variables x and y, with integer coefficients and total degree at most 2.
    ``^`` is read as a power and implicit multiplication (``2x``) is allowed.

    Raises:
        ParseError: with code INPUT_TOO_LONG, INVALID_FORMAT, PARSE_ERROR,
            TOO_MANY_VARIABLES, NOT_QUADRATIC or NON_INTEGER_COEFFICIENT.
    """
    if len(text) > config.MAX_INPUT_LENGTH:
        raise ParseError(
            f"Input too long: {len(text)} characters (limit {config.MAX_INPUT_LENGTH})",
            "INPUT_TOO_LONG",
        )
    parts = text.split("=")
    if len(parts) > 2 or not all(part.strip() for part in parts):
        raise ParseError(
            "Invalid equation format: Expected 'lhs = rhs' or a single expression. "
            "For example 'x^2 - y^2 = 1'.",
            "INVALID_FORMAT",
        )
    lhs = _parse_side(parts[0])
    rhs = _parse_side(parts[1]) if len(parts) == 2 else sp.Integer(0)

    expr = sp.expand(lhs - rhs)
    extra = expr.free_symbols - {X, Y}
    if extra:
        names = ", ".join(sorted(str(s) for s in extra))
        raise ParseError(
            f"Only the unknowns x and y are supported, found: {names}",
            "TOO_MANY_VARIABLES",
        )

    try:
        poly = sp.Poly(expr, X, Y)
    except (PolynomialError, GeneratorsError) as e:
        raise ParseError(f"Not a polynomial equation in x and y: {e}", "NOT_QUADRATIC") from e
    if poly.total_degree() > 2:
        raise ParseError(
            f"Degree {poly.total_degree()} equations are not supported; "
            "the degree must be at most 2",
            "NOT_QUADRATIC",
        )

    coefficients = []
    for i, j in _MONOMIALS:
        value = poly.coeff_monomial(X**i * Y**j)
        if not value.is_Integer:
            raise ParseError(
                f"Coefficient of {X**i * Y**j} is not an integer: {value}",
                "NON_INTEGER_COEFFICIENT",
            )
        coefficients.append(int(value))

    equation = General(*coefficients)
    logger.debug(f"Parsed '{text}' as {equation}")
    return equation
