from __future__ import annotations

import json
from typing import Any

import sympy as sp

from .. import config
from ..types import AllIntegers
from ..types import Equation
from ..types import FiniteSet
from ..types import NoSolutions
from ..types import ParametrizedFamily
from ..types import Solution
from ..types import SolveResult


def format_superscript(text: str) -> str:
    """Render SymPy's ``**`` power operator as ``^``."""
    return text.replace("**", "^")


def format_equation(equation: Equation) -> str:
    """Render an equation as ``<polynomial> = 0``."""
    x, y = sp.symbols(config.VARIABLE_NAMES)
    a, b, c, d, e, f = equation.coefficients()
    expr = a * x**2 + b * x * y + c * y**2 + d * x + e * y + f
    return f"{format_superscript(str(expr))} = 0"


def format_pairs(pairs: list) -> str:
    return "[" + ", ".join(f"({x}, {y})" for x, y in pairs) + "]"


def format_solution(solution: Solution, limit: int | None = None) -> str:
    """Human-readable rendering of a solution.

    Infinite families are cut after ``limit`` pairs (``DISPLAY_LIMIT`` by
    default) and end with ``...``.
    """
    if isinstance(solution, AllIntegers):
        return "All Integers"
    if isinstance(solution, NoSolutions):
        return "No Solutions"
    if isinstance(solution, FiniteSet):
        return format_pairs(list(solution.pairs))
    if isinstance(solution, ParametrizedFamily):
        if limit is None:
            limit = config.DISPLAY_LIMIT
        shown = format_pairs(solution.take(limit))
        if shown == "[]":
            return "[...]"
        return shown[:-1] + ", ...]"
    raise TypeError(f"Not a solution: {solution!r}")


def format_parametrizations(solution: ParametrizedFamily) -> list[str]:
    return [
        format_superscript(f"x = {x_t}, y = {y_t}")
        for x_t, y_t in solution.parametrizations
    ]


def solution_to_dict(solution: Solution, limit: int | None = None) -> dict[str, Any]:
    """Convert a solution to a JSON-serializable dictionary."""
    result: dict[str, Any] = {
        "type": solution.kind,
        "display": format_solution(solution, limit=limit),
    }
    if isinstance(solution, FiniteSet):
        result["pairs"] = [[x, y] for x, y in solution.pairs]
    elif isinstance(solution, ParametrizedFamily):
        if limit is None:
            limit = config.DISPLAY_LIMIT
        result["pairs"] = [[x, y] for x, y in solution.take(limit)]
        result["truncated"] = True
        result["parametric"] = format_parametrizations(solution)
    return result


def print_result_pretty(res: SolveResult, output_format: str = "human") -> None:
    """Print result in specified format."""
    if output_format == "json":
        print(json.dumps(res.to_dict(), indent=2, ensure_ascii=False))
        return
    if not res.ok:
        print("Error:", res.error)
        return
    print(f"Shape: {res.shape.replace('_', ' ')}")
    print(f"Solutions: {format_solution(res.solution, limit=res.limit)}")
    if isinstance(res.solution, ParametrizedFamily):
        for line in format_parametrizations(res.solution):
            print(f"  {line}, t in Z")
