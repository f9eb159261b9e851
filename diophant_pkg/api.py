"""Public API for solving quadratic Diophantine equations."""

from __future__ import annotations

from .solver import merge_solutions
from .solver import solve
from .solver import solve_equation
from .solver import specialize_equation
from .types import FiniteSet
from .types import Pair
from .types import Solution
from .utils.parsing import parse_equation


def to_pairs(solution: Solution) -> list[Pair] | None:
    """Extract the pairs of a finite solution set; None for any other solution."""
    if isinstance(solution, FiniteSet):
        return list(solution.pairs)
    return None


__all__ = [
    "solve",
    "solve_equation",
    "specialize_equation",
    "merge_solutions",
    "parse_equation",
    "to_pairs",
]
