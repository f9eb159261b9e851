from __future__ import annotations

from functools import partial
from itertools import chain
from itertools import zip_longest
from typing import Iterable
from typing import Iterator

import sympy as sp

from ..types import AllIntegers
from ..types import FiniteSet
from ..types import NoSolutions
from ..types import Pair
from ..types import ParametrizedFamily
from ..types import Solution

_MISSING = object()


def collect_pairs(pairs: Iterable[Pair]) -> Solution:
    """Wrap search results; an empty search is reported as NoSolutions."""
    found = FiniteSet(tuple(pairs))
    if not found.pairs:
        return NoSolutions()
    return found


def _interleave(first: Iterable[Pair], second: Iterable[Pair]) -> Iterator[Pair]:
    """Alternate between two pair sequences, skipping repeats.

    Either sequence may be infinite; the shorter one simply runs out.
    Every pair yielded is remembered for deduplication, so memory grows
    with the number of pairs the consumer pulls.
    """
    seen = set()
    for pair in chain.from_iterable(zip_longest(first, second, fillvalue=_MISSING)):
        if pair is _MISSING or pair in seen:
            continue
        seen.add(pair)
        yield pair


def _parametrizations(solution: Solution) -> tuple:
    if isinstance(solution, ParametrizedFamily):
        return solution.parametrizations
    return tuple((sp.Integer(x), sp.Integer(y)) for x, y in solution)


def merge_solutions(first: Solution, second: Solution) -> Solution:
    """Merge two solutions into one.

    AllIntegers dominates, NoSolutions is the identity, finite sets are
    interleaved position by position, and as soon as an infinite family is
    involved the result is a lazily interleaved family.
    """
    if isinstance(first, AllIntegers) or isinstance(second, AllIntegers):
        return AllIntegers()
    if isinstance(first, NoSolutions):
        return second
    if isinstance(second, NoSolutions):
        return first
    if isinstance(first, FiniteSet) and isinstance(second, FiniteSet):
        return FiniteSet(tuple(_interleave(first.pairs, second.pairs)))
    return ParametrizedFamily(
        partial(_interleave, first, second),
        _parametrizations(first) + _parametrizations(second),
    )
