"""Equation shapes, solution values and result dataclasses for consistent API responses."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from dataclasses import fields
from itertools import islice
from typing import Any
from typing import Callable
from typing import Iterator

import sympy as sp

Pair = tuple[int, int]

# Free parameter of every parametrized family
PARAMETER = sp.Symbol("t", integer=True)


class SolveError(Exception):
    """Raised when an equation cannot be solved."""

    def __init__(self, message: str, code: str = "SOLVE_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class UnclassifiableEquation(SolveError):
    """Raised when a general equation matches none of the known shapes."""

    def __init__(self, message: str, code: str = "UNCLASSIFIABLE"):
        super().__init__(message, code)


class UnsupportedCase(SolveError):
    """Raised when a shape is recognised but no algorithm covers the case."""

    def __init__(self, message: str, code: str = "UNSUPPORTED_CASE"):
        super().__init__(message, code)


class MalformedShapeInput(SolveError):
    """Raised when a solver receives an equation that violates its shape."""

    def __init__(self, message: str, code: str = "MALFORMED_SHAPE"):
        super().__init__(message, code)


class ParseError(Exception):
    """Raised when parsing an equation string fails."""

    def __init__(self, message: str, code: str = "PARSE_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


def _as_int(value: Any, name: str) -> int:
    # bool is an int subclass but never a meaningful coefficient
    if isinstance(value, bool):
        raise MalformedShapeInput(f"Coefficient {name} must be an integer, got {value!r}")
    try:
        return operator.index(value)
    except TypeError:
        raise MalformedShapeInput(
            f"Coefficient {name} must be an integer, got {value!r}"
        ) from None


# ---------------------------------------------------------------------------
# Equations
# ---------------------------------------------------------------------------


class Equation:
    """Base class of the equation shapes.

    Every shape stores integer coefficients and can be viewed as the
    general form ``a*x^2 + b*x*y + c*y^2 + d*x + e*y + f = 0``.
    """

    kind = "equation"

    def __post_init__(self) -> None:
        for field in fields(self):
            object.__setattr__(
                self, field.name, _as_int(getattr(self, field.name), field.name)
            )

    def as_general(self) -> General:
        raise NotImplementedError

    def coefficients(self) -> tuple[int, int, int, int, int, int]:
        """Return (a, b, c, d, e, f) of the general form."""
        g = self.as_general()
        return (g.a, g.b, g.c, g.d, g.e, g.f)

    def evaluate(self, x: int, y: int) -> int:
        """Left-hand side of the equation at (x, y); zero for a solution."""
        a, b, c, d, e, f = self.coefficients()
        return a * x * x + b * x * y + c * y * y + d * x + e * y + f


@dataclass(frozen=True)
class General(Equation):
    """a*x^2 + b*x*y + c*y^2 + d*x + e*y + f = 0"""

    a: int
    b: int
    c: int
    d: int
    e: int
    f: int

    kind = "general"

    def as_general(self) -> General:
        return self


@dataclass(frozen=True)
class Linear(Equation):
    """d*x + e*y + f = 0"""

    d: int
    e: int
    f: int

    kind = "linear"

    def as_general(self) -> General:
        return General(0, 0, 0, self.d, self.e, self.f)


@dataclass(frozen=True)
class SimpleHyperbolic(Equation):
    """b*x*y + d*x + e*y + f = 0 with b != 0"""

    b: int
    d: int
    e: int
    f: int

    kind = "simple_hyperbolic"

    def as_general(self) -> General:
        return General(0, self.b, 0, self.d, self.e, self.f)


@dataclass(frozen=True)
class Elliptic(Equation):
    """General quadratic with b^2 - 4ac < 0"""

    a: int
    b: int
    c: int
    d: int
    e: int
    f: int

    kind = "elliptic"

    def as_general(self) -> General:
        return General(self.a, self.b, self.c, self.d, self.e, self.f)

    @property
    def discriminant(self) -> int:
        return self.b * self.b - 4 * self.a * self.c


@dataclass(frozen=True)
class Parabolic(Equation):
    """General quadratic with b^2 - 4ac = 0"""

    a: int
    b: int
    c: int
    d: int
    e: int
    f: int

    kind = "parabolic"

    def as_general(self) -> General:
        return General(self.a, self.b, self.c, self.d, self.e, self.f)

    @property
    def discriminant(self) -> int:
        return self.b * self.b - 4 * self.a * self.c


@dataclass(frozen=True)
class Hyperbolic(Equation):
    """a*x^2 + b*x*y + c*y^2 + f = 0 with b^2 - 4ac > 0"""

    a: int
    b: int
    c: int
    f: int

    kind = "hyperbolic"

    def as_general(self) -> General:
        return General(self.a, self.b, self.c, 0, 0, self.f)

    @property
    def discriminant(self) -> int:
        return self.b * self.b - 4 * self.a * self.c


# ---------------------------------------------------------------------------
# Solutions
# ---------------------------------------------------------------------------


class Solution:
    """Base class of the solving outcomes."""

    kind = "solution"

    def __str__(self) -> str:
        from .utils.formatting import format_solution

        return format_solution(self)


@dataclass(frozen=True)
class AllIntegers(Solution):
    """Every integer pair satisfies the equation."""

    kind = "all_integers"


@dataclass(frozen=True)
class NoSolutions(Solution):
    """No integer pair satisfies the equation."""

    kind = "no_solutions"


@dataclass(frozen=True)
class FiniteSet(Solution):
    """An explicit, duplicate-free sequence of solution pairs."""

    pairs: tuple[Pair, ...] = ()

    kind = "finite"

    def __post_init__(self) -> None:
        normalized = (
            (_as_int(x, "x"), _as_int(y, "y")) for x, y in self.pairs
        )
        object.__setattr__(self, "pairs", tuple(dict.fromkeys(normalized)))

    def __iter__(self) -> Iterator[Pair]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def __contains__(self, pair: object) -> bool:
        return pair in self.pairs


class ParametrizedFamily(Solution):
    """An infinite solution set produced lazily.

    ``factory`` is called afresh for every iteration, so a family can be
    traversed any number of times. ``parametrizations`` holds SymPy
    expressions ``(x(t), y(t))`` over the integer parameter ``t`` that
    together describe the same set.
    """

    kind = "parametrized"

    def __init__(
        self,
        factory: Callable[[], Iterator[Pair]],
        parametrizations: tuple[tuple[sp.Expr, sp.Expr], ...] = (),
    ):
        self._factory = factory
        self.parametrizations = tuple(
            (sp.sympify(x_t), sp.sympify(y_t)) for x_t, y_t in parametrizations
        )

    def __iter__(self) -> Iterator[Pair]:
        return iter(self._factory())

    def take(self, n: int) -> list[Pair]:
        """Return the first ``n`` pairs of the family."""
        return list(islice(self, n))

    def __repr__(self) -> str:
        forms = "; ".join(f"x = {x_t}, y = {y_t}" for x_t, y_t in self.parametrizations)
        return f"ParametrizedFamily({forms})"


# ---------------------------------------------------------------------------
# API results
# ---------------------------------------------------------------------------


@dataclass
class SolveResult:
    """Result of solving an equation."""

    ok: bool
    shape: str | None = None  # "linear", "simple_hyperbolic", "elliptic", ...
    solution: Solution | None = None
    error: str | None = None
    error_code: str | None = None
    limit: int | None = None  # pairs rendered for an infinite family

    @property
    def result_type(self) -> str | None:
        return self.solution.kind if self.solution is not None else None

    def to_dict(self, limit: int | None = None) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization.

        ``limit`` overrides the limit the result was created with.
        """
        from .utils.formatting import solution_to_dict

        if limit is None:
            limit = self.limit

        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.shape is not None:
            result_dict["shape"] = self.shape
        if self.solution is not None:
            result_dict["solution"] = solution_to_dict(self.solution, limit=limit)
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"SolveResult(ok=False, error={self.error!r}, error_code={self.error_code!r})"
        parts = [f"ok={self.ok}"]
        if self.shape is not None:
            parts.append(f"shape={self.shape!r}")
        if self.solution is not None:
            parts.append(f"solution={self.solution!r}")
        return f"SolveResult({', '.join(parts)})"
