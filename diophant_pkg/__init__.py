"""Diophant package: integer solutions of ax^2 + bxy + cy^2 + dx + ey + f = 0."""

__version__ = "1.0.0"

from . import config, logging_config, types
from . import api, cli, solver
from .api import (
    merge_solutions,
    parse_equation,
    solve,
    solve_equation,
    specialize_equation,
    to_pairs,
)
from .types import (
    AllIntegers,
    Elliptic,
    FiniteSet,
    General,
    Hyperbolic,
    Linear,
    MalformedShapeInput,
    NoSolutions,
    Parabolic,
    ParametrizedFamily,
    ParseError,
    SimpleHyperbolic,
    SolveError,
    SolveResult,
    UnclassifiableEquation,
    UnsupportedCase,
)

__all__ = [
    "config",
    "solver",
    "cli",
    "types",
    "api",
    "logging_config",
    "solve",
    "solve_equation",
    "specialize_equation",
    "merge_solutions",
    "parse_equation",
    "to_pairs",
    "General",
    "Linear",
    "SimpleHyperbolic",
    "Elliptic",
    "Parabolic",
    "Hyperbolic",
    "AllIntegers",
    "NoSolutions",
    "FiniteSet",
    "ParametrizedFamily",
    "SolveResult",
    "SolveError",
    "UnclassifiableEquation",
    "UnsupportedCase",
    "MalformedShapeInput",
    "ParseError",
]
