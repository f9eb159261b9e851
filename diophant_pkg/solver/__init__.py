from .classify import specialize_equation
from .dispatch import solve
from .dispatch import solve_equation
from .elliptic import solve_elliptic
from .hyperbolic import solve_hyperbolic
from .linear import solve_linear
from .merge import merge_solutions
from .parabolic import solve_parabolic
from .simple_hyperbolic import solve_simple_hyperbolic

__all__ = [
    "solve",
    "solve_equation",
    "specialize_equation",
    "merge_solutions",
    "solve_linear",
    "solve_simple_hyperbolic",
    "solve_elliptic",
    "solve_parabolic",
    "solve_hyperbolic",
]
