from .numeric import divisors
from .numeric import exact_quotient
from .numeric import extended_gcd
from .numeric import integer_sqrt
from .numeric import is_perfect_square
from .numeric import signed_divisors

__all__ = [
    "extended_gcd",
    "integer_sqrt",
    "is_perfect_square",
    "divisors",
    "signed_divisors",
    "exact_quotient",
]
