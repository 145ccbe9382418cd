"""
dq.display - AsciiMath text for expressions, fractions and radicals.
"""

from .expressions import gen_eq, gen_expr, gen_term
from .radicals import gen_frac, simplify_sqrt

__all__ = [
    "gen_term",
    "gen_expr",
    "gen_eq",
    "gen_frac",
    "simplify_sqrt",
]
