"""DQ - helper functions for writing dynamic questions.

Main namespace package:
- dq.math: arithmetic (factors, pythag_triplet, sigfig) and graphing
  (get_y_intercept, get_line, get_intercept, get_distance)
- dq.display: AsciiMath formatting (gen_term, gen_expr, gen_eq, gen_frac,
  simplify_sqrt)
- dq.core: settings, logging and exceptions

All helpers are plain functions and can be imported from ``dq`` directly.
"""

__version__ = "0.1.0"

from .core.errors import (
    DegenerateRangeError,
    DQError,
    InvalidArgumentError,
    ParallelLinesError,
    UndefinedResultError,
    VerticalLineError,
)
from .display import gen_eq, gen_expr, gen_frac, gen_term, simplify_sqrt
from .math import (
    Line,
    Point,
    ReducedFraction,
    Triple,
    factors,
    get_distance,
    get_intercept,
    get_line,
    get_y_intercept,
    pythag_triplet,
    sigfig,
)

__all__ = [
    # Arithmetic
    "factors",
    "pythag_triplet",
    "sigfig",
    # Graphing
    "get_y_intercept",
    "get_line",
    "get_intercept",
    "get_distance",
    # Expressions
    "gen_eq",
    "gen_expr",
    "gen_term",
    "gen_frac",
    "simplify_sqrt",
    # Value types
    "Point",
    "Line",
    "Triple",
    "ReducedFraction",
    # Errors
    "DQError",
    "InvalidArgumentError",
    "UndefinedResultError",
    "VerticalLineError",
    "ParallelLinesError",
    "DegenerateRangeError",
]
