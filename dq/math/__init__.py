"""
dq.math - arithmetic and graphing helpers.

- types:      Point, Line, Triple, ReducedFraction value models
- arithmetic: factors, pythag_triplet, sigfig
- geometry:   get_y_intercept, get_line, get_intercept, get_distance
"""

from .arithmetic import factors, pythag_triplet, sigfig
from .geometry import get_distance, get_intercept, get_line, get_y_intercept
from .types import Line, Point, ReducedFraction, Triple

__all__ = [
    "Point",
    "Line",
    "Triple",
    "ReducedFraction",
    "factors",
    "pythag_triplet",
    "sigfig",
    "get_y_intercept",
    "get_line",
    "get_intercept",
    "get_distance",
]
