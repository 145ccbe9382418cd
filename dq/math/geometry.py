"""
Graphing helpers for straight lines in slope-intercept form.

Points may be passed as Point objects, [x, y] / (x, y) pairs or
{"x": ..., "y": ...} mappings.
"""

from typing import Any, Tuple

from .types import Line, Number, Point


def get_y_intercept(gradient: Number, point: Any) -> Number:
    """
    y-intercept of the line with the given gradient through ``point``.

    Example:
        get_y_intercept(2, [1, 5]) → 3
    """
    return Line.from_gradient(gradient, point).intercept


def get_line(pt1: Any, pt2: Any) -> Tuple[Number, Number]:
    """
    Gradient and y-intercept of the line through two points.

    The points must not share an x-coordinate.

    Example:
        get_line([0, 0], [2, 4]) → (2.0, 0.0)

    Raises:
        VerticalLineError: pt1 and pt2 have the same x-coordinate
    """
    return Line.through(pt1, pt2).as_tuple()


def get_intercept(m1: Number, c1: Number, m2: Number, c2: Number) -> Tuple[Number, Number]:
    """
    Intersection of y = (m1)x + c1 and y = (m2)x + c2.

    Example:
        get_intercept(2, 0, -1, 9) → (3.0, 6.0)

    Raises:
        ParallelLinesError: m1 == m2
    """
    first = Line(gradient=m1, intercept=c1)
    second = Line(gradient=m2, intercept=c2)
    return first.intersection(second).as_tuple()


def get_distance(pt1: Any, pt2: Any) -> float:
    """Distance between two points."""
    return Point.coerce(pt1).distance(Point.coerce(pt2))
