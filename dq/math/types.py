"""
Value types used by the dq helpers: Point, Line, Triple, ReducedFraction.

These are small frozen pydantic models. The public helper functions accept
plain Python values, coerce them through these models, and hand plain tuples
and numbers back to the caller.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..core.errors import InvalidArgumentError, ParallelLinesError, VerticalLineError
from ..core.logging import get_logger

logger = get_logger(__name__)

Number = Union[int, float]


class Point(BaseModel):
    """
    Point in the plane, (x, y).

    Behaves like a 2-tuple for ``len``, indexing and unpacking.
    """

    model_config = ConfigDict(frozen=True)

    x: Number = Field(description="The x-coordinate")
    y: Number = Field(description="The y-coordinate")

    @classmethod
    def coerce(cls, value: Any) -> Point:
        """
        Build a Point from a Point, a 2-item sequence or an ``{x, y}`` mapping.

        Raises:
            InvalidArgumentError: if the value cannot be read as a point
        """
        if isinstance(value, Point):
            return value

        try:
            if isinstance(value, Mapping):
                return cls(x=value["x"], y=value["y"])
            if isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 2:
                return cls(x=value[0], y=value[1])
        except (KeyError, ValidationError) as e:
            raise InvalidArgumentError(
                f"Cannot read a point from {value!r}: {e}", argument="point", value=value
            ) from e

        raise InvalidArgumentError(
            f"A point must be a 2-item sequence or an x/y mapping, got {value!r}",
            argument="point",
            value=value,
        )

    def as_tuple(self) -> tuple[Number, Number]:
        """Convert to Python tuple."""
        return (self.x, self.y)

    def distance(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def __len__(self) -> int:
        return 2

    def __getitem__(self, index: int) -> Number:
        return self.as_tuple()[index]

    def __iter__(self):  # type: ignore[override]
        return iter(self.as_tuple())


class Line(BaseModel):
    """
    Non-vertical line y = gradient * x + intercept.
    """

    model_config = ConfigDict(frozen=True)

    gradient: Number
    intercept: Number

    @classmethod
    def from_gradient(cls, gradient: Number, point: Any) -> Line:
        """Line with the given gradient passing through ``point``."""
        pt = Point.coerce(point)
        # y = mx + c  =>  c = y - mx
        return cls(gradient=gradient, intercept=pt.y - gradient * pt.x)

    @classmethod
    def through(cls, pt1: Any, pt2: Any) -> Line:
        """
        Line passing through two points.

        Raises:
            VerticalLineError: if the points share an x-coordinate
        """
        p1, p2 = Point.coerce(pt1), Point.coerce(pt2)
        x_diff = p2.x - p1.x
        if x_diff == 0:
            logger.debug(
                "Vertical line requested",
                extra_data={"pt1": p1.as_tuple(), "pt2": p2.as_tuple()},
            )
            raise VerticalLineError(p1.x)

        return cls.from_gradient((p2.y - p1.y) / x_diff, p1)

    def y_at(self, x: Number) -> Number:
        """Evaluate the line at ``x``."""
        return self.gradient * x + self.intercept

    def intersection(self, other: Line) -> Point:
        """
        Point where this line meets ``other``.

        (m1)x + c1 = (m2)x + c2  =>  x = (c2 - c1) / (m1 - m2)

        Raises:
            ParallelLinesError: if both lines have the same gradient
        """
        if self.gradient == other.gradient:
            logger.debug(
                "Intersection of parallel lines requested",
                extra_data={"gradient": self.gradient},
            )
            raise ParallelLinesError(self.gradient)

        x = (other.intercept - self.intercept) / (self.gradient - other.gradient)
        return Point(x=x, y=self.y_at(x))

    def as_tuple(self) -> tuple[Number, Number]:
        return (self.gradient, self.intercept)


class Triple(BaseModel):
    """Pythagorean triple (base, height, hypotenuse)."""

    model_config = ConfigDict(frozen=True)

    base: int = Field(gt=0)
    height: int = Field(gt=0)
    hypotenuse: int = Field(gt=0)

    @model_validator(mode="after")
    def check_pythagoras(self) -> Triple:
        if self.base ** 2 + self.height ** 2 != self.hypotenuse ** 2:
            raise ValueError(
                f"{self.base}^2 + {self.height}^2 != {self.hypotenuse}^2"
            )
        return self

    @classmethod
    def from_parameters(cls, m: int, n: int) -> Triple:
        """Euclid's formula with m > n >= 1."""
        return cls(base=m ** 2 - n ** 2, height=2 * m * n, hypotenuse=m ** 2 + n ** 2)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.base, self.height, self.hypotenuse)


class ReducedFraction(BaseModel):
    """
    Fraction in lowest terms with the sign carried on the numerator.
    """

    model_config = ConfigDict(frozen=True)

    numerator: int
    denominator: int = Field(gt=0)

    @classmethod
    def reduce(cls, numer: int, denom: int) -> ReducedFraction:
        """
        Reduce numer/denom to lowest terms.

        Both parts must be non-zero integers; zero is handled by the caller.
        """
        g = math.gcd(abs(numer), abs(denom))
        positive = numer * denom > 0
        num = abs(numer) // g
        den = abs(denom) // g
        return cls(numerator=num if positive else -num, denominator=den)

    @property
    def is_whole(self) -> bool:
        return self.denominator == 1

    def to_display(self, include_plus: bool = False) -> Union[int, str]:
        """
        Render for AsciiMath.

        Whole numbers come back as ``int``; other fractions as
        ``"a / b"``, ``"+ a / b"`` or ``"- a / b"``.
        """
        if self.is_whole:
            return self.numerator

        magnitude = f"{abs(self.numerator)} / {self.denominator}"
        if self.numerator < 0:
            return f"- {magnitude}"
        if include_plus:
            return f"+ {magnitude}"
        return magnitude
