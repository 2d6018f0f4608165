"""Point2D: a position in 2D space."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic

from ..core import num
from ..core.units import T, U, UnknownUnit
from .scale import factor_of
from .vector import Vector2D


@dataclass(frozen=True)
class Point2D(Generic[T, U]):
    x: T
    y: T

    @classmethod
    def zero(cls) -> Point2D[Any, U]:
        return cls(0, 0)

    @classmethod
    def from_untyped(cls, point: Point2D[T, UnknownUnit]) -> Point2D[T, U]:
        """Tag a unitless point with a unit."""
        return cls(point.x, point.y)

    def to_untyped(self) -> Point2D[T, UnknownUnit]:
        """Drop the unit, keeping the coordinates."""
        return Point2D(self.x, self.y)

    def to_vector(self) -> Vector2D[T, U]:
        return Vector2D(self.x, self.y)

    def to_tuple(self) -> tuple[T, T]:
        return (self.x, self.y)

    def __add__(self, other: Vector2D[T, U]) -> Point2D[T, U]:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        # point - point is a displacement, point - vector is another point.
        if isinstance(other, Point2D):
            return Vector2D(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector2D):
            return Point2D(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, scale: Any) -> Point2D:
        factor = factor_of(scale)
        return Point2D(self.x * factor, self.y * factor)

    def __truediv__(self, scale: Any) -> Point2D:
        factor = factor_of(scale)
        return Point2D(num.div(self.x, factor), num.div(self.y, factor))

    def round(self) -> Point2D[T, U]:
        """Round each coordinate to the nearest integer, halves away from zero."""
        return Point2D(num.round_half_away(self.x), num.round_half_away(self.y))

    def floor(self) -> Point2D[T, U]:
        return Point2D(num.floor(self.x), num.floor(self.y))

    def ceil(self) -> Point2D[T, U]:
        return Point2D(num.ceil(self.x), num.ceil(self.y))

    def lerp(self, other: Point2D[T, U], t: Any) -> Point2D[T, U]:
        """Linear interpolation; ``t`` is expected in [0, 1] but not checked."""
        one_t = 1 - t
        return Point2D(
            one_t * self.x + t * other.x,
            one_t * self.y + t * other.y,
        )

    def cast(self, dtype: Any) -> Point2D[Any, U]:
        return Point2D(num.cast(self.x, dtype), num.cast(self.y, dtype))

    def try_cast(self, dtype: Any) -> Point2D[Any, U] | None:
        x = num.try_cast(self.x, dtype)
        y = num.try_cast(self.y, dtype)
        if x is None or y is None:
            return None
        return Point2D(x, y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def point2(x: T, y: T) -> Point2D[T, Any]:
    """Shorthand for ``Point2D(x, y)``."""
    return Point2D(x, y)
