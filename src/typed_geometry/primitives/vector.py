"""Vector2D: a displacement in 2D space."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic

from ..core import num
from ..core.units import T, U
from .scale import factor_of

if TYPE_CHECKING:
    from .point import Point2D
    from .size import Size2D


@dataclass(frozen=True)
class Vector2D(Generic[T, U]):
    x: T
    y: T

    @classmethod
    def zero(cls) -> Vector2D[Any, U]:
        return cls(0, 0)

    def to_point(self) -> Point2D[T, U]:
        from .point import Point2D

        return Point2D(self.x, self.y)

    def to_size(self) -> Size2D[T, U]:
        from .size import Size2D

        return Size2D(self.x, self.y)

    def to_tuple(self) -> tuple[T, T]:
        return (self.x, self.y)

    def __add__(self, other: Vector2D[T, U]) -> Vector2D[T, U]:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D[T, U]) -> Vector2D[T, U]:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2D[T, U]:
        return Vector2D(-self.x, -self.y)

    def __mul__(self, scale: Any) -> Vector2D:
        factor = factor_of(scale)
        return Vector2D(self.x * factor, self.y * factor)

    def __truediv__(self, scale: Any) -> Vector2D:
        factor = factor_of(scale)
        return Vector2D(num.div(self.x, factor), num.div(self.y, factor))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def vec2(x: T, y: T) -> Vector2D[T, Any]:
    """Shorthand for ``Vector2D(x, y)``."""
    return Vector2D(x, y)
