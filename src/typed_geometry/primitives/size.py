"""Size2D: a width and a height."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic

from ..core import num
from ..core.units import T, U
from .scale import factor_of

if TYPE_CHECKING:
    from .vector import Vector2D


@dataclass(frozen=True)
class Size2D(Generic[T, U]):
    width: T
    height: T

    @classmethod
    def zero(cls) -> Size2D[Any, U]:
        return cls(0, 0)

    def area(self) -> T:
        return self.width * self.height

    def is_empty_or_negative(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def to_vector(self) -> Vector2D[T, U]:
        from .vector import Vector2D

        return Vector2D(self.width, self.height)

    def to_tuple(self) -> tuple[T, T]:
        return (self.width, self.height)

    def __add__(self, other: Size2D[T, U]) -> Size2D[T, U]:
        if not isinstance(other, Size2D):
            return NotImplemented
        return Size2D(self.width + other.width, self.height + other.height)

    def __sub__(self, other: Size2D[T, U]) -> Size2D[T, U]:
        if not isinstance(other, Size2D):
            return NotImplemented
        return Size2D(self.width - other.width, self.height - other.height)

    def __mul__(self, scale: Any) -> Size2D:
        factor = factor_of(scale)
        return Size2D(self.width * factor, self.height * factor)

    def __truediv__(self, scale: Any) -> Size2D:
        factor = factor_of(scale)
        return Size2D(num.div(self.width, factor), num.div(self.height, factor))

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


def size2(width: T, height: T) -> Size2D[T, Any]:
    """Shorthand for ``Size2D(width, height)``."""
    return Size2D(width, height)
