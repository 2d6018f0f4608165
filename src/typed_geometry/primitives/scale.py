"""Scale: a scalar factor that converts values from one unit to another."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic

from ..core.units import Dst, Src, T

if TYPE_CHECKING:
    from .point import Point2D
    from .size import Size2D
    from .vector import Vector2D


@dataclass(frozen=True)
class Scale(Generic[T, Src, Dst]):
    """Multiplying a ``Src`` value by this factor yields a ``Dst`` value.

    Dividing a ``Dst`` value by it goes back to ``Src``.
    """

    factor: T

    @classmethod
    def identity(cls) -> Scale[Any, Src, Src]:
        return cls(1)

    def get(self) -> T:
        return self.factor

    def is_identity(self) -> bool:
        return self.factor == 1

    def inverse(self) -> Scale[T, Dst, Src]:
        # Always true division: the reciprocal of an integer factor is fractional.
        return Scale(1 / self.factor)

    def transform_point(self, point: Point2D[T, Src]) -> Point2D[T, Dst]:
        return point * self

    def transform_vector(self, vector: Vector2D[T, Src]) -> Vector2D[T, Dst]:
        return vector * self

    def transform_size(self, size: Size2D[T, Src]) -> Size2D[T, Dst]:
        return size * self

    def __mul__(self, other: Scale[T, Dst, Any]) -> Scale[T, Src, Any]:
        if not isinstance(other, Scale):
            return NotImplemented
        return Scale(self.factor * other.factor)

    def __str__(self) -> str:
        return f"Scale({self.factor})"


def factor_of(value: Any) -> Any:
    """The plain scalar behind ``value``, which may be a Scale or a number."""
    if isinstance(value, Scale):
        return value.factor
    return value
