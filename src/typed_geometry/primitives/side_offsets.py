"""SideOffsets2D: per-side distances, used to shrink or grow boxes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic

from ..core.units import T, U


@dataclass(frozen=True)
class SideOffsets2D(Generic[T, U]):
    """Offsets in CSS order: top, right, bottom, left."""

    top: T
    right: T
    bottom: T
    left: T

    @classmethod
    def new_all_same(cls, value: T) -> SideOffsets2D[T, U]:
        return cls(value, value, value, value)

    @classmethod
    def zero(cls) -> SideOffsets2D[Any, U]:
        return cls(0, 0, 0, 0)

    def horizontal(self) -> T:
        """Sum of the left and right offsets."""
        return self.left + self.right

    def vertical(self) -> T:
        """Sum of the top and bottom offsets."""
        return self.top + self.bottom

    def __add__(self, other: SideOffsets2D[T, U]) -> SideOffsets2D[T, U]:
        if not isinstance(other, SideOffsets2D):
            return NotImplemented
        return SideOffsets2D(
            self.top + other.top,
            self.right + other.right,
            self.bottom + other.bottom,
            self.left + other.left,
        )
