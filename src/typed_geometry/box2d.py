"""Box2D: an axis-aligned rectangle stored as its min and max corners.

Boxes are immutable values. Nothing checks that ``min <= max`` at
construction: a box whose max is below its min on some axis is "negative"
and is the normal result of intersecting two disjoint boxes. Callers chain
set operations freely and test ``is_negative()`` once at the end.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic

from .core import num
from .core.units import Dst, Src, T, U, UnknownUnit
from .primitives.point import Point2D
from .primitives.rect import Rect
from .primitives.scale import Scale
from .primitives.side_offsets import SideOffsets2D
from .primitives.size import Size2D
from .primitives.vector import Vector2D

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Box2D(Generic[T, U]):
    """An axis-aligned box between two corner points.

    Attributes
    ----------
    min : Point2D
        Corner with the smallest coordinates of a well-formed box.
    max : Point2D
        Corner with the largest coordinates of a well-formed box.
    """

    min: Point2D[T, U]
    max: Point2D[T, U]

    # -- construction ---------------------------------------------------

    @classmethod
    def zero(cls) -> Box2D[Any, U]:
        """A box with both corners at the origin."""
        return cls(Point2D.zero(), Point2D.zero())

    @classmethod
    def from_size(cls, size: Size2D[T, U]) -> Box2D[T, U]:
        """A box of the given size with its min corner at the origin."""
        return cls(Point2D.zero(), size.to_vector().to_point())

    @classmethod
    def from_points(cls, points: Iterable[Point2D[T, U]]) -> Box2D[T, U]:
        """The smallest box containing all of ``points``.

        Fewer than two points cannot span an area, so zero or one point
        gives ``Box2D.zero()``.
        """
        it = iter(points)
        first = next(it, None)
        if first is None:
            return cls.zero()
        second = next(it, None)
        if second is None:
            return cls.zero()

        min_x = max_x = first.x
        min_y = max_y = first.y
        for p in (second, *it):
            if p.x < min_x:
                min_x = p.x
            if p.x > max_x:
                max_x = p.x
            if p.y < min_y:
                min_y = p.y
            if p.y > max_y:
                max_y = p.y
        return cls(Point2D(min_x, min_y), Point2D(max_x, max_y))

    @classmethod
    def from_untyped(cls, box: Box2D[T, UnknownUnit]) -> Box2D[T, U]:
        """Tag a unitless box with a unit."""
        return cls(Point2D.from_untyped(box.min), Point2D.from_untyped(box.max))

    def to_untyped(self) -> Box2D[T, UnknownUnit]:
        """Drop the unit, keeping the coordinates."""
        return Box2D(self.min.to_untyped(), self.max.to_untyped())

    # -- predicates -----------------------------------------------------

    def is_empty(self) -> bool:
        """True if the box has zero extent along either axis."""
        return self.min.x == self.max.x or self.min.y == self.max.y

    def is_negative(self) -> bool:
        """True if max is below min on either axis.

        Negative boxes are usually treated as empty. Intersecting two boxes
        that do not overlap produces one.
        """
        return self.max.x < self.min.x or self.max.y < self.min.y

    def is_empty_or_negative(self) -> bool:
        return self.max.x <= self.min.x or self.max.y <= self.min.y

    # -- metrics --------------------------------------------------------

    def size(self) -> Size2D[T, U]:
        """``max - min`` as a size; negative components for negative boxes."""
        return (self.max - self.min).to_size()

    def area(self) -> T:
        size = self.size()
        return size.width * size.height

    def center(self) -> Point2D[T, U]:
        """Midpoint of the two corners; truncated for integer coordinates."""
        return (self.min + self.max.to_vector()) / 2

    def to_rect(self) -> Rect[T, U]:
        return Rect(origin=self.min, size=self.size())

    def to_tuple(self) -> tuple[Point2D[T, U], Point2D[T, U]]:
        return (self.min, self.max)

    # -- set algebra ----------------------------------------------------

    def intersects(self, other: Box2D[T, U]) -> bool:
        """True if the interiors overlap. Boxes that only touch do not intersect."""
        return (
            self.min.x < other.max.x
            and self.max.x > other.min.x
            and self.min.y < other.max.y
            and self.max.y > other.min.y
        )

    def intersection(self, other: Box2D[T, U]) -> Box2D[T, U]:
        """The overlapping region, which is a negative box if there is none."""
        return Box2D(
            Point2D(max(self.min.x, other.min.x), max(self.min.y, other.min.y)),
            Point2D(min(self.max.x, other.max.x), min(self.max.y, other.max.y)),
        )

    def try_intersection(self, other: Box2D[T, U]) -> Box2D[T, U] | None:
        """The overlapping region, or None if it is negative.

        Boxes sharing only an edge yield a zero-area intersection, not None.
        """
        intersection = self.intersection(other)
        if intersection.is_negative():
            return None
        return intersection

    def union(self, other: Box2D[T, U]) -> Box2D[T, U]:
        """The smallest box enclosing both.

        Only meaningful for well-formed boxes; a negative operand can pull
        the result inside the other box.
        """
        return Box2D(
            Point2D(min(self.min.x, other.min.x), min(self.min.y, other.min.y)),
            Point2D(max(self.max.x, other.max.x), max(self.max.y, other.max.y)),
        )

    def contains(self, point: Point2D[T, U]) -> bool:
        """Half-open point membership.

        The x range includes min and excludes max; the y range excludes min
        and includes max.
        """
        return (
            self.min.x <= point.x < self.max.x
            and self.min.y < point.y <= self.max.y
        )

    def contains_box(self, other: Box2D[T, U]) -> bool:
        """True if ``other`` lies entirely inside this box.

        An empty box is contained in every box, including empty ones.
        """
        return other.is_empty() or (
            self.min.x <= other.min.x
            and other.max.x <= self.max.x
            and self.min.y <= other.min.y
            and other.max.y <= self.max.y
        )

    # -- affine operations ----------------------------------------------

    def translate(self, by: Vector2D[T, U]) -> Box2D[T, U]:
        return Box2D(self.min + by, self.max + by)

    def scale(self, x: Any, y: Any) -> Box2D[T, U]:
        """Multiply each corner by ``x`` horizontally and ``y`` vertically."""
        return Box2D(
            Point2D(self.min.x * x, self.min.y * y),
            Point2D(self.max.x * x, self.max.y * y),
        )

    def inflate(self, width: T, height: T) -> Box2D[T, U]:
        """Grow the box by ``width`` on the left and right, ``height`` on top and bottom."""
        return Box2D(
            Point2D(self.min.x - width, self.min.y - height),
            Point2D(self.max.x + width, self.max.y + height),
        )

    def inner_box(self, offsets: SideOffsets2D[T, U]) -> Box2D[T, U]:
        """Shrink each side by the matching offset.

        The offsets must not exceed the box's extent on either axis.
        """
        b = Box2D(
            self.min + Vector2D(offsets.left, offsets.top),
            self.max - Vector2D(offsets.right, offsets.bottom),
        )
        size = b.size()
        assert size.width >= 0, f"inner_box offsets exceed box width: {b}"
        assert size.height >= 0, f"inner_box offsets exceed box height: {b}"
        return b

    def outer_box(self, offsets: SideOffsets2D[T, U]) -> Box2D[T, U]:
        """Grow each side by the matching offset."""
        b = Box2D(
            self.min - Vector2D(offsets.left, offsets.top),
            self.max + Vector2D(offsets.right, offsets.bottom),
        )
        size = b.size()
        assert size.width >= 0, f"outer_box produced a negative width: {b}"
        assert size.height >= 0, f"outer_box produced a negative height: {b}"
        return b

    def lerp(self, other: Box2D[T, U], t: Any) -> Box2D[T, U]:
        """Interpolate both corners; ``t`` is expected in [0, 1] but not checked."""
        return Box2D(self.min.lerp(other.min, t), self.max.lerp(other.max, t))

    def __mul__(self, scale: Any) -> Box2D:
        # Multiplying by Scale[T, Src, Dst] moves the box into Dst units.
        return Box2D(self.min * scale, self.max * scale)

    def __truediv__(self, scale: Any) -> Box2D:
        return Box2D(self.min / scale, self.max / scale)

    def scale_by(self, scale: Scale[T, Src, Dst]) -> Box2D[T, Dst]:
        """Typed spelling of ``box * scale`` for unit-changing scales."""
        return self * scale

    def unscale_by(self, scale: Scale[T, Src, Dst]) -> Box2D[T, Src]:
        """Typed spelling of ``box / scale``: back from ``Dst`` to ``Src`` units."""
        return self / scale

    # -- rounding -------------------------------------------------------

    def round(self) -> Box2D[T, U]:
        """Round both corners to the nearest integer, halves away from zero.

        Apply any translation before rounding to avoid pixel rounding errors.
        """
        return Box2D(self.min.round(), self.max.round())

    def round_in(self) -> Box2D[T, U]:
        """Round to integer coordinates so that the result lies inside this box.

        A box spanning less than one unit can come out negative.
        """
        return Box2D(self.min.ceil(), self.max.floor())

    def round_out(self) -> Box2D[T, U]:
        """Round to integer coordinates so that the result encloses this box."""
        return Box2D(self.min.floor(), self.max.ceil())

    # -- numeric conversion ---------------------------------------------

    def cast(self, dtype: Any) -> Box2D[Any, U]:
        """Convert every coordinate to ``dtype``, keeping the unit.

        Float to integer truncates toward zero, which is often not what
        geometry wants: consider round(), round_in() or round_out() first.
        Raises ValueError if a coordinate cannot be represented.
        """
        return Box2D(self.min.cast(dtype), self.max.cast(dtype))

    def try_cast(self, dtype: Any) -> Box2D[Any, U] | None:
        """Like cast(), but returns None if any coordinate cannot be represented."""
        lo = self.min.try_cast(dtype)
        hi = self.max.try_cast(dtype)
        if lo is None or hi is None:
            logger.debug("Box %s cannot be represented as %s", self, num.resolve_dtype(dtype))
            return None
        return Box2D(lo, hi)

    def to_f32(self) -> Box2D[Any, U]:
        return self.cast(num.CAST_DTYPES["f32"])

    def to_f64(self) -> Box2D[Any, U]:
        return self.cast(num.CAST_DTYPES["f64"])

    def to_u32(self) -> Box2D[Any, U]:
        """Cast to uint32, truncating decimals if any."""
        return self.cast(num.CAST_DTYPES["u32"])

    def to_i32(self) -> Box2D[Any, U]:
        """Cast to int32, truncating decimals if any."""
        return self.cast(num.CAST_DTYPES["i32"])

    def to_i64(self) -> Box2D[Any, U]:
        """Cast to int64, truncating decimals if any."""
        return self.cast(num.CAST_DTYPES["i64"])

    def to_usize(self) -> Box2D[Any, U]:
        """Cast to the platform's unsigned size type, truncating decimals if any."""
        return self.cast(num.CAST_DTYPES["usize"])

    def __str__(self) -> str:
        return f"Box2D({self.min}, {self.max})"
