"""Serializers: a box travels as its pair of corner points, nothing more."""

from __future__ import annotations

import json
import logging
from typing import Any

import numpy as np

from ..box2d import Box2D
from ..core.validation import validate_box_data
from ..primitives.point import Point2D

logger = logging.getLogger(__name__)


def _plain(value: Any) -> Any:
    """NumPy scalar to the equivalent Python number."""
    if isinstance(value, np.generic):
        return value.item()
    return value


def box_to_pair(box: Box2D) -> tuple[tuple[Any, Any], tuple[Any, Any]]:
    """Serialize a box as ``((min.x, min.y), (max.x, max.y))``."""
    return (box.min.to_tuple(), box.max.to_tuple())


def box_from_pair(pair: Any) -> Box2D:
    """Rebuild a box from a ``(min, max)`` pair of ``(x, y)`` sequences.

    The corners are taken verbatim, so a negative box stays negative.
    """
    (min_x, min_y), (max_x, max_y) = validate_box_data(pair)
    return Box2D(Point2D(min_x, min_y), Point2D(max_x, max_y))


def box_to_list(box: Box2D) -> list[list[Any]]:
    """Serialize a box as nested lists of plain Python numbers."""
    return [
        [_plain(box.min.x), _plain(box.min.y)],
        [_plain(box.max.x), _plain(box.max.y)],
    ]


def serialize_box(box: Box2D) -> str:
    """Serialize a box as a JSON string ``[[x, y], [x, y]]``."""
    return json.dumps(box_to_list(box))


def deserialize_box(text: str | bytes) -> Box2D:
    """Parse a JSON string produced by ``serialize_box``."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Box JSON is not valid JSON: {exc.msg}.") from exc
    box = box_from_pair(data)
    logger.debug("Deserialized %s", box)
    return box
