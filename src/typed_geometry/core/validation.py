"""Input validation with clear error messages for serialized geometry."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np


def validate_coordinate(value: Any, where: str) -> Any:
    """Validate that a single coordinate is a real number.

    Returns the value unchanged. NaN and infinities are accepted.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, float, np.number)):
        raise TypeError(
            f"{where} must be a number, got {type(value).__name__} ({value!r})."
        )
    if isinstance(value, (complex, np.complexfloating)):
        raise TypeError(f"{where} must be a real number, got complex {value!r}.")
    return value


def validate_point_data(data: Any, where: str) -> tuple[Any, Any]:
    """Validate an ``(x, y)`` pair and return it as a tuple."""
    if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
        raise TypeError(
            f"{where} must be a sequence of two numbers [x, y], "
            f"got {type(data).__name__}."
        )
    if len(data) != 2:
        raise ValueError(
            f"{where} must have exactly 2 coordinates [x, y], got {len(data)}."
        )
    x = validate_coordinate(data[0], f"{where} x")
    y = validate_coordinate(data[1], f"{where} y")
    return (x, y)


def validate_box_data(data: Any) -> tuple[tuple[Any, Any], tuple[Any, Any]]:
    """Validate a serialized box: a pair of points ``[[x, y], [x, y]]``.

    The corners are not required to be ordered; negative boxes are valid.
    """
    if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
        raise TypeError(
            f"A box must be a sequence of two points [min, max], "
            f"got {type(data).__name__}."
        )
    if len(data) != 2:
        raise ValueError(
            f"A box must have exactly 2 points [min, max], got {len(data)}."
        )
    return (
        validate_point_data(data[0], "Box min"),
        validate_point_data(data[1], "Box max"),
    )
