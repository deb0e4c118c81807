"""Math utilities for common operations."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)

Vector3 = tuple[float, float, float]


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def lerp(a: Number, b: Number, t: float) -> float:
    """Linear interpolation between a and b.

    Args:
        a: Start value
        b: End value
        t: Interpolation factor [0, 1]

    Returns:
        Interpolated value
    """
    return float(a) + (float(b) - float(a)) * t


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Python's built-in round() uses banker's rounding, which would shift
    tone and channel boundaries (e.g. round(58.5) == 58).

    Example:
        >>> round_half_up(58.5)
        59
        >>> round_half_up(-0.5)
        -1
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def signum(value: float) -> float:
    """Sign of value as -1.0, 0.0 or 1.0."""
    if value < 0:
        return -1.0
    if value > 0:
        return 1.0
    return 0.0


def sanitize_degrees_int(degrees: int) -> int:
    """Wrap integer degrees into [0, 360)."""
    return degrees % 360


def sanitize_degrees_double(degrees: float) -> float:
    """Wrap degrees into [0, 360).

    Args:
        degrees: Angle in degrees, any sign or magnitude

    Returns:
        Equivalent angle in [0, 360)
    """
    degrees = math.fmod(degrees, 360.0)
    if degrees < 0:
        degrees += 360.0
    return degrees


def rotation_direction(from_degrees: float, to_degrees: float) -> float:
    """Sign of the shortest rotation from one angle to another.

    Returns:
        1.0 for counter-clockwise (increasing), -1.0 otherwise
    """
    increasing_difference = sanitize_degrees_double(to_degrees - from_degrees)
    return 1.0 if increasing_difference <= 180.0 else -1.0


def difference_degrees(a: float, b: float) -> float:
    """Distance of two points on a circle, in degrees."""
    return 180.0 - abs(abs(a - b) - 180.0)


def matrix_multiply(row: Sequence[float], matrix: Sequence[Sequence[float]]) -> Vector3:
    """Multiply a 3x3 matrix by a 3-vector.

    Args:
        row: Input vector
        matrix: Row-major 3x3 matrix

    Returns:
        Product as a plain float triple
    """
    result = np.asarray(matrix, dtype=np.float64) @ np.asarray(row, dtype=np.float64)
    return (float(result[0]), float(result[1]), float(result[2]))
