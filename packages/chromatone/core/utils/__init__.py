"""Shared utilities for Chromatone."""

from chromatone.core.utils.json import read_json
from chromatone.core.utils.math import (
    clamp,
    difference_degrees,
    lerp,
    matrix_multiply,
    rotation_direction,
    round_half_up,
    sanitize_degrees_double,
    sanitize_degrees_int,
    signum,
)

__all__ = [
    "clamp",
    "difference_degrees",
    "lerp",
    "matrix_multiply",
    "read_json",
    "rotation_direction",
    "round_half_up",
    "sanitize_degrees_double",
    "sanitize_degrees_int",
    "signum",
]
