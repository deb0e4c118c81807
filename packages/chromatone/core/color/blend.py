"""Blending colors in HCT and CAM16-UCS."""

from __future__ import annotations

import logging

from chromatone.core.color.cam16 import Cam16
from chromatone.core.color.color_utils import lstar_from_argb
from chromatone.core.color.hct import Hct
from chromatone.core.utils.math import (
    difference_degrees,
    lerp,
    rotation_direction,
    sanitize_degrees_double,
)

logger = logging.getLogger(__name__)


def harmonize(design_color: int, source_color: int) -> int:
    """Shift a design color's hue toward a source color's hue.

    The rotation is half the hue difference, capped at 15 degrees, so the
    design color keeps its identity while fitting the theme.

    Args:
        design_color: ARGB color to adjust
        source_color: ARGB theme source color

    Returns:
        ARGB color with the design color's chroma and tone
    """
    from_hct = Hct.from_argb(design_color)
    to_hct = Hct.from_argb(source_color)
    rotation_degrees = min(difference_degrees(from_hct.hue, to_hct.hue) * 0.5, 15.0)
    output_hue = sanitize_degrees_double(
        from_hct.hue + rotation_degrees * rotation_direction(from_hct.hue, to_hct.hue)
    )
    return Hct.create(output_hue, from_hct.chroma, from_hct.tone).to_argb()


def hct_hue(from_argb: int, to_argb: int, amount: float) -> int:
    """Blend hue in CAM16-UCS, keeping the first color's chroma and tone."""
    ucs = cam16_ucs(from_argb, to_argb, amount)
    ucs_cam = Cam16.from_argb(ucs)
    from_cam = Cam16.from_argb(from_argb)
    return Hct.create(ucs_cam.hue, from_cam.chroma, lstar_from_argb(from_argb)).to_argb()


def cam16_ucs(from_argb: int, to_argb: int, amount: float) -> int:
    """Linear interpolation of two colors in CAM16-UCS.

    Args:
        from_argb: Start color
        to_argb: End color
        amount: 0.0 returns the start color, 1.0 the end color

    Returns:
        ARGB color
    """
    from_cam = Cam16.from_argb(from_argb)
    to_cam = Cam16.from_argb(to_argb)
    jstar = lerp(from_cam.jstar, to_cam.jstar, amount)
    astar = lerp(from_cam.astar, to_cam.astar, amount)
    bstar = lerp(from_cam.bstar, to_cam.bstar, amount)
    return Cam16.from_ucs(jstar, astar, bstar).to_argb()
