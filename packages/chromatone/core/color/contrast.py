"""WCAG-style contrast ratios expressed in tone (L*).

Ratios range from 1 (no contrast) to 21 (black on white). ``lighter`` and
``darker`` return None when the requested ratio cannot be reached; their
``_unsafe`` counterparts fall back to white and black.
"""

from __future__ import annotations

import logging

from chromatone.core.color.color_utils import lstar_from_y, y_from_lstar

logger = logging.getLogger(__name__)

RATIO_MIN = 1.0
RATIO_MAX = 21.0
RATIO_30 = 3.0
RATIO_45 = 4.5
RATIO_70 = 7.0

# Computed ratios may fall short of the target by this much
CONTRAST_RATIO_EPSILON = 0.04

# Tone offset that keeps a gamut-mapped result on the right side of the ratio
LUMINANCE_GAMUT_MAP_TOLERANCE = 0.4


def ratio_of_ys(y1: float, y2: float) -> float:
    lighter_y, darker_y = (y1, y2) if y1 > y2 else (y2, y1)
    return (lighter_y + 5.0) / (darker_y + 5.0)


def ratio_of_tones(tone_a: float, tone_b: float) -> float:
    """Contrast ratio of two tones.

    Args:
        tone_a: Tone in [0, 100]
        tone_b: Tone in [0, 100]

    Returns:
        Ratio in [1, 21]

    Example:
        >>> ratio_of_tones(100.0, 0.0)
        21.0
    """
    return ratio_of_ys(y_from_lstar(tone_a), y_from_lstar(tone_b))


def lighter(tone: float, ratio: float) -> float | None:
    """Tone at least ``ratio`` lighter than ``tone``, or None if out of range."""
    if not 0.0 <= tone <= 100.0:
        return None
    dark_y = y_from_lstar(tone)
    light_y = ratio * (dark_y + 5.0) - 5.0
    if not 0.0 <= light_y <= 100.0:
        return None
    real_contrast = ratio_of_ys(light_y, dark_y)
    delta = abs(real_contrast - ratio)
    if real_contrast < ratio and delta > CONTRAST_RATIO_EPSILON:
        return None
    value = lstar_from_y(light_y) + LUMINANCE_GAMUT_MAP_TOLERANCE
    if not 0.0 <= value <= 100.0:
        return None
    return value


def darker(tone: float, ratio: float) -> float | None:
    """Tone at least ``ratio`` darker than ``tone``, or None if out of range."""
    if not 0.0 <= tone <= 100.0:
        return None
    light_y = y_from_lstar(tone)
    dark_y = (light_y + 5.0) / ratio - 5.0
    if not 0.0 <= dark_y <= 100.0:
        return None
    real_contrast = ratio_of_ys(light_y, dark_y)
    delta = abs(real_contrast - ratio)
    if real_contrast < ratio and delta > CONTRAST_RATIO_EPSILON:
        return None
    value = lstar_from_y(dark_y) - LUMINANCE_GAMUT_MAP_TOLERANCE
    if not 0.0 <= value <= 100.0:
        return None
    return value


def lighter_unsafe(tone: float, ratio: float) -> float:
    """Like ``lighter`` but returns 100 when the ratio is unreachable."""
    result = lighter(tone, ratio)
    return 100.0 if result is None else result


def darker_unsafe(tone: float, ratio: float) -> float:
    """Like ``darker`` but returns 0 when the ratio is unreachable."""
    result = darker(tone, ratio)
    return 0.0 if result is None else result
