"""Detection and repair of universally disliked colors.

Dark yellow-greens read as biological waste and rot; lightening them is
enough to make them acceptable.
"""

from __future__ import annotations

import logging

from chromatone.core.color.hct import Hct
from chromatone.core.utils.math import round_half_up

logger = logging.getLogger(__name__)


def is_disliked(hct: Hct) -> bool:
    """Whether a color falls in the disliked dark yellow-green region."""
    hue_passes = 90 <= round_half_up(hct.hue) <= 111
    chroma_passes = round_half_up(hct.chroma) > 16
    tone_passes = round_half_up(hct.tone) < 65
    return hue_passes and chroma_passes and tone_passes


def fix_if_disliked(hct: Hct) -> Hct:
    """Lighten a disliked color to tone 70; other colors pass through."""
    if is_disliked(hct):
        return Hct.create(hct.hue, hct.chroma, 70.0)
    return hct
