"""Tonal palettes: one hue and chroma, every tone from 0 to 100."""

from __future__ import annotations

import functools
import logging
import threading

from chromatone.core.color.color_utils import (
    argb_from_rgb,
    blue_from_argb,
    green_from_argb,
    red_from_argb,
)
from chromatone.core.color.hct import Hct
from chromatone.core.utils.math import round_half_up

logger = logging.getLogger(__name__)


class KeyColor:
    """Finds the tone nearest 50 that can hold a requested chroma.

    Args:
        hue: Palette hue
        requested_chroma: Chroma the key color should reach
    """

    MAX_CHROMA_VALUE = 200.0

    def __init__(self, hue: float, requested_chroma: float) -> None:
        self.hue = hue
        self.requested_chroma = requested_chroma

    def create(self) -> Hct:
        """Binary search over tone for the key color.

        Returns:
            Key color at the chosen tone
        """
        pivot_tone = 50
        tone_step_size = 1
        epsilon = 0.01

        lower_tone = 0
        upper_tone = 100
        while lower_tone < upper_tone:
            mid_tone = (lower_tone + upper_tone) // 2
            is_ascending = self._max_chroma(mid_tone) < self._max_chroma(mid_tone + tone_step_size)
            sufficient_chroma = self._max_chroma(mid_tone) >= self.requested_chroma - epsilon

            if sufficient_chroma:
                # Move toward the pivot tone
                if abs(lower_tone - pivot_tone) < abs(upper_tone - pivot_tone):
                    upper_tone = mid_tone
                else:
                    if lower_tone == mid_tone:
                        return Hct.create(self.hue, self.requested_chroma, float(lower_tone))
                    lower_tone = mid_tone
            elif is_ascending:
                lower_tone = mid_tone + tone_step_size
            else:
                upper_tone = mid_tone

        return Hct.create(self.hue, self.requested_chroma, float(lower_tone))

    def _max_chroma(self, tone: int) -> float:
        return _max_chroma_at(self.hue, tone)


@functools.lru_cache(maxsize=4096)
def _max_chroma_at(hue: float, tone: int) -> float:
    return Hct.create(hue, KeyColor.MAX_CHROMA_VALUE, float(tone)).chroma


class TonalPalette:
    """A hue and chroma, with a cached color for each integer tone.

    Palettes compare and hash by their key color.

    Attributes:
        hue: Palette hue in degrees.
        chroma: Palette chroma.
        key_color: The color the palette was built around.
    """

    def __init__(self, hue: float, chroma: float, key_color: Hct) -> None:
        self.hue = hue
        self.chroma = chroma
        self.key_color = key_color
        self._cache: dict[int, int] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_argb(cls, argb: int) -> TonalPalette:
        return cls.from_hct(Hct.from_argb(argb))

    @classmethod
    def from_hct(cls, hct: Hct) -> TonalPalette:
        return cls(hct.hue, hct.chroma, hct)

    @classmethod
    def from_hue_and_chroma(cls, hue: float, chroma: float) -> TonalPalette:
        """Build a palette, searching for its key color."""
        return cls(hue, chroma, KeyColor(hue, chroma).create())

    def tone(self, tone: int) -> int:
        """ARGB of the palette at an integer tone.

        Tones 0 to 100 are cached. Tone 99 of a yellow palette averages tones
        98 and 100, since the gamut there jumps in chroma.

        Args:
            tone: Tone, usually in [0, 100]

        Returns:
            ARGB color
        """
        if not 0 <= tone <= 100:
            return Hct.create(self.hue, self.chroma, float(tone)).to_argb()

        cached = self._cache.get(tone)
        if cached is not None:
            return cached

        if tone == 99 and Hct.is_yellow(self.hue):
            color = _average_argb(self.tone(98), self.tone(100))
        else:
            color = Hct.create(self.hue, self.chroma, float(tone)).to_argb()

        with self._lock:
            return self._cache.setdefault(tone, color)

    def get_hct(self, tone: float) -> Hct:
        return Hct.create(self.hue, self.chroma, tone)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TonalPalette):
            return NotImplemented
        return self.key_color == other.key_color

    def __hash__(self) -> int:
        return hash(self.key_color)

    def __repr__(self) -> str:
        return f"TonalPalette(hue={self.hue:.2f}, chroma={self.chroma:.2f}, key_color={self.key_color})"


def _average_argb(argb1: int, argb2: int) -> int:
    red = round_half_up((red_from_argb(argb1) + red_from_argb(argb2)) / 2.0)
    green = round_half_up((green_from_argb(argb1) + green_from_argb(argb2)) / 2.0)
    blue = round_half_up((blue_from_argb(argb1) + blue_from_argb(argb2)) / 2.0)
    return argb_from_rgb(red, green, blue)
