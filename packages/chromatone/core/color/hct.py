"""HCT: hue and chroma from CAM16, tone from L*.

HCT makes contrast a function of tone alone: any two colors whose tones
differ by 40 reach a 3.0 contrast ratio, and 50 reaches 4.5.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, field

from chromatone.core.color.cam16 import Cam16
from chromatone.core.color.color_utils import hex_from_argb, lstar_from_argb, lstar_from_y
from chromatone.core.color.hct_solver import solve_to_argb
from chromatone.core.color.viewing_conditions import ViewingConditions

logger = logging.getLogger(__name__)

_CACHE_SIZE = 16384


@dataclass(frozen=True)
class Hct:
    """An sRGB color described by hue, chroma and tone.

    Instances are value objects: equality and hashing use the ARGB color
    only. Build them with ``Hct.create`` or ``Hct.from_argb``; the requested
    chroma is reduced to what the sRGB gamut can hold at that hue and tone.

    Example:
        >>> color = Hct.create(67.0, 20.0, 52.0)
        >>> hex(color.to_argb())
        '0xff967655'
    """

    argb: int
    hue: float = field(compare=False)
    chroma: float = field(compare=False)
    tone: float = field(compare=False)

    @classmethod
    def create(cls, hue: float, chroma: float, tone: float) -> Hct:
        """Closest in-gamut color to the requested hue, chroma and tone."""
        return _hct_from_argb(_solve(hue, chroma, tone))

    @classmethod
    def from_argb(cls, argb: int) -> Hct:
        return _hct_from_argb(argb)

    def to_argb(self) -> int:
        return self.argb

    def with_hue(self, hue: float) -> Hct:
        return Hct.create(hue, self.chroma, self.tone)

    def with_chroma(self, chroma: float) -> Hct:
        return Hct.create(self.hue, chroma, self.tone)

    def with_tone(self, tone: float) -> Hct:
        return Hct.create(self.hue, self.chroma, tone)

    def in_viewing_conditions(self, vc: ViewingConditions) -> Hct:
        """Translate this color into different viewing conditions.

        Colors look different under different conditions; this returns the
        color that, seen in the default conditions, appears as this color
        does when seen in ``vc``.
        """
        cam16 = Cam16.from_argb(self.argb)
        x, y, z = cam16.xyz_in_viewing_conditions(vc)
        recast = Cam16.from_xyz_in_viewing_conditions(x, y, z, ViewingConditions.default())
        return Hct.create(recast.hue, recast.chroma, lstar_from_y(y))

    @staticmethod
    def is_blue(hue: float) -> bool:
        return 250.0 <= hue < 270.0

    @staticmethod
    def is_yellow(hue: float) -> bool:
        return 105.0 <= hue < 125.0

    @staticmethod
    def is_cyan(hue: float) -> bool:
        return 170.0 <= hue < 207.0

    def __str__(self) -> str:
        return f"HCT({self.hue:.0f}, {self.chroma:.0f}, {self.tone:.0f}) {hex_from_argb(self.argb)}"


@functools.lru_cache(maxsize=_CACHE_SIZE)
def _solve(hue: float, chroma: float, tone: float) -> int:
    return solve_to_argb(hue, chroma, tone)


@functools.lru_cache(maxsize=_CACHE_SIZE)
def _hct_from_argb(argb: int) -> Hct:
    cam = Cam16.from_argb(argb)
    return Hct(argb=argb, hue=cam.hue, chroma=cam.chroma, tone=lstar_from_argb(argb))
