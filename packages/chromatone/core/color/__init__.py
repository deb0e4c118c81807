"""Color science collaborators: CAM16, HCT, contrast, palettes and temperature."""

from chromatone.core.color.blend import cam16_ucs, harmonize, hct_hue
from chromatone.core.color.cam16 import Cam16
from chromatone.core.color.color_utils import (
    argb_from_hex,
    argb_from_lstar,
    argb_from_rgb,
    hex_from_argb,
    lstar_from_argb,
    y_from_lstar,
)
from chromatone.core.color.contrast import (
    darker,
    darker_unsafe,
    lighter,
    lighter_unsafe,
    ratio_of_tones,
)
from chromatone.core.color.dislike import fix_if_disliked, is_disliked
from chromatone.core.color.hct import Hct
from chromatone.core.color.temperature import TemperatureCache
from chromatone.core.color.tonal_palette import KeyColor, TonalPalette
from chromatone.core.color.viewing_conditions import ViewingConditions

__all__ = [
    # Models
    "Cam16",
    "Hct",
    "ViewingConditions",
    # Palettes
    "KeyColor",
    "TemperatureCache",
    "TonalPalette",
    # Conversions
    "argb_from_hex",
    "argb_from_lstar",
    "argb_from_rgb",
    "hex_from_argb",
    "lstar_from_argb",
    "y_from_lstar",
    # Contrast
    "darker",
    "darker_unsafe",
    "lighter",
    "lighter_unsafe",
    "ratio_of_tones",
    # Adjustments
    "cam16_ucs",
    "fix_if_disliked",
    "harmonize",
    "hct_hue",
    "is_disliked",
]
