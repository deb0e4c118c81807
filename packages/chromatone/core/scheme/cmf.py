"""Scheme built from one or two source colors with the 2026 CMF rules."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from chromatone.core.color.hct import Hct
from chromatone.core.color.tonal_palette import TonalPalette
from chromatone.core.dynamiccolor.color_specs import ColorSpecs
from chromatone.core.dynamiccolor.dynamic_scheme import DynamicScheme
from chromatone.core.dynamiccolor.enums import Platform, SpecVersion, Variant
from chromatone.core.scheme.factory import SourceColor, to_hct

logger = logging.getLogger(__name__)


def _tertiary_palette(sources: Sequence[Hct]) -> TonalPalette:
    seed = sources[0]
    second = sources[1] if len(sources) > 1 else seed
    if seed.to_argb() == second.to_argb():
        return TonalPalette.from_hue_and_chroma(seed.hue, seed.chroma * 0.75)
    return TonalPalette.from_hue_and_chroma(second.hue, second.chroma)


def scheme_cmf(
    source: SourceColor,
    is_dark: bool,
    contrast_level: float = 0.0,
    spec_version: SpecVersion = SpecVersion.SPEC_2026,
    platform: Platform = Platform.PHONE,
    additional_colors: Sequence[SourceColor] = (),
    color_specs: ColorSpecs | None = None,
) -> DynamicScheme:
    """Build a CMF scheme.

    Every palette derives from the seed's hue and chroma. The tertiary
    palette follows the second source color when one is given and differs
    from the seed.

    Args:
        source: Seed color
        is_dark: Dark mode flag
        contrast_level: -1 (reduced) to 1 (maximum)
        spec_version: Must be 2026
        platform: Device class
        additional_colors: Extra source colors; the first one drives tertiary
        color_specs: Registry to resolve against, the module default if None

    Returns:
        The assembled scheme

    Raises:
        ValueError: If ``spec_version`` is not 2026
    """
    if SpecVersion(spec_version) != SpecVersion.SPEC_2026:
        raise ValueError(
            f"The CMF scheme requires spec version 2026, got {SpecVersion(spec_version).value}"
        )

    sources = [to_hct(source), *(to_hct(color) for color in additional_colors)]
    seed = sources[0]
    hue, chroma = seed.hue, seed.chroma
    scheme = DynamicScheme(
        source_color_hct_list=sources,
        variant=Variant.CMF,
        is_dark=is_dark,
        contrast_level=contrast_level,
        primary_palette=TonalPalette.from_hue_and_chroma(hue, chroma),
        secondary_palette=TonalPalette.from_hue_and_chroma(hue, chroma * 0.5),
        tertiary_palette=_tertiary_palette(sources),
        neutral_palette=TonalPalette.from_hue_and_chroma(hue, chroma * 0.2),
        neutral_variant_palette=TonalPalette.from_hue_and_chroma(hue, chroma * 0.2),
        error_palette=TonalPalette.from_hue_and_chroma(23.0, max(chroma, 50.0)),
        platform=platform,
        spec_version=SpecVersion.SPEC_2026,
        color_specs=color_specs,
    )
    logger.debug(f"Created cmf scheme from {seed} with {len(sources)} source color(s)")
    return scheme
