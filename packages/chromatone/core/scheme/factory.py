"""Scheme factories: one per variant, all built on ``create_scheme``."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from chromatone.core.color.hct import Hct
from chromatone.core.color.tonal_palette import TonalPalette
from chromatone.core.config.models import SchemeConfig
from chromatone.core.dynamiccolor.color_specs import COLOR_SPECS, ColorSpecs
from chromatone.core.dynamiccolor.dynamic_scheme import DynamicScheme
from chromatone.core.dynamiccolor.enums import Platform, SpecVersion, Variant
from chromatone.core.utils.logging import get_logger


SourceColor = Hct | int
PaletteGenerator = Callable[[Variant, Hct, bool, Platform, float], TonalPalette]


def to_hct(color: SourceColor) -> Hct:
    """Accept an HCT color or an ARGB integer."""
    if isinstance(color, Hct):
        return color
    return Hct.from_argb(color)


def create_scheme(
    source: SourceColor,
    variant: Variant,
    is_dark: bool,
    contrast_level: float = 0.0,
    spec_version: SpecVersion = SpecVersion.SPEC_2021,
    platform: Platform = Platform.PHONE,
    additional_colors: Sequence[SourceColor] = (),
    color_specs: ColorSpecs | None = None,
) -> DynamicScheme:
    """Build a scheme whose palettes come from the requested spec's generators.

    Args:
        source: Seed color
        variant: Theme style
        is_dark: Dark mode flag
        contrast_level: -1 (reduced) to 1 (maximum)
        spec_version: Spec whose palette generators are used; the scheme
            itself may resolve with an older spec (see
            ``DynamicScheme.maybe_fallback_spec_version``)
        platform: Device class
        additional_colors: Extra source colors, e.g. a second seed
        color_specs: Registry to resolve against, the module default if None

    Returns:
        The assembled scheme

    Raises:
        UnsupportedVariantError: If the version's palette generators lack the variant
    """
    variant = Variant(variant)
    if variant == Variant.CMF:
        from chromatone.core.scheme.cmf import scheme_cmf

        return scheme_cmf(
            source,
            is_dark,
            contrast_level,
            spec_version=spec_version,
            platform=platform,
            additional_colors=additional_colors,
            color_specs=color_specs,
        )

    registry = COLOR_SPECS if color_specs is None else color_specs
    spec = registry.get(spec_version)
    sources = [to_hct(source), *(to_hct(color) for color in additional_colors)]
    seed = sources[0]
    platform = Platform(platform)

    def palette(generator: PaletteGenerator) -> TonalPalette:
        return generator(variant, seed, is_dark, platform, contrast_level)

    scheme = DynamicScheme(
        source_color_hct_list=sources,
        variant=variant,
        is_dark=is_dark,
        contrast_level=contrast_level,
        primary_palette=palette(spec.get_primary_palette),
        secondary_palette=palette(spec.get_secondary_palette),
        tertiary_palette=palette(spec.get_tertiary_palette),
        neutral_palette=palette(spec.get_neutral_palette),
        neutral_variant_palette=palette(spec.get_neutral_variant_palette),
        error_palette=palette(spec.get_error_palette),
        platform=platform,
        spec_version=spec_version,
        color_specs=registry,
    )
    scheme_logger = get_logger(
        __name__, variant=variant.value, spec_version=scheme.spec_version.value
    )
    scheme_logger.debug(
        f"Created {variant.value} scheme from {seed} "
        f"(dark={is_dark}, contrast={contrast_level}, spec={scheme.spec_version.value})"
    )
    return scheme


def scheme_content(
    source: SourceColor,
    is_dark: bool,
    contrast_level: float = 0.0,
    **kwargs: Any,
) -> DynamicScheme:
    """Palettes stay close to the source color, even at high chroma."""
    return create_scheme(source, Variant.CONTENT, is_dark, contrast_level, **kwargs)


def scheme_expressive(
    source: SourceColor,
    is_dark: bool,
    contrast_level: float = 0.0,
    **kwargs: Any,
) -> DynamicScheme:
    """Playful theme; the source hue does not appear in the primary palette."""
    return create_scheme(source, Variant.EXPRESSIVE, is_dark, contrast_level, **kwargs)


def scheme_fidelity(
    source: SourceColor,
    is_dark: bool,
    contrast_level: float = 0.0,
    **kwargs: Any,
) -> DynamicScheme:
    """Like content, with a tertiary palette that is the source's complement."""
    return create_scheme(source, Variant.FIDELITY, is_dark, contrast_level, **kwargs)


def scheme_fruit_salad(
    source: SourceColor,
    is_dark: bool,
    contrast_level: float = 0.0,
    **kwargs: Any,
) -> DynamicScheme:
    return create_scheme(source, Variant.FRUIT_SALAD, is_dark, contrast_level, **kwargs)


def scheme_monochrome(
    source: SourceColor,
    is_dark: bool,
    contrast_level: float = 0.0,
    **kwargs: Any,
) -> DynamicScheme:
    """Grayscale theme."""
    return create_scheme(source, Variant.MONOCHROME, is_dark, contrast_level, **kwargs)


def scheme_neutral(
    source: SourceColor,
    is_dark: bool,
    contrast_level: float = 0.0,
    **kwargs: Any,
) -> DynamicScheme:
    """Nearly grayscale theme with a hint of the source hue."""
    return create_scheme(source, Variant.NEUTRAL, is_dark, contrast_level, **kwargs)


def scheme_rainbow(
    source: SourceColor,
    is_dark: bool,
    contrast_level: float = 0.0,
    **kwargs: Any,
) -> DynamicScheme:
    return create_scheme(source, Variant.RAINBOW, is_dark, contrast_level, **kwargs)


def scheme_tonal_spot(
    source: SourceColor,
    is_dark: bool,
    contrast_level: float = 0.0,
    **kwargs: Any,
) -> DynamicScheme:
    """Calm theme with low-chroma accents. The default Material style."""
    return create_scheme(source, Variant.TONAL_SPOT, is_dark, contrast_level, **kwargs)


def scheme_vibrant(
    source: SourceColor,
    is_dark: bool,
    contrast_level: float = 0.0,
    **kwargs: Any,
) -> DynamicScheme:
    """Loud theme; the primary palette runs at maximum chroma."""
    return create_scheme(source, Variant.VIBRANT, is_dark, contrast_level, **kwargs)


def scheme_from_config(
    config: SchemeConfig, color_specs: ColorSpecs | None = None
) -> DynamicScheme:
    """Build the scheme a validated ``SchemeConfig`` describes."""
    return create_scheme(
        config.source_argb,
        config.variant,
        config.is_dark,
        config.contrast_level,
        spec_version=config.spec_version,
        platform=config.platform,
        additional_colors=config.additional_argbs,
        color_specs=color_specs,
    )
