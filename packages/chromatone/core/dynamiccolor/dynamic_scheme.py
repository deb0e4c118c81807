"""Immutable theme inputs that color roles resolve against."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from chromatone.core.color.hct import Hct
from chromatone.core.color.tonal_palette import TonalPalette
from chromatone.core.dynamiccolor.enums import Platform, SpecVersion, Variant
from chromatone.core.utils.math import sanitize_degrees_double

if TYPE_CHECKING:
    from chromatone.core.dynamiccolor.color_specs import ColorSpecs
    from chromatone.core.dynamiccolor.dynamic_color import DynamicColor

logger = logging.getLogger(__name__)

# Variants whose 2026 rules are not defined yet resolve with 2025 rules.
_SPEC_2025_VARIANTS = frozenset(
    {Variant.EXPRESSIVE, Variant.VIBRANT, Variant.TONAL_SPOT, Variant.NEUTRAL}
)


def _argb_property(role: str) -> property:
    def getter(self: DynamicScheme) -> int | None:
        from chromatone.core.dynamiccolor.material_dynamic_colors import MaterialDynamicColors

        color = getattr(MaterialDynamicColors(self.spec_version, self.color_specs), role)
        return None if color is None else color.get_argb(self)

    getter.__doc__ = f"ARGB of the {role} role, or None if it does not exist for this spec."
    return property(getter)


@dataclass(frozen=True)
class DynamicScheme:
    """All inputs needed to resolve every color role of one theme.

    Attributes:
        source_color_hct_list: Source colors; the first one is the seed
        variant: Theme style the palettes were built for
        is_dark: Dark mode flag
        contrast_level: -1 (reduced) to 1 (maximum); 0 is default contrast
        primary_palette: Palette for primary roles
        secondary_palette: Palette for secondary roles
        tertiary_palette: Palette for tertiary roles
        neutral_palette: Palette for surfaces and backgrounds
        neutral_variant_palette: Palette for outlines and surface variants
        error_palette: Palette for error roles
        platform: Device class
        spec_version: Resolution ruleset, normalized for the variant
        color_specs: Registry of resolution strategies; the module default
            when omitted

    The scheme memoizes resolved tones and HCTs per role object. Those caches
    are excluded from equality and hashing, and copies made with
    ``from_scheme`` start empty.

    Example:
        >>> palette = TonalPalette.from_hue_and_chroma(270.0, 36.0)
        >>> scheme = DynamicScheme(
        ...     (Hct.from_argb(0xFF6750A4),), Variant.TONAL_SPOT, False, 0.0,
        ...     palette, palette, palette, palette, palette, palette,
        ... )
    """

    source_color_hct_list: Sequence[Hct]
    variant: Variant
    is_dark: bool
    contrast_level: float
    primary_palette: TonalPalette
    secondary_palette: TonalPalette
    tertiary_palette: TonalPalette
    neutral_palette: TonalPalette
    neutral_variant_palette: TonalPalette
    error_palette: TonalPalette
    platform: Platform = Platform.PHONE
    spec_version: SpecVersion = SpecVersion.SPEC_2021
    color_specs: ColorSpecs = field(default=None, compare=False, repr=False)  # type: ignore[assignment]
    _tones: dict[DynamicColor, float] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )
    _hcts: dict[DynamicColor, Hct] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        sources = (
            (self.source_color_hct_list,)
            if isinstance(self.source_color_hct_list, Hct)
            else tuple(self.source_color_hct_list)
        )
        if not sources:
            raise ValueError("DynamicScheme needs at least one source color")
        if not -1.0 <= self.contrast_level <= 1.0:
            raise ValueError(f"contrast_level must be in [-1, 1], got {self.contrast_level}")
        object.__setattr__(self, "source_color_hct_list", sources)
        object.__setattr__(self, "variant", Variant(self.variant))
        object.__setattr__(self, "platform", Platform(self.platform))

        requested = SpecVersion(self.spec_version)
        spec_version = self.maybe_fallback_spec_version(requested, self.variant)
        if spec_version != requested:
            logger.debug(
                f"Variant {self.variant.value} has no {requested.value} rules, "
                f"using {spec_version.value}"
            )
        object.__setattr__(self, "spec_version", spec_version)

        if self.color_specs is None:
            from chromatone.core.dynamiccolor.color_specs import COLOR_SPECS

            object.__setattr__(self, "color_specs", COLOR_SPECS)

    @staticmethod
    def maybe_fallback_spec_version(spec_version: SpecVersion, variant: Variant) -> SpecVersion:
        """Newest spec version that defines rules for the variant."""
        if variant == Variant.CMF:
            return spec_version
        if variant in _SPEC_2025_VARIANTS:
            return min(spec_version, SpecVersion.SPEC_2025)
        return SpecVersion.SPEC_2021

    @classmethod
    def from_scheme(
        cls, other: DynamicScheme, is_dark: bool, contrast_level: float | None = None
    ) -> DynamicScheme:
        """Copy of ``other`` with a different mode and optionally contrast level."""
        return dataclasses.replace(
            other,
            is_dark=is_dark,
            contrast_level=other.contrast_level if contrast_level is None else contrast_level,
        )

    @property
    def source_color_hct(self) -> Hct:
        return self.source_color_hct_list[0]

    @property
    def source_color_argb(self) -> int:
        return self.source_color_hct.to_argb()

    def get_hct(self, dynamic_color: DynamicColor) -> Hct:
        return dynamic_color.get_hct(self)

    def get_argb(self, dynamic_color: DynamicColor) -> int:
        return dynamic_color.get_argb(self)

    @staticmethod
    def get_piecewise_value(
        source_color_hct: Hct, hue_breakpoints: Sequence[float], values: Sequence[float]
    ) -> float:
        """Value for the hue interval containing the source hue.

        ``values[i]`` applies to ``[hue_breakpoints[i], hue_breakpoints[i + 1])``.
        Falls back to the source hue when no interval matches.
        """
        size = min(len(hue_breakpoints) - 1, len(values))
        source_hue = source_color_hct.hue
        for i in range(max(size, 0)):
            if hue_breakpoints[i] <= source_hue < hue_breakpoints[i + 1]:
                return sanitize_degrees_double(values[i])
        return source_hue

    @staticmethod
    def get_rotated_hue(
        source_color_hct: Hct, hue_breakpoints: Sequence[float], rotations: Sequence[float]
    ) -> float:
        """Source hue rotated by the amount for its hue interval.

        Returns the source hue unchanged when it lies outside every interval
        or when there is not exactly one more breakpoint than rotations.
        """
        source_hue = source_color_hct.hue
        if len(hue_breakpoints) != len(rotations) + 1:
            return source_hue
        for i, rotation in enumerate(rotations):
            if hue_breakpoints[i] <= source_hue < hue_breakpoints[i + 1]:
                return sanitize_degrees_double(source_hue + rotation)
        return source_hue

    # Per-role ARGB accessors
    primary_palette_key_color = _argb_property("primary_palette_key_color")
    secondary_palette_key_color = _argb_property("secondary_palette_key_color")
    tertiary_palette_key_color = _argb_property("tertiary_palette_key_color")
    neutral_palette_key_color = _argb_property("neutral_palette_key_color")
    neutral_variant_palette_key_color = _argb_property("neutral_variant_palette_key_color")
    error_palette_key_color = _argb_property("error_palette_key_color")
    background = _argb_property("background")
    on_background = _argb_property("on_background")
    surface = _argb_property("surface")
    surface_dim = _argb_property("surface_dim")
    surface_bright = _argb_property("surface_bright")
    surface_container_lowest = _argb_property("surface_container_lowest")
    surface_container_low = _argb_property("surface_container_low")
    surface_container = _argb_property("surface_container")
    surface_container_high = _argb_property("surface_container_high")
    surface_container_highest = _argb_property("surface_container_highest")
    on_surface = _argb_property("on_surface")
    surface_variant = _argb_property("surface_variant")
    on_surface_variant = _argb_property("on_surface_variant")
    inverse_surface = _argb_property("inverse_surface")
    inverse_on_surface = _argb_property("inverse_on_surface")
    outline = _argb_property("outline")
    outline_variant = _argb_property("outline_variant")
    shadow = _argb_property("shadow")
    scrim = _argb_property("scrim")
    surface_tint = _argb_property("surface_tint")
    primary = _argb_property("primary")
    primary_dim = _argb_property("primary_dim")
    on_primary = _argb_property("on_primary")
    primary_container = _argb_property("primary_container")
    on_primary_container = _argb_property("on_primary_container")
    inverse_primary = _argb_property("inverse_primary")
    primary_fixed = _argb_property("primary_fixed")
    primary_fixed_dim = _argb_property("primary_fixed_dim")
    on_primary_fixed = _argb_property("on_primary_fixed")
    on_primary_fixed_variant = _argb_property("on_primary_fixed_variant")
    secondary = _argb_property("secondary")
    secondary_dim = _argb_property("secondary_dim")
    on_secondary = _argb_property("on_secondary")
    secondary_container = _argb_property("secondary_container")
    on_secondary_container = _argb_property("on_secondary_container")
    secondary_fixed = _argb_property("secondary_fixed")
    secondary_fixed_dim = _argb_property("secondary_fixed_dim")
    on_secondary_fixed = _argb_property("on_secondary_fixed")
    on_secondary_fixed_variant = _argb_property("on_secondary_fixed_variant")
    tertiary = _argb_property("tertiary")
    tertiary_dim = _argb_property("tertiary_dim")
    on_tertiary = _argb_property("on_tertiary")
    tertiary_container = _argb_property("tertiary_container")
    on_tertiary_container = _argb_property("on_tertiary_container")
    tertiary_fixed = _argb_property("tertiary_fixed")
    tertiary_fixed_dim = _argb_property("tertiary_fixed_dim")
    on_tertiary_fixed = _argb_property("on_tertiary_fixed")
    on_tertiary_fixed_variant = _argb_property("on_tertiary_fixed_variant")
    error = _argb_property("error")
    error_dim = _argb_property("error_dim")
    on_error = _argb_property("on_error")
    error_container = _argb_property("error_container")
    on_error_container = _argb_property("on_error_container")
