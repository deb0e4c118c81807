"""Color roles and tone resolution of the 2025 Material color spec.

Most roles wrap their 2021 definition with ``extend_spec_version`` so one
role object serves schemes of either version. The 2025 rules add per-role
chroma multipliers, watch-specific tones and the ``*_dim`` roles.
"""

from __future__ import annotations

import functools
import logging

from chromatone.core.color import contrast
from chromatone.core.color.hct import Hct
from chromatone.core.color.tonal_palette import TonalPalette
from chromatone.core.dynamiccolor.color_spec import role
from chromatone.core.dynamiccolor.color_spec_2021 import ColorSpec2021, _fit_between_backgrounds
from chromatone.core.dynamiccolor.contrast_curve import ContrastCurve
from chromatone.core.dynamiccolor.dynamic_color import DynamicColor
from chromatone.core.dynamiccolor.dynamic_scheme import DynamicScheme
from chromatone.core.dynamiccolor.enums import (
    DeltaConstraint,
    Platform,
    SpecVersion,
    TonePolarity,
    Variant,
)
from chromatone.core.dynamiccolor.tone_delta_pair import ToneDeltaPair
from chromatone.core.utils.math import clamp

logger = logging.getLogger(__name__)

EXPRESSIVE_HUE_BREAKPOINTS = (0.0, 105.0, 140.0, 204.0, 253.0, 278.0, 300.0, 333.0, 360.0)
EXPRESSIVE_SECONDARY_ROTATIONS = (-160.0, 155.0, -100.0, 96.0, -96.0, -156.0, -165.0, -160.0)
EXPRESSIVE_TERTIARY_ROTATIONS = (-165.0, 160.0, -105.0, 101.0, -101.0, -160.0, -170.0, -165.0)
EXPRESSIVE_NEUTRAL_BREAKPOINTS = (0.0, 71.0, 124.0, 253.0, 278.0, 300.0, 360.0)
EXPRESSIVE_NEUTRAL_ROTATIONS = (10.0, 0.0, 10.0, 0.0, 10.0, 0.0)
VIBRANT_HUE_BREAKPOINTS = (0.0, 38.0, 105.0, 140.0, 333.0, 360.0)
VIBRANT_ROTATIONS = (-14.0, 10.0, -14.0, 10.0, -14.0)
VIBRANT_TERTIARY_BREAKPOINTS = (0.0, 38.0, 71.0, 105.0, 140.0, 161.0, 253.0, 333.0, 360.0)
VIBRANT_TERTIARY_ROTATIONS = (-72.0, 35.0, 24.0, -24.0, 62.0, 50.0, 62.0, -72.0)
NEUTRAL_TERTIARY_BREAKPOINTS = (0.0, 38.0, 105.0, 161.0, 204.0, 278.0, 333.0, 360.0)
NEUTRAL_TERTIARY_ROTATIONS = (-32.0, 26.0, 10.0, -39.0, 24.0, -15.0, -32.0)
TONAL_SPOT_TERTIARY_BREAKPOINTS = (0.0, 20.0, 71.0, 161.0, 333.0, 360.0)
TONAL_SPOT_TERTIARY_ROTATIONS = (-40.0, 48.0, -32.0, 40.0, -32.0)
ERROR_HUE_BREAKPOINTS = (0.0, 3.0, 13.0, 23.0, 33.0, 43.0, 153.0, 273.0, 360.0)
ERROR_HUES = (12.0, 22.0, 32.0, 12.0, 22.0, 32.0, 22.0, 12.0)


@functools.lru_cache(maxsize=None)
def get_contrast_curve(default_contrast: float) -> ContrastCurve:
    """Standard curve that raises a default ratio for higher contrast levels."""
    if default_contrast == 1.5:
        return ContrastCurve.of(1.5, 1.5, 3.0, 5.5)
    if default_contrast == 3.0:
        return ContrastCurve.of(3.0, 3.0, 4.5, 7.0)
    if default_contrast == 4.5:
        return ContrastCurve.of(4.5, 4.5, 7.0, 11.0)
    if default_contrast == 6.0:
        return ContrastCurve.of(6.0, 6.0, 7.0, 11.0)
    if default_contrast == 7.0:
        return ContrastCurve.of(7.0, 7.0, 11.0, 21.0)
    if default_contrast == 9.0:
        return ContrastCurve.of(9.0, 9.0, 11.0, 21.0)
    if default_contrast == 11.0:
        return ContrastCurve.of(11.0, 11.0, 21.0, 21.0)
    if default_contrast == 21.0:
        return ContrastCurve.of(21.0, 21.0, 21.0, 21.0)
    return ContrastCurve.of(default_contrast, default_contrast, 7.0, 21.0)


def find_best_tone_for_chroma(
    hue: float, chroma: float, tone: float, by_decreasing_tone: bool
) -> float:
    """Tone nearest ``tone`` at which the palette reaches its highest chroma.

    Steps one tone at a time towards 0 or 100 until the requested chroma is
    met or the range is exhausted.
    """
    answer = tone
    best_candidate = Hct.create(hue, chroma, answer)
    while best_candidate.chroma < chroma:
        if tone < 0.0 or tone > 100.0:
            break
        tone += -1.0 if by_decreasing_tone else 1.0
        new_candidate = Hct.create(hue, chroma, tone)
        if best_candidate.chroma < new_candidate.chroma:
            best_candidate = new_candidate
            answer = tone
    return answer


def t_max_c(
    palette: TonalPalette,
    lower_bound: float = 0.0,
    upper_bound: float = 100.0,
    chroma_multiplier: float = 1.0,
) -> float:
    """Lightest tone holding the palette's peak chroma, clamped to the bounds."""
    answer = find_best_tone_for_chroma(
        palette.hue, palette.chroma * chroma_multiplier, 100.0, True
    )
    return clamp(answer, lower_bound, upper_bound)


def t_min_c(palette: TonalPalette, lower_bound: float = 0.0, upper_bound: float = 100.0) -> float:
    """Darkest tone holding the palette's peak chroma, clamped to the bounds."""
    answer = find_best_tone_for_chroma(palette.hue, palette.chroma, 0.0, False)
    return clamp(answer, lower_bound, upper_bound)


def _is_phone(scheme: DynamicScheme) -> bool:
    return scheme.platform == Platform.PHONE


def _surface_tone(
    scheme: DynamicScheme, dark: float, yellow: float, vibrant: float, default: float
) -> float:
    if scheme.is_dark:
        return dark
    if Hct.is_yellow(scheme.neutral_palette.hue):
        return yellow
    if scheme.variant == Variant.VIBRANT:
        return vibrant
    return default


def _surface_chroma(
    scheme: DynamicScheme,
    neutral: float,
    tonal_spot: float,
    expressive_yellow: float,
    expressive: float,
    vibrant: float,
) -> float:
    match scheme.variant:
        case Variant.NEUTRAL:
            return neutral
        case Variant.TONAL_SPOT:
            return tonal_spot
        case Variant.EXPRESSIVE:
            return expressive_yellow if Hct.is_yellow(scheme.neutral_palette.hue) else expressive
        case Variant.VIBRANT:
            return vibrant
    return 1.0


def _on_surface_chroma(scheme: DynamicScheme) -> float:
    """Chroma multiplier shared by text and outlines drawn on surfaces."""
    if not _is_phone(scheme):
        return 1.0
    match scheme.variant:
        case Variant.NEUTRAL:
            return 2.2
        case Variant.TONAL_SPOT:
            return 1.7
        case Variant.EXPRESSIVE:
            if Hct.is_yellow(scheme.neutral_palette.hue):
                return 3.0 if scheme.is_dark else 2.3
            return 1.6
    return 1.0


class ColorSpec2025(ColorSpec2021):
    """2025 role definitions layered over the 2021 ones."""

    spec_version: SpecVersion = SpecVersion.SPEC_2025

    def _extend_2025(self, base: DynamicColor, extension: DynamicColor) -> DynamicColor:
        return base.extend_spec_version(SpecVersion.SPEC_2025, extension)

    def _container_curve(self, scheme: DynamicScheme) -> ContrastCurve | None:
        if _is_phone(scheme) and scheme.contrast_level > 0:
            return get_contrast_curve(1.5)
        return None

    def _phone_highest_surface(self, scheme: DynamicScheme) -> DynamicColor | None:
        return self.highest_surface(scheme) if _is_phone(scheme) else None

    # =========================================================================
    # Surfaces
    # =========================================================================

    @role
    def background(self) -> DynamicColor:
        return self._extend_2025(
            super().background(),
            DynamicColor(
                name="background",
                palette=lambda s: self.surface().palette(s),
                tone=lambda s: self.surface().get_tone(s),
                is_background=True,
            ),
        )

    @role
    def on_background(self) -> DynamicColor:
        return self._extend_2025(
            super().on_background(),
            DynamicColor(
                name="on_background",
                palette=lambda s: self.on_surface().palette(s),
                tone=lambda s: (
                    100.0 if s.platform == Platform.WATCH else self.on_surface().get_tone(s)
                ),
                background=lambda s: self.on_surface().background(s),
                contrast_curve=lambda s: self.on_surface().contrast_curve(s),
            ),
        )

    @role
    def surface(self) -> DynamicColor:
        return self._extend_2025(
            super().surface(),
            DynamicColor(
                name="surface",
                palette=lambda s: s.neutral_palette,
                tone=lambda s: _surface_tone(s, 4.0, 99.0, 97.0, 98.0) if _is_phone(s) else 0.0,
                is_background=True,
            ),
        )

    @role
    def surface_dim(self) -> DynamicColor:
        return self._extend_2025(
            super().surface_dim(),
            DynamicColor(
                name="surface_dim",
                palette=lambda s: s.neutral_palette,
                tone=lambda s: _surface_tone(s, 4.0, 90.0, 85.0, 87.0),
                is_background=True,
                chroma_multiplier=lambda s: (
                    1.0 if s.is_dark else _surface_chroma(s, 2.5, 1.7, 2.7, 1.75, 1.36)
                ),
            ),
        )

    @role
    def surface_bright(self) -> DynamicColor:
        return self._extend_2025(
            super().surface_bright(),
            DynamicColor(
                name="surface_bright",
                palette=lambda s: s.neutral_palette,
                tone=lambda s: _surface_tone(s, 18.0, 99.0, 97.0, 98.0),
                is_background=True,
                chroma_multiplier=lambda s: (
                    _surface_chroma(s, 2.5, 1.7, 2.7, 1.75, 1.36) if s.is_dark else 1.0
                ),
            ),
        )

    @role
    def surface_container_lowest(self) -> DynamicColor:
        return self._extend_2025(
            super().surface_container_lowest(),
            DynamicColor(
                name="surface_container_lowest",
                palette=lambda s: s.neutral_palette,
                tone=lambda s: 0.0 if s.is_dark else 100.0,
                is_background=True,
            ),
        )

    @role
    def surface_container_low(self) -> DynamicColor:
        return self._extend_2025(
            super().surface_container_low(),
            DynamicColor(
                name="surface_container_low",
                palette=lambda s: s.neutral_palette,
                tone=lambda s: _surface_tone(s, 6.0, 98.0, 95.0, 96.0) if _is_phone(s) else 15.0,
                is_background=True,
                chroma_multiplier=lambda s: (
                    _surface_chroma(s, 1.3, 1.25, 1.3, 1.15, 1.08) if _is_phone(s) else 1.0
                ),
            ),
        )

    @role
    def surface_container(self) -> DynamicColor:
        return self._extend_2025(
            super().surface_container(),
            DynamicColor(
                name="surface_container",
                palette=lambda s: s.neutral_palette,
                tone=lambda s: _surface_tone(s, 9.0, 96.0, 92.0, 94.0) if _is_phone(s) else 20.0,
                is_background=True,
                chroma_multiplier=lambda s: (
                    _surface_chroma(s, 1.6, 1.4, 1.6, 1.3, 1.15) if _is_phone(s) else 1.0
                ),
            ),
        )

    @role
    def surface_container_high(self) -> DynamicColor:
        return self._extend_2025(
            super().surface_container_high(),
            DynamicColor(
                name="surface_container_high",
                palette=lambda s: s.neutral_palette,
                tone=lambda s: _surface_tone(s, 12.0, 94.0, 90.0, 92.0) if _is_phone(s) else 25.0,
                is_background=True,
                chroma_multiplier=lambda s: (
                    _surface_chroma(s, 1.9, 1.5, 1.95, 1.45, 1.22) if _is_phone(s) else 1.0
                ),
            ),
        )

    @role
    def surface_container_highest(self) -> DynamicColor:
        return self._extend_2025(
            super().surface_container_highest(),
            DynamicColor(
                name="surface_container_highest",
                palette=lambda s: s.neutral_palette,
                tone=lambda s: _surface_tone(s, 15.0, 92.0, 88.0, 90.0),
                is_background=True,
                chroma_multiplier=lambda s: _surface_chroma(s, 2.2, 1.7, 2.3, 1.6, 1.29),
            ),
        )

    @role
    def on_surface(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            if s.variant == Variant.VIBRANT:
                return t_max_c(s.neutral_palette, 0.0, 100.0, 1.1)
            return self.highest_surface(s).get_tone(s)

        return self._extend_2025(
            super().on_surface(),
            DynamicColor(
                name="on_surface",
                palette=lambda s: s.neutral_palette,
                tone=tone,
                chroma_multiplier=_on_surface_chroma,
                background=self.highest_surface,
                contrast_curve=lambda s: get_contrast_curve(
                    11.0 if s.is_dark and _is_phone(s) else 9.0
                ),
            ),
        )

    @role
    def surface_variant(self) -> DynamicColor:
        return self._extend_2025(
            super().surface_variant(),
            DynamicColor(
                name="surface_variant",
                palette=lambda s: self.surface_container_highest().palette(s),
                tone=lambda s: self.surface_container_highest().get_tone(s),
                is_background=True,
                chroma_multiplier=lambda s: self.surface_container_highest().chroma_multiplier(s),
            ),
        )

    @role
    def on_surface_variant(self) -> DynamicColor:
        def curve(s: DynamicScheme) -> ContrastCurve:
            if not _is_phone(s):
                return get_contrast_curve(7.0)
            return get_contrast_curve(6.0 if s.is_dark else 4.5)

        return self._extend_2025(
            super().on_surface_variant(),
            DynamicColor(
                name="on_surface_variant",
                palette=lambda s: s.neutral_palette,
                chroma_multiplier=_on_surface_chroma,
                background=self.highest_surface,
                contrast_curve=curve,
            ),
        )

    @role
    def inverse_surface(self) -> DynamicColor:
        return self._extend_2025(
            super().inverse_surface(),
            DynamicColor(
                name="inverse_surface",
                palette=lambda s: s.neutral_palette,
                tone=lambda s: 98.0 if s.is_dark else 4.0,
                is_background=True,
            ),
        )

    @role
    def inverse_on_surface(self) -> DynamicColor:
        return self._extend_2025(
            super().inverse_on_surface(),
            DynamicColor(
                name="inverse_on_surface",
                palette=lambda s: s.neutral_palette,
                background=lambda s: self.inverse_surface(),
                contrast_curve=lambda s: get_contrast_curve(7.0),
            ),
        )

    @role
    def outline(self) -> DynamicColor:
        return self._extend_2025(
            super().outline(),
            DynamicColor(
                name="outline",
                palette=lambda s: s.neutral_palette,
                chroma_multiplier=_on_surface_chroma,
                background=self.highest_surface,
                contrast_curve=lambda s: get_contrast_curve(3.0 if _is_phone(s) else 4.5),
            ),
        )

    @role
    def outline_variant(self) -> DynamicColor:
        return self._extend_2025(
            super().outline_variant(),
            DynamicColor(
                name="outline_variant",
                palette=lambda s: s.neutral_palette,
                chroma_multiplier=_on_surface_chroma,
                background=self.highest_surface,
                contrast_curve=lambda s: get_contrast_curve(1.5 if _is_phone(s) else 3.0),
            ),
        )

    @role
    def surface_tint(self) -> DynamicColor:
        return self._extend_2025(
            super().surface_tint(),
            DynamicColor(
                name="surface_tint",
                palette=lambda s: self.primary().palette(s),
                tone=lambda s: self.primary().get_tone(s),
                is_background=True,
                chroma_multiplier=lambda s: self.primary().chroma_multiplier(s),
            ),
        )

    # =========================================================================
    # Primaries
    # =========================================================================

    @role
    def primary(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            palette = s.primary_palette
            match s.variant:
                case Variant.NEUTRAL:
                    if not _is_phone(s):
                        return 90.0
                    return 80.0 if s.is_dark else 40.0
                case Variant.TONAL_SPOT:
                    if not _is_phone(s):
                        return t_max_c(palette, 0.0, 90.0)
                    return 80.0 if s.is_dark else t_max_c(palette)
                case Variant.EXPRESSIVE:
                    if not _is_phone(s):
                        return t_max_c(palette)
                    if Hct.is_yellow(palette.hue):
                        return t_max_c(palette, 0.0, 25.0)
                    return t_max_c(palette, 0.0, 88.0 if Hct.is_cyan(palette.hue) else 98.0)
            if not _is_phone(s):
                return t_max_c(palette)
            return t_max_c(palette, 0.0, 88.0 if Hct.is_cyan(palette.hue) else 98.0)

        return self._extend_2025(
            super().primary(),
            DynamicColor(
                name="primary",
                palette=lambda s: s.primary_palette,
                tone=tone,
                is_background=True,
                background=self.highest_surface,
                contrast_curve=lambda s: get_contrast_curve(4.5 if _is_phone(s) else 7.0),
                tone_delta_pair=lambda s: ToneDeltaPair(
                    self.primary_container(),
                    self.primary(),
                    5.0,
                    TonePolarity.RELATIVE_LIGHTER,
                    stay_together=True,
                    constraint=DeltaConstraint.FARTHER,
                )
                if _is_phone(s)
                else None,
            ),
        )

    @role
    def primary_dim(self) -> DynamicColor | None:
        def tone(s: DynamicScheme) -> float:
            if s.variant == Variant.NEUTRAL:
                return 85.0
            if s.variant == Variant.TONAL_SPOT:
                return t_max_c(s.primary_palette, 0.0, 90.0)
            return t_max_c(s.primary_palette)

        return DynamicColor(
            name="primary_dim",
            palette=lambda s: s.primary_palette,
            tone=tone,
            is_background=True,
            background=lambda s: self.surface_container_high(),
            contrast_curve=lambda s: get_contrast_curve(4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.primary_dim(),
                self.primary(),
                5.0,
                TonePolarity.DARKER,
                stay_together=True,
                constraint=DeltaConstraint.FARTHER,
            ),
        )

    @role
    def on_primary(self) -> DynamicColor:
        return self._extend_2025(
            super().on_primary(),
            DynamicColor(
                name="on_primary",
                palette=lambda s: s.primary_palette,
                background=lambda s: self.primary() if _is_phone(s) else self.primary_dim(),
                contrast_curve=lambda s: get_contrast_curve(6.0 if _is_phone(s) else 7.0),
            ),
        )

    @role
    def primary_container(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            if s.platform == Platform.WATCH:
                return 30.0
            palette = s.primary_palette
            match s.variant:
                case Variant.NEUTRAL:
                    return 30.0 if s.is_dark else 90.0
                case Variant.TONAL_SPOT:
                    return t_min_c(palette, 35.0, 93.0) if s.is_dark else t_max_c(palette, 0.0, 90.0)
                case Variant.EXPRESSIVE:
                    if s.is_dark:
                        return t_max_c(palette, 30.0, 93.0)
                    return t_max_c(palette, 78.0, 88.0 if Hct.is_cyan(palette.hue) else 90.0)
            if s.is_dark:
                return t_min_c(palette, 66.0, 93.0)
            return t_max_c(palette, 66.0, 88.0 if Hct.is_cyan(palette.hue) else 93.0)

        def tone_delta_pair(s: DynamicScheme) -> ToneDeltaPair | None:
            primary_dim = self.primary_dim()
            if s.platform != Platform.WATCH or primary_dim is None:
                return None
            return ToneDeltaPair(
                self.primary_container(),
                primary_dim,
                10.0,
                TonePolarity.DARKER,
                stay_together=True,
                constraint=DeltaConstraint.FARTHER,
            )

        return self._extend_2025(
            super().primary_container(),
            DynamicColor(
                name="primary_container",
                palette=lambda s: s.primary_palette,
                tone=tone,
                is_background=True,
                background=self._phone_highest_surface,
                contrast_curve=self._container_curve,
                tone_delta_pair=tone_delta_pair,
            ),
        )

    @role
    def on_primary_container(self) -> DynamicColor:
        return self._extend_2025(
            super().on_primary_container(),
            DynamicColor(
                name="on_primary_container",
                palette=lambda s: s.primary_palette,
                background=lambda s: self.primary_container(),
                contrast_curve=lambda s: get_contrast_curve(6.0 if _is_phone(s) else 7.0),
            ),
        )

    @role
    def inverse_primary(self) -> DynamicColor:
        return self._extend_2025(
            super().inverse_primary(),
            DynamicColor(
                name="inverse_primary",
                palette=lambda s: s.primary_palette,
                tone=lambda s: t_max_c(s.primary_palette),
                background=lambda s: self.inverse_surface(),
                contrast_curve=lambda s: get_contrast_curve(6.0 if _is_phone(s) else 7.0),
            ),
        )

    # =========================================================================
    # Secondaries
    # =========================================================================

    @role
    def secondary(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            palette = s.secondary_palette
            if s.platform == Platform.WATCH:
                return 90.0 if s.variant == Variant.NEUTRAL else t_max_c(palette, 0.0, 90.0)
            match s.variant:
                case Variant.NEUTRAL:
                    return t_min_c(palette, 0.0, 98.0) if s.is_dark else t_max_c(palette)
                case Variant.VIBRANT:
                    return t_max_c(palette, 0.0, 90.0 if s.is_dark else 98.0)
            return 80.0 if s.is_dark else t_max_c(palette)

        return self._extend_2025(
            super().secondary(),
            DynamicColor(
                name="secondary",
                palette=lambda s: s.secondary_palette,
                tone=tone,
                is_background=True,
                background=self.highest_surface,
                contrast_curve=lambda s: get_contrast_curve(4.5 if _is_phone(s) else 7.0),
                tone_delta_pair=lambda s: ToneDeltaPair(
                    self.secondary_container(),
                    self.secondary(),
                    5.0,
                    TonePolarity.RELATIVE_LIGHTER,
                    stay_together=True,
                    constraint=DeltaConstraint.FARTHER,
                )
                if _is_phone(s)
                else None,
            ),
        )

    @role
    def secondary_dim(self) -> DynamicColor | None:
        return DynamicColor(
            name="secondary_dim",
            palette=lambda s: s.secondary_palette,
            tone=lambda s: (
                85.0 if s.variant == Variant.NEUTRAL else t_max_c(s.secondary_palette, 0.0, 90.0)
            ),
            is_background=True,
            background=lambda s: self.surface_container_high(),
            contrast_curve=lambda s: get_contrast_curve(4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.secondary_dim(),
                self.secondary(),
                5.0,
                TonePolarity.DARKER,
                stay_together=True,
                constraint=DeltaConstraint.FARTHER,
            ),
        )

    @role
    def on_secondary(self) -> DynamicColor:
        return self._extend_2025(
            super().on_secondary(),
            DynamicColor(
                name="on_secondary",
                palette=lambda s: s.secondary_palette,
                background=lambda s: self.secondary() if _is_phone(s) else self.secondary_dim(),
                contrast_curve=lambda s: get_contrast_curve(6.0 if _is_phone(s) else 7.0),
            ),
        )

    @role
    def secondary_container(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            if s.platform == Platform.WATCH:
                return 30.0
            palette = s.secondary_palette
            match s.variant:
                case Variant.VIBRANT:
                    if s.is_dark:
                        return t_min_c(palette, 30.0, 40.0)
                    return t_max_c(palette, 84.0, 90.0)
                case Variant.EXPRESSIVE:
                    return 15.0 if s.is_dark else t_max_c(palette, 90.0, 95.0)
            return 25.0 if s.is_dark else 90.0

        def tone_delta_pair(s: DynamicScheme) -> ToneDeltaPair | None:
            secondary_dim = self.secondary_dim()
            if s.platform != Platform.WATCH or secondary_dim is None:
                return None
            return ToneDeltaPair(
                self.secondary_container(),
                secondary_dim,
                10.0,
                TonePolarity.DARKER,
                stay_together=True,
                constraint=DeltaConstraint.FARTHER,
            )

        return self._extend_2025(
            super().secondary_container(),
            DynamicColor(
                name="secondary_container",
                palette=lambda s: s.secondary_palette,
                tone=tone,
                is_background=True,
                background=self._phone_highest_surface,
                contrast_curve=self._container_curve,
                tone_delta_pair=tone_delta_pair,
            ),
        )

    @role
    def on_secondary_container(self) -> DynamicColor:
        return self._extend_2025(
            super().on_secondary_container(),
            DynamicColor(
                name="on_secondary_container",
                palette=lambda s: s.secondary_palette,
                background=lambda s: self.secondary_container(),
                contrast_curve=lambda s: get_contrast_curve(6.0 if _is_phone(s) else 7.0),
            ),
        )

    # =========================================================================
    # Tertiaries
    # =========================================================================

    @role
    def tertiary(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            palette = s.tertiary_palette
            if s.platform == Platform.WATCH:
                if s.variant == Variant.TONAL_SPOT:
                    return t_max_c(palette, 0.0, 90.0)
                return t_max_c(palette)
            if s.variant in (Variant.EXPRESSIVE, Variant.VIBRANT):
                if Hct.is_cyan(palette.hue):
                    upper = 88.0
                else:
                    upper = 98.0 if s.is_dark else 100.0
                return t_max_c(palette, 0.0, upper)
            return t_max_c(palette, 0.0, 98.0) if s.is_dark else t_max_c(palette)

        return self._extend_2025(
            super().tertiary(),
            DynamicColor(
                name="tertiary",
                palette=lambda s: s.tertiary_palette,
                tone=tone,
                is_background=True,
                background=self.highest_surface,
                contrast_curve=lambda s: get_contrast_curve(4.5 if _is_phone(s) else 7.0),
                tone_delta_pair=lambda s: ToneDeltaPair(
                    self.tertiary_container(),
                    self.tertiary(),
                    5.0,
                    TonePolarity.RELATIVE_LIGHTER,
                    stay_together=True,
                    constraint=DeltaConstraint.FARTHER,
                )
                if _is_phone(s)
                else None,
            ),
        )

    @role
    def tertiary_dim(self) -> DynamicColor | None:
        return DynamicColor(
            name="tertiary_dim",
            palette=lambda s: s.tertiary_palette,
            tone=lambda s: (
                t_max_c(s.tertiary_palette, 0.0, 90.0)
                if s.variant == Variant.TONAL_SPOT
                else t_max_c(s.tertiary_palette)
            ),
            is_background=True,
            background=lambda s: self.surface_container_high(),
            contrast_curve=lambda s: get_contrast_curve(4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.tertiary_dim(),
                self.tertiary(),
                5.0,
                TonePolarity.DARKER,
                stay_together=True,
                constraint=DeltaConstraint.FARTHER,
            ),
        )

    @role
    def on_tertiary(self) -> DynamicColor:
        return self._extend_2025(
            super().on_tertiary(),
            DynamicColor(
                name="on_tertiary",
                palette=lambda s: s.tertiary_palette,
                background=lambda s: self.tertiary() if _is_phone(s) else self.tertiary_dim(),
                contrast_curve=lambda s: get_contrast_curve(6.0 if _is_phone(s) else 7.0),
            ),
        )

    @role
    def tertiary_container(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            palette = s.tertiary_palette
            if s.platform == Platform.WATCH:
                if s.variant == Variant.TONAL_SPOT:
                    return t_max_c(palette, 0.0, 90.0)
                return t_max_c(palette)
            match s.variant:
                case Variant.NEUTRAL:
                    return t_max_c(palette, 0.0, 93.0 if s.is_dark else 96.0)
                case Variant.TONAL_SPOT:
                    return t_max_c(palette, 0.0, 93.0 if s.is_dark else 100.0)
                case Variant.EXPRESSIVE:
                    if Hct.is_cyan(palette.hue):
                        upper = 88.0
                    else:
                        upper = 93.0 if s.is_dark else 100.0
                    return t_max_c(palette, 75.0, upper)
            if s.is_dark:
                return t_max_c(palette, 0.0, 93.0)
            return t_max_c(palette, 72.0, 100.0)

        def tone_delta_pair(s: DynamicScheme) -> ToneDeltaPair | None:
            tertiary_dim = self.tertiary_dim()
            if s.platform != Platform.WATCH or tertiary_dim is None:
                return None
            return ToneDeltaPair(
                self.tertiary_container(),
                tertiary_dim,
                10.0,
                TonePolarity.DARKER,
                stay_together=True,
                constraint=DeltaConstraint.FARTHER,
            )

        return self._extend_2025(
            super().tertiary_container(),
            DynamicColor(
                name="tertiary_container",
                palette=lambda s: s.tertiary_palette,
                tone=tone,
                is_background=True,
                background=self._phone_highest_surface,
                contrast_curve=self._container_curve,
                tone_delta_pair=tone_delta_pair,
            ),
        )

    @role
    def on_tertiary_container(self) -> DynamicColor:
        return self._extend_2025(
            super().on_tertiary_container(),
            DynamicColor(
                name="on_tertiary_container",
                palette=lambda s: s.tertiary_palette,
                background=lambda s: self.tertiary_container(),
                contrast_curve=lambda s: get_contrast_curve(6.0 if _is_phone(s) else 7.0),
            ),
        )

    # =========================================================================
    # Errors
    # =========================================================================

    @role
    def error(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            if not _is_phone(s):
                return t_min_c(s.error_palette)
            return t_min_c(s.error_palette, 0.0, 98.0) if s.is_dark else t_max_c(s.error_palette)

        return self._extend_2025(
            super().error(),
            DynamicColor(
                name="error",
                palette=lambda s: s.error_palette,
                tone=tone,
                is_background=True,
                background=self.highest_surface,
                contrast_curve=lambda s: get_contrast_curve(4.5 if _is_phone(s) else 7.0),
                tone_delta_pair=lambda s: ToneDeltaPair(
                    self.error_container(),
                    self.error(),
                    5.0,
                    TonePolarity.RELATIVE_LIGHTER,
                    stay_together=True,
                    constraint=DeltaConstraint.FARTHER,
                )
                if _is_phone(s)
                else None,
            ),
        )

    @role
    def error_dim(self) -> DynamicColor | None:
        return DynamicColor(
            name="error_dim",
            palette=lambda s: s.error_palette,
            tone=lambda s: t_min_c(s.error_palette),
            is_background=True,
            background=lambda s: self.surface_container_high(),
            contrast_curve=lambda s: get_contrast_curve(4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.error_dim(),
                self.error(),
                5.0,
                TonePolarity.DARKER,
                stay_together=True,
                constraint=DeltaConstraint.FARTHER,
            ),
        )

    @role
    def on_error(self) -> DynamicColor:
        return self._extend_2025(
            super().on_error(),
            DynamicColor(
                name="on_error",
                palette=lambda s: s.error_palette,
                background=lambda s: self.error() if _is_phone(s) else self.error_dim(),
                contrast_curve=lambda s: get_contrast_curve(6.0 if _is_phone(s) else 7.0),
            ),
        )

    @role
    def error_container(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            if s.platform == Platform.WATCH:
                return 30.0
            if s.is_dark:
                return t_min_c(s.error_palette, 30.0, 93.0)
            return t_max_c(s.error_palette, 0.0, 90.0)

        def tone_delta_pair(s: DynamicScheme) -> ToneDeltaPair | None:
            error_dim = self.error_dim()
            if s.platform != Platform.WATCH or error_dim is None:
                return None
            return ToneDeltaPair(
                self.error_container(),
                error_dim,
                10.0,
                TonePolarity.DARKER,
                stay_together=True,
                constraint=DeltaConstraint.FARTHER,
            )

        return self._extend_2025(
            super().error_container(),
            DynamicColor(
                name="error_container",
                palette=lambda s: s.error_palette,
                tone=tone,
                is_background=True,
                background=self._phone_highest_surface,
                contrast_curve=self._container_curve,
                tone_delta_pair=tone_delta_pair,
            ),
        )

    @role
    def on_error_container(self) -> DynamicColor:
        return self._extend_2025(
            super().on_error_container(),
            DynamicColor(
                name="on_error_container",
                palette=lambda s: s.error_palette,
                background=lambda s: self.error_container(),
                contrast_curve=lambda s: get_contrast_curve(4.5 if _is_phone(s) else 7.0),
            ),
        )

    # =========================================================================
    # Fixed colors
    # =========================================================================

    @role
    def primary_fixed(self) -> DynamicColor:
        return self._extend_2025(
            super().primary_fixed(),
            DynamicColor(
                name="primary_fixed",
                palette=lambda s: s.primary_palette,
                tone=lambda s: self.primary_container().get_tone(
                    DynamicScheme.from_scheme(s, False, 0.0)
                ),
                is_background=True,
                background=self._phone_highest_surface,
                contrast_curve=self._container_curve,
            ),
        )

    @role
    def primary_fixed_dim(self) -> DynamicColor:
        return self._extend_2025(
            super().primary_fixed_dim(),
            DynamicColor(
                name="primary_fixed_dim",
                palette=lambda s: s.primary_palette,
                tone=lambda s: self.primary_fixed().get_tone(s),
                is_background=True,
                tone_delta_pair=lambda s: ToneDeltaPair(
                    self.primary_fixed_dim(),
                    self.primary_fixed(),
                    5.0,
                    TonePolarity.DARKER,
                    stay_together=True,
                    constraint=DeltaConstraint.EXACT,
                ),
            ),
        )

    @role
    def on_primary_fixed(self) -> DynamicColor:
        return self._extend_2025(
            super().on_primary_fixed(),
            DynamicColor(
                name="on_primary_fixed",
                palette=lambda s: s.primary_palette,
                background=lambda s: self.primary_fixed_dim(),
                contrast_curve=lambda s: get_contrast_curve(7.0),
            ),
        )

    @role
    def on_primary_fixed_variant(self) -> DynamicColor:
        return self._extend_2025(
            super().on_primary_fixed_variant(),
            DynamicColor(
                name="on_primary_fixed_variant",
                palette=lambda s: s.primary_palette,
                background=lambda s: self.primary_fixed_dim(),
                contrast_curve=lambda s: get_contrast_curve(4.5),
            ),
        )

    @role
    def secondary_fixed(self) -> DynamicColor:
        return self._extend_2025(
            super().secondary_fixed(),
            DynamicColor(
                name="secondary_fixed",
                palette=lambda s: s.secondary_palette,
                tone=lambda s: self.secondary_container().get_tone(
                    DynamicScheme.from_scheme(s, False, 0.0)
                ),
                is_background=True,
                background=self._phone_highest_surface,
                contrast_curve=self._container_curve,
            ),
        )

    @role
    def secondary_fixed_dim(self) -> DynamicColor:
        return self._extend_2025(
            super().secondary_fixed_dim(),
            DynamicColor(
                name="secondary_fixed_dim",
                palette=lambda s: s.secondary_palette,
                tone=lambda s: self.secondary_fixed().get_tone(s),
                is_background=True,
                tone_delta_pair=lambda s: ToneDeltaPair(
                    self.secondary_fixed_dim(),
                    self.secondary_fixed(),
                    5.0,
                    TonePolarity.DARKER,
                    stay_together=True,
                    constraint=DeltaConstraint.EXACT,
                ),
            ),
        )

    @role
    def on_secondary_fixed(self) -> DynamicColor:
        return self._extend_2025(
            super().on_secondary_fixed(),
            DynamicColor(
                name="on_secondary_fixed",
                palette=lambda s: s.secondary_palette,
                background=lambda s: self.secondary_fixed_dim(),
                contrast_curve=lambda s: get_contrast_curve(7.0),
            ),
        )

    @role
    def on_secondary_fixed_variant(self) -> DynamicColor:
        return self._extend_2025(
            super().on_secondary_fixed_variant(),
            DynamicColor(
                name="on_secondary_fixed_variant",
                palette=lambda s: s.secondary_palette,
                background=lambda s: self.secondary_fixed_dim(),
                contrast_curve=lambda s: get_contrast_curve(4.5),
            ),
        )

    @role
    def tertiary_fixed(self) -> DynamicColor:
        return self._extend_2025(
            super().tertiary_fixed(),
            DynamicColor(
                name="tertiary_fixed",
                palette=lambda s: s.tertiary_palette,
                tone=lambda s: self.tertiary_container().get_tone(
                    DynamicScheme.from_scheme(s, False, 0.0)
                ),
                is_background=True,
                background=self._phone_highest_surface,
                contrast_curve=self._container_curve,
            ),
        )

    @role
    def tertiary_fixed_dim(self) -> DynamicColor:
        return self._extend_2025(
            super().tertiary_fixed_dim(),
            DynamicColor(
                name="tertiary_fixed_dim",
                palette=lambda s: s.tertiary_palette,
                tone=lambda s: self.tertiary_fixed().get_tone(s),
                is_background=True,
                tone_delta_pair=lambda s: ToneDeltaPair(
                    self.tertiary_fixed_dim(),
                    self.tertiary_fixed(),
                    5.0,
                    TonePolarity.DARKER,
                    stay_together=True,
                    constraint=DeltaConstraint.EXACT,
                ),
            ),
        )

    @role
    def on_tertiary_fixed(self) -> DynamicColor:
        return self._extend_2025(
            super().on_tertiary_fixed(),
            DynamicColor(
                name="on_tertiary_fixed",
                palette=lambda s: s.tertiary_palette,
                background=lambda s: self.tertiary_fixed_dim(),
                contrast_curve=lambda s: get_contrast_curve(7.0),
            ),
        )

    @role
    def on_tertiary_fixed_variant(self) -> DynamicColor:
        return self._extend_2025(
            super().on_tertiary_fixed_variant(),
            DynamicColor(
                name="on_tertiary_fixed_variant",
                palette=lambda s: s.tertiary_palette,
                background=lambda s: self.tertiary_fixed_dim(),
                contrast_curve=lambda s: get_contrast_curve(4.5),
            ),
        )

    # =========================================================================
    # Resolution
    # =========================================================================

    def get_hct(self, scheme: DynamicScheme, color: DynamicColor) -> Hct:
        palette = color.palette(scheme)
        tone = color.get_tone(scheme)
        chroma_multiplier = color.chroma_multiplier(scheme) if color.chroma_multiplier else 1.0
        return Hct.create(palette.hue, palette.chroma * chroma_multiplier, tone)

    def get_tone(self, scheme: DynamicScheme, color: DynamicColor) -> float:
        """Resolve a role's tone.

        A paired role places itself relative to its partner's resolved tone
        according to the pair's constraint, then fixes up contrast against
        its own background. Background roles finally snap out of the
        [49, 65) band, except the ``*_fixed_dim`` roles which follow their
        ``*_fixed`` partner exactly.

        Args:
            scheme: Theme inputs
            color: Role to resolve

        Returns:
            Resolved tone
        """
        tone_delta_pair = color.tone_delta_pair(scheme) if color.tone_delta_pair else None
        if tone_delta_pair is not None:
            answer = self._get_paired_tone(scheme, color, tone_delta_pair)
        else:
            answer = color.tone(scheme)

        background = color.background(scheme) if color.background else None
        contrast_curve = color.contrast_curve(scheme) if color.contrast_curve else None
        if background is not None and contrast_curve is not None:
            bg_tone = background.get_tone(scheme)
            desired_ratio = contrast_curve.get(scheme.contrast_level)
            if not (
                contrast.ratio_of_tones(bg_tone, answer) >= desired_ratio
                and scheme.contrast_level >= 0
            ):
                answer = DynamicColor.foreground_tone(bg_tone, desired_ratio)

        if color.is_background and not color.name.endswith("_fixed_dim"):
            answer = clamp(answer, 65.0, 100.0) if answer >= 57.0 else clamp(answer, 0.0, 49.0)

        if tone_delta_pair is not None:
            return answer

        second_background = color.second_background(scheme) if color.second_background else None
        if second_background is None or background is None or contrast_curve is None:
            return answer
        return _fit_between_backgrounds(
            answer,
            background.get_tone(scheme),
            second_background.get_tone(scheme),
            contrast_curve.get(scheme.contrast_level),
        )

    def _get_paired_tone(
        self, scheme: DynamicScheme, color: DynamicColor, pair: ToneDeltaPair
    ) -> float:
        if (
            pair.polarity == TonePolarity.DARKER
            or (pair.polarity == TonePolarity.RELATIVE_LIGHTER and scheme.is_dark)
            or (pair.polarity == TonePolarity.RELATIVE_DARKER and not scheme.is_dark)
        ):
            absolute_delta = -pair.delta
        else:
            absolute_delta = pair.delta

        am_role_a = color.name == pair.role_a.name
        reference_role = pair.role_b if am_role_a else pair.role_a
        self_tone = color.tone(scheme)
        reference_tone = reference_role.get_tone(scheme)
        relative_delta = absolute_delta if am_role_a else -absolute_delta
        target = reference_tone + relative_delta

        match pair.constraint:
            case DeltaConstraint.EXACT:
                self_tone = clamp(target, 0.0, 100.0)
            case DeltaConstraint.NEARER:
                if relative_delta > 0:
                    self_tone = clamp(self_tone, reference_tone, max(target, reference_tone))
                else:
                    self_tone = clamp(self_tone, min(target, reference_tone), reference_tone)
                self_tone = clamp(self_tone, 0.0, 100.0)
            case DeltaConstraint.FARTHER:
                if relative_delta > 0:
                    self_tone = clamp(self_tone, min(target, 100.0), 100.0)
                else:
                    self_tone = clamp(self_tone, 0.0, max(target, 0.0))
        return self_tone

    # =========================================================================
    # Palettes
    # =========================================================================

    def get_primary_palette(
        self,
        variant: Variant,
        source_color_hct: Hct,
        is_dark: bool,
        platform: Platform,
        contrast_level: float,
    ) -> TonalPalette:
        hue = source_color_hct.hue
        phone = platform == Platform.PHONE
        match variant:
            case Variant.NEUTRAL:
                if phone:
                    chroma = 12.0 if Hct.is_blue(hue) else 8.0
                else:
                    chroma = 16.0 if Hct.is_blue(hue) else 12.0
                return TonalPalette.from_hue_and_chroma(hue, chroma)
            case Variant.TONAL_SPOT:
                return TonalPalette.from_hue_and_chroma(hue, 26.0 if phone and is_dark else 32.0)
            case Variant.EXPRESSIVE:
                chroma = (36.0 if is_dark else 48.0) if phone else 40.0
                return TonalPalette.from_hue_and_chroma(hue, chroma)
            case Variant.VIBRANT:
                return TonalPalette.from_hue_and_chroma(hue, 74.0 if phone else 56.0)
        return super().get_primary_palette(
            variant, source_color_hct, is_dark, platform, contrast_level
        )

    def get_secondary_palette(
        self,
        variant: Variant,
        source_color_hct: Hct,
        is_dark: bool,
        platform: Platform,
        contrast_level: float,
    ) -> TonalPalette:
        hue = source_color_hct.hue
        phone = platform == Platform.PHONE
        match variant:
            case Variant.NEUTRAL:
                if phone:
                    chroma = 6.0 if Hct.is_blue(hue) else 4.0
                else:
                    chroma = 10.0 if Hct.is_blue(hue) else 6.0
                return TonalPalette.from_hue_and_chroma(hue, chroma)
            case Variant.TONAL_SPOT:
                return TonalPalette.from_hue_and_chroma(hue, 16.0)
            case Variant.EXPRESSIVE:
                return TonalPalette.from_hue_and_chroma(
                    DynamicScheme.get_rotated_hue(
                        source_color_hct,
                        EXPRESSIVE_HUE_BREAKPOINTS,
                        EXPRESSIVE_SECONDARY_ROTATIONS,
                    ),
                    16.0 if phone and is_dark else 24.0,
                )
            case Variant.VIBRANT:
                return TonalPalette.from_hue_and_chroma(
                    DynamicScheme.get_rotated_hue(
                        source_color_hct, VIBRANT_HUE_BREAKPOINTS, VIBRANT_ROTATIONS
                    ),
                    56.0 if phone else 36.0,
                )
        return super().get_secondary_palette(
            variant, source_color_hct, is_dark, platform, contrast_level
        )

    def get_tertiary_palette(
        self,
        variant: Variant,
        source_color_hct: Hct,
        is_dark: bool,
        platform: Platform,
        contrast_level: float,
    ) -> TonalPalette:
        phone = platform == Platform.PHONE
        match variant:
            case Variant.NEUTRAL:
                return TonalPalette.from_hue_and_chroma(
                    DynamicScheme.get_rotated_hue(
                        source_color_hct, NEUTRAL_TERTIARY_BREAKPOINTS, NEUTRAL_TERTIARY_ROTATIONS
                    ),
                    20.0 if phone else 36.0,
                )
            case Variant.TONAL_SPOT:
                return TonalPalette.from_hue_and_chroma(
                    DynamicScheme.get_rotated_hue(
                        source_color_hct,
                        TONAL_SPOT_TERTIARY_BREAKPOINTS,
                        TONAL_SPOT_TERTIARY_ROTATIONS,
                    ),
                    28.0 if phone else 32.0,
                )
            case Variant.EXPRESSIVE:
                return TonalPalette.from_hue_and_chroma(
                    DynamicScheme.get_rotated_hue(
                        source_color_hct,
                        EXPRESSIVE_HUE_BREAKPOINTS,
                        EXPRESSIVE_TERTIARY_ROTATIONS,
                    ),
                    48.0,
                )
            case Variant.VIBRANT:
                return TonalPalette.from_hue_and_chroma(
                    DynamicScheme.get_rotated_hue(
                        source_color_hct, VIBRANT_TERTIARY_BREAKPOINTS, VIBRANT_TERTIARY_ROTATIONS
                    ),
                    56.0,
                )
        return super().get_tertiary_palette(
            variant, source_color_hct, is_dark, platform, contrast_level
        )

    def _neutral_hue_and_chroma(
        self, variant: Variant, source_color_hct: Hct, is_dark: bool, platform: Platform
    ) -> tuple[float, float] | None:
        phone = platform == Platform.PHONE
        match variant:
            case Variant.NEUTRAL:
                return source_color_hct.hue, 1.4 if phone else 6.0
            case Variant.TONAL_SPOT:
                return source_color_hct.hue, 5.0 if phone else 10.0
            case Variant.EXPRESSIVE:
                hue = DynamicScheme.get_rotated_hue(
                    source_color_hct, EXPRESSIVE_NEUTRAL_BREAKPOINTS, EXPRESSIVE_NEUTRAL_ROTATIONS
                )
                if not phone:
                    return hue, 12.0
                if not is_dark:
                    return hue, 18.0
                return hue, 6.0 if Hct.is_yellow(hue) else 14.0
            case Variant.VIBRANT:
                hue = DynamicScheme.get_rotated_hue(
                    source_color_hct, VIBRANT_HUE_BREAKPOINTS, VIBRANT_ROTATIONS
                )
                if phone or Hct.is_blue(hue):
                    return hue, 28.0
                return hue, 20.0
        return None

    def get_neutral_palette(
        self,
        variant: Variant,
        source_color_hct: Hct,
        is_dark: bool,
        platform: Platform,
        contrast_level: float,
    ) -> TonalPalette:
        hue_and_chroma = self._neutral_hue_and_chroma(variant, source_color_hct, is_dark, platform)
        if hue_and_chroma is None:
            return super().get_neutral_palette(
                variant, source_color_hct, is_dark, platform, contrast_level
            )
        return TonalPalette.from_hue_and_chroma(*hue_and_chroma)

    def get_neutral_variant_palette(
        self,
        variant: Variant,
        source_color_hct: Hct,
        is_dark: bool,
        platform: Platform,
        contrast_level: float,
    ) -> TonalPalette:
        hue_and_chroma = self._neutral_hue_and_chroma(variant, source_color_hct, is_dark, platform)
        if hue_and_chroma is None:
            return super().get_neutral_variant_palette(
                variant, source_color_hct, is_dark, platform, contrast_level
            )
        hue, chroma = hue_and_chroma
        match variant:
            case Variant.NEUTRAL:
                chroma *= 2.2
            case Variant.TONAL_SPOT:
                chroma *= 1.7
            case Variant.EXPRESSIVE:
                chroma *= 1.6 if 105.0 <= hue < 125.0 else 2.3
            case Variant.VIBRANT:
                chroma *= 1.29
        return TonalPalette.from_hue_and_chroma(hue, chroma)

    def get_error_palette(
        self,
        variant: Variant,
        source_color_hct: Hct,
        is_dark: bool,
        platform: Platform,
        contrast_level: float,
    ) -> TonalPalette:
        error_hue = DynamicScheme.get_piecewise_value(
            source_color_hct, ERROR_HUE_BREAKPOINTS, ERROR_HUES
        )
        phone = platform == Platform.PHONE
        match variant:
            case Variant.NEUTRAL:
                return TonalPalette.from_hue_and_chroma(error_hue, 50.0 if phone else 40.0)
            case Variant.TONAL_SPOT:
                return TonalPalette.from_hue_and_chroma(error_hue, 60.0 if phone else 48.0)
            case Variant.EXPRESSIVE:
                return TonalPalette.from_hue_and_chroma(error_hue, 64.0 if phone else 48.0)
            case Variant.VIBRANT:
                return TonalPalette.from_hue_and_chroma(error_hue, 80.0 if phone else 60.0)
        return super().get_error_palette(
            variant, source_color_hct, is_dark, platform, contrast_level
        )
