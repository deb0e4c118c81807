"""Color roles and tone resolution of the 2021 Material color spec."""

from __future__ import annotations

import logging

from chromatone.core.color import contrast
from chromatone.core.color.dislike import fix_if_disliked
from chromatone.core.color.hct import Hct
from chromatone.core.color.temperature import TemperatureCache
from chromatone.core.color.tonal_palette import TonalPalette
from chromatone.core.dynamiccolor.color_spec import role
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
from chromatone.core.dynamiccolor.errors import UnsupportedVariantError
from chromatone.core.dynamiccolor.tone_delta_pair import ToneDeltaPair
from chromatone.core.utils.math import sanitize_degrees_double

logger = logging.getLogger(__name__)

# Hue rotation tables: rotation i applies to [breakpoint i, breakpoint i + 1).
EXPRESSIVE_HUE_BREAKPOINTS = (0.0, 21.0, 51.0, 121.0, 151.0, 191.0, 271.0, 321.0, 360.0)
EXPRESSIVE_SECONDARY_ROTATIONS = (45.0, 95.0, 45.0, 20.0, 45.0, 90.0, 45.0, 45.0)
EXPRESSIVE_TERTIARY_ROTATIONS = (120.0, 120.0, 20.0, 45.0, 20.0, 15.0, 20.0, 120.0)
VIBRANT_HUE_BREAKPOINTS = (0.0, 41.0, 61.0, 101.0, 131.0, 181.0, 251.0, 301.0, 360.0)
VIBRANT_SECONDARY_ROTATIONS = (18.0, 15.0, 10.0, 12.0, 15.0, 18.0, 15.0, 12.0)
VIBRANT_TERTIARY_ROTATIONS = (35.0, 30.0, 20.0, 25.0, 30.0, 35.0, 30.0, 25.0)

# Tones in [50, 60) suit neither light nor dark text.
_DEAD_ZONE_LOW = 50.0
_DEAD_ZONE_HIGH = 60.0


def _in_dead_zone(tone: float) -> bool:
    return _DEAD_ZONE_LOW <= tone < _DEAD_ZONE_HIGH


class ColorSpec2021:
    """Role definitions and resolution algorithm of the 2021 spec.

    Role factories are cached per instance (see ``role``), so repeated calls
    return the same DynamicColor. Later specs subclass this one and wrap the
    inherited roles with ``DynamicColor.extend_spec_version``.
    """

    spec_version: SpecVersion = SpecVersion.SPEC_2021

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    # =========================================================================
    # Helpers
    # =========================================================================

    @staticmethod
    def _is_fidelity(scheme: DynamicScheme) -> bool:
        return scheme.variant in (Variant.FIDELITY, Variant.CONTENT)

    @staticmethod
    def _is_monochrome(scheme: DynamicScheme) -> bool:
        return scheme.variant == Variant.MONOCHROME

    @staticmethod
    def _find_desired_chroma_by_tone(
        hue: float, chroma: float, tone: float, by_decreasing_tone: bool
    ) -> float:
        """Walk tone away from ``tone`` until the palette reaches ``chroma``.

        Stops when chroma starts falling again or lands within 0.4 of the
        target.
        """
        answer = tone
        closest_to_chroma = Hct.create(hue, chroma, tone)
        if closest_to_chroma.chroma < chroma:
            chroma_peak = closest_to_chroma.chroma
            while closest_to_chroma.chroma < chroma:
                answer += -1.0 if by_decreasing_tone else 1.0
                potential_solution = Hct.create(hue, chroma, answer)
                if chroma_peak > potential_solution.chroma:
                    break
                if abs(potential_solution.chroma - chroma) < 0.4:
                    break
                potential_delta = abs(potential_solution.chroma - chroma)
                current_delta = abs(closest_to_chroma.chroma - chroma)
                if potential_delta < current_delta:
                    closest_to_chroma = potential_solution
                chroma_peak = max(chroma_peak, potential_solution.chroma)
        return answer

    def _unsupported(self, variant: Variant) -> UnsupportedVariantError:
        return UnsupportedVariantError(variant, self.spec_version)

    # =========================================================================
    # Main palette key colors
    # =========================================================================

    @role
    def primary_palette_key_color(self) -> DynamicColor:
        return DynamicColor(
            name="primary_palette_key_color",
            palette=lambda s: s.primary_palette,
            tone=lambda s: s.primary_palette.key_color.tone,
        )

    @role
    def secondary_palette_key_color(self) -> DynamicColor:
        return DynamicColor(
            name="secondary_palette_key_color",
            palette=lambda s: s.secondary_palette,
            tone=lambda s: s.secondary_palette.key_color.tone,
        )

    @role
    def tertiary_palette_key_color(self) -> DynamicColor:
        return DynamicColor(
            name="tertiary_palette_key_color",
            palette=lambda s: s.tertiary_palette,
            tone=lambda s: s.tertiary_palette.key_color.tone,
        )

    @role
    def neutral_palette_key_color(self) -> DynamicColor:
        return DynamicColor(
            name="neutral_palette_key_color",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: s.neutral_palette.key_color.tone,
        )

    @role
    def neutral_variant_palette_key_color(self) -> DynamicColor:
        return DynamicColor(
            name="neutral_variant_palette_key_color",
            palette=lambda s: s.neutral_variant_palette,
            tone=lambda s: s.neutral_variant_palette.key_color.tone,
        )

    @role
    def error_palette_key_color(self) -> DynamicColor:
        return DynamicColor(
            name="error_palette_key_color",
            palette=lambda s: s.error_palette,
            tone=lambda s: s.error_palette.key_color.tone,
        )

    # =========================================================================
    # Surfaces
    # =========================================================================

    @role
    def background(self) -> DynamicColor:
        return DynamicColor(
            name="background",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: 6.0 if s.is_dark else 98.0,
            is_background=True,
        )

    @role
    def on_background(self) -> DynamicColor:
        curve = ContrastCurve.of(3.0, 3.0, 4.5, 7.0)
        return DynamicColor(
            name="on_background",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: 90.0 if s.is_dark else 10.0,
            background=lambda s: self.background(),
            contrast_curve=lambda s: curve,
        )

    @role
    def surface(self) -> DynamicColor:
        return DynamicColor(
            name="surface",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: 6.0 if s.is_dark else 98.0,
            is_background=True,
        )

    @role
    def surface_dim(self) -> DynamicColor:
        light = ContrastCurve.of(87.0, 87.0, 80.0, 75.0)
        return DynamicColor(
            name="surface_dim",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: 6.0 if s.is_dark else light.get(s.contrast_level),
            is_background=True,
        )

    @role
    def surface_bright(self) -> DynamicColor:
        dark = ContrastCurve.of(24.0, 24.0, 29.0, 34.0)
        return DynamicColor(
            name="surface_bright",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: dark.get(s.contrast_level) if s.is_dark else 98.0,
            is_background=True,
        )

    @role
    def surface_container_lowest(self) -> DynamicColor:
        dark = ContrastCurve.of(4.0, 4.0, 2.0, 0.0)
        return DynamicColor(
            name="surface_container_lowest",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: dark.get(s.contrast_level) if s.is_dark else 100.0,
            is_background=True,
        )

    @role
    def surface_container_low(self) -> DynamicColor:
        dark = ContrastCurve.of(10.0, 10.0, 11.0, 12.0)
        light = ContrastCurve.of(96.0, 96.0, 96.0, 95.0)
        return DynamicColor(
            name="surface_container_low",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: (dark if s.is_dark else light).get(s.contrast_level),
            is_background=True,
        )

    @role
    def surface_container(self) -> DynamicColor:
        dark = ContrastCurve.of(12.0, 12.0, 16.0, 20.0)
        light = ContrastCurve.of(94.0, 94.0, 92.0, 90.0)
        return DynamicColor(
            name="surface_container",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: (dark if s.is_dark else light).get(s.contrast_level),
            is_background=True,
        )

    @role
    def surface_container_high(self) -> DynamicColor:
        dark = ContrastCurve.of(17.0, 17.0, 21.0, 25.0)
        light = ContrastCurve.of(92.0, 92.0, 88.0, 85.0)
        return DynamicColor(
            name="surface_container_high",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: (dark if s.is_dark else light).get(s.contrast_level),
            is_background=True,
        )

    @role
    def surface_container_highest(self) -> DynamicColor:
        dark = ContrastCurve.of(22.0, 22.0, 26.0, 30.0)
        light = ContrastCurve.of(90.0, 90.0, 84.0, 80.0)
        return DynamicColor(
            name="surface_container_highest",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: (dark if s.is_dark else light).get(s.contrast_level),
            is_background=True,
        )

    @role
    def on_surface(self) -> DynamicColor:
        curve = ContrastCurve.of(4.5, 7.0, 11.0, 21.0)
        return DynamicColor(
            name="on_surface",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: 90.0 if s.is_dark else 10.0,
            background=self.highest_surface,
            contrast_curve=lambda s: curve,
        )

    @role
    def surface_variant(self) -> DynamicColor:
        return DynamicColor(
            name="surface_variant",
            palette=lambda s: s.neutral_variant_palette,
            tone=lambda s: 30.0 if s.is_dark else 90.0,
            is_background=True,
        )

    @role
    def on_surface_variant(self) -> DynamicColor:
        curve = ContrastCurve.of(3.0, 4.5, 7.0, 11.0)
        return DynamicColor(
            name="on_surface_variant",
            palette=lambda s: s.neutral_variant_palette,
            tone=lambda s: 80.0 if s.is_dark else 30.0,
            background=self.highest_surface,
            contrast_curve=lambda s: curve,
        )

    @role
    def inverse_surface(self) -> DynamicColor:
        return DynamicColor(
            name="inverse_surface",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: 90.0 if s.is_dark else 20.0,
            is_background=True,
        )

    @role
    def inverse_on_surface(self) -> DynamicColor:
        curve = ContrastCurve.of(4.5, 7.0, 11.0, 21.0)
        return DynamicColor(
            name="inverse_on_surface",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: 20.0 if s.is_dark else 95.0,
            background=lambda s: self.inverse_surface(),
            contrast_curve=lambda s: curve,
        )

    @role
    def outline(self) -> DynamicColor:
        curve = ContrastCurve.of(1.5, 3.0, 4.5, 7.0)
        return DynamicColor(
            name="outline",
            palette=lambda s: s.neutral_variant_palette,
            tone=lambda s: 60.0 if s.is_dark else 50.0,
            background=self.highest_surface,
            contrast_curve=lambda s: curve,
        )

    @role
    def outline_variant(self) -> DynamicColor:
        curve = ContrastCurve.of(1.0, 1.0, 3.0, 4.5)
        return DynamicColor(
            name="outline_variant",
            palette=lambda s: s.neutral_variant_palette,
            tone=lambda s: 30.0 if s.is_dark else 80.0,
            background=self.highest_surface,
            contrast_curve=lambda s: curve,
        )

    @role
    def shadow(self) -> DynamicColor:
        return DynamicColor(
            name="shadow",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: 0.0,
        )

    @role
    def scrim(self) -> DynamicColor:
        return DynamicColor(
            name="scrim",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: 0.0,
        )

    @role
    def surface_tint(self) -> DynamicColor:
        return DynamicColor(
            name="surface_tint",
            palette=lambda s: s.primary_palette,
            tone=lambda s: 80.0 if s.is_dark else 40.0,
            is_background=True,
        )

    # =========================================================================
    # Primaries
    # =========================================================================

    @role
    def primary(self) -> DynamicColor:
        curve = ContrastCurve.of(3.0, 4.5, 7.0, 7.0)

        def tone(s: DynamicScheme) -> float:
            if self._is_monochrome(s):
                return 100.0 if s.is_dark else 0.0
            return 80.0 if s.is_dark else 40.0

        return DynamicColor(
            name="primary",
            palette=lambda s: s.primary_palette,
            tone=tone,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: curve,
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.primary_container(),
                self.primary(),
                10.0,
                TonePolarity.RELATIVE_LIGHTER,
                constraint=DeltaConstraint.NEARER,
            ),
        )

    def primary_dim(self) -> DynamicColor | None:
        return None

    @role
    def on_primary(self) -> DynamicColor:
        curve = ContrastCurve.of(4.5, 7.0, 11.0, 21.0)

        def tone(s: DynamicScheme) -> float:
            if self._is_monochrome(s):
                return 10.0 if s.is_dark else 90.0
            return 20.0 if s.is_dark else 100.0

        return DynamicColor(
            name="on_primary",
            palette=lambda s: s.primary_palette,
            tone=tone,
            background=lambda s: self.primary(),
            contrast_curve=lambda s: curve,
        )

    @role
    def primary_container(self) -> DynamicColor:
        curve = ContrastCurve.of(1.0, 1.0, 3.0, 4.5)

        def tone(s: DynamicScheme) -> float:
            if self._is_fidelity(s):
                return s.source_color_hct.tone
            if self._is_monochrome(s):
                return 85.0 if s.is_dark else 25.0
            return 30.0 if s.is_dark else 90.0

        return DynamicColor(
            name="primary_container",
            palette=lambda s: s.primary_palette,
            tone=tone,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: curve,
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.primary_container(),
                self.primary(),
                10.0,
                TonePolarity.RELATIVE_LIGHTER,
                constraint=DeltaConstraint.NEARER,
            ),
        )

    @role
    def on_primary_container(self) -> DynamicColor:
        curve = ContrastCurve.of(3.0, 4.5, 7.0, 11.0)

        def tone(s: DynamicScheme) -> float:
            if self._is_fidelity(s):
                return DynamicColor.foreground_tone(self.primary_container().tone(s), 4.5)
            if self._is_monochrome(s):
                return 0.0 if s.is_dark else 100.0
            return 90.0 if s.is_dark else 30.0

        return DynamicColor(
            name="on_primary_container",
            palette=lambda s: s.primary_palette,
            tone=tone,
            background=lambda s: self.primary_container(),
            contrast_curve=lambda s: curve,
        )

    @role
    def inverse_primary(self) -> DynamicColor:
        curve = ContrastCurve.of(3.0, 4.5, 7.0, 7.0)
        return DynamicColor(
            name="inverse_primary",
            palette=lambda s: s.primary_palette,
            tone=lambda s: 40.0 if s.is_dark else 80.0,
            background=lambda s: self.inverse_surface(),
            contrast_curve=lambda s: curve,
        )

    # =========================================================================
    # Secondaries
    # =========================================================================

    @role
    def secondary(self) -> DynamicColor:
        curve = ContrastCurve.of(3.0, 4.5, 7.0, 7.0)
        return DynamicColor(
            name="secondary",
            palette=lambda s: s.secondary_palette,
            tone=lambda s: 80.0 if s.is_dark else 40.0,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: curve,
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.secondary_container(),
                self.secondary(),
                10.0,
                TonePolarity.RELATIVE_LIGHTER,
                constraint=DeltaConstraint.NEARER,
            ),
        )

    def secondary_dim(self) -> DynamicColor | None:
        return None

    @role
    def on_secondary(self) -> DynamicColor:
        curve = ContrastCurve.of(4.5, 7.0, 11.0, 21.0)

        def tone(s: DynamicScheme) -> float:
            if self._is_monochrome(s):
                return 10.0 if s.is_dark else 100.0
            return 20.0 if s.is_dark else 100.0

        return DynamicColor(
            name="on_secondary",
            palette=lambda s: s.secondary_palette,
            tone=tone,
            background=lambda s: self.secondary(),
            contrast_curve=lambda s: curve,
        )

    @role
    def secondary_container(self) -> DynamicColor:
        curve = ContrastCurve.of(1.0, 1.0, 3.0, 4.5)

        def tone(s: DynamicScheme) -> float:
            initial = 30.0 if s.is_dark else 90.0
            if self._is_monochrome(s):
                return 30.0 if s.is_dark else 85.0
            if not self._is_fidelity(s):
                return initial
            return self._find_desired_chroma_by_tone(
                s.secondary_palette.hue,
                s.secondary_palette.chroma,
                initial,
                not s.is_dark,
            )

        return DynamicColor(
            name="secondary_container",
            palette=lambda s: s.secondary_palette,
            tone=tone,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: curve,
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.secondary_container(),
                self.secondary(),
                10.0,
                TonePolarity.RELATIVE_LIGHTER,
                constraint=DeltaConstraint.NEARER,
            ),
        )

    @role
    def on_secondary_container(self) -> DynamicColor:
        curve = ContrastCurve.of(3.0, 4.5, 7.0, 11.0)

        def tone(s: DynamicScheme) -> float:
            if self._is_monochrome(s):
                return 90.0 if s.is_dark else 10.0
            if not self._is_fidelity(s):
                return 90.0 if s.is_dark else 30.0
            return DynamicColor.foreground_tone(self.secondary_container().tone(s), 4.5)

        return DynamicColor(
            name="on_secondary_container",
            palette=lambda s: s.secondary_palette,
            tone=tone,
            background=lambda s: self.secondary_container(),
            contrast_curve=lambda s: curve,
        )

    # =========================================================================
    # Tertiaries
    # =========================================================================

    @role
    def tertiary(self) -> DynamicColor:
        curve = ContrastCurve.of(3.0, 4.5, 7.0, 7.0)

        def tone(s: DynamicScheme) -> float:
            if self._is_monochrome(s):
                return 90.0 if s.is_dark else 25.0
            return 80.0 if s.is_dark else 40.0

        return DynamicColor(
            name="tertiary",
            palette=lambda s: s.tertiary_palette,
            tone=tone,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: curve,
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.tertiary_container(),
                self.tertiary(),
                10.0,
                TonePolarity.RELATIVE_LIGHTER,
                constraint=DeltaConstraint.NEARER,
            ),
        )

    def tertiary_dim(self) -> DynamicColor | None:
        return None

    @role
    def on_tertiary(self) -> DynamicColor:
        curve = ContrastCurve.of(4.5, 7.0, 11.0, 21.0)

        def tone(s: DynamicScheme) -> float:
            if self._is_monochrome(s):
                return 10.0 if s.is_dark else 90.0
            return 20.0 if s.is_dark else 100.0

        return DynamicColor(
            name="on_tertiary",
            palette=lambda s: s.tertiary_palette,
            tone=tone,
            background=lambda s: self.tertiary(),
            contrast_curve=lambda s: curve,
        )

    @role
    def tertiary_container(self) -> DynamicColor:
        curve = ContrastCurve.of(1.0, 1.0, 3.0, 4.5)

        def tone(s: DynamicScheme) -> float:
            if self._is_monochrome(s):
                return 60.0 if s.is_dark else 49.0
            if not self._is_fidelity(s):
                return 30.0 if s.is_dark else 90.0
            proposed = s.tertiary_palette.get_hct(s.source_color_hct.tone)
            return fix_if_disliked(proposed).tone

        return DynamicColor(
            name="tertiary_container",
            palette=lambda s: s.tertiary_palette,
            tone=tone,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: curve,
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.tertiary_container(),
                self.tertiary(),
                10.0,
                TonePolarity.RELATIVE_LIGHTER,
                constraint=DeltaConstraint.NEARER,
            ),
        )

    @role
    def on_tertiary_container(self) -> DynamicColor:
        curve = ContrastCurve.of(3.0, 4.5, 7.0, 11.0)

        def tone(s: DynamicScheme) -> float:
            if self._is_monochrome(s):
                return 0.0 if s.is_dark else 100.0
            if not self._is_fidelity(s):
                return 90.0 if s.is_dark else 30.0
            return DynamicColor.foreground_tone(self.tertiary_container().tone(s), 4.5)

        return DynamicColor(
            name="on_tertiary_container",
            palette=lambda s: s.tertiary_palette,
            tone=tone,
            background=lambda s: self.tertiary_container(),
            contrast_curve=lambda s: curve,
        )

    # =========================================================================
    # Errors
    # =========================================================================

    @role
    def error(self) -> DynamicColor:
        curve = ContrastCurve.of(3.0, 4.5, 7.0, 7.0)
        return DynamicColor(
            name="error",
            palette=lambda s: s.error_palette,
            tone=lambda s: 80.0 if s.is_dark else 40.0,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: curve,
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.error_container(),
                self.error(),
                10.0,
                TonePolarity.RELATIVE_LIGHTER,
                constraint=DeltaConstraint.NEARER,
            ),
        )

    def error_dim(self) -> DynamicColor | None:
        return None

    @role
    def on_error(self) -> DynamicColor:
        curve = ContrastCurve.of(4.5, 7.0, 11.0, 21.0)
        return DynamicColor(
            name="on_error",
            palette=lambda s: s.error_palette,
            tone=lambda s: 20.0 if s.is_dark else 100.0,
            background=lambda s: self.error(),
            contrast_curve=lambda s: curve,
        )

    @role
    def error_container(self) -> DynamicColor:
        curve = ContrastCurve.of(1.0, 1.0, 3.0, 4.5)
        return DynamicColor(
            name="error_container",
            palette=lambda s: s.error_palette,
            tone=lambda s: 30.0 if s.is_dark else 90.0,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: curve,
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.error_container(),
                self.error(),
                10.0,
                TonePolarity.RELATIVE_LIGHTER,
                constraint=DeltaConstraint.NEARER,
            ),
        )

    @role
    def on_error_container(self) -> DynamicColor:
        curve = ContrastCurve.of(3.0, 4.5, 7.0, 11.0)
        return DynamicColor(
            name="on_error_container",
            palette=lambda s: s.error_palette,
            tone=lambda s: 90.0 if s.is_dark else 30.0,
            background=lambda s: self.error_container(),
            contrast_curve=lambda s: curve,
        )

    # =========================================================================
    # Fixed colors
    # =========================================================================

    def _fixed_pair(self, fixed: DynamicColor, fixed_dim: DynamicColor) -> ToneDeltaPair:
        return ToneDeltaPair(
            fixed, fixed_dim, 10.0, TonePolarity.LIGHTER, stay_together=True
        )

    @role
    def primary_fixed(self) -> DynamicColor:
        curve = ContrastCurve.of(1.0, 1.0, 3.0, 4.5)
        return DynamicColor(
            name="primary_fixed",
            palette=lambda s: s.primary_palette,
            tone=lambda s: 40.0 if self._is_monochrome(s) else 90.0,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: curve,
            tone_delta_pair=lambda s: self._fixed_pair(
                self.primary_fixed(), self.primary_fixed_dim()
            ),
        )

    @role
    def primary_fixed_dim(self) -> DynamicColor:
        curve = ContrastCurve.of(1.0, 1.0, 3.0, 4.5)
        return DynamicColor(
            name="primary_fixed_dim",
            palette=lambda s: s.primary_palette,
            tone=lambda s: 30.0 if self._is_monochrome(s) else 80.0,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: curve,
            tone_delta_pair=lambda s: self._fixed_pair(
                self.primary_fixed(), self.primary_fixed_dim()
            ),
        )

    @role
    def on_primary_fixed(self) -> DynamicColor:
        curve = ContrastCurve.of(4.5, 7.0, 11.0, 21.0)
        return DynamicColor(
            name="on_primary_fixed",
            palette=lambda s: s.primary_palette,
            tone=lambda s: 100.0 if self._is_monochrome(s) else 10.0,
            background=lambda s: self.primary_fixed_dim(),
            second_background=lambda s: self.primary_fixed(),
            contrast_curve=lambda s: curve,
        )

    @role
    def on_primary_fixed_variant(self) -> DynamicColor:
        curve = ContrastCurve.of(3.0, 4.5, 7.0, 11.0)
        return DynamicColor(
            name="on_primary_fixed_variant",
            palette=lambda s: s.primary_palette,
            tone=lambda s: 90.0 if self._is_monochrome(s) else 30.0,
            background=lambda s: self.primary_fixed_dim(),
            second_background=lambda s: self.primary_fixed(),
            contrast_curve=lambda s: curve,
        )

    @role
    def secondary_fixed(self) -> DynamicColor:
        curve = ContrastCurve.of(1.0, 1.0, 3.0, 4.5)
        return DynamicColor(
            name="secondary_fixed",
            palette=lambda s: s.secondary_palette,
            tone=lambda s: 80.0 if self._is_monochrome(s) else 90.0,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: curve,
            tone_delta_pair=lambda s: self._fixed_pair(
                self.secondary_fixed(), self.secondary_fixed_dim()
            ),
        )

    @role
    def secondary_fixed_dim(self) -> DynamicColor:
        curve = ContrastCurve.of(1.0, 1.0, 3.0, 4.5)
        return DynamicColor(
            name="secondary_fixed_dim",
            palette=lambda s: s.secondary_palette,
            tone=lambda s: 70.0 if self._is_monochrome(s) else 80.0,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: curve,
            tone_delta_pair=lambda s: self._fixed_pair(
                self.secondary_fixed(), self.secondary_fixed_dim()
            ),
        )

    @role
    def on_secondary_fixed(self) -> DynamicColor:
        curve = ContrastCurve.of(4.5, 7.0, 11.0, 21.0)
        return DynamicColor(
            name="on_secondary_fixed",
            palette=lambda s: s.secondary_palette,
            tone=lambda s: 10.0,
            background=lambda s: self.secondary_fixed_dim(),
            second_background=lambda s: self.secondary_fixed(),
            contrast_curve=lambda s: curve,
        )

    @role
    def on_secondary_fixed_variant(self) -> DynamicColor:
        curve = ContrastCurve.of(3.0, 4.5, 7.0, 11.0)
        return DynamicColor(
            name="on_secondary_fixed_variant",
            palette=lambda s: s.secondary_palette,
            tone=lambda s: 25.0 if self._is_monochrome(s) else 30.0,
            background=lambda s: self.secondary_fixed_dim(),
            second_background=lambda s: self.secondary_fixed(),
            contrast_curve=lambda s: curve,
        )

    @role
    def tertiary_fixed(self) -> DynamicColor:
        curve = ContrastCurve.of(1.0, 1.0, 3.0, 4.5)
        return DynamicColor(
            name="tertiary_fixed",
            palette=lambda s: s.tertiary_palette,
            tone=lambda s: 40.0 if self._is_monochrome(s) else 90.0,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: curve,
            tone_delta_pair=lambda s: self._fixed_pair(
                self.tertiary_fixed(), self.tertiary_fixed_dim()
            ),
        )

    @role
    def tertiary_fixed_dim(self) -> DynamicColor:
        curve = ContrastCurve.of(1.0, 1.0, 3.0, 4.5)
        return DynamicColor(
            name="tertiary_fixed_dim",
            palette=lambda s: s.tertiary_palette,
            tone=lambda s: 30.0 if self._is_monochrome(s) else 80.0,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: curve,
            tone_delta_pair=lambda s: self._fixed_pair(
                self.tertiary_fixed(), self.tertiary_fixed_dim()
            ),
        )

    @role
    def on_tertiary_fixed(self) -> DynamicColor:
        curve = ContrastCurve.of(4.5, 7.0, 11.0, 21.0)
        return DynamicColor(
            name="on_tertiary_fixed",
            palette=lambda s: s.tertiary_palette,
            tone=lambda s: 100.0 if self._is_monochrome(s) else 10.0,
            background=lambda s: self.tertiary_fixed_dim(),
            second_background=lambda s: self.tertiary_fixed(),
            contrast_curve=lambda s: curve,
        )

    @role
    def on_tertiary_fixed_variant(self) -> DynamicColor:
        curve = ContrastCurve.of(3.0, 4.5, 7.0, 11.0)
        return DynamicColor(
            name="on_tertiary_fixed_variant",
            palette=lambda s: s.tertiary_palette,
            tone=lambda s: 90.0 if self._is_monochrome(s) else 30.0,
            background=lambda s: self.tertiary_fixed_dim(),
            second_background=lambda s: self.tertiary_fixed(),
            contrast_curve=lambda s: curve,
        )

    # =========================================================================
    # Resolution
    # =========================================================================

    def highest_surface(self, scheme: DynamicScheme) -> DynamicColor:
        """The surface other content is contrasted against."""
        return self.surface_bright() if scheme.is_dark else self.surface_dim()

    def get_hct(self, scheme: DynamicScheme, color: DynamicColor) -> Hct:
        tone = color.get_tone(scheme)
        return color.palette(scheme).get_hct(tone)

    def get_tone(self, scheme: DynamicScheme, color: DynamicColor) -> float:
        """Resolve a role's tone.

        Roles with a tone delta pair are resolved together with their partner
        so the pair keeps its separation. Other roles start from their own
        tone and are pushed away from their background(s) until the contrast
        curve is met.

        Args:
            scheme: Theme inputs
            color: Role to resolve

        Returns:
            Resolved tone
        """
        tone_delta_pair = color.tone_delta_pair(scheme) if color.tone_delta_pair else None
        if tone_delta_pair is not None:
            return self._get_paired_tone(scheme, color, tone_delta_pair)

        answer = color.tone(scheme)
        background = color.background(scheme) if color.background else None
        contrast_curve = color.contrast_curve(scheme) if color.contrast_curve else None
        if background is None or contrast_curve is None:
            return answer

        bg_tone = background.get_tone(scheme)
        desired_ratio = contrast_curve.get(scheme.contrast_level)
        if contrast.ratio_of_tones(bg_tone, answer) < desired_ratio or scheme.contrast_level < 0:
            answer = DynamicColor.foreground_tone(bg_tone, desired_ratio)

        if color.is_background and _in_dead_zone(answer):
            answer = 49.0 if contrast.ratio_of_tones(49.0, bg_tone) >= desired_ratio else 60.0

        second_background = color.second_background(scheme) if color.second_background else None
        if second_background is None:
            return answer
        return _fit_between_backgrounds(
            answer, bg_tone, second_background.get_tone(scheme), desired_ratio
        )

    def _get_paired_tone(
        self, scheme: DynamicScheme, color: DynamicColor, pair: ToneDeltaPair
    ) -> float:
        a_is_nearer = (
            pair.constraint == DeltaConstraint.NEARER
            or (pair.polarity == TonePolarity.LIGHTER and not scheme.is_dark)
            or (pair.polarity == TonePolarity.DARKER and not scheme.is_dark)
        )
        nearer, farther = (pair.role_a, pair.role_b) if a_is_nearer else (pair.role_b, pair.role_a)
        am_nearer = color.name == nearer.name
        expansion_dir = 1.0 if scheme.is_dark else -1.0
        delta = pair.delta

        n_tone = nearer.tone(scheme)
        f_tone = farther.tone(scheme)

        background = color.background(scheme) if color.background else None
        n_curve = nearer.contrast_curve(scheme) if nearer.contrast_curve else None
        f_curve = farther.contrast_curve(scheme) if farther.contrast_curve else None
        if background is not None and n_curve is not None and f_curve is not None:
            n_contrast = n_curve.get(scheme.contrast_level)
            f_contrast = f_curve.get(scheme.contrast_level)
            bg_tone = background.get_tone(scheme)
            if contrast.ratio_of_tones(bg_tone, n_tone) < n_contrast or scheme.contrast_level < 0:
                n_tone = DynamicColor.foreground_tone(bg_tone, n_contrast)
            if contrast.ratio_of_tones(bg_tone, f_tone) < f_contrast or scheme.contrast_level < 0:
                f_tone = DynamicColor.foreground_tone(bg_tone, f_contrast)

        if (f_tone - n_tone) * expansion_dir < delta:
            f_tone = min(max(n_tone + delta * expansion_dir, 0.0), 100.0)
            if (f_tone - n_tone) * expansion_dir < delta:
                n_tone = min(max(f_tone - delta * expansion_dir, 0.0), 100.0)

        if _in_dead_zone(n_tone) or (_in_dead_zone(f_tone) and pair.stay_together):
            if expansion_dir > 0:
                n_tone = 60.0
                f_tone = max(f_tone, n_tone + delta * expansion_dir)
            else:
                n_tone = 49.0
                f_tone = min(f_tone, n_tone + delta * expansion_dir)
        elif _in_dead_zone(f_tone):
            f_tone = 60.0 if expansion_dir > 0 else 49.0

        return n_tone if am_nearer else f_tone

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
        hue, chroma = source_color_hct.hue, source_color_hct.chroma
        match variant:
            case Variant.CONTENT | Variant.FIDELITY:
                return TonalPalette.from_hue_and_chroma(hue, chroma)
            case Variant.FRUIT_SALAD:
                return TonalPalette.from_hue_and_chroma(sanitize_degrees_double(hue - 50.0), 48.0)
            case Variant.MONOCHROME:
                return TonalPalette.from_hue_and_chroma(hue, 0.0)
            case Variant.NEUTRAL:
                return TonalPalette.from_hue_and_chroma(hue, 12.0)
            case Variant.RAINBOW:
                return TonalPalette.from_hue_and_chroma(hue, 48.0)
            case Variant.TONAL_SPOT:
                return TonalPalette.from_hue_and_chroma(hue, 36.0)
            case Variant.EXPRESSIVE:
                return TonalPalette.from_hue_and_chroma(sanitize_degrees_double(hue + 240.0), 40.0)
            case Variant.VIBRANT:
                return TonalPalette.from_hue_and_chroma(hue, 200.0)
        raise self._unsupported(variant)

    def get_secondary_palette(
        self,
        variant: Variant,
        source_color_hct: Hct,
        is_dark: bool,
        platform: Platform,
        contrast_level: float,
    ) -> TonalPalette:
        hue, chroma = source_color_hct.hue, source_color_hct.chroma
        match variant:
            case Variant.CONTENT | Variant.FIDELITY:
                return TonalPalette.from_hue_and_chroma(hue, max(chroma - 32.0, chroma * 0.5))
            case Variant.FRUIT_SALAD:
                return TonalPalette.from_hue_and_chroma(sanitize_degrees_double(hue - 50.0), 36.0)
            case Variant.MONOCHROME:
                return TonalPalette.from_hue_and_chroma(hue, 0.0)
            case Variant.NEUTRAL:
                return TonalPalette.from_hue_and_chroma(hue, 8.0)
            case Variant.RAINBOW | Variant.TONAL_SPOT:
                return TonalPalette.from_hue_and_chroma(hue, 16.0)
            case Variant.EXPRESSIVE:
                return TonalPalette.from_hue_and_chroma(
                    DynamicScheme.get_rotated_hue(
                        source_color_hct,
                        EXPRESSIVE_HUE_BREAKPOINTS,
                        EXPRESSIVE_SECONDARY_ROTATIONS,
                    ),
                    24.0,
                )
            case Variant.VIBRANT:
                return TonalPalette.from_hue_and_chroma(
                    DynamicScheme.get_rotated_hue(
                        source_color_hct, VIBRANT_HUE_BREAKPOINTS, VIBRANT_SECONDARY_ROTATIONS
                    ),
                    24.0,
                )
        raise self._unsupported(variant)

    def get_tertiary_palette(
        self,
        variant: Variant,
        source_color_hct: Hct,
        is_dark: bool,
        platform: Platform,
        contrast_level: float,
    ) -> TonalPalette:
        hue = source_color_hct.hue
        match variant:
            case Variant.CONTENT:
                analogous = TemperatureCache(source_color_hct).get_analogous_colors(3, 6)
                return TonalPalette.from_hct(fix_if_disliked(analogous[2]))
            case Variant.FIDELITY:
                complement = TemperatureCache(source_color_hct).complement
                return TonalPalette.from_hct(fix_if_disliked(complement))
            case Variant.FRUIT_SALAD:
                return TonalPalette.from_hue_and_chroma(hue, 36.0)
            case Variant.MONOCHROME:
                return TonalPalette.from_hue_and_chroma(hue, 0.0)
            case Variant.NEUTRAL:
                return TonalPalette.from_hue_and_chroma(hue, 16.0)
            case Variant.RAINBOW | Variant.TONAL_SPOT:
                return TonalPalette.from_hue_and_chroma(sanitize_degrees_double(hue + 60.0), 24.0)
            case Variant.EXPRESSIVE:
                return TonalPalette.from_hue_and_chroma(
                    DynamicScheme.get_rotated_hue(
                        source_color_hct,
                        EXPRESSIVE_HUE_BREAKPOINTS,
                        EXPRESSIVE_TERTIARY_ROTATIONS,
                    ),
                    32.0,
                )
            case Variant.VIBRANT:
                return TonalPalette.from_hue_and_chroma(
                    DynamicScheme.get_rotated_hue(
                        source_color_hct, VIBRANT_HUE_BREAKPOINTS, VIBRANT_TERTIARY_ROTATIONS
                    ),
                    32.0,
                )
        raise self._unsupported(variant)

    def get_neutral_palette(
        self,
        variant: Variant,
        source_color_hct: Hct,
        is_dark: bool,
        platform: Platform,
        contrast_level: float,
    ) -> TonalPalette:
        hue, chroma = source_color_hct.hue, source_color_hct.chroma
        match variant:
            case Variant.CONTENT | Variant.FIDELITY:
                return TonalPalette.from_hue_and_chroma(hue, chroma / 8.0)
            case Variant.FRUIT_SALAD | Variant.VIBRANT:
                return TonalPalette.from_hue_and_chroma(hue, 10.0)
            case Variant.MONOCHROME | Variant.RAINBOW:
                return TonalPalette.from_hue_and_chroma(hue, 0.0)
            case Variant.NEUTRAL:
                return TonalPalette.from_hue_and_chroma(hue, 2.0)
            case Variant.TONAL_SPOT:
                return TonalPalette.from_hue_and_chroma(hue, 6.0)
            case Variant.EXPRESSIVE:
                return TonalPalette.from_hue_and_chroma(sanitize_degrees_double(hue + 15.0), 8.0)
        raise self._unsupported(variant)

    def get_neutral_variant_palette(
        self,
        variant: Variant,
        source_color_hct: Hct,
        is_dark: bool,
        platform: Platform,
        contrast_level: float,
    ) -> TonalPalette:
        hue, chroma = source_color_hct.hue, source_color_hct.chroma
        match variant:
            case Variant.CONTENT | Variant.FIDELITY:
                return TonalPalette.from_hue_and_chroma(hue, chroma / 8.0 + 4.0)
            case Variant.FRUIT_SALAD:
                return TonalPalette.from_hue_and_chroma(hue, 16.0)
            case Variant.MONOCHROME | Variant.RAINBOW:
                return TonalPalette.from_hue_and_chroma(hue, 0.0)
            case Variant.NEUTRAL:
                return TonalPalette.from_hue_and_chroma(hue, 2.0)
            case Variant.TONAL_SPOT:
                return TonalPalette.from_hue_and_chroma(hue, 8.0)
            case Variant.EXPRESSIVE:
                return TonalPalette.from_hue_and_chroma(sanitize_degrees_double(hue + 15.0), 12.0)
            case Variant.VIBRANT:
                return TonalPalette.from_hue_and_chroma(hue, 12.0)
        raise self._unsupported(variant)

    def get_error_palette(
        self,
        variant: Variant,
        source_color_hct: Hct,
        is_dark: bool,
        platform: Platform,
        contrast_level: float,
    ) -> TonalPalette:
        """Fixed red error palette shared by every 2021 variant."""
        return TonalPalette.from_hue_and_chroma(25.0, 84.0)


def _fit_between_backgrounds(
    answer: float, bg_tone1: float, bg_tone2: float, desired_ratio: float
) -> float:
    """Move a foreground tone so it contrasts with both backgrounds.

    Light backgrounds get the lightest passing tone, 100 if none passes.
    Otherwise the darker passing tone wins, then the lighter one, then 0.
    """
    upper = max(bg_tone1, bg_tone2)
    lower = min(bg_tone1, bg_tone2)
    if (
        contrast.ratio_of_tones(upper, answer) >= desired_ratio
        and contrast.ratio_of_tones(lower, answer) >= desired_ratio
    ):
        return answer

    light_option = contrast.lighter(upper, desired_ratio)
    dark_option = contrast.darker(lower, desired_ratio)
    if DynamicColor.tone_prefers_light_foreground(
        bg_tone1
    ) or DynamicColor.tone_prefers_light_foreground(bg_tone2):
        return 100.0 if light_option is None else light_option
    if dark_option is not None:
        return dark_option
    return 0.0 if light_option is None else light_option
