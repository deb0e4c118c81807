"""Color roles of the 2026 Material color spec.

Only the CMF variant resolves against these rules; other variants fall back
to 2025 when their scheme is built. Tone resolution and palette generation
are inherited unchanged from 2025.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from chromatone.core.color.hct import Hct
from chromatone.core.dynamiccolor.color_spec import role
from chromatone.core.dynamiccolor.color_spec_2025 import (
    ColorSpec2025,
    get_contrast_curve,
    t_max_c,
    t_min_c,
)
from chromatone.core.dynamiccolor.contrast_curve import ContrastCurve
from chromatone.core.dynamiccolor.dynamic_color import DynamicColor, SchemeFn
from chromatone.core.dynamiccolor.dynamic_scheme import DynamicScheme
from chromatone.core.dynamiccolor.enums import (
    DeltaConstraint,
    SpecVersion,
    TonePolarity,
    Variant,
)
from chromatone.core.dynamiccolor.tone_delta_pair import ToneDeltaPair
from chromatone.core.utils.math import clamp

logger = logging.getLogger(__name__)

RoleFactory = Callable[[], DynamicColor]

# Source chroma at or below this is treated as grayscale.
_LOW_CHROMA = 12.0


def _cmf_tone(dark: float, light: float) -> SchemeFn[float]:
    """Tone rule for CMF surfaces; other variants resolve to black."""

    def tone(s: DynamicScheme) -> float:
        if s.variant != Variant.CMF:
            return 0.0
        return dark if s.is_dark else light

    return tone


def _cmf_chroma(dark: float, light: float | None = None) -> SchemeFn[float]:
    """Chroma multiplier that mutes the palette outside CMF."""
    light = dark if light is None else light

    def chroma_multiplier(s: DynamicScheme) -> float:
        if s.variant != Variant.CMF:
            return 0.0
        return dark if s.is_dark else light

    return chroma_multiplier


def _secondary_source(scheme: DynamicScheme) -> Hct:
    sources = scheme.source_color_hct_list
    return sources[1] if len(sources) > 1 else sources[0]


def _container_curve(scheme: DynamicScheme) -> ContrastCurve | None:
    return get_contrast_curve(1.5) if scheme.contrast_level > 0 else None


class ColorSpec2026(ColorSpec2025):
    """2026 role definitions layered over the 2025 ones."""

    spec_version: SpecVersion = SpecVersion.SPEC_2026

    def _extend_2026(self, base: DynamicColor, extension: DynamicColor) -> DynamicColor:
        return base.extend_spec_version(SpecVersion.SPEC_2026, extension)

    def _surface_role(
        self,
        base: DynamicColor,
        dark: float,
        light: float,
        chroma_multiplier: SchemeFn[float] | None = None,
    ) -> DynamicColor:
        return self._extend_2026(
            base,
            DynamicColor(
                name=base.name,
                palette=lambda s: s.neutral_palette,
                tone=_cmf_tone(dark, light),
                is_background=True,
                chroma_multiplier=chroma_multiplier,
            ),
        )

    def _on_surface_role(
        self, base: DynamicColor, contrast_curve: SchemeFn[ContrastCurve]
    ) -> DynamicColor:
        return self._extend_2026(
            base,
            DynamicColor(
                name=base.name,
                palette=lambda s: s.neutral_palette,
                chroma_multiplier=_cmf_chroma(1.7),
                background=self.highest_surface,
                contrast_curve=contrast_curve,
            ),
        )

    def _on_role(
        self, base: DynamicColor, background: RoleFactory, contrast: float
    ) -> DynamicColor:
        """Text role drawn on ``background`` with a fixed standard curve."""
        curve = get_contrast_curve(contrast)
        return self._extend_2026(
            base,
            DynamicColor(
                name=base.name,
                palette=base.palette,
                background=lambda s: background(),
                contrast_curve=lambda s: curve,
            ),
        )

    def _container_pair(
        self, container: RoleFactory, accent: RoleFactory
    ) -> SchemeFn[ToneDeltaPair]:
        return lambda s: ToneDeltaPair(
            container(),
            accent(),
            5.0,
            TonePolarity.RELATIVE_LIGHTER,
            stay_together=True,
            constraint=DeltaConstraint.FARTHER,
        )

    def _fixed_role(self, base: DynamicColor, container: RoleFactory) -> DynamicColor:
        return self._extend_2026(
            base,
            DynamicColor(
                name=base.name,
                palette=base.palette,
                tone=lambda s: container().get_tone(DynamicScheme.from_scheme(s, False, 0.0)),
                is_background=True,
                background=self.highest_surface,
                contrast_curve=_container_curve,
            ),
        )

    def _fixed_dim_role(
        self, base: DynamicColor, fixed: RoleFactory, fixed_dim: RoleFactory
    ) -> DynamicColor:
        return self._extend_2026(
            base,
            DynamicColor(
                name=base.name,
                palette=base.palette,
                tone=lambda s: fixed().get_tone(s),
                is_background=True,
                background=self.highest_surface,
                contrast_curve=_container_curve,
                tone_delta_pair=lambda s: ToneDeltaPair(
                    fixed_dim(),
                    fixed(),
                    5.0,
                    TonePolarity.DARKER,
                    stay_together=True,
                    constraint=DeltaConstraint.EXACT,
                ),
            ),
        )

    # =========================================================================
    # Surfaces
    # =========================================================================

    @role
    def surface(self) -> DynamicColor:
        return self._surface_role(super().surface(), 4.0, 98.0)

    @role
    def surface_dim(self) -> DynamicColor:
        return self._surface_role(super().surface_dim(), 4.0, 87.0, _cmf_chroma(1.0, 1.7))

    @role
    def surface_bright(self) -> DynamicColor:
        return self._surface_role(super().surface_bright(), 18.0, 98.0, _cmf_chroma(1.7, 1.0))

    @role
    def surface_container_lowest(self) -> DynamicColor:
        return self._surface_role(super().surface_container_lowest(), 0.0, 100.0)

    @role
    def surface_container_low(self) -> DynamicColor:
        return self._surface_role(super().surface_container_low(), 6.0, 96.0, _cmf_chroma(1.25))

    @role
    def surface_container(self) -> DynamicColor:
        return self._surface_role(super().surface_container(), 9.0, 94.0, _cmf_chroma(1.4))

    @role
    def surface_container_high(self) -> DynamicColor:
        return self._surface_role(super().surface_container_high(), 12.0, 92.0, _cmf_chroma(1.5))

    @role
    def surface_container_highest(self) -> DynamicColor:
        return self._surface_role(
            super().surface_container_highest(), 15.0, 90.0, _cmf_chroma(1.7)
        )

    @role
    def on_surface(self) -> DynamicColor:
        return self._on_surface_role(
            super().on_surface(),
            lambda s: get_contrast_curve(11.0 if s.is_dark else 9.0),
        )

    @role
    def on_surface_variant(self) -> DynamicColor:
        return self._on_surface_role(
            super().on_surface_variant(),
            lambda s: get_contrast_curve(6.0 if s.is_dark else 4.5),
        )

    @role
    def outline(self) -> DynamicColor:
        return self._on_surface_role(super().outline(), lambda s: get_contrast_curve(3.0))

    @role
    def outline_variant(self) -> DynamicColor:
        return self._on_surface_role(super().outline_variant(), lambda s: get_contrast_curve(1.5))

    @role
    def inverse_surface(self) -> DynamicColor:
        return self._extend_2026(
            super().inverse_surface(),
            DynamicColor(
                name="inverse_surface",
                palette=lambda s: s.neutral_palette,
                tone=lambda s: 98.0 if s.is_dark else 4.0,
                is_background=True,
                chroma_multiplier=_cmf_chroma(1.7),
            ),
        )

    @role
    def inverse_on_surface(self) -> DynamicColor:
        return self._on_role(super().inverse_on_surface(), self.inverse_surface, 7.0)

    # =========================================================================
    # Primaries
    # =========================================================================

    @role
    def primary(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            if s.source_color_hct.chroma <= _LOW_CHROMA:
                return 80.0 if s.is_dark else 40.0
            return s.source_color_hct.tone

        return self._extend_2026(
            super().primary(),
            DynamicColor(
                name="primary",
                palette=lambda s: s.primary_palette,
                tone=tone,
                is_background=True,
                background=self.highest_surface,
                contrast_curve=lambda s: get_contrast_curve(4.5),
            ),
        )

    @role
    def on_primary(self) -> DynamicColor:
        return self._on_role(super().on_primary(), self.primary, 6.0)

    @role
    def primary_container(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            source = s.source_color_hct
            if not s.is_dark and source.chroma <= _LOW_CHROMA:
                return 90.0
            if source.tone > 55.0:
                return clamp(source.tone, 61.0, 90.0)
            return clamp(source.tone, 30.0, 49.0)

        return self._extend_2026(
            super().primary_container(),
            DynamicColor(
                name="primary_container",
                palette=lambda s: s.primary_palette,
                tone=tone,
                is_background=True,
                background=self.highest_surface,
                contrast_curve=_container_curve,
                tone_delta_pair=self._container_pair(self.primary_container, self.primary),
            ),
        )

    @role
    def on_primary_container(self) -> DynamicColor:
        return self._on_role(super().on_primary_container(), self.primary_container, 6.0)

    @role
    def primary_fixed(self) -> DynamicColor:
        return self._fixed_role(super().primary_fixed(), self.primary_container)

    @role
    def primary_fixed_dim(self) -> DynamicColor:
        return self._fixed_dim_role(
            super().primary_fixed_dim(), self.primary_fixed, self.primary_fixed_dim
        )

    @role
    def on_primary_fixed(self) -> DynamicColor:
        return self._on_role(super().on_primary_fixed(), self.primary_fixed_dim, 7.0)

    @role
    def on_primary_fixed_variant(self) -> DynamicColor:
        return self._on_role(super().on_primary_fixed_variant(), self.primary_fixed_dim, 4.5)

    # =========================================================================
    # Secondaries
    # =========================================================================

    @role
    def secondary(self) -> DynamicColor:
        return self._extend_2026(
            super().secondary(),
            DynamicColor(
                name="secondary",
                palette=lambda s: s.secondary_palette,
                tone=lambda s: (
                    t_min_c(s.secondary_palette) if s.is_dark else t_max_c(s.secondary_palette)
                ),
                is_background=True,
                background=self.highest_surface,
                contrast_curve=lambda s: get_contrast_curve(4.5),
            ),
        )

    @role
    def on_secondary(self) -> DynamicColor:
        return self._on_role(super().on_secondary(), self.secondary, 6.0)

    @role
    def secondary_container(self) -> DynamicColor:
        return self._extend_2026(
            super().secondary_container(),
            DynamicColor(
                name="secondary_container",
                palette=lambda s: s.secondary_palette,
                tone=lambda s: (
                    t_min_c(s.secondary_palette, 20.0, 49.0)
                    if s.is_dark
                    else t_max_c(s.secondary_palette, 61.0, 90.0)
                ),
                is_background=True,
                background=self.highest_surface,
                contrast_curve=_container_curve,
                tone_delta_pair=self._container_pair(self.secondary_container, self.secondary),
            ),
        )

    @role
    def on_secondary_container(self) -> DynamicColor:
        return self._on_role(super().on_secondary_container(), self.secondary_container, 6.0)

    @role
    def secondary_fixed(self) -> DynamicColor:
        return self._fixed_role(super().secondary_fixed(), self.secondary_container)

    @role
    def secondary_fixed_dim(self) -> DynamicColor:
        return self._fixed_dim_role(
            super().secondary_fixed_dim(), self.secondary_fixed, self.secondary_fixed_dim
        )

    @role
    def on_secondary_fixed(self) -> DynamicColor:
        return self._on_role(super().on_secondary_fixed(), self.secondary_fixed_dim, 7.0)

    @role
    def on_secondary_fixed_variant(self) -> DynamicColor:
        return self._on_role(super().on_secondary_fixed_variant(), self.secondary_fixed_dim, 4.5)

    # =========================================================================
    # Tertiaries
    # =========================================================================

    @role
    def tertiary(self) -> DynamicColor:
        return self._extend_2026(
            super().tertiary(),
            DynamicColor(
                name="tertiary",
                palette=lambda s: s.tertiary_palette,
                tone=lambda s: _secondary_source(s).tone,
                is_background=True,
                background=self.highest_surface,
                contrast_curve=lambda s: get_contrast_curve(4.5),
            ),
        )

    @role
    def on_tertiary(self) -> DynamicColor:
        return self._on_role(super().on_tertiary(), self.tertiary, 6.0)

    @role
    def tertiary_container(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            source_tone = _secondary_source(s).tone
            if source_tone > 55.0:
                return clamp(source_tone, 61.0, 90.0)
            return clamp(source_tone, 20.0, 49.0)

        return self._extend_2026(
            super().tertiary_container(),
            DynamicColor(
                name="tertiary_container",
                palette=lambda s: s.tertiary_palette,
                tone=tone,
                is_background=True,
                background=self.highest_surface,
                contrast_curve=_container_curve,
                tone_delta_pair=self._container_pair(self.tertiary_container, self.tertiary),
            ),
        )

    @role
    def on_tertiary_container(self) -> DynamicColor:
        return self._on_role(super().on_tertiary_container(), self.tertiary_container, 6.0)

    @role
    def tertiary_fixed(self) -> DynamicColor:
        return self._fixed_role(super().tertiary_fixed(), self.tertiary_container)

    @role
    def tertiary_fixed_dim(self) -> DynamicColor:
        return self._fixed_dim_role(
            super().tertiary_fixed_dim(), self.tertiary_fixed, self.tertiary_fixed_dim
        )

    @role
    def on_tertiary_fixed(self) -> DynamicColor:
        return self._on_role(super().on_tertiary_fixed(), self.tertiary_fixed_dim, 7.0)

    @role
    def on_tertiary_fixed_variant(self) -> DynamicColor:
        return self._on_role(super().on_tertiary_fixed_variant(), self.tertiary_fixed_dim, 4.5)

    # =========================================================================
    # Errors
    # =========================================================================

    @role
    def error(self) -> DynamicColor:
        return self._extend_2026(
            super().error(),
            DynamicColor(
                name="error",
                palette=lambda s: s.error_palette,
                tone=lambda s: t_max_c(s.error_palette),
                is_background=True,
                background=self.highest_surface,
                contrast_curve=lambda s: get_contrast_curve(4.5),
            ),
        )

    @role
    def on_error(self) -> DynamicColor:
        return self._on_role(super().on_error(), self.error, 6.0)

    @role
    def error_container(self) -> DynamicColor:
        return self._extend_2026(
            super().error_container(),
            DynamicColor(
                name="error_container",
                palette=lambda s: s.error_palette,
                tone=lambda s: (
                    t_min_c(s.error_palette) if s.is_dark else t_max_c(s.error_palette)
                ),
                is_background=True,
                background=self.highest_surface,
                contrast_curve=_container_curve,
                tone_delta_pair=self._container_pair(self.error_container, self.error),
            ),
        )

    @role
    def on_error_container(self) -> DynamicColor:
        return self._on_role(super().on_error_container(), self.error_container, 6.0)
