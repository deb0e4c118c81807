"""Tests for the 2025 color roles, palettes and tone resolution."""

from __future__ import annotations

import pytest

from chromatone.core.color.hct import Hct
from chromatone.core.color.tonal_palette import TonalPalette
from chromatone.core.dynamiccolor.color_spec_2025 import (
    ColorSpec2025,
    get_contrast_curve,
    t_max_c,
    t_min_c,
)
from chromatone.core.dynamiccolor.contrast_curve import ContrastCurve
from chromatone.core.dynamiccolor.dynamic_scheme import DynamicScheme
from chromatone.core.dynamiccolor.enums import Platform, SpecVersion, Variant
from chromatone.core.dynamiccolor.material_dynamic_colors import ROLE_NAMES, MaterialDynamicColors
from chromatone.core.scheme.factory import create_scheme

VARIANTS_2025 = [Variant.TONAL_SPOT, Variant.NEUTRAL, Variant.VIBRANT, Variant.EXPRESSIVE]


@pytest.fixture
def colors() -> MaterialDynamicColors:
    return MaterialDynamicColors(SpecVersion.SPEC_2025)


def _scheme(source: Hct, variant: Variant, is_dark: bool, **kwargs: object) -> DynamicScheme:
    return create_scheme(source, variant, is_dark, spec_version=SpecVersion.SPEC_2025, **kwargs)  # type: ignore[arg-type]


class TestContrastCurves:
    @pytest.mark.parametrize(
        ("default", "expected"),
        [
            (1.5, (1.5, 1.5, 3.0, 5.5)),
            (3.0, (3.0, 3.0, 4.5, 7.0)),
            (4.5, (4.5, 4.5, 7.0, 11.0)),
            (6.0, (6.0, 6.0, 7.0, 11.0)),
            (7.0, (7.0, 7.0, 11.0, 21.0)),
            (9.0, (9.0, 9.0, 11.0, 21.0)),
            (11.0, (11.0, 11.0, 21.0, 21.0)),
            (21.0, (21.0, 21.0, 21.0, 21.0)),
            (2.0, (2.0, 2.0, 7.0, 21.0)),
        ],
    )
    def test_standard_curves(self, default: float, expected: tuple[float, ...]) -> None:
        assert get_contrast_curve(default) == ContrastCurve.of(*expected)

    def test_curves_are_shared(self) -> None:
        assert get_contrast_curve(4.5) is get_contrast_curve(4.5)


class TestChromaPeaks:
    def test_t_max_c_is_within_bounds(self) -> None:
        palette = TonalPalette.from_hue_and_chroma(270.0, 36.0)
        assert 0.0 <= t_max_c(palette) <= 100.0
        assert t_max_c(palette, 0.0, 30.0) <= 30.0

    def test_t_min_c_is_not_above_t_max_c(self) -> None:
        palette = TonalPalette.from_hue_and_chroma(140.0, 80.0)
        assert t_min_c(palette) <= t_max_c(palette)


class TestRoles:
    def test_dim_roles_exist(self, colors: MaterialDynamicColors) -> None:
        for name in ("primary_dim", "secondary_dim", "tertiary_dim", "error_dim"):
            assert getattr(colors, name) is not None

    def test_roles_extend_2021(self, color_specs) -> None:  # type: ignore[no-untyped-def]
        old = MaterialDynamicColors(SpecVersion.SPEC_2021, color_specs)
        new = MaterialDynamicColors(SpecVersion.SPEC_2025, color_specs)
        assert new.primary is not old.primary
        assert new.primary.name == old.primary.name

    def test_background_follows_surface(
        self, colors: MaterialDynamicColors, tonal_spot_2025_light: DynamicScheme
    ) -> None:
        assert colors.background.get_tone(tonal_spot_2025_light) == colors.surface.get_tone(
            tonal_spot_2025_light
        )

    def test_surface_tones(self, colors: MaterialDynamicColors, blue_hct: Hct) -> None:
        assert colors.surface.get_tone(_scheme(blue_hct, Variant.TONAL_SPOT, False)) == 98.0
        assert colors.surface.get_tone(_scheme(blue_hct, Variant.TONAL_SPOT, True)) == 4.0
        assert colors.surface.get_tone(_scheme(blue_hct, Variant.VIBRANT, False)) == 97.0

    def test_watch_surfaces_are_black(self, colors: MaterialDynamicColors, blue_hct: Hct) -> None:
        scheme = _scheme(blue_hct, Variant.TONAL_SPOT, True, platform=Platform.WATCH)
        assert colors.surface.get_tone(scheme) == 0.0
        assert colors.on_background.get_tone(scheme) == 100.0

    @pytest.mark.parametrize("is_dark", [False, True])
    def test_fixed_dim_is_five_darker(
        self, colors: MaterialDynamicColors, blue_hct: Hct, is_dark: bool
    ) -> None:
        scheme = _scheme(blue_hct, Variant.TONAL_SPOT, is_dark)
        fixed = colors.primary_fixed.get_tone(scheme)
        assert colors.primary_fixed_dim.get_tone(scheme) == pytest.approx(fixed - 5.0)

    @pytest.mark.parametrize("variant", VARIANTS_2025)
    @pytest.mark.parametrize("is_dark", [False, True])
    def test_background_roles_avoid_mid_band(
        self, colors: MaterialDynamicColors, blue_hct: Hct, variant: Variant, is_dark: bool
    ) -> None:
        scheme = _scheme(blue_hct, variant, is_dark)
        for name in ROLE_NAMES:
            color = getattr(colors, name)
            if not color.is_background or name.endswith("_fixed_dim"):
                continue
            tone = color.get_tone(scheme)
            assert tone <= 49.0 or tone >= 65.0, name

    def test_chroma_multiplier_scales_surfaces(
        self, colors: MaterialDynamicColors, tonal_spot_2025_light: DynamicScheme
    ) -> None:
        hct = colors.surface_container_highest.get_hct(tonal_spot_2025_light)
        palette = tonal_spot_2025_light.neutral_palette
        assert hct.chroma > palette.chroma


class TestPalettes:
    def test_error_palette_depends_on_source(self) -> None:
        spec = ColorSpec2025()
        blue = Hct.from_argb(0xFF0000FF)
        palette = spec.get_error_palette(Variant.TONAL_SPOT, blue, False, Platform.PHONE, 0.0)
        assert palette.hue in (12.0, 22.0, 32.0)

    def test_2021_variants_fall_back(self, blue_hct: Hct) -> None:
        spec = ColorSpec2025()
        old = create_scheme(blue_hct, Variant.FRUIT_SALAD, False)
        palette = spec.get_primary_palette(Variant.FRUIT_SALAD, blue_hct, False, Platform.PHONE, 0.0)
        assert palette == old.primary_palette
