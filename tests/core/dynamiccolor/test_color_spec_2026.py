"""Tests for the 2026 color roles."""

from __future__ import annotations

import pytest

from chromatone.core.color import contrast
from chromatone.core.color.hct import Hct
from chromatone.core.dynamiccolor.color_specs import ColorSpecs
from chromatone.core.dynamiccolor.dynamic_scheme import DynamicScheme
from chromatone.core.dynamiccolor.enums import SpecVersion, Variant
from chromatone.core.dynamiccolor.material_dynamic_colors import ROLE_NAMES, MaterialDynamicColors
from chromatone.core.scheme.factory import create_scheme


@pytest.fixture
def colors(color_specs: ColorSpecs) -> MaterialDynamicColors:
    return MaterialDynamicColors(SpecVersion.SPEC_2026, color_specs)


class TestCmfSurfaces:
    def test_light_surfaces(self, colors: MaterialDynamicColors, cmf_light: DynamicScheme) -> None:
        assert colors.surface.get_tone(cmf_light) == 98.0
        assert colors.surface_dim.get_tone(cmf_light) == 87.0
        assert colors.surface_container_lowest.get_tone(cmf_light) == 100.0

    def test_dark_surfaces(
        self, colors: MaterialDynamicColors, blue_hct: Hct, color_specs: ColorSpecs
    ) -> None:
        scheme = create_scheme(
            blue_hct, Variant.CMF, True, spec_version=SpecVersion.SPEC_2026, color_specs=color_specs
        )
        assert colors.surface.get_tone(scheme) == 4.0
        assert colors.surface_bright.get_tone(scheme) == 18.0

    def test_on_surface_is_legible(
        self, colors: MaterialDynamicColors, cmf_light: DynamicScheme
    ) -> None:
        on_surface = colors.on_surface.get_tone(cmf_light)
        highest = colors.highest_surface(cmf_light).get_tone(cmf_light)
        assert contrast.ratio_of_tones(on_surface, highest) >= 4.5


class TestCmfResolution:
    def test_resolves_every_role(
        self, colors: MaterialDynamicColors, cmf_light: DynamicScheme
    ) -> None:
        resolved = colors.resolve_all(cmf_light)
        assert list(resolved) == list(ROLE_NAMES)

    @pytest.mark.parametrize("is_dark", [False, True])
    @pytest.mark.parametrize("contrast_level", [-1.0, 0.0, 0.5, 1.0])
    def test_tones_in_range(
        self,
        colors: MaterialDynamicColors,
        blue_hct: Hct,
        color_specs: ColorSpecs,
        is_dark: bool,
        contrast_level: float,
    ) -> None:
        scheme = create_scheme(
            blue_hct,
            Variant.CMF,
            is_dark,
            contrast_level,
            spec_version=SpecVersion.SPEC_2026,
            color_specs=color_specs,
        )
        for accessor in colors.all_dynamic_colors():
            tone = accessor().get_tone(scheme)
            assert 0.0 <= tone <= 100.0

    def test_on_primary_is_legible(
        self, colors: MaterialDynamicColors, cmf_light: DynamicScheme
    ) -> None:
        ratio = contrast.ratio_of_tones(
            colors.on_primary.get_tone(cmf_light), colors.primary.get_tone(cmf_light)
        )
        assert ratio >= 4.5


class TestFallback:
    def test_roles_extend_2025(self, color_specs: ColorSpecs) -> None:
        old = MaterialDynamicColors(SpecVersion.SPEC_2025, color_specs)
        new = MaterialDynamicColors(SpecVersion.SPEC_2026, color_specs)
        assert new.surface is not old.surface
        assert new.primary_dim is not None
        assert new.primary_dim.name == old.primary_dim.name

    def test_non_cmf_variants_resolve_like_2025(
        self, blue_hct: Hct, color_specs: ColorSpecs
    ) -> None:
        requested = create_scheme(
            blue_hct,
            Variant.TONAL_SPOT,
            False,
            spec_version=SpecVersion.SPEC_2026,
            color_specs=color_specs,
        )
        reference = create_scheme(
            blue_hct,
            Variant.TONAL_SPOT,
            False,
            spec_version=SpecVersion.SPEC_2025,
            color_specs=color_specs,
        )
        assert requested.spec_version == SpecVersion.SPEC_2025
        colors = MaterialDynamicColors(SpecVersion.SPEC_2025, color_specs)
        assert colors.resolve_all(requested) == colors.resolve_all(reference)

    def test_2026_roles_keep_2025_rules_for_older_schemes(
        self, colors: MaterialDynamicColors, tonal_spot_2025_light: DynamicScheme
    ) -> None:
        old = MaterialDynamicColors(SpecVersion.SPEC_2025, tonal_spot_2025_light.color_specs)
        assert colors.surface.get_tone(tonal_spot_2025_light) == old.surface.get_tone(
            tonal_spot_2025_light
        )
