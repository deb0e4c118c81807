"""Tests for DynamicScheme."""

from __future__ import annotations

import pytest

from chromatone.core.color.hct import Hct
from chromatone.core.color.tonal_palette import TonalPalette
from chromatone.core.dynamiccolor.dynamic_scheme import DynamicScheme
from chromatone.core.dynamiccolor.enums import Platform, SpecVersion, Variant
from chromatone.core.dynamiccolor.material_dynamic_colors import MaterialDynamicColors
from chromatone.core.scheme.factory import create_scheme
from chromatone.core.utils.math import sanitize_degrees_double

BREAKPOINTS = [0.0, 100.0, 200.0, 300.0, 360.0]


def _scheme(**overrides: object) -> DynamicScheme:
    palette = TonalPalette.from_hue_and_chroma(270.0, 36.0)
    kwargs: dict[str, object] = {
        "source_color_hct_list": (Hct.from_argb(0xFF6750A4),),
        "variant": Variant.TONAL_SPOT,
        "is_dark": False,
        "contrast_level": 0.0,
        "primary_palette": palette,
        "secondary_palette": palette,
        "tertiary_palette": palette,
        "neutral_palette": palette,
        "neutral_variant_palette": palette,
        "error_palette": palette,
    }
    kwargs.update(overrides)
    return DynamicScheme(**kwargs)  # type: ignore[arg-type]


class TestHueHelpers:
    def test_piecewise_value(self) -> None:
        blue = Hct.from_argb(0xFF0000FF)
        assert DynamicScheme.get_piecewise_value(blue, BREAKPOINTS, [10, 20, 30, 40]) == 30.0

    def test_piecewise_value_without_interval_returns_source_hue(self) -> None:
        blue = Hct.from_argb(0xFF0000FF)
        assert DynamicScheme.get_piecewise_value(blue, [0.0, 10.0], [5.0]) == blue.hue

    def test_rotated_hue(self) -> None:
        blue = Hct.from_argb(0xFF0000FF)
        rotated = DynamicScheme.get_rotated_hue(blue, BREAKPOINTS, [10, 20, -30, 40])
        assert rotated == pytest.approx(sanitize_degrees_double(blue.hue - 30.0), abs=1e-4)

    def test_rotated_hue_wraps(self) -> None:
        red = Hct.from_argb(0xFFFF0000)
        rotated = DynamicScheme.get_rotated_hue(red, [0.0, 360.0], [-90.0])
        assert rotated == pytest.approx(red.hue + 270.0)

    def test_rotated_hue_with_mismatched_lengths_returns_source_hue(self) -> None:
        blue = Hct.from_argb(0xFF0000FF)
        assert DynamicScheme.get_rotated_hue(blue, BREAKPOINTS, [10.0]) == blue.hue


class TestSpecVersionFallback:
    @pytest.mark.parametrize(
        ("requested", "variant", "expected"),
        [
            (SpecVersion.SPEC_2026, Variant.CMF, SpecVersion.SPEC_2026),
            (SpecVersion.SPEC_2026, Variant.TONAL_SPOT, SpecVersion.SPEC_2025),
            (SpecVersion.SPEC_2026, Variant.EXPRESSIVE, SpecVersion.SPEC_2025),
            (SpecVersion.SPEC_2025, Variant.VIBRANT, SpecVersion.SPEC_2025),
            (SpecVersion.SPEC_2025, Variant.NEUTRAL, SpecVersion.SPEC_2025),
            (SpecVersion.SPEC_2026, Variant.CONTENT, SpecVersion.SPEC_2021),
            (SpecVersion.SPEC_2025, Variant.FIDELITY, SpecVersion.SPEC_2021),
            (SpecVersion.SPEC_2021, Variant.TONAL_SPOT, SpecVersion.SPEC_2021),
        ],
    )
    def test_maybe_fallback(
        self, requested: SpecVersion, variant: Variant, expected: SpecVersion
    ) -> None:
        assert DynamicScheme.maybe_fallback_spec_version(requested, variant) == expected

    def test_scheme_stores_normalized_version(self) -> None:
        scheme = _scheme(spec_version=SpecVersion.SPEC_2026)
        assert scheme.spec_version == SpecVersion.SPEC_2025

    def test_plain_int_version_is_accepted(self) -> None:
        scheme = _scheme(spec_version=2025)
        assert scheme.spec_version is SpecVersion.SPEC_2025


class TestConstruction:
    def test_defaults(self) -> None:
        scheme = _scheme()
        assert scheme.platform == Platform.PHONE
        assert scheme.spec_version == SpecVersion.SPEC_2021
        assert scheme.color_specs is not None

    def test_single_source_is_wrapped(self) -> None:
        hct = Hct.from_argb(0xFF6750A4)
        scheme = _scheme(source_color_hct_list=hct)
        assert scheme.source_color_hct_list == (hct,)
        assert scheme.source_color_hct == hct
        assert scheme.source_color_argb == 0xFF6750A4

    def test_rejects_empty_sources(self) -> None:
        with pytest.raises(ValueError, match="at least one source color"):
            _scheme(source_color_hct_list=())

    @pytest.mark.parametrize("level", [-1.5, 1.01])
    def test_rejects_out_of_range_contrast(self, level: float) -> None:
        with pytest.raises(ValueError, match="contrast_level"):
            _scheme(contrast_level=level)

    def test_is_immutable(self) -> None:
        scheme = _scheme()
        with pytest.raises(AttributeError):
            scheme.is_dark = True  # type: ignore[misc]


class TestFromScheme:
    def test_copies_with_new_mode(self, tonal_spot_light: DynamicScheme) -> None:
        dark = DynamicScheme.from_scheme(tonal_spot_light, True)
        assert dark.is_dark is True
        assert dark.contrast_level == tonal_spot_light.contrast_level
        assert dark.primary_palette == tonal_spot_light.primary_palette

    def test_overrides_contrast(self, tonal_spot_light: DynamicScheme) -> None:
        copy = DynamicScheme.from_scheme(tonal_spot_light, False, 0.5)
        assert copy.contrast_level == 0.5

    def test_copy_starts_with_empty_caches(self, tonal_spot_light: DynamicScheme) -> None:
        colors = MaterialDynamicColors(color_specs=tonal_spot_light.color_specs)
        colors.primary.get_argb(tonal_spot_light)
        assert tonal_spot_light._tones
        copy = DynamicScheme.from_scheme(tonal_spot_light, False)
        assert copy._tones == {}
        assert copy._hcts == {}


class TestEqualityAndAccessors:
    def test_equality_ignores_caches(self, blue_hct: Hct) -> None:
        a = create_scheme(blue_hct, Variant.TONAL_SPOT, False)
        b = create_scheme(blue_hct, Variant.TONAL_SPOT, False)
        MaterialDynamicColors().primary.get_argb(a)
        assert a == b

    def test_role_properties_match_facade(self, tonal_spot_light: DynamicScheme) -> None:
        colors = MaterialDynamicColors(color_specs=tonal_spot_light.color_specs)
        assert tonal_spot_light.primary == colors.primary.get_argb(tonal_spot_light)
        assert tonal_spot_light.surface == colors.surface.get_argb(tonal_spot_light)

    def test_missing_roles_are_none(self, tonal_spot_light: DynamicScheme) -> None:
        assert tonal_spot_light.primary_dim is None
        assert tonal_spot_light.error_dim is None

    def test_get_argb_delegates_to_role(self, tonal_spot_light: DynamicScheme) -> None:
        role = MaterialDynamicColors(color_specs=tonal_spot_light.color_specs).on_primary
        assert tonal_spot_light.get_argb(role) == role.get_argb(tonal_spot_light)
        assert tonal_spot_light.get_hct(role) == role.get_hct(tonal_spot_light)
