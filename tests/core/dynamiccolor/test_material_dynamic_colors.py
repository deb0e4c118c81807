"""Tests for the MaterialDynamicColors facade."""

from __future__ import annotations

import pytest

from chromatone.core.dynamiccolor.color_specs import ColorSpecs
from chromatone.core.dynamiccolor.dynamic_color import DynamicColor
from chromatone.core.dynamiccolor.dynamic_scheme import DynamicScheme
from chromatone.core.dynamiccolor.enums import SpecVersion
from chromatone.core.dynamiccolor.errors import SpecNotFoundError
from chromatone.core.dynamiccolor.material_dynamic_colors import ROLE_NAMES, MaterialDynamicColors

DIM_ROLES = ("primary_dim", "secondary_dim", "tertiary_dim", "error_dim")


class TestFacade:
    def test_role_count(self) -> None:
        assert len(ROLE_NAMES) == 59
        assert len(set(ROLE_NAMES)) == 59

    def test_every_role_is_an_attribute(self) -> None:
        colors = MaterialDynamicColors()
        for name in ROLE_NAMES:
            assert hasattr(colors, name)

    def test_roles_carry_their_name(self) -> None:
        colors = MaterialDynamicColors(SpecVersion.SPEC_2025)
        for name in ROLE_NAMES:
            color = getattr(colors, name)
            assert isinstance(color, DynamicColor)
            assert color.name == name

    def test_dim_roles_missing_in_2021(self) -> None:
        colors = MaterialDynamicColors(SpecVersion.SPEC_2021)
        for name in DIM_ROLES:
            assert getattr(colors, name) is None

    def test_role_identity_is_stable(self, color_specs: ColorSpecs) -> None:
        a = MaterialDynamicColors(SpecVersion.SPEC_2025, color_specs)
        b = MaterialDynamicColors(SpecVersion.SPEC_2025, color_specs)
        assert a.primary is a.primary
        assert a.primary is b.primary

    def test_versions_do_not_share_roles(self, color_specs: ColorSpecs) -> None:
        old = MaterialDynamicColors(SpecVersion.SPEC_2021, color_specs)
        new = MaterialDynamicColors(SpecVersion.SPEC_2025, color_specs)
        assert old.primary is not new.primary

    def test_all_dynamic_colors_order(self) -> None:
        colors = MaterialDynamicColors(SpecVersion.SPEC_2026)
        names = [accessor().name for accessor in colors.all_dynamic_colors()]
        assert names == list(ROLE_NAMES)

    def test_unknown_version(self) -> None:
        with pytest.raises(ValueError):
            MaterialDynamicColors(1999)

    def test_unregistered_version(self) -> None:
        from chromatone.core.dynamiccolor.color_spec_2021 import ColorSpec2021

        specs = ColorSpecs({SpecVersion.SPEC_2021: ColorSpec2021})
        with pytest.raises(SpecNotFoundError):
            MaterialDynamicColors(SpecVersion.SPEC_2026, specs)

    def test_repr(self) -> None:
        assert repr(MaterialDynamicColors(2025)) == "MaterialDynamicColors(spec_version=2025)"


class TestHighestSurface:
    def test_light_uses_surface_dim(self, tonal_spot_light: DynamicScheme) -> None:
        colors = MaterialDynamicColors(color_specs=tonal_spot_light.color_specs)
        assert colors.highest_surface(tonal_spot_light) is colors.surface_dim

    def test_dark_uses_surface_bright(self, tonal_spot_dark: DynamicScheme) -> None:
        colors = MaterialDynamicColors(color_specs=tonal_spot_dark.color_specs)
        assert colors.highest_surface(tonal_spot_dark) is colors.surface_bright


class TestResolveAll:
    def test_2021_skips_dim_roles(self, tonal_spot_light: DynamicScheme) -> None:
        resolved = MaterialDynamicColors(color_specs=tonal_spot_light.color_specs).resolve_all(
            tonal_spot_light
        )
        assert len(resolved) == 55
        assert not set(DIM_ROLES) & set(resolved)
        assert list(resolved) == [name for name in ROLE_NAMES if name not in DIM_ROLES]

    def test_2025_resolves_every_role(self, tonal_spot_2025_light: DynamicScheme) -> None:
        colors = MaterialDynamicColors(
            SpecVersion.SPEC_2025, tonal_spot_2025_light.color_specs
        )
        resolved = colors.resolve_all(tonal_spot_2025_light)
        assert list(resolved) == list(ROLE_NAMES)

    def test_values_are_opaque_argb(self, tonal_spot_dark: DynamicScheme) -> None:
        resolved = MaterialDynamicColors(color_specs=tonal_spot_dark.color_specs).resolve_all(
            tonal_spot_dark
        )
        for argb in resolved.values():
            assert argb >> 24 == 0xFF

    def test_shadow_and_scrim_are_black(self, tonal_spot_light: DynamicScheme) -> None:
        resolved = MaterialDynamicColors(color_specs=tonal_spot_light.color_specs).resolve_all(
            tonal_spot_light
        )
        assert resolved["shadow"] == 0xFF000000
        assert resolved["scrim"] == 0xFF000000
