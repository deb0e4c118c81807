"""Tests for the ColorSpecs registry."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from chromatone.core.dynamiccolor.color_spec_2021 import ColorSpec2021
from chromatone.core.dynamiccolor.color_spec_2025 import ColorSpec2025
from chromatone.core.dynamiccolor.color_spec_2026 import ColorSpec2026
from chromatone.core.dynamiccolor.color_specs import COLOR_SPECS, ColorSpecs
from chromatone.core.dynamiccolor.enums import SpecVersion
from chromatone.core.dynamiccolor.errors import SpecNotFoundError


def test_serves_each_version(color_specs: ColorSpecs) -> None:
    assert isinstance(color_specs.get(SpecVersion.SPEC_2021), ColorSpec2021)
    assert isinstance(color_specs.get(SpecVersion.SPEC_2025), ColorSpec2025)
    assert isinstance(color_specs.get(SpecVersion.SPEC_2026), ColorSpec2026)


def test_strategy_reports_its_version(color_specs: ColorSpecs) -> None:
    for version in SpecVersion:
        assert color_specs.get(version).spec_version == version


def test_lookup_returns_identical_instance(color_specs: ColorSpecs) -> None:
    assert color_specs.get(SpecVersion.SPEC_2025) is color_specs.get(SpecVersion.SPEC_2025)
    assert color_specs.get(2025) is color_specs.get(SpecVersion.SPEC_2025)


def test_default_is_2021(color_specs: ColorSpecs) -> None:
    assert color_specs.get_default() is color_specs.get(SpecVersion.SPEC_2021)


def test_strategies_are_built_lazily() -> None:
    built: list[SpecVersion] = []

    def factory() -> ColorSpec2021:
        built.append(SpecVersion.SPEC_2021)
        return ColorSpec2021()

    specs = ColorSpecs({SpecVersion.SPEC_2021: factory})
    assert built == []
    specs.get(SpecVersion.SPEC_2021)
    specs.get(SpecVersion.SPEC_2021)
    assert built == [SpecVersion.SPEC_2021]


def test_concurrent_lookups_share_one_instance(color_specs: ColorSpecs) -> None:
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: color_specs.get(SpecVersion.SPEC_2026), range(32)))
    assert all(spec is results[0] for spec in results)


def test_unknown_version_raises(color_specs: ColorSpecs) -> None:
    with pytest.raises(SpecNotFoundError, match="Unknown spec version"):
        color_specs.get(1999)


def test_unregistered_version_raises() -> None:
    specs = ColorSpecs({SpecVersion.SPEC_2021: ColorSpec2021})
    with pytest.raises(SpecNotFoundError, match="No color spec registered"):
        specs.get(SpecVersion.SPEC_2025)


def test_spec_not_found_is_key_error(color_specs: ColorSpecs) -> None:
    with pytest.raises(KeyError):
        color_specs.get(2030)


def test_register_new_version() -> None:
    specs = ColorSpecs({SpecVersion.SPEC_2021: ColorSpec2021})
    specs.register(SpecVersion.SPEC_2025, ColorSpec2025)
    assert SpecVersion.SPEC_2025 in specs
    assert isinstance(specs.get(SpecVersion.SPEC_2025), ColorSpec2025)


def test_register_duplicate_raises(color_specs: ColorSpecs) -> None:
    with pytest.raises(ValueError, match="already registered"):
        color_specs.register(SpecVersion.SPEC_2021, ColorSpec2021)


def test_module_registry_serves_all_versions() -> None:
    for version in SpecVersion:
        assert version in COLOR_SPECS
