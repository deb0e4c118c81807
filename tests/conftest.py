"""Shared pytest fixtures for chromatone tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from chromatone.core.color.hct import Hct
from chromatone.core.dynamiccolor.color_specs import ColorSpecs
from chromatone.core.dynamiccolor.dynamic_scheme import DynamicScheme
from chromatone.core.dynamiccolor.enums import SpecVersion, Variant
from chromatone.core.scheme.factory import create_scheme

# ============================================================================
# Source Color Fixtures
# ============================================================================

GOOGLE_BLUE = 0xFF4285F4
BASELINE_PURPLE = 0xFF6750A4
YELLOW = 0xFFFFEB3B


@pytest.fixture
def blue_hct() -> Hct:
    """Google blue as HCT."""
    return Hct.from_argb(GOOGLE_BLUE)


@pytest.fixture
def yellow_hct() -> Hct:
    """A saturated yellow, which several rule sets treat specially."""
    return Hct.from_argb(YELLOW)


# ============================================================================
# Registry Fixtures
# ============================================================================


@pytest.fixture
def color_specs() -> ColorSpecs:
    """A fresh registry so tests never share memoized strategies."""
    return ColorSpecs()


# ============================================================================
# Scheme Fixtures
# ============================================================================


@pytest.fixture
def tonal_spot_light(blue_hct: Hct, color_specs: ColorSpecs) -> DynamicScheme:
    """2021 tonal spot light scheme at default contrast."""
    return create_scheme(blue_hct, Variant.TONAL_SPOT, False, color_specs=color_specs)


@pytest.fixture
def tonal_spot_dark(blue_hct: Hct, color_specs: ColorSpecs) -> DynamicScheme:
    """2021 tonal spot dark scheme at default contrast."""
    return create_scheme(blue_hct, Variant.TONAL_SPOT, True, color_specs=color_specs)


@pytest.fixture
def tonal_spot_2025_light(blue_hct: Hct, color_specs: ColorSpecs) -> DynamicScheme:
    """2025 tonal spot light scheme at default contrast."""
    return create_scheme(
        blue_hct,
        Variant.TONAL_SPOT,
        False,
        spec_version=SpecVersion.SPEC_2025,
        color_specs=color_specs,
    )


@pytest.fixture
def cmf_light(blue_hct: Hct, color_specs: ColorSpecs) -> DynamicScheme:
    """2026 CMF light scheme at default contrast."""
    return create_scheme(
        blue_hct,
        Variant.CMF,
        False,
        spec_version=SpecVersion.SPEC_2026,
        color_specs=color_specs,
    )


# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
