"""Invariants that hold for every variant, mode, contrast level and spec version."""

from __future__ import annotations

import pytest

from chromatone.core.color.hct import Hct
from chromatone.core.dynamiccolor.color_specs import ColorSpecs
from chromatone.core.dynamiccolor.dynamic_color import DynamicColor
from chromatone.core.dynamiccolor.dynamic_scheme import DynamicScheme
from chromatone.core.dynamiccolor.enums import DeltaConstraint, SpecVersion, TonePolarity, Variant
from chromatone.core.dynamiccolor.material_dynamic_colors import MaterialDynamicColors
from chromatone.core.dynamiccolor.tone_delta_pair import ToneDeltaPair
from chromatone.core.scheme.factory import create_scheme

SOURCES = [0xFF4285F4, 0xFFFFEB3B, 0xFF808080]
LEVELS = [-1.0, 0.0, 0.5, 1.0]
TONE_TOLERANCE = 1e-6

# Direction of role_a from role_b for (light, dark) schemes.
POLARITY_SIGN = {
    TonePolarity.DARKER: (-1.0, -1.0),
    TonePolarity.LIGHTER: (1.0, 1.0),
    TonePolarity.RELATIVE_DARKER: (-1.0, 1.0),
    TonePolarity.RELATIVE_LIGHTER: (1.0, -1.0),
}


def _cases() -> list[tuple[Variant, SpecVersion]]:
    cases = [(variant, SpecVersion.SPEC_2021) for variant in Variant if variant != Variant.CMF]
    cases += [
        (variant, SpecVersion.SPEC_2025)
        for variant in (Variant.TONAL_SPOT, Variant.NEUTRAL, Variant.VIBRANT, Variant.EXPRESSIVE)
    ]
    cases.append((Variant.CMF, SpecVersion.SPEC_2026))
    return cases


@pytest.fixture(scope="module")
def specs() -> ColorSpecs:
    return ColorSpecs()


@pytest.mark.parametrize(("variant", "spec_version"), _cases())
@pytest.mark.parametrize("argb", SOURCES)
@pytest.mark.parametrize("is_dark", [False, True])
def test_every_role_resolves_to_an_opaque_color(
    specs: ColorSpecs, variant: Variant, spec_version: SpecVersion, argb: int, is_dark: bool
) -> None:
    colors = MaterialDynamicColors(spec_version, specs)
    for level in LEVELS:
        scheme = create_scheme(
            Hct.from_argb(argb),
            variant,
            is_dark,
            level,
            spec_version=spec_version,
            color_specs=specs,
        )
        for name, value in colors.resolve_all(scheme).items():
            assert value >> 24 == 0xFF, name
            tone = getattr(colors, name).get_tone(scheme)
            assert 0.0 <= tone <= 100.0, name


@pytest.mark.parametrize("argb", SOURCES)
def test_resolution_is_deterministic(specs: ColorSpecs, argb: int) -> None:
    colors = MaterialDynamicColors(SpecVersion.SPEC_2025, specs)
    first = create_scheme(
        Hct.from_argb(argb), Variant.EXPRESSIVE, True, spec_version=SpecVersion.SPEC_2025
    )
    second = create_scheme(
        Hct.from_argb(argb), Variant.EXPRESSIVE, True, spec_version=SpecVersion.SPEC_2025
    )
    assert colors.resolve_all(first) == colors.resolve_all(second)


# ============================================================================
# Tone delta pairs
# ============================================================================


def _pairs(
    colors: MaterialDynamicColors, scheme: DynamicScheme
) -> list[tuple[DynamicColor, ToneDeltaPair]]:
    """Every role that carries a pair on ``scheme``, with its pair."""
    found = []
    for accessor in colors.all_dynamic_colors():
        color = accessor()
        if color is None or color.tone_delta_pair is None:
            continue
        pair = color.tone_delta_pair(scheme)
        if pair is not None:
            found.append((color, pair))
    return found


def _gap(pair: ToneDeltaPair, scheme: DynamicScheme) -> float:
    """Signed tone difference of role_a from role_b, positive in the polarity's direction."""
    sign = POLARITY_SIGN[pair.polarity][scheme.is_dark]
    return (pair.role_a.get_tone(scheme) - pair.role_b.get_tone(scheme)) * sign


def _placement_survives(carrier: DynamicColor, pair: ToneDeltaPair, scheme: DynamicScheme) -> bool:
    """Whether the contrast and dead-zone steps after the pair leave its placement intact.

    Contrast fixes push a role away from its surface: darker in light mode,
    lighter in dark mode. That keeps a pair only when the carrier already
    sits on that side of its partner, and never at negative contrast where
    the tone is recomputed outright. A background role snapped onto a
    dead-zone edge has left its placement too.
    """
    snapped = carrier.is_background and not carrier.name.endswith("_fixed_dim")
    if snapped and carrier.get_tone(scheme) in (49.0, 65.0):
        return False
    background = carrier.background(scheme) if carrier.background else None
    curve = carrier.contrast_curve(scheme) if carrier.contrast_curve else None
    if background is None or curve is None:
        return True
    if scheme.contrast_level < 0 or pair.constraint == DeltaConstraint.EXACT:
        return False
    away = POLARITY_SIGN[pair.polarity][scheme.is_dark]
    if carrier.name != pair.role_a.name:
        away = -away
    push = 1.0 if scheme.is_dark else -1.0
    return away == push


@pytest.mark.parametrize("variant", [v for v in Variant if v != Variant.CMF])
@pytest.mark.parametrize("argb", SOURCES)
@pytest.mark.parametrize("is_dark", [False, True])
@pytest.mark.parametrize("level", LEVELS)
def test_2021_pairs_keep_at_least_their_delta(
    specs: ColorSpecs, variant: Variant, argb: int, is_dark: bool, level: float
) -> None:
    scheme = create_scheme(Hct.from_argb(argb), variant, is_dark, level, color_specs=specs)
    pairs = _pairs(MaterialDynamicColors(SpecVersion.SPEC_2021, specs), scheme)

    assert {color.name for color, _ in pairs} >= {"primary", "primary_container", "primary_fixed"}
    for color, pair in pairs:
        assert _gap(pair, scheme) >= pair.delta - TONE_TOLERANCE, color.name


@pytest.mark.parametrize(
    ("variant", "spec_version"),
    [
        (Variant.TONAL_SPOT, SpecVersion.SPEC_2025),
        (Variant.NEUTRAL, SpecVersion.SPEC_2025),
        (Variant.VIBRANT, SpecVersion.SPEC_2025),
        (Variant.EXPRESSIVE, SpecVersion.SPEC_2025),
        (Variant.CMF, SpecVersion.SPEC_2026),
    ],
)
@pytest.mark.parametrize("argb", SOURCES)
@pytest.mark.parametrize("is_dark", [False, True])
@pytest.mark.parametrize("level", LEVELS)
def test_pairs_hold_after_resolution(
    specs: ColorSpecs,
    variant: Variant,
    spec_version: SpecVersion,
    argb: int,
    is_dark: bool,
    level: float,
) -> None:
    scheme = create_scheme(
        Hct.from_argb(argb), variant, is_dark, level, spec_version=spec_version, color_specs=specs
    )
    for color, pair in _pairs(MaterialDynamicColors(spec_version, specs), scheme):
        if not _placement_survives(color, pair, scheme):
            continue
        gap = _gap(pair, scheme)
        match pair.constraint:
            case DeltaConstraint.EXACT:
                assert gap == pytest.approx(pair.delta, abs=TONE_TOLERANCE), color.name
            case DeltaConstraint.FARTHER:
                assert gap >= pair.delta - TONE_TOLERANCE, color.name
            case DeltaConstraint.NEARER:
                assert -TONE_TOLERANCE <= gap <= pair.delta + TONE_TOLERANCE, color.name


@pytest.mark.parametrize("spec_version", [SpecVersion.SPEC_2025, SpecVersion.SPEC_2026])
def test_accent_container_pairs_are_farther(specs: ColorSpecs, spec_version: SpecVersion) -> None:
    variant = Variant.CMF if spec_version == SpecVersion.SPEC_2026 else Variant.TONAL_SPOT
    scheme = create_scheme(0xFF4285F4, variant, False, spec_version=spec_version, color_specs=specs)
    pairs = {
        (pair.role_a.name, pair.role_b.name): pair
        for _, pair in _pairs(MaterialDynamicColors(spec_version, specs), scheme)
    }

    for group in ("primary", "secondary", "tertiary", "error"):
        pair = pairs[(f"{group}_container", group)]
        assert pair.constraint == DeltaConstraint.FARTHER
        assert pair.polarity == TonePolarity.RELATIVE_LIGHTER
        fixed_dim = pairs.get((f"{group}_fixed_dim", f"{group}_fixed"))
        if group != "error":
            assert fixed_dim is not None
            assert fixed_dim.constraint == DeltaConstraint.EXACT


def test_cmf_fixed_dim_sits_exactly_below_fixed(specs: ColorSpecs) -> None:
    colors = MaterialDynamicColors(SpecVersion.SPEC_2026, specs)
    for is_dark in (False, True):
        scheme = create_scheme(
            0xFF4285F4, Variant.CMF, is_dark, spec_version=SpecVersion.SPEC_2026, color_specs=specs
        )
        fixed = colors.primary_fixed.get_tone(scheme)
        assert colors.primary_fixed_dim.get_tone(scheme) == pytest.approx(max(fixed - 5.0, 0.0))
