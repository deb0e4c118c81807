"""Enumerations shared by schemes, roles and resolution strategies."""

from __future__ import annotations

from enum import Enum, IntEnum


class Variant(str, Enum):
    """Theme style that decides how palettes derive from the source color."""

    MONOCHROME = "monochrome"
    NEUTRAL = "neutral"
    TONAL_SPOT = "tonal_spot"
    VIBRANT = "vibrant"
    EXPRESSIVE = "expressive"
    FIDELITY = "fidelity"
    CONTENT = "content"
    RAINBOW = "rainbow"
    FRUIT_SALAD = "fruit_salad"
    CMF = "cmf"


class SpecVersion(IntEnum):
    """Resolution ruleset. Ordered: 2021 < 2025 < 2026."""

    SPEC_2021 = 2021
    SPEC_2025 = 2025
    SPEC_2026 = 2026


class Platform(str, Enum):
    """Device class a scheme is built for."""

    PHONE = "phone"
    WATCH = "watch"


class TonePolarity(str, Enum):
    """Direction of a tone delta pair.

    ``LIGHTER``/``DARKER`` are absolute. The relative polarities flip between
    light and dark schemes: ``RELATIVE_LIGHTER`` means lighter in light mode
    and darker in dark mode.
    """

    DARKER = "darker"
    LIGHTER = "lighter"
    RELATIVE_DARKER = "relative_darker"
    RELATIVE_LIGHTER = "relative_lighter"


class DeltaConstraint(str, Enum):
    """How strictly a tone delta pair's delta is enforced."""

    EXACT = "exact"
    NEARER = "nearer"
    FARTHER = "farther"
