"""Interface shared by the per-version resolution strategies."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from chromatone.core.color.hct import Hct
    from chromatone.core.color.tonal_palette import TonalPalette
    from chromatone.core.dynamiccolor.dynamic_color import DynamicColor
    from chromatone.core.dynamiccolor.dynamic_scheme import DynamicScheme
    from chromatone.core.dynamiccolor.enums import Platform, SpecVersion, Variant

logger = logging.getLogger(__name__)

S = TypeVar("S")
R = TypeVar("R")

_MISSING = object()


def role(method: Callable[[S], R]) -> Callable[[S], R]:
    """Build a role factory's DynamicColor once per strategy instance.

    Scheme memoization is keyed by role identity, so every call must hand
    back the same object. The cache key is the method's qualified name,
    which keeps a subclass override and the ``super()`` role it extends
    apart.

    Example:
        >>> class Spec:
        ...     @role
        ...     def primary(self) -> DynamicColor:
        ...         return DynamicColor(name="primary", palette=lambda s: s.primary_palette)
    """
    key = method.__qualname__

    @functools.wraps(method)
    def wrapper(self: S) -> R:
        roles: dict[str, object] = self.__dict__.setdefault("_roles", {})
        cached = roles.get(key, _MISSING)
        if cached is _MISSING:
            cached = roles.setdefault(key, method(self))
        return cached  # type: ignore[return-value]

    return wrapper


# =============================================================================
# Strategy Protocol
# =============================================================================


class ColorSpec(Protocol):
    """A resolution ruleset: role definitions, palettes and the tone algorithm.

    Implementations are stateless apart from their cached role definitions
    and are shared by every scheme of their spec version.

    Attributes:
        spec_version: Version this strategy serves.
    """

    spec_version: SpecVersion

    # Resolution ---------------------------------------------------------

    def get_hct(self, scheme: DynamicScheme, color: DynamicColor) -> Hct:
        """Resolve a role to a concrete color.

        Args:
            scheme: Theme inputs
            color: Role to resolve

        Returns:
            Gamut-mapped HCT of the role
        """
        ...

    def get_tone(self, scheme: DynamicScheme, color: DynamicColor) -> float:
        """Resolve a role's tone under its contrast and pairing constraints.

        Args:
            scheme: Theme inputs
            color: Role to resolve

        Returns:
            Tone, unclamped; callers clamp to [0, 100]
        """
        ...

    def highest_surface(self, scheme: DynamicScheme) -> DynamicColor: ...

    # Palettes -----------------------------------------------------------

    def get_primary_palette(
        self,
        variant: Variant,
        source_color_hct: Hct,
        is_dark: bool,
        platform: Platform,
        contrast_level: float,
    ) -> TonalPalette: ...

    def get_secondary_palette(
        self,
        variant: Variant,
        source_color_hct: Hct,
        is_dark: bool,
        platform: Platform,
        contrast_level: float,
    ) -> TonalPalette: ...

    def get_tertiary_palette(
        self,
        variant: Variant,
        source_color_hct: Hct,
        is_dark: bool,
        platform: Platform,
        contrast_level: float,
    ) -> TonalPalette: ...

    def get_neutral_palette(
        self,
        variant: Variant,
        source_color_hct: Hct,
        is_dark: bool,
        platform: Platform,
        contrast_level: float,
    ) -> TonalPalette: ...

    def get_neutral_variant_palette(
        self,
        variant: Variant,
        source_color_hct: Hct,
        is_dark: bool,
        platform: Platform,
        contrast_level: float,
    ) -> TonalPalette: ...

    def get_error_palette(
        self,
        variant: Variant,
        source_color_hct: Hct,
        is_dark: bool,
        platform: Platform,
        contrast_level: float,
    ) -> TonalPalette: ...

    # Roles --------------------------------------------------------------

    def primary_palette_key_color(self) -> DynamicColor: ...
    def secondary_palette_key_color(self) -> DynamicColor: ...
    def tertiary_palette_key_color(self) -> DynamicColor: ...
    def neutral_palette_key_color(self) -> DynamicColor: ...
    def neutral_variant_palette_key_color(self) -> DynamicColor: ...
    def error_palette_key_color(self) -> DynamicColor: ...
    def background(self) -> DynamicColor: ...
    def on_background(self) -> DynamicColor: ...
    def surface(self) -> DynamicColor: ...
    def surface_dim(self) -> DynamicColor: ...
    def surface_bright(self) -> DynamicColor: ...
    def surface_container_lowest(self) -> DynamicColor: ...
    def surface_container_low(self) -> DynamicColor: ...
    def surface_container(self) -> DynamicColor: ...
    def surface_container_high(self) -> DynamicColor: ...
    def surface_container_highest(self) -> DynamicColor: ...
    def on_surface(self) -> DynamicColor: ...
    def surface_variant(self) -> DynamicColor: ...
    def on_surface_variant(self) -> DynamicColor: ...
    def inverse_surface(self) -> DynamicColor: ...
    def inverse_on_surface(self) -> DynamicColor: ...
    def outline(self) -> DynamicColor: ...
    def outline_variant(self) -> DynamicColor: ...
    def shadow(self) -> DynamicColor: ...
    def scrim(self) -> DynamicColor: ...
    def surface_tint(self) -> DynamicColor: ...
    def primary(self) -> DynamicColor: ...
    def primary_dim(self) -> DynamicColor | None: ...
    def on_primary(self) -> DynamicColor: ...
    def primary_container(self) -> DynamicColor: ...
    def on_primary_container(self) -> DynamicColor: ...
    def inverse_primary(self) -> DynamicColor: ...
    def primary_fixed(self) -> DynamicColor: ...
    def primary_fixed_dim(self) -> DynamicColor: ...
    def on_primary_fixed(self) -> DynamicColor: ...
    def on_primary_fixed_variant(self) -> DynamicColor: ...
    def secondary(self) -> DynamicColor: ...
    def secondary_dim(self) -> DynamicColor | None: ...
    def on_secondary(self) -> DynamicColor: ...
    def secondary_container(self) -> DynamicColor: ...
    def on_secondary_container(self) -> DynamicColor: ...
    def secondary_fixed(self) -> DynamicColor: ...
    def secondary_fixed_dim(self) -> DynamicColor: ...
    def on_secondary_fixed(self) -> DynamicColor: ...
    def on_secondary_fixed_variant(self) -> DynamicColor: ...
    def tertiary(self) -> DynamicColor: ...
    def tertiary_dim(self) -> DynamicColor | None: ...
    def on_tertiary(self) -> DynamicColor: ...
    def tertiary_container(self) -> DynamicColor: ...
    def on_tertiary_container(self) -> DynamicColor: ...
    def tertiary_fixed(self) -> DynamicColor: ...
    def tertiary_fixed_dim(self) -> DynamicColor: ...
    def on_tertiary_fixed(self) -> DynamicColor: ...
    def on_tertiary_fixed_variant(self) -> DynamicColor: ...
    def error(self) -> DynamicColor: ...
    def error_dim(self) -> DynamicColor | None: ...
    def on_error(self) -> DynamicColor: ...
    def error_container(self) -> DynamicColor: ...
    def on_error_container(self) -> DynamicColor: ...
