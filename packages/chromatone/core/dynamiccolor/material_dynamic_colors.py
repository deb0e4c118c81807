"""Public entry point for looking up and resolving color roles."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from chromatone.core.dynamiccolor.dynamic_color import DynamicColor
from chromatone.core.dynamiccolor.enums import SpecVersion
from chromatone.core.utils.logging import log_performance

if TYPE_CHECKING:
    from chromatone.core.dynamiccolor.color_spec import ColorSpec
    from chromatone.core.dynamiccolor.color_specs import ColorSpecs
    from chromatone.core.dynamiccolor.dynamic_scheme import DynamicScheme

logger = logging.getLogger(__name__)

# Order of all_dynamic_colors(); themes snapshot roles in this order.
ROLE_NAMES: tuple[str, ...] = (
    "primary_palette_key_color",
    "secondary_palette_key_color",
    "tertiary_palette_key_color",
    "neutral_palette_key_color",
    "neutral_variant_palette_key_color",
    "error_palette_key_color",
    "background",
    "on_background",
    "surface",
    "surface_dim",
    "surface_bright",
    "surface_container_lowest",
    "surface_container_low",
    "surface_container",
    "surface_container_high",
    "surface_container_highest",
    "on_surface",
    "surface_variant",
    "on_surface_variant",
    "outline",
    "outline_variant",
    "inverse_surface",
    "inverse_on_surface",
    "shadow",
    "scrim",
    "surface_tint",
    "primary",
    "primary_dim",
    "on_primary",
    "primary_container",
    "on_primary_container",
    "primary_fixed",
    "primary_fixed_dim",
    "on_primary_fixed",
    "on_primary_fixed_variant",
    "inverse_primary",
    "secondary",
    "secondary_dim",
    "on_secondary",
    "secondary_container",
    "on_secondary_container",
    "secondary_fixed",
    "secondary_fixed_dim",
    "on_secondary_fixed",
    "on_secondary_fixed_variant",
    "tertiary",
    "tertiary_dim",
    "on_tertiary",
    "tertiary_container",
    "on_tertiary_container",
    "tertiary_fixed",
    "tertiary_fixed_dim",
    "on_tertiary_fixed",
    "on_tertiary_fixed_variant",
    "error",
    "error_dim",
    "on_error",
    "error_container",
    "on_error_container",
)

RoleAccessor = Callable[[], "DynamicColor | None"]


def _role_property(name: str) -> property:
    def getter(self: MaterialDynamicColors) -> DynamicColor | None:
        return getattr(self.color_spec, name)()

    getter.__doc__ = f"The {name} role as defined by this facade's spec version."
    return property(getter)


class MaterialDynamicColors:
    """Named color roles of one spec version.

    Role objects are shared with the underlying strategy, so looking up the
    same role twice yields the identical object. The ``*_dim`` roles are
    ``None`` before 2025.

    Example:
        >>> colors = MaterialDynamicColors(SpecVersion.SPEC_2025)
        >>> argb = colors.primary.get_argb(scheme)
        >>> palette = colors.resolve_all(scheme)
    """

    def __init__(
        self,
        spec_version: SpecVersion | int = SpecVersion.SPEC_2021,
        color_specs: ColorSpecs | None = None,
    ) -> None:
        if color_specs is None:
            from chromatone.core.dynamiccolor.color_specs import COLOR_SPECS

            color_specs = COLOR_SPECS
        self.spec_version = SpecVersion(spec_version)
        self.color_spec: ColorSpec = color_specs.get(self.spec_version)

    def __repr__(self) -> str:
        return f"MaterialDynamicColors(spec_version={self.spec_version.value})"

    def highest_surface(self, scheme: DynamicScheme) -> DynamicColor:
        """Surface that on-surface content contrasts against for ``scheme``."""
        return self.color_spec.highest_surface(scheme)

    def all_dynamic_colors(self) -> list[RoleAccessor]:
        """Accessors for every role, in the fixed theme order.

        Accessors of roles the spec version lacks return ``None``.
        """
        return [getattr(self.color_spec, name) for name in ROLE_NAMES]

    @log_performance
    def resolve_all(self, scheme: DynamicScheme) -> dict[str, int]:
        """Resolve every role that exists into a name to ARGB mapping.

        Args:
            scheme: Theme inputs

        Returns:
            ARGB per role name, in the fixed theme order
        """
        resolved: dict[str, int] = {}
        for accessor in self.all_dynamic_colors():
            color = accessor()
            if color is None:
                continue
            resolved[color.name] = color.get_argb(scheme)
        logger.debug(
            f"Resolved {len(resolved)} roles for {scheme.variant.value} "
            f"{'dark' if scheme.is_dark else 'light'} scheme, spec {scheme.spec_version.value}"
        )
        return resolved

    # Role accessors
    primary_palette_key_color = _role_property("primary_palette_key_color")
    secondary_palette_key_color = _role_property("secondary_palette_key_color")
    tertiary_palette_key_color = _role_property("tertiary_palette_key_color")
    neutral_palette_key_color = _role_property("neutral_palette_key_color")
    neutral_variant_palette_key_color = _role_property("neutral_variant_palette_key_color")
    error_palette_key_color = _role_property("error_palette_key_color")
    background = _role_property("background")
    on_background = _role_property("on_background")
    surface = _role_property("surface")
    surface_dim = _role_property("surface_dim")
    surface_bright = _role_property("surface_bright")
    surface_container_lowest = _role_property("surface_container_lowest")
    surface_container_low = _role_property("surface_container_low")
    surface_container = _role_property("surface_container")
    surface_container_high = _role_property("surface_container_high")
    surface_container_highest = _role_property("surface_container_highest")
    on_surface = _role_property("on_surface")
    surface_variant = _role_property("surface_variant")
    on_surface_variant = _role_property("on_surface_variant")
    inverse_surface = _role_property("inverse_surface")
    inverse_on_surface = _role_property("inverse_on_surface")
    outline = _role_property("outline")
    outline_variant = _role_property("outline_variant")
    shadow = _role_property("shadow")
    scrim = _role_property("scrim")
    surface_tint = _role_property("surface_tint")
    primary = _role_property("primary")
    primary_dim = _role_property("primary_dim")
    on_primary = _role_property("on_primary")
    primary_container = _role_property("primary_container")
    on_primary_container = _role_property("on_primary_container")
    inverse_primary = _role_property("inverse_primary")
    primary_fixed = _role_property("primary_fixed")
    primary_fixed_dim = _role_property("primary_fixed_dim")
    on_primary_fixed = _role_property("on_primary_fixed")
    on_primary_fixed_variant = _role_property("on_primary_fixed_variant")
    secondary = _role_property("secondary")
    secondary_dim = _role_property("secondary_dim")
    on_secondary = _role_property("on_secondary")
    secondary_container = _role_property("secondary_container")
    on_secondary_container = _role_property("on_secondary_container")
    secondary_fixed = _role_property("secondary_fixed")
    secondary_fixed_dim = _role_property("secondary_fixed_dim")
    on_secondary_fixed = _role_property("on_secondary_fixed")
    on_secondary_fixed_variant = _role_property("on_secondary_fixed_variant")
    tertiary = _role_property("tertiary")
    tertiary_dim = _role_property("tertiary_dim")
    on_tertiary = _role_property("on_tertiary")
    tertiary_container = _role_property("tertiary_container")
    on_tertiary_container = _role_property("on_tertiary_container")
    tertiary_fixed = _role_property("tertiary_fixed")
    tertiary_fixed_dim = _role_property("tertiary_fixed_dim")
    on_tertiary_fixed = _role_property("on_tertiary_fixed")
    on_tertiary_fixed_variant = _role_property("on_tertiary_fixed_variant")
    error = _role_property("error")
    error_dim = _role_property("error_dim")
    on_error = _role_property("on_error")
    error_container = _role_property("error_container")
    on_error_container = _role_property("on_error_container")
