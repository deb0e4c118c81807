"""Color roles whose tone is resolved against a scheme.

A DynamicColor is a bundle of rule functions that each take a
DynamicScheme: which palette to draw from, a preferred tone, the role it
must contrast against and how much contrast it needs. The actual tone is
chosen by the resolution strategy registered for the scheme's spec
version; this module only holds the definitions and the pure tone helpers
shared by all strategies.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from chromatone.core.color import contrast
from chromatone.core.color.hct import Hct
from chromatone.core.color.tonal_palette import TonalPalette
from chromatone.core.dynamiccolor.enums import SpecVersion
from chromatone.core.dynamiccolor.errors import ColorConfigurationError, DependencyCycleError
from chromatone.core.utils.math import clamp, round_half_up

if TYPE_CHECKING:
    from chromatone.core.dynamiccolor.contrast_curve import ContrastCurve
    from chromatone.core.dynamiccolor.dynamic_scheme import DynamicScheme
    from chromatone.core.dynamiccolor.tone_delta_pair import ToneDeltaPair

logger = logging.getLogger(__name__)

T = TypeVar("T")
SchemeFn = Callable[["DynamicScheme"], T]

# (id(scheme), id(color)) pairs currently being resolved on this thread
_resolving = threading.local()


@contextmanager
def _resolution_guard(scheme: DynamicScheme, color: DynamicColor) -> Iterator[None]:
    """Track an in-flight resolution and fail fast when it re-enters itself."""
    stack: list[tuple[int, int, str]] = getattr(_resolving, "stack", None) or []
    _resolving.stack = stack
    key = (id(scheme), id(color))
    if any(entry[:2] == key for entry in stack):
        chain = " -> ".join(entry[2] for entry in stack if entry[0] == key[0])
        raise DependencyCycleError(
            f"Dependency cycle while resolving {color.name}: {chain} -> {color.name}"
        )
    stack.append((key[0], key[1], color.name))
    try:
        yield
    finally:
        stack.pop()


@dataclass(frozen=True, eq=False, repr=False)
class DynamicColor:
    """A named color role defined by rules evaluated against a scheme.

    Attributes:
        name: Role name, e.g. ``"primary_container"``
        palette: Selects the tonal palette the role draws from
        is_background: Whether other roles are placed on top of this one
        chroma_multiplier: Optional scale applied to the palette chroma
        background: Role this one must contrast against
        tone: Preferred tone before contrast adjustment; defaults to the
            background's tone, or 50 without a background
        second_background: Optional second role to contrast against
        contrast_curve: Contrast requirement against the background(s)
        tone_delta_pair: Tonal separation constraint with another role
        opacity: Optional alpha in [0, 1]

    Roles compare by identity. The scheme memoizes resolved tones per role
    object, so reuse the same instance rather than rebuilding equal ones.

    Raises:
        ColorConfigurationError: If a second background or contrast curve is
            given without a background, or a background without a curve
    """

    name: str
    palette: SchemeFn[TonalPalette]
    tone: SchemeFn[float] | None = None
    is_background: bool = False
    chroma_multiplier: SchemeFn[float] | None = None
    background: SchemeFn[DynamicColor | None] | None = None
    second_background: SchemeFn[DynamicColor | None] | None = None
    contrast_curve: SchemeFn[ContrastCurve | None] | None = None
    tone_delta_pair: SchemeFn[ToneDeltaPair | None] | None = None
    opacity: SchemeFn[float | None] | None = None

    def __post_init__(self) -> None:
        if self.background is None and self.second_background is not None:
            raise ColorConfigurationError(
                f"Color {self.name} has second_background defined, but background is not defined."
            )
        if self.background is None and self.contrast_curve is not None:
            raise ColorConfigurationError(
                f"Color {self.name} has contrast_curve defined, but background is not defined."
            )
        if self.background is not None and self.contrast_curve is None:
            raise ColorConfigurationError(
                f"Color {self.name} has background defined, but contrast_curve is not defined."
            )
        if self.tone is None:
            object.__setattr__(self, "tone", self._default_tone)

    def _default_tone(self, scheme: DynamicScheme) -> float:
        if self.background is None:
            return 50.0
        background = self.background(scheme)
        if background is None:
            return 50.0
        return background.get_tone(scheme)

    def __repr__(self) -> str:
        return f"DynamicColor(name={self.name!r}, is_background={self.is_background})"

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def get_argb(self, scheme: DynamicScheme) -> int:
        """Resolved color as ARGB, with the role's opacity in the alpha byte."""
        argb = self.get_hct(scheme).to_argb()
        if self.opacity is None:
            return argb
        percentage = self.opacity(scheme)
        if percentage is None:
            return argb
        alpha = clamp(round_half_up(percentage * 255), 0, 255)
        return (argb & 0x00FFFFFF) | (alpha << 24)

    def get_hct(self, scheme: DynamicScheme) -> Hct:
        """Resolved color in HCT. Memoized per scheme."""
        cached = scheme._hcts.get(self)
        if cached is not None:
            return cached
        # Cycles are caught by get_tone, which the strategy calls for this role.
        hct = scheme.color_specs.get(scheme.spec_version).get_hct(scheme, self)
        return scheme._hcts.setdefault(self, hct)

    def get_tone(self, scheme: DynamicScheme) -> float:
        """Resolved tone in [0, 100]. Memoized per scheme.

        Raises:
            DependencyCycleError: If the role's rules depend on its own tone
            SpecNotFoundError: If no strategy serves the scheme's spec version
        """
        cached = scheme._tones.get(self)
        if cached is not None:
            return cached
        with _resolution_guard(scheme, self):
            tone = scheme.color_specs.get(scheme.spec_version).get_tone(scheme, self)
        tone = clamp(tone, 0.0, 100.0)
        logger.debug(f"Resolved {self.name} to tone {tone:.2f}")
        return scheme._tones.setdefault(self, tone)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_argb(cls, name: str, argb: int) -> DynamicColor:
        """A role that always resolves to the given color's hue, chroma and tone."""
        hct = Hct.from_argb(argb)
        palette = TonalPalette.from_argb(argb)
        return cls(name=name, palette=lambda s: palette, tone=lambda s: hct.tone)

    def extend_spec_version(
        self, spec_version: SpecVersion, extended_color: DynamicColor
    ) -> DynamicColor:
        """Role that follows ``extended_color`` from ``spec_version`` on.

        Every rule of the returned role dispatches on the scheme's spec
        version: schemes at or above ``spec_version`` see the extension's
        rule, older schemes see this role's rule.

        Args:
            spec_version: First spec version served by the extension
            extended_color: Definition used from that version on

        Returns:
            A new DynamicColor with dispatching rules

        Raises:
            ColorConfigurationError: If the names or background flags differ
        """
        _validate_extended_color(self, spec_version, extended_color)

        def pick(base: SchemeFn[T] | None, ext: SchemeFn[T] | None, default: T) -> SchemeFn[T]:
            def select(scheme: DynamicScheme) -> T:
                fn = ext if scheme.spec_version >= spec_version else base
                return default if fn is None else fn(scheme)

            return select

        return DynamicColor(
            name=self.name,
            palette=pick(self.palette, extended_color.palette, None),
            tone=pick(self.tone, extended_color.tone, None),
            is_background=self.is_background,
            chroma_multiplier=pick(self.chroma_multiplier, extended_color.chroma_multiplier, 1.0),
            background=pick(self.background, extended_color.background, None),
            second_background=pick(self.second_background, extended_color.second_background, None),
            contrast_curve=pick(self.contrast_curve, extended_color.contrast_curve, None),
            tone_delta_pair=pick(self.tone_delta_pair, extended_color.tone_delta_pair, None),
            opacity=pick(self.opacity, extended_color.opacity, None),
        )

    # ------------------------------------------------------------------
    # Tone helpers
    # ------------------------------------------------------------------

    @staticmethod
    def foreground_tone(bg_tone: float, ratio: float) -> float:
        """Tone with at least ``ratio`` contrast against ``bg_tone``.

        Picks the lighter or darker side depending on which the background
        favors, falling back to whichever side contrasts more when neither
        reaches the ratio.
        """
        lighter_tone = contrast.lighter_unsafe(bg_tone, ratio)
        darker_tone = contrast.darker_unsafe(bg_tone, ratio)
        lighter_ratio = contrast.ratio_of_tones(lighter_tone, bg_tone)
        darker_ratio = contrast.ratio_of_tones(darker_tone, bg_tone)

        if DynamicColor.tone_prefers_light_foreground(bg_tone):
            # Near ties within 0.1 of each other still favor the light side.
            negligible_difference = (
                abs(lighter_ratio - darker_ratio) < 0.1
                and lighter_ratio < ratio
                and darker_ratio < ratio
            )
            if lighter_ratio >= ratio or lighter_ratio >= darker_ratio or negligible_difference:
                return lighter_tone
            return darker_tone
        if darker_ratio >= ratio or darker_ratio >= lighter_ratio:
            return darker_tone
        return lighter_tone

    @staticmethod
    def enable_light_foreground(tone: float) -> float:
        """Moves tones in the [50, 60) dead zone down to 49 so light text fits."""
        if DynamicColor.tone_prefers_light_foreground(
            tone
        ) and not DynamicColor.tone_allows_light_foreground(tone):
            return 49.0
        return tone

    @staticmethod
    def tone_prefers_light_foreground(tone: float) -> bool:
        return round_half_up(tone) < 60

    @staticmethod
    def tone_allows_light_foreground(tone: float) -> bool:
        return round_half_up(tone) <= 49


def _validate_extended_color(
    color: DynamicColor, spec_version: SpecVersion, extended_color: DynamicColor
) -> None:
    if color.name != extended_color.name:
        raise ColorConfigurationError(
            f"Attempting to extend color {color.name} with color {extended_color.name} "
            f"of different name for spec version {spec_version}."
        )
    if color.is_background != extended_color.is_background:
        raise ColorConfigurationError(
            f"Attempting to extend color {color.name} as a "
            f"{'background' if color.is_background else 'foreground'} with color "
            f"{extended_color.name} as a "
            f"{'background' if extended_color.is_background else 'foreground'} "
            f"for spec version {spec_version}."
        )
