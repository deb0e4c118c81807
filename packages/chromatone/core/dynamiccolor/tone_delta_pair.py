"""Tonal separation constraint between two color roles."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chromatone.core.dynamiccolor.enums import DeltaConstraint, TonePolarity
from chromatone.core.dynamiccolor.errors import ColorConfigurationError

if TYPE_CHECKING:
    from chromatone.core.dynamiccolor.dynamic_color import DynamicColor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToneDeltaPair:
    """Documents a constraint between two roles' resolved tones.

    Attributes:
        role_a: First role of the pair.
        role_b: Second role of the pair.
        delta: Required tone difference, never negative.
        polarity: Which role ends up lighter or darker.
        stay_together: Whether a dead-zone snap of one role drags the other
            with it (2021 resolution only).
        constraint: Whether the delta is exact, a maximum or a minimum.

    Example:
        >>> ToneDeltaPair(
        ...     container, primary, 10.0, TonePolarity.RELATIVE_LIGHTER,
        ...     stay_together=False, constraint=DeltaConstraint.NEARER,
        ... )
    """

    role_a: DynamicColor
    role_b: DynamicColor
    delta: float
    polarity: TonePolarity
    stay_together: bool = False
    constraint: DeltaConstraint = DeltaConstraint.EXACT

    def __post_init__(self) -> None:
        if not math.isfinite(self.delta) or self.delta < 0:
            raise ColorConfigurationError(
                f"Tone delta between {self.role_a.name} and {self.role_b.name} "
                f"must be a non-negative number, got {self.delta}"
            )
