"""Contrast requirement as a function of the scheme's contrast level."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from chromatone.core.utils.math import lerp

logger = logging.getLogger(__name__)


class ContrastCurve(BaseModel):
    """Values sampled at contrast levels -1, 0, 0.5 and 1.

    Mostly holds minimum contrast ratios, but surface roles also use it to
    move their tone with the contrast level. Values between samples are
    interpolated linearly; levels outside [-1, 1] take the nearest end sample.

    Example:
        >>> ContrastCurve(low=3.0, normal=4.5, medium=7.0, high=11.0).get(0.25)
        5.75
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    low: float = Field(ge=0.0, description="Value at contrast level -1")
    normal: float = Field(ge=0.0, description="Value at contrast level 0")
    medium: float = Field(ge=0.0, description="Value at contrast level 0.5")
    high: float = Field(ge=0.0, description="Value at contrast level 1")

    @classmethod
    def of(cls, low: float, normal: float, medium: float, high: float) -> ContrastCurve:
        """Positional shorthand used by the role tables."""
        return cls(low=low, normal=normal, medium=medium, high=high)

    def get(self, contrast_level: float) -> float:
        """Required contrast ratio at a contrast level.

        Args:
            contrast_level: Level in [-1, 1]; 0 is the default contrast

        Returns:
            Interpolated value
        """
        if contrast_level <= -1.0:
            return self.low
        if contrast_level < 0.0:
            return lerp(self.low, self.normal, contrast_level + 1.0)
        if contrast_level < 0.5:
            return lerp(self.normal, self.medium, contrast_level / 0.5)
        if contrast_level < 1.0:
            return lerp(self.medium, self.high, (contrast_level - 0.5) / 0.5)
        return self.high
