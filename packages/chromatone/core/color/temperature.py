"""Color temperature theory: complements and analogous colors.

Warm colors sit around hue 50 in L*a*b*, cool colors opposite. Each cache is
bound to one input color and computes its hue and temperature tables lazily.
"""

from __future__ import annotations

import logging
import math
from functools import cached_property

from chromatone.core.color.color_utils import lab_from_argb
from chromatone.core.color.hct import Hct
from chromatone.core.utils.math import round_half_up, sanitize_degrees_double, sanitize_degrees_int

logger = logging.getLogger(__name__)


class TemperatureCache:
    """Temperature-based color relationships for a single input color.

    Args:
        input_color: Color the relationships are computed for

    Example:
        >>> cache = TemperatureCache(Hct.from_argb(0xFF0CBBD4))
        >>> complement = cache.complement
    """

    def __init__(self, input_color: Hct) -> None:
        self.input = input_color

    @cached_property
    def complement(self) -> Hct:
        """Color of the same chroma and tone with opposite relative temperature.

        Not the hue 180 degrees away: the search walks from the coldest to the
        warmest hue looking for the closest temperature match.
        """
        coldest_hue = self.coldest.hue
        coldest_temp = self.temps_by_hct[self.coldest]
        warmest_hue = self.warmest.hue
        warmest_temp = self.temps_by_hct[self.warmest]
        temp_range = warmest_temp - coldest_temp

        start_hue_is_coldest_to_warmest = _is_between(self.input.hue, coldest_hue, warmest_hue)
        start_hue = warmest_hue if start_hue_is_coldest_to_warmest else coldest_hue
        end_hue = coldest_hue if start_hue_is_coldest_to_warmest else warmest_hue

        smallest_error = 1000.0
        answer = self.hcts_by_hue[round_half_up(self.input.hue) % 360]
        complement_relative_temp = 1.0 - self.get_relative_temperature(self.input)

        hue_addend = 0.0
        while hue_addend <= 360.0:
            hue = sanitize_degrees_double(start_hue + hue_addend)
            if _is_between(hue, start_hue, end_hue):
                possible_answer = self.hcts_by_hue[round_half_up(hue) % 360]
                relative_temp = (self.temps_by_hct[possible_answer] - coldest_temp) / temp_range
                error = abs(complement_relative_temp - relative_temp)
                if error < smallest_error:
                    smallest_error = error
                    answer = possible_answer
            hue_addend += 1.0
        return answer

    def get_analogous_colors(self, count: int = 5, divisions: int = 12) -> list[Hct]:
        """Colors evenly spaced in temperature around the input.

        Args:
            count: Number of colors returned, including the input
            divisions: Number of temperature steps around the hue circle

        Returns:
            Colors ordered counter-clockwise to clockwise, input in the middle
        """
        start_hue = round_half_up(self.input.hue)
        start_hct = self.hcts_by_hue[sanitize_degrees_int(start_hue)]
        last_temp = self.get_relative_temperature(start_hct)

        all_colors = [start_hct]

        absolute_total_temp_delta = 0.0
        for i in range(360):
            hct = self.hcts_by_hue[sanitize_degrees_int(start_hue + i)]
            temp = self.get_relative_temperature(hct)
            absolute_total_temp_delta += abs(temp - last_temp)
            last_temp = temp

        hue_addend = 1
        temp_step = absolute_total_temp_delta / divisions
        total_temp_delta = 0.0
        last_temp = self.get_relative_temperature(start_hct)
        while len(all_colors) < divisions:
            hct = self.hcts_by_hue[sanitize_degrees_int(start_hue + hue_addend)]
            temp = self.get_relative_temperature(hct)
            total_temp_delta += abs(temp - last_temp)

            desired_total_temp_delta_for_index = len(all_colors) * temp_step
            index_satisfied = total_temp_delta >= desired_total_temp_delta_for_index
            index_addend = 1
            # A large temperature jump can satisfy several divisions at once
            while index_satisfied and len(all_colors) < divisions:
                all_colors.append(hct)
                desired_total_temp_delta_for_index = (len(all_colors) + index_addend) * temp_step
                index_satisfied = total_temp_delta >= desired_total_temp_delta_for_index
                index_addend += 1

            last_temp = temp
            hue_addend += 1
            if hue_addend > 360:
                while len(all_colors) < divisions:
                    all_colors.append(hct)
                break

        answers = [self.input]
        ccw_count = math.floor((count - 1.0) / 2.0)
        for i in range(1, ccw_count + 1):
            answers.insert(0, all_colors[-i % len(all_colors)])
        cw_count = count - ccw_count - 1
        for i in range(1, cw_count + 1):
            answers.append(all_colors[i % len(all_colors)])
        return answers

    def get_relative_temperature(self, hct: Hct) -> float:
        """Temperature of a color relative to this cache's coldest and warmest.

        Returns:
            0.0 for the coldest color, 1.0 for the warmest, 0.5 if all equal
        """
        coldest_temp = self.temps_by_hct[self.coldest]
        temp_range = self.temps_by_hct[self.warmest] - coldest_temp
        if temp_range == 0.0:
            return 0.5
        return (self.temps_by_hct[hct] - coldest_temp) / temp_range

    @property
    def coldest(self) -> Hct:
        return self.hcts_by_temp[0]

    @property
    def warmest(self) -> Hct:
        return self.hcts_by_temp[-1]

    @cached_property
    def hcts_by_hue(self) -> list[Hct]:
        """360 colors, one per integer hue, at the input's chroma and tone."""
        return [
            Hct.create(float(hue), self.input.chroma, self.input.tone) for hue in range(360)
        ]

    @cached_property
    def hcts_by_temp(self) -> list[Hct]:
        """Hue table plus the input, sorted from coldest to warmest."""
        hcts = [*self.hcts_by_hue, self.input]
        return sorted(hcts, key=lambda hct: self.temps_by_hct[hct])

    @cached_property
    def temps_by_hct(self) -> dict[Hct, float]:
        return {
            hct: raw_temperature(hct) for hct in [*self.hcts_by_hue, self.input]
        }


def raw_temperature(color: Hct) -> float:
    """Absolute temperature of a color.

    Roughly -0.5 for the coldest colors and 1.5 for the warmest, derived
    from the L*a*b* hue angle and chroma.
    """
    _, a, b = lab_from_argb(color.to_argb())
    hue = sanitize_degrees_double(math.degrees(math.atan2(b, a)))
    chroma = math.hypot(a, b)
    return -0.5 + 0.02 * chroma**1.07 * math.cos(
        math.radians(sanitize_degrees_double(hue - 50.0))
    )


def _is_between(angle: float, a: float, b: float) -> bool:
    if a < b:
        return a <= angle <= b
    return a <= angle or angle <= b
