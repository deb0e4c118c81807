"""CAM16 viewing conditions."""

from __future__ import annotations

import functools
import logging
import math
from dataclasses import dataclass

from chromatone.core.color.color_utils import WHITE_POINT_D65, y_from_lstar
from chromatone.core.utils.math import Vector3, clamp, lerp, matrix_multiply

logger = logging.getLogger(__name__)

XYZ_TO_CAM16RGB: tuple[Vector3, Vector3, Vector3] = (
    (0.401288, 0.650173, -0.051461),
    (-0.250268, 1.204414, 0.045854),
    (-0.002079, 0.048952, 0.953127),
)

CAM16RGB_TO_XYZ: tuple[Vector3, Vector3, Vector3] = (
    (1.8620678, -1.0112547, 0.14918678),
    (0.38752654, 0.62144744, -0.00897398),
    (-0.0158415, -0.03412294, 1.0499644),
)


@dataclass(frozen=True)
class ViewingConditions:
    """Environment in which a color is seen.

    Values are precomputed once so that CAM16 conversions only do per-color
    work.

    Attributes:
        n: Background relative luminance over white point luminance.
        aw: Achromatic response of the white point.
        nbb: Brightness induction factor.
        ncb: Chromatic induction factor.
        c: Exponential nonlinearity from the surround.
        nc: Chromatic induction factor from the surround.
        rgb_d: Per-channel discounting factors.
        fl: Luminance-level adaptation factor.
        fl_root: Fourth root of ``fl``.
        z: Base exponential nonlinearity.
    """

    n: float
    aw: float
    nbb: float
    ncb: float
    c: float
    nc: float
    rgb_d: Vector3
    fl: float
    fl_root: float
    z: float

    @classmethod
    def make(
        cls,
        white_point: Vector3,
        adapting_luminance: float,
        background_lstar: float,
        surround: float,
        discounting_illuminant: bool,
    ) -> ViewingConditions:
        """Build viewing conditions from physical parameters.

        Args:
            white_point: XYZ of the white point
            adapting_luminance: Luminance of the adapting field in cd/m^2
            background_lstar: L* of the background, floored at 0.1
            surround: 0 (dark) to 2 (average)
            discounting_illuminant: Whether the eye fully adapts to the illuminant

        Returns:
            ViewingConditions instance
        """
        background_lstar = max(0.1, background_lstar)
        r_w, g_w, b_w = matrix_multiply(white_point, XYZ_TO_CAM16RGB)

        f = 0.8 + surround / 10.0
        if f >= 0.9:
            c = lerp(0.59, 0.69, (f - 0.9) * 10.0)
        else:
            c = lerp(0.525, 0.59, (f - 0.8) * 10.0)

        if discounting_illuminant:
            d = 1.0
        else:
            d = f * (1.0 - (1.0 / 3.6) * math.exp((-adapting_luminance - 42.0) / 92.0))
        d = clamp(d, 0.0, 1.0)

        rgb_d = (
            d * (100.0 / r_w) + 1.0 - d,
            d * (100.0 / g_w) + 1.0 - d,
            d * (100.0 / b_w) + 1.0 - d,
        )

        k = 1.0 / (5.0 * adapting_luminance + 1.0)
        k4 = k * k * k * k
        k4_f = 1.0 - k4
        fl = k4 * adapting_luminance + 0.1 * k4_f * k4_f * math.cbrt(5.0 * adapting_luminance)

        n = y_from_lstar(background_lstar) / white_point[1]
        z = 1.48 + math.sqrt(n)
        nbb = 0.725 / n**0.2

        factors = [(fl * d_c * w / 100.0) ** 0.42 for d_c, w in zip(rgb_d, (r_w, g_w, b_w))]
        rgb_a = [400.0 * factor / (factor + 27.13) for factor in factors]
        aw = (2.0 * rgb_a[0] + rgb_a[1] + 0.05 * rgb_a[2]) * nbb

        return cls(
            n=n,
            aw=aw,
            nbb=nbb,
            ncb=nbb,
            c=c,
            nc=f,
            rgb_d=rgb_d,
            fl=fl,
            fl_root=fl**0.25,
            z=z,
        )

    @classmethod
    def default_with_background_lstar(cls, lstar: float) -> ViewingConditions:
        """sRGB-like conditions with a custom background L*."""
        return cls.make(
            WHITE_POINT_D65,
            200.0 / math.pi * y_from_lstar(50.0) / 100.0,
            lstar,
            2.0,
            False,
        )

    @classmethod
    def default(cls) -> ViewingConditions:
        """sRGB-like conditions with a mid-gray background (shared instance)."""
        return _default_viewing_conditions()


@functools.cache
def _default_viewing_conditions() -> ViewingConditions:
    return ViewingConditions.default_with_background_lstar(50.0)
