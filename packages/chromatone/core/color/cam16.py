"""CAM16 color appearance model and its CAM16-UCS coordinates."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from chromatone.core.color.color_utils import (
    argb_from_xyz,
    blue_from_argb,
    green_from_argb,
    linearized,
    red_from_argb,
)
from chromatone.core.color.viewing_conditions import (
    CAM16RGB_TO_XYZ,
    XYZ_TO_CAM16RGB,
    ViewingConditions,
)
from chromatone.core.utils.math import Vector3, matrix_multiply, sanitize_degrees_double

logger = logging.getLogger(__name__)


def _adapted(component: float, fl: float) -> float:
    af = (fl * abs(component) / 100.0) ** 0.42
    return math.copysign(400.0 * af / (af + 27.13), component)


def _unadapted(component: float, fl: float) -> float:
    base = max(0.0, 27.13 * abs(component) / (400.0 - abs(component)))
    return math.copysign(1.0, component) * (100.0 / fl) * base ** (1.0 / 0.42)


@dataclass(frozen=True)
class Cam16:
    """A color in CAM16 appearance space.

    Attributes:
        hue: Hue angle in degrees.
        chroma: Colorfulness relative to a similarly lit white.
        j: Lightness.
        q: Brightness.
        m: Colorfulness.
        s: Saturation.
        jstar: CAM16-UCS lightness.
        astar: CAM16-UCS a coordinate.
        bstar: CAM16-UCS b coordinate.
    """

    hue: float
    chroma: float
    j: float
    q: float
    m: float
    s: float
    jstar: float
    astar: float
    bstar: float

    def distance(self, other: Cam16) -> float:
        """Perceptual distance in CAM16-UCS."""
        d_j = self.jstar - other.jstar
        d_a = self.astar - other.astar
        d_b = self.bstar - other.bstar
        d_e_prime = math.sqrt(d_j * d_j + d_a * d_a + d_b * d_b)
        return 1.41 * d_e_prime**0.63

    def to_argb(self) -> int:
        """ARGB of this color seen in default viewing conditions."""
        return self.viewed(ViewingConditions.default())

    def viewed(self, viewing_conditions: ViewingConditions) -> int:
        """ARGB of this color seen in the given viewing conditions."""
        return argb_from_xyz(*self.xyz_in_viewing_conditions(viewing_conditions))

    def xyz_in_viewing_conditions(self, vc: ViewingConditions) -> Vector3:
        """Invert the model to XYZ under the given viewing conditions."""
        if self.chroma == 0.0 or self.j == 0.0:
            alpha = 0.0
        else:
            alpha = self.chroma / math.sqrt(self.j / 100.0)

        t = (alpha / (1.64 - 0.29**vc.n) ** 0.73) ** (1.0 / 0.9)
        h_rad = math.radians(self.hue)
        e_hue = 0.25 * (math.cos(h_rad + 2.0) + 3.8)
        ac = vc.aw * (self.j / 100.0) ** (1.0 / vc.c / vc.z)
        p1 = e_hue * (50000.0 / 13.0) * vc.nc * vc.ncb
        p2 = ac / vc.nbb

        h_sin = math.sin(h_rad)
        h_cos = math.cos(h_rad)
        gamma = 23.0 * (p2 + 0.305) * t / (23.0 * p1 + 11.0 * t * h_cos + 108.0 * t * h_sin)
        a = gamma * h_cos
        b = gamma * h_sin

        r_a = (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0
        g_a = (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0
        b_a = (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0

        r_f = _unadapted(r_a, vc.fl) / vc.rgb_d[0]
        g_f = _unadapted(g_a, vc.fl) / vc.rgb_d[1]
        b_f = _unadapted(b_a, vc.fl) / vc.rgb_d[2]
        return matrix_multiply((r_f, g_f, b_f), CAM16RGB_TO_XYZ)

    @classmethod
    def from_argb(cls, argb: int) -> Cam16:
        """CAM16 of an ARGB color in default viewing conditions."""
        return cls.from_argb_in_viewing_conditions(argb, ViewingConditions.default())

    @classmethod
    def from_argb_in_viewing_conditions(cls, argb: int, vc: ViewingConditions) -> Cam16:
        red_l = linearized(red_from_argb(argb))
        green_l = linearized(green_from_argb(argb))
        blue_l = linearized(blue_from_argb(argb))
        x = 0.41233895 * red_l + 0.35762064 * green_l + 0.18051042 * blue_l
        y = 0.2126 * red_l + 0.7152 * green_l + 0.0722 * blue_l
        z = 0.01932141 * red_l + 0.11916382 * green_l + 0.95034478 * blue_l
        return cls.from_xyz_in_viewing_conditions(x, y, z, vc)

    @classmethod
    def from_xyz_in_viewing_conditions(
        cls, x: float, y: float, z: float, vc: ViewingConditions
    ) -> Cam16:
        """Run the forward model on an XYZ color.

        Args:
            x: X tristimulus value
            y: Y tristimulus value in [0, 100]
            z: Z tristimulus value
            vc: Viewing conditions of the observer

        Returns:
            Cam16 instance
        """
        r_t, g_t, b_t = matrix_multiply((x, y, z), XYZ_TO_CAM16RGB)

        r_a = _adapted(vc.rgb_d[0] * r_t, vc.fl)
        g_a = _adapted(vc.rgb_d[1] * g_t, vc.fl)
        b_a = _adapted(vc.rgb_d[2] * b_t, vc.fl)

        # redness-greenness and yellowness-blueness
        a = (11.0 * r_a - 12.0 * g_a + b_a) / 11.0
        b = (r_a + g_a - 2.0 * b_a) / 9.0

        u = (20.0 * r_a + 20.0 * g_a + 21.0 * b_a) / 20.0
        p2 = (40.0 * r_a + 20.0 * g_a + b_a) / 20.0

        hue = sanitize_degrees_double(math.degrees(math.atan2(b, a)))
        hue_radians = math.radians(hue)

        ac = p2 * vc.nbb
        j = 100.0 * (ac / vc.aw) ** (vc.c * vc.z)
        q = 4.0 / vc.c * math.sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root

        hue_prime = hue + 360.0 if hue < 20.14 else hue
        e_hue = 0.25 * (math.cos(math.radians(hue_prime) + 2.0) + 3.8)
        p1 = 50000.0 / 13.0 * e_hue * vc.nc * vc.ncb
        t = p1 * math.hypot(a, b) / (u + 0.305)
        alpha = (1.64 - 0.29**vc.n) ** 0.73 * t**0.9

        c = alpha * math.sqrt(j / 100.0)
        m = c * vc.fl_root
        s = 50.0 * math.sqrt(alpha * vc.c / (vc.aw + 4.0))

        jstar = (1.0 + 100.0 * 0.007) * j / (1.0 + 0.007 * j)
        mstar = 1.0 / 0.0228 * math.log1p(0.0228 * m)
        return cls(
            hue=hue,
            chroma=c,
            j=j,
            q=q,
            m=m,
            s=s,
            jstar=jstar,
            astar=mstar * math.cos(hue_radians),
            bstar=mstar * math.sin(hue_radians),
        )

    @classmethod
    def from_jch(cls, j: float, c: float, h: float) -> Cam16:
        return cls.from_jch_in_viewing_conditions(j, c, h, ViewingConditions.default())

    @classmethod
    def from_jch_in_viewing_conditions(
        cls, j: float, c: float, h: float, vc: ViewingConditions
    ) -> Cam16:
        q = 4.0 / vc.c * math.sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root
        m = c * vc.fl_root
        alpha = c / math.sqrt(j / 100.0) if j != 0.0 else 0.0
        s = 50.0 * math.sqrt(alpha * vc.c / (vc.aw + 4.0))
        hue_radians = math.radians(h)
        jstar = (1.0 + 100.0 * 0.007) * j / (1.0 + 0.007 * j)
        mstar = 1.0 / 0.0228 * math.log1p(0.0228 * m)
        return cls(
            hue=h,
            chroma=c,
            j=j,
            q=q,
            m=m,
            s=s,
            jstar=jstar,
            astar=mstar * math.cos(hue_radians),
            bstar=mstar * math.sin(hue_radians),
        )

    @classmethod
    def from_ucs(cls, jstar: float, astar: float, bstar: float) -> Cam16:
        return cls.from_ucs_in_viewing_conditions(jstar, astar, bstar, ViewingConditions.default())

    @classmethod
    def from_ucs_in_viewing_conditions(
        cls, jstar: float, astar: float, bstar: float, vc: ViewingConditions
    ) -> Cam16:
        """Build a color from CAM16-UCS coordinates."""
        m = math.hypot(astar, bstar)
        m2 = math.expm1(m * 0.0228) / 0.0228
        c = m2 / vc.fl_root
        h = math.degrees(math.atan2(bstar, astar))
        if h < 0.0:
            h += 360.0
        j = jstar / (1.0 - (jstar - 100.0) * 0.007)
        return cls.from_jch_in_viewing_conditions(j, c, h, vc)
