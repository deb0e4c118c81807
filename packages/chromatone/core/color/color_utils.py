"""Color conversions between ARGB, linear RGB, XYZ, L*a*b* and L*.

Colors are plain ``int`` values in 0xAARRGGBB layout. All XYZ math uses the
D65 white point with Y scaled to [0, 100].
"""

from __future__ import annotations

import logging
import math
import re

from chromatone.core.utils.math import Vector3, clamp, matrix_multiply, round_half_up

logger = logging.getLogger(__name__)

SRGB_TO_XYZ: tuple[Vector3, Vector3, Vector3] = (
    (0.41233895, 0.35762064, 0.18051042),
    (0.2126, 0.7152, 0.0722),
    (0.01932141, 0.11916382, 0.95034478),
)

XYZ_TO_SRGB: tuple[Vector3, Vector3, Vector3] = (
    (3.2413774792388685, -1.5376652402851851, -0.49885366846268053),
    (-0.9691452513005321, 1.8758853451067872, 0.04156585616912061),
    (0.05562093689691305, -0.20395524564742123, 1.0571799111220335),
)

WHITE_POINT_D65: Vector3 = (95.047, 100.0, 108.883)

_LAB_E = 216.0 / 24389.0
_LAB_KAPPA = 24389.0 / 27.0

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def argb_from_rgb(red: int, green: int, blue: int) -> int:
    """Pack opaque red, green and blue channels into an ARGB int."""
    return 0xFF000000 | ((red & 255) << 16) | ((green & 255) << 8) | (blue & 255)


def alpha_from_argb(argb: int) -> int:
    return (argb >> 24) & 255


def red_from_argb(argb: int) -> int:
    return (argb >> 16) & 255


def green_from_argb(argb: int) -> int:
    return (argb >> 8) & 255


def blue_from_argb(argb: int) -> int:
    return argb & 255


def is_opaque(argb: int) -> bool:
    return alpha_from_argb(argb) == 255


def linearized(rgb_component: int) -> float:
    """Linearize an 8-bit sRGB channel.

    Args:
        rgb_component: Channel value in [0, 255]

    Returns:
        Linear channel value in [0, 100]
    """
    normalized = rgb_component / 255.0
    if normalized <= 0.040449936:
        return normalized / 12.92 * 100.0
    return ((normalized + 0.055) / 1.055) ** 2.4 * 100.0


def delinearized(rgb_component: float) -> int:
    """Delinearize a linear channel in [0, 100] back to an 8-bit sRGB channel."""
    normalized = rgb_component / 100.0
    if normalized <= 0.0031308:
        value = normalized * 12.92
    else:
        value = 1.055 * normalized ** (1.0 / 2.4) - 0.055
    return clamp(round_half_up(value * 255.0), 0, 255)


def argb_from_linrgb(linrgb: Vector3) -> int:
    """Convert a linear RGB triple in [0, 100] to ARGB."""
    return argb_from_rgb(delinearized(linrgb[0]), delinearized(linrgb[1]), delinearized(linrgb[2]))


def argb_from_xyz(x: float, y: float, z: float) -> int:
    """Convert XYZ to an opaque ARGB color."""
    linear = matrix_multiply((x, y, z), XYZ_TO_SRGB)
    return argb_from_linrgb(linear)


def xyz_from_argb(argb: int) -> Vector3:
    """Convert ARGB to XYZ."""
    r = linearized(red_from_argb(argb))
    g = linearized(green_from_argb(argb))
    b = linearized(blue_from_argb(argb))
    return matrix_multiply((r, g, b), SRGB_TO_XYZ)


def lab_f(t: float) -> float:
    if t > _LAB_E:
        return math.cbrt(t)
    return (_LAB_KAPPA * t + 16.0) / 116.0


def lab_invf(ft: float) -> float:
    ft3 = ft * ft * ft
    if ft3 > _LAB_E:
        return ft3
    return (116.0 * ft - 16.0) / _LAB_KAPPA


def argb_from_lab(l: float, a: float, b: float) -> int:  # noqa: E741
    """Convert L*a*b* to ARGB."""
    fy = (l + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0
    x = lab_invf(fx) * WHITE_POINT_D65[0]
    y = lab_invf(fy) * WHITE_POINT_D65[1]
    z = lab_invf(fz) * WHITE_POINT_D65[2]
    return argb_from_xyz(x, y, z)


def lab_from_argb(argb: int) -> Vector3:
    """Convert ARGB to L*a*b*.

    Returns:
        Tuple of (L*, a*, b*)
    """
    x, y, z = xyz_from_argb(argb)
    fx = lab_f(x / WHITE_POINT_D65[0])
    fy = lab_f(y / WHITE_POINT_D65[1])
    fz = lab_f(z / WHITE_POINT_D65[2])
    return (116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz))


def y_from_lstar(lstar: float) -> float:
    """Convert L* to relative luminance Y in [0, 100]."""
    return 100.0 * lab_invf((lstar + 16.0) / 116.0)


def lstar_from_y(y: float) -> float:
    """Convert relative luminance Y in [0, 100] to L*."""
    return lab_f(y / 100.0) * 116.0 - 16.0


def argb_from_lstar(lstar: float) -> int:
    """Gray ARGB color with the given L*."""
    component = delinearized(y_from_lstar(lstar))
    return argb_from_rgb(component, component, component)


def lstar_from_argb(argb: int) -> float:
    """L* of an ARGB color."""
    y = xyz_from_argb(argb)[1]
    return 116.0 * lab_f(y / 100.0) - 16.0


def hex_from_argb(argb: int) -> str:
    """Format the RGB part of an ARGB color as ``#rrggbb``.

    Example:
        >>> hex_from_argb(0xFF4285F4)
        '#4285f4'
    """
    return f"#{red_from_argb(argb):02x}{green_from_argb(argb):02x}{blue_from_argb(argb):02x}"


def argb_from_hex(hex_string: str) -> int:
    """Parse ``#rgb``, ``#rrggbb`` or ``#aarrggbb`` into an ARGB int.

    Args:
        hex_string: Hex color, leading ``#`` optional

    Returns:
        ARGB color; alpha defaults to 0xFF

    Raises:
        ValueError: If the string is not a hex color

    Example:
        >>> hex(argb_from_hex("#4285F4"))
        '0xff4285f4'
    """
    match = _HEX_PATTERN.match(hex_string.strip())
    if match is None:
        raise ValueError(f"Invalid hex color: {hex_string!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) == 6:
        digits = "ff" + digits
    return int(digits, 16)
