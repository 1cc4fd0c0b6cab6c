"""
Color space conversions for packed ARGB integers.

Colors travel through the library as ints laid out as 0xAARRGGBB. This
module converts them to and from linear RGB, CIE XYZ, CIE L*a*b* and L*
(perceptual lightness, also called "tone"), and formats them as hex strings.

Linear RGB and XYZ components are scaled to [0, 100].
"""

import string

from .mathutil import clamp_int, matrix_multiply

# Type aliases
RGB = tuple[int, int, int]
XYZ = tuple[float, float, float]
LAB = tuple[float, float, float]

SRGB_TO_XYZ = (
    (0.41233895, 0.35762064, 0.18051042),
    (0.2126, 0.7152, 0.0722),
    (0.01932141, 0.11916382, 0.95034478),
)

XYZ_TO_SRGB = (
    (3.2413774792388685, -1.5376652402851851, -0.49885366846268053),
    (-0.9691452513005321, 1.8758853451067872, 0.04156585616912061),
    (0.05562093689691305, -0.20395524564742123, 1.0571799111220335),
)

WHITE_POINT_D65 = (95.047, 100.0, 108.883)

# CIE constants for the L*a*b* companding function
_LAB_E = 216.0 / 24389.0
_LAB_KAPPA = 24389.0 / 27.0

BLACK = 0xFF000000
WHITE = 0xFFFFFFFF
RED = 0xFFFF0000
GREEN = 0xFF00FF00
BLUE = 0xFF0000FF
GOOGLE_BLUE = 0xFF4285F4


# =============================================================================
# Channel packing
# =============================================================================

def argb_from_rgb(red: int, green: int, blue: int) -> int:
    """Pack opaque RGB channels into an ARGB integer."""
    return (255 << 24) | ((red & 0xFF) << 16) | ((green & 0xFF) << 8) | (blue & 0xFF)


def alpha_from_argb(argb: int) -> int:
    return (argb >> 24) & 0xFF


def red_from_argb(argb: int) -> int:
    return (argb >> 16) & 0xFF


def green_from_argb(argb: int) -> int:
    return (argb >> 8) & 0xFF


def blue_from_argb(argb: int) -> int:
    return argb & 0xFF


def rgb_from_argb(argb: int) -> RGB:
    """Extract the (R, G, B) channels of an ARGB integer."""
    return (red_from_argb(argb), green_from_argb(argb), blue_from_argb(argb))


def is_opaque(argb: int) -> bool:
    return alpha_from_argb(argb) >= 255


def white_point_d65() -> XYZ:
    """The standard white point: D65 illuminant, 2 degree observer."""
    return WHITE_POINT_D65


# =============================================================================
# Transfer functions
# =============================================================================

def linearized(rgb_component: int) -> float:
    """
    Undo the sRGB gamma curve.

    Args:
        rgb_component: 0 <= rgb_component <= 255

    Returns:
        Linear RGB component, 0.0 <= result <= 100.0
    """
    normalized = rgb_component / 255.0
    if normalized <= 0.040449936:
        return normalized / 12.92 * 100.0
    return ((normalized + 0.055) / 1.055) ** 2.4 * 100.0


def delinearized(rgb_component: float) -> int:
    """
    Apply the sRGB gamma curve.

    Args:
        rgb_component: 0.0 <= rgb_component <= 100.0, linear R/G/B

    Returns:
        0 <= result <= 255, an sRGB channel
    """
    normalized = rgb_component / 100.0
    if normalized <= 0.0031308:
        delinearized_value = normalized * 12.92
    else:
        delinearized_value = 1.055 * normalized ** (1.0 / 2.4) - 0.055
    return clamp_int(0, 255, round(delinearized_value * 255.0))


def _lab_f(t: float) -> float:
    if t > _LAB_E:
        return t ** (1.0 / 3.0)
    return (_LAB_KAPPA * t + 16) / 116


def _lab_invf(ft: float) -> float:
    ft3 = ft * ft * ft
    if ft3 > _LAB_E:
        return ft3
    return (116 * ft - 16) / _LAB_KAPPA


# =============================================================================
# Conversions
# =============================================================================

def argb_from_linrgb(linrgb: tuple[float, float, float]) -> int:
    """Convert linear RGB components (0-100) to an ARGB integer."""
    return argb_from_rgb(
        delinearized(linrgb[0]),
        delinearized(linrgb[1]),
        delinearized(linrgb[2]),
    )


def xyz_from_argb(argb: int) -> XYZ:
    r = linearized(red_from_argb(argb))
    g = linearized(green_from_argb(argb))
    b = linearized(blue_from_argb(argb))
    return matrix_multiply((r, g, b), SRGB_TO_XYZ)


def argb_from_xyz(x: float, y: float, z: float) -> int:
    linear_r, linear_g, linear_b = matrix_multiply((x, y, z), XYZ_TO_SRGB)
    return argb_from_rgb(
        delinearized(linear_r),
        delinearized(linear_g),
        delinearized(linear_b),
    )


def lab_from_argb(argb: int) -> LAB:
    """Convert an ARGB integer to CIE L*a*b*."""
    x, y, z = xyz_from_argb(argb)
    fx = _lab_f(x / WHITE_POINT_D65[0])
    fy = _lab_f(y / WHITE_POINT_D65[1])
    fz = _lab_f(z / WHITE_POINT_D65[2])
    l = 116.0 * fy - 16
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)
    return (l, a, b)


def argb_from_lab(l: float, a: float, b: float) -> int:
    """Convert CIE L*a*b* to an ARGB integer."""
    fy = (l + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0
    x = _lab_invf(fx) * WHITE_POINT_D65[0]
    y = _lab_invf(fy) * WHITE_POINT_D65[1]
    z = _lab_invf(fz) * WHITE_POINT_D65[2]
    return argb_from_xyz(x, y, z)


def argb_from_lstar(lstar: float) -> int:
    """The gray with the given L*."""
    component = delinearized(y_from_lstar(lstar))
    return argb_from_rgb(component, component, component)


def lstar_from_argb(argb: int) -> float:
    y = xyz_from_argb(argb)[1]
    return 116.0 * _lab_f(y / 100.0) - 16.0


def y_from_lstar(lstar: float) -> float:
    """
    Convert L* to relative luminance Y.

    L* is perceptually uniform lightness in [0, 100]; Y is linear in
    physical luminance, also in [0, 100].
    """
    return 100.0 * _lab_invf((lstar + 16.0) / 116.0)


def lstar_from_y(y: float) -> float:
    """Inverse of y_from_lstar."""
    return _lab_f(y / 100.0) * 116.0 - 16.0


# =============================================================================
# Hex strings
# =============================================================================

def hex_from_argb(argb: int) -> str:
    """Format as '#rrggbb', dropping alpha."""
    r, g, b = rgb_from_argb(argb)
    return f"#{r:02x}{g:02x}{b:02x}"


def argb_from_hex(hex_color: str) -> int:
    """
    Parse '#rgb', '#rrggbb' or '#aarrggbb' (leading '#' optional).

    Raises:
        ValueError: If the string is not a hex color.
    """
    digits = hex_color.strip().lstrip('#')
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    if len(digits) == 6:
        digits = 'ff' + digits
    if len(digits) != 8 or any(c not in string.hexdigits for c in digits):
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    return int(digits, 16)


def argb_to_unsigned(argb: int) -> int:
    """Normalize a signed 32-bit ARGB value to its unsigned form."""
    return argb & 0xFFFFFFFF

