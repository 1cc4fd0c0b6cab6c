"""
WCAG contrast ratios expressed in terms of tone (L*).

Contrast ratio runs from 1 (no contrast) to 21 (black on white). Because
tone maps to luminance independently of hue, these helpers can find the
tone needed for a given ratio without knowing the final color.
"""

from .color import lstar_from_y, y_from_lstar
from .mathutil import clamp_double

RATIO_MIN = 1.0
RATIO_MAX = 21.0
RATIO_30 = 3.0
RATIO_45 = 4.5
RATIO_70 = 7.0

# Tolerated shortfall when the returned tone misses the requested ratio
CONTRAST_RATIO_EPSILON = 0.04

# Tones are nudged this far past the exact answer; rounding to an sRGB
# color can otherwise lose contrast.
LUMINANCE_GAMUT_MAP_TOLERANCE = 0.4


def ratio_of_ys(y1: float, y2: float) -> float:
    """Contrast ratio between two relative luminances (0-100)."""
    lighter = max(y1, y2)
    darker = y1 if lighter == y2 else y2
    return (lighter + 5.0) / (darker + 5.0)


def ratio_of_tones(t1: float, t2: float) -> float:
    """Contrast ratio between two tones; symmetric in its arguments."""
    t1 = clamp_double(0.0, 100.0, t1)
    t2 = clamp_double(0.0, 100.0, t2)
    return ratio_of_ys(y_from_lstar(t1), y_from_lstar(t2))


def lighter(tone: float, ratio: float) -> float:
    """
    Tone at least `ratio` lighter than `tone`.

    Returns:
        The lighter tone, or -1.0 if the ratio cannot be reached
    """
    if tone < 0.0 or tone > 100.0:
        return -1.0
    dark_y = y_from_lstar(tone)
    light_y = ratio * (dark_y + 5.0) - 5.0
    if light_y < 0.0 or light_y > 100.0:
        return -1.0
    real_contrast = ratio_of_ys(light_y, dark_y)
    delta = abs(real_contrast - ratio)
    if real_contrast < ratio and delta > CONTRAST_RATIO_EPSILON:
        return -1.0
    return_value = lstar_from_y(light_y) + LUMINANCE_GAMUT_MAP_TOLERANCE
    if return_value < 0 or return_value > 100:
        return -1.0
    return return_value


def lighter_unsafe(tone: float, ratio: float) -> float:
    """Like lighter(), but answers 100 (white) when the ratio is unreachable."""
    lighter_safe = lighter(tone, ratio)
    return 100.0 if lighter_safe < 0.0 else lighter_safe


def darker(tone: float, ratio: float) -> float:
    """
    Tone at least `ratio` darker than `tone`.

    Returns:
        The darker tone, or -1.0 if the ratio cannot be reached
    """
    if tone < 0.0 or tone > 100.0:
        return -1.0
    light_y = y_from_lstar(tone)
    dark_y = (light_y + 5.0) / ratio - 5.0
    if dark_y < 0.0 or dark_y > 100.0:
        return -1.0
    real_contrast = ratio_of_ys(light_y, dark_y)
    delta = abs(real_contrast - ratio)
    if real_contrast < ratio and delta > CONTRAST_RATIO_EPSILON:
        return -1.0
    return_value = lstar_from_y(dark_y) - LUMINANCE_GAMUT_MAP_TOLERANCE
    if return_value < 0 or return_value > 100:
        return -1.0
    return return_value


def darker_unsafe(tone: float, ratio: float) -> float:
    """Like darker(), but answers 0 (black) when the ratio is unreachable."""
    return max(0.0, darker(tone, ratio))
