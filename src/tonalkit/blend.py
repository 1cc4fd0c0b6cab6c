"""
Blend colors in HCT and CAM16-UCS.

harmonize() is the one most callers want: it nudges a fixed design color
(an error red, a brand color) toward the theme's source color so it sits
comfortably next to the generated palette.
"""

from .cam16 import Cam16
from .color import lstar_from_argb
from .hct import Hct
from .mathutil import difference_degrees, rotation_direction, sanitize_degrees


def harmonize(design_argb: int, source_argb: int) -> int:
    """
    Shift the hue of design_argb toward source_argb.

    The hue moves halfway to the source, at most 15 degrees; chroma and
    tone are kept.
    """
    from_hct = Hct.from_argb(design_argb)
    to_hct = Hct.from_argb(source_argb)
    rotation_degrees = min(difference_degrees(from_hct.hue, to_hct.hue) * 0.5, 15.0)
    output_hue = sanitize_degrees(
        from_hct.hue + rotation_degrees * rotation_direction(from_hct.hue, to_hct.hue)
    )
    return Hct.from_hct(output_hue, from_hct.chroma, from_hct.tone).argb


def hct_hue(from_argb: int, to_argb: int, amount: float) -> int:
    """
    Blend hues in CAM16-UCS, keeping the chroma and tone of from_argb.

    Args:
        from_argb: Color to change
        to_argb: Color whose hue is blended in
        amount: 0.0 keeps from_argb's hue, 1.0 takes to_argb's hue
    """
    ucs = cam16_ucs(from_argb, to_argb, amount)
    ucs_cam = Cam16.from_argb(ucs)
    from_cam = Cam16.from_argb(from_argb)
    return Hct.from_hct(ucs_cam.hue, from_cam.chroma, lstar_from_argb(from_argb)).argb


def cam16_ucs(from_argb: int, to_argb: int, amount: float) -> int:
    """Linear interpolation of two colors in CAM16-UCS (J*, a*, b*)."""
    from_cam = Cam16.from_argb(from_argb)
    to_cam = Cam16.from_argb(to_argb)
    jstar = from_cam.jstar + (to_cam.jstar - from_cam.jstar) * amount
    astar = from_cam.astar + (to_cam.astar - from_cam.astar) * amount
    bstar = from_cam.bstar + (to_cam.bstar - from_cam.bstar) * amount
    return Cam16.from_ucs(jstar, astar, bstar).to_argb()
