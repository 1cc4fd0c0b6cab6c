"""
HCT color space: hue, chroma, tone.

Hue and chroma come from CAM16; tone is CIE L*. Tone is what makes HCT
useful for theming: two colors whose tones differ by 40 have a contrast
ratio of at least 3.0, and tones differing by 50 reach 4.5, regardless of
their hue or chroma.

An Hct is immutable and always wraps a real sRGB color. Requesting a chroma
the gamut cannot hold at that hue and tone yields the most chromatic color
that can be shown instead.
"""

from .cam16 import Cam16, ViewingConditions
from .color import argb_from_rgb, lstar_from_argb, lstar_from_y
from . import hct_solver


class Hct:
    """A color described by CAM16 hue and chroma plus L* tone."""
    __slots__ = ('_argb', '_hue', '_chroma', '_tone')

    def __init__(self, argb: int):
        self._argb = argb & 0xFFFFFFFF
        cam = Cam16.from_argb(self._argb)
        self._hue = cam.hue
        self._chroma = cam.chroma
        self._tone = lstar_from_argb(self._argb)

    @classmethod
    def from_hct(cls, hue: float, chroma: float, tone: float) -> "Hct":
        """
        Create from hue, chroma and tone.

        Args:
            hue: 0 <= hue < 360; other values are wrapped
            chroma: 0 <= chroma < ?; the maximum depends on hue and tone
            tone: 0 <= tone <= 100
        """
        return cls(hct_solver.solve_to_argb(hue, chroma, tone))

    @classmethod
    def from_argb(cls, argb: int) -> "Hct":
        return cls(argb)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Hct":
        return cls(argb_from_rgb(r, g, b))

    @classmethod
    def from_cam(cls, cam: Cam16) -> "Hct":
        return cls(cam.to_argb())

    @property
    def hue(self) -> float:
        return self._hue

    @property
    def chroma(self) -> float:
        return self._chroma

    @property
    def tone(self) -> float:
        return self._tone

    @property
    def argb(self) -> int:
        return self._argb

    def to_argb(self) -> int:
        return self._argb

    def with_hue(self, hue: float) -> "Hct":
        return Hct.from_hct(hue, self._chroma, self._tone)

    def with_chroma(self, chroma: float) -> "Hct":
        return Hct.from_hct(self._hue, chroma, self._tone)

    def with_tone(self, tone: float) -> "Hct":
        return Hct.from_hct(self._hue, self._chroma, tone)

    def in_viewing_conditions(self, vc: ViewingConditions) -> "Hct":
        """
        Translate to the color that looks the same under other conditions.

        The color is viewed in vc, then the result is described again under
        the default viewing conditions. Useful for simulating colors on a
        dark or light background.
        """
        cam = Cam16.from_argb(self._argb)
        x, y, z = cam.xyz_in_viewing_conditions(vc)
        recast = Cam16.from_xyz_in_viewing_conditions(x, y, z, ViewingConditions.DEFAULT)
        return Hct.from_hct(recast.hue, recast.chroma, lstar_from_y(y))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hct):
            return NotImplemented
        return self._argb == other._argb

    def __hash__(self) -> int:
        return hash(self._argb)

    def __repr__(self) -> str:
        return (
            f"Hct(hue={self._hue:.2f}, chroma={self._chroma:.2f}, "
            f"tone={self._tone:.2f}, argb=0x{self._argb:08X})"
        )
