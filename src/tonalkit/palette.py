"""
Tonal palettes: one hue and chroma, every tone from 0 to 100.

A palette is what a scheme hands to each color role. Roles pick a tone;
the palette turns it into a concrete color through the HCT solver.
"""

from .hct import Hct

# Chroma high enough that no sRGB color reaches it
_MAX_CHROMA_VALUE = 200.0


class TonalPalette:
    """
    A hue and chroma, plus a lazily filled tone -> ARGB cache.

    key_color is a color of the palette that actually shows the requested
    chroma; it is the seed itself for palettes built from a color, and the
    result of a key color search for palettes built from hue and chroma.
    """
    __slots__ = ('hue', 'chroma', 'key_color', '_cache')

    def __init__(self, hue: float, chroma: float, key_color: Hct):
        self.hue = hue
        self.chroma = chroma
        self.key_color = key_color
        self._cache: dict[int, int] = {}

    @classmethod
    def from_argb(cls, argb: int) -> "TonalPalette":
        """Palette with the hue and chroma of a color."""
        return cls.from_hct(Hct.from_argb(argb))

    @classmethod
    def from_hct(cls, hct: Hct) -> "TonalPalette":
        return cls(hct.hue, hct.chroma, hct)

    @classmethod
    def from_hue_and_chroma(cls, hue: float, chroma: float) -> "TonalPalette":
        return cls(hue, chroma, KeyColor(hue, chroma).create())

    def tone(self, tone: int) -> int:
        """ARGB of the palette at the given tone (0-100)."""
        color = self._cache.get(tone)
        if color is None:
            color = Hct.from_hct(self.hue, self.chroma, tone).argb
            self._cache[tone] = color
        return color

    def get_hct(self, tone: float) -> Hct:
        """Palette color at a fractional tone; not cached."""
        return Hct.from_hct(self.hue, self.chroma, tone)

    def __repr__(self) -> str:
        return f"TonalPalette(hue={self.hue:.2f}, chroma={self.chroma:.2f})"


class KeyColor:
    """
    Finds the tone at which a hue reaches the requested chroma.

    Binary search over integer tones for the tone closest to 50 whose
    maximum achievable chroma covers the request. If the hue never gets
    there, the tone of peak chroma is used instead.
    """

    def __init__(self, hue: float, requested_chroma: float):
        self.hue = hue
        self.requested_chroma = requested_chroma
        self._chroma_cache: dict[int, float] = {}

    def create(self) -> Hct:
        pivot_tone = 50
        tone_step_size = 1
        # Tolerance for float rounding of the achieved chroma
        epsilon = 0.01

        lower_tone = 0
        upper_tone = 100
        while lower_tone < upper_tone:
            mid_tone = (lower_tone + upper_tone) // 2
            is_ascending = self.max_chroma(mid_tone) < self.max_chroma(mid_tone + tone_step_size)
            sufficient_chroma = self.max_chroma(mid_tone) >= self.requested_chroma - epsilon

            if sufficient_chroma:
                # Keep the half closer to the pivot
                if abs(lower_tone - pivot_tone) < abs(upper_tone - pivot_tone):
                    upper_tone = mid_tone
                else:
                    if lower_tone == mid_tone:
                        return Hct.from_hct(self.hue, self.requested_chroma, lower_tone)
                    lower_tone = mid_tone
            else:
                # Climb toward the chroma peak
                if is_ascending:
                    lower_tone = mid_tone + tone_step_size
                else:
                    upper_tone = mid_tone

        return Hct.from_hct(self.hue, self.requested_chroma, lower_tone)

    def max_chroma(self, tone: int) -> float:
        """Largest chroma the hue reaches at this tone."""
        chroma = self._chroma_cache.get(tone)
        if chroma is None:
            chroma = Hct.from_hct(self.hue, _MAX_CHROMA_VALUE, tone).chroma
            self._chroma_cache[tone] = chroma
        return chroma


class CorePalettes:
    """The five palettes that make up a scheme, without the error palette."""
    __slots__ = ('primary', 'secondary', 'tertiary', 'neutral', 'neutral_variant')

    def __init__(
        self,
        primary: TonalPalette,
        secondary: TonalPalette,
        tertiary: TonalPalette,
        neutral: TonalPalette,
        neutral_variant: TonalPalette,
    ):
        self.primary = primary
        self.secondary = secondary
        self.tertiary = tertiary
        self.neutral = neutral
        self.neutral_variant = neutral_variant

    def as_dict(self) -> dict[str, TonalPalette]:
        return {name: getattr(self, name) for name in self.__slots__}
