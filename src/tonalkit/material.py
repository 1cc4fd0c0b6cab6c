"""
Material Design 3 scheme presets.

Each preset turns one source color into the six palettes of a
DynamicScheme. They differ only in which hues and chromas the palettes get:

- tonal-spot: Default Android 12-13 scheme (recommended)
- neutral: Nearly grayscale, a hint of the source hue
- monochrome: Pure grayscale (chroma = 0)
- vibrant: Maximum primary chroma, hue-rotated accents
- expressive: Primary rotated away from the source, playful accents
- fidelity: Primary matches the source color exactly
- content: Like fidelity, tertiary chosen from analogous colors
- rainbow: Chromatic accents with grayscale neutrals
- fruit-salad: Bold/playful with hue rotation
"""

from .color import argb_from_rgb
from .dislike import fix_if_disliked
from .dynamic import DynamicScheme, Variant
from .hct import Hct
from .mathutil import sanitize_degrees
from .palette import TonalPalette
from .temperature import TemperatureCache


class MaterialScheme(DynamicScheme):
    """
    Base for presets: palettes derived from a single source color.

    Not a scheme on its own. Subclasses set VARIANT and override palettes();
    instantiating the base raises NotImplementedError.
    """

    VARIANT: Variant

    def __init__(self, source_color_hct: Hct, is_dark: bool, contrast_level: float = 0.0):
        palettes = self.palettes(source_color_hct)
        super().__init__(
            *palettes,
            is_dark=is_dark,
            contrast_level=contrast_level,
            source_color_hct=source_color_hct,
            variant=self.VARIANT,
        )

    @classmethod
    def palettes(cls, source: Hct) -> tuple[TonalPalette, TonalPalette, TonalPalette, TonalPalette, TonalPalette]:
        """Primary, secondary, tertiary, neutral and neutral variant palettes."""
        raise NotImplementedError(f"{cls.__name__} must override palettes()")

    @classmethod
    def from_argb(cls, argb: int, is_dark: bool = False, contrast_level: float = 0.0) -> "MaterialScheme":
        return cls(Hct.from_argb(argb), is_dark, contrast_level)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int, is_dark: bool = False, contrast_level: float = 0.0) -> "MaterialScheme":
        return cls.from_argb(argb_from_rgb(r, g, b), is_dark, contrast_level)


def _palette(hue: float, chroma: float) -> TonalPalette:
    return TonalPalette.from_hue_and_chroma(hue, chroma)


class SchemeTonalSpot(MaterialScheme):
    """Calm theme: low-chroma primary, tertiary rotated 60 degrees."""

    VARIANT = Variant.TONAL_SPOT

    @classmethod
    def palettes(cls, source: Hct):
        hue = source.hue
        return (
            _palette(hue, 36.0),
            _palette(hue, 16.0),
            _palette(sanitize_degrees(hue + 60.0), 24.0),
            _palette(hue, 6.0),
            _palette(hue, 8.0),
        )


class SchemeNeutral(MaterialScheme):
    VARIANT = Variant.NEUTRAL

    @classmethod
    def palettes(cls, source: Hct):
        hue = source.hue
        return (
            _palette(hue, 12.0),
            _palette(hue, 8.0),
            _palette(hue, 16.0),
            _palette(hue, 2.0),
            _palette(hue, 2.0),
        )


class SchemeMonochrome(MaterialScheme):
    VARIANT = Variant.MONOCHROME

    @classmethod
    def palettes(cls, source: Hct):
        hue = source.hue
        return tuple(_palette(hue, 0.0) for _ in range(5))


class SchemeVibrant(MaterialScheme):
    """Primary at the highest chroma the hue allows."""

    VARIANT = Variant.VIBRANT

    HUES = [0.0, 41.0, 61.0, 101.0, 131.0, 181.0, 251.0, 301.0, 360.0]
    SECONDARY_ROTATIONS = [18.0, 15.0, 10.0, 12.0, 15.0, 18.0, 15.0, 12.0, 12.0]
    TERTIARY_ROTATIONS = [35.0, 30.0, 20.0, 25.0, 30.0, 35.0, 30.0, 25.0, 25.0]

    @classmethod
    def palettes(cls, source: Hct):
        hue = source.hue
        return (
            _palette(hue, 200.0),
            _palette(DynamicScheme.get_rotated_hue(source, cls.HUES, cls.SECONDARY_ROTATIONS), 24.0),
            _palette(DynamicScheme.get_rotated_hue(source, cls.HUES, cls.TERTIARY_ROTATIONS), 32.0),
            _palette(hue, 10.0),
            _palette(hue, 12.0),
        )


class SchemeExpressive(MaterialScheme):
    """Primary deliberately off the source hue."""

    VARIANT = Variant.EXPRESSIVE

    HUES = [0.0, 21.0, 51.0, 121.0, 151.0, 191.0, 271.0, 321.0, 360.0]
    SECONDARY_ROTATIONS = [45.0, 95.0, 45.0, 20.0, 45.0, 90.0, 45.0, 45.0, 45.0]
    TERTIARY_ROTATIONS = [120.0, 120.0, 20.0, 45.0, 20.0, 15.0, 20.0, 120.0, 120.0]

    @classmethod
    def palettes(cls, source: Hct):
        hue = source.hue
        return (
            _palette(sanitize_degrees(hue + 240.0), 40.0),
            _palette(DynamicScheme.get_rotated_hue(source, cls.HUES, cls.SECONDARY_ROTATIONS), 24.0),
            _palette(DynamicScheme.get_rotated_hue(source, cls.HUES, cls.TERTIARY_ROTATIONS), 32.0),
            _palette(sanitize_degrees(hue + 15.0), 8.0),
            _palette(sanitize_degrees(hue + 15.0), 12.0),
        )


class SchemeFidelity(MaterialScheme):
    """
    Primary container is the source color itself.

    Tertiary is the temperature complement of the source, lightened if it
    lands on a disliked color.
    """

    VARIANT = Variant.FIDELITY

    @classmethod
    def palettes(cls, source: Hct):
        hue = source.hue
        chroma = source.chroma
        tertiary = fix_if_disliked(TemperatureCache(source).complement)
        return (
            _palette(hue, chroma),
            _palette(hue, max(chroma - 32.0, chroma * 0.5)),
            TonalPalette.from_hct(tertiary),
            _palette(hue, chroma / 8.0),
            _palette(hue, chroma / 8.0 + 4.0),
        )


class SchemeContent(MaterialScheme):
    """Like fidelity, but tertiary is an analogous color of the source."""

    VARIANT = Variant.CONTENT

    @classmethod
    def palettes(cls, source: Hct):
        hue = source.hue
        chroma = source.chroma
        analogous = TemperatureCache(source).get_analogous_colors(3, 6)
        tertiary = fix_if_disliked(analogous[2])
        return (
            _palette(hue, chroma),
            _palette(hue, max(chroma - 32.0, chroma * 0.5)),
            TonalPalette.from_hct(tertiary),
            _palette(hue, chroma / 8.0),
            _palette(hue, chroma / 8.0 + 4.0),
        )


class SchemeRainbow(MaterialScheme):
    VARIANT = Variant.RAINBOW

    @classmethod
    def palettes(cls, source: Hct):
        hue = source.hue
        return (
            _palette(hue, 48.0),
            _palette(hue, 16.0),
            _palette(sanitize_degrees(hue + 60.0), 24.0),
            _palette(hue, 0.0),
            _palette(hue, 0.0),
        )


class SchemeFruitSalad(MaterialScheme):
    VARIANT = Variant.FRUIT_SALAD

    @classmethod
    def palettes(cls, source: Hct):
        hue = source.hue
        return (
            _palette(sanitize_degrees(hue - 50.0), 48.0),
            _palette(sanitize_degrees(hue - 50.0), 36.0),
            _palette(hue, 36.0),
            _palette(hue, 10.0),
            _palette(hue, 16.0),
        )


# Map variants to preset classes
SCHEME_CLASSES: dict[Variant, type[MaterialScheme]] = {
    Variant.TONAL_SPOT: SchemeTonalSpot,
    Variant.NEUTRAL: SchemeNeutral,
    Variant.MONOCHROME: SchemeMonochrome,
    Variant.VIBRANT: SchemeVibrant,
    Variant.EXPRESSIVE: SchemeExpressive,
    Variant.FIDELITY: SchemeFidelity,
    Variant.CONTENT: SchemeContent,
    Variant.RAINBOW: SchemeRainbow,
    Variant.FRUIT_SALAD: SchemeFruitSalad,
}


def scheme_from_variant(
    variant: Variant,
    source_color_hct: Hct,
    is_dark: bool,
    contrast_level: float = 0.0,
) -> MaterialScheme:
    """
    Build the preset for a variant.

    Args:
        variant: Scheme style
        source_color_hct: Seed color
        is_dark: Dark theme if True
        contrast_level: -1 (reduced) to 1 (highest)

    Returns:
        The preset scheme
    """
    scheme_class = SCHEME_CLASSES[variant]
    return scheme_class(source_color_hct, is_dark, contrast_level)
