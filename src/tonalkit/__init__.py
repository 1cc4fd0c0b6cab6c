"""
tonalkit - perceptual color themes.

Color science (CAM16, HCT), tonal palettes, contrast-aware dynamic color
roles and Material scheme presets, plus helpers that turn a seed color
into dark and light theme token maps.
"""

from .blend import cam16_ucs, harmonize, hct_hue
from .cam16 import Cam16, ViewingConditions
from .color import argb_from_hex, argb_from_rgb, hex_from_argb, rgb_from_argb
from .dislike import fix_if_disliked, is_disliked
from .dynamic import (
    ContrastCurve,
    DynamicColor,
    DynamicScheme,
    ToneDeltaPair,
    TonePolarity,
    Variant,
)
from .hct import Hct
from .material import (
    SchemeContent,
    SchemeExpressive,
    SchemeFidelity,
    SchemeFruitSalad,
    SchemeMonochrome,
    SchemeNeutral,
    SchemeRainbow,
    SchemeTonalSpot,
    SchemeVibrant,
    scheme_from_variant,
)
from .palette import CorePalettes, KeyColor, TonalPalette
from .quantizer import QuantizerMap
from .roles import MaterialDynamicColors
from .score import score
from .temperature import TemperatureCache
from .theme import generate_scheme, generate_theme, generate_themes, scheme_to_tokens

__version__ = "0.1.0"

__all__ = [
    # Color science
    'Cam16',
    'ViewingConditions',
    'Hct',
    'argb_from_hex',
    'argb_from_rgb',
    'hex_from_argb',
    'rgb_from_argb',
    # Palettes
    'TonalPalette',
    'KeyColor',
    'CorePalettes',
    'TemperatureCache',
    # Dynamic color
    'ContrastCurve',
    'DynamicColor',
    'DynamicScheme',
    'ToneDeltaPair',
    'TonePolarity',
    'Variant',
    'MaterialDynamicColors',
    # Schemes
    'SchemeContent',
    'SchemeExpressive',
    'SchemeFidelity',
    'SchemeFruitSalad',
    'SchemeMonochrome',
    'SchemeNeutral',
    'SchemeRainbow',
    'SchemeTonalSpot',
    'SchemeVibrant',
    'scheme_from_variant',
    # Utilities
    'QuantizerMap',
    'score',
    'is_disliked',
    'fix_if_disliked',
    'harmonize',
    'hct_hue',
    'cam16_ucs',
    # Themes
    'generate_scheme',
    'generate_theme',
    'generate_themes',
    'scheme_to_tokens',
]
