"""
Theme generation functions.

This module flattens a Material scheme into a dictionary of color tokens
(snake_case role name -> "#rrggbb"), the format the CLI prints and that
template tools consume.

Supported scheme types:
- tonal-spot: Default Android 12-13 scheme (recommended)
- neutral: Nearly grayscale
- monochrome: Pure grayscale M3 scheme (chroma = 0)
- vibrant: Prioritizes the most saturated colors
- expressive: Primary rotated away from the source hue
- fidelity: Primary container matches the source color
- content: Like fidelity, with an analogous tertiary
- rainbow: Chromatic accents with grayscale neutrals
- fruit-salad: Bold/playful with hue rotation
"""

from typing import Iterable, Literal

from .color import hex_from_argb
from .dynamic import DynamicScheme, Variant
from .hct import Hct
from .material import MaterialScheme, scheme_from_variant
from .roles import MaterialDynamicColors

# Type aliases
ThemeMode = Literal["dark", "light"]
SchemeType = Literal[
    "tonal-spot", "neutral", "monochrome", "vibrant", "expressive",
    "fidelity", "content", "rainbow", "fruit-salad",
]

SCHEME_TYPES: tuple[str, ...] = tuple(variant.value for variant in Variant)
THEME_MODES: tuple[str, ...] = ("dark", "light")
DEFAULT_SCHEME_TYPE = "tonal-spot"

# Shared role catalog; roles cache their resolved colors per scheme
_COLORS = MaterialDynamicColors()


def variant_from_scheme_type(scheme_type: str) -> Variant:
    """
    Look up the Variant for a scheme type name.

    Raises:
        ValueError: If the scheme type is unknown.
    """
    try:
        return Variant(scheme_type)
    except ValueError:
        raise ValueError(
            f"Unknown scheme type '{scheme_type}' (expected one of: {', '.join(SCHEME_TYPES)})"
        ) from None


def _check_mode(mode: str) -> None:
    if mode not in THEME_MODES:
        raise ValueError(f"Unknown theme mode '{mode}' (expected 'dark' or 'light')")


def generate_scheme(
    source_argb: int,
    mode: ThemeMode = "dark",
    scheme_type: str = DEFAULT_SCHEME_TYPE,
    contrast_level: float = 0.0,
) -> MaterialScheme:
    """
    Build the Material scheme for a source color.

    Args:
        source_argb: Seed color
        mode: "dark" or "light"
        scheme_type: One of SCHEME_TYPES
        contrast_level: -1 (reduced) to 1 (highest)

    Returns:
        The scheme preset for the requested type and mode
    """
    _check_mode(mode)
    variant = variant_from_scheme_type(scheme_type)
    return scheme_from_variant(variant, Hct.from_argb(source_argb), mode == "dark", contrast_level)


def scheme_to_tokens(scheme: DynamicScheme) -> dict[str, str]:
    """
    Resolve every theme role of a scheme.

    Returns:
        Dictionary of color token names to hex values, in token order
    """
    return {color.name: hex_from_argb(color.get_argb(scheme)) for color in _COLORS.all_colors()}


def generate_theme(
    source_argb: int,
    mode: ThemeMode = "dark",
    scheme_type: str = DEFAULT_SCHEME_TYPE,
    contrast_level: float = 0.0,
) -> dict[str, str]:
    """
    Generate a theme from a source color.

    Args:
        source_argb: Seed color
        mode: "dark" or "light"
        scheme_type: One of SCHEME_TYPES
        contrast_level: -1 (reduced) to 1 (highest)

    Returns:
        Dictionary of color token names to hex values
    """
    return scheme_to_tokens(generate_scheme(source_argb, mode, scheme_type, contrast_level))


def generate_themes(
    source_argb: int,
    modes: Iterable[ThemeMode] = THEME_MODES,
    scheme_type: str = DEFAULT_SCHEME_TYPE,
    contrast_level: float = 0.0,
) -> dict[str, dict[str, str]]:
    """Generate one theme per mode, keyed by mode name."""
    return {mode: generate_theme(source_argb, mode, scheme_type, contrast_level) for mode in modes}
