"""
tonalkit - Material color theme generator.

A CLI tool that generates dark and light color themes from a seed color,
or from the dominant color of a JSON color palette.

Supported scheme types:
- tonal-spot: Default Android 12-13 Material You scheme (recommended)
- neutral: Nearly grayscale, a hint of the source hue
- monochrome: Pure grayscale M3 scheme (chroma = 0, only error has color)
- vibrant: Maximum primary chroma
- expressive: Primary rotated away from the source hue
- fidelity: Primary container matches the source color
- content: Preserves source color's chroma with temperature-based tertiary
- rainbow: Chromatic accents with grayscale neutrals
- fruit-salad: Bold/playful with -50° hue rotation

Usage:
    tonalkit SOURCE [OPTIONS]

Options:
    --scheme-type    Scheme type: tonal-spot (default), neutral, monochrome, vibrant, expressive, fidelity, content, rainbow, fruit-salad
    --contrast       Contrast level from -1 (reduced) to 1 (highest), default 0
    --dark           Generate dark theme only
    --light          Generate light theme only
    --both           Generate both themes (default)
    -o, --output     Write JSON output to file (stdout if omitted)
    -c, --config     Path to TOML configuration file with theme defaults
    --mode           Theme mode: dark or light
    -v, --verbose    Print progress to stderr

Input:
    Either a hex color ("#4285f4") or a JSON file holding a list of pixel
    colors (["#ff0000", 4282549748, ...]) or a color histogram
    ({"#ff0000": 120, "#00ff00": 35}).

Example:
    tonalkit '#4285f4'
    tonalkit '#4285f4' --scheme-type fidelity --dark
    tonalkit palette.json --contrast 0.5 -o theme.json
    tonalkit '#b33b15' -c config.toml --mode light
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .color import argb_from_hex, argb_to_unsigned, hex_from_argb
from .config import ConfigError, ThemeConfig, load_config
from .quantizer import QuantizerMap
from .score import score
from .theme import DEFAULT_SCHEME_TYPE, SCHEME_TYPES, generate_themes


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog='tonalkit',
        description='Generate Material color themes from a seed color or color palette',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tonalkit '#4285f4'                                  # tonal-spot (default), both themes
  tonalkit '#4285f4' --scheme-type content --dark     # content scheme, dark only
  tonalkit palette.json --dark -o theme.json          # seed scored from a palette, output to file
  tonalkit '#4285f4' --contrast 1                     # highest contrast
  tonalkit '#4285f4' -c config.toml --mode dark       # defaults from config, dark only
        """
    )

    parser.add_argument(
        'source',
        help='Seed color as hex (#rgb, #rrggbb, #aarrggbb) or path to a JSON color palette'
    )

    # Scheme type selection; None lets the config file decide
    parser.add_argument(
        '--scheme-type',
        choices=SCHEME_TYPES,
        default=None,
        help=f'Color scheme type (default: {DEFAULT_SCHEME_TYPE})'
    )

    parser.add_argument(
        '--contrast',
        type=float,
        default=None,
        help='Contrast level from -1 (reduced) to 1 (highest) (default: 0)'
    )

    # Theme mode (mutually exclusive)
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        '--dark',
        action='store_true',
        help='Generate dark theme only'
    )
    mode_group.add_argument(
        '--light',
        action='store_true',
        help='Generate light theme only'
    )
    mode_group.add_argument(
        '--both',
        action='store_true',
        default=True,
        help='Generate both dark and light themes (default)'
    )

    parser.add_argument(
        '--output', '-o',
        type=Path,
        help='Write JSON output to file (stdout if omitted)'
    )

    parser.add_argument(
        '--config', '-c',
        type=Path,
        help='Path to TOML configuration file with theme defaults'
    )
    parser.add_argument(
        '--mode',
        choices=['dark', 'light'],
        help='Theme mode: dark or light'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Print progress to stderr'
    )

    return parser.parse_args(argv)


def parse_color(value: object) -> int:
    """
    Convert a JSON color value to ARGB.

    Strings are hex colors; integers are ARGB values (negative values are
    read as signed 32-bit).

    Raises:
        ValueError: If the value is neither.
    """
    if isinstance(value, str):
        return argb_from_hex(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return argb_to_unsigned(value)
    raise ValueError(f"Invalid color value: {value!r}")


def load_palette(path: Path) -> dict[int, int]:
    """
    Read a JSON color palette into a color -> population histogram.

    A list is treated as pixels and counted with QuantizerMap; an object
    maps colors to their populations.

    Raises:
        ValueError: If the JSON is invalid or holds unexpected values.
    """
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    if isinstance(data, list):
        return QuantizerMap().quantize([parse_color(value) for value in data])

    if isinstance(data, dict):
        histogram: dict[int, int] = {}
        for key, count in data.items():
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise ValueError(f"Invalid population for {key}: {count!r}")
            argb = parse_color(key)
            histogram[argb] = histogram.get(argb, 0) + count
        return histogram

    raise ValueError("Palette JSON must be a list of colors or an object of color counts")


def resolve_source(source: str, verbose: bool = False) -> int:
    """Seed color from the SOURCE argument: a hex color or a JSON palette file."""
    path = Path(source).expanduser()
    if path.suffix.lower() == '.json' or path.is_file():
        if not path.is_file():
            raise ValueError(f"Palette not found: {path}")
        histogram = load_palette(path)
        if verbose:
            print(f"Scoring {len(histogram)} colors from {path}", file=sys.stderr)
        return score(histogram, desired=1)[0]
    return argb_from_hex(source)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    config = ThemeConfig()
    if args.config:
        try:
            config = load_config(args.config)
        except ConfigError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    # Determine mode from arguments, then config
    if args.mode == 'dark':
        modes = ["dark"]
    elif args.mode == 'light':
        modes = ["light"]
    elif args.dark:
        modes = ["dark"]
    elif args.light:
        modes = ["light"]
    elif config.modes:
        modes = list(config.modes)
    else:
        modes = ["dark", "light"]

    scheme_type = args.scheme_type or config.scheme_type or DEFAULT_SCHEME_TYPE

    contrast = args.contrast if args.contrast is not None else config.contrast
    if contrast is None:
        contrast = 0.0
    if not -1.0 <= contrast <= 1.0:
        print(f"Error: Contrast must be between -1 and 1, got {contrast}", file=sys.stderr)
        return 1

    try:
        source_argb = resolve_source(args.source, args.verbose)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(
            f"Source {hex_from_argb(source_argb)}, scheme {scheme_type}, "
            f"contrast {contrast}, modes {', '.join(modes)}",
            file=sys.stderr,
        )

    result = generate_themes(source_argb, modes, scheme_type, contrast)

    # Output JSON
    json_output = json.dumps(result, indent=2)

    if args.output:
        try:
            args.output.write_text(json_output)
            print(f"Theme written to: {args.output}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
    else:
        print(json_output)

    return 0


if __name__ == '__main__':
    sys.exit(main())
