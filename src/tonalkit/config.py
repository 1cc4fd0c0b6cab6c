"""
TOML configuration for the tonalkit command.

A config file supplies defaults for command-line options. Flags given on
the command line always win.

Example config.toml:

    [theme]
    scheme_type = "fidelity"
    contrast = 0.5
    modes = ["dark"]
"""

import tomllib
from pathlib import Path
from typing import Optional

from .theme import SCHEME_TYPES, THEME_MODES


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read or is invalid."""
    pass


class ThemeConfig:
    """Theme defaults; None means "not set"."""
    __slots__ = ('scheme_type', 'contrast', 'modes')

    def __init__(
        self,
        scheme_type: Optional[str] = None,
        contrast: Optional[float] = None,
        modes: Optional[list[str]] = None,
    ):
        self.scheme_type = scheme_type
        self.contrast = contrast
        self.modes = modes

    def __repr__(self) -> str:
        return f"ThemeConfig(scheme_type={self.scheme_type!r}, contrast={self.contrast!r}, modes={self.modes!r})"


def load_config(path: Path) -> ThemeConfig:
    """
    Read the [theme] table of a TOML file.

    Args:
        path: Path to the TOML file

    Returns:
        ThemeConfig with the values found; a missing table gives all None

    Raises:
        ConfigError: If the file is missing, is not valid TOML, or holds
            values of the wrong type or out of range.
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, 'rb') as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    return parse_config(data.get("theme", {}))


def parse_config(table: dict) -> ThemeConfig:
    """Validate a [theme] table already parsed from TOML."""
    if not isinstance(table, dict):
        raise ConfigError("[theme] must be a table")

    unknown = set(table) - {"scheme_type", "contrast", "modes"}
    if unknown:
        raise ConfigError(f"Unknown [theme] keys: {', '.join(sorted(unknown))}")

    scheme_type = table.get("scheme_type")
    if scheme_type is not None and scheme_type not in SCHEME_TYPES:
        raise ConfigError(
            f"Invalid scheme_type '{scheme_type}' (expected one of: {', '.join(SCHEME_TYPES)})"
        )

    contrast = table.get("contrast")
    if contrast is not None:
        # TOML booleans are not numbers here
        if isinstance(contrast, bool) or not isinstance(contrast, (int, float)):
            raise ConfigError(f"contrast must be a number, got {contrast!r}")
        if not -1.0 <= contrast <= 1.0:
            raise ConfigError(f"contrast must be between -1 and 1, got {contrast}")
        contrast = float(contrast)

    modes = table.get("modes")
    if modes is not None:
        if isinstance(modes, str):
            modes = [modes]
        if not isinstance(modes, list) or not modes:
            raise ConfigError("modes must be a non-empty list")
        for mode in modes:
            if mode not in THEME_MODES:
                raise ConfigError(f"Invalid mode '{mode}' (expected 'dark' or 'light')")

    return ThemeConfig(scheme_type=scheme_type, contrast=contrast, modes=modes)
