"""Tests for the tonalkit command and its configuration file."""

import json

import pytest

from tonalkit.cli import load_palette, main, parse_color
from tonalkit.config import ConfigError, load_config, parse_config
from tonalkit.roles import MaterialDynamicColors


def _run(capsys, *argv):
    code = main(list(argv))
    captured = capsys.readouterr()
    return code, captured.out, captured.err


# =============================================================================
# Configuration
# =============================================================================

def test_load_config(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[theme]\nscheme_type = "fidelity"\ncontrast = 0.5\nmodes = ["dark"]\n')
    config = load_config(path)
    assert config.scheme_type == "fidelity"
    assert config.contrast == 0.5
    assert config.modes == ["dark"]


def test_config_without_theme_table(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[other]\nkey = 1\n')
    config = load_config(path)
    assert config.scheme_type is None
    assert config.contrast is None
    assert config.modes is None


def test_missing_config(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.toml")


def test_invalid_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[theme\n')
    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(path)


@pytest.mark.parametrize("table", [
    {"scheme_type": "faithful"},
    {"contrast": 2.0},
    {"contrast": True},
    {"contrast": "high"},
    {"modes": []},
    {"modes": ["dim"]},
    {"colour": "red"},
])
def test_invalid_theme_values(table):
    with pytest.raises(ConfigError):
        parse_config(table)


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)


def test_single_mode_string_is_accepted():
    assert parse_config({"modes": "light"}).modes == ["light"]


# =============================================================================
# Palette input
# =============================================================================

def test_parse_color():
    assert parse_color("#ff0000") == 0xFFFF0000
    assert parse_color(-12417548) == 0xFF4285F4
    with pytest.raises(ValueError):
        parse_color(1.5)
    with pytest.raises(ValueError):
        parse_color(True)


def test_load_palette_list(tmp_path):
    path = tmp_path / "pixels.json"
    path.write_text(json.dumps(["#ff0000", "#ff0000", 4278255360]))
    assert load_palette(path) == {0xFFFF0000: 2, 0xFF00FF00: 1}


def test_load_palette_histogram(tmp_path):
    path = tmp_path / "histogram.json"
    path.write_text(json.dumps({"#ff0000": 3, "#FF0000": 2, "#0000ff": 1}))
    assert load_palette(path) == {0xFFFF0000: 5, 0xFF0000FF: 1}


@pytest.mark.parametrize("content", ['"red"', '{"#ff0000": -1}', '{"#ff0000": "many"}', '[', '["nope"]'])
def test_load_palette_rejects_bad_input(tmp_path, content):
    path = tmp_path / "bad.json"
    path.write_text(content)
    with pytest.raises(ValueError):
        load_palette(path)


# =============================================================================
# Command
# =============================================================================

def test_both_modes_by_default(capsys):
    code, out, _ = _run(capsys, "#4285f4")
    assert code == 0
    result = json.loads(out)
    assert list(result) == ["dark", "light"]
    assert list(result["dark"]) == list(MaterialDynamicColors.THEME_ROLES)


@pytest.mark.parametrize("flags,expected", [
    (["--dark"], ["dark"]),
    (["--light"], ["light"]),
    (["--mode", "light"], ["light"]),
    (["--dark", "--mode", "light"], ["light"]),
])
def test_mode_selection(capsys, flags, expected):
    code, out, _ = _run(capsys, "#4285f4", *flags)
    assert code == 0
    assert list(json.loads(out)) == expected


def test_scheme_type_and_contrast(capsys):
    code, out, _ = _run(capsys, "#4285f4", "--scheme-type", "monochrome", "--contrast", "1", "--dark")
    assert code == 0
    surface = json.loads(out)["dark"]["surface"]
    assert surface[1:3] == surface[3:5] == surface[5:7]


def test_invalid_source(capsys):
    code, out, err = _run(capsys, "not-a-color")
    assert code == 1
    assert out == ""
    assert err.startswith("Error:")


def test_missing_palette_file(capsys, tmp_path):
    code, _, err = _run(capsys, str(tmp_path / "missing.json"))
    assert code == 1
    assert "Palette not found" in err


def test_contrast_out_of_range(capsys):
    code, _, err = _run(capsys, "#4285f4", "--contrast", "1.5")
    assert code == 1
    assert "Contrast" in err


def test_palette_source(capsys, tmp_path):
    path = tmp_path / "palette.json"
    path.write_text(json.dumps({"#4285f4": 10, "#000000": 90}))
    code, out, err = _run(capsys, str(path), "--dark", "--verbose")
    assert code == 0
    assert "dark" in json.loads(out)
    assert "#4285f4" in err


def test_output_file(capsys, tmp_path):
    output = tmp_path / "theme.json"
    code, out, err = _run(capsys, "#4285f4", "--light", "-o", str(output))
    assert code == 0
    assert out == ""
    assert "Theme written to" in err
    assert list(json.loads(output.read_text())) == ["light"]


def test_config_supplies_defaults(capsys, tmp_path):
    config = tmp_path / "config.toml"
    config.write_text('[theme]\nscheme_type = "monochrome"\nmodes = ["light"]\n')
    code, out, _ = _run(capsys, "#4285f4", "-c", str(config))
    assert code == 0
    result = json.loads(out)
    assert list(result) == ["light"]
    assert result["light"]["primary"] == "#000000"


def test_flags_override_config(capsys, tmp_path):
    config = tmp_path / "config.toml"
    config.write_text('[theme]\nscheme_type = "monochrome"\nmodes = ["light"]\n')
    code, out, _ = _run(capsys, "#4285f4", "-c", str(config), "--dark", "--scheme-type", "tonal-spot")
    assert code == 0
    result = json.loads(out)
    assert list(result) == ["dark"]
    assert result["dark"]["primary"] != "#ffffff"


def test_bad_config_reports_error(capsys, tmp_path):
    config = tmp_path / "config.toml"
    config.write_text('[theme]\ncontrast = 5\n')
    code, _, err = _run(capsys, "#4285f4", "-c", str(config))
    assert code == 1
    assert err.startswith("Error:")
