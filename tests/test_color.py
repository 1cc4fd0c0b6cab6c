"""Tests for ARGB conversions and hex parsing."""

import pytest

from tonalkit.color import (
    BLACK,
    WHITE,
    alpha_from_argb,
    argb_from_hex,
    argb_from_lab,
    argb_from_linrgb,
    argb_from_lstar,
    argb_from_rgb,
    argb_from_xyz,
    blue_from_argb,
    green_from_argb,
    hex_from_argb,
    lab_from_argb,
    lstar_from_argb,
    lstar_from_y,
    red_from_argb,
    rgb_from_argb,
    xyz_from_argb,
    y_from_lstar,
)

SAMPLE_COLORS = [
    0xFF000000, 0xFFFFFFFF, 0xFFFF0000, 0xFF00FF00, 0xFF0000FF,
    0xFF4285F4, 0xFFD90D21, 0xFF7ED062, 0xFF123456, 0xFFABCDEF,
]


def _close_per_channel(a: int, b: int, tolerance: int = 1) -> bool:
    return all(abs(x - y) <= tolerance for x, y in zip(rgb_from_argb(a), rgb_from_argb(b)))


def test_argb_from_rgb():
    assert argb_from_rgb(217, 13, 33) == -2552543 & 0xFFFFFFFF
    assert argb_from_rgb(217, 13, 33) == 0xFFD90D21


def test_components_accept_signed_values():
    assert red_from_argb(-2552543) == 217
    assert green_from_argb(-2552543) == 13
    assert blue_from_argb(-2552543) == 33
    assert alpha_from_argb(-2552543) == 255


def test_argb_from_linrgb():
    assert argb_from_linrgb((0.2, 0.7, 0.6)) == -16313326 & 0xFFFFFFFF


def test_argb_from_xyz():
    assert argb_from_xyz(0.7, 0.9, 0.2) == -15328766 & 0xFFFFFFFF


def test_xyz_from_argb():
    x, y, z = xyz_from_argb(-15328766)
    assert x == pytest.approx(0.7112012460746406, abs=1e-12)
    assert y == pytest.approx(0.9137449555906486, abs=1e-12)
    assert z == pytest.approx(0.19628711421236336, abs=1e-12)


def test_argb_from_lab():
    assert argb_from_lab(1.7, 1.9, 1.3) == -15989501 & 0xFFFFFFFF


def test_lab_from_argb():
    l, a, b = lab_from_argb(-15989501)
    assert l == pytest.approx(1.7458747272115325, abs=1e-12)
    assert a == pytest.approx(1.5813095009121065, abs=1e-12)
    assert b == pytest.approx(1.412073285576354, abs=1e-12)


@pytest.mark.parametrize("argb", SAMPLE_COLORS)
def test_lab_round_trip(argb):
    assert _close_per_channel(argb_from_lab(*lab_from_argb(argb)), argb)


@pytest.mark.parametrize("argb", SAMPLE_COLORS)
def test_xyz_round_trip(argb):
    assert _close_per_channel(argb_from_xyz(*xyz_from_argb(argb)), argb)


def test_lstar_extremes():
    assert lstar_from_argb(BLACK) == pytest.approx(0.0, abs=1e-9)
    assert lstar_from_argb(WHITE) == pytest.approx(100.0, abs=1e-9)
    assert argb_from_lstar(0.0) == BLACK
    assert argb_from_lstar(100.0) == WHITE


@pytest.mark.parametrize("lstar", [0.0, 8.0, 18.4, 50.0, 77.7, 100.0])
def test_y_lstar_inverse(lstar):
    assert lstar_from_y(y_from_lstar(lstar)) == pytest.approx(lstar, abs=1e-9)


def test_hex_from_argb_drops_alpha():
    assert hex_from_argb(0xFF4285F4) == "#4285f4"
    assert hex_from_argb(0x804285F4) == "#4285f4"


@pytest.mark.parametrize("text,expected", [
    ("#4285f4", 0xFF4285F4),
    ("4285F4", 0xFF4285F4),
    ("#fff", 0xFFFFFFFF),
    ("#80123456", 0x80123456),
    ("  #000000 ", 0xFF000000),
])
def test_argb_from_hex(text, expected):
    assert argb_from_hex(text) == expected


@pytest.mark.parametrize("text", ["", "#12345", "#gggggg", "blue", "#1234567890"])
def test_argb_from_hex_rejects_garbage(text):
    with pytest.raises(ValueError):
        argb_from_hex(text)
