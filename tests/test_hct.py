"""Tests for CAM16, the HCT solver and the Hct type."""

import pytest

from tonalkit.cam16 import Cam16, ViewingConditions
from tonalkit.color import BLACK, BLUE, GREEN, RED, WHITE, lstar_from_argb
from tonalkit.hct import Hct
from tonalkit.hct_solver import solve_to_argb, solve_to_cam


@pytest.mark.parametrize("argb,hue,chroma,j", [
    (RED, 27.408, 113.357, 46.445),
    (GREEN, 142.139, 108.410, 79.331),
    (BLUE, 282.788, 87.230, 25.465),
    (WHITE, 209.492, 2.869, 100.0),
    (BLACK, 0.0, 0.0, 0.0),
])
def test_cam16_from_argb(argb, hue, chroma, j):
    cam = Cam16.from_argb(argb)
    assert cam.hue == pytest.approx(hue, abs=0.001)
    assert cam.chroma == pytest.approx(chroma, abs=0.001)
    assert cam.j == pytest.approx(j, abs=0.001)


def test_cam16_red_secondary_dimensions():
    cam = Cam16.from_argb(RED)
    assert cam.m == pytest.approx(89.494, abs=0.001)
    assert cam.s == pytest.approx(91.889, abs=0.001)
    assert cam.q == pytest.approx(105.988, abs=0.001)


@pytest.mark.parametrize("argb", [RED, GREEN, BLUE, WHITE, 0xFF4285F4, 0xFF7ED062])
def test_cam16_round_trip(argb):
    assert Cam16.from_argb(argb).to_argb() == argb


@pytest.mark.parametrize("argb", [RED, GREEN, BLUE, 0xFF4285F4])
def test_cam16_ucs_round_trip(argb):
    cam = Cam16.from_argb(argb)
    assert Cam16.from_ucs(cam.jstar, cam.astar, cam.bstar).to_argb() == argb


def test_cam16_distance_is_zero_for_same_color():
    cam = Cam16.from_argb(0xFF4285F4)
    assert cam.distance(cam) == pytest.approx(0.0)
    assert cam.distance(Cam16.from_argb(RED)) > 0


def test_default_viewing_conditions():
    vc = ViewingConditions.DEFAULT
    assert vc.n == pytest.approx(0.184, abs=0.001)
    assert vc.aw == pytest.approx(29.981, abs=0.001)
    assert vc.nbb == pytest.approx(1.017, abs=0.001)
    assert vc.c == pytest.approx(0.69, abs=0.001)
    assert vc.fl == pytest.approx(0.388, abs=0.001)
    assert vc.z == pytest.approx(1.909, abs=0.001)


@pytest.mark.parametrize("hue", [0.0, 45.0, 120.0, 209.0, 282.0, 359.0])
@pytest.mark.parametrize("chroma", [0.0, 30.0, 150.0])
def test_tone_extremes_are_black_and_white(hue, chroma):
    assert Hct.from_hct(hue, chroma, 0.0).argb == BLACK
    assert Hct.from_hct(hue, chroma, 100.0).argb == WHITE


@pytest.mark.parametrize("hue", [15.0, 75.0, 140.0, 200.0, 265.0, 330.0])
@pytest.mark.parametrize("tone", [20.0, 50.0, 80.0])
def test_solver_matches_requested_tone(hue, tone):
    argb = solve_to_argb(hue, 30.0, tone)
    assert lstar_from_argb(argb) == pytest.approx(tone, abs=0.5)


@pytest.mark.parametrize("hue", [15.0, 75.0, 140.0, 200.0, 265.0, 330.0])
def test_solver_never_exceeds_requested_chroma_by_much(hue):
    for chroma in (10.0, 40.0, 200.0):
        cam = Cam16.from_argb(solve_to_argb(hue, chroma, 50.0))
        assert cam.chroma <= chroma + 2.5


def test_solver_keeps_achievable_chroma_and_hue():
    cam = Cam16.from_argb(solve_to_argb(200.0, 20.0, 60.0))
    assert cam.chroma == pytest.approx(20.0, abs=2.5)
    assert cam.hue == pytest.approx(200.0, abs=2.0)


def test_solve_to_cam_agrees_with_solve_to_argb():
    cam = solve_to_cam(120.0, 40.0, 70.0)
    assert cam.to_argb() == solve_to_argb(120.0, 40.0, 70.0)


@pytest.mark.parametrize("argb", [RED, GREEN, BLUE, 0xFF4285F4, 0xFF7ED062, 0xFF808080])
def test_hct_reconstructs_sample_colors(argb):
    hct = Hct.from_argb(argb)
    rebuilt = Hct.from_hct(hct.hue, hct.chroma, hct.tone)
    assert rebuilt.tone == pytest.approx(hct.tone, abs=0.5)
    assert rebuilt.chroma == pytest.approx(hct.chroma, abs=2.5)


def test_hct_with_tone_keeps_hue():
    hct = Hct.from_argb(0xFF4285F4)
    lighter = hct.with_tone(80.0)
    assert lighter.tone == pytest.approx(80.0, abs=0.5)
    assert lighter.hue == pytest.approx(hct.hue, abs=2.0)


def test_hct_with_chroma_zero_is_gray():
    gray = Hct.from_argb(0xFF4285F4).with_chroma(0.0)
    r = (gray.argb >> 16) & 0xFF
    g = (gray.argb >> 8) & 0xFF
    b = gray.argb & 0xFF
    assert r == g == b


def test_hct_equality_and_hash_follow_argb():
    a = Hct.from_argb(0xFF4285F4)
    b = Hct.from_argb(-12417548)
    assert a == b
    assert hash(a) == hash(b)
    assert a.argb == 0xFF4285F4
    assert a.to_argb() == a.argb


def test_in_default_viewing_conditions_keeps_appearance():
    hct = Hct.from_argb(0xFF4285F4)
    same = hct.in_viewing_conditions(ViewingConditions.DEFAULT)
    assert same.tone == pytest.approx(hct.tone, abs=0.5)
    assert same.hue == pytest.approx(hct.hue, abs=1.0)
    assert same.chroma == pytest.approx(hct.chroma, abs=1.0)


def test_in_dark_viewing_conditions_changes_color():
    hct = Hct.from_argb(0xFF4285F4)
    dark_vc = ViewingConditions.default_with_background_lstar(10.0)
    assert hct.in_viewing_conditions(dark_vc).argb != hct.argb
