"""Tests for tonal palettes and key color search."""

import pytest

from tonalkit.color import BLACK, WHITE
from tonalkit.hct import Hct
from tonalkit.mathutil import difference_degrees
from tonalkit.palette import CorePalettes, KeyColor, TonalPalette


def test_tone_extremes():
    palette = TonalPalette.from_hue_and_chroma(270.0, 36.0)
    assert palette.tone(0) == BLACK
    assert palette.tone(100) == WHITE


def test_tone_is_idempotent():
    palette = TonalPalette.from_hue_and_chroma(120.0, 40.0)
    first = palette.tone(57)
    assert palette.tone(57) == first
    assert palette.get_hct(57).argb == first


def test_tones_get_lighter():
    palette = TonalPalette.from_argb(0xFF0000FF)
    tones = [Hct.from_argb(palette.tone(t)).tone for t in range(0, 101, 10)]
    assert tones == sorted(tones)


def test_from_argb_keeps_seed_as_key_color():
    palette = TonalPalette.from_argb(0xFF4285F4)
    seed = Hct.from_argb(0xFF4285F4)
    assert palette.key_color == seed
    assert palette.hue == pytest.approx(seed.hue)
    assert palette.chroma == pytest.approx(seed.chroma)


def test_key_color_with_exact_chroma():
    key = TonalPalette.from_hue_and_chroma(50.0, 60.0).key_color
    assert difference_degrees(key.hue, 50.0) < 10.0
    assert key.chroma == pytest.approx(60.0, abs=0.5)
    assert 0.0 < key.tone < 100.0


def test_key_color_with_unusually_high_chroma():
    key = TonalPalette.from_hue_and_chroma(149.0, 200.0).key_color
    assert difference_degrees(key.hue, 149.0) < 10.0
    assert key.chroma > 89.0
    assert 0.0 < key.tone < 100.0


def test_key_color_with_low_chroma_stays_near_pivot():
    key = TonalPalette.from_hue_and_chroma(50.0, 3.0).key_color
    assert difference_degrees(key.hue, 50.0) < 10.0
    assert key.chroma == pytest.approx(3.0, abs=0.5)
    assert key.tone == pytest.approx(50.0, abs=0.5)


def test_key_color_for_zero_chroma():
    key = KeyColor(0.0, 0.0).create()
    assert key.tone == pytest.approx(50.0, abs=0.5)
    assert key.argb == 0xFF777777
    # Gray still carries a little CAM16 chroma under the default viewing conditions
    assert key.chroma == pytest.approx(1.8156, abs=0.01)


def test_max_chroma_is_cached():
    search = KeyColor(200.0, 30.0)
    value = search.max_chroma(40)
    assert search.max_chroma(40) == value
    assert 40 in search._chroma_cache


def test_core_palettes_as_dict():
    palettes = [TonalPalette.from_hue_and_chroma(hue, 20.0) for hue in (0.0, 60.0, 120.0, 180.0, 240.0)]
    core = CorePalettes(*palettes)
    assert list(core.as_dict()) == ['primary', 'secondary', 'tertiary', 'neutral', 'neutral_variant']
    assert core.as_dict()['tertiary'] is palettes[2]
