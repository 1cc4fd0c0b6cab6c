"""Tests for contrast ratio helpers."""

import pytest

from tonalkit.contrast import (
    darker,
    darker_unsafe,
    lighter,
    lighter_unsafe,
    ratio_of_tones,
    ratio_of_ys,
)


def test_ratio_of_black_and_white():
    assert ratio_of_tones(0.0, 100.0) == pytest.approx(21.0)
    assert ratio_of_ys(0.0, 100.0) == pytest.approx(21.0)


def test_ratio_is_symmetric():
    assert ratio_of_tones(30.0, 80.0) == pytest.approx(ratio_of_tones(80.0, 30.0))


def test_ratio_clamps_tones():
    assert ratio_of_tones(-20.0, 150.0) == pytest.approx(21.0)


@pytest.mark.parametrize("tone", [0.0, 20.0, 40.0])
@pytest.mark.parametrize("ratio", [3.0, 4.5])
def test_lighter_reaches_ratio(tone, ratio):
    result = lighter(tone, ratio)
    assert result > tone
    assert ratio_of_tones(result, tone) >= ratio - 0.04


@pytest.mark.parametrize("tone", [100.0, 80.0, 60.0])
@pytest.mark.parametrize("ratio", [3.0, 4.5])
def test_darker_reaches_ratio(tone, ratio):
    result = darker(tone, ratio)
    assert 0.0 <= result < tone
    assert ratio_of_tones(result, tone) >= ratio - 0.04


def test_unreachable_ratio_returns_sentinel():
    assert lighter(90.0, 21.0) == -1.0
    assert darker(10.0, 21.0) == -1.0
    assert lighter(-5.0, 3.0) == -1.0
    assert darker(105.0, 3.0) == -1.0


def test_unsafe_variants_fall_back_to_extremes():
    assert lighter_unsafe(90.0, 21.0) == 100.0
    assert darker_unsafe(10.0, 21.0) == 0.0
