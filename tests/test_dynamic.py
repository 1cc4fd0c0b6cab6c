"""Tests for DynamicColor tone resolution and DynamicScheme."""

import pytest

from tonalkit.contrast import RATIO_45, RATIO_70, RATIO_MAX, RATIO_MIN, ratio_of_tones
from tonalkit.dynamic import (
    ContrastCurve,
    DynamicColor,
    DynamicScheme,
    ToneDeltaPair,
    TonePolarity,
    Variant,
    enable_light_foreground,
    foreground_tone,
    tone_allows_light_foreground,
    tone_prefers_light_foreground,
)
from tonalkit.hct import Hct
from tonalkit.material import SchemeFidelity, SchemeMonochrome, SchemeTonalSpot
from tonalkit.palette import TonalPalette
from tonalkit.roles import MaterialDynamicColors

CONTRAST_LEVELS = [-1.0, -0.5, 0.0, 0.5, 1.0]
SEEDS = [0xFF4285F4, 0xFFB33B15, 0xFF7ED062, 0xFF6750A4, 0xFF888888]


@pytest.fixture
def colors():
    return MaterialDynamicColors()


def _scheme(is_dark=False, contrast_level=0.0):
    palette = TonalPalette.from_hue_and_chroma(260.0, 36.0)
    neutral = TonalPalette.from_hue_and_chroma(260.0, 6.0)
    return DynamicScheme(palette, palette, palette, neutral, neutral, is_dark=is_dark, contrast_level=contrast_level)


# =============================================================================
# ContrastCurve / ToneDeltaPair
# =============================================================================

def test_contrast_curve_interpolates():
    curve = ContrastCurve(1.0, 3.0, 5.0, 9.0)
    assert curve.get(-2.0) == 1.0
    assert curve.get(-1.0) == 1.0
    assert curve.get(-0.5) == pytest.approx(2.0)
    assert curve.get(0.0) == 3.0
    assert curve.get(0.25) == pytest.approx(4.0)
    assert curve.get(0.5) == 5.0
    assert curve.get(0.75) == pytest.approx(7.0)
    assert curve.get(1.0) == 9.0
    assert curve.get(3.0) == 9.0


def test_tone_delta_pair_rejects_negative_delta(colors):
    with pytest.raises(ValueError):
        ToneDeltaPair(colors.primary, colors.primary_container, -1.0, TonePolarity.NEARER, False)


def test_tone_delta_pair_accepts_zero_delta(colors):
    pair = ToneDeltaPair(colors.primary, colors.primary_container, 0.0, TonePolarity.NEARER, False)
    assert pair.delta == 0.0


# =============================================================================
# Foreground helpers
# =============================================================================

def test_foreground_tone_moves_away_from_background():
    assert foreground_tone(90.0, 4.5) < 50.0
    assert foreground_tone(10.0, 4.5) > 50.0


def test_foreground_tone_meets_ratio_when_possible():
    for bg in (0.0, 25.0, 75.0, 100.0):
        fg = foreground_tone(bg, 4.5)
        assert ratio_of_tones(bg, fg) >= 4.5 - 0.04


def test_light_foreground_preferences():
    assert tone_prefers_light_foreground(55.0)
    assert not tone_prefers_light_foreground(60.0)
    assert tone_allows_light_foreground(49.0)
    assert not tone_allows_light_foreground(50.0)
    assert enable_light_foreground(55.0) == 49.0
    assert enable_light_foreground(40.0) == 40.0
    assert enable_light_foreground(80.0) == 80.0


# =============================================================================
# Tone resolution
# =============================================================================

def test_role_without_background_keeps_base_tone():
    role = DynamicColor.from_palette("fixed_tone", lambda s: s.primary_palette, lambda s: 55.0)
    for level in CONTRAST_LEVELS:
        assert role.get_tone(_scheme(contrast_level=level)) == 55.0


def test_contrast_never_decreases_with_contrast_level():
    background = DynamicColor.from_palette("bg", lambda s: s.neutral_palette, lambda s: 90.0, is_background=True)
    foreground = DynamicColor(
        "fg",
        lambda s: s.primary_palette,
        lambda s: 60.0,
        is_background=False,
        background=lambda s: background,
        contrast_curve=ContrastCurve(1.5, 3.0, 4.5, 7.0),
    )
    previous = 0.0
    for level in CONTRAST_LEVELS:
        scheme = _scheme(contrast_level=level)
        ratio = ratio_of_tones(foreground.get_tone(scheme), background.get_tone(scheme))
        assert ratio >= foreground.contrast_curve.get(level) - 0.05
        assert ratio >= previous - 0.05
        previous = ratio


def test_background_role_leaves_awkward_zone():
    background = DynamicColor.from_palette("bg", lambda s: s.neutral_palette, lambda s: 100.0, is_background=True)
    container = DynamicColor(
        "container",
        lambda s: s.primary_palette,
        lambda s: 55.0,
        is_background=True,
        background=lambda s: background,
        contrast_curve=ContrastCurve(1.0, 1.0, 1.0, 1.0),
    )
    tone = container.get_tone(_scheme())
    assert tone == 49.0


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("is_dark", [False, True])
@pytest.mark.parametrize("level", CONTRAST_LEVELS)
def test_tone_delta_pairs_stay_apart(colors, seed, is_dark, level):
    scheme = SchemeTonalSpot(Hct.from_argb(seed), is_dark, level)
    pairs = [
        (colors.primary, colors.primary_container),
        (colors.secondary, colors.secondary_container),
        (colors.tertiary, colors.tertiary_container),
        (colors.error, colors.error_container),
        (colors.primary_fixed, colors.primary_fixed_dim),
        (colors.secondary_fixed, colors.secondary_fixed_dim),
        (colors.tertiary_fixed, colors.tertiary_fixed_dim),
    ]
    for role_a, role_b in pairs:
        gap = abs(role_a.get_tone(scheme) - role_b.get_tone(scheme))
        assert gap >= 10.0 - 1e-9, f"{role_a.name}/{role_b.name}"


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("is_dark", [False, True])
def test_text_on_fixed_colors_contrasts_with_both(colors, seed, is_dark):
    scheme = SchemeTonalSpot(Hct.from_argb(seed), is_dark, 0.0)
    text = colors.on_primary_fixed.get_tone(scheme)
    for background in (colors.primary_fixed, colors.primary_fixed_dim):
        assert ratio_of_tones(text, background.get_tone(scheme)) >= 4.5 - 0.05


def test_tonal_spot_standard_tones(colors):
    light = SchemeTonalSpot(Hct.from_argb(0xFF4285F4), False, 0.0)
    assert colors.primary.get_tone(light) == 40.0
    assert colors.primary_container.get_tone(light) == 90.0
    assert colors.on_primary.get_tone(light) == 100.0
    assert colors.background.get_tone(light) == 98.0

    dark = SchemeTonalSpot(Hct.from_argb(0xFF4285F4), True, 0.0)
    assert colors.primary.get_tone(dark) == 80.0
    assert colors.primary_container.get_tone(dark) == 30.0
    assert colors.background.get_tone(dark) == 6.0


def test_fidelity_container_keeps_source_tone(colors):
    source = Hct.from_argb(0xFF0000FF)
    scheme = SchemeFidelity(source, False, 0.0)
    assert colors.primary_container.get_tone(scheme) == pytest.approx(source.tone)


def test_monochrome_primary_is_black_or_white(colors):
    light = SchemeMonochrome(Hct.from_argb(0xFF4285F4), False, 0.0)
    dark = SchemeMonochrome(Hct.from_argb(0xFF4285F4), True, 0.0)
    assert light.get_argb(colors.primary) == 0xFF000000
    assert dark.get_argb(colors.primary) == 0xFFFFFFFF


# =============================================================================
# Caching and output
# =============================================================================

def test_get_hct_is_memoized_per_scheme(colors):
    scheme = SchemeTonalSpot(Hct.from_argb(0xFF4285F4), False, 0.0)
    first = colors.primary.get_hct(scheme)
    assert colors.primary.get_hct(scheme) is first


def test_equal_schemes_share_cache_entries(colors):
    a = SchemeTonalSpot(Hct.from_argb(0xFF4285F4), False, 0.0)
    b = SchemeTonalSpot(Hct.from_argb(0xFF4285F4), False, 0.0)
    assert a.cache_key == b.cache_key
    assert colors.primary.get_hct(a) is colors.primary.get_hct(b)


def test_hct_cache_is_bounded(colors):
    for seed in range(0xFF000010, 0xFF000010 + 12):
        colors.surface.get_hct(SchemeTonalSpot(Hct.from_argb(seed), False, 0.0))
    assert len(colors.surface._hct_cache) <= 5


def test_opacity_is_applied_to_alpha(colors):
    dark = SchemeTonalSpot(Hct.from_argb(0xFF4285F4), True, 0.0)
    light = SchemeTonalSpot(Hct.from_argb(0xFF4285F4), False, 0.0)
    assert colors.control_highlight.get_argb(dark) >> 24 == 51
    assert colors.control_highlight.get_argb(light) >> 24 == 31


def test_from_argb_resolves_to_color_tone():
    role = DynamicColor.from_argb("brand", 0xFFB33B15)
    hct = role.get_hct(_scheme())
    assert hct.tone == pytest.approx(Hct.from_argb(0xFFB33B15).tone, abs=0.5)


# =============================================================================
# DynamicScheme
# =============================================================================

def test_scheme_defaults():
    scheme = _scheme()
    assert scheme.variant == Variant.TONAL_SPOT
    assert scheme.source_color_hct == scheme.primary_palette.key_color
    assert scheme.error_palette.hue == 25.0
    assert scheme.error_palette.chroma == 84.0


def test_cache_key_tracks_mode_and_contrast():
    assert _scheme().cache_key != _scheme(is_dark=True).cache_key
    assert _scheme().cache_key != _scheme(contrast_level=0.5).cache_key


def test_rotated_hue():
    source = Hct.from_hct(50.0, 40.0, 50.0)
    hues = [0.0, 41.0, 61.0, 360.0]
    rotations = [18.0, 15.0, 10.0]
    assert DynamicScheme.get_rotated_hue(source, hues, rotations) == pytest.approx((source.hue + 15.0) % 360.0)


def test_rotated_hue_single_rotation_applies_everywhere():
    source = Hct.from_hct(350.0, 40.0, 50.0)
    assert DynamicScheme.get_rotated_hue(source, [0.0, 360.0], [20.0]) == pytest.approx((source.hue + 20.0) % 360.0)


def test_role_contrast_curves_follow_wcag_levels(colors):
    assert colors.on_surface.contrast_curve.get(0.0) == RATIO_45
    assert colors.on_surface.contrast_curve.get(0.5) == RATIO_70
    assert colors.on_surface.contrast_curve.get(1.0) == RATIO_MAX
    assert colors.primary_container.contrast_curve.get(-1.0) == RATIO_MIN


def test_on_container_reaches_normal_text_contrast(colors):
    scheme = SchemeTonalSpot(Hct.from_argb(0xFF4285F4), True)
    ratio = ratio_of_tones(colors.on_primary_container.get_tone(scheme), colors.primary_container.get_tone(scheme))
    assert ratio >= RATIO_45 - 0.05
