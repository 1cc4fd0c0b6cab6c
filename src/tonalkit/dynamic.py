"""
Dynamic colors: color roles whose tone adapts to the scheme.

A DynamicColor describes a role such as "primary" or "on_surface": which
palette it draws from, the tone it would like, the background it sits on,
and how much contrast it needs against that background at each contrast
level. Resolving a role against a DynamicScheme yields a concrete color.

Tone resolution handles three situations:

- Paired roles (a ToneDeltaPair such as a container and its accent) keep a
  minimum tone distance from each other while both meeting their contrast
  against the shared background.
- Roles with a background move away from it only as far as needed to meet
  the contrast curve.
- Roles with two backgrounds (text on "fixed" colors) must contrast with
  both, preferring light text when either background asks for it.
"""

import enum
from typing import Callable, Optional

from .contrast import darker, darker_unsafe, lighter, lighter_unsafe, ratio_of_tones
from .hct import Hct
from .mathutil import clamp_double, clamp_int, lerp, round_half_up, sanitize_degrees
from .palette import CorePalettes, TonalPalette

# Number of cached scheme resolutions per role before the cache is reset
_HCT_CACHE_LIMIT = 4


class Variant(enum.Enum):
    """Built-in scheme styles."""
    MONOCHROME = "monochrome"
    NEUTRAL = "neutral"
    TONAL_SPOT = "tonal-spot"
    VIBRANT = "vibrant"
    EXPRESSIVE = "expressive"
    FIDELITY = "fidelity"
    CONTENT = "content"
    RAINBOW = "rainbow"
    FRUIT_SALAD = "fruit-salad"


class TonePolarity(enum.Enum):
    """
    Which role of a ToneDeltaPair keeps its tone nearer the background.

    DARKER and LIGHTER are absolute: the darker (or lighter) role is the
    one nearer the background in dark (or light) mode. NEARER means role A
    is nearer, FARTHER means role B is nearer.
    """
    DARKER = "darker"
    LIGHTER = "lighter"
    NEARER = "nearer"
    FARTHER = "farther"


class ContrastCurve:
    """
    Contrast ratio required at each contrast level.

    The four values apply at levels -1, 0, 0.5 and 1; levels in between are
    linearly interpolated and levels outside [-1, 1] are clamped.
    """
    __slots__ = ('low', 'normal', 'medium', 'high')

    def __init__(self, low: float, normal: float, medium: float, high: float):
        self.low = low
        self.normal = normal
        self.medium = medium
        self.high = high

    def get(self, contrast_level: float) -> float:
        if contrast_level <= -1.0:
            return self.low
        elif contrast_level < 0.0:
            return lerp(self.low, self.normal, (contrast_level - -1) / 1)
        elif contrast_level < 0.5:
            return lerp(self.normal, self.medium, (contrast_level - 0) / 0.5)
        elif contrast_level < 1.0:
            return lerp(self.medium, self.high, (contrast_level - 0.5) / 0.5)
        return self.high

    def __repr__(self) -> str:
        return f"ContrastCurve({self.low}, {self.normal}, {self.medium}, {self.high})"


class ToneDeltaPair:
    """
    Two roles whose tones must stay at least delta apart.

    Args:
        role_a: First role
        role_b: Second role
        delta: Minimum tone difference; must be >= 0
        polarity: Which role is nearer the background
        stay_together: Move both roles out of the 50-59 tone range together,
            so they never end up on opposite sides of it

    Raises:
        ValueError: If delta is negative.
    """
    __slots__ = ('role_a', 'role_b', 'delta', 'polarity', 'stay_together')

    def __init__(
        self,
        role_a: "DynamicColor",
        role_b: "DynamicColor",
        delta: float,
        polarity: TonePolarity,
        stay_together: bool,
    ):
        if delta < 0:
            raise ValueError(f"Tone delta must be non-negative, got {delta}")
        self.role_a = role_a
        self.role_b = role_b
        self.delta = delta
        self.polarity = polarity
        self.stay_together = stay_together


class DynamicScheme:
    """
    Palettes plus display settings; everything needed to resolve roles.

    Args:
        primary_palette .. error_palette: The six palettes roles draw from
        is_dark: Dark theme if True
        contrast_level: -1 (reduced) to 1 (highest); 0 is the default
        source_color_hct: Seed color; defaults to the primary key color
        variant: Scheme style; defaults to Variant.TONAL_SPOT
    """

    def __init__(
        self,
        primary_palette: TonalPalette,
        secondary_palette: TonalPalette,
        tertiary_palette: TonalPalette,
        neutral_palette: TonalPalette,
        neutral_variant_palette: TonalPalette,
        error_palette: Optional[TonalPalette] = None,
        is_dark: bool = False,
        contrast_level: float = 0.0,
        source_color_hct: Optional[Hct] = None,
        variant: Variant = Variant.TONAL_SPOT,
    ):
        self.primary_palette = primary_palette
        self.secondary_palette = secondary_palette
        self.tertiary_palette = tertiary_palette
        self.neutral_palette = neutral_palette
        self.neutral_variant_palette = neutral_variant_palette
        self.error_palette = error_palette or default_error_palette()
        self.is_dark = is_dark
        self.contrast_level = contrast_level
        self.source_color_hct = source_color_hct or primary_palette.key_color
        self.variant = variant

    @property
    def source_color_argb(self) -> int:
        return self.source_color_hct.argb

    @property
    def core_palettes(self) -> CorePalettes:
        return CorePalettes(
            self.primary_palette,
            self.secondary_palette,
            self.tertiary_palette,
            self.neutral_palette,
            self.neutral_variant_palette,
        )

    @property
    def cache_key(self) -> tuple:
        """Value identifying everything role resolution depends on."""
        palettes = (
            self.primary_palette,
            self.secondary_palette,
            self.tertiary_palette,
            self.neutral_palette,
            self.neutral_variant_palette,
            self.error_palette,
        )
        return (
            self.source_color_hct.argb,
            self.variant,
            self.is_dark,
            self.contrast_level,
            tuple((p.hue, p.chroma, p.key_color.argb) for p in palettes),
        )

    def get_hct(self, color: "DynamicColor") -> Hct:
        return color.get_hct(self)

    def get_argb(self, color: "DynamicColor") -> int:
        return color.get_argb(self)

    def __repr__(self) -> str:
        mode = "dark" if self.is_dark else "light"
        return (
            f"{type(self).__name__}(source=0x{self.source_color_hct.argb:08X}, "
            f"variant={self.variant.value}, {mode}, contrast={self.contrast_level})"
        )

    @staticmethod
    def get_rotated_hue(source_color_hct: Hct, hues: list[float], rotations: list[float]) -> float:
        """
        Rotate the source hue by the amount assigned to its hue range.

        hues lists range boundaries in increasing order; rotations[i] applies
        to sources strictly between hues[i] and hues[i + 1]. A single
        rotation applies to every hue.
        """
        source_hue = source_color_hct.hue
        if len(rotations) == 1:
            return sanitize_degrees(source_hue + rotations[0])
        for i in range(len(hues) - 1):
            this_hue = hues[i]
            next_hue = hues[i + 1]
            if this_hue < source_hue < next_hue:
                return sanitize_degrees(source_hue + rotations[i])
        # Source hue sits exactly on a boundary
        return source_hue


def default_error_palette() -> TonalPalette:
    """The red used for error roles in every built-in scheme."""
    return TonalPalette.from_hue_and_chroma(25.0, 84.0)


# Type aliases
PaletteFn = Callable[[DynamicScheme], TonalPalette]
ToneFn = Callable[[DynamicScheme], float]
ColorFn = Callable[[DynamicScheme], "DynamicColor"]
PairFn = Callable[[DynamicScheme], ToneDeltaPair]
OpacityFn = Callable[[DynamicScheme], float]


class DynamicColor:
    """
    A color role resolved against a DynamicScheme.

    Args:
        name: Role name, e.g. "on_primary_container"
        palette: Chooses the palette from a scheme
        tone: Preferred tone in a scheme, before contrast adjustments
        is_background: Whether other roles sit on top of this one
        background: The role this one is drawn on
        second_background: Another role this one may be drawn on
        contrast_curve: Ratio needed against the background(s)
        tone_delta_pair: Pairing constraint with another role
        opacity: Alpha in [0, 1]; fully opaque if omitted
    """

    def __init__(
        self,
        name: str,
        palette: PaletteFn,
        tone: ToneFn,
        is_background: bool,
        background: Optional[ColorFn] = None,
        second_background: Optional[ColorFn] = None,
        contrast_curve: Optional[ContrastCurve] = None,
        tone_delta_pair: Optional[PairFn] = None,
        opacity: Optional[OpacityFn] = None,
    ):
        self.name = name
        self.palette = palette
        self.tone = tone
        self.is_background = is_background
        self.background = background
        self.second_background = second_background
        self.contrast_curve = contrast_curve
        self.tone_delta_pair = tone_delta_pair
        self.opacity = opacity
        self._hct_cache: dict[tuple, Hct] = {}

    @classmethod
    def from_palette(
        cls,
        name: str,
        palette: PaletteFn,
        tone: ToneFn,
        is_background: bool = False,
    ) -> "DynamicColor":
        """A role with no background and no contrast requirement."""
        return cls(name, palette, tone, is_background)

    @classmethod
    def from_argb(cls, name: str, argb: int) -> "DynamicColor":
        """A role that always resolves to the given color's tone in its own palette."""
        hct = Hct.from_argb(argb)
        palette = TonalPalette.from_argb(argb)
        return cls.from_palette(name, lambda s: palette, lambda s: hct.tone)

    def __repr__(self) -> str:
        return f"DynamicColor({self.name!r})"

    def get_argb(self, scheme: DynamicScheme) -> int:
        """Resolved color, with the role's opacity applied to the alpha channel."""
        argb = self.get_hct(scheme).argb
        if self.opacity is None:
            return argb
        percentage = self.opacity(scheme)
        alpha = clamp_int(0, 255, round_half_up(percentage * 255))
        return (argb & 0x00FFFFFF) | (alpha << 24)

    def get_hct(self, scheme: DynamicScheme) -> Hct:
        """
        Resolved color as HCT.

        The tone is solved first, then the palette supplies the color at that
        tone. A role whose preferred tone has little chroma can therefore
        regain chroma when contrast pushes its tone elsewhere.
        """
        key = scheme.cache_key
        cached = self._hct_cache.get(key)
        if cached is not None:
            return cached

        tone = self.get_tone(scheme)
        answer = self.palette(scheme).get_hct(tone)
        if len(self._hct_cache) > _HCT_CACHE_LIMIT:
            self._hct_cache.clear()
        self._hct_cache[key] = answer
        return answer

    def get_tone(self, scheme: DynamicScheme) -> float:
        """Tone of this role in the scheme, after all contrast adjustments."""
        decreasing_contrast = scheme.contrast_level < 0

        if self.tone_delta_pair is not None and self.background is not None:
            return self._get_paired_tone(scheme, decreasing_contrast)

        answer = self.tone(scheme)
        if self.background is None:
            return answer

        bg_tone = self.background(scheme).get_tone(scheme)
        desired_ratio = self.contrast_curve.get(scheme.contrast_level)

        if ratio_of_tones(bg_tone, answer) < desired_ratio:
            answer = foreground_tone(bg_tone, desired_ratio)

        if decreasing_contrast:
            answer = foreground_tone(bg_tone, desired_ratio)

        if self.is_background and 50 <= answer < 60:
            # Tones 50-59 contrast poorly with both light and dark content
            if ratio_of_tones(49.0, bg_tone) >= desired_ratio:
                answer = 49.0
            else:
                answer = 60.0

        if self.second_background is not None:
            return self._get_dual_background_tone(scheme, answer, desired_ratio)

        return answer

    def _get_paired_tone(self, scheme: DynamicScheme, decreasing_contrast: bool) -> float:
        pair = self.tone_delta_pair(scheme)
        role_a = pair.role_a
        role_b = pair.role_b
        delta = pair.delta
        polarity = pair.polarity
        stay_together = pair.stay_together

        bg_tone = self.background(scheme).get_tone(scheme)

        a_is_nearer = (
            polarity == TonePolarity.NEARER
            or (polarity == TonePolarity.LIGHTER and not scheme.is_dark)
            or (polarity == TonePolarity.DARKER and scheme.is_dark)
        )
        nearer = role_a if a_is_nearer else role_b
        farther = role_b if a_is_nearer else role_a
        am_nearer = self.name == nearer.name
        expansion_dir = 1.0 if scheme.is_dark else -1.0

        n_contrast = nearer.contrast_curve.get(scheme.contrast_level)
        f_contrast = farther.contrast_curve.get(scheme.contrast_level)

        # Tones already meeting their contrast are kept
        n_initial_tone = nearer.tone(scheme)
        if ratio_of_tones(bg_tone, n_initial_tone) >= n_contrast:
            n_tone = n_initial_tone
        else:
            n_tone = foreground_tone(bg_tone, n_contrast)

        f_initial_tone = farther.tone(scheme)
        if ratio_of_tones(bg_tone, f_initial_tone) >= f_contrast:
            f_tone = f_initial_tone
        else:
            f_tone = foreground_tone(bg_tone, f_contrast)

        if decreasing_contrast:
            # Bare minimum that satisfies contrast
            n_tone = foreground_tone(bg_tone, n_contrast)
            f_tone = foreground_tone(bg_tone, f_contrast)

        if (f_tone - n_tone) * expansion_dir < delta:
            # Push farther away first
            f_tone = clamp_double(0.0, 100.0, n_tone + delta * expansion_dir)
            if (f_tone - n_tone) * expansion_dir < delta:
                # Farther hit the end of the tone range: pull nearer back
                n_tone = clamp_double(0.0, 100.0, f_tone - delta * expansion_dir)

        if 50 <= n_tone < 60:
            # Move nearer out of the 50-59 zone, dragging farther with it
            if expansion_dir > 0:
                n_tone = 60.0
                f_tone = max(f_tone, n_tone + delta * expansion_dir)
            else:
                n_tone = 49.0
                f_tone = min(f_tone, n_tone + delta * expansion_dir)
        elif 50 <= f_tone < 60:
            if stay_together:
                if expansion_dir > 0:
                    n_tone = 60.0
                    f_tone = max(f_tone, n_tone + delta * expansion_dir)
                else:
                    n_tone = 49.0
                    f_tone = min(f_tone, n_tone + delta * expansion_dir)
            else:
                f_tone = 60.0 if expansion_dir > 0 else 49.0

        return n_tone if am_nearer else f_tone

    def _get_dual_background_tone(
        self, scheme: DynamicScheme, answer: float, desired_ratio: float
    ) -> float:
        bg_tone1 = self.background(scheme).get_tone(scheme)
        bg_tone2 = self.second_background(scheme).get_tone(scheme)
        upper = max(bg_tone1, bg_tone2)
        lower = min(bg_tone1, bg_tone2)

        if ratio_of_tones(upper, answer) >= desired_ratio and ratio_of_tones(lower, answer) >= desired_ratio:
            return answer

        # -1.0 when the ratio cannot be reached on that side
        light_option = lighter(upper, desired_ratio)
        dark_option = darker(lower, desired_ratio)

        availables = []
        if light_option != -1.0:
            availables.append(light_option)
        if dark_option != -1.0:
            availables.append(dark_option)

        prefers_light = tone_prefers_light_foreground(bg_tone1) or tone_prefers_light_foreground(bg_tone2)
        if prefers_light:
            return 100.0 if light_option == -1.0 else light_option
        if len(availables) == 1:
            return availables[0]
        return 0.0 if dark_option == -1.0 else dark_option


# =============================================================================
# Foreground tone helpers
# =============================================================================

def foreground_tone(bg_tone: float, ratio: float) -> float:
    """
    Tone for content drawn on bg_tone at the given contrast ratio.

    Picks the lighter or darker solution depending on which side of the
    tone range the background favors, falling back to whichever side gets
    closer to the ratio when neither reaches it.
    """
    lighter_tone = lighter_unsafe(bg_tone, ratio)
    darker_tone = darker_unsafe(bg_tone, ratio)
    lighter_ratio = ratio_of_tones(lighter_tone, bg_tone)
    darker_ratio = ratio_of_tones(darker_tone, bg_tone)
    prefer_lighter = tone_prefers_light_foreground(bg_tone)

    if prefer_lighter:
        # With a very high requested ratio both sides can fall short by
        # almost the same amount; stay light instead of flipping to dark.
        negligible_difference = (
            abs(lighter_ratio - darker_ratio) < 0.1
            and lighter_ratio < ratio
            and darker_ratio < ratio
        )
        if lighter_ratio >= ratio or lighter_ratio >= darker_ratio or negligible_difference:
            return lighter_tone
        return darker_tone

    if darker_ratio >= ratio or darker_ratio >= lighter_ratio:
        return darker_tone
    return lighter_tone


def enable_light_foreground(tone: float) -> float:
    """Adjust a background tone so that light content reads well on it."""
    if tone_prefers_light_foreground(tone) and not tone_allows_light_foreground(tone):
        return 49.0
    return tone


def tone_prefers_light_foreground(tone: float) -> bool:
    """
    Whether light content is the better choice on this tone.

    Around tone 50, dark text technically contrasts more, but people
    prefer white text up to about tone 60.
    """
    return round(tone) < 60


def tone_allows_light_foreground(tone: float) -> bool:
    """Whether light content meets contrast on this tone."""
    return round(tone) <= 49
