"""
Material Design 3 color roles.

Each role is a DynamicColor built once per MaterialDynamicColors instance.
Token names match the keys written into generated themes (snake_case,
e.g. "on_primary_container").
"""

from functools import cached_property

from .dislike import fix_if_disliked
from .dynamic import (
    ContrastCurve,
    DynamicColor,
    DynamicScheme,
    ToneDeltaPair,
    TonePolarity,
    Variant,
    foreground_tone,
)
from .contrast import RATIO_30, RATIO_45, RATIO_70, RATIO_MAX, RATIO_MIN
from .hct import Hct

# Contrast curves shared by many roles
_TEXT_CONTRAST = ContrastCurve(RATIO_45, RATIO_70, 11.0, RATIO_MAX)
_VARIANT_TEXT_CONTRAST = ContrastCurve(RATIO_30, RATIO_45, RATIO_70, 11.0)
_ACCENT_CONTRAST = ContrastCurve(RATIO_30, RATIO_45, RATIO_70, RATIO_70)
_CONTAINER_CONTRAST = ContrastCurve(RATIO_MIN, RATIO_MIN, RATIO_30, RATIO_45)


def is_fidelity(scheme: DynamicScheme) -> bool:
    """Fidelity schemes keep the source color's tone for containers."""
    return scheme.variant in (Variant.FIDELITY, Variant.CONTENT)


def is_monochrome(scheme: DynamicScheme) -> bool:
    return scheme.variant == Variant.MONOCHROME


def find_desired_chroma_by_tone(hue: float, chroma: float, tone: float, by_decreasing_tone: bool) -> float:
    """
    Step the tone until the palette can show the requested chroma.

    Starts at tone and moves one step at a time (down if by_decreasing_tone)
    while the achieved chroma is short. Stops at a chroma peak or once the
    achieved chroma is within 0.4 of the request.
    """
    answer = tone
    closest_to_chroma = Hct.from_hct(hue, chroma, tone)
    if closest_to_chroma.chroma < chroma:
        chroma_peak = closest_to_chroma.chroma
        while closest_to_chroma.chroma < chroma:
            answer += -1.0 if by_decreasing_tone else 1.0
            potential_solution = Hct.from_hct(hue, chroma, answer)
            if chroma_peak > potential_solution.chroma:
                break
            if abs(potential_solution.chroma - chroma) < 0.4:
                break

            potential_delta = abs(potential_solution.chroma - chroma)
            current_delta = abs(closest_to_chroma.chroma - chroma)
            if potential_delta < current_delta:
                closest_to_chroma = potential_solution
            chroma_peak = max(chroma_peak, potential_solution.chroma)
    return answer


class MaterialDynamicColors:
    """
    Catalog of Material color roles.

    Roles reference each other (a foreground names its background, paired
    roles name each other), so each one is created lazily and then reused;
    the per-role tone cache lives on those shared instances.
    """

    # Roles written into generated themes, in output order
    THEME_ROLES = (
        "primary",
        "on_primary",
        "primary_container",
        "on_primary_container",
        "primary_fixed",
        "primary_fixed_dim",
        "on_primary_fixed",
        "on_primary_fixed_variant",
        "surface_tint",
        "secondary",
        "on_secondary",
        "secondary_container",
        "on_secondary_container",
        "secondary_fixed",
        "secondary_fixed_dim",
        "on_secondary_fixed",
        "on_secondary_fixed_variant",
        "tertiary",
        "on_tertiary",
        "tertiary_container",
        "on_tertiary_container",
        "tertiary_fixed",
        "tertiary_fixed_dim",
        "on_tertiary_fixed",
        "on_tertiary_fixed_variant",
        "error",
        "on_error",
        "error_container",
        "on_error_container",
        "surface",
        "on_surface",
        "surface_variant",
        "on_surface_variant",
        "surface_dim",
        "surface_bright",
        "surface_container_lowest",
        "surface_container_low",
        "surface_container",
        "surface_container_high",
        "surface_container_highest",
        "outline",
        "outline_variant",
        "shadow",
        "scrim",
        "inverse_surface",
        "inverse_on_surface",
        "inverse_primary",
        "background",
        "on_background",
    )

    def all_colors(self) -> list[DynamicColor]:
        """Theme roles in output order."""
        return [getattr(self, name) for name in self.THEME_ROLES]

    def highest_surface(self, scheme: DynamicScheme) -> DynamicColor:
        """The surface with the most contrast demands on it."""
        return self.surface_bright if scheme.is_dark else self.surface_dim

    # =========================================================================
    # Palette key colors
    # =========================================================================

    @cached_property
    def primary_palette_key_color(self) -> DynamicColor:
        return DynamicColor.from_palette(
            "primary_palette_key_color",
            lambda s: s.primary_palette,
            lambda s: s.primary_palette.key_color.tone,
        )

    @cached_property
    def secondary_palette_key_color(self) -> DynamicColor:
        return DynamicColor.from_palette(
            "secondary_palette_key_color",
            lambda s: s.secondary_palette,
            lambda s: s.secondary_palette.key_color.tone,
        )

    @cached_property
    def tertiary_palette_key_color(self) -> DynamicColor:
        return DynamicColor.from_palette(
            "tertiary_palette_key_color",
            lambda s: s.tertiary_palette,
            lambda s: s.tertiary_palette.key_color.tone,
        )

    @cached_property
    def neutral_palette_key_color(self) -> DynamicColor:
        return DynamicColor.from_palette(
            "neutral_palette_key_color",
            lambda s: s.neutral_palette,
            lambda s: s.neutral_palette.key_color.tone,
        )

    @cached_property
    def neutral_variant_palette_key_color(self) -> DynamicColor:
        return DynamicColor.from_palette(
            "neutral_variant_palette_key_color",
            lambda s: s.neutral_variant_palette,
            lambda s: s.neutral_variant_palette.key_color.tone,
        )

    # =========================================================================
    # Surfaces
    # =========================================================================

    @cached_property
    def background(self) -> DynamicColor:
        return DynamicColor(
            "background",
            lambda s: s.neutral_palette,
            lambda s: 6.0 if s.is_dark else 98.0,
            is_background=True,
        )

    @cached_property
    def on_background(self) -> DynamicColor:
        return DynamicColor(
            "on_background",
            lambda s: s.neutral_palette,
            lambda s: 90.0 if s.is_dark else 10.0,
            is_background=False,
            background=lambda s: self.background,
            contrast_curve=ContrastCurve(RATIO_30, RATIO_30, RATIO_45, RATIO_70),
        )

    @cached_property
    def surface(self) -> DynamicColor:
        return DynamicColor(
            "surface",
            lambda s: s.neutral_palette,
            lambda s: 6.0 if s.is_dark else 98.0,
            is_background=True,
        )

    @cached_property
    def surface_dim(self) -> DynamicColor:
        curve = ContrastCurve(87.0, 87.0, 80.0, 75.0)
        return DynamicColor(
            "surface_dim",
            lambda s: s.neutral_palette,
            lambda s: 6.0 if s.is_dark else curve.get(s.contrast_level),
            is_background=True,
        )

    @cached_property
    def surface_bright(self) -> DynamicColor:
        curve = ContrastCurve(24.0, 24.0, 29.0, 34.0)
        return DynamicColor(
            "surface_bright",
            lambda s: s.neutral_palette,
            lambda s: curve.get(s.contrast_level) if s.is_dark else 98.0,
            is_background=True,
        )

    @cached_property
    def surface_container_lowest(self) -> DynamicColor:
        curve = ContrastCurve(4.0, 4.0, 2.0, 0.0)
        return DynamicColor(
            "surface_container_lowest",
            lambda s: s.neutral_palette,
            lambda s: curve.get(s.contrast_level) if s.is_dark else 100.0,
            is_background=True,
        )

    @cached_property
    def surface_container_low(self) -> DynamicColor:
        return self._surface_container(
            "surface_container_low",
            dark=ContrastCurve(10.0, 10.0, 11.0, 12.0),
            light=ContrastCurve(96.0, 96.0, 96.0, 95.0),
        )

    @cached_property
    def surface_container(self) -> DynamicColor:
        return self._surface_container(
            "surface_container",
            dark=ContrastCurve(12.0, 12.0, 16.0, 20.0),
            light=ContrastCurve(94.0, 94.0, 92.0, 90.0),
        )

    @cached_property
    def surface_container_high(self) -> DynamicColor:
        return self._surface_container(
            "surface_container_high",
            dark=ContrastCurve(17.0, 17.0, 21.0, 25.0),
            light=ContrastCurve(92.0, 92.0, 88.0, 85.0),
        )

    @cached_property
    def surface_container_highest(self) -> DynamicColor:
        return self._surface_container(
            "surface_container_highest",
            dark=ContrastCurve(22.0, 22.0, 26.0, 30.0),
            light=ContrastCurve(90.0, 90.0, 84.0, 80.0),
        )

    @staticmethod
    def _surface_container(name: str, dark: ContrastCurve, light: ContrastCurve) -> DynamicColor:
        # Container tones are themselves contrast curves over the contrast level
        return DynamicColor(
            name,
            lambda s: s.neutral_palette,
            lambda s: (dark if s.is_dark else light).get(s.contrast_level),
            is_background=True,
        )

    @cached_property
    def on_surface(self) -> DynamicColor:
        return DynamicColor(
            "on_surface",
            lambda s: s.neutral_palette,
            lambda s: 90.0 if s.is_dark else 10.0,
            is_background=False,
            background=self.highest_surface,
            contrast_curve=_TEXT_CONTRAST,
        )

    @cached_property
    def surface_variant(self) -> DynamicColor:
        return DynamicColor(
            "surface_variant",
            lambda s: s.neutral_variant_palette,
            lambda s: 30.0 if s.is_dark else 90.0,
            is_background=True,
        )

    @cached_property
    def on_surface_variant(self) -> DynamicColor:
        return DynamicColor(
            "on_surface_variant",
            lambda s: s.neutral_variant_palette,
            lambda s: 80.0 if s.is_dark else 30.0,
            is_background=False,
            background=self.highest_surface,
            contrast_curve=_VARIANT_TEXT_CONTRAST,
        )

    @cached_property
    def inverse_surface(self) -> DynamicColor:
        return DynamicColor(
            "inverse_surface",
            lambda s: s.neutral_palette,
            lambda s: 90.0 if s.is_dark else 20.0,
            is_background=False,
        )

    @cached_property
    def inverse_on_surface(self) -> DynamicColor:
        return DynamicColor(
            "inverse_on_surface",
            lambda s: s.neutral_palette,
            lambda s: 20.0 if s.is_dark else 95.0,
            is_background=False,
            background=lambda s: self.inverse_surface,
            contrast_curve=_TEXT_CONTRAST,
        )

    @cached_property
    def outline(self) -> DynamicColor:
        return DynamicColor(
            "outline",
            lambda s: s.neutral_variant_palette,
            lambda s: 60.0 if s.is_dark else 50.0,
            is_background=False,
            background=self.highest_surface,
            contrast_curve=ContrastCurve(1.5, RATIO_30, RATIO_45, RATIO_70),
        )

    @cached_property
    def outline_variant(self) -> DynamicColor:
        return DynamicColor(
            "outline_variant",
            lambda s: s.neutral_variant_palette,
            lambda s: 30.0 if s.is_dark else 80.0,
            is_background=False,
            background=self.highest_surface,
            contrast_curve=_CONTAINER_CONTRAST,
        )

    @cached_property
    def shadow(self) -> DynamicColor:
        return DynamicColor("shadow", lambda s: s.neutral_palette, lambda s: 0.0, is_background=False)

    @cached_property
    def scrim(self) -> DynamicColor:
        return DynamicColor("scrim", lambda s: s.neutral_palette, lambda s: 0.0, is_background=False)

    @cached_property
    def surface_tint(self) -> DynamicColor:
        return DynamicColor(
            "surface_tint",
            lambda s: s.primary_palette,
            lambda s: 80.0 if s.is_dark else 40.0,
            is_background=True,
        )

    # =========================================================================
    # Primary
    # =========================================================================

    @cached_property
    def primary(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            if is_monochrome(s):
                return 100.0 if s.is_dark else 0.0
            return 80.0 if s.is_dark else 40.0

        return DynamicColor(
            "primary",
            lambda s: s.primary_palette,
            tone,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=_ACCENT_CONTRAST,
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.primary_container, self.primary, 10.0, TonePolarity.NEARER, False
            ),
        )

    @cached_property
    def on_primary(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            if is_monochrome(s):
                return 10.0 if s.is_dark else 90.0
            return 20.0 if s.is_dark else 100.0

        return DynamicColor(
            "on_primary",
            lambda s: s.primary_palette,
            tone,
            is_background=False,
            background=lambda s: self.primary,
            contrast_curve=_TEXT_CONTRAST,
        )

    @cached_property
    def primary_container(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            if is_fidelity(s):
                return s.source_color_hct.tone
            if is_monochrome(s):
                return 85.0 if s.is_dark else 25.0
            return 30.0 if s.is_dark else 90.0

        return DynamicColor(
            "primary_container",
            lambda s: s.primary_palette,
            tone,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=_CONTAINER_CONTRAST,
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.primary_container, self.primary, 10.0, TonePolarity.NEARER, False
            ),
        )

    @cached_property
    def on_primary_container(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            if is_fidelity(s):
                return foreground_tone(self.primary_container.tone(s), RATIO_45)
            if is_monochrome(s):
                return 0.0 if s.is_dark else 100.0
            return 90.0 if s.is_dark else 10.0

        return DynamicColor(
            "on_primary_container",
            lambda s: s.primary_palette,
            tone,
            is_background=False,
            background=lambda s: self.primary_container,
            contrast_curve=_TEXT_CONTRAST,
        )

    @cached_property
    def inverse_primary(self) -> DynamicColor:
        return DynamicColor(
            "inverse_primary",
            lambda s: s.primary_palette,
            lambda s: 40.0 if s.is_dark else 80.0,
            is_background=False,
            background=lambda s: self.inverse_surface,
            contrast_curve=_ACCENT_CONTRAST,
        )

    # =========================================================================
    # Secondary
    # =========================================================================

    @cached_property
    def secondary(self) -> DynamicColor:
        return DynamicColor(
            "secondary",
            lambda s: s.secondary_palette,
            lambda s: 80.0 if s.is_dark else 40.0,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=_ACCENT_CONTRAST,
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.secondary_container, self.secondary, 10.0, TonePolarity.NEARER, False
            ),
        )

    @cached_property
    def on_secondary(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            if is_monochrome(s):
                return 10.0 if s.is_dark else 100.0
            return 20.0 if s.is_dark else 100.0

        return DynamicColor(
            "on_secondary",
            lambda s: s.secondary_palette,
            tone,
            is_background=False,
            background=lambda s: self.secondary,
            contrast_curve=_TEXT_CONTRAST,
        )

    @cached_property
    def secondary_container(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            initial_tone = 30.0 if s.is_dark else 90.0
            if is_monochrome(s):
                return 30.0 if s.is_dark else 85.0
            if not is_fidelity(s):
                return initial_tone
            return find_desired_chroma_by_tone(
                s.secondary_palette.hue, s.secondary_palette.chroma, initial_tone, not s.is_dark
            )

        return DynamicColor(
            "secondary_container",
            lambda s: s.secondary_palette,
            tone,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=_CONTAINER_CONTRAST,
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.secondary_container, self.secondary, 10.0, TonePolarity.NEARER, False
            ),
        )

    @cached_property
    def on_secondary_container(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            if not is_fidelity(s):
                return 90.0 if s.is_dark else 10.0
            return foreground_tone(self.secondary_container.tone(s), RATIO_45)

        return DynamicColor(
            "on_secondary_container",
            lambda s: s.secondary_palette,
            tone,
            is_background=False,
            background=lambda s: self.secondary_container,
            contrast_curve=_TEXT_CONTRAST,
        )

    # =========================================================================
    # Tertiary
    # =========================================================================

    @cached_property
    def tertiary(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            if is_monochrome(s):
                return 90.0 if s.is_dark else 25.0
            return 80.0 if s.is_dark else 40.0

        return DynamicColor(
            "tertiary",
            lambda s: s.tertiary_palette,
            tone,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=_ACCENT_CONTRAST,
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.tertiary_container, self.tertiary, 10.0, TonePolarity.NEARER, False
            ),
        )

    @cached_property
    def on_tertiary(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            if is_monochrome(s):
                return 10.0 if s.is_dark else 90.0
            return 20.0 if s.is_dark else 100.0

        return DynamicColor(
            "on_tertiary",
            lambda s: s.tertiary_palette,
            tone,
            is_background=False,
            background=lambda s: self.tertiary,
            contrast_curve=_TEXT_CONTRAST,
        )

    @cached_property
    def tertiary_container(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            if is_monochrome(s):
                return 60.0 if s.is_dark else 49.0
            if not is_fidelity(s):
                return 30.0 if s.is_dark else 90.0
            proposed = s.tertiary_palette.get_hct(s.source_color_hct.tone)
            return fix_if_disliked(proposed).tone

        return DynamicColor(
            "tertiary_container",
            lambda s: s.tertiary_palette,
            tone,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=_CONTAINER_CONTRAST,
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.tertiary_container, self.tertiary, 10.0, TonePolarity.NEARER, False
            ),
        )

    @cached_property
    def on_tertiary_container(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            if is_monochrome(s):
                return 0.0 if s.is_dark else 100.0
            if not is_fidelity(s):
                return 90.0 if s.is_dark else 10.0
            return foreground_tone(self.tertiary_container.tone(s), RATIO_45)

        return DynamicColor(
            "on_tertiary_container",
            lambda s: s.tertiary_palette,
            tone,
            is_background=False,
            background=lambda s: self.tertiary_container,
            contrast_curve=_TEXT_CONTRAST,
        )

    # =========================================================================
    # Error
    # =========================================================================

    @cached_property
    def error(self) -> DynamicColor:
        return DynamicColor(
            "error",
            lambda s: s.error_palette,
            lambda s: 80.0 if s.is_dark else 40.0,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=_ACCENT_CONTRAST,
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.error_container, self.error, 10.0, TonePolarity.NEARER, False
            ),
        )

    @cached_property
    def on_error(self) -> DynamicColor:
        return DynamicColor(
            "on_error",
            lambda s: s.error_palette,
            lambda s: 20.0 if s.is_dark else 100.0,
            is_background=False,
            background=lambda s: self.error,
            contrast_curve=_TEXT_CONTRAST,
        )

    @cached_property
    def error_container(self) -> DynamicColor:
        return DynamicColor(
            "error_container",
            lambda s: s.error_palette,
            lambda s: 30.0 if s.is_dark else 90.0,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=_CONTAINER_CONTRAST,
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.error_container, self.error, 10.0, TonePolarity.NEARER, False
            ),
        )

    @cached_property
    def on_error_container(self) -> DynamicColor:
        return DynamicColor(
            "on_error_container",
            lambda s: s.error_palette,
            lambda s: 90.0 if s.is_dark else 10.0,
            is_background=False,
            background=lambda s: self.error_container,
            contrast_curve=_TEXT_CONTRAST,
        )

    # =========================================================================
    # Fixed colors (same tone in light and dark themes)
    # =========================================================================

    def _fixed(self, name: str, palette, normal_tone: float, mono_tone: float, pair) -> DynamicColor:
        return DynamicColor(
            name,
            palette,
            lambda s: mono_tone if is_monochrome(s) else normal_tone,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=_CONTAINER_CONTRAST,
            tone_delta_pair=pair,
        )

    def _on_fixed(
        self, name: str, palette, normal_tone: float, mono_tone: float,
        background: str, second_background: str, curve: ContrastCurve,
    ) -> DynamicColor:
        return DynamicColor(
            name,
            palette,
            lambda s: mono_tone if is_monochrome(s) else normal_tone,
            is_background=False,
            background=lambda s: getattr(self, background),
            second_background=lambda s: getattr(self, second_background),
            contrast_curve=curve,
        )

    def _primary_fixed_pair(self, s: DynamicScheme) -> ToneDeltaPair:
        return ToneDeltaPair(self.primary_fixed, self.primary_fixed_dim, 10.0, TonePolarity.LIGHTER, True)

    def _secondary_fixed_pair(self, s: DynamicScheme) -> ToneDeltaPair:
        return ToneDeltaPair(self.secondary_fixed, self.secondary_fixed_dim, 10.0, TonePolarity.LIGHTER, True)

    def _tertiary_fixed_pair(self, s: DynamicScheme) -> ToneDeltaPair:
        return ToneDeltaPair(self.tertiary_fixed, self.tertiary_fixed_dim, 10.0, TonePolarity.LIGHTER, True)

    @cached_property
    def primary_fixed(self) -> DynamicColor:
        return self._fixed("primary_fixed", lambda s: s.primary_palette, 90.0, 40.0, self._primary_fixed_pair)

    @cached_property
    def primary_fixed_dim(self) -> DynamicColor:
        return self._fixed("primary_fixed_dim", lambda s: s.primary_palette, 80.0, 30.0, self._primary_fixed_pair)

    @cached_property
    def on_primary_fixed(self) -> DynamicColor:
        return self._on_fixed(
            "on_primary_fixed", lambda s: s.primary_palette, 10.0, 100.0,
            "primary_fixed_dim", "primary_fixed", _TEXT_CONTRAST,
        )

    @cached_property
    def on_primary_fixed_variant(self) -> DynamicColor:
        return self._on_fixed(
            "on_primary_fixed_variant", lambda s: s.primary_palette, 30.0, 90.0,
            "primary_fixed_dim", "primary_fixed", _VARIANT_TEXT_CONTRAST,
        )

    @cached_property
    def secondary_fixed(self) -> DynamicColor:
        return self._fixed("secondary_fixed", lambda s: s.secondary_palette, 90.0, 80.0, self._secondary_fixed_pair)

    @cached_property
    def secondary_fixed_dim(self) -> DynamicColor:
        return self._fixed(
            "secondary_fixed_dim", lambda s: s.secondary_palette, 80.0, 70.0, self._secondary_fixed_pair
        )

    @cached_property
    def on_secondary_fixed(self) -> DynamicColor:
        return self._on_fixed(
            "on_secondary_fixed", lambda s: s.secondary_palette, 10.0, 10.0,
            "secondary_fixed_dim", "secondary_fixed", _TEXT_CONTRAST,
        )

    @cached_property
    def on_secondary_fixed_variant(self) -> DynamicColor:
        return self._on_fixed(
            "on_secondary_fixed_variant", lambda s: s.secondary_palette, 30.0, 25.0,
            "secondary_fixed_dim", "secondary_fixed", _VARIANT_TEXT_CONTRAST,
        )

    @cached_property
    def tertiary_fixed(self) -> DynamicColor:
        return self._fixed("tertiary_fixed", lambda s: s.tertiary_palette, 90.0, 40.0, self._tertiary_fixed_pair)

    @cached_property
    def tertiary_fixed_dim(self) -> DynamicColor:
        return self._fixed(
            "tertiary_fixed_dim", lambda s: s.tertiary_palette, 80.0, 30.0, self._tertiary_fixed_pair
        )

    @cached_property
    def on_tertiary_fixed(self) -> DynamicColor:
        return self._on_fixed(
            "on_tertiary_fixed", lambda s: s.tertiary_palette, 10.0, 100.0,
            "tertiary_fixed_dim", "tertiary_fixed", _TEXT_CONTRAST,
        )

    @cached_property
    def on_tertiary_fixed_variant(self) -> DynamicColor:
        return self._on_fixed(
            "on_tertiary_fixed_variant", lambda s: s.tertiary_palette, 30.0, 90.0,
            "tertiary_fixed_dim", "tertiary_fixed", _VARIANT_TEXT_CONTRAST,
        )

    # =========================================================================
    # Android-only roles
    # =========================================================================

    @cached_property
    def control_activated(self) -> DynamicColor:
        return DynamicColor.from_palette(
            "control_activated",
            lambda s: s.primary_palette,
            lambda s: 30.0 if s.is_dark else 90.0,
            is_background=True,
        )

    @cached_property
    def control_normal(self) -> DynamicColor:
        return DynamicColor.from_palette(
            "control_normal",
            lambda s: s.neutral_variant_palette,
            lambda s: 80.0 if s.is_dark else 30.0,
        )

    @cached_property
    def control_highlight(self) -> DynamicColor:
        return DynamicColor(
            "control_highlight",
            lambda s: s.neutral_palette,
            lambda s: 100.0 if s.is_dark else 0.0,
            is_background=False,
            opacity=lambda s: 0.20 if s.is_dark else 0.12,
        )

    @cached_property
    def text_primary_inverse(self) -> DynamicColor:
        return DynamicColor.from_palette(
            "text_primary_inverse",
            lambda s: s.neutral_palette,
            lambda s: 10.0 if s.is_dark else 90.0,
        )

    @cached_property
    def text_secondary_and_tertiary_inverse(self) -> DynamicColor:
        return DynamicColor.from_palette(
            "text_secondary_and_tertiary_inverse",
            lambda s: s.neutral_variant_palette,
            lambda s: 30.0 if s.is_dark else 80.0,
        )

    @cached_property
    def text_primary_inverse_disable_only(self) -> DynamicColor:
        return DynamicColor.from_palette(
            "text_primary_inverse_disable_only",
            lambda s: s.neutral_palette,
            lambda s: 10.0 if s.is_dark else 90.0,
        )

    @cached_property
    def text_secondary_and_tertiary_inverse_disabled(self) -> DynamicColor:
        return DynamicColor.from_palette(
            "text_secondary_and_tertiary_inverse_disabled",
            lambda s: s.neutral_palette,
            lambda s: 10.0 if s.is_dark else 90.0,
        )

    @cached_property
    def text_hint_inverse(self) -> DynamicColor:
        return DynamicColor.from_palette(
            "text_hint_inverse",
            lambda s: s.neutral_palette,
            lambda s: 10.0 if s.is_dark else 90.0,
        )
