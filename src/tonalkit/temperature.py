"""
Color temperature theory for complements and analogous colors.

Warm colors sit around orange, cool ones around blue. Sweeping every hue at
the input's chroma and tone and ranking the results by temperature gives
a scale on which "opposite" and "neighboring" have a meaning that matches
how people perceive color, unlike plain hue arithmetic.
"""

import math
from functools import cached_property

from .color import lab_from_argb
from .hct import Hct
from .mathutil import round_half_up, sanitize_degrees, sanitize_degrees_int


class TemperatureCache:
    """
    Lazily computed temperature data for one input color.

    Building the hue sweep costs 361 HCT solves, so every derived value is
    computed on first use and kept. Not thread safe.
    """

    def __init__(self, input_hct: Hct):
        self.input = input_hct

    def __repr__(self) -> str:
        return f"TemperatureCache({self.input!r})"

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    @cached_property
    def complement(self) -> Hct:
        """
        The color on the opposite side of the temperature scale.

        Searches the half of the hue circle between coldest and warmest that
        does not contain the input for the hue whose relative temperature is
        closest to 1 - relative temperature of the input.
        """
        coldest_hue = self._coldest.hue
        coldest_temp = self._temps_by_hct[self._coldest]
        warmest_hue = self._warmest.hue
        warmest_temp = self._temps_by_hct[self._warmest]
        temp_range = warmest_temp - coldest_temp

        start_hue_is_coldest_to_warmest = self.is_between(self.input.hue, coldest_hue, warmest_hue)
        start_hue = warmest_hue if start_hue_is_coldest_to_warmest else coldest_hue
        end_hue = coldest_hue if start_hue_is_coldest_to_warmest else warmest_hue
        direction_of_rotation = 1.0
        smallest_error = 1000.0
        answer = self._hcts_by_hue[round_half_up(self.input.hue)]
        if temp_range == 0.0:
            # Every hue looks the same (black, white): nothing to search
            return answer

        complement_relative_temp = 1.0 - self.get_relative_temperature(self.input)

        hue_addend = 0.0
        while hue_addend <= 360.0:
            hue = sanitize_degrees(start_hue + direction_of_rotation * hue_addend)
            hue_addend += 1.0
            if not self.is_between(hue, start_hue, end_hue):
                continue
            possible_answer = self._hcts_by_hue[round_half_up(hue)]
            relative_temp = (self._temps_by_hct[possible_answer] - coldest_temp) / temp_range
            error = abs(complement_relative_temp - relative_temp)
            if error < smallest_error:
                smallest_error = error
                answer = possible_answer
        return answer

    @property
    def analogous_colors(self) -> list[Hct]:
        """Five colors from twelve even temperature steps around the input."""
        return self.get_analogous_colors(5, 12)

    def get_analogous_colors(self, count: int, divisions: int) -> list[Hct]:
        """
        Colors close to the input in temperature.

        Args:
            count: Number of colors to return, including the input
            divisions: Number of equal temperature steps the hue circle is
                split into; lower values give more varied results

        Returns:
            count colors, the input in the middle, cooler-side hues first

        Raises:
            ValueError: If divisions is less than 1
        """
        if divisions < 1:
            raise ValueError(f"divisions must be at least 1, got {divisions}")
        start_hue = round_half_up(self.input.hue)
        start_hct = self._hcts_by_hue[start_hue]
        last_temp = self.get_relative_temperature(start_hct)

        all_colors = [start_hct]

        absolute_total_temp_delta = 0.0
        for i in range(360):
            hue = sanitize_degrees_int(start_hue + i)
            hct = self._hcts_by_hue[hue]
            temp = self.get_relative_temperature(hct)
            absolute_total_temp_delta += abs(temp - last_temp)
            last_temp = temp

        hue_addend = 1
        temp_step = absolute_total_temp_delta / divisions
        total_temp_delta = 0.0
        last_temp = self.get_relative_temperature(start_hct)
        while len(all_colors) < divisions:
            hue = sanitize_degrees_int(start_hue + hue_addend)
            hct = self._hcts_by_hue[hue]
            temp = self.get_relative_temperature(hct)
            total_temp_delta += abs(temp - last_temp)

            desired_total_temp_delta_for_index = len(all_colors) * temp_step
            index_satisfied = total_temp_delta >= desired_total_temp_delta_for_index
            index_addend = 1
            # A hue may fill several slots when the sweep has fewer distinct
            # steps than divisions, e.g. black and white have no analogues.
            while index_satisfied and len(all_colors) < divisions:
                all_colors.append(hct)
                desired_total_temp_delta_for_index = (len(all_colors) + index_addend) * temp_step
                index_satisfied = total_temp_delta >= desired_total_temp_delta_for_index
                index_addend += 1
            last_temp = temp
            hue_addend += 1

            if hue_addend > 360:
                while len(all_colors) < divisions:
                    all_colors.append(hct)
                break

        answers = [self.input]

        ccw_count = math.floor((count - 1.0) / 2.0)
        for i in range(1, ccw_count + 1):
            index = (0 - i) % len(all_colors)
            answers.insert(0, all_colors[index])

        cw_count = count - ccw_count - 1
        for i in range(1, cw_count + 1):
            index = i % len(all_colors)
            answers.append(all_colors[index])

        return answers

    def get_relative_temperature(self, hct: Hct) -> float:
        """
        Temperature of a swept color relative to the sweep, in [0, 1].

        0 is the coldest color, 1 the warmest. Returns 0.5 when all colors
        share one temperature, as happens for black and white.
        """
        temp_range = self._temps_by_hct[self._warmest] - self._temps_by_hct[self._coldest]
        difference_from_coldest = self._temps_by_hct[hct] - self._temps_by_hct[self._coldest]
        if temp_range == 0.0:
            return 0.5
        return difference_from_coldest / temp_range

    @staticmethod
    def raw_temperature(color: Hct) -> float:
        """
        Absolute temperature of a color, roughly in [-0.5, 2.5].

        Based on Ou, Woodcock and Wright, "A study of colour emotion and
        colour preference" (2004), using L*a*b* hue and chroma.
        """
        _, a, b = lab_from_argb(color.argb)
        hue = sanitize_degrees(math.degrees(math.atan2(b, a)))
        chroma = math.hypot(a, b)
        return -0.5 + 0.02 * chroma ** 1.07 * math.cos(math.radians(sanitize_degrees(hue - 50.0)))

    @staticmethod
    def is_between(angle: float, a: float, b: float) -> bool:
        """Whether angle lies on the arc from a to b, going through increasing degrees."""
        if a < b:
            return a <= angle <= b
        return a <= angle or angle <= b

    # -------------------------------------------------------------------------
    # Lazy tables
    # -------------------------------------------------------------------------

    @cached_property
    def _hcts_by_hue(self) -> list[Hct]:
        """Input chroma and tone at hues 0, 1, ..., 360 (361 entries)."""
        return [Hct.from_hct(float(hue), self.input.chroma, self.input.tone) for hue in range(361)]

    @cached_property
    def _temps_by_hct(self) -> dict[Hct, float]:
        all_hcts = [*self._hcts_by_hue, self.input]
        return {hct: self.raw_temperature(hct) for hct in all_hcts}

    @cached_property
    def _hcts_by_temp(self) -> list[Hct]:
        hcts = [*self._hcts_by_hue, self.input]
        return sorted(hcts, key=lambda hct: self._temps_by_hct[hct])

    @property
    def _coldest(self) -> Hct:
        return self._hcts_by_temp[0]

    @property
    def _warmest(self) -> Hct:
        return self._hcts_by_temp[-1]
