"""
Rank colors for use as a theme source.

Colors are weighted by how much of the input their hue neighborhood
covers and by how close their chroma is to a comfortable target, then
de-duplicated so the results are spread around the hue circle.
"""

import math

from .color import GOOGLE_BLUE
from .hct import Hct
from .mathutil import difference_degrees, round_half_up, sanitize_degrees_int

TARGET_CHROMA = 48.0
WEIGHT_PROPORTION = 0.7
WEIGHT_CHROMA_ABOVE = 0.3
WEIGHT_CHROMA_BELOW = 0.1
CUTOFF_CHROMA = 5.0
CUTOFF_EXCITED_PROPORTION = 0.01
FALLBACK_COLOR_ARGB = GOOGLE_BLUE


def score(
    colors_to_population: dict[int, int],
    desired: int = 4,
    fallback_color: int = FALLBACK_COLOR_ARGB,
    filter_colors: bool = True,
) -> list[int]:
    """
    Rank colors based on suitability for UI themes.

    Given a map of colors to population counts, removes unsuitable colors
    and ranks the rest based on chroma and proportion.

    Args:
        colors_to_population: Dict mapping ARGB colors to pixel counts
        desired: Maximum number of colors to return
        fallback_color: Color to return if no suitable colors found
        filter_colors: Whether to filter out low-chroma/low-proportion colors

    Returns:
        List of ARGB colors sorted by suitability (best first), never empty
    """
    # Build HCT colors and hue population histogram
    colors_hct: list[Hct] = []
    hue_population = [0] * 360
    population_sum = 0
    for argb, population in colors_to_population.items():
        hct = Hct.from_argb(argb)
        colors_hct.append(hct)
        hue = sanitize_degrees_int(math.floor(hct.hue))
        hue_population[hue] += population
        population_sum += population

    if not colors_hct or population_sum == 0:
        return [fallback_color]

    # "Excited" proportion of a hue: share of pixels within the 30 degree
    # window around it
    hue_excited_proportions = [0.0] * 360
    for hue in range(360):
        proportion = hue_population[hue] / population_sum
        for offset in range(-14, 16):
            neighbor_hue = sanitize_degrees_int(hue + offset)
            hue_excited_proportions[neighbor_hue] += proportion

    scored_hct: list[tuple[Hct, float]] = []
    for hct in colors_hct:
        hue = sanitize_degrees_int(round_half_up(hct.hue))
        proportion = hue_excited_proportions[hue]
        if filter_colors and (hct.chroma < CUTOFF_CHROMA or proportion <= CUTOFF_EXCITED_PROPORTION):
            continue

        proportion_score = proportion * 100.0 * WEIGHT_PROPORTION
        chroma_weight = WEIGHT_CHROMA_BELOW if hct.chroma < TARGET_CHROMA else WEIGHT_CHROMA_ABOVE
        chroma_score = (hct.chroma - TARGET_CHROMA) * chroma_weight
        scored_hct.append((hct, proportion_score + chroma_score))

    # Sort by score descending; ties keep input order
    scored_hct.sort(key=lambda item: item[1], reverse=True)

    # Deduplicate by hue distance - maximize hue diversity
    # Start at 90° (max for 4 colors), decrease to 15° minimum
    chosen_colors: list[Hct] = []
    for difference in range(90, 14, -1):
        chosen_colors.clear()
        for hct, _ in scored_hct:
            if not any(difference_degrees(hct.hue, chosen.hue) < difference for chosen in chosen_colors):
                chosen_colors.append(hct)
            if len(chosen_colors) >= desired:
                break
        if len(chosen_colors) >= desired:
            break

    if not chosen_colors:
        return [fallback_color]
    return [hct.argb for hct in chosen_colors]
