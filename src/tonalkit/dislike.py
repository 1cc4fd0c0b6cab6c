"""
Detect and fix universally disliked colors.

Dark yellow-greens (the color of bile, mold and swamps) are consistently
rated as the least pleasant colors. Lightening them to tone 70 keeps the
hue recognizable while making them acceptable.

See Palmer and Schloss, "An ecological valence theory of human color
preference" (2010).
"""

from .hct import Hct


def is_disliked(hct: Hct) -> bool:
    """Dark yellow-green with noticeable chroma."""
    hue_passes = 90.0 <= round(hct.hue) <= 111.0
    chroma_passes = round(hct.chroma) > 16.0
    tone_passes = round(hct.tone) < 65.0
    return hue_passes and chroma_passes and tone_passes


def fix_if_disliked(hct: Hct) -> Hct:
    """Return hct lightened to tone 70 if it is disliked, otherwise hct itself."""
    if is_disliked(hct):
        return Hct.from_hct(hct.hue, hct.chroma, 70.0)
    return hct
