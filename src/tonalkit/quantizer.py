"""
Pixel quantization.

QuantizerMap counts exact colors; it is the histogram step in front of
Score when the input is a palette or a small image rather than a photo.
"""


class QuantizerMap:
    """
    Exact-color histogram.

    Every pixel is counted under its full ARGB value, alpha included.
    Colors keep the order in which they were first seen.
    """

    def __init__(self):
        self.color_to_count: dict[int, int] = {}

    def quantize(self, pixels: list[int]) -> dict[int, int]:
        """
        Count pixels by color.

        Args:
            pixels: ARGB colors

        Returns:
            Dict mapping ARGB colors to pixel counts
        """
        counts: dict[int, int] = {}
        for pixel in pixels:
            counts[pixel] = counts.get(pixel, 0) + 1
        self.color_to_count = counts
        return counts
