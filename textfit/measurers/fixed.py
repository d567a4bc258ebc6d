"""
Fixed-width measurer.

Width is the sum of per-character widths. Useful for terminals,
monospace output and tests.
"""

from typing import Mapping, Optional
from textfit.fonts import FontLike
from textfit.measurers.base import Measurer


class FixedWidthMeasurer(Measurer):
    """
    Measures text by summing per-character widths.

    The font is ignored.
    """

    def __init__(self, char_width: float = 1.0, widths: Optional[Mapping[str, float]] = None):
        """
        Initialize fixed-width measurer.

        Args:
            char_width: Width of any character not listed in widths (default: 1.0)
            widths: Optional per-character overrides, e.g. {"W": 2, " ": 0.5}
        """
        if char_width < 0:
            raise ValueError(f"char_width must be non-negative. Got: {char_width}")
        self.char_width = char_width
        self.widths = dict(widths or {})

    def measure(self, text: str, font: FontLike) -> float:
        return sum(self.widths.get(char, self.char_width) for char in text)
