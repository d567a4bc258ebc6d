"""
Base class for measurers.

Measurers report the rendered width of a text fragment in a given font.
The wrapping core only ever talks to this interface.
"""

from abc import ABC, abstractmethod
from textfit.fonts import FontLike


class Measurer(ABC):
    """
    Base class for text measurers.

    Implementations must be deterministic: the same (text, font) pair
    always yields the same width.
    """

    @abstractmethod
    def measure(self, text: str, font: FontLike) -> float:
        """
        Measure rendered width of text.

        Args:
            text: Text fragment to measure
            font: Shorthand font string or FontSpec

        Returns:
            Non-negative width, in the same units as the wrap max_width
        """
        pass

    def __call__(self, text: str, font: FontLike) -> float:
        return self.measure(text, font)
