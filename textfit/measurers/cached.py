"""
Memoizing measurer.
"""

from textfit.fonts import FontLike
from textfit.measurers.base import Measurer


class CachingMeasurer(Measurer):
    """
    Wraps another measurer and remembers widths per (text, font) pair.

    The cache belongs to this instance; create one per caller that wants
    repeated measurements to be cheap.
    """

    def __init__(self, inner: Measurer, max_entries: int = 4096):
        """
        Initialize caching measurer.

        Args:
            inner: Measurer that does the real work
            max_entries: Cache size; the cache is cleared when it fills up (default: 4096)
        """
        self.inner = inner
        self.max_entries = max_entries
        self._cache: dict[tuple[str, FontLike], float] = {}
        self.hits = 0
        self.misses = 0

    def measure(self, text: str, font: FontLike) -> float:
        key = (text, font)
        width = self._cache.get(key)
        if width is not None:
            self.hits += 1
            return width

        self.misses += 1
        width = self.inner.measure(text, font)
        if len(self._cache) >= self.max_entries:
            self._cache.clear()
        self._cache[key] = width
        return width

    def clear_cache(self):
        """Forget all remembered widths"""
        self._cache.clear()
        self.hits = 0
        self.misses = 0
