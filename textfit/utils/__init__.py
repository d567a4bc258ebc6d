"""
Utility functions for textfit.

Helper functions for text measurement and surface binding.
"""

from textfit.utils.text_helpers import (
    get_text_width,
    normalize_source_text,
    join_lines,
)

__all__ = [
    "get_text_width",
    "normalize_source_text",
    "join_lines",
]
