"""
Wrapping core for textfit.

Pure line breaking and truncation; all widths come from a Measurer.
"""

from textfit.core.types import WrapConfig, WrappedLine
from textfit.core.truncator import truncate_lines
from textfit.core.wrapper import LineWrapper, wrap_text

__all__ = [
    "WrapConfig",
    "WrappedLine",
    "LineWrapper",
    "wrap_text",
    "truncate_lines",
]
