"""
textfit: Measurement-driven text wrapping.

Wraps text into lines that fit a maximum width using a font-dependent
width metric, splitting over-long words and optionally truncating the
result to a maximum line count with an ellipsis.
"""

__version__ = "0.1.0"

# Import main classes for convenience
from textfit.core import LineWrapper, WrapConfig, WrappedLine, truncate_lines, wrap_text
from textfit.fonts import FontSpec
from textfit.measurers import (
    CachingMeasurer,
    FixedWidthMeasurer,
    Measurer,
    PillowMeasurer,
    get_measurer,
)

__all__ = [
    "LineWrapper",
    "WrapConfig",
    "WrappedLine",
    "truncate_lines",
    "wrap_text",
    "FontSpec",
    "Measurer",
    "CachingMeasurer",
    "FixedWidthMeasurer",
    "PillowMeasurer",
    "get_measurer",
]
