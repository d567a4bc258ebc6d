"""
Text helper utilities.

Provides Pillow-based text measurement plus the small text operations a
surface binder needs around the wrapping core: normalizing source text
and joining wrapped lines back together.
"""

import re
from typing import Iterable, Union
from PIL import Image, ImageDraw, ImageFont

from textfit.core.types import WrappedLine


PillowFont = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]

_SPACE_RUN = re.compile(r" {2,}")


def _measuring_draw() -> ImageDraw.ImageDraw:
    # Create a temporary draw object for measurement
    temp_img = Image.new('RGB', (1, 1))
    return ImageDraw.Draw(temp_img)


def get_text_width(text: str, font: PillowFont) -> float:
    """
    Get the advance width of text.

    Unlike the bounding box, the advance width counts leading and
    trailing spaces, which the wrapper relies on when joining words.

    Args:
        text: Text to measure
        font: Font to use for measurement

    Returns:
        Width in pixels (may be fractional)
    """
    if not text:
        return 0.0
    return float(_measuring_draw().textlength(text, font=font))


def normalize_source_text(text: str) -> str:
    """
    Flatten text taken from a surface before wrapping.

    Newlines become spaces, runs of spaces collapse to one, and the
    result is trimmed.

    Args:
        text: Raw source text

    Returns:
        Single-line normalized text
    """
    text = text.replace("\n", " ")
    text = _SPACE_RUN.sub(" ", text)
    return text.strip()


def join_lines(lines: Iterable[Union[WrappedLine, str]], line_breaker: str = "\n") -> str:
    """
    Join wrapped lines for writing back to a surface.

    Args:
        lines: WrappedLine records (or plain strings)
        line_breaker: Delimiter placed between lines (default: newline)

    Returns:
        Joined text
    """
    return line_breaker.join(
        line.content if isinstance(line, WrappedLine) else line
        for line in lines
    )
