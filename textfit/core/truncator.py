"""
Line-count truncation with an ellipsis marker.
"""

from typing import Sequence, TYPE_CHECKING

from textfit.core.types import WrappedLine
from textfit.fonts import FontLike

if TYPE_CHECKING:
    from textfit.measurers.base import Measurer


def elide(content: str, ellipsis: str, measurer: 'Measurer', font: FontLike,
          max_width: float) -> str:
    """
    Shorten content until content + ellipsis fits, then append the ellipsis.

    Characters are dropped from the end one at a time. If even the bare
    ellipsis is too wide it is returned alone.

    Args:
        content: Line text to elide
        ellipsis: Marker to append
        measurer: Width source
        font: Font to measure with
        max_width: Width budget

    Returns:
        Elided line text, always ending with the ellipsis
    """
    while content and measurer.measure(content + ellipsis, font) > max_width:
        content = content[:-1]
    return content + ellipsis


def truncate_lines(lines: Sequence[WrappedLine], max_line_count: int, ellipsis: str,
                   measurer: 'Measurer', font: FontLike,
                   max_width: float) -> list[WrappedLine]:
    """
    Cap the number of lines, eliding the last kept line if any were dropped.

    Args:
        lines: Wrapped lines in reading order
        max_line_count: Lines to keep; 0 or less keeps everything
        ellipsis: Marker appended to the last kept line when lines are dropped
        measurer: Width source
        font: Font to measure with
        max_width: Width budget for the elided line

    Returns:
        At most max_line_count lines (all of them when unlimited)
    """
    if max_line_count <= 0:
        return list(lines)

    kept = list(lines[:max_line_count])
    if len(lines) <= max_line_count:
        return kept

    last = kept[-1]
    content = elide(last.content, ellipsis, measurer, font, max_width)
    kept[-1] = WrappedLine(content=content, width=measurer.measure(content, font))
    return kept
