"""
Measurement-driven line wrapping.

Text is split on hard newlines, each line is tokenized into whitespace and
non-whitespace runs, runs wider than the budget are cut into fragments,
and fragments are packed greedily into lines. An optional line cap is
applied last.
"""

import re
from typing import Any, Optional, TYPE_CHECKING

from textfit.core.truncator import truncate_lines
from textfit.core.types import (
    WrapConfig,
    WrappedLine,
    is_number,
    resolve_continuation,
    resolve_ellipsis,
    resolve_max_line_count,
)
from textfit.fonts import FontLike, coerce_font

if TYPE_CHECKING:
    from textfit.measurers.base import Measurer


_TOKEN_SPLIT = re.compile(r"(\s+)")


def tokenize(line: str) -> list[str]:
    """
    Split a line into alternating non-whitespace and whitespace runs.

    Whitespace runs are kept as tokens so spacing survives packing.
    """
    return [token for token in _TOKEN_SPLIT.split(line) if token]


def split_long_words(tokens: list[str], measurer: 'Measurer', font: FontLike,
                     max_width: float, continuation: str) -> list[str]:
    """
    Cut tokens wider than max_width into fragments.

    Characters are added to a fragment until the next one would push it
    past max_width; the fragment is then emitted and a new one starts with
    the continuation marker followed by that character. A single character
    wider than max_width still forms a fragment on its own.

    Args:
        tokens: Tokens from tokenize()
        measurer: Width source
        font: Font to measure with
        max_width: Width budget
        continuation: Marker prepended to each forced fragment

    Returns:
        Fragments in order
    """
    fragments = []
    for token in tokens:
        fragment = ""
        for char in token:
            candidate = fragment + char
            if fragment and measurer.measure(candidate, font) > max_width:
                fragments.append(fragment)
                fragment = continuation + char
            else:
                fragment = candidate
        if fragment:
            fragments.append(fragment)
    return fragments


def pack_words(words: list[str], measurer: 'Measurer', font: FontLike,
               max_width: float) -> list[str]:
    """
    Greedily pack fragments into lines.

    Widths are compared on the trimmed candidate so trailing whitespace
    never forces a break. Emitted lines are trimmed at both ends; interior
    whitespace is kept as is.

    Args:
        words: Fragments from split_long_words()
        measurer: Width source
        font: Font to measure with
        max_width: Width budget

    Returns:
        Trimmed, non-empty lines
    """
    lines = []
    current = ""
    for word in words:
        has_content = bool(current.strip())
        candidate = current + word if has_content else word
        if has_content and measurer.measure(candidate.strip(), font) > max_width:
            lines.append(current.strip())
            current = word
        else:
            current = candidate
    if current.strip():
        lines.append(current.strip())
    return lines


class LineWrapper:
    """
    Wraps text into lines no wider than a maximum width.

    The measurer is supplied by the caller and is the only source of
    widths; the wrapper holds no other state between calls.
    """

    def __init__(self, measurer: 'Measurer'):
        """
        Initialize line wrapper.

        Args:
            measurer: Measurer used for every width decision
        """
        self.measurer = measurer

    def wrap(self, text: str, font: Any, max_width: float,
             long_word_continuation: Optional[str] = None,
             max_line_count: Optional[int] = None,
             ellipsis: Optional[str] = None) -> list[WrappedLine]:
        """
        Wrap text and optionally cap the line count.

        Args:
            text: Text to wrap; hard newlines are kept as line breaks
            font: Shorthand font string, FontSpec, or mapping of FontSpec fields
            max_width: Maximum line width in measurer units
            long_word_continuation: Marker for forced word splits (default: "-")
            max_line_count: Maximum lines, 0 for unlimited (default: 0)
            ellipsis: Marker for dropped lines (default: "...")

        Returns:
            WrappedLine list in reading order

        Raises:
            TypeError: If text is not a string, font is not a font
                descriptor, or max_width is not a number
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be a string. Got: {type(text).__name__}")
        font = coerce_font(font)
        if not is_number(max_width):
            raise TypeError(f"max_width must be a number. Got: {type(max_width).__name__}")

        continuation = resolve_continuation(long_word_continuation)
        max_line_count = resolve_max_line_count(max_line_count)
        ellipsis = resolve_ellipsis(ellipsis)

        lines = []
        for raw_line in text.split("\n"):
            if not raw_line.strip():
                lines.append(WrappedLine(content="", width=0.0))
                continue

            words = split_long_words(tokenize(raw_line), self.measurer, font,
                                     max_width, continuation)
            for content in pack_words(words, self.measurer, font, max_width):
                lines.append(WrappedLine(content=content,
                                         width=self.measurer.measure(content, font)))

        return truncate_lines(lines, max_line_count, ellipsis, self.measurer, font, max_width)

    def wrap_with_config(self, text: str, font: Any, config: WrapConfig) -> list[WrappedLine]:
        """Wrap text using parameters from a WrapConfig"""
        return self.wrap(
            text,
            font,
            config.max_width,
            long_word_continuation=config.long_word_continuation,
            max_line_count=config.max_line_count,
            ellipsis=config.ellipsis,
        )


def wrap_text(text: str, font: Any, max_width: float,
              long_word_continuation: Optional[str] = "-",
              max_line_count: Optional[int] = 0,
              ellipsis: Optional[str] = "...",
              *, measurer: 'Measurer') -> list[WrappedLine]:
    """
    Wrap text into lines that fit max_width.

    Convenience wrapper around LineWrapper(measurer).wrap(...).

    Example:
        wrap_text("hello world", "16px DejaVu Sans", 60, measurer=PillowMeasurer())
    """
    return LineWrapper(measurer).wrap(text, font, max_width, long_word_continuation,
                                      max_line_count, ellipsis)
