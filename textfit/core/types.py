"""
Data types shared by the wrapper and the truncator.
"""

import math
from dataclasses import dataclass
from typing import Any, Mapping


DEFAULT_CONTINUATION = "-"
DEFAULT_MAX_LINE_COUNT = 0
DEFAULT_ELLIPSIS = "..."


@dataclass(frozen=True)
class WrappedLine:
    """
    One output line.

    Attributes:
        content: Line text, trimmed at both ends (may be empty)
        width: Measured width of content in the measurer's units
    """
    content: str
    width: float


def is_number(value: Any) -> bool:
    """True for ints and floats, but not bools."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def resolve_continuation(value: Any) -> str:
    return value if isinstance(value, str) else DEFAULT_CONTINUATION


def resolve_max_line_count(value: Any) -> int:
    if is_number(value) and math.isfinite(value):
        return int(value)
    return DEFAULT_MAX_LINE_COUNT


def resolve_ellipsis(value: Any) -> str:
    return value if isinstance(value, str) else DEFAULT_ELLIPSIS


@dataclass(frozen=True)
class WrapConfig:
    """
    Wrapping parameters for a single call.

    Attributes:
        max_width: Maximum line width in measurer units
        long_word_continuation: Marker prepended to a forced word split
        max_line_count: Maximum number of lines, 0 means unlimited
        ellipsis: Marker appended to the last line when lines are dropped
    """
    max_width: float
    long_word_continuation: str = DEFAULT_CONTINUATION
    max_line_count: int = DEFAULT_MAX_LINE_COUNT
    ellipsis: str = DEFAULT_ELLIPSIS

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WrapConfig":
        """
        Build a WrapConfig from a mapping.

        Optional fields with the wrong type fall back to their defaults.

        Raises:
            TypeError: If max_width is missing or not a number
        """
        max_width = data.get("max_width")
        if not is_number(max_width):
            raise TypeError(f"max_width must be a number. Got: {type(max_width).__name__}")
        return cls(
            max_width=max_width,
            long_word_continuation=resolve_continuation(data.get("long_word_continuation")),
            max_line_count=resolve_max_line_count(data.get("max_line_count")),
            ellipsis=resolve_ellipsis(data.get("ellipsis")),
        )
