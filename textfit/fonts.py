"""
Font descriptors.

A font can be given either as an opaque CSS-like shorthand string
(e.g. "italic bold 16px DejaVu Sans") or as a structured FontSpec.
"""

import re
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Union


STYLE_KEYWORDS = {"normal", "italic", "oblique"}
WEIGHT_KEYWORDS = {"normal", "bold", "bolder", "lighter"}
# font-variant and font-stretch keywords, not used for measuring
IGNORED_KEYWORDS = {
    "small-caps",
    "ultra-condensed", "extra-condensed", "condensed", "semi-condensed",
    "semi-expanded", "expanded", "extra-expanded", "ultra-expanded",
}

_SIZE_PATTERN = re.compile(r"^(\d+(?:\.\d+)?)(px|pt)?(?:/\S+)?$")


@dataclass(frozen=True)
class FontSpec:
    """
    Structured font descriptor.

    Attributes:
        family: Font family name or path to a font file
        style: "normal", "italic" or "oblique"
        weight: "normal", "bold", ... or a numeric weight like "700"
        size: Size as a CSS length ("16px", "12pt") or a number of pixels
    """
    family: Optional[str] = None
    style: Optional[str] = None
    weight: Optional[str] = None
    size: Optional[Union[str, int, float]] = None

    def to_string(self) -> str:
        """
        Serialize to shorthand form, omitting unspecified fields.

        Returns:
            Fields joined as "style weight size family"
        """
        size = self.size
        if isinstance(size, (int, float)) and not isinstance(size, bool):
            size = f"{size:g}px"
        parts = [self.style, self.weight, size, self.family]
        return " ".join(str(part) for part in parts if part is not None)

    def __str__(self) -> str:
        return self.to_string()

    @property
    def is_bold(self) -> bool:
        weight = str(self.weight or "").lower()
        if weight in ("bold", "bolder"):
            return True
        return weight.isdigit() and int(weight) >= 600

    def pixel_size(self, default: int = 16) -> int:
        """
        Resolve size to whole pixels.

        Points are converted at 96 DPI. Unparseable or missing sizes
        give the default.
        """
        if self.size is None or isinstance(self.size, bool):
            return default
        if isinstance(self.size, (int, float)):
            return max(1, round(self.size))

        match = _SIZE_PATTERN.match(str(self.size).strip())
        if not match:
            return default
        value = float(match.group(1))
        if match.group(2) == "pt":
            value = value * 96 / 72
        return max(1, round(value))

    def families(self) -> list[str]:
        """Comma-separated family list with surrounding quotes removed."""
        if not self.family:
            return []
        names = [name.strip().strip("'\"") for name in self.family.split(",")]
        return [name for name in names if name]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FontSpec":
        """Build a FontSpec from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items()
                      if key in known and value is not None})

    @classmethod
    def from_string(cls, font: str) -> "FontSpec":
        """
        Parse a shorthand font string.

        Style, weight, variant and stretch keywords may appear in any
        order before the size; whatever follows the size is the family.
        "normal", variant and stretch keywords don't change the spec.

        Example:
            FontSpec.from_string("bold italic 16px Arial")
            # FontSpec(family='Arial', style='italic', weight='bold', size='16px')
        """
        tokens = font.split()
        style = weight = size = None

        index = 0
        while index < len(tokens):
            lowered = tokens[index].lower()
            if lowered in STYLE_KEYWORDS and lowered != "normal" and style is None:
                style = lowered
            elif lowered in WEIGHT_KEYWORDS and lowered != "normal" and weight is None:
                weight = lowered
            elif lowered.isdigit() and len(lowered) == 3 and weight is None:
                weight = lowered
            elif lowered == "normal" or lowered in IGNORED_KEYWORDS:
                pass
            elif _SIZE_PATTERN.match(lowered):
                size = lowered.split("/")[0]
                index += 1
                break
            else:
                break
            index += 1

        family = " ".join(tokens[index:]) or None
        return cls(family=family, style=style, weight=weight, size=size)


FontLike = Union[str, FontSpec]


def coerce_font(font: Any) -> FontLike:
    """
    Validate a font argument.

    Args:
        font: Shorthand string, FontSpec, or mapping of FontSpec fields

    Returns:
        The string or FontSpec to hand to a measurer

    Raises:
        TypeError: If font is none of the accepted kinds
    """
    if isinstance(font, (str, FontSpec)):
        return font
    if isinstance(font, Mapping):
        return FontSpec.from_dict(font)
    raise TypeError(f"font must be a string or a font descriptor. Got: {type(font).__name__}")


def to_font_spec(font: FontLike) -> FontSpec:
    """Structured view of any accepted font argument."""
    font = coerce_font(font)
    if isinstance(font, FontSpec):
        return font
    return FontSpec.from_string(font)
