"""
Pillow measurer.

Reference measurer for raster output: resolves a font descriptor to a
Pillow font and measures the advance width of text in pixels.
"""

import os
from functools import lru_cache
from typing import Optional
from PIL import ImageFont

from textfit.fonts import FontLike, FontSpec, to_font_spec
from textfit.measurers.base import Measurer
from textfit.utils.text_helpers import PillowFont, get_text_width


# Bundled fonts first, then the usual system location
FALLBACK_FONTS = {
    False: [
        "/app/fonts/DejaVuSans.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    ],
    True: [
        "/app/fonts/DejaVuSans-Bold.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    ],
}


@lru_cache(maxsize=64)
def load_font(spec: FontSpec, font_path: Optional[str] = None,
              quiet: bool = False) -> PillowFont:
    """
    Resolve a FontSpec to a Pillow font.

    Tries, in order: an explicit font_path, each family in the spec (as a
    file path or a name Pillow can find), bundled/system DejaVu Sans
    (bold variant for bold weights), and finally Pillow's default font.

    Args:
        spec: Font descriptor
        font_path: Font file that overrides the family (default: None)
        quiet: If True, don't report falling back to the default font

    Returns:
        Pillow font at the requested pixel size
    """
    size = spec.pixel_size()

    candidates = []
    if font_path:
        candidates.append(font_path)
    candidates.extend(spec.families())
    candidates.extend(path for path in FALLBACK_FONTS[spec.is_bold] if os.path.exists(path))

    for candidate in candidates:
        try:
            return ImageFont.truetype(candidate, size)
        except OSError:
            continue

    if not quiet:
        print(f"[PillowMeasurer] No TrueType font found for '{spec}', using default font")
    return ImageFont.load_default(size=size)


class PillowMeasurer(Measurer):
    """
    Measures text with Pillow fonts.

    Widths are advance widths in pixels, so max_width should be given
    in pixels too.
    """

    def __init__(self, font_path: Optional[str] = None, quiet: bool = False):
        """
        Initialize Pillow measurer.

        Args:
            font_path: Font file used for every descriptor (default: resolve from family)
            quiet: If True, suppress font fallback notices
        """
        self.font_path = font_path
        self.quiet = quiet

    def get_font(self, font: FontLike) -> PillowFont:
        """Pillow font for a descriptor"""
        return load_font(to_font_spec(font), self.font_path, self.quiet)

    def measure(self, text: str, font: FontLike) -> float:
        return get_text_width(text, self.get_font(font))
