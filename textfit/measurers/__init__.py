"""
Measurers for textfit.

Measurers report rendered text widths to the wrapping core.
"""

from .base import Measurer
from .cached import CachingMeasurer
from .fixed import FixedWidthMeasurer
from .pillow import PillowMeasurer


def get_measurer(config, quiet: bool = False) -> Measurer:
    """
    Factory function to create the measurer named in config.

    Args:
        config: Config instance
        quiet: If True, suppress font fallback notices

    Returns:
        Measurer instance, wrapped in a CachingMeasurer if caching is enabled
    """
    measurer_config = config.get_measurer_config()
    kind = measurer_config.get("type", "pillow")

    if kind == "pillow":
        measurer = PillowMeasurer(font_path=measurer_config.get("font_path"), quiet=quiet)
    elif kind == "fixed":
        measurer = FixedWidthMeasurer(char_width=measurer_config.get("char_width", 1.0))
    else:
        raise ValueError(f"Unknown measurer type: {kind}. "
                        f"Valid types: pillow, fixed")

    if measurer_config.get("cache", True):
        measurer = CachingMeasurer(measurer)
    return measurer


__all__ = [
    "Measurer",
    "CachingMeasurer",
    "FixedWidthMeasurer",
    "PillowMeasurer",
    "get_measurer",
]
