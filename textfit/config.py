"""
Configuration loader for textfit.

Loads settings from textfit.json with sensible defaults.
"""

import copy
import json
import os
from typing import Any, Dict

from textfit.core.types import WrapConfig
from textfit.fonts import FontLike, coerce_font


# Default configuration
DEFAULT_CONFIG = {
    "font": {
        "family": None,
        "style": None,
        "weight": None,
        "size": 16
    },
    "wrap": {
        "max_width": 320,
        "long_word_continuation": "-",
        "max_line_count": 0,
        "ellipsis": "..."
    },
    "measurer": {
        "type": "pillow",
        "cache": True,
        "char_width": 1.0
    }
}


class Config:
    """
    Configuration manager for textfit.

    Loads textfit.json from the current directory, falling back to defaults.
    Sections missing from the file are taken from the defaults.
    """

    def __init__(self, config_path: str = "textfit.json"):
        """
        Initialize configuration.

        Args:
            config_path: Path to config file (default: textfit.json in current directory)
        """
        self.config_path = config_path
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """
        Load configuration from file or use defaults.

        Returns:
            Configuration dictionary
        """
        config = copy.deepcopy(DEFAULT_CONFIG)
        if not os.path.exists(self.config_path):
            # Config file doesn't exist, use defaults
            return config

        try:
            with open(self.config_path, 'r') as f:
                loaded = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            print(f"Warning: Could not load {self.config_path}: {e}")
            print("Using default configuration")
            return config

        if not isinstance(loaded, dict):
            print(f"Warning: {self.config_path} does not contain a JSON object")
            print("Using default configuration")
            return config

        for section, value in loaded.items():
            if isinstance(value, dict) and isinstance(config.get(section), dict):
                config[section].update(value)
            else:
                config[section] = value
        return config

    def get(self, *keys: str, default: Any = None) -> Any:
        """
        Get nested config value.

        Args:
            *keys: Nested keys to traverse (e.g., "wrap", "max_width")
            default: Default value if key not found

        Returns:
            Config value or default

        Example:
            config.get("wrap", "ellipsis")
            # Returns: "..."
        """
        value = self.config
        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default
        return value

    def get_font(self) -> FontLike:
        """
        Get the configured font.

        Returns:
            Shorthand font string or FontSpec

        Raises:
            TypeError: If the font entry is neither a string nor an object
        """
        return coerce_font(self.get("font", default={}))

    def get_wrap_config(self) -> WrapConfig:
        """
        Get wrapping parameters.

        Returns:
            WrapConfig built from the "wrap" section

        Raises:
            TypeError: If max_width is not a number
        """
        return WrapConfig.from_dict(self.get("wrap", default={}))

    def get_measurer_config(self) -> Dict[str, Any]:
        """
        Get measurer configuration.

        Returns:
            Measurer configuration dictionary with type, cache, char_width
        """
        return self.get("measurer", default={
            "type": "pillow",
            "cache": True,
            "char_width": 1.0
        })
