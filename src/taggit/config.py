"""Configuration management for taggit.

Handles loading and saving user preferences: the default output format and
log level, and the read/write maps that override the tag sub-format policy.
"""

import copy
import logging
import tomllib
from pathlib import Path
from typing import Dict, Any, List, Optional

import tomli_w

from .constants import LOG_LEVELS, OUTPUT_FORMATS
from .tagging.policy import TagFormatPolicy


def get_config_dir() -> Path:
    """Get the configuration directory.

    Returns:
        Path to config directory (~/.taggit on all platforms)
    """
    config_dir = Path.home() / ".taggit"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_path() -> Path:
    """Get the full path to the config file."""
    return get_config_dir() / ".taggit_config.toml"


class Config:
    """Configuration manager for application settings."""

    DEFAULT_CONFIG: Dict[str, Any] = {
        "logging": {
            # Level used when --log-level is not given
            "level": "warning",
        },
        "output": {
            # human, machine or json
            "format": "human",
        },
        # Per file type read precedence, e.g. mp3 = ["apetag", "id3v2"]
        # Empty means the built-in order (id3v2, apetag, id3v1 for mp3)
        "read_map": {},
        # Per file type write targets; the first entry is the default
        "write_map": {},
    }

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_path: Alternate config file (default: ~/.taggit/.taggit_config.toml)
        """
        self.config_path = Path(config_path) if config_path else get_config_path()
        self.data: Dict[str, Any] = copy.deepcopy(self.DEFAULT_CONFIG)  # Deep copy to avoid modifying class default
        self._dirty = False  # Track if config has been modified
        self.load()

    def load(self) -> bool:
        """Load configuration from file.

        Returns:
            True if loaded successfully, False if file doesn't exist or error occurred
        """
        if not self.config_path.exists():
            return False

        try:
            with open(self.config_path, "rb") as f:
                loaded_data = tomllib.load(f)
                # Merge with defaults (in case new keys were added)
                self._merge_config(self.data, loaded_data)
            self._dirty = False  # Config is clean after loading
            return True
        except (OSError, tomllib.TOMLDecodeError) as e:
            logging.error(f"Error loading config {self.config_path}: {e}")
            return False

    def save(self, force: bool = False) -> bool:
        """Save configuration to file.

        Args:
            force: If True, save even if config hasn't been modified

        Returns:
            True if saved successfully, False otherwise
        """
        if not force and not self._dirty:
            # No changes to save
            return True

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "wb") as f:
                tomli_w.dump(self.data, f)
            self._dirty = False  # Clear dirty flag after successful save
            return True
        except OSError as e:
            logging.error(f"Error saving config {self.config_path}: {e}")
            return False

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Recursively merge override dict into base dict."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def is_dirty(self) -> bool:
        """Check if configuration has been modified.

        Returns:
            True if config has unsaved changes, False otherwise
        """
        return self._dirty

    # Logging settings
    def get_log_level(self) -> str:
        """Get the default log level."""
        return self.data.get("logging", {}).get("level", "warning")

    def set_log_level(self, level: str) -> None:
        """Set the default log level.

        Raises:
            ValueError: If level is not a known logging level
        """
        if level.lower() not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {level}")
        self.data.setdefault("logging", {})["level"] = level.lower()
        self._dirty = True

    # Output settings
    def get_output_format(self) -> str:
        """Get the default report format (human, machine or json)."""
        return self.data.get("output", {}).get("format", "human")

    def set_output_format(self, output_format: str) -> None:
        """Set the default report format.

        Raises:
            ValueError: If output_format is not human, machine or json
        """
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Invalid output format: {output_format}")
        self.data.setdefault("output", {})["format"] = output_format
        self._dirty = True

    # Tag policy settings
    def get_read_map(self) -> Dict[str, List[str]]:
        """Get read precedence overrides, keyed by file type name."""
        return dict(self.data.get("read_map", {}))

    def set_read_order(self, file_type: str, impls: List[str]) -> None:
        """Override the read precedence for one file type.

        Raises:
            ValueError: If the file type or a tag type is unknown or not allowed
        """
        self._set_policy_entry("read_map", file_type, impls)

    def get_write_map(self) -> Dict[str, List[str]]:
        """Get write target overrides, keyed by file type name."""
        return dict(self.data.get("write_map", {}))

    def set_write_order(self, file_type: str, impls: List[str]) -> None:
        """Override the write targets for one file type.

        Raises:
            ValueError: If the file type or a tag type is unknown or not allowed
        """
        self._set_policy_entry("write_map", file_type, impls)

    def _set_policy_entry(self, section: str, file_type: str, impls: List[str]) -> None:
        TagFormatPolicy.from_names(**{section: {file_type: impls}})
        self.data.setdefault(section, {})[file_type] = list(impls)
        self._dirty = True
