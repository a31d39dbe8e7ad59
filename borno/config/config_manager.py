"""Configuration persistence manager."""

import json
import logging
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any

from .config import DEFAULT_DATA_DIR, BornoConfig
from .defaults import create_default_config

logger = logging.getLogger(__name__)

# Never written to disk; always taken from the environment
_SECRET_KEYS = {"gemini_api_key"}


class ConfigManager:
    """Manager for configuration persistence.

    Saves and loads user configuration to/from a JSON file in the user's
    data directory. Path objects are stored as strings, and an invalid or
    missing file falls back to the default configuration.
    """

    CONFIG_FILE = DEFAULT_DATA_DIR / "config.json"

    @classmethod
    def save_config(cls, config: BornoConfig) -> None:
        """Save configuration to JSON file.

        Args:
            config: Configuration to save

        Raises:
            OSError: If unable to create directory or write file
        """
        cls.CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)

        config_dict = {
            key: value for key, value in asdict(config).items() if key not in _SECRET_KEYS
        }
        config_dict = cls._paths_to_strings(config_dict)

        with cls.CONFIG_FILE.open("w", encoding="utf-8") as f:
            json.dump(config_dict, f, indent=2, ensure_ascii=False)

    @classmethod
    def load_config(cls, **overrides) -> BornoConfig:
        """Load configuration from JSON file.

        Args:
            **overrides: Values that take precedence over the stored ones

        Returns:
            Loaded configuration, or default configuration if file doesn't exist

        Note:
            If the file exists but is invalid, falls back to default configuration
            and logs a warning.
        """
        if not cls.CONFIG_FILE.exists():
            return create_default_config(**overrides)

        try:
            with cls.CONFIG_FILE.open("r", encoding="utf-8") as f:
                config_dict = json.load(f)
            if not isinstance(config_dict, dict):
                raise ValueError("config root must be an object")

            known = {f.name for f in fields(BornoConfig)} - _SECRET_KEYS
            config_dict = {k: v for k, v in config_dict.items() if k in known}
            config_dict.update(overrides)
            return BornoConfig(**config_dict)

        except (json.JSONDecodeError, TypeError, ValueError) as e:
            logger.warning(f"Invalid config file, using defaults: {e}")
            return create_default_config(**overrides)

    @staticmethod
    def _paths_to_strings(data: dict[str, Any]) -> dict[str, Any]:
        """Convert Path objects to strings in a dict."""
        return {key: str(value) if isinstance(value, Path) else value for key, value in data.items()}
