"""Configuration classes for Borno."""

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_DATA_DIR = Path.home() / ".borno"


def _api_key_from_env() -> str:
    return os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY", "")


@dataclass(frozen=True)
class BornoConfig:
    """Immutable configuration for the dictionary application.

    File fields left as None are placed inside data_dir.
    """

    # Storage settings
    data_dir: Path = field(default_factory=lambda: DEFAULT_DATA_DIR)
    entries_file: Path | None = None
    history_file: Path | None = None
    favorites_file: Path | None = None

    # History settings
    history_max_items: int = 50

    # Enrichment settings
    gemini_api_url: str = "https://generativelanguage.googleapis.com/v1beta/models"
    gemini_model: str = "gemini-2.0-flash"
    gemini_api_key: str = field(default_factory=_api_key_from_env)
    enrichment_timeout: float = 15.0  # Seconds

    # Speech settings
    speech_input_language: str = "bn-BD"

    def __post_init__(self):
        """Convert string paths to Path objects and fill in slot files."""
        if isinstance(self.data_dir, str):
            object.__setattr__(self, "data_dir", Path(self.data_dir))

        defaults = {
            "entries_file": "dictionary.json",
            "history_file": "history.json",
            "favorites_file": "favorites.json",
        }
        for name, filename in defaults.items():
            value = getattr(self, name)
            if value is None:
                object.__setattr__(self, name, self.data_dir / filename)
            elif isinstance(value, str):
                object.__setattr__(self, name, Path(value))

        if self.history_max_items < 1:
            raise ValueError("history_max_items must be at least 1")
