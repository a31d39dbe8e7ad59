"""Configuration management for Borno."""

from .config import BornoConfig
from .config_manager import ConfigManager
from .defaults import create_default_config

__all__ = ["BornoConfig", "ConfigManager", "create_default_config"]
