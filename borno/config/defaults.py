"""Default configuration values for Borno."""

from .config import BornoConfig


def create_default_config(**overrides) -> BornoConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        BornoConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            data_dir="/tmp/borno",
            history_max_items=10,
        )
    """
    return BornoConfig(**overrides)
