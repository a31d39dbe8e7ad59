"""Utility functions for Borno."""

from .file_utils import atomic_write_text, ensure_directory
from .sort_utils import collation_key
from .text_utils import contains_bengali, detect_language, normalize_query, strip_code_fences

__all__ = [
    "atomic_write_text",
    "ensure_directory",
    "collation_key",
    "contains_bengali",
    "detect_language",
    "normalize_query",
    "strip_code_fences",
]
