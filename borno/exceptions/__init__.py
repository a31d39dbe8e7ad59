"""Custom exceptions for Borno."""

from .base import BornoException
from .enrichment import EnrichmentError
from .speech import CapabilityUnavailableError
from .storage import PersistenceCorruptionError
from .validation import ValidationError

__all__ = [
    "BornoException",
    "PersistenceCorruptionError",
    "EnrichmentError",
    "CapabilityUnavailableError",
    "ValidationError",
]
