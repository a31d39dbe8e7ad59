"""Data models for Borno."""

from .enrichment import EnrichmentResult, EnrichmentTicket
from .entry import (
    CONTENT_FIELDS,
    DEFAULT_LANGUAGE,
    LANGUAGES,
    LIST_FIELDS,
    DictionaryEntry,
    new_entry_id,
)
from .history import HistoryRecord
from .view import View

__all__ = [
    "DictionaryEntry",
    "HistoryRecord",
    "EnrichmentResult",
    "EnrichmentTicket",
    "View",
    "CONTENT_FIELDS",
    "LIST_FIELDS",
    "LANGUAGES",
    "DEFAULT_LANGUAGE",
    "new_entry_id",
]
