"""Business logic services for Borno."""

from .enrichment_client import EnrichmentClient
from .entry_store import EntryStore
from .favorites_set import FavoritesSet
from .history_log import HistoryLog
from .json_slot import JsonSlot
from .speech_service import NullSpeechOutput, QtSpeechOutput, UnavailableSpeechInput

__all__ = [
    "JsonSlot",
    "EntryStore",
    "HistoryLog",
    "FavoritesSet",
    "EnrichmentClient",
    "QtSpeechOutput",
    "NullSpeechOutput",
    "UnavailableSpeechInput",
]
