"""Data model for recent-search history records."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


def utc_timestamp() -> str:
    """Current time as an ISO-8601 UTC string."""
    return datetime.now(timezone.utc).isoformat()


@dataclass
class HistoryRecord:
    """A reference to a viewed entry.

    Only the id is authoritative; word is kept so the record can be shown
    (or migrated) without the entry store.
    """

    entry_id: str
    word: str
    timestamp: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HistoryRecord | None":
        """Build a record from any persisted history shape.

        Handles the current {id, word, timestamp} form, the legacy
        {word, timestamp} form (numeric millisecond timestamps included)
        and legacy full entry snapshots.

        Returns:
            The record, or None if the document carries no usable key
        """
        entry_id = str(data.get("id") or "").strip()
        word = str(data.get("word") or "").strip()
        if not entry_id and not word:
            return None

        timestamp = data.get("timestamp")
        if isinstance(timestamp, (int, float)) and not isinstance(timestamp, bool):
            timestamp = datetime.fromtimestamp(timestamp / 1000, tz=timezone.utc).isoformat()
        elif not isinstance(timestamp, str) or not timestamp:
            timestamp = utc_timestamp()

        return cls(entry_id=entry_id, word=word, timestamp=timestamp)

    def to_dict(self) -> dict[str, str]:
        return {"id": self.entry_id, "word": self.word, "timestamp": self.timestamp}
