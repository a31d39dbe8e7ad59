"""Bounded most-recent-first log of viewed entries."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from borno.exceptions import PersistenceCorruptionError
from borno.models import DictionaryEntry, HistoryRecord
from borno.models.history import utc_timestamp
from borno.services.json_slot import JsonSlot

if TYPE_CHECKING:
    from borno.services.entry_store import EntryStore

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITEMS = 50


class HistoryLog:
    """Manages the recent-search history.

    Records reference entries by id and are stored in a JSON slot of
    their own, most recent first. Re-viewing an entry moves its record
    to the front instead of duplicating it.
    """

    def __init__(self, path: Path, max_items: int = DEFAULT_MAX_ITEMS):
        """Initialize the history log.

        Args:
            path: JSON file holding the records
            max_items: Maximum number of records to keep
        """
        self._slot = JsonSlot(path, expected_type=list)
        self._max_items = max_items

    @property
    def max_items(self) -> int:
        return self._max_items

    def record(self, entry: DictionaryEntry) -> HistoryRecord:
        """Record that an entry was viewed.

        Removes any existing record for the same entry, prepends a new one
        and trims the log to max_items.

        Args:
            entry: The entry being displayed

        Returns:
            The new record
        """
        new_record = HistoryRecord(entry_id=entry.id, word=entry.word, timestamp=utc_timestamp())
        records = [r for r in self._load() if not self._same_entry(r, entry)]
        records.insert(0, new_record)
        self._save(records[: self._max_items])
        return new_record

    def list(self) -> list[HistoryRecord]:
        """Get history records, most recent first."""
        return self._load()

    def remove(self, entry_id: str) -> bool:
        """Drop the record for an entry.

        Returns:
            True if a record was removed
        """
        records = self._load()
        remaining = [r for r in records if r.entry_id != entry_id]
        if len(remaining) == len(records):
            return False
        self._save(remaining)
        return True

    def clear(self) -> None:
        """Remove all history records."""
        self._save([])

    def resolve(self, store: EntryStore) -> list[DictionaryEntry]:
        """Look up the live entries behind the history records.

        Records whose entry no longer exists are dropped from the log.
        Legacy word-only records are matched by headword and upgraded to
        reference the entry's id.

        Args:
            store: Entry store to resolve against

        Returns:
            Entries in history order
        """
        records = self._load()
        kept: list[HistoryRecord] = []
        entries: list[DictionaryEntry] = []
        changed = False

        for record in records:
            entry = store.get(record.entry_id) if record.entry_id else None
            if entry is None and not record.entry_id:
                entry = store.find_by_word(record.word)
            if entry is None or any(e.id == entry.id for e in entries):
                changed = True
                continue
            if record.entry_id != entry.id or record.word != entry.word:
                record = HistoryRecord(entry_id=entry.id, word=entry.word, timestamp=record.timestamp)
                changed = True
            kept.append(record)
            entries.append(entry)

        if changed:
            logger.debug(f"Dropped {len(records) - len(kept)} stale history record(s)")
            self._save(kept)
        return entries

    @staticmethod
    def _same_entry(record: HistoryRecord, entry: DictionaryEntry) -> bool:
        if record.entry_id:
            return record.entry_id == entry.id
        return record.word.casefold() == entry.word.casefold()

    def _load(self) -> list[HistoryRecord]:
        try:
            data = self._slot.read()
        except PersistenceCorruptionError as e:
            logger.warning(f"History data is corrupt, starting fresh: {e}")
            return []
        if data is None:
            return []

        records = []
        for doc in data:
            if isinstance(doc, dict):
                record = HistoryRecord.from_dict(doc)
                if record is not None:
                    records.append(record)
        return records[: self._max_items]

    def _save(self, records: list[HistoryRecord]) -> None:
        self._slot.write([r.to_dict() for r in records])
