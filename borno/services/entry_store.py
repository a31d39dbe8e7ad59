"""JSON-backed store owning the dictionary's entries."""

from __future__ import annotations

import logging
from pathlib import Path

from borno.exceptions import PersistenceCorruptionError, ValidationError
from borno.models import LANGUAGES, DictionaryEntry, new_entry_id
from borno.services.json_slot import JsonSlot
from borno.services.seed_data import SEED_ENTRIES
from borno.utils.sort_utils import collation_key
from borno.utils.text_utils import normalize_query

logger = logging.getLogger(__name__)


class EntryStore:
    """Service owning the canonical collection of dictionary entries.

    The collection lives in a single JSON slot. Every mutation rewrites
    the whole slot before returning. The first read of an empty (or
    corrupt) slot writes the seed set.
    """

    SEARCH_FIELDS = ("word", "translation", "meaning", "source")

    def __init__(self, path: Path, seed: list[dict] | None = None):
        """Initialize the entry store.

        Args:
            path: JSON file holding the entries
            seed: Documents written on first run (defaults to SEED_ENTRIES)
        """
        self._slot = JsonSlot(path, expected_type=list)
        self._seed = SEED_ENTRIES if seed is None else seed

    def list(self) -> list[DictionaryEntry]:
        """Get all entries sorted by headword.

        Returns:
            Entries in collation order
        """
        return sorted(self._load(), key=lambda e: collation_key(e.word))

    def get(self, entry_id: str) -> DictionaryEntry | None:
        """Get an entry by id.

        Args:
            entry_id: Entry identifier

        Returns:
            The entry, or None if not found
        """
        for entry in self._load():
            if entry.id == entry_id:
                return entry
        return None

    def find_by_word(self, word: str) -> DictionaryEntry | None:
        """Get the first entry (in list order) whose headword matches exactly, ignoring case."""
        target = normalize_query(word)
        if not target:
            return None
        for entry in self.list():
            if entry.word.strip().casefold() == target:
                return entry
        return None

    def search(self, query: str | None) -> list[DictionaryEntry]:
        """Find entries containing the query.

        Matching is a case-insensitive substring test against the word,
        translation, meaning and source fields. An empty or blank query
        returns every entry.

        Args:
            query: Raw search text

        Returns:
            Matching entries in the same order as list()
        """
        needle = normalize_query(query)
        entries = self.list()
        if not needle:
            return entries
        return [
            entry
            for entry in entries
            if any(needle in getattr(entry, name).casefold() for name in self.SEARCH_FIELDS)
        ]

    def save(self, entry: DictionaryEntry) -> DictionaryEntry:
        """Insert or fully replace an entry.

        An entry whose id already exists replaces the stored one;
        otherwise it is appended. An entry without an id gets one.

        Args:
            entry: Entry to store

        Returns:
            The stored copy

        Raises:
            ValidationError: If the word is empty or the language is unknown
        """
        if not entry.word or not entry.word.strip():
            raise ValidationError("Cannot save an entry without a word")
        if entry.language not in LANGUAGES:
            raise ValidationError(f"Unknown language: {entry.language!r}")

        stored = entry.copy()
        stored.word = stored.word.strip()
        if not entry.id:
            stored.id = new_entry_id()

        entries = self._load()
        for i, existing in enumerate(entries):
            if existing.id == stored.id:
                entries[i] = stored
                logger.info(f"Updated entry {stored.id}: {stored.word}")
                break
        else:
            entries.append(stored)
            logger.info(f"Added entry {stored.id}: {stored.word}")

        self._write(entries)
        return stored.copy()

    def delete(self, entry_id: str) -> bool:
        """Delete an entry by id.

        Args:
            entry_id: Entry identifier

        Returns:
            True if an entry was removed, False if none had that id
        """
        entries = self._load()
        remaining = [e for e in entries if e.id != entry_id]
        if len(remaining) == len(entries):
            return False
        self._write(remaining)
        logger.info(f"Deleted entry {entry_id}")
        return True

    def count(self) -> int:
        return len(self._load())

    def _load(self) -> list[DictionaryEntry]:
        """Read entries, seeding or upgrading the slot when needed."""
        try:
            data = self._slot.read()
        except PersistenceCorruptionError as e:
            logger.warning(f"Dictionary data is corrupt, restoring defaults: {e}")
            data = None

        if data is None:
            entries = [DictionaryEntry.from_dict(doc) for doc in self._seed]
            self._write(entries)
            return entries

        entries = []
        upgraded = False
        for doc in data:
            if not isinstance(doc, dict):
                upgraded = True
                continue
            entry = DictionaryEntry.from_dict(doc)
            if not entry.word.strip():
                upgraded = True
                continue
            if entry.to_dict() != doc:
                upgraded = True
            entries.append(entry)

        if upgraded:
            # Persist generated ids and defaults so they stay stable
            logger.debug("Upgrading stored dictionary entries to current schema")
            self._write(entries)
        return entries

    def _write(self, entries: list[DictionaryEntry]) -> None:
        self._slot.write([entry.to_dict() for entry in entries])
