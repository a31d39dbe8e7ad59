"""Ordered set of favorited entries."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from borno.exceptions import PersistenceCorruptionError
from borno.services.json_slot import JsonSlot

if TYPE_CHECKING:
    from borno.services.entry_store import EntryStore

logger = logging.getLogger(__name__)


class FavoritesSet:
    """Manages the user's favorite entries.

    Favorites are keyed by entry id, newest first, without duplicates,
    and persisted on every change.
    """

    def __init__(self, path: Path):
        """Initialize the favorites set.

        Args:
            path: JSON file holding the favorite keys
        """
        self._slot = JsonSlot(path, expected_type=list)

    def toggle(self, key: str) -> bool:
        """Add the key if absent, remove it if present.

        Args:
            key: Entry id

        Returns:
            True if the key is a favorite after the call
        """
        keys = self._load()
        if key in keys:
            keys.remove(key)
            self._save(keys)
            return False
        keys.insert(0, key)
        self._save(keys)
        return True

    def is_favorite(self, key: str) -> bool:
        return key in self._load()

    def list(self) -> list[str]:
        """Get favorite keys, most recently added first."""
        return self._load()

    def remove(self, key: str) -> bool:
        """Remove a key if present.

        Returns:
            True if the key was a favorite
        """
        keys = self._load()
        if key not in keys:
            return False
        keys.remove(key)
        self._save(keys)
        return True

    def clear(self) -> None:
        self._save([])

    def reconcile(self, store: EntryStore) -> int:
        """Upgrade legacy word keys to entry ids.

        Older data stored favorites by headword. Each key that is not an
        existing id is matched to the first entry with that word; keys
        matching nothing are dropped.

        Args:
            store: Entry store to resolve against

        Returns:
            Number of keys that were changed or dropped
        """
        keys = self._load()
        upgraded: list[str] = []
        changed = 0
        for key in keys:
            if store.get(key) is None:
                changed += 1
                entry = store.find_by_word(key)
                if entry is None:
                    logger.info(f"Dropping favorite with no matching entry: {key}")
                    continue
                key = entry.id
            if key not in upgraded:
                upgraded.append(key)
        if changed:
            self._save(upgraded)
        return changed

    def _load(self) -> list[str]:
        try:
            data = self._slot.read()
        except PersistenceCorruptionError as e:
            logger.warning(f"Favorites data is corrupt, starting fresh: {e}")
            return []
        if data is None:
            return []

        keys: list[str] = []
        for item in data:
            if isinstance(item, str) and item and item not in keys:
                keys.append(item)
        return keys

    def _save(self, keys: list[str]) -> None:
        self._slot.write(keys)
