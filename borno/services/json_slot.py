"""A single named JSON document on disk."""

import json
import logging
from pathlib import Path
from typing import Any

from borno.exceptions import PersistenceCorruptionError
from borno.utils.file_utils import atomic_write_text

logger = logging.getLogger(__name__)


class JsonSlot:
    """Durable key-value slot holding one JSON document.

    Each store owns exactly one slot. Writes replace the whole document
    atomically; there are no incremental patches.
    """

    def __init__(self, path: Path, expected_type: type = list):
        """Initialize the slot.

        Args:
            path: File backing the slot
            expected_type: Required type of the top-level JSON value
        """
        self.path = Path(path)
        self._expected_type = expected_type

    def exists(self) -> bool:
        return self.path.exists()

    def read(self) -> Any | None:
        """Read the stored document.

        Returns:
            Decoded document, or None if the slot has never been written

        Raises:
            PersistenceCorruptionError: If the file is unreadable, is not
                valid JSON, or holds a value of the wrong type
        """
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            raise PersistenceCorruptionError(f"Cannot read {self.path.name}: {e}") from e

        if not isinstance(data, self._expected_type):
            raise PersistenceCorruptionError(
                f"Expected {self._expected_type.__name__} in {self.path.name}, "
                f"got {type(data).__name__}"
            )
        return data

    def write(self, document: Any) -> None:
        """Replace the stored document.

        Raises:
            OSError: If the file cannot be written
        """
        atomic_write_text(self.path, json.dumps(document, indent=2, ensure_ascii=False))
        logger.debug(f"Wrote {self.path}")

    def clear(self) -> None:
        """Remove the stored document."""
        if self.path.exists():
            self.path.unlink()
