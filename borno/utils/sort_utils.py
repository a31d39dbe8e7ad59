"""Sorting utilities for mixed Bengali/Latin word lists."""

import re
import unicodedata
from typing import Any

# Combining marks are only dropped after Latin letters; Bengali vowel
# signs and hasanta are part of the spelling.
_LATIN_LIMIT = 0x250


def _fold(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    kept = []
    previous = ""
    for ch in decomposed:
        if unicodedata.combining(ch) and previous and ord(previous) < _LATIN_LIMIT:
            continue
        kept.append(ch)
        if not unicodedata.combining(ch):
            previous = ch
    return unicodedata.normalize("NFC", "".join(kept)).casefold()


def collation_key(text: str) -> tuple[list[Any], str]:
    """Generate a case- and accent-insensitive sort key for a headword.

    Latin and Bengali words are compared under the same rules: case and
    Latin diacritics are ignored, digit runs compare numerically, and
    the original text breaks ties so ordering is deterministic.

    Args:
        text: String to generate sort key for

    Returns:
        Tuple usable as a ``sorted`` key

    Example:
        sorted(["zebra", "Église", "apple"], key=collation_key)
        # Returns: ["apple", "Église", "zebra"]
    """

    def convert(segment):
        return int(segment) if segment.isdigit() else segment

    folded = _fold(str(text).strip())
    return [convert(c) for c in re.split(r"(\d+)", folded)], str(text)
