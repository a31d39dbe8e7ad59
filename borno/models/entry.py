"""Data model for dictionary entries."""

import uuid
from dataclasses import dataclass, field
from typing import Any

LANGUAGES = ("bn", "en")
DEFAULT_LANGUAGE = "bn"

# Python attribute name -> key in the persisted document
FIELD_KEYS: dict[str, str] = {
    "id": "id",
    "word": "word",
    "translation": "translation",
    "phonetic": "phonetic",
    "pronunciation_bn": "pronunciationBn",
    "part_of_speech": "partOfSpeech",
    "meaning": "meaning",
    "description": "description",
    "etymology": "etymology",
    "sandhi": "sandhi",
    "samas": "samas",
    "source": "source",
    "source_word": "sourceWord",
    "synonyms": "synonyms",
    "antonyms": "antonyms",
    "examples": "examples",
    "origin": "origin",
    "language": "language",
}

LIST_FIELDS = ("synonyms", "antonyms", "examples")
STRING_FIELDS = tuple(
    name for name in FIELD_KEYS if name not in LIST_FIELDS and name not in ("id", "language")
)

# Fields filled by the generation service (everything except identity)
CONTENT_FIELDS = tuple(name for name in FIELD_KEYS if name not in ("id", "language"))


def new_entry_id() -> str:
    """Return a fresh opaque entry identifier."""
    return uuid.uuid4().hex


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_text_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    if isinstance(value, (list, tuple)):
        return [_as_text(item) for item in value if item is not None]
    return []


@dataclass
class DictionaryEntry:
    """One headword with its linguistic metadata."""

    id: str
    word: str
    translation: str = ""  # Cross-language equivalent (পরিভাষা)
    phonetic: str = ""  # IPA
    pronunciation_bn: str = ""  # উচ্চারণ
    part_of_speech: str = ""  # পদ
    meaning: str = ""  # অর্থ
    description: str = ""  # বিস্তারিত বিবরণ
    etymology: str = ""  # ব্যুৎপত্তি
    sandhi: str = ""  # সন্ধি
    samas: str = ""  # সমাস
    source: str = ""  # উৎস, e.g. তৎসম, তদ্ভব
    source_word: str = ""  # উৎস শব্দ
    synonyms: list[str] = field(default_factory=list)
    antonyms: list[str] = field(default_factory=list)
    examples: list[str] = field(default_factory=list)
    origin: str = ""  # Legacy etymology note
    language: str = DEFAULT_LANGUAGE

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DictionaryEntry":
        """Build an entry from a persisted document, upgrading older shapes.

        Missing strings become "", missing lists become [], an absent or
        unrecognised language becomes "bn" and unknown keys are dropped.
        A missing id is replaced by a fresh one.

        Args:
            data: Decoded JSON object

        Returns:
            Canonical DictionaryEntry
        """
        values: dict[str, Any] = {}
        for name in STRING_FIELDS:
            values[name] = _as_text(data.get(FIELD_KEYS[name]))
        for name in LIST_FIELDS:
            values[name] = _as_text_list(data.get(FIELD_KEYS[name]))

        language = data.get("language")
        values["language"] = language if language in LANGUAGES else DEFAULT_LANGUAGE

        entry_id = _as_text(data.get("id")).strip()
        values["id"] = entry_id or new_entry_id()
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the canonical persisted document."""
        result: dict[str, Any] = {}
        for name, key in FIELD_KEYS.items():
            value = getattr(self, name)
            result[key] = list(value) if name in LIST_FIELDS else value
        return result

    def copy(self) -> "DictionaryEntry":
        """Return an independent copy (list fields are not shared)."""
        return DictionaryEntry.from_dict(self.to_dict())

    def is_blank(self, name: str) -> bool:
        """Check whether a content field holds no data."""
        value = getattr(self, name)
        if name in LIST_FIELDS:
            return len(value) == 0
        return not value.strip()

    def __str__(self) -> str:
        return f"{self.word}: {self.meaning[:50] if self.meaning else 'No meaning'}"
