"""Data models for AI-assisted entry generation."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class EnrichmentTicket:
    """Identifies one generation request against an edit session.

    A result is only applied to the session that issued it, and only if
    that session is still on the same generation with its draft
    targeting the same word.
    """

    session_id: str
    generation: int
    word: str
    language_hint: str


@dataclass
class EnrichmentResult:
    """Validated fields returned by the generation service.

    Keys of ``fields`` are DictionaryEntry attribute names.
    """

    word: str
    fields: dict[str, str | list[str]] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"EnrichmentResult({self.word}, {len(self.fields)} fields)"
