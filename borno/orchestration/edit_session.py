"""Draft state for the admin entry editor."""

import logging
import uuid

from borno.exceptions import ValidationError
from borno.models import LANGUAGES, DictionaryEntry, EnrichmentResult, EnrichmentTicket
from borno.models.entry import FIELD_KEYS, LIST_FIELDS
from borno.utils.text_utils import detect_language

logger = logging.getLogger(__name__)


class EditSession:
    """A mutable draft of one entry plus the bookkeeping needed to merge
    AI-generated content into it safely.

    Generated values never replace the headword or any field the user
    has edited in this session. Each generation request gets a ticket;
    a result whose ticket is no longer current (newer request, changed
    headword, closed session) is discarded.
    """

    def __init__(self, entry: DictionaryEntry, is_new: bool = False):
        """Initialize the session.

        Args:
            entry: Entry to edit (copied, never modified in place)
            is_new: True when the entry does not exist in the store yet
        """
        self.draft = entry.copy()
        self.is_new = is_new
        self._touched: set[str] = set()
        self._generation = 0
        self._pending: EnrichmentTicket | None = None
        self._closed = False
        self._session_id = uuid.uuid4().hex

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def is_enriching(self) -> bool:
        return self._pending is not None

    @property
    def touched_fields(self) -> set[str]:
        return set(self._touched)

    def update(self, **changes) -> None:
        """Apply manual edits to the draft.

        Args:
            **changes: DictionaryEntry attribute names and new values

        Raises:
            ValueError: If an unknown or read-only field is given, or a
                list field gets anything but a list of strings
        """
        for name, value in changes.items():
            if name not in FIELD_KEYS or name == "id":
                raise ValueError(f"Cannot edit field: {name}")
            if name == "language" and value not in LANGUAGES:
                raise ValueError(f"Unknown language: {value!r}")
            if name in LIST_FIELDS:
                if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
                    raise ValueError(f"{name} must be a list of strings")
                value = list(value)
            if getattr(self.draft, name) == value:
                continue
            setattr(self.draft, name, value)
            self._touched.add(name)

        if "word" in changes and "language" not in self._touched and self.draft.word.strip():
            self.draft.language = detect_language(self.draft.word)

    def begin_enrichment(self, language_hint: str | None = None) -> EnrichmentTicket:
        """Start a generation request for the draft's current headword.

        Any earlier request becomes stale.

        Raises:
            ValidationError: If the draft has no headword
        """
        word = self.draft.word.strip()
        if not word:
            raise ValidationError("Please enter a word first.")
        hint = language_hint if language_hint in LANGUAGES else detect_language(word)
        self._generation += 1
        self._pending = EnrichmentTicket(
            session_id=self._session_id,
            generation=self._generation,
            word=word,
            language_hint=hint,
        )
        return self._pending

    def is_current(self, ticket: EnrichmentTicket) -> bool:
        """Check whether a ticket's result may still be applied."""
        return (
            not self._closed
            and ticket.session_id == self._session_id
            and ticket.generation == self._generation
            and self.draft.word.strip() == ticket.word
        )

    def apply_enrichment(
        self,
        ticket: EnrichmentTicket,
        result: EnrichmentResult,
        overwrite: bool = False,
    ) -> list[str] | None:
        """Merge generated fields into the draft.

        Args:
            ticket: Ticket returned by begin_enrichment
            result: Validated generation output
            overwrite: Also replace non-empty fields the user has not edited

        Returns:
            Names of the fields that were filled, or None if the result
            was stale and discarded
        """
        if not self.is_current(ticket):
            logger.info(f"Discarding stale generation result for '{ticket.word}'")
            return None

        filled = []
        for name, value in result.fields.items():
            if name == "word" or name in self._touched:
                continue
            if not overwrite and not self.draft.is_blank(name):
                continue
            if not value or getattr(self.draft, name) == value:
                continue
            setattr(self.draft, name, list(value) if isinstance(value, list) else value)
            filled.append(name)

        if "language" not in self._touched:
            self.draft.language = ticket.language_hint

        self._pending = None
        return filled

    def fail_enrichment(self, ticket: EnrichmentTicket) -> bool:
        """Mark a request as finished without a result.

        Returns:
            True if the ticket was current (the failure should be shown)
        """
        if not self.is_current(ticket):
            return False
        self._pending = None
        return True

    def close(self) -> None:
        """End the session; any in-flight result will be discarded."""
        self._closed = True
        self._generation += 1
        self._pending = None
