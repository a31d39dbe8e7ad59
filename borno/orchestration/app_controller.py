"""Application controller coordinating views, stores and services."""

import logging
from dataclasses import dataclass

from borno.config import BornoConfig
from borno.exceptions import CapabilityUnavailableError, EnrichmentError, ValidationError
from borno.interfaces import EnrichmentProvider, PresenterProtocol, SpeechInput, SpeechOutput
from borno.models import (
    DictionaryEntry,
    EnrichmentResult,
    EnrichmentTicket,
    View,
    new_entry_id,
)
from borno.orchestration.edit_session import EditSession
from borno.presenters import NullPresenter
from borno.services.entry_store import EntryStore
from borno.services.favorites_set import FavoritesSet
from borno.services.history_log import HistoryLog
from borno.utils.text_utils import detect_language

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StudyTopic:
    """A home-screen shortcut that runs a preset search."""

    id: str
    label: str
    subtitle: str
    query: str


STUDY_TOPICS = (
    StudyTopic("grammar", "ব্যাকরণ", "সমাস, সন্ধি ও কারক", "সমাস"),
    StudyTopic("science", "বিজ্ঞান", "পারিভাষিক শব্দাবলী", "কোষ"),
    StudyTopic("literature", "সাহিত্য", "অলঙ্কার ও ছন্দ", "অলঙ্কার"),
    StudyTopic("idioms", "বাগধারা", "প্রবাদ ও প্রবচন", "বাগধারা"),
)


class AppController:
    """Coordinate user actions with the dictionary stores.

    Holds the current view, query, search results, selected entry and the
    admin edit session. Store and service failures are reported through
    the presenter; methods signal failure through their return value
    instead of raising.
    """

    def __init__(
        self,
        config: BornoConfig,
        entry_store: EntryStore,
        history_log: HistoryLog,
        favorites: FavoritesSet,
        enrichment: EnrichmentProvider | None = None,
        speech_output: SpeechOutput | None = None,
        speech_input: SpeechInput | None = None,
        presenter: PresenterProtocol | None = None,
    ):
        """Initialize the controller.

        Args:
            config: Application configuration
            entry_store: Store owning dictionary entries
            history_log: Recent-search history
            favorites: Favorite entries
            enrichment: Optional AI entry generator
            speech_output: Optional text-to-speech backend
            speech_input: Optional speech-to-text backend
            presenter: Output presenter (defaults to NullPresenter)
        """
        self.config = config
        self.entry_store = entry_store
        self.history_log = history_log
        self.favorites = favorites
        self.enrichment = enrichment
        self.speech_output = speech_output
        self.speech_input = speech_input
        self.presenter = presenter or NullPresenter()

        self.view = View.HOME
        self.query = ""
        self.results: list[DictionaryEntry] = []
        self.selected: DictionaryEntry | None = None
        self.edit_session: EditSession | None = None

    # ------------------------------------------------------------------
    # Search and details
    # ------------------------------------------------------------------

    def set_query(self, text: str) -> list[DictionaryEntry]:
        """Update the search text and refresh results.

        A non-empty query switches to the search results view; clearing
        the query from the results view returns home.

        Args:
            text: Query text, typed or transcribed

        Returns:
            Current search results
        """
        self.query = text or ""
        if self.query.strip():
            try:
                self.results = self.entry_store.search(self.query)
            except OSError as e:
                self._report_store_error("search the dictionary", e)
                self.results = []
            if self.view in (View.HOME, View.DETAILS):
                self.view = View.SEARCH_RESULTS
        else:
            self.results = []
            if self.view == View.SEARCH_RESULTS:
                self.view = View.HOME
        return self.results

    def select_entry(self, entry: DictionaryEntry | str) -> DictionaryEntry | None:
        """Show an entry's details, recording it in history first.

        Args:
            entry: The entry or its id

        Returns:
            The displayed entry, or None if it no longer exists
        """
        entry_id = entry if isinstance(entry, str) else entry.id
        try:
            live = self.entry_store.get(entry_id)
        except OSError as e:
            self._report_store_error("open this word", e)
            return None
        if live is None:
            self.presenter.show_error("This word is no longer in the dictionary.")
            return None

        try:
            self.history_log.record(live)
        except OSError as e:
            logger.warning(f"Could not record history for {live.word}: {e}")
            self.presenter.show_warning("Could not save search history.")

        self.selected = live
        self.view = View.DETAILS
        self.presenter.show_entry(live, is_favorite=self.favorites.is_favorite(live.id))
        return live

    def back(self) -> None:
        """Leave the details view and clear the search."""
        if self.view == View.DETAILS:
            self.view = View.HOME
            self.selected = None
            self.query = ""
            self.results = []

    def study_topics(self) -> tuple[StudyTopic, ...]:
        return STUDY_TOPICS

    def select_topic(self, topic_id: str) -> list[DictionaryEntry] | None:
        """Run a study topic's preset search.

        Returns:
            Search results, or None for an unknown topic
        """
        for topic in STUDY_TOPICS:
            if topic.id == topic_id:
                return self.set_query(topic.query)
        self.presenter.show_warning(f"Unknown topic: {topic_id}")
        return None

    # ------------------------------------------------------------------
    # Favorites and history
    # ------------------------------------------------------------------

    def toggle_favorite(self, entry: DictionaryEntry | None = None) -> bool:
        """Toggle favorite state of an entry (the selected one by default).

        Returns:
            New favorite state (False if there was nothing to toggle)
        """
        target = entry or self.selected
        if target is None:
            return False
        try:
            state = self.favorites.toggle(target.id)
        except OSError as e:
            self.presenter.show_error(f"Could not save favorites: {e}")
            return self.favorites.is_favorite(target.id)
        self.presenter.show_info(
            f"{target.word} added to favorites" if state else f"{target.word} removed from favorites"
        )
        return state

    def is_favorite(self, entry: DictionaryEntry) -> bool:
        return self.favorites.is_favorite(entry.id)

    def favorite_entries(self) -> list[DictionaryEntry]:
        """Get favorite entries, most recently added first."""
        try:
            found = [self.entry_store.get(key) for key in self.favorites.list()]
        except OSError as e:
            self._report_store_error("load favorites", e)
            return []
        return [entry for entry in found if entry is not None]

    def history_entries(self) -> list[DictionaryEntry]:
        """Get recently viewed entries, most recent first."""
        try:
            return self.history_log.resolve(self.entry_store)
        except OSError as e:
            self._report_store_error("load history", e)
            return []

    def clear_history(self) -> None:
        try:
            self.history_log.clear()
        except OSError as e:
            self.presenter.show_error(f"Could not clear history: {e}")

    # ------------------------------------------------------------------
    # Admin list and editor
    # ------------------------------------------------------------------

    def open_admin(self) -> list[DictionaryEntry]:
        self.view = View.ADMIN_LIST
        return self.admin_entries()

    def close_admin(self) -> None:
        """Leave the admin screens, discarding any open draft."""
        self._end_session()
        self.view = View.HOME

    def admin_entries(self, filter_text: str = "") -> list[DictionaryEntry]:
        """List entries for the admin screen, filtered by headword."""
        needle = filter_text.strip().casefold()
        try:
            entries = self.entry_store.list()
        except OSError as e:
            self._report_store_error("load the dictionary", e)
            return []
        if not needle:
            return entries
        return [e for e in entries if needle in e.word.casefold()]

    def new_entry(self, word: str = "") -> EditSession:
        """Open the editor on a blank entry."""
        word = word.strip()
        entry = DictionaryEntry(
            id=new_entry_id(),
            word=word,
            language=detect_language(word) if word else "bn",
        )
        return self._open_session(entry, is_new=True)

    def edit_entry(self, entry_id: str) -> EditSession | None:
        """Open the editor on an existing entry.

        Returns:
            The session, or None if the entry does not exist
        """
        try:
            entry = self.entry_store.get(entry_id)
        except OSError as e:
            self._report_store_error("open this word", e)
            return None
        if entry is None:
            self.presenter.show_error("This word is no longer in the dictionary.")
            return None
        return self._open_session(entry, is_new=False)

    def update_draft(self, **changes) -> bool:
        """Apply manual edits to the open draft.

        Returns:
            True if the edits were applied
        """
        if self.edit_session is None:
            return False
        try:
            self.edit_session.update(**changes)
        except ValueError as e:
            self.presenter.show_error(str(e))
            return False
        return True

    def save_draft(self) -> DictionaryEntry | None:
        """Commit the draft to the entry store and return to the admin list.

        Returns:
            The saved entry, or None if nothing was saved
        """
        session = self.edit_session
        if session is None:
            return None
        try:
            saved = self.entry_store.save(session.draft)
        except ValidationError as e:
            self.presenter.show_error(str(e))
            return None
        except OSError as e:
            self.presenter.show_error(f"Could not save {session.draft.word}: {e}")
            return None

        self._end_session()
        self.view = View.ADMIN_LIST
        if self.selected is not None and self.selected.id == saved.id:
            self.selected = saved
        self.presenter.show_success(f"Saved {saved.word}")
        return saved

    def cancel_edit(self) -> None:
        """Discard the draft without saving."""
        self._end_session()
        if self.view == View.ADMIN_EDIT:
            self.view = View.ADMIN_LIST

    def delete_entry(self, entry_id: str) -> bool:
        """Delete an entry along with its favorite and history records.

        Returns:
            True if the entry existed
        """
        try:
            removed = self.entry_store.delete(entry_id)
            self.favorites.remove(entry_id)
            self.history_log.remove(entry_id)
        except OSError as e:
            self.presenter.show_error(f"Could not delete entry: {e}")
            return False

        if self.selected is not None and self.selected.id == entry_id:
            self.selected = None
            if self.view == View.DETAILS:
                self.view = View.HOME
        self.results = [e for e in self.results if e.id != entry_id]
        return removed

    # ------------------------------------------------------------------
    # AI enrichment
    # ------------------------------------------------------------------

    def start_enrichment(self, language_hint: str | None = None) -> EnrichmentTicket | None:
        """Begin generating the open draft's fields.

        The caller runs the provider (e.g. on a worker thread) and passes
        the outcome to finish_enrichment or fail_enrichment.

        Returns:
            Ticket for the request, or None if it could not start
        """
        session = self.edit_session
        if session is None:
            return None
        if self.enrichment is None or not self.enrichment.is_available():
            self.presenter.show_error("AI generation is not configured.")
            return None
        try:
            ticket = session.begin_enrichment(language_hint)
        except ValidationError as e:
            self.presenter.show_error(str(e))
            return None
        self.presenter.show_info(f"Generating entry for {ticket.word}...")
        return ticket

    def finish_enrichment(
        self,
        ticket: EnrichmentTicket,
        result: EnrichmentResult,
        overwrite: bool = False,
    ) -> list[str] | None:
        """Merge a generation result into the draft if still relevant.

        Returns:
            Names of filled fields, or None if the result was discarded
        """
        session = self.edit_session
        if session is None:
            logger.info(f"Editor closed, discarding generated entry for '{ticket.word}'")
            return None
        filled = session.apply_enrichment(ticket, result, overwrite=overwrite)
        if filled is None:
            return None
        if filled:
            self.presenter.show_success(f"Filled {len(filled)} field(s) for {ticket.word}")
        else:
            self.presenter.show_info("No empty fields to fill")
        return filled

    def fail_enrichment(self, ticket: EnrichmentTicket, error: EnrichmentError | str) -> None:
        """Report a failed generation request; the draft is left unchanged."""
        session = self.edit_session
        if session is None or not session.fail_enrichment(ticket):
            logger.debug(f"Ignoring failure of stale request for '{ticket.word}'")
            return
        logger.warning(f"Generation failed for '{ticket.word}': {error}")
        self.presenter.show_error(f"AI generation failed: {error}. Please try again.")

    def enrich_draft(self, language_hint: str | None = None, overwrite: bool = False) -> bool:
        """Generate the draft's fields synchronously.

        Returns:
            True if generated fields were merged into the draft
        """
        ticket = self.start_enrichment(language_hint)
        if ticket is None or self.enrichment is None:
            return False
        try:
            result = self.enrichment.generate(ticket.word, ticket.language_hint)
        except EnrichmentError as e:
            self.fail_enrichment(ticket, e)
            return False
        return self.finish_enrichment(ticket, result, overwrite=overwrite) is not None

    # ------------------------------------------------------------------
    # Speech
    # ------------------------------------------------------------------

    def listen(self) -> bool:
        """Capture a spoken query and search for it.

        Returns:
            True if a transcript was received
        """
        if self.speech_input is None:
            self.presenter.show_info("Voice search is not supported here.")
            return False
        try:
            transcript = self.speech_input.listen(self.config.speech_input_language)
        except CapabilityUnavailableError as e:
            self.presenter.show_info(str(e))
            return False
        self.apply_voice_transcript(transcript)
        return True

    def apply_voice_transcript(self, transcript: str) -> list[DictionaryEntry]:
        """Use a speech transcript exactly like typed query text."""
        return self.set_query(transcript.strip())

    def speak(self, text: str, language: str | None = None) -> None:
        """Speak text aloud; unavailability is reported, not raised."""
        if self.speech_output is None:
            self.presenter.show_info("Text-to-speech is not supported here.")
            return
        try:
            self.speech_output.speak(text, language or detect_language(text))
        except CapabilityUnavailableError as e:
            self.presenter.show_info(str(e))

    def speak_entry(self, entry: DictionaryEntry | None = None) -> None:
        target = entry or self.selected
        if target is not None:
            self.speak(target.word, target.language)

    # ------------------------------------------------------------------

    def _open_session(self, entry: DictionaryEntry, is_new: bool) -> EditSession:
        self._end_session()
        self.edit_session = EditSession(entry, is_new=is_new)
        self.view = View.ADMIN_EDIT
        return self.edit_session

    def _end_session(self) -> None:
        if self.edit_session is not None:
            self.edit_session.close()
            self.edit_session = None

    def _report_store_error(self, action: str, error: OSError) -> None:
        logger.warning(f"Could not {action}: {error}")
        self.presenter.show_error(f"Could not {action}: {error}")
