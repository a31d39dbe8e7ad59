"""Pytest configuration and shared fixtures."""

import pytest

from borno.config import BornoConfig
from borno.models import DictionaryEntry, EnrichmentResult
from borno.orchestration import AppController
from borno.presenters import NullPresenter
from borno.services import EntryStore, FavoritesSet, HistoryLog


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory for test files."""
    return tmp_path


@pytest.fixture
def test_config(temp_dir):
    """Provide a test configuration with temporary paths."""
    return BornoConfig(
        data_dir=temp_dir / "data",
        history_max_items=10,
        gemini_api_key="test-key",
        enrichment_timeout=1.0,
    )


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


class RecordingPresenter:
    """A real PresenterProtocol implementation that records all calls for assertion."""

    def __init__(self):
        self.infos = []
        self.successes = []
        self.warnings = []
        self.errors = []
        self.shown_entries = []
        self.entry_lists = []
        self.histories = []

    def show_info(self, message: str) -> None:
        self.infos.append(message)

    def show_success(self, message: str) -> None:
        self.successes.append(message)

    def show_warning(self, message: str) -> None:
        self.warnings.append(message)

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def show_entries(self, entries, title: str = "") -> None:
        self.entry_lists.append((title, list(entries)))

    def show_entry(self, entry, is_favorite: bool = False) -> None:
        self.shown_entries.append((entry, is_favorite))

    def show_history(self, records) -> None:
        self.histories.append(list(records))


@pytest.fixture
def recording_presenter():
    """Provide a presenter that records all calls for assertion."""
    return RecordingPresenter()


@pytest.fixture
def make_entry():
    """Factory fixture for creating DictionaryEntry instances with sensible defaults."""

    def _make(
        word="Apple",
        entry_id=None,
        translation="",
        meaning="",
        source="",
        language="en",
        **extra,
    ):
        return DictionaryEntry(
            id=entry_id or f"id-{word}",
            word=word,
            translation=translation,
            meaning=meaning,
            source=source,
            language=language,
            **extra,
        )

    return _make


@pytest.fixture
def make_result():
    """Factory fixture for validated enrichment results."""

    def _make(word="Apple", **fields):
        values = {
            "word": word,
            "translation": "আপেল",
            "part_of_speech": "noun (বিশেষ্য)",
            "meaning": "A round fruit",
            "description": "A round fruit with red or green skin.",
            "synonyms": ["Pome"],
            "examples": ["I ate an apple. (আমি একটি আপেল খেয়েছি।)"],
        }
        values.update(fields)
        return EnrichmentResult(word=word, fields=values)

    return _make


@pytest.fixture
def seed_docs():
    """Small seed set used instead of the bundled defaults."""
    return [
        {"id": "apple", "word": "Apple", "language": "en"},
        {"id": "apel", "word": "আপেল", "language": "bn"},
    ]


@pytest.fixture
def entry_store(test_config, seed_docs):
    return EntryStore(test_config.entries_file, seed=seed_docs)


@pytest.fixture
def history_log(test_config):
    return HistoryLog(test_config.history_file, max_items=test_config.history_max_items)


@pytest.fixture
def favorites(test_config):
    return FavoritesSet(test_config.favorites_file)


class FakeEnrichment:
    """EnrichmentProvider double returning a canned result or raising."""

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    @property
    def name(self) -> str:
        return "Fake"

    def is_available(self) -> bool:
        return True

    def generate(self, word, language_hint=None):
        self.calls.append((word, language_hint))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def fake_enrichment():
    return FakeEnrichment()


@pytest.fixture
def controller(test_config, entry_store, history_log, favorites, fake_enrichment, recording_presenter):
    """Controller wired to temporary stores and fake services."""
    return AppController(
        config=test_config,
        entry_store=entry_store,
        history_log=history_log,
        favorites=favorites,
        enrichment=fake_enrichment,
        presenter=recording_presenter,
    )
