"""Factory wiring the stores and services into a controller."""

import logging

from borno.config import BornoConfig
from borno.interfaces import PresenterProtocol, SpeechInput, SpeechOutput
from borno.orchestration.app_controller import AppController
from borno.services.enrichment_client import EnrichmentClient
from borno.services.entry_store import EntryStore
from borno.services.favorites_set import FavoritesSet
from borno.services.history_log import HistoryLog
from borno.services.speech_service import QtSpeechOutput, UnavailableSpeechInput

logger = logging.getLogger(__name__)


def create_stores(config: BornoConfig) -> tuple[EntryStore, HistoryLog, FavoritesSet]:
    """Create the three persistent stores, each on its own slot.

    Args:
        config: Application configuration

    Returns:
        Tuple of (entry_store, history_log, favorites)
    """
    entry_store = EntryStore(config.entries_file)
    history_log = HistoryLog(config.history_file, max_items=config.history_max_items)
    favorites = FavoritesSet(config.favorites_file)
    return entry_store, history_log, favorites


def create_controller(
    config: BornoConfig,
    presenter: PresenterProtocol | None = None,
    speech_output: SpeechOutput | None = None,
    speech_input: SpeechInput | None = None,
) -> AppController:
    """Create an AppController with all required services.

    Args:
        config: Application configuration
        presenter: Output presenter for messages
        speech_output: Text-to-speech backend (defaults to QtSpeechOutput,
            which reports itself unavailable without a running Qt app)
        speech_input: Speech-to-text backend (defaults to UnavailableSpeechInput)

    Returns:
        Configured AppController instance
    """
    entry_store, history_log, favorites = create_stores(config)

    try:
        changed = favorites.reconcile(entry_store)
        if changed:
            logger.info(f"Upgraded {changed} favorite(s) to entry ids")
    except OSError as e:
        logger.warning(f"Could not upgrade favorites: {e}")

    return AppController(
        config=config,
        entry_store=entry_store,
        history_log=history_log,
        favorites=favorites,
        enrichment=EnrichmentClient(config),
        speech_output=speech_output or QtSpeechOutput(),
        speech_input=speech_input or UnavailableSpeechInput(),
        presenter=presenter,
    )
