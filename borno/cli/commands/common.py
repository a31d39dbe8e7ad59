"""Helpers shared by CLI commands."""

from borno.config import BornoConfig, ConfigManager, create_default_config
from borno.models import DictionaryEntry
from borno.orchestration import AppController, create_controller
from borno.presenters import ConsolePresenter


def load_config(args) -> BornoConfig:
    """Build configuration from the saved config file and CLI options."""
    if getattr(args, "data_dir", None):
        return create_default_config(data_dir=args.data_dir)
    return ConfigManager.load_config()


def build_controller(args) -> AppController:
    return create_controller(load_config(args), presenter=ConsolePresenter())


def find_entry(controller: AppController, word: str) -> DictionaryEntry | None:
    """Find an entry by exact headword, reporting when it is missing."""
    entry = controller.entry_store.find_by_word(word)
    if entry is None:
        controller.presenter.show_error(f"Word not found: {word}")
    return entry
