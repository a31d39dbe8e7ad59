"""Presenter protocol for output abstraction."""

from typing import Protocol

from borno.models import DictionaryEntry, HistoryRecord


class PresenterProtocol(Protocol):
    """Interface for presenting output to user (CLI, GUI, etc).

    This protocol abstracts all output operations, allowing the same
    controller logic to work with different presentation layers.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        ...

    def show_success(self, message: str) -> None:
        """Display a success message."""
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        ...

    def show_error(self, message: str) -> None:
        """Display an error message."""
        ...

    def show_entries(self, entries: list[DictionaryEntry], title: str = "") -> None:
        """Display a list of entries (search results, favorites, ...)."""
        ...

    def show_entry(self, entry: DictionaryEntry, is_favorite: bool = False) -> None:
        """Display the full details of one entry."""
        ...

    def show_history(self, records: list[HistoryRecord]) -> None:
        """Display recent-search history."""
        ...
