"""Null presenter for testing (no output)."""

from borno.models import DictionaryEntry, HistoryRecord


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_success(self, message: str) -> None:
        """Display a success message (no-op)."""
        pass

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_entries(self, entries: list[DictionaryEntry], title: str = "") -> None:
        """Display a list of entries (no-op)."""
        pass

    def show_entry(self, entry: DictionaryEntry, is_favorite: bool = False) -> None:
        """Display one entry (no-op)."""
        pass

    def show_history(self, records: list[HistoryRecord]) -> None:
        """Display history (no-op)."""
        pass
