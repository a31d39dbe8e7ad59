"""Console presenter for CLI output."""

from borno.models import DictionaryEntry, HistoryRecord

# (attribute, label) pairs shown in the details view
_DETAIL_FIELDS = [
    ("translation", "পরিভাষা / Translation"),
    ("pronunciation_bn", "উচ্চারণ"),
    ("part_of_speech", "পদ"),
    ("meaning", "অর্থ"),
    ("description", "বিস্তারিত"),
    ("etymology", "ব্যুৎপত্তি"),
    ("sandhi", "সন্ধি"),
    ("samas", "সমাস"),
    ("source", "উৎস"),
    ("source_word", "উৎস শব্দ"),
    ("origin", "Origin"),
]


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_entries(self, entries: list[DictionaryEntry], title: str = "") -> None:
        """Display a list of entries."""
        if title:
            print(f"\n{title} ({len(entries)}):")
            print("=" * 60)
        if not entries:
            print("  No words found.")
            return
        for i, entry in enumerate(entries, 1):
            gloss = entry.translation or entry.meaning
            print(f"{i:3d}. {entry.word:20s} {gloss[:50]}")

    def show_entry(self, entry: DictionaryEntry, is_favorite: bool = False) -> None:
        """Display the full details of one entry."""
        star = " *" if is_favorite else ""
        print(f"\n{entry.word}{star}")
        if entry.phonetic:
            print(f"  {entry.phonetic}")
        print("-" * 60)

        for name, label in _DETAIL_FIELDS:
            value = getattr(entry, name)
            if value:
                print(f"  {label}: {value}")

        if entry.synonyms:
            print(f"  সমার্থক / Synonyms: {', '.join(entry.synonyms)}")
        if entry.antonyms:
            print(f"  বিপরীত / Antonyms: {', '.join(entry.antonyms)}")
        if entry.examples:
            print("  উদাহরণ / Examples:")
            for example in entry.examples:
                print(f"    - {example}")

    def show_history(self, records: list[HistoryRecord]) -> None:
        """Display recent-search history."""
        print(f"\nRecent searches ({len(records)}):")
        if not records:
            print("  History is empty.")
            return
        for i, record in enumerate(records, 1):
            print(f"{i:3d}. {record.word:20s} {record.timestamp[:19]}")
