"""Tests for data model classes."""

from borno.models import DictionaryEntry, HistoryRecord


class TestDictionaryEntryFromDict:
    """Tests for reading persisted entry documents."""

    def test_full_document(self):
        entry = DictionaryEntry.from_dict(
            {
                "id": "7",
                "word": "বই",
                "translation": "Book",
                "pronunciationBn": "বোই",
                "partOfSpeech": "বিশেষ্য",
                "sourceWord": "বহি",
                "synonyms": ["পুস্তক", "গ্রন্থ"],
                "language": "bn",
            }
        )
        assert entry.id == "7"
        assert entry.word == "বই"
        assert entry.pronunciation_bn == "বোই"
        assert entry.part_of_speech == "বিশেষ্য"
        assert entry.source_word == "বহি"
        assert entry.synonyms == ["পুস্তক", "গ্রন্থ"]

    def test_missing_fields_get_defaults(self):
        entry = DictionaryEntry.from_dict({"id": "1", "word": "Serendipity"})
        assert entry.meaning == ""
        assert entry.etymology == ""
        assert entry.synonyms == []
        assert entry.antonyms == []
        assert entry.examples == []

    def test_missing_language_defaults_to_bengali(self):
        entry = DictionaryEntry.from_dict({"id": "1", "word": "Serendipity"})
        assert entry.language == "bn"

    def test_unknown_language_defaults_to_bengali(self):
        entry = DictionaryEntry.from_dict({"id": "1", "word": "x", "language": "fr"})
        assert entry.language == "bn"

    def test_null_arrays_become_empty(self):
        entry = DictionaryEntry.from_dict({"id": "1", "word": "x", "antonyms": None})
        assert entry.antonyms == []

    def test_string_array_is_wrapped(self):
        entry = DictionaryEntry.from_dict({"id": "1", "word": "x", "synonyms": "Chance"})
        assert entry.synonyms == ["Chance"]

    def test_duplicates_and_order_preserved(self):
        entry = DictionaryEntry.from_dict({"id": "1", "word": "x", "synonyms": ["b", "a", "b"]})
        assert entry.synonyms == ["b", "a", "b"]

    def test_unknown_keys_are_dropped(self):
        entry = DictionaryEntry.from_dict({"id": "1", "word": "x", "rating": 5})
        assert "rating" not in entry.to_dict()

    def test_missing_id_is_generated(self):
        entry = DictionaryEntry.from_dict({"word": "x"})
        assert entry.id


class TestDictionaryEntryToDict:
    """Tests for serializing entries."""

    def test_uses_camel_case_keys(self):
        entry = DictionaryEntry(id="1", word="x", part_of_speech="noun", pronunciation_bn="এক্স")
        doc = entry.to_dict()
        assert doc["partOfSpeech"] == "noun"
        assert doc["pronunciationBn"] == "এক্স"
        assert "part_of_speech" not in doc

    def test_all_array_fields_present(self):
        doc = DictionaryEntry(id="1", word="x").to_dict()
        assert doc["synonyms"] == []
        assert doc["antonyms"] == []
        assert doc["examples"] == []


class TestDictionaryEntryHelpers:
    def test_copy_does_not_share_lists(self):
        entry = DictionaryEntry(id="1", word="x", synonyms=["a"])
        clone = entry.copy()
        clone.synonyms.append("b")
        assert entry.synonyms == ["a"]

    def test_is_blank(self):
        entry = DictionaryEntry(id="1", word="x", meaning="  ", synonyms=["a"])
        assert entry.is_blank("meaning") is True
        assert entry.is_blank("synonyms") is False
        assert entry.is_blank("examples") is True

    def test_str_shows_word(self):
        assert "Apple" in str(DictionaryEntry(id="1", word="Apple", meaning="fruit"))


class TestHistoryRecord:
    """Tests for reading history records of every stored shape."""

    def test_current_shape(self):
        record = HistoryRecord.from_dict(
            {"id": "1", "word": "Apple", "timestamp": "2024-01-01T00:00:00+00:00"}
        )
        assert record.entry_id == "1"
        assert record.timestamp == "2024-01-01T00:00:00+00:00"

    def test_legacy_word_with_millisecond_timestamp(self):
        record = HistoryRecord.from_dict({"word": "Apple", "timestamp": 1704067200000})
        assert record.entry_id == ""
        assert record.word == "Apple"
        assert record.timestamp.startswith("2024-01-01T00:00:00")

    def test_legacy_full_snapshot(self):
        record = HistoryRecord.from_dict(
            {"id": "2", "word": "সূর্যমুখী", "meaning": "Sunflower", "synonyms": []}
        )
        assert record.entry_id == "2"
        assert record.word == "সূর্যমুখী"
        assert record.timestamp

    def test_unusable_document(self):
        assert HistoryRecord.from_dict({"timestamp": 1}) is None

    def test_round_trip_keys(self):
        record = HistoryRecord(entry_id="1", word="Apple", timestamp="t")
        assert record.to_dict() == {"id": "1", "word": "Apple", "timestamp": "t"}
