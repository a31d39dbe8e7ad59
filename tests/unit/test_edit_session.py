"""Tests for EditSession draft handling and merge policy."""

import pytest

from borno.exceptions import ValidationError
from borno.models import DictionaryEntry
from borno.orchestration.edit_session import EditSession


@pytest.fixture
def session():
    return EditSession(DictionaryEntry(id="d1", word="Apple", language="en"), is_new=True)


class TestUpdate:
    def test_update_marks_touched(self, session):
        session.update(meaning="Fruit")
        assert session.draft.meaning == "Fruit"
        assert "meaning" in session.touched_fields

    def test_unchanged_value_is_not_touched(self, session):
        session.update(word="Apple")
        assert session.touched_fields == set()

    def test_rejects_id(self, session):
        with pytest.raises(ValueError):
            session.update(id="other")

    def test_rejects_unknown_field(self, session):
        with pytest.raises(ValueError):
            session.update(colour="red")

    def test_word_change_redetects_language(self, session):
        session.update(word="আপেল")
        assert session.draft.language == "bn"

    def test_explicit_language_is_kept(self, session):
        session.update(language="bn")
        session.update(word="Pear")
        assert session.draft.language == "bn"

    def test_list_field_accepts_tuple(self, session):
        session.update(synonyms=("Pome", "Malus"))
        assert session.draft.synonyms == ["Pome", "Malus"]
        assert session.draft.to_dict()["synonyms"] == ["Pome", "Malus"]

    @pytest.mark.parametrize("value", ["Pome", ["Pome", 3], None])
    def test_list_field_rejects_non_list(self, session, value):
        with pytest.raises(ValueError, match="synonyms must be a list of strings"):
            session.update(synonyms=value)
        assert session.draft.synonyms == []
        assert "synonyms" not in session.touched_fields

    def test_does_not_modify_source_entry(self):
        entry = DictionaryEntry(id="d1", word="Apple")
        EditSession(entry).update(meaning="Fruit")
        assert entry.meaning == ""


class TestEnrichment:
    def test_begin_requires_word(self):
        session = EditSession(DictionaryEntry(id="d1", word=" "))
        with pytest.raises(ValidationError):
            session.begin_enrichment()

    def test_ticket_carries_word_and_hint(self, session):
        ticket = session.begin_enrichment()
        assert ticket.word == "Apple"
        assert ticket.language_hint == "en"
        assert session.is_enriching

    def test_fills_empty_fields(self, session, make_result):
        ticket = session.begin_enrichment()
        filled = session.apply_enrichment(ticket, make_result())
        assert session.draft.translation == "আপেল"
        assert session.draft.synonyms == ["Pome"]
        assert "meaning" in filled
        assert not session.is_enriching

    def test_word_is_always_preserved(self, session, make_result):
        ticket = session.begin_enrichment()
        session.apply_enrichment(ticket, make_result(word="APPLE"), overwrite=True)
        assert session.draft.word == "Apple"

    def test_touched_fields_are_never_overwritten(self, session, make_result):
        session.update(meaning="My own meaning")
        ticket = session.begin_enrichment()
        session.apply_enrichment(ticket, make_result(), overwrite=True)
        assert session.draft.meaning == "My own meaning"

    def test_existing_values_kept_without_overwrite(self, make_result):
        session = EditSession(DictionaryEntry(id="1", word="Apple", meaning="Old"))
        ticket = session.begin_enrichment()
        session.apply_enrichment(ticket, make_result())
        assert session.draft.meaning == "Old"

    def test_existing_untouched_values_replaced_with_overwrite(self, make_result):
        session = EditSession(DictionaryEntry(id="1", word="Apple", meaning="Old"))
        ticket = session.begin_enrichment()
        session.apply_enrichment(ticket, make_result(), overwrite=True)
        assert session.draft.meaning == "A round fruit"

    def test_newer_request_makes_older_stale(self, session, make_result):
        first = session.begin_enrichment()
        second = session.begin_enrichment()
        assert session.apply_enrichment(first, make_result()) is None
        assert session.draft.meaning == ""
        assert session.apply_enrichment(second, make_result()) is not None

    def test_changed_word_makes_result_stale(self, session, make_result):
        ticket = session.begin_enrichment()
        session.update(word="Pear")
        assert session.apply_enrichment(ticket, make_result()) is None
        assert session.draft.meaning == ""

    def test_closed_session_discards_result(self, session, make_result):
        ticket = session.begin_enrichment()
        session.close()
        assert session.apply_enrichment(ticket, make_result()) is None

    def test_failure_keeps_draft(self, session):
        session.update(meaning="typed")
        ticket = session.begin_enrichment()
        assert session.fail_enrichment(ticket) is True
        assert session.draft.word == "Apple"
        assert session.draft.meaning == "typed"
        assert not session.is_enriching

    def test_stale_failure_is_not_reported(self, session):
        first = session.begin_enrichment()
        session.begin_enrichment()
        assert session.fail_enrichment(first) is False
