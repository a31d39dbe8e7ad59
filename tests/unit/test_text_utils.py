"""Tests for text_utils module."""

from borno.utils.text_utils import (
    contains_bengali,
    detect_language,
    normalize_query,
    strip_code_fences,
)


class TestContainsBengali:
    def test_bengali(self):
        assert contains_bengali("সূর্যমুখী") is True

    def test_mixed(self):
        assert contains_bengali("Sunflower (সূর্যমুখী)") is True

    def test_latin(self):
        assert contains_bengali("Sunflower") is False

    def test_empty(self):
        assert contains_bengali("") is False


class TestDetectLanguage:
    def test_bengali(self):
        assert detect_language("আপেল") == "bn"

    def test_english(self):
        assert detect_language("Apple") == "en"


class TestNormalizeQuery:
    def test_strips_and_casefolds(self):
        assert normalize_query("  ApPle ") == "apple"

    def test_none_and_blank(self):
        assert normalize_query(None) == ""
        assert normalize_query("   ") == ""

    def test_keeps_inner_spacing(self):
        assert normalize_query("ice  cream") == "ice  cream"


class TestStripCodeFences:
    def test_json_fence(self):
        assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_bare_fence(self):
        assert strip_code_fences('```\n{"a": 1}\n```') == '{"a": 1}'

    def test_unfenced(self):
        assert strip_code_fences('  {"a": 1} ') == '{"a": 1}'
