"""Tests for speech backends."""

from unittest.mock import MagicMock

import pytest

from borno.exceptions import CapabilityUnavailableError
from borno.services.speech_service import NullSpeechOutput, QtSpeechOutput, UnavailableSpeechInput


class TestUnavailableSpeechInput:
    def test_not_available(self):
        assert UnavailableSpeechInput().is_available() is False

    def test_listen_raises(self):
        with pytest.raises(CapabilityUnavailableError, match="type your word"):
            UnavailableSpeechInput().listen()


class TestNullSpeechOutput:
    def test_speak_raises(self):
        output = NullSpeechOutput()
        assert output.is_available() is False
        with pytest.raises(CapabilityUnavailableError):
            output.speak("Apple")


class TestQtSpeechOutput:
    @pytest.fixture
    def engine(self):
        pytest.importorskip("PyQt6.QtCore")
        engine = MagicMock()
        engine.availableLocales.return_value = []
        return engine

    def test_blank_text_is_ignored(self):
        output = QtSpeechOutput()
        output.speak("   ")
        assert output._engine is None

    def test_speaks_with_engine(self, engine):
        output = QtSpeechOutput()
        output._engine = engine
        output.speak("আপেল", "bn")
        engine.say.assert_called_once_with("আপেল")

    def test_sets_matching_locale(self, engine):
        from PyQt6.QtCore import QLocale

        engine.availableLocales.return_value = [QLocale(QLocale.Language.English)]
        output = QtSpeechOutput()
        output._engine = engine
        output.speak("Apple", "en")
        engine.setLocale.assert_called_once()

    def test_stop_without_engine(self):
        QtSpeechOutput().stop()
