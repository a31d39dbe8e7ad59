"""Speech input/output backends."""

import logging

from borno.exceptions import CapabilityUnavailableError

logger = logging.getLogger(__name__)


class QtSpeechOutput:
    """Text-to-speech through Qt's QtTextToSpeech module.

    Implements the SpeechOutput protocol. The engine is created lazily on
    first use and needs a running Qt application.
    """

    def __init__(self):
        self._engine = None

    def is_available(self) -> bool:
        try:
            self._get_engine()
        except CapabilityUnavailableError:
            return False
        return True

    def speak(self, text: str, language: str = "bn") -> None:
        """Queue text for speaking; returns immediately.

        Args:
            text: Text to speak
            language: "bn" or "en"

        Raises:
            CapabilityUnavailableError: If no speech engine can be used
        """
        if not text.strip():
            return
        engine = self._get_engine()

        from PyQt6.QtCore import QLocale

        locale = QLocale(
            QLocale.Language.Bengali if language == "bn" else QLocale.Language.English
        )
        if any(loc.language() == locale.language() for loc in engine.availableLocales()):
            engine.setLocale(locale)
        else:
            logger.debug(f"No voice for {language}, using engine default")
        engine.say(text)

    def stop(self) -> None:
        if self._engine is not None:
            self._engine.stop()

    def _get_engine(self):
        if self._engine is not None:
            return self._engine
        try:
            from PyQt6.QtCore import QCoreApplication
            from PyQt6.QtTextToSpeech import QTextToSpeech
        except ImportError as e:
            raise CapabilityUnavailableError("Text-to-speech is not supported here") from e

        if QCoreApplication.instance() is None:
            raise CapabilityUnavailableError("Text-to-speech needs a running Qt application")
        if not QTextToSpeech.availableEngines():
            raise CapabilityUnavailableError("No text-to-speech engine is installed")

        self._engine = QTextToSpeech()
        return self._engine


class UnavailableSpeechInput:
    """Speech input backend for runtimes without speech recognition.

    Implements the SpeechInput protocol.
    """

    def is_available(self) -> bool:
        return False

    def listen(self, language: str = "bn-BD") -> str:
        raise CapabilityUnavailableError(
            "Voice search is not supported here. Please type your word instead."
        )


class NullSpeechOutput:
    """Speech output backend that reports speech as unsupported."""

    def is_available(self) -> bool:
        return False

    def speak(self, text: str, language: str = "bn") -> None:
        raise CapabilityUnavailableError("Text-to-speech is not supported here")
