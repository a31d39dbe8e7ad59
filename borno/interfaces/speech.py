"""Protocols for speech input and output."""

from typing import Protocol


class SpeechOutput(Protocol):
    """Text-to-speech backend (fire-and-forget)."""

    def is_available(self) -> bool: ...

    def speak(self, text: str, language: str = "bn") -> None:
        """Speak text aloud.

        Raises:
            CapabilityUnavailableError: If speech output is unsupported
        """
        ...


class SpeechInput(Protocol):
    """Speech-to-text backend producing one transcript per call."""

    def is_available(self) -> bool: ...

    def listen(self, language: str = "bn-BD") -> str:
        """Capture one utterance and return its transcript.

        Raises:
            CapabilityUnavailableError: If speech input is unsupported
        """
        ...
