"""Worker thread for voice search."""

from PyQt6.QtCore import pyqtSignal

from borno.exceptions import CapabilityUnavailableError
from borno.gui.workers.base_worker import CancellableWorker
from borno.interfaces import SpeechInput


class SpeechInputWorkerThread(CancellableWorker):
    """Captures one utterance in the background.

    Emits transcript_ready(text), to be passed to
    AppController.apply_voice_transcript, or unavailable(message) when
    the runtime has no speech recognition.
    """

    transcript_ready = pyqtSignal(str)
    unavailable = pyqtSignal(str)

    def __init__(self, speech_input: SpeechInput, language: str = "bn-BD", parent=None):
        super().__init__(parent)
        self.speech_input = speech_input
        self.language = language

    def run(self) -> None:
        """Listen in background thread."""
        if self.check_cancelled():
            return
        try:
            transcript = self.speech_input.listen(self.language)
        except CapabilityUnavailableError as e:
            self.emit_unless_cancelled(self.unavailable, str(e))
            return
        except Exception as e:
            self.emit_unless_cancelled(self.error, f"Voice search failed: {e}")
            return

        self.emit_unless_cancelled(self.transcript_ready, transcript)
