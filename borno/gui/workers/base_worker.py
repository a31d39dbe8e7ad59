"""Base class for cancellable worker threads."""

import threading

from PyQt6.QtCore import QThread, pyqtSignal


class CancellableWorker(QThread):
    """Worker thread whose signals go quiet once cancelled.

    The blocking call a subclass makes in run() is never interrupted.
    Cancelling only guarantees that no signal is emitted afterwards, so a
    UI that has moved on never receives a late reply.
    """

    # Unexpected failure, with a user-facing message
    error = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._cancel_event = threading.Event()

    def cancel(self) -> None:
        """Stop any further signals from this worker."""
        self._cancel_event.set()

    def check_cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def emit_unless_cancelled(self, signal, *args) -> bool:
        """Emit a bound signal unless the worker has been cancelled.

        Returns:
            True if the signal was emitted
        """
        if self.check_cancelled():
            return False
        signal.emit(*args)
        return True
