"""Worker thread for AI entry generation."""

from PyQt6.QtCore import pyqtSignal

from borno.exceptions import EnrichmentError
from borno.gui.workers.base_worker import CancellableWorker
from borno.interfaces import EnrichmentProvider
from borno.models import EnrichmentTicket


class EnrichmentWorkerThread(CancellableWorker):
    """Runs one generation request off the UI thread.

    Emits result_ready(ticket, result) or failed(ticket, message). Hand
    both to AppController.finish_enrichment / fail_enrichment, which drop
    results for drafts that have moved on. A cancelled worker emits
    nothing.
    """

    result_ready = pyqtSignal(object, object)  # EnrichmentTicket, EnrichmentResult
    failed = pyqtSignal(object, str)  # EnrichmentTicket, message

    def __init__(self, provider: EnrichmentProvider, ticket: EnrichmentTicket, parent=None):
        """Initialize the enrichment worker thread.

        Args:
            provider: Generation backend
            ticket: Ticket from AppController.start_enrichment
            parent: Optional parent QObject
        """
        super().__init__(parent)
        self.provider = provider
        self.ticket = ticket

    def run(self) -> None:
        """Execute generation in background thread."""
        if self.check_cancelled():
            return
        try:
            result = self.provider.generate(self.ticket.word, self.ticket.language_hint)
        except EnrichmentError as e:
            self.emit_unless_cancelled(self.failed, self.ticket, str(e))
            return
        except Exception as e:
            self.emit_unless_cancelled(self.failed, self.ticket, f"Unexpected error: {e}")
            return

        self.emit_unless_cancelled(self.result_ready, self.ticket, result)
