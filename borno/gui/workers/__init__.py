"""Background worker threads for GUI."""

from .base_worker import CancellableWorker
from .enrichment_worker import EnrichmentWorkerThread
from .speech_worker import SpeechInputWorkerThread

__all__ = [
    "CancellableWorker",
    "EnrichmentWorkerThread",
    "SpeechInputWorkerThread",
]
