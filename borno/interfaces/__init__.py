"""Interface protocols for Borno."""

from .enrichment_provider import EnrichmentProvider
from .presenter import PresenterProtocol
from .speech import SpeechInput, SpeechOutput

__all__ = ["EnrichmentProvider", "PresenterProtocol", "SpeechInput", "SpeechOutput"]
