"""Protocol for AI entry generation backends."""

from typing import Protocol

from borno.models import EnrichmentResult


class EnrichmentProvider(Protocol):
    """Interface for a service that fills in an entry from its headword.

    Any generation backend implements this protocol so the controller
    and workers can use it without knowing the transport.
    """

    @property
    def name(self) -> str:
        """Human-readable name for this provider."""
        ...

    def is_available(self) -> bool:
        """Check if this provider is configured and ready."""
        ...

    def generate(self, word: str, language_hint: str | None = None) -> EnrichmentResult:
        """Generate entry fields for a word.

        Args:
            word: Headword to describe
            language_hint: "bn" or "en"

        Returns:
            Validated entry fields (no id or language)

        Raises:
            EnrichmentError: If generation fails for any reason
        """
        ...
