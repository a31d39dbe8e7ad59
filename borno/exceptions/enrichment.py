"""Entry generation service exceptions."""

from .base import BornoException


class EnrichmentError(BornoException):
    """Raised when the generation service fails or returns unusable content."""

    pass
