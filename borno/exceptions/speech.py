"""Speech capability exceptions."""

from .base import BornoException


class CapabilityUnavailableError(BornoException):
    """Raised when speech input or output is not supported by the runtime."""

    pass
