"""Validation-related exceptions."""

from .base import BornoException


class ValidationError(BornoException):
    """Raised when an entry fails validation and cannot be saved."""

    pass
