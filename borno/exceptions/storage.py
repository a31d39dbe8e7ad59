"""Local persistence exceptions."""

from .base import BornoException


class PersistenceCorruptionError(BornoException):
    """Raised when a persisted slot cannot be decoded.

    Stores recover from this locally by treating the slot as empty.
    """

    pass
