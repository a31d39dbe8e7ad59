"""Base exception classes for Borno."""


class BornoException(Exception):
    """Base exception for all Borno errors.

    All custom exceptions in the borno package should inherit
    from this base class for consistent error handling.
    """

    pass
