"""Base exception classes for WordWorld."""


class WordWorldException(Exception):
    """Base exception for all WordWorld errors.

    All custom exceptions in the wordworld package should inherit
    from this base class for consistent error handling.
    """

    pass
