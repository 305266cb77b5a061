"""Custom exceptions for WordWorld."""

from .api import ApiConnectionError, ApiRequestError, AuthenticationError
from .base import WordWorldException
from .validation import PayloadError, ValidationError

__all__ = [
    "WordWorldException",
    "ValidationError",
    "PayloadError",
    "ApiConnectionError",
    "ApiRequestError",
    "AuthenticationError",
]
