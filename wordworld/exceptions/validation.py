"""Validation-related exceptions."""

from .base import WordWorldException


class ValidationError(WordWorldException):
    """Raised when input data fails validation."""

    pass


class PayloadError(ValidationError):
    """Raised when a backend payload cannot be mapped onto a model."""

    pass
