"""Backend API related exceptions."""

from .base import WordWorldException


class ApiConnectionError(WordWorldException):
    """Raised when the backend API cannot be reached."""

    pass


class ApiRequestError(WordWorldException):
    """Raised when the backend API answers with an error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class AuthenticationError(ApiRequestError):
    """Raised when the backend rejects the auth token (HTTP 401)."""

    pass
