"""Interface protocols for WordWorld."""

from .presenter import PresenterProtocol
from .random_source import RandomSource

__all__ = ["PresenterProtocol", "RandomSource"]
