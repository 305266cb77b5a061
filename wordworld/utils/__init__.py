"""Utility functions for WordWorld."""

from .number_utils import round_half_up
from .time_utils import days_between, to_utc

__all__ = [
    "round_half_up",
    "days_between",
    "to_utc",
]
