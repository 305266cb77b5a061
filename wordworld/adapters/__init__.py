"""Mapping between backend wire payloads and WordWorld models."""

from .wire import (
    parse_datetime,
    profile_from_payload,
    recommendation_to_payload,
    session_from_payload,
    session_to_payload,
    word_from_payload,
)

__all__ = [
    "parse_datetime",
    "word_from_payload",
    "profile_from_payload",
    "session_from_payload",
    "session_to_payload",
    "recommendation_to_payload",
]
