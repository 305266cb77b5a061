"""Convert backend snake_case JSON payloads to models and back.

The backend speaks snake_case JSON. Models keep one canonical shape, so
all renaming and defaulting for missing fields happens here.
"""

from datetime import datetime
from enum import Enum
from typing import Any, TypeVar

from wordworld.exceptions import PayloadError
from wordworld.models import (
    Difficulty,
    EngagementLevel,
    LearnerProfile,
    LearningSession,
    LearningStyle,
    Recommendation,
    TimeOfDay,
    Word,
)

E = TypeVar("E", bound=Enum)


def parse_datetime(value: str | None) -> datetime | None:
    """Parse an ISO-8601 timestamp (a trailing 'Z' is accepted)."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (TypeError, ValueError) as e:
        raise PayloadError(f"Invalid timestamp: {value!r}") from e


def _enum(enum_cls: type[E], value: Any, default: E | None = None) -> E | None:
    if value is None:
        return default
    try:
        return enum_cls(value)
    except ValueError as e:
        raise PayloadError(f"Invalid {enum_cls.__name__} value: {value!r}") from e


def _require(payload: dict[str, Any], key: str) -> Any:
    try:
        return payload[key]
    except KeyError as e:
        raise PayloadError(f"Payload is missing required field '{key}'") from e


def word_from_payload(
    payload: dict[str, Any],
    progress: dict[str, Any] | None = None,
) -> Word:
    """Build a Word from a vocabulary payload and the child's progress on it.

    Args:
        payload: Word payload (``WordResponse``)
        progress: Progress payload; falls back to an embedded ``progress`` key.
            Without progress the word counts as never seen.

    Returns:
        The mapped Word

    Raises:
        PayloadError: If required fields are missing or values are invalid
    """
    if progress is None:
        progress = payload.get("progress") or {}

    return Word(
        id=str(_require(payload, "id")),
        word=_require(payload, "word"),
        category=_require(payload, "category"),
        difficulty=_enum(Difficulty, payload.get("difficulty"), Difficulty.EASY),
        exposure_count=int(progress.get("exposure_count") or 0),
        mastered=bool(progress.get("mastered", False)),
        last_practiced=parse_datetime(progress.get("last_practiced")),
        category_name=payload.get("category_name"),
        definition=payload.get("definition") or "",
        example=payload.get("example") or "",
        pronunciation=payload.get("pronunciation") or "",
        image=payload.get("image_url") or "",
        physical_action=payload.get("physical_action"),
        contexts=list(payload.get("contexts") or []),
        related_words=list(payload.get("related_words") or []),
    )


def profile_from_payload(payload: dict[str, Any]) -> LearnerProfile:
    """Build a LearnerProfile from a child payload (``ChildResponse``)."""
    return LearnerProfile(
        id=str(_require(payload, "id")),
        name=_require(payload, "name"),
        interests=set(payload.get("interests") or []),
        level=int(payload.get("level") or 1),
        learning_style=_enum(LearningStyle, payload.get("learning_style"), LearningStyle.MIXED),
        attention_span=payload.get("attention_span") or LearnerProfile.attention_span,
        preferred_time_of_day=_enum(TimeOfDay, payload.get("preferred_time_of_day")),
        age=payload.get("age"),
        avatar=payload.get("avatar") or "",
        xp=int(payload.get("xp") or 0),
        words_learned=int(payload.get("words_learned") or 0),
        current_streak=int(payload.get("current_streak") or 0),
        daily_goal=int(payload.get("daily_goal") or 0),
        today_progress=int(payload.get("today_progress") or 0),
    )


def session_from_payload(payload: dict[str, Any]) -> LearningSession:
    """Build a LearningSession from a session payload.

    Activities may be plain ids or ``{"type", "id", ...}`` objects.
    """
    activities = [
        (a.get("id") or a.get("type", "")) if isinstance(a, dict) else str(a)
        for a in payload.get("activities_completed") or []
    ]
    date = parse_datetime(payload.get("date") or payload.get("start_time"))
    kwargs = {"date": date} if date else {}
    return LearningSession(
        id=str(payload.get("id") or ""),
        child_id=str(payload.get("child_id") or ""),
        duration=float(payload.get("duration") or 0),
        words_encountered=payload.get("words_encountered") or [],
        words_used_actively=payload.get("words_used_actively") or [],
        engagement_level=_enum(
            EngagementLevel, payload.get("engagement_level"), EngagementLevel.MEDIUM
        ),
        activities_completed=activities,
        **kwargs,
    )


def session_to_payload(session: LearningSession) -> dict[str, Any]:
    """Serialize a LearningSession into the backend's session update shape."""
    return {
        "child_id": session.child_id,
        "date": session.date.isoformat(),
        "duration": session.duration,
        "words_encountered": list(session.words_encountered),
        "words_used_actively": list(session.words_used_actively),
        "engagement_level": EngagementLevel(session.engagement_level).value,
        "activities_completed": list(session.activities_completed),
    }


def recommendation_to_payload(recommendation: Recommendation) -> dict[str, Any]:
    """Serialize a Recommendation the way the backend reports one (word ids only)."""
    return {
        "next_words": recommendation.word_ids,
        "recommended_activity": recommendation.recommended_activity.value,
        "difficulty": recommendation.difficulty.value,
        "reason": recommendation.reason,
        "estimated_duration": recommendation.estimated_duration,
    }
