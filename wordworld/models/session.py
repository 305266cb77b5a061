"""Data models for learning sessions."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class EngagementLevel(str, Enum):
    """Coarse engagement label assigned to a completed session."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def is_engaged(self) -> bool:
        """Medium and high engagement both count as engaged."""
        return self is not EngagementLevel.LOW


@dataclass(frozen=True)
class LearningSession:
    """Record of a completed learning session (immutable)."""

    id: str = ""
    child_id: str = ""
    date: datetime = field(default_factory=datetime.now)
    duration: float = 0.0  # Minutes
    words_encountered: tuple[str, ...] = ()
    words_used_actively: tuple[str, ...] = ()  # Words the child spoke or acted out
    engagement_level: EngagementLevel = EngagementLevel.MEDIUM
    activities_completed: tuple[str, ...] = ()

    def __post_init__(self):
        """Store word and activity lists as tuples."""
        object.__setattr__(self, "words_encountered", tuple(self.words_encountered))
        object.__setattr__(self, "words_used_actively", tuple(self.words_used_actively))
        object.__setattr__(self, "activities_completed", tuple(self.activities_completed))
