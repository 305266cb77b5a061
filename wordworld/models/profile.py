"""Data models for learner profiles."""

from dataclasses import dataclass, field
from enum import Enum


class LearningStyle(str, Enum):
    """How a child learns best."""

    VISUAL = "visual"
    AUDITORY = "auditory"
    KINESTHETIC = "kinesthetic"
    MIXED = "mixed"


class TimeOfDay(str, Enum):
    """Part of the day a child focuses best in."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"


@dataclass
class LearnerProfile:
    """A child's learning state.

    Read-only from the engine's point of view: scoring and recommendation
    never modify a profile.
    """

    id: str
    name: str
    interests: set[str] = field(default_factory=set)
    level: int = 1
    learning_style: LearningStyle = LearningStyle.MIXED
    attention_span: float = 15  # Minutes
    preferred_time_of_day: TimeOfDay | None = None

    # Account data not used by the engine
    age: int | None = None
    avatar: str = ""
    xp: int = 0
    words_learned: int = 0
    current_streak: int = 0
    daily_goal: int = 0
    today_progress: int = 0

    def is_interested_in(self, category: str) -> bool:
        """Check if a category is one of the child's interests."""
        return category in self.interests
