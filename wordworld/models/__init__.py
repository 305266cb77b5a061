"""Data models for WordWorld."""

from .profile import LearnerProfile, LearningStyle, TimeOfDay
from .recommendation import (
    Activity,
    Recommendation,
    ScoredWord,
    SessionAnalysis,
    WordOfTheDay,
)
from .session import EngagementLevel, LearningSession
from .stats import CategoryProgress, ProgressStats
from .word import Difficulty, Word

__all__ = [
    "Word",
    "Difficulty",
    "LearnerProfile",
    "LearningStyle",
    "TimeOfDay",
    "LearningSession",
    "EngagementLevel",
    "Activity",
    "Recommendation",
    "ScoredWord",
    "SessionAnalysis",
    "WordOfTheDay",
    "ProgressStats",
    "CategoryProgress",
]
