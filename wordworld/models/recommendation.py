"""Data models for engine outputs (never persisted)."""

from dataclasses import dataclass, field
from enum import Enum

from .word import Difficulty, Word


class Activity(str, Enum):
    """Activity categories the recommender can choose from."""

    ACTIONS = "actions"
    PRONUNCIATION = "pronunciation"
    MATCHING = "matching"
    ISPY = "ispy"
    CHARADES = "charades"
    STORY = "story"
    SCAVENGER = "scavenger"


@dataclass(frozen=True)
class ScoredWord:
    """A word paired with its priority score."""

    word: Word
    priority: int


@dataclass
class Recommendation:
    """What to present next, and for how long."""

    next_words: list[Word] = field(default_factory=list)
    recommended_activity: Activity = Activity.ISPY
    difficulty: Difficulty = Difficulty.EASY
    reason: str = ""
    estimated_duration: float = 0  # Minutes

    @property
    def word_ids(self) -> list[str]:
        return [w.id for w in self.next_words]


@dataclass
class SessionAnalysis:
    """Active/passive vocabulary split and engagement of one session."""

    active_words: list[str] = field(default_factory=list)
    passive_words: list[str] = field(default_factory=list)
    engagement_score: int = 0  # 0-100


@dataclass
class WordOfTheDay:
    """The single most urgent word for a learner."""

    word: Word
    priority_score: int
    reason: str = ""
