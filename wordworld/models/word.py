"""Data models for vocabulary words."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Difficulty(str, Enum):
    """Difficulty tier of a word."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def rank(self) -> int:
        """Ordinal of the tier (easy=1, medium=2, hard=3)."""
        return _DIFFICULTY_RANKS[self]


_DIFFICULTY_RANKS = {
    Difficulty.EASY: 1,
    Difficulty.MEDIUM: 2,
    Difficulty.HARD: 3,
}


@dataclass
class Word:
    """A vocabulary item together with the learner's progress on it."""

    id: str
    word: str  # Display text
    category: str  # Category label, matched against learner interests
    difficulty: Difficulty = Difficulty.EASY
    exposure_count: int = 0
    mastered: bool = False  # Set by the backend once mastery criteria are met
    last_practiced: datetime | None = None

    # Presentation data carried through from the backend
    category_name: str | None = None
    definition: str = ""
    example: str = ""
    pronunciation: str = ""
    image: str = ""
    physical_action: str | None = None  # e.g. "Flap your arms like wings"
    contexts: list[str] = field(default_factory=list)
    related_words: list[str] = field(default_factory=list)

    @property
    def difficulty_rank(self) -> int:
        """Ordinal difficulty used for level matching."""
        return self.difficulty.rank

    @property
    def was_practiced(self) -> bool:
        return self.last_practiced is not None

    def __str__(self) -> str:
        return f"{self.word} ({self.category})"
