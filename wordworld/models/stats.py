"""Data models for learning progress statistics."""

from dataclasses import dataclass, field

from wordworld.utils.number_utils import round_half_up


@dataclass
class CategoryProgress:
    """Mastery progress within one category."""

    category: str = ""
    mastered: int = 0
    total: int = 0

    @property
    def progress(self) -> int:
        """Mastered share of the category as a whole percentage."""
        if self.total == 0:
            return 0
        return round_half_up(self.mastered / self.total * 100)


@dataclass
class ProgressStats:
    """Vocabulary progress across a word catalog and session history."""

    total_words: int = 0
    mastered_words: int = 0
    average_exposures_per_word: float = 0.0
    active_vocabulary: int = 0  # Words the child has produced
    passive_vocabulary: int = 0  # Words only recognised
    category_progress: list[CategoryProgress] = field(default_factory=list)

    @property
    def mastery_percentage(self) -> int:
        if self.total_words == 0:
            return 0
        return round_half_up(self.mastered_words / self.total_words * 100)
