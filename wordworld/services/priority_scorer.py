"""Service for scoring how urgently a word should be practised."""

import logging
from datetime import datetime, timezone

from wordworld.config import WordWorldConfig
from wordworld.models import LearnerProfile, Word
from wordworld.utils.time_utils import days_between

logger = logging.getLogger(__name__)

MAX_DIFFICULTY_RANK = 3


class PriorityScorer:
    """Score vocabulary words for a learner (stateless service).

    The score is a sum of independent contributions (exposure, interest,
    mastery, level difficulty, spacing). Higher means more urgent.
    """

    def __init__(self, config: WordWorldConfig):
        """Initialize the priority scorer.

        Args:
            config: Configuration holding the scoring weights
        """
        self.config = config

    def score(self, word: Word, profile: LearnerProfile, now: datetime | None = None) -> int:
        """Calculate the priority of a word for a learner.

        Args:
            word: Word to score
            profile: Learner the word would be presented to
            now: Reference time for the spacing term (defaults to the current time)

        Returns:
            Non-negative priority score
        """
        priority = (
            self.exposure_score(word)
            + self.interest_score(word, profile)
            + self.mastery_score(word)
            + self.difficulty_score(word, profile)
            + self.spacing_score(word, now)
        )
        logger.debug(f"Priority of '{word.word}' for {profile.name}: {priority}")
        return priority

    def exposure_score(self, word: Word) -> int:
        cfg = self.config
        if word.exposure_count < cfg.low_exposure_threshold:
            return cfg.low_exposure_weight
        if word.exposure_count < cfg.high_exposure_threshold:
            return cfg.moderate_exposure_weight
        return 0

    def interest_score(self, word: Word, profile: LearnerProfile) -> int:
        return self.config.interest_weight if profile.is_interested_in(word.category) else 0

    def mastery_score(self, word: Word) -> int:
        return 0 if word.mastered else self.config.not_mastered_weight

    def difficulty_score(self, word: Word, profile: LearnerProfile) -> int:
        if word.difficulty_rank == self.target_difficulty_rank(profile):
            return self.config.difficulty_match_weight
        return 0

    def spacing_score(self, word: Word, now: datetime | None = None) -> int:
        """Score the spacing effect: reviews 3-7 days apart stick best."""
        cfg = self.config
        if word.last_practiced is None:
            return cfg.never_practiced_weight

        now = now or datetime.now(timezone.utc)
        days_since = days_between(word.last_practiced, now)
        if cfg.spacing_min_days <= days_since <= cfg.spacing_max_days:
            return cfg.spacing_weight
        return 0

    @staticmethod
    def target_difficulty_rank(profile: LearnerProfile) -> int:
        """Difficulty ordinal suited to the learner's level (levels 1, 2-3, 4+)."""
        return min(MAX_DIFFICULTY_RANK, profile.level // 2 + 1)

    def needs_more_exposure(self, word: Word) -> bool:
        """Check if a word still needs repetition before it can be retained.

        Args:
            word: Word to check

        Returns:
            True below the minimum exposure count, or below the upper count
            while the word is not yet mastered
        """
        cfg = self.config
        return word.exposure_count < cfg.low_exposure_threshold or (
            not word.mastered and word.exposure_count < cfg.high_exposure_threshold
        )
