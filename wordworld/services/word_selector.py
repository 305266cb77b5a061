"""Service for choosing the next words to present."""

import logging
import math
import random
from datetime import datetime

from wordworld.config import WordWorldConfig
from wordworld.interfaces import RandomSource
from wordworld.models import LearnerProfile, ScoredWord, Word
from wordworld.services.priority_scorer import PriorityScorer

logger = logging.getLogger(__name__)


class WordSelector:
    """Select a learning set mixing top-priority words with some variety.

    Most of the set is taken strictly by priority; the remaining slots are
    drawn at random from the next band of candidates to keep sessions from
    getting repetitive. The random source is injectable for reproducibility.
    """

    def __init__(
        self,
        config: WordWorldConfig,
        scorer: PriorityScorer | None = None,
        random_source: RandomSource | None = None,
    ):
        """Initialize the word selector.

        Args:
            config: Configuration for selection ratios
            scorer: Priority scorer (created from config if omitted)
            random_source: Shuffler for the variety band (defaults to random.Random())
        """
        self.config = config
        self.scorer = scorer or PriorityScorer(config)
        self.random_source = random_source or random.Random()

    def rank(
        self,
        words: list[Word],
        profile: LearnerProfile,
        now: datetime | None = None,
    ) -> list[ScoredWord]:
        """Score all words and sort them by priority, highest first.

        The sort is stable, so words with equal scores keep catalog order.

        Args:
            words: Word catalog
            profile: Learner to score for
            now: Reference time for the spacing term

        Returns:
            Scored words in descending priority order
        """
        scored = [ScoredWord(word, self.scorer.score(word, profile, now)) for word in words]
        return sorted(scored, key=lambda s: s.priority, reverse=True)

    def high_priority_count(self, count: int) -> int:
        """Number of picks taken strictly by priority for a set of ``count``."""
        return math.ceil(count * self.config.high_priority_ratio)

    def select(
        self,
        words: list[Word],
        profile: LearnerProfile,
        count: int | None = None,
        now: datetime | None = None,
    ) -> list[Word]:
        """Select the next words to learn.

        Args:
            words: Word catalog
            profile: Learner to select for
            count: Number of words wanted (defaults to config.selection_count)
            now: Reference time for the spacing term

        Returns:
            Exactly min(count, len(words)) words; empty if count <= 0
        """
        if count is None:
            count = self.config.selection_count
        if count <= 0 or not words:
            return []

        ranked = self.rank(words, profile, now)
        split = self.high_priority_count(count)
        high_priority = ranked[:split]
        variety = ranked[split : count * self.config.variety_pool_factor]

        selected = [s.word for s in high_priority]
        if len(selected) < count:
            self.random_source.shuffle(variety)
            selected.extend(s.word for s in variety[: count - len(selected)])

        logger.debug(
            f"Selected {min(len(selected), count)} of {len(words)} words for {profile.name} "
            f"({len(high_priority)} by priority)"
        )
        return selected[:count]
