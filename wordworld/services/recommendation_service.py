"""Service combining word selection and activity choice into a recommendation."""

import logging
from datetime import datetime

from wordworld.config import WordWorldConfig
from wordworld.models import (
    Difficulty,
    LearnerProfile,
    LearningStyle,
    Recommendation,
    Word,
    WordOfTheDay,
)
from wordworld.services.activity_recommender import ActivityRecommender
from wordworld.services.priority_scorer import PriorityScorer
from wordworld.services.word_selector import WordSelector

logger = logging.getLogger(__name__)


class RecommendationService:
    """Build personalised learning recommendations.

    Composes the word selector and the activity recommender, then infers a
    difficulty tier and a human-readable explanation for parents.
    """

    def __init__(
        self,
        config: WordWorldConfig,
        selector: WordSelector | None = None,
        activity_recommender: ActivityRecommender | None = None,
    ):
        """Initialize the recommendation service.

        Args:
            config: Engine configuration
            selector: Word selector (created from config if omitted)
            activity_recommender: Activity recommender (created from config if omitted)
        """
        self.config = config
        self.selector = selector or WordSelector(config)
        self.activity_recommender = activity_recommender or ActivityRecommender(config)

    @property
    def scorer(self) -> PriorityScorer:
        return self.selector.scorer

    def recommend(
        self,
        words: list[Word],
        profile: LearnerProfile,
        available_minutes: float | None = None,
        now: datetime | None = None,
    ) -> Recommendation:
        """Build the main adaptive learning recommendation.

        Args:
            words: Word catalog with the learner's progress
            profile: Learner to recommend for
            available_minutes: Time available (defaults to config.default_available_minutes)
            now: Reference time for the spacing term

        Returns:
            Recommendation with words, activity, difficulty, reason and duration
        """
        if available_minutes is None:
            available_minutes = self.config.default_available_minutes

        next_words = self.selector.select(words, profile, self.config.selection_count, now)
        activity = self.activity_recommender.recommend_for(profile, available_minutes)
        if not next_words:
            logger.info(f"No words available to recommend for {profile.name}")

        recommendation = Recommendation(
            next_words=next_words,
            recommended_activity=activity,
            difficulty=self.infer_difficulty(next_words),
            reason=self.build_reason(next_words, profile, activity.value),
            estimated_duration=min(
                available_minutes, profile.attention_span or self.config.default_attention_span
            ),
        )
        logger.debug(
            f"Recommendation for {profile.name}: {activity.value}, "
            f"{recommendation.difficulty.value}, {len(next_words)} words"
        )
        return recommendation

    def infer_difficulty(self, words: list[Word]) -> Difficulty:
        """Infer the difficulty tier from the average exposure of the chosen words.

        An empty selection averages to zero exposures, i.e. easy.
        """
        if not words:
            return Difficulty.EASY
        avg_exposure = sum(w.exposure_count for w in words) / len(words)
        if avg_exposure < self.config.easy_exposure_limit:
            return Difficulty.EASY
        if avg_exposure < self.config.medium_exposure_limit:
            return Difficulty.MEDIUM
        return Difficulty.HARD

    def build_reason(self, words: list[Word], profile: LearnerProfile, activity: str) -> str:
        """Explain a recommendation in one short paragraph."""
        needing_exposure = sum(
            1 for w in words if w.exposure_count < self.config.low_exposure_threshold
        )
        interest_match = sum(1 for w in words if profile.is_interested_in(w.category))

        reason = f"Selected based on {profile.name}'s learning needs. "
        if needing_exposure > 0:
            reason += f"{needing_exposure} word(s) need more practice. "
        if interest_match > 0:
            reason += f"{interest_match} word(s) match interests. "
        style = LearningStyle(profile.learning_style).value
        reason += f"Best activity: {activity} (suits {style} learning style)."
        return reason

    def word_of_the_day(
        self,
        words: list[Word],
        profile: LearnerProfile,
        now: datetime | None = None,
    ) -> WordOfTheDay | None:
        """Pick the single highest-priority word.

        Args:
            words: Word catalog with the learner's progress
            profile: Learner to pick for
            now: Reference time for the spacing term

        Returns:
            The top word with its score, or None for an empty catalog
        """
        ranked = self.selector.rank(words, profile, now)
        if not ranked:
            return None

        top = ranked[0]
        parts = []
        if profile.is_interested_in(top.word.category):
            parts.append(f"{profile.name} loves {top.word.category_name or top.word.category}")
        if self.scorer.needs_more_exposure(top.word):
            parts.append("it needs more practice")
        if not top.word.was_practiced:
            parts.append("it is brand new")
        reason = f"Chosen because {' and '.join(parts)}." if parts else "Chosen for review."

        return WordOfTheDay(word=top.word, priority_score=top.priority, reason=reason)
