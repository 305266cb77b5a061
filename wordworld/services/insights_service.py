"""Service generating learning insights for parents."""

from wordworld.config import WordWorldConfig
from wordworld.models import (
    EngagementLevel,
    LearnerProfile,
    LearningSession,
    LearningStyle,
    TimeOfDay,
    Word,
)
from wordworld.utils.number_utils import round_half_up

ENGAGEMENT_POINTS = {
    EngagementLevel.HIGH: 3,
    EngagementLevel.MEDIUM: 2,
    EngagementLevel.LOW: 1,
}

EXCELLENT_ENGAGEMENT = 2.5
POOR_ENGAGEMENT = 1.5


class InsightsService:
    """Turn a child's vocabulary and sessions into short sentences for parents."""

    def __init__(self, config: WordWorldConfig):
        self.config = config

    def generate(
        self,
        profile: LearnerProfile,
        words: list[Word],
        recent_sessions: list[LearningSession],
    ) -> list[str]:
        """Generate personalised insights, most important first.

        Args:
            profile: The child
            words: Word catalog with the child's progress
            recent_sessions: Session history, oldest first

        Returns:
            List of insight sentences
        """
        name = profile.name
        insights = []

        mastered = sum(1 for w in words if w.mastered)
        percentage = round_half_up(mastered / len(words) * 100) if words else 0
        insights.append(
            f"{name} knows {mastered} words confidently! "
            f"That's {percentage}% of the curriculum."
        )

        style = LearningStyle(profile.learning_style).value
        insights.append(
            f"{name} learns best through {style} activities. "
            "Try incorporating more movement and hands-on experiences!"
        )

        needing_more = sum(
            1 for w in words if w.exposure_count < self.config.low_exposure_threshold
        )
        if needing_more > 0:
            insights.append(
                f"{needing_more} words need more repetition. "
                "Remember, 6-12 exposures are ideal for long-term retention!"
            )

        trend = self.engagement_trend(recent_sessions)
        if trend is not None:
            if trend >= EXCELLENT_ENGAGEMENT:
                insights.append(
                    f"Engagement is excellent! {name} is really enjoying the learning activities."
                )
            elif trend < POOR_ENGAGEMENT:
                insights.append(
                    "Try shorter sessions or more physical activities to boost engagement."
                )

        if profile.preferred_time_of_day:
            time_of_day = TimeOfDay(profile.preferred_time_of_day).value
            insights.append(
                f"{name} focuses best in the {time_of_day}. "
                "Try to schedule learning sessions then!"
            )

        return insights

    def engagement_trend(self, recent_sessions: list[LearningSession]) -> float | None:
        """Average engagement points (1-3) of the latest sessions, or None if too few."""
        window = self.config.insight_trend_window
        if len(recent_sessions) < window:
            return None
        points = [
            ENGAGEMENT_POINTS[EngagementLevel(s.engagement_level)]
            for s in recent_sessions[-window:]
        ]
        return sum(points) / window
