"""Service deciding when a learner is ready for harder words."""

import logging

from wordworld.config import WordWorldConfig
from wordworld.models import EngagementLevel, LearnerProfile, LearningSession

logger = logging.getLogger(__name__)


class LevelUpEvaluator:
    """Evaluate difficulty progression from recent session history."""

    def __init__(self, config: WordWorldConfig):
        self.config = config

    def should_level_up(
        self,
        profile: LearnerProfile,
        recent_sessions: list[LearningSession],
    ) -> bool:
        """Check if the learner is ready for the next difficulty level.

        Args:
            profile: The learner
            recent_sessions: Session history, oldest first

        Returns:
            True when enough of the latest sessions were engaged; False
            when there is not yet enough history
        """
        window = self.config.level_up_window
        if len(recent_sessions) < window:
            return False

        engaged = sum(
            1
            for s in recent_sessions[-window:]
            if EngagementLevel(s.engagement_level).is_engaged
        )
        ready = engaged >= self.config.level_up_min_engaged
        logger.debug(f"{profile.name}: {engaged}/{window} engaged sessions, level up={ready}")
        return ready
