"""Service for analysing completed learning sessions."""

import logging

from wordworld.config import WordWorldConfig
from wordworld.models import EngagementLevel, LearningSession, SessionAnalysis
from wordworld.utils.number_utils import round_half_up

logger = logging.getLogger(__name__)

ENGAGEMENT_BONUS = {
    EngagementLevel.HIGH: 1.0,
    EngagementLevel.MEDIUM: 0.7,
    EngagementLevel.LOW: 0.4,
}


class SessionAnalyzer:
    """Split session vocabulary into active/passive and score engagement."""

    def __init__(self, config: WordWorldConfig):
        self.config = config

    def analyze(self, session: LearningSession) -> SessionAnalysis:
        """Analyse one learning session.

        Args:
            session: The completed session

        Returns:
            Active words (as recorded), passive words (encountered but never
            produced, in encounter order) and an engagement score of 0-100
        """
        active_words = list(session.words_used_actively)
        active_set = set(active_words)
        passive_words = [w for w in session.words_encountered if w not in active_set]

        score = self.engagement_score(session)
        logger.debug(
            f"Session {session.id or '<unsaved>'}: {len(active_words)} active, "
            f"{len(passive_words)} passive, engagement {score}"
        )
        return SessionAnalysis(
            active_words=active_words,
            passive_words=passive_words,
            engagement_score=score,
        )

    def engagement_score(self, session: LearningSession) -> int:
        """Weighted blend of active-use ratio, session length and engagement label."""
        cfg = self.config
        active_ratio = len(session.words_used_actively) / max(1, len(session.words_encountered))
        duration_bonus = min(session.duration / cfg.ideal_session_minutes, 1)
        level_bonus = ENGAGEMENT_BONUS[EngagementLevel(session.engagement_level)]

        raw = (
            active_ratio * cfg.active_ratio_weight
            + duration_bonus * cfg.duration_weight
            + level_bonus * cfg.engagement_weight
        )
        return max(0, min(100, round_half_up(raw)))
