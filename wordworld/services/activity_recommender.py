"""Service for recommending an activity type."""

from wordworld.config import WordWorldConfig
from wordworld.models import Activity, LearnerProfile, LearningStyle


class ActivityRecommender:
    """Map learning style and available time onto an activity (stateless service).

    Sessions fall into a short, medium or long band depending on the
    available time and the child's attention span, whichever is shorter.
    """

    SHORT_ACTIVITIES = {
        LearningStyle.KINESTHETIC: Activity.ACTIONS,
        LearningStyle.AUDITORY: Activity.PRONUNCIATION,
        LearningStyle.VISUAL: Activity.MATCHING,
    }
    MEDIUM_ACTIVITIES = {
        LearningStyle.KINESTHETIC: Activity.CHARADES,
        LearningStyle.AUDITORY: Activity.STORY,
    }
    LONG_ACTIVITIES = {
        LearningStyle.KINESTHETIC: Activity.SCAVENGER,
    }

    def __init__(self, config: WordWorldConfig):
        """Initialize the activity recommender.

        Args:
            config: Configuration holding the session band limits
        """
        self.config = config

    def recommend(
        self,
        learning_style: LearningStyle,
        attention_span: float,
        available_minutes: float,
    ) -> Activity:
        """Recommend the best activity for a learning style and time budget.

        Args:
            learning_style: How the child learns best
            attention_span: Child's attention span in minutes
            available_minutes: Time available for the session

        Returns:
            The recommended activity
        """
        learning_style = LearningStyle(learning_style)
        shortest = min(available_minutes, attention_span)

        if shortest < self.config.short_session_minutes:
            return self.SHORT_ACTIVITIES.get(learning_style, Activity.ISPY)
        if shortest < self.config.medium_session_minutes:
            return self.MEDIUM_ACTIVITIES.get(learning_style, Activity.SCAVENGER)
        return self.LONG_ACTIVITIES.get(learning_style, Activity.STORY)

    def recommend_for(self, profile: LearnerProfile, available_minutes: float) -> Activity:
        """Recommend an activity using a learner profile's style and attention span."""
        return self.recommend(profile.learning_style, profile.attention_span, available_minutes)
