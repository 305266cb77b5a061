"""Configuration classes for WordWorld."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WordWorldConfig:
    """Immutable configuration for the adaptive learning engine.

    All configuration is frozen (immutable) so services built from it can
    be shared freely between callers. The scoring weights and thresholds
    are empirical; the defaults reproduce the production app's behaviour.
    """

    # Word priority: exposure (children need 6-12 exposures for retention)
    low_exposure_threshold: int = 6
    high_exposure_threshold: int = 12
    low_exposure_weight: int = 10
    moderate_exposure_weight: int = 5

    # Word priority: learner alignment
    interest_weight: int = 8
    not_mastered_weight: int = 7
    difficulty_match_weight: int = 6

    # Word priority: spacing effect (days since last practice)
    spacing_min_days: int = 3
    spacing_max_days: int = 7
    spacing_weight: int = 5
    never_practiced_weight: int = 4

    # Word selection
    selection_count: int = 5
    high_priority_ratio: float = 0.7  # Share of picks taken strictly by score
    variety_pool_factor: int = 2  # Variety drawn from ranks below count * factor

    # Activity recommendation (minutes)
    short_session_minutes: int = 10
    medium_session_minutes: int = 20
    default_available_minutes: int = 15
    default_attention_span: int = 15

    # Recommendation difficulty (average exposures of selected words)
    easy_exposure_limit: float = 3
    medium_exposure_limit: float = 8

    # Session analysis
    ideal_session_minutes: float = 15
    active_ratio_weight: float = 40
    duration_weight: float = 30
    engagement_weight: float = 30

    # Level progression
    level_up_window: int = 5
    level_up_min_engaged: int = 4

    # Parent insights
    insight_trend_window: int = 3

    # Backend API
    api_base_url: str = "http://localhost:8000/api/v1"
    api_token: str | None = None
    api_timeout: float = 15.0  # Seconds per request

    def __post_init__(self):
        """Normalise the API base URL (no trailing slash)."""
        if self.api_base_url.endswith("/"):
            object.__setattr__(self, "api_base_url", self.api_base_url.rstrip("/"))
