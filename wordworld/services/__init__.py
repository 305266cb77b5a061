"""Business logic services for WordWorld."""

from .activity_recommender import ActivityRecommender
from .api_client import BackendClient
from .insights_service import InsightsService
from .level_up import LevelUpEvaluator
from .priority_scorer import PriorityScorer
from .progress_service import ProgressService
from .recommendation_service import RecommendationService
from .session_analyzer import SessionAnalyzer
from .word_selector import WordSelector

__all__ = [
    "PriorityScorer",
    "WordSelector",
    "ActivityRecommender",
    "RecommendationService",
    "SessionAnalyzer",
    "LevelUpEvaluator",
    "InsightsService",
    "ProgressService",
    "BackendClient",
]
