"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from wordworld.config import WordWorldConfig
from wordworld.models import (
    Difficulty,
    EngagementLevel,
    LearnerProfile,
    LearningSession,
    LearningStyle,
    Word,
)
from wordworld.presenters import NullPresenter

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    """Provide a fixed reference time for spacing calculations."""
    return NOW


@pytest.fixture
def test_config():
    """Provide a test configuration pointing at a fake backend."""
    return WordWorldConfig(
        api_base_url="http://backend.test/api/v1",
        api_timeout=1.0,
    )


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def make_word():
    """Factory fixture for creating Word instances with sensible defaults."""

    def _make(
        id="w1",
        word="cat",
        category="animals",
        difficulty=Difficulty.EASY,
        exposure_count=0,
        mastered=False,
        last_practiced=None,
        days_ago=None,
    ):
        if days_ago is not None:
            last_practiced = NOW - timedelta(days=days_ago)
        return Word(
            id=id,
            word=word,
            category=category,
            difficulty=difficulty,
            exposure_count=exposure_count,
            mastered=mastered,
            last_practiced=last_practiced,
        )

    return _make


@pytest.fixture
def make_profile():
    """Factory fixture for creating LearnerProfile instances."""

    def _make(
        name="Mia",
        interests=("animals",),
        level=1,
        learning_style=LearningStyle.VISUAL,
        attention_span=15,
        preferred_time_of_day=None,
    ):
        return LearnerProfile(
            id="child-1",
            name=name,
            interests=set(interests),
            level=level,
            learning_style=learning_style,
            attention_span=attention_span,
            preferred_time_of_day=preferred_time_of_day,
        )

    return _make


@pytest.fixture
def make_session():
    """Factory fixture for creating LearningSession instances."""

    def _make(
        engagement_level=EngagementLevel.MEDIUM,
        duration=15,
        words_encountered=(),
        words_used_actively=(),
        id="s1",
        date=NOW,
    ):
        return LearningSession(
            id=id,
            child_id="child-1",
            date=date,
            duration=duration,
            words_encountered=words_encountered,
            words_used_actively=words_used_actively,
            engagement_level=engagement_level,
        )

    return _make


@pytest.fixture
def scored_catalog(make_word):
    """A catalog whose words all score differently for a level-1 'animals' fan.

    Scores (at NOW): cat 35, lion 29, apple 27, dog 24, bread 16, volcano 11, rocket 0.
    """
    return [
        make_word("w5", "rocket", "space", Difficulty.HARD, 20, True, days_ago=1),
        make_word("w1", "cat", "animals", Difficulty.EASY, 0),
        make_word("w2", "apple", "food", Difficulty.EASY, 0),
        make_word("w3", "lion", "animals", Difficulty.MEDIUM, 0),
        make_word("w4", "bread", "food", Difficulty.MEDIUM, 7),
        make_word("w6", "dog", "animals", Difficulty.EASY, 8, True, days_ago=5),
        make_word("w7", "volcano", "nature", Difficulty.HARD, 12),
    ]


class ReversingRandom:
    """A RandomSource that reverses instead of shuffling, recording each call."""

    def __init__(self):
        self.calls = []

    def shuffle(self, x):
        self.calls.append(list(x))
        x.reverse()


@pytest.fixture
def reversing_random():
    """Provide a deterministic stand-in for random shuffling."""
    return ReversingRandom()
