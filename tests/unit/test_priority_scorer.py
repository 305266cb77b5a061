"""Tests for the priority scorer."""

from datetime import datetime, timedelta

import pytest

from wordworld.config import WordWorldConfig
from wordworld.models import Difficulty
from wordworld.services.priority_scorer import PriorityScorer


@pytest.fixture
def scorer(test_config):
    return PriorityScorer(test_config)


class TestScore:
    """Tests for the combined score."""

    def test_ideal_new_word_scores_35(self, scorer, make_word, make_profile, now):
        word = make_word(exposure_count=0, mastered=False, difficulty=Difficulty.EASY)
        profile = make_profile(interests=["animals"], level=1)

        assert scorer.score(word, profile, now) == 10 + 8 + 7 + 6 + 4

    def test_maximum_score_with_optimal_spacing(self, scorer, make_word, make_profile, now):
        word = make_word(exposure_count=2, days_ago=4)
        profile = make_profile(level=1)

        assert scorer.score(word, profile, now) == 36

    def test_mastered_overexposed_word_scores_zero(self, scorer, make_word, make_profile, now):
        word = make_word(
            category="space",
            difficulty=Difficulty.HARD,
            exposure_count=30,
            mastered=True,
            days_ago=20,
        )
        profile = make_profile(interests=["animals"], level=1)

        assert scorer.score(word, profile, now) == 0

    def test_scores_stay_in_range(self, scorer, scored_catalog, make_profile, now):
        profile = make_profile()
        for word in scored_catalog:
            assert 0 <= scorer.score(word, profile, now) <= 36

    def test_does_not_modify_inputs(self, scorer, make_word, make_profile, now):
        word = make_word(exposure_count=3)
        profile = make_profile(interests=["animals"])

        scorer.score(word, profile, now)

        assert word.exposure_count == 3
        assert profile.interests == {"animals"}

    def test_uses_wall_clock_by_default(self, scorer, make_word, make_profile):
        word = make_word(last_practiced=datetime.now() - timedelta(days=5))
        assert scorer.spacing_score(word) == 5


class TestExposureScore:
    @pytest.mark.parametrize(
        "count,expected",
        [(0, 10), (5, 10), (6, 5), (11, 5), (12, 0), (100, 0)],
    )
    def test_exposure_bands(self, scorer, make_word, count, expected):
        assert scorer.exposure_score(make_word(exposure_count=count)) == expected


class TestInterestScore:
    def test_matching_interest(self, scorer, make_word, make_profile):
        assert scorer.interest_score(make_word(category="food"), make_profile(interests=["food"])) == 8

    def test_no_interests(self, scorer, make_word, make_profile):
        assert scorer.interest_score(make_word(category="food"), make_profile(interests=[])) == 0


class TestDifficultyScore:
    @pytest.mark.parametrize(
        "level,expected_rank",
        [(1, 1), (2, 2), (3, 2), (4, 3), (5, 3), (10, 3)],
    )
    def test_target_rank_by_level(self, make_profile, level, expected_rank):
        assert PriorityScorer.target_difficulty_rank(make_profile(level=level)) == expected_rank

    def test_matching_difficulty(self, scorer, make_word, make_profile):
        word = make_word(difficulty=Difficulty.MEDIUM)
        assert scorer.difficulty_score(word, make_profile(level=3)) == 6
        assert scorer.difficulty_score(word, make_profile(level=1)) == 0


class TestSpacingScore:
    def test_never_practiced(self, scorer, make_word, now):
        assert scorer.spacing_score(make_word(last_practiced=None), now) == 4

    @pytest.mark.parametrize(
        "days,expected",
        [(0, 0), (2, 0), (3, 5), (5, 5), (7, 5), (8, 0), (30, 0)],
    )
    def test_spacing_window_is_inclusive(self, scorer, make_word, now, days, expected):
        assert scorer.spacing_score(make_word(days_ago=days), now) == expected

    def test_partial_days_are_floored(self, scorer, make_word, now):
        word = make_word(last_practiced=now - timedelta(days=2, hours=23))
        assert scorer.spacing_score(word, now) == 0

    def test_custom_weights(self, make_word, now):
        scorer = PriorityScorer(WordWorldConfig(spacing_weight=9, never_practiced_weight=1))
        assert scorer.spacing_score(make_word(days_ago=3), now) == 9
        assert scorer.spacing_score(make_word(), now) == 1


class TestNeedsMoreExposure:
    def test_below_minimum(self, scorer, make_word):
        assert scorer.needs_more_exposure(make_word(exposure_count=5, mastered=True)) is True

    def test_unmastered_below_upper_limit(self, scorer, make_word):
        assert scorer.needs_more_exposure(make_word(exposure_count=10, mastered=False)) is True

    def test_mastered_after_minimum(self, scorer, make_word):
        assert scorer.needs_more_exposure(make_word(exposure_count=6, mastered=True)) is False

    def test_enough_exposures(self, scorer, make_word):
        assert scorer.needs_more_exposure(make_word(exposure_count=12, mastered=False)) is False
