"""Tests for the command-line interface."""

from pathlib import Path
from unittest.mock import patch

import pytest

from wordworld.cli.commands.common import load_sessions
from wordworld.cli.main import build_parser, main
from wordworld.models import LearnerProfile

FIXTURES = Path(__file__).parent.parent / "fixtures"
CHILD = str(FIXTURES / "child.json")
WORDS = str(FIXTURES / "words.json")
SESSIONS = str(FIXTURES / "sessions.json")


class TestParser:
    def test_recommend_defaults(self):
        args = build_parser().parse_args(["recommend", "--profile", CHILD, "--words", WORDS])
        assert args.minutes is None
        assert args.count is None
        assert args.word_of_the_day is False

    def test_level_up_requires_sessions(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["level-up", "--profile", CHILD])


class TestCommands:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out

    def test_recommend(self, capsys):
        code = main(
            ["recommend", "--profile", CHILD, "--words", WORDS, "--seed", "1", "--word-of-the-day"]
        )

        out = capsys.readouterr().out
        assert code == 0
        assert "Activity: scavenger" in out
        assert "Word of the day: cat" in out

    def test_recommend_count(self, capsys):
        code = main(["recommend", "--profile", CHILD, "--words", WORDS, "--count", "2"])

        out = capsys.readouterr().out
        assert code == 0
        assert "Next words (2)" in out

    def test_recommend_requires_input(self, capsys):
        assert main(["recommend", "--profile", CHILD]) == 1
        assert "--child-id" in capsys.readouterr().out

    def test_recommend_missing_file(self, capsys, tmp_path):
        code = main(["recommend", "--profile", str(tmp_path / "nope.json"), "--words", WORDS])
        assert code == 1
        assert "File not found" in capsys.readouterr().out

    def test_recommend_from_backend(self, capsys):
        profile = LearnerProfile(id="c1", name="Sam")
        with patch("wordworld.cli.commands.common.BackendClient") as client_cls:
            client_cls.return_value.get_child.return_value = profile
            client_cls.return_value.get_words_with_progress.return_value = []
            code = main(["recommend", "--child-id", "c1"])

        out = capsys.readouterr().out
        assert code == 0
        assert "No words available for Sam" in out
        client_cls.return_value.get_words_with_progress.assert_called_once_with("c1")

    def test_analyze(self, capsys):
        assert main(["analyze", SESSIONS]) == 0
        out = capsys.readouterr().out
        assert out.count("Session Analysis:") == 5
        assert "Engagement score: 80/100" in out

    def test_analyze_invalid_json(self, capsys, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json", encoding="utf-8")

        assert main(["analyze", str(bad)]) == 1
        assert "Invalid JSON" in capsys.readouterr().out

    def test_level_up(self, capsys):
        assert main(["level-up", "--profile", CHILD, "--sessions", SESSIONS]) == 0
        assert "ready for level 2" in capsys.readouterr().out

    def test_insights(self, capsys):
        assert main(["insights", "--profile", CHILD, "--words", WORDS, "--sessions", SESSIONS]) == 0
        assert "Mia knows 2 words confidently!" in capsys.readouterr().out

    def test_stats(self, capsys):
        assert main(["stats", "--profile", CHILD, "--words", WORDS]) == 0
        out = capsys.readouterr().out
        assert "Words mastered: 2/7" in out
        assert "animals" in out


class TestLoadSessions:
    @pytest.fixture
    def mixed_dates_file(self, tmp_path):
        path = tmp_path / "sessions.json"
        path.write_text(
            """[
              {"id": "undated", "duration": 5, "engagement_level": "low"},
              {"id": "local", "date": "2024-01-02T00:00:00", "duration": 10},
              {"id": "utc", "date": "2024-01-01T00:00:00Z", "duration": 15,
               "engagement_level": "high"}
            ]""",
            encoding="utf-8",
        )
        return path

    def test_mixed_timezone_dates_sort_oldest_first(self, mixed_dates_file):
        sessions = load_sessions(mixed_dates_file)
        assert [s.id for s in sessions] == ["utc", "local", "undated"]

    def test_analyze_mixed_timezone_dates(self, mixed_dates_file, capsys):
        assert main(["analyze", str(mixed_dates_file)]) == 0
        assert capsys.readouterr().out.count("Session Analysis:") == 3
