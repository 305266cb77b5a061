"""Null presenter for testing (no output)."""

from wordworld.models import ProgressStats, Recommendation, SessionAnalysis, WordOfTheDay


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_success(self, message: str) -> None:
        """Display a success message (no-op)."""
        pass

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_recommendation(self, recommendation: Recommendation) -> None:
        """Display a learning recommendation (no-op)."""
        pass

    def show_word_of_the_day(self, word_of_the_day: WordOfTheDay) -> None:
        """Display the word of the day (no-op)."""
        pass

    def show_session_analysis(self, analysis: SessionAnalysis) -> None:
        """Display the analysis of one learning session (no-op)."""
        pass

    def show_insights(self, insights: list[str]) -> None:
        """Display parent insights (no-op)."""
        pass

    def show_progress_stats(self, stats: ProgressStats) -> None:
        """Display vocabulary progress statistics (no-op)."""
        pass
