"""Presenter protocol for output abstraction."""

from typing import Protocol

from wordworld.models import ProgressStats, Recommendation, SessionAnalysis, WordOfTheDay


class PresenterProtocol(Protocol):
    """Interface for presenting output to user (CLI, tests, etc).

    This protocol abstracts all output operations, allowing the same
    commands to work with different presentation layers.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_success(self, message: str) -> None:
        """Display a success message.

        Args:
            message: The success message to display
        """
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message.

        Args:
            message: The warning message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_recommendation(self, recommendation: Recommendation) -> None:
        """Display a learning recommendation.

        Args:
            recommendation: The recommendation to display
        """
        ...

    def show_word_of_the_day(self, word_of_the_day: WordOfTheDay) -> None:
        """Display the word of the day.

        Args:
            word_of_the_day: The selected word with its score
        """
        ...

    def show_session_analysis(self, analysis: SessionAnalysis) -> None:
        """Display the analysis of one learning session.

        Args:
            analysis: The session analysis to display
        """
        ...

    def show_insights(self, insights: list[str]) -> None:
        """Display parent insights.

        Args:
            insights: Insight sentences, most important first
        """
        ...

    def show_progress_stats(self, stats: ProgressStats) -> None:
        """Display vocabulary progress statistics.

        Args:
            stats: The statistics to display
        """
        ...
