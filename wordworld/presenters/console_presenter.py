"""Console presenter for CLI output."""

from wordworld.models import ProgressStats, Recommendation, SessionAnalysis, WordOfTheDay


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_recommendation(self, recommendation: Recommendation) -> None:
        """Display a learning recommendation."""
        print("\nRecommendation:")
        print(f"  Activity: {recommendation.recommended_activity.value}")
        print(f"  Difficulty: {recommendation.difficulty.value}")
        print(f"  Estimated duration: {recommendation.estimated_duration:g} min")
        print(f"\nNext words ({len(recommendation.next_words)}):")
        for i, word in enumerate(recommendation.next_words, 1):
            print(f"{i:2d}. {word.word:15s} [{word.category}] seen {word.exposure_count}x")
        print(f"\n{recommendation.reason}")

    def show_word_of_the_day(self, word_of_the_day: WordOfTheDay) -> None:
        """Display the word of the day."""
        word = word_of_the_day.word
        print(f"\nWord of the day: {word.word} (priority {word_of_the_day.priority_score})")
        if word.definition:
            print(f"  {word.definition}")
        print(f"  {word_of_the_day.reason}")

    def show_session_analysis(self, analysis: SessionAnalysis) -> None:
        """Display the analysis of one learning session."""
        print("\nSession Analysis:")
        print(f"  Engagement score: {analysis.engagement_score}/100")
        print(f"  Active words ({len(analysis.active_words)}): {', '.join(analysis.active_words)}")
        print(
            f"  Passive words ({len(analysis.passive_words)}): {', '.join(analysis.passive_words)}"
        )

    def show_insights(self, insights: list[str]) -> None:
        """Display parent insights."""
        print("\nInsights:")
        for insight in insights:
            print(f"  - {insight}")

    def show_progress_stats(self, stats: ProgressStats) -> None:
        """Display vocabulary progress statistics."""
        print("\nProgress:")
        print(f"  Words mastered: {stats.mastered_words}/{stats.total_words}")
        print(f"  Average exposures per word: {stats.average_exposures_per_word:.1f}")
        print(f"  Active vocabulary: {stats.active_vocabulary}")
        print(f"  Passive vocabulary: {stats.passive_vocabulary}")

        if stats.category_progress:
            print("\nBy category:")
            for entry in stats.category_progress:
                print(f"  {entry.category:15s} {entry.mastered}/{entry.total} ({entry.progress}%)")
