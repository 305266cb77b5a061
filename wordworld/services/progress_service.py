"""Service for computing vocabulary progress statistics."""

from wordworld.models import CategoryProgress, LearningSession, ProgressStats, Word


class ProgressService:
    """Aggregate word progress and session history (stateless service).

    Active vocabulary is every word the child produced in any session;
    passive vocabulary is what they encountered but never produced.
    """

    def compute(self, words: list[Word], sessions: list[LearningSession]) -> ProgressStats:
        """Compute progress statistics.

        Args:
            words: Word catalog with the child's progress
            sessions: Session history

        Returns:
            ProgressStats for the catalog and history
        """
        active: set[str] = set()
        encountered: set[str] = set()
        for session in sessions:
            active.update(session.words_used_actively)
            encountered.update(session.words_encountered)

        categories: dict[str, CategoryProgress] = {}
        for word in words:
            entry = categories.setdefault(word.category, CategoryProgress(category=word.category))
            entry.total += 1
            if word.mastered:
                entry.mastered += 1

        total_exposures = sum(w.exposure_count for w in words)
        return ProgressStats(
            total_words=len(words),
            mastered_words=sum(1 for w in words if w.mastered),
            average_exposures_per_word=total_exposures / len(words) if words else 0.0,
            active_vocabulary=len(active),
            passive_vocabulary=len(encountered - active),
            category_progress=list(categories.values()),
        )
