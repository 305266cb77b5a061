"""Protocol for the randomness used when mixing variety into word picks."""

from typing import Any, Protocol


class RandomSource(Protocol):
    """Interface for a source of shuffles.

    ``random.Random`` instances satisfy this protocol, so callers can pass
    a seeded generator (or a fake) to make word selection reproducible.
    """

    def shuffle(self, x: list[Any]) -> None:
        """Shuffle a list in place.

        Args:
            x: List to reorder
        """
        ...
