import random
from collections.abc import Sequence

from vocab_practice.domain.practice.entities.word import Word


class RandomWordPicker:
    """Uniform random selection over a pool of words."""

    def __init__(self, rng: random.Random | None = None) -> None:
        # random.Random is safe to share across threads for these calls
        self._rng = rng or random.Random()  # noqa: S311

    def pick(self, words: Sequence[Word]) -> Word | None:
        if not words:
            return None
        return self._rng.choice(words)

    def sample(self, words: Sequence[Word], limit: int) -> list[Word]:
        """Up to ``limit`` distinct words in random order."""
        if limit <= 0 or not words:
            return []
        return self._rng.sample(list(words), min(limit, len(words)))
