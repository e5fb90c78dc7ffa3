"""
Word Catalog

Immutable set of words that can be picked as a secret word or accepted as a guess.
"""

import logging
import random
from typing import FrozenSet, Iterable, Iterator, Optional, Tuple

logger = logging.getLogger(__name__)


class WordCatalog:
    """
    Fixed word list loaded once at startup and shared read-only by every request.

    Membership is exact and case-sensitive. Random selection uses a private
    ``random.Random`` instance, seeded from OS entropy unless a seed is given.
    """

    def __init__(self, words: Iterable[str], seed: Optional[int] = None):
        self._words: Tuple[str, ...] = tuple(words)
        if not self._words:
            raise ValueError("Word catalog cannot be empty")
        self._lookup: FrozenSet[str] = frozenset(self._words)
        self._rng = random.Random(seed)
        logger.info("Word catalog ready with %s words", len(self._words))

    def contains(self, word: str) -> bool:
        return word in self._lookup

    def pick_random(self) -> str:
        """Return one word from the catalog."""
        return self._rng.choice(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._lookup

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)
