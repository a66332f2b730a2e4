"""
Score ranking kept for the lifetime of the process.
NO UI DEPENDENCIES.
"""
import logging
from typing import Iterable, List, Optional

from .constants import HIGHSCORES

logger = logging.getLogger(__name__)


class HighScoreTable:
    """Top-N scores, highest first."""

    def __init__(self, capacity: int = HIGHSCORES, scores: Optional[Iterable[int]] = None):
        if capacity <= 0:
            raise ValueError(f"High-score capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._scores: List[int] = []
        for score in scores or ():
            self.insert(score)

    def insert(self, score: int) -> Optional[int]:
        """
        Insert a score in descending order and truncate.
        Returns the 0-based rank it landed on, or None if it did not make the cut.
        """
        # Ties keep their earlier entries ahead of the new one
        rank = sum(1 for s in self._scores if s >= score)
        if rank >= self.capacity:
            return None

        self._scores.insert(rank, score)
        del self._scores[self.capacity:]
        logger.debug(f"Score {score} ranked #{rank + 1}")
        return rank

    @property
    def scores(self) -> List[int]:
        return list(self._scores)

    @property
    def best(self) -> int:
        return self._scores[0] if self._scores else 0

    def __len__(self) -> int:
        return len(self._scores)
