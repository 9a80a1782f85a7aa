from __future__ import annotations

import logging
from typing import Iterable

from wordfinder.grid import Grid
from wordfinder.strategies import BruteForceSearchStrategy, SearchStrategy

logger = logging.getLogger("wordfinder")

TOP_N = 10


class Finder:
    """Binds one grid to a swappable search strategy.

    Not safe for concurrent use: strategies mark cells of the owned grid while searching.
    """

    def __init__(self, rows: Iterable[str]):
        self._grid = Grid(rows)
        self._strategy: SearchStrategy = BruteForceSearchStrategy()

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def strategy(self) -> SearchStrategy:
        return self._strategy

    def set_strategy(self, strategy: SearchStrategy):
        self._strategy = strategy

    def find(self, words: Iterable[str], top_n: int = TOP_N) -> list[str]:
        """Return up to ``top_n`` found words, most frequent in ``words`` first.

        Equal counts keep the order in which the strategy first found the words.
        """
        words = list(words)
        counts = self._strategy.find_words(self._grid, words)
        ranked = sorted(counts, key=lambda w: -counts[w])
        result = ranked[:top_n] if top_n > 0 else ranked
        logger.debug("Found %d of %d distinct words (returning %d)", len(counts), len(set(words)), len(result))
        return result
