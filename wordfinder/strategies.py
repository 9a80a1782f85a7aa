from __future__ import annotations

import inspect
import logging
from abc import ABC, abstractmethod
from typing import Callable, Sequence

from wordfinder.grid import Grid
from wordfinder.trie import Trie, TrieNode

logger = logging.getLogger("wordfinder")

# Right and down only; words are never read leftwards, upwards or diagonally.
DIRECTIONS: tuple[tuple[int, int], ...] = ((0, 1), (1, 0))


def count_found(words: Sequence[str], is_present: Callable[[str], bool]) -> dict[str, int]:
    """Count query occurrences of every word that is present in the grid.

    ``is_present`` is asked at most once per distinct word. The count is how often the
    word appears in ``words``, not how often it appears in the grid. Insertion order of
    the result is the order in which words were first found.
    """
    found: dict[str, int] = {}
    rejected: set[str] = set()
    for word in words:
        if word in found:
            found[word] += 1
        elif not word or word in rejected:
            continue
        elif is_present(word):
            found[word] = 1
        else:
            rejected.add(word)
    return found


class SearchStrategy(ABC):
    """Counts occurrences of a word list in a grid."""

    name: str = ""

    def find_words(self, grid: Grid, words: Sequence[str]) -> dict[str, int]:
        found = count_found(words, lambda word: self.search_word(grid, word))
        logger.debug("strategy=%s queried=%d found=%d", self.name, len(words), len(found))
        return found

    @abstractmethod
    def search_word(self, grid: Grid, word: str) -> bool:
        """Return True if ``word`` occurs anywhere in ``grid``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class BruteForceSearchStrategy(SearchStrategy):
    """Scans every cell for a straight horizontal or vertical run.

    O(rows * cols * len) per word.
    """

    name = "brute_force"

    def search_word(self, grid: Grid, word: str) -> bool:
        for r in range(grid.n_rows):
            for c in range(grid.n_cols):
                if self._search_horizontally(grid, word, r, c) or self._search_vertically(grid, word, r, c):
                    return True
        return False

    @staticmethod
    def _search_horizontally(grid: Grid, word: str, r: int, c: int) -> bool:
        if c + len(word) > grid.n_cols:
            return False
        return all(grid[r, c + i] == ch for i, ch in enumerate(word))

    @staticmethod
    def _search_vertically(grid: Grid, word: str, r: int, c: int) -> bool:
        if r + len(word) > grid.n_rows:
            return False
        return all(grid[r + i, c] == ch for i, ch in enumerate(word))


class DFSSearchStrategy(SearchStrategy):
    """Backtracking walk from every cell, stepping right or down.

    Each step may change direction, so a word laid out as a staircase of right and
    down moves is also found.
    """

    name = "dfs"

    def search_word(self, grid: Grid, word: str) -> bool:
        for r in range(grid.n_rows):
            for c in range(grid.n_cols):
                if self._dfs(grid, word, r, c, 0):
                    return True
        return False

    def _dfs(self, grid: Grid, word: str, r: int, c: int, index: int) -> bool:
        if index == len(word):
            return True
        if not grid.in_bounds(r, c) or grid[r, c] != word[index]:
            return False

        with grid.visit(r, c):
            return any(self._dfs(grid, word, r + dr, c + dc, index + 1) for dr, dc in DIRECTIONS)


class TrieMultiSearchStrategy(SearchStrategy):
    """Sweeps the grid once, matching all query words through a shared trie.

    Cost is about O(rows * cols * longest word) regardless of how many words are asked.
    The trie is rebuilt on every call.
    """

    name = "trie"

    def find_words(self, grid: Grid, words: Sequence[str]) -> dict[str, int]:
        trie = Trie.from_words(words)
        in_grid = self._sweep(grid, trie)
        found = count_found(words, in_grid.__contains__)
        logger.debug(
            "strategy=%s queried=%d distinct=%d found=%d", self.name, len(words), len(trie), len(found)
        )
        return found

    def search_word(self, grid: Grid, word: str) -> bool:
        return bool(word) and word in self._sweep(grid, Trie.from_words([word]))

    @staticmethod
    def _sweep(grid: Grid, trie: Trie) -> set[str]:
        found: set[str] = set()

        def dfs(r: int, c: int, node: TrieNode):
            if not grid.in_bounds(r, c):
                return
            child = node.children.get(grid[r, c])
            if child is None:
                return

            if child.is_word:
                found.add(child.word)

            if child.children:  # nothing longer to match below a leaf
                with grid.visit(r, c):
                    for dr, dc in DIRECTIONS:
                        dfs(r + dr, c + dc, child)

        if trie.root.children:
            for r in range(grid.n_rows):
                for c in range(grid.n_cols):
                    dfs(r, c, trie.root)
        return found


STRATEGIES: dict[str, type[SearchStrategy]] = {
    cls.name: cls for cls in (BruteForceSearchStrategy, DFSSearchStrategy, TrieMultiSearchStrategy)
}

FALLBACK_STRATEGY = TrieMultiSearchStrategy


def normalize_name(name: str) -> str:
    return name.strip().lower().replace("-", "_").replace(" ", "_")


def create_strategy(name: str | type[SearchStrategy]) -> SearchStrategy:
    """Instantiate a strategy by registry name or by class.

    Anything else, including unknown names, falls back to the trie strategy instead
    of raising.
    """
    if isinstance(name, type) and issubclass(name, SearchStrategy) and not inspect.isabstract(name):
        return name()
    cls = STRATEGIES.get(normalize_name(name)) if isinstance(name, str) else None
    if cls is None:
        logger.warning("Unknown strategy %r, falling back to %s", name, FALLBACK_STRATEGY.name)
        cls = FALLBACK_STRATEGY
    return cls()
