"""
Console demo: run the sample grid through each search strategy.

Usage:
    python -m scripts.demo
"""
import logging
import sys
from pathlib import Path

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from wordfinder.settings import settings
from wordfinder.finder import Finder
from wordfinder.sample import DEMO_GRID, DEMO_WORDS
from wordfinder.strategies import create_strategy


def main():
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    print("Grid:")
    for row in DEMO_GRID:
        print(f"  {row}")
    print(f"Words: {', '.join(DEMO_WORDS)}\n")

    finder = Finder(DEMO_GRID)
    print("Default (Brute Force) Strategy: " + ", ".join(finder.find(DEMO_WORDS)))

    finder.set_strategy(create_strategy("dfs"))
    print("DFS Strategy: " + ", ".join(finder.find(DEMO_WORDS)))

    finder.set_strategy(create_strategy("trie"))
    print("Trie Strategy: " + ", ".join(finder.find(DEMO_WORDS)))


if __name__ == "__main__":
    main()
