"""Timing and heap measurements for the search strategies."""
from __future__ import annotations

import gc
import logging
import time
import tracemalloc
from dataclasses import dataclass
from typing import Sequence

from wordfinder.finder import Finder
from wordfinder.sample import PLACED_WORDS, QUERY_WORDS, generate_grid
from wordfinder.strategies import STRATEGIES, create_strategy

logger = logging.getLogger("wordfinder")


@dataclass
class BenchmarkResult:
    strategy: str
    iterations: int
    avg_ms: float
    avg_kb: float
    found: list[str]

    def __str__(self) -> str:
        return (
            f"Strategy: {self.strategy}, Average Time Taken: {self.avg_ms:.2f} ms, "
            f"Average Memory Used: {self.avg_kb:.2f} KB"
        )


def measure_strategy(rows: Sequence[str], words: Sequence[str], strategy_name: str, iterations: int) -> BenchmarkResult:
    """Build a fresh Finder per iteration and average its wall-clock time and heap delta.

    Memory is the traced allocation still held after ``find`` returns, relative to
    before the Finder was built.
    """
    if iterations < 1:
        raise ValueError("iterations must be at least 1")

    total_ms = 0.0
    total_bytes = 0
    found: list[str] = []
    for _ in range(iterations):
        gc.collect()
        tracemalloc.start()
        try:
            before, _ = tracemalloc.get_traced_memory()
            t0 = time.perf_counter()

            finder = Finder(rows)
            finder.set_strategy(create_strategy(strategy_name))
            found = finder.find(words)

            total_ms += (time.perf_counter() - t0) * 1000
            after, _ = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()
        total_bytes += after - before

    result = BenchmarkResult(
        strategy=strategy_name,
        iterations=iterations,
        avg_ms=round(total_ms / iterations, 2),
        avg_kb=round(total_bytes / iterations / 1024.0, 2),
        found=found,
    )
    logger.info("strategy=%s avg_ms=%.2f avg_kb=%.2f", result.strategy, result.avg_ms, result.avg_kb)
    return result


def run_benchmark(
    size: int = 64,
    iterations: int = 10,
    seed: int | None = None,
    strategies: Sequence[str] | None = None,
) -> list[BenchmarkResult]:
    rows = generate_grid(size, PLACED_WORDS, seed=seed)
    names = list(strategies) if strategies else list(STRATEGIES)
    return [measure_strategy(rows, QUERY_WORDS, name, iterations) for name in names]
