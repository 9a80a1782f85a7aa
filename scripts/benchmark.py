"""
Strategy benchmark for the word finder.

Usage:
    python -m scripts.benchmark [--size N] [--iterations N] [--seed N] [--strategy NAME ...]

Examples:
    python -m scripts.benchmark
    python -m scripts.benchmark --size 32 --iterations 3
    python -m scripts.benchmark --strategy trie --strategy dfs --seed 7

Builds a random grid with the sample words written in, then for each strategy
creates a fresh Finder per iteration and reports the average time and heap delta.
"""
import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from wordfinder.settings import settings
from wordfinder.benchmark import run_benchmark
from wordfinder.grid import MAX_SIZE
from wordfinder.strategies import STRATEGIES


def main():
    parser = argparse.ArgumentParser(description="Word Finder Strategy Benchmark")
    parser.add_argument("--size", type=int, default=settings.BENCH_GRID_SIZE,
                        help=f"Grid side length, at most {MAX_SIZE} (default: {settings.BENCH_GRID_SIZE})")
    parser.add_argument("--iterations", type=int, default=settings.BENCH_ITERATIONS,
                        help=f"Runs per strategy (default: {settings.BENCH_ITERATIONS})")
    parser.add_argument("--seed", type=int, default=settings.SAMPLE_SEED,
                        help="Random seed for the grid, 0 for unseeded (default: %(default)s)")
    parser.add_argument("--strategy", action="append", choices=list(STRATEGIES),
                        help="Strategy to measure, repeatable (default: all)")
    args = parser.parse_args()

    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    if not 1 <= args.size <= MAX_SIZE:
        print(f"Error: --size must be between 1 and {MAX_SIZE}")
        sys.exit(1)
    if args.iterations < 1:
        print("Error: --iterations must be at least 1")
        sys.exit(1)

    print(f"Grid: {args.size}x{args.size}, iterations: {args.iterations}")
    results = run_benchmark(args.size, args.iterations, args.seed or None, args.strategy)
    for result in results:
        print(result)


if __name__ == "__main__":
    main()
