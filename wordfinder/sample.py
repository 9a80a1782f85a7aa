"""Sample grids and word lists for the demo and the benchmark harness."""
from __future__ import annotations

import logging
import string

import numpy as np

logger = logging.getLogger("wordfinder")

LETTERS = np.array(list(string.ascii_lowercase))

PLACED_WORDS = [
    "algorithm", "binary", "compile", "debug", "execute",
    "function", "hardware", "iterate", "java", "kernel",
    "library", "memory", "network", "object", "program",
    "search", "sort", "stack", "queue", "tree",
    "graph", "hash", "heap", "linkedlist", "array",
    "pointer", "recursion", "syntax", "variable", "loop",
    "class", "method", "inheritance", "polymorphism", "encapsulation",
    "abstraction", "interface", "exception", "thread", "process",
    "concurrency", "parallelism", "synchronization", "deadlock", "livelock",
    "starvation", "mutex", "semaphore", "monitor", "lock",
    "racecondition", "atomicity", "consistency", "isolation", "durability",
    "transaction", "rollback", "commit", "savepoint", "checkpoint",
    "index", "primarykey", "foreignkey", "unique", "constraint",
    "normalization", "denormalization", "sharding", "replication", "partitioning",
    "backup", "restore", "snapshot", "log", "cache",
    "buffer", "queue", "stack", "heap", "tree",
    "graph", "trie", "bloomfilter", "hashtable", "hashmap",
    "set", "list", "arraylist", "linkedlist", "deque",
    "priorityqueue", "binarysearch", "linearsearch", "bubblesort", "quicksort",
    "mergesort", "heapsort", "insertionsort", "selectionsort", "shellsort",
]

# Placed words, the first 40 of them again, and 20 words that are never placed
QUERY_WORDS = PLACED_WORDS + PLACED_WORDS[:40] + [f"notfound{i}" for i in range(1, 21)]

DEMO_GRID = [
    "axtqwxs",
    "lqwerta",
    "easdfgm",
    "xghjkti",
    "johnmna",
    "mikeopa",
    "sarasta",
    "daveuva",
    "lizwxya",
]

DEMO_WORDS = ["alex", "john", "mike", "sara", "dave", "liz", "samit"]


def generate_grid(size: int, words: list[str] | None = None, seed: int | None = None) -> list[str]:
    """Build a size x size grid of random lowercase letters with ``words`` written in.

    Each word goes left-to-right or top-to-bottom from a random start. Later words may
    overwrite letters of earlier ones, so not every word is guaranteed to survive.
    """
    rng = np.random.default_rng(seed)
    cells = rng.choice(LETTERS, size=(size, size))

    skipped = 0
    for word in words or []:
        span = size - len(word)
        if span <= 0:
            skipped += 1
            continue
        r = int(rng.integers(span))
        c = int(rng.integers(span))
        letters = list(word)
        if rng.integers(2) == 0:
            cells[r, c:c + len(word)] = letters
        else:
            cells[r:r + len(word), c] = letters

    if skipped:
        logger.warning("Skipped %d words that do not fit a %dx%d grid", skipped, size, size)
    return ["".join(row) for row in cells]
