"""Pick the N most frequent words from a set of frequency entries."""

import heapq
from collections.abc import Iterable

from .errors import InvalidArgumentError
from .table import FrequencyEntry

# Use a bounded heap instead of a full sort when n is below this share of entries
HEAP_SELECT_RATIO = 0.1


def rank_key(entry: FrequencyEntry) -> tuple[int, str]:
    """Sort key: highest count first, ties in ascending word order."""
    return (-entry.count, entry.word)


def check_n(n: object) -> int:
    """Return ``n`` if it is a non-negative int, else raise InvalidArgumentError."""
    if not isinstance(n, int) or isinstance(n, bool) or n < 0:
        raise InvalidArgumentError(f"n must be a non-negative integer, got {n!r}")
    return n


def select_top_entries(entries: Iterable[FrequencyEntry], n: int) -> list[FrequencyEntry]:
    """Return the ``n`` highest-ranked entries, best first.

    Args:
        entries: Unordered entries with unique words.
        n: How many entries to keep. May exceed the number of entries.

    Returns:
        A new list of at most ``n`` entries ordered by ``rank_key``.

    Raises:
        InvalidArgumentError: If ``n`` is negative or not an int.
    """
    if check_n(n) == 0:
        return []

    pool = list(entries)
    if n < len(pool) * HEAP_SELECT_RATIO:
        return heapq.nsmallest(n, pool, key=rank_key)
    pool.sort(key=rank_key)
    return pool[:n]


def select_top(entries: Iterable[FrequencyEntry], n: int) -> list[str]:
    """Return the ``n`` most frequent words, without their counts."""
    return [entry.word for entry in select_top_entries(entries, n)]
