"""Word frequency table: a hash map with separate chaining.

Buckets are plain lists of nodes. Lookups compare full words, so the hash
function only affects how evenly words spread over buckets, never which
entries exist. The bucket array doubles once the number of distinct words
passes ``capacity * load_factor``.
"""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from .errors import InvalidArgumentError, InvalidKeyError

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 64
DEFAULT_LOAD_FACTOR = 0.75

HashFunc = Callable[[str], int]


def djb2(word: str) -> int:
    """Classic 32-bit ``h * 33 + c`` string hash."""
    h = 5381
    for ch in word:
        h = ((h << 5) + h + ord(ch)) & 0xFFFFFFFF
    return h


HASH_FUNCTIONS: dict[str, HashFunc] = {
    "builtin": hash,
    "djb2": djb2,
}


def get_hash_function(name: str) -> HashFunc:
    """Look up a hash function by its config name."""
    try:
        return HASH_FUNCTIONS[name]
    except KeyError:
        choices = ", ".join(sorted(HASH_FUNCTIONS))
        raise InvalidArgumentError(
            f"Unknown hash function: {name!r} (expected one of {choices})"
        ) from None


@dataclass(frozen=True)
class FrequencyEntry:
    """A word and how many times it occurred."""

    word: str
    count: int


@dataclass(slots=True)
class _Node:
    word: str
    count: int


def _round_up_pow2(n: int) -> int:
    return 1 << (n - 1).bit_length()


class FrequencyTable:
    """Mutable word -> count map with insert-or-increment updates.

    Example:
        table = FrequencyTable()
        for word in iter_words(text):
            table.bump(word)
        for entry in table.entries():
            print(entry.word, entry.count)
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        load_factor: float = DEFAULT_LOAD_FACTOR,
        hash_func: HashFunc | None = None,
    ) -> None:
        """Create an empty table.

        Args:
            capacity: Initial number of buckets, rounded up to a power of two.
            load_factor: Distinct words per bucket that triggers a resize.
            hash_func: Function mapping a word to an int. Defaults to the
                built-in ``hash``.

        Raises:
            InvalidArgumentError: If capacity or load_factor is out of range.
        """
        if capacity < 1:
            raise InvalidArgumentError(f"capacity must be >= 1, got {capacity}")
        if not 0 < load_factor <= 1:
            raise InvalidArgumentError(f"load_factor must be in (0, 1], got {load_factor}")

        self._initial_capacity = _round_up_pow2(capacity)
        self._load_factor = load_factor
        self._hash = hash_func or hash
        self._buckets: list[list[_Node]] = [[] for _ in range(self._initial_capacity)]
        self._mask = self._initial_capacity - 1
        self._size = 0
        self._total = 0

    @property
    def capacity(self) -> int:
        """Current number of buckets."""
        return len(self._buckets)

    @property
    def total(self) -> int:
        """Sum of all counts, i.e. the number of bumps applied."""
        return self._total

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self._find(word) is not None

    def _find(self, word: str) -> _Node | None:
        for node in self._buckets[self._hash(word) & self._mask]:
            if node.word == word:
                return node
        return None

    def bump(self, word: str) -> int:
        """Increment the count for ``word``, inserting it at 1 if absent.

        Returns:
            The word's count after the update.

        Raises:
            InvalidKeyError: If ``word`` is empty.
        """
        if not word:
            raise InvalidKeyError("empty word passed to FrequencyTable.bump")

        bucket = self._buckets[self._hash(word) & self._mask]
        for node in bucket:
            if node.word == word:
                node.count += 1
                self._total += 1
                return node.count

        bucket.append(_Node(word, 1))
        self._size += 1
        self._total += 1
        if self._size > len(self._buckets) * self._load_factor:
            self._resize(len(self._buckets) * 2)
        return 1

    def get(self, word: str) -> int:
        """Return the count for ``word``, or 0 if it was never bumped."""
        node = self._find(word)
        return node.count if node is not None else 0

    def entries(self) -> Iterator[FrequencyEntry]:
        """Yield a frozen copy of every (word, count) pair, in no particular order."""
        for bucket in self._buckets:
            for node in bucket:
                yield FrequencyEntry(node.word, node.count)

    def clear(self) -> None:
        """Drop every entry and shrink back to the initial capacity."""
        self._buckets = [[] for _ in range(self._initial_capacity)]
        self._mask = self._initial_capacity - 1
        self._size = 0
        self._total = 0

    def _resize(self, new_capacity: int) -> None:
        old = self._buckets
        self._buckets = [[] for _ in range(new_capacity)]
        self._mask = new_capacity - 1
        for bucket in old:
            for node in bucket:
                self._buckets[self._hash(node.word) & self._mask].append(node)
        logger.debug("Resized frequency table: %d -> %d buckets", len(old), new_capacity)
