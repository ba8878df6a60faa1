"""Word ranking engine: tokenize, count, select.

One pass reads the whole source, bumps a fresh frequency table once per
token, copies the top words out and clears the table. The result never
shares storage with the table.

Passing a ``threading.Event`` as ``cancel`` lets a caller stop reading an
unbounded stream early. The engine checks it before each chunk and, once
set, ranks whatever was counted so far and marks the report ``partial``.
An event set after the last chunk was read does not make a result partial.
"""

import logging
import threading
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from .config import RankConfig
from .selector import check_n, select_top_entries
from .sources import iter_chunks
from .table import FrequencyEntry, FrequencyTable, get_hash_function
from .tokenizer import iter_words

logger = logging.getLogger(__name__)


@dataclass
class RankReport:
    """Outcome of a ranking pass.

    Attributes:
        words: The ranked words, most frequent first.
        total_tokens: Number of tokens counted.
        distinct_words: Number of distinct words counted.
        partial: True if the pass was cancelled before the input ended.
    """

    words: list[str]
    total_tokens: int
    distinct_words: int
    partial: bool = False


class WordRanker:
    """Counts words in a text source and ranks them by frequency."""

    def __init__(self, config: RankConfig | None = None) -> None:
        """Initialize ranker.

        Args:
            config: Settings to use. Defaults to ``RankConfig()``.
        """
        self.config = config or RankConfig()

    def new_table(self) -> FrequencyTable:
        """Create an empty table sized and hashed per the config."""
        return FrequencyTable(
            capacity=self.config.capacity,
            load_factor=self.config.load_factor,
            hash_func=get_hash_function(self.config.hash),
        )

    def _fill(self, table: FrequencyTable, source: Any, cancel: threading.Event | None) -> bool:
        """Bump ``table`` once per token. Returns True if reading stopped early."""
        if cancel is not None and cancel.is_set():
            logger.info("Ranking cancelled before reading input")
            return True

        stopped = False

        def chunks() -> Iterator[str]:
            nonlocal stopped
            for chunk in iter_chunks(source, chunk_size=self.config.chunk_size):
                if cancel is not None and cancel.is_set():
                    stopped = True
                    return
                yield chunk

        words = iter_words(
            chunks(),
            max_word_length=self.config.max_word_length,
            overlong=self.config.overlong,
        )
        for word in words:
            table.bump(word)
        if stopped:
            logger.info("Ranking cancelled after %d tokens, result is partial", table.total)
        logger.debug("Counted %d tokens, %d distinct words", table.total, len(table))
        return stopped

    def count(self, source: Any, cancel: threading.Event | None = None) -> FrequencyTable:
        """Build a frequency table from ``source``.

        The caller owns the returned table.

        Raises:
            InputReadError: If the source cannot be read.
        """
        table = self.new_table()
        self._fill(table, source, cancel)
        return table

    def _rank(
        self, source: Any, n: int | None, cancel: threading.Event | None
    ) -> tuple[list[FrequencyEntry], int, int, bool]:
        n = check_n(self.config.top if n is None else n)

        table = self.new_table()
        try:
            partial = self._fill(table, source, cancel)
            top = select_top_entries(table.entries(), n)
            return top, table.total, len(table), partial
        finally:
            table.clear()

    def rank(
        self, source: Any, n: int | None = None, cancel: threading.Event | None = None
    ) -> RankReport:
        """Rank the words of ``source``.

        Args:
            source: Anything ``iter_chunks`` accepts.
            n: How many words to return. Defaults to ``config.top``.
            cancel: Optional event that stops reading when set.

        Returns:
            RankReport with the top words and pass statistics.

        Raises:
            InvalidArgumentError: If ``n`` is negative or not an int.
            InputReadError: If the source cannot be read.
        """
        top, total, distinct, partial = self._rank(source, n, cancel)
        return RankReport(
            words=[entry.word for entry in top],
            total_tokens=total,
            distinct_words=distinct,
            partial=partial,
        )

    def rank_entries(
        self, source: Any, n: int | None = None, cancel: threading.Event | None = None
    ) -> tuple[list[FrequencyEntry], bool]:
        """Like ``rank`` but keep the counts, for display.

        Returns:
            The top entries and whether reading stopped early.
        """
        top, _, _, partial = self._rank(source, n, cancel)
        return top, partial


def rank_top_words(
    source: Any,
    n: int,
    config: RankConfig | None = None,
    cancel: threading.Event | None = None,
) -> list[str]:
    """Return the ``n`` most frequent words in ``source``.

    Words are maximal runs of ASCII letters, lowercased. Ties in count are
    broken by ascending word order.

    Raises:
        InvalidArgumentError: If ``n`` is negative or not an int.
        InputReadError: If the source cannot be read.
    """
    return WordRanker(config).rank(source, n, cancel).words


def tokens_of(source: Any, config: RankConfig | None = None) -> Iterable[str]:
    """Yield the tokens the engine would count for ``source``."""
    config = config or RankConfig()
    return iter_words(
        iter_chunks(source, chunk_size=config.chunk_size),
        max_word_length=config.max_word_length,
        overlong=config.overlong,
    )
