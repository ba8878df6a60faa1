"""Split text chunks into lowercase ASCII word tokens.

A word is a maximal run of ASCII letters. Everything else (digits,
punctuation, whitespace, non-ASCII characters) separates words. Runs that
straddle chunk boundaries are joined before being emitted, so the token
sequence does not depend on how the input was chunked.
"""

import logging
import re
import string
from collections.abc import Iterable, Iterator
from enum import Enum

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"[A-Za-z]+")
_LEADING_RE = re.compile(r"[A-Za-z]*")


class OverlongPolicy(Enum):
    """What to do with a run longer than ``max_word_length``."""

    SPLIT = "split"  # emit consecutive pieces of max_word_length letters
    TRUNCATE = "truncate"  # emit only the first max_word_length letters
    SKIP = "skip"  # drop the run, logging a warning

    @classmethod
    def parse(cls, value: "OverlongPolicy | str") -> "OverlongPolicy":
        """Accept either a policy or its string name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise InvalidArgumentError(
                f"Unknown overlong policy: {value!r} (expected one of {choices})"
            ) from None


def _emit(run: str, max_word_length: int | None, policy: OverlongPolicy) -> Iterator[str]:
    """Yield the token(s) for one complete letter run."""
    word = run.lower()
    if max_word_length is None or len(word) <= max_word_length:
        yield word
    elif policy is OverlongPolicy.SPLIT:
        for i in range(0, len(word), max_word_length):
            yield word[i : i + max_word_length]
    elif policy is OverlongPolicy.TRUNCATE:
        yield word[:max_word_length]
    else:
        logger.warning(
            "Skipping %d-letter word starting with %r (max_word_length=%d)",
            len(word),
            word[:16],
            max_word_length,
        )


def iter_words(
    chunks: Iterable[str],
    max_word_length: int | None = None,
    overlong: OverlongPolicy | str = OverlongPolicy.SPLIT,
) -> Iterator[str]:
    """Lazily yield lowercase word tokens from a stream of text chunks.

    Args:
        chunks: Text pieces in input order. A plain ``str`` is treated as a
            single chunk.
        max_word_length: Longest token to emit unchanged. ``None`` means no
            limit.
        overlong: Policy for runs longer than ``max_word_length``.

    Yields:
        Non-empty lowercase words.

    Raises:
        InvalidArgumentError: If ``max_word_length`` is less than 1 or the
            policy name is unknown.
    """
    if max_word_length is not None and max_word_length < 1:
        raise InvalidArgumentError(f"max_word_length must be >= 1, got {max_word_length}")
    policy = OverlongPolicy.parse(overlong)
    if isinstance(chunks, str):
        chunks = [chunks]

    # Letters at the end of the previous chunk(s) that may continue
    pending: list[str] = []

    for chunk in chunks:
        if not chunk:
            continue

        start = 0
        if pending:
            lead = _LEADING_RE.match(chunk).end()
            if lead == len(chunk):
                pending.append(chunk)
                continue
            pending.append(chunk[:lead])
            yield from _emit("".join(pending), max_word_length, policy)
            pending = []
            start = lead

        # Hold back a trailing run, it may continue in the next chunk
        cut = max(start, len(chunk.rstrip(string.ascii_letters)))
        for match in _WORD_RE.finditer(chunk, start, cut):
            yield from _emit(match.group(0), max_word_length, policy)
        if cut < len(chunk):
            pending.append(chunk[cut:])

    if pending:
        yield from _emit("".join(pending), max_word_length, policy)


def count_tokens(
    chunks: Iterable[str],
    max_word_length: int | None = None,
    overlong: OverlongPolicy | str = OverlongPolicy.SPLIT,
) -> int:
    """Return how many tokens ``iter_words`` emits for the same input."""
    return sum(1 for _ in iter_words(chunks, max_word_length, overlong))
