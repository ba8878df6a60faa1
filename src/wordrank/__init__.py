"""Word frequency ranking."""

from .cli import main
from .config import RankConfig, parse_key_value_args
from .engine import RankReport, WordRanker, rank_top_words, tokens_of
from .errors import InputReadError, InvalidArgumentError, InvalidKeyError, WordRankError
from .selector import select_top, select_top_entries
from .sources import is_url, iter_chunks, iter_url, open_source
from .table import FrequencyEntry, FrequencyTable, djb2
from .tokenizer import OverlongPolicy, count_tokens, iter_words

__all__ = [
    "rank_top_words",
    "WordRanker",
    "RankReport",
    "RankConfig",
    "parse_key_value_args",
    "FrequencyTable",
    "FrequencyEntry",
    "djb2",
    "select_top",
    "select_top_entries",
    "iter_words",
    "count_tokens",
    "OverlongPolicy",
    "iter_chunks",
    "iter_url",
    "open_source",
    "is_url",
    "tokens_of",
    "main",
    "WordRankError",
    "InputReadError",
    "InvalidArgumentError",
    "InvalidKeyError",
]
