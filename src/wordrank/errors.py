"""Exceptions raised by wordrank."""


class WordRankError(Exception):
    """Base class for all wordrank errors."""


class InputReadError(WordRankError, OSError):
    """The input source could not be opened or read."""


class InvalidArgumentError(WordRankError, ValueError):
    """An argument or configuration value is out of range."""


class InvalidKeyError(WordRankError, KeyError):
    """An empty word reached the frequency table.

    The tokenizer never emits empty words, so seeing this means a bug
    upstream of the table.
    """
