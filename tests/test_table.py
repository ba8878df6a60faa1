"""Tests for wordrank.table module."""

import logging

import pytest

from wordrank.errors import InvalidArgumentError, InvalidKeyError
from wordrank.table import FrequencyEntry, FrequencyTable, djb2, get_hash_function


def _as_dict(table: FrequencyTable) -> dict[str, int]:
    return {e.word: e.count for e in table.entries()}


class TestBump:
    """Tests for FrequencyTable.bump."""

    def test_insert_then_increment(self) -> None:
        """Test that the first bump inserts at 1 and later bumps increment."""
        table = FrequencyTable()
        assert table.bump("the") == 1
        assert table.bump("the") == 2
        assert table.bump("fox") == 1
        assert table.get("the") == 2
        assert table.get("fox") == 1

    def test_get_missing_word_is_zero(self) -> None:
        """Test that unknown words have count 0."""
        assert FrequencyTable().get("nothing") == 0

    def test_empty_word_raises(self) -> None:
        """Test that an empty word is an invariant violation."""
        table = FrequencyTable()
        with pytest.raises(InvalidKeyError):
            table.bump("")
        assert len(table) == 0
        assert table.total == 0

    def test_len_and_total(self) -> None:
        """Test distinct-word and total-count tracking."""
        table = FrequencyTable()
        for word in ["a", "b", "a", "c", "a"]:
            table.bump(word)
        assert len(table) == 3
        assert table.total == 5

    def test_contains(self) -> None:
        """Test membership checks."""
        table = FrequencyTable()
        table.bump("word")
        assert "word" in table
        assert "other" not in table
        assert 42 not in table


class TestEntries:
    """Tests for FrequencyTable.entries."""

    def test_entries_reflect_all_bumps(self) -> None:
        """Test that entries hold exactly one pair per word with current counts."""
        table = FrequencyTable()
        for word in "a b a c b a".split():
            table.bump(word)
        entries = list(table.entries())
        assert sorted(entries, key=lambda e: e.word) == [
            FrequencyEntry("a", 3),
            FrequencyEntry("b", 2),
            FrequencyEntry("c", 1),
        ]

    def test_entries_are_copies(self) -> None:
        """Test that entries do not change after further bumps."""
        table = FrequencyTable()
        table.bump("x")
        snapshot = list(table.entries())
        table.bump("x")
        assert snapshot == [FrequencyEntry("x", 1)]
        assert table.get("x") == 2

    def test_entries_survive_clear(self) -> None:
        """Test that clearing the table leaves copied entries intact."""
        table = FrequencyTable()
        table.bump("kept")
        snapshot = list(table.entries())
        table.clear()
        assert snapshot == [FrequencyEntry("kept", 1)]
        assert list(table.entries()) == []

    def test_entry_is_frozen(self) -> None:
        """Test that entries cannot be mutated."""
        entry = FrequencyEntry("a", 1)
        with pytest.raises(AttributeError):
            entry.count = 2  # type: ignore[misc]


class TestCollisionsAndResize:
    """Tests for chaining and rehashing."""

    def test_constant_hash_keeps_words_distinct(self) -> None:
        """Test that all-colliding words are still kept apart by equality."""
        words = "alpha beta gamma alpha delta beta alpha".split()
        colliding = FrequencyTable(hash_func=lambda w: 7)
        normal = FrequencyTable()
        for word in words:
            colliding.bump(word)
            normal.bump(word)
        assert _as_dict(colliding) == _as_dict(normal) == {
            "alpha": 3,
            "beta": 2,
            "gamma": 1,
            "delta": 1,
        }

    def test_resize_grows_and_keeps_counts(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that passing the load factor doubles capacity without losing counts."""
        table = FrequencyTable(capacity=4, load_factor=0.5)
        words = [f"w{chr(97 + i % 26)}{chr(97 + i // 26)}" for i in range(100)]
        with caplog.at_level(logging.DEBUG, logger="wordrank.table"):
            for word in words:
                table.bump(word)
                table.bump(word)
        assert table.capacity >= 200
        assert len(table) == 100
        assert table.total == 200
        assert all(table.get(w) == 2 for w in words)
        assert "Resized frequency table" in caplog.text

    def test_capacity_rounded_to_power_of_two(self) -> None:
        """Test that the initial capacity is a power of two."""
        assert FrequencyTable(capacity=100).capacity == 128
        assert FrequencyTable(capacity=1).capacity == 1

    def test_clear_restores_initial_capacity(self) -> None:
        """Test that clear releases entries and shrinks the table."""
        table = FrequencyTable(capacity=2)
        for i in range(50):
            table.bump("x" * (i + 1))
        table.clear()
        assert table.capacity == 2
        assert len(table) == 0
        assert table.total == 0

    def test_invalid_parameters_raise(self) -> None:
        """Test that bad capacity or load factor are rejected."""
        with pytest.raises(InvalidArgumentError):
            FrequencyTable(capacity=0)
        with pytest.raises(InvalidArgumentError):
            FrequencyTable(load_factor=0)
        with pytest.raises(InvalidArgumentError):
            FrequencyTable(load_factor=1.5)


class TestHashFunctions:
    """Tests for the hash function registry."""

    def test_djb2_known_values(self) -> None:
        """Test djb2 against hand-computed values."""
        assert djb2("") == 5381
        assert djb2("a") == 5381 * 33 + 97
        assert 0 <= djb2("a" * 1000) <= 0xFFFFFFFF

    def test_djb2_table_matches_builtin(self) -> None:
        """Test that the hash choice does not change the entries."""
        words = "to be or not to be that is the question".split()
        a = FrequencyTable(hash_func=djb2)
        b = FrequencyTable()
        for word in words:
            a.bump(word)
            b.bump(word)
        assert _as_dict(a) == _as_dict(b)

    def test_lookup_by_name(self) -> None:
        """Test resolving hash functions from config names."""
        assert get_hash_function("djb2") is djb2
        assert get_hash_function("builtin") is hash
        with pytest.raises(InvalidArgumentError, match="Unknown hash function"):
            get_hash_function("md5")
