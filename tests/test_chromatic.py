"""Tests for the chromatic table."""

import dataclasses

import pytest

from chord_transposer.errors import ChromaticTableError
from chord_transposer.harmony.chromatic import (
    DEFAULT_SCALE,
    DEFAULT_TABLE,
    SCALE_SIZE,
    ChromaticTable,
    EnharmonicPair,
    NaturalSpelling,
    parse_entry,
)


class TestParseEntry:
    """Tests for raw entry parsing."""

    def test_natural(self):
        """Test entry without separator."""
        assert parse_entry("C") == NaturalSpelling("C")

    def test_enharmonic_pair(self):
        """Test sharp/flat entry."""
        entry = parse_entry("C#/Db")
        assert entry == EnharmonicPair(sharp="C#", flat="Db")
        assert entry.spellings == ("C#", "Db")

    def test_custom_separator(self):
        """Test entry with a different separator."""
        assert parse_entry("F#|Gb", separator="|") == EnharmonicPair("F#", "Gb")

    def test_empty_entry(self):
        """Test empty entries are rejected."""
        with pytest.raises(ChromaticTableError):
            parse_entry("  ")

    def test_missing_half(self):
        """Test pairs with an empty half are rejected."""
        with pytest.raises(ChromaticTableError):
            parse_entry("C#/")

    def test_too_many_halves(self):
        """Test entries with two separators are rejected."""
        with pytest.raises(ChromaticTableError):
            parse_entry("C#/Db/Bx")


class TestChromaticTable:
    """Tests for ChromaticTable."""

    def test_default_table_size(self):
        """Test default table has one entry per pitch class."""
        assert len(DEFAULT_TABLE) == SCALE_SIZE

    def test_default_table_starts_at_c(self):
        """Test index 0 is C."""
        assert DEFAULT_TABLE[0] == NaturalSpelling("C")

    def test_index_wraps(self):
        """Test indices are taken modulo 12."""
        assert DEFAULT_TABLE[12] == DEFAULT_TABLE[0]
        assert DEFAULT_TABLE[-1] == NaturalSpelling("B")
        assert DEFAULT_TABLE[13] == EnharmonicPair("C#", "Db")

    def test_raw_entries_round_trip(self):
        """Test raw entries render back in table format."""
        assert DEFAULT_TABLE.raw_entries() == list(DEFAULT_SCALE)

    def test_wrong_size(self):
        """Test tables with the wrong number of entries are rejected."""
        with pytest.raises(ChromaticTableError, match="exactly 12"):
            ChromaticTable.from_entries(DEFAULT_SCALE[:11])

    def test_duplicate_spelling(self):
        """Test duplicate spellings across entries are rejected."""
        entries = list(DEFAULT_SCALE)
        entries[2] = "C"
        with pytest.raises(ChromaticTableError, match="Duplicate"):
            ChromaticTable.from_entries(entries)

    def test_empty_separator(self):
        """Test an empty separator is rejected."""
        with pytest.raises(ChromaticTableError):
            ChromaticTable.from_entries(DEFAULT_SCALE, separator="")

    def test_immutable(self):
        """Test the table cannot be modified."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_TABLE.entries = ()  # type: ignore[misc]

    def test_list_entries_copied_to_tuple(self):
        """Test a table built from a list does not share it."""
        entries = [parse_entry(raw) for raw in DEFAULT_SCALE]
        table = ChromaticTable(entries=entries)  # type: ignore[arg-type]
        entries[0] = NaturalSpelling("X")
        assert isinstance(table.entries, tuple)
        assert table[0] == NaturalSpelling("C")

    def test_iteration_order(self):
        """Test iteration follows index order."""
        names = [entry.spellings[0] for entry in DEFAULT_TABLE]
        assert names == ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
