"""Chromatic table, note resolution, and chord transposition."""

from chord_transposer.harmony.chromatic import (
    DEFAULT_SCALE,
    DEFAULT_TABLE,
    SCALE_SIZE,
    ChromaticTable,
    EnharmonicPair,
    NaturalSpelling,
)
from chord_transposer.harmony.notes import (
    Accidental,
    Note,
    resolve_index,
    spell_for_index,
)
from chord_transposer.harmony.transpose import (
    ChordSymbol,
    Transposer,
    split_chord,
    transpose_chord,
    transpose_chords,
)

__all__ = [
    # Chromatic table
    "DEFAULT_SCALE",
    "DEFAULT_TABLE",
    "SCALE_SIZE",
    "ChromaticTable",
    "EnharmonicPair",
    "NaturalSpelling",
    # Notes
    "Accidental",
    "Note",
    "resolve_index",
    "spell_for_index",
    # Transposition
    "ChordSymbol",
    "Transposer",
    "split_chord",
    "transpose_chord",
    "transpose_chords",
]
