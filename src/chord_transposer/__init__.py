"""Chord symbol transposition with direction-based enharmonic spelling."""

from chord_transposer.errors import (
    ChordError,
    ChromaticTableError,
    InvalidChordFormatError,
    UnknownNoteError,
)
from chord_transposer.harmony import transpose_chord, transpose_chords

__version__ = "0.1.0"

__all__ = [
    "ChordError",
    "ChromaticTableError",
    "InvalidChordFormatError",
    "UnknownNoteError",
    "__version__",
    "transpose_chord",
    "transpose_chords",
]
