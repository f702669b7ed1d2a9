"""Exceptions raised while resolving notes and transposing chords."""

from __future__ import annotations


class ChordError(ValueError):
    """Base class for chord and note input errors."""


class UnknownNoteError(ChordError):
    """A note spelling matches no entry of the chromatic table."""

    def __init__(self, note: str) -> None:
        super().__init__(f"Note {note} not found in chromatic scale.")
        self.note = note


class InvalidChordFormatError(ChordError):
    """A chord symbol does not start with a recognizable root."""

    def __init__(self, chord: str) -> None:
        super().__init__(f"Invalid chord format: {chord!r}")
        self.chord = chord


class ChromaticTableError(ValueError):
    """Chromatic table data violates the table invariants."""
