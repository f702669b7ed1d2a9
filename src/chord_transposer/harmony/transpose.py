"""Chord symbol transposition."""

from __future__ import annotations

import re
from dataclasses import dataclass

from chord_transposer.errors import InvalidChordFormatError
from chord_transposer.harmony.chromatic import DEFAULT_TABLE, SCALE_SIZE, ChromaticTable
from chord_transposer.harmony.notes import NOTE_PATTERN, Note, resolve_index, spell_for_index

# Root at the start of a chord symbol; the rest is the quality
_ROOT_RE = re.compile(rf"^({NOTE_PATTERN})")

CHORD_SEPARATOR = " "


@dataclass(frozen=True)
class ChordSymbol:
    """A chord split into its root and opaque quality suffix.

    Attributes:
        root: Root note (e.g., F#).
        quality: Everything after the root (e.g., 'm7', '/B'), may be empty.
    """

    root: Note
    quality: str = ""

    @property
    def name(self) -> str:
        """Get the full chord symbol."""
        return f"{self.root.spelling}{self.quality}"

    def __str__(self) -> str:
        return self.name


def split_chord(chord: str) -> ChordSymbol:
    """Split a chord symbol into root and quality.

    Args:
        chord: Chord symbol such as 'Am' or 'Bb7'.

    Returns:
        The split chord.

    Raises:
        InvalidChordFormatError: If the chord does not start with a root.
    """
    match = _ROOT_RE.match(chord)
    if not match:
        raise InvalidChordFormatError(chord)

    root = match.group(1)
    return ChordSymbol(root=Note.parse(root), quality=chord[len(root):])


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def transpose_chord(chord: str, interval: int, table: ChromaticTable = DEFAULT_TABLE) -> str:
    """Transpose a chord symbol by a number of semitones.

    Only the root moves; the quality is copied through unchanged. The new
    root is spelled with a sharp when moving up and a flat when moving
    down.

    Args:
        chord: Chord symbol to transpose.
        interval: Signed semitone count.
        table: Chromatic table to resolve against.

    Returns:
        The transposed chord symbol.

    Raises:
        InvalidChordFormatError: If the chord has no recognizable root.
        UnknownNoteError: If the root is not in the chromatic table.
    """
    symbol = split_chord(chord)
    root_index = resolve_index(symbol.root, table)
    new_index = (root_index + interval) % SCALE_SIZE
    new_root = spell_for_index(new_index, _sign(interval), table)
    return new_root + symbol.quality


def transpose_chords(chords: str, interval: int, table: ChromaticTable = DEFAULT_TABLE) -> str:
    """Transpose a space-separated sequence of chords.

    The sequence is split on single spaces, so repeated spaces produce
    empty chords, which are rejected. The first failing chord aborts the
    whole sequence.

    Args:
        chords: Chords separated by single spaces (e.g., 'C G Am F').
        interval: Signed semitone count.
        table: Chromatic table to resolve against.

    Returns:
        The transposed chords, joined by single spaces.
    """
    transposed = [
        transpose_chord(chord, interval, table) for chord in chords.split(CHORD_SEPARATOR)
    ]
    return CHORD_SEPARATOR.join(transposed)


class Transposer:
    """Transposes chords against a fixed chromatic table."""

    def __init__(self, table: ChromaticTable = DEFAULT_TABLE) -> None:
        self.table = table

    def transpose_chord(self, chord: str, interval: int) -> str:
        return transpose_chord(chord, interval, self.table)

    def transpose_chords(self, chords: str, interval: int) -> str:
        return transpose_chords(chords, interval, self.table)
