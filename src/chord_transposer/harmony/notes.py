"""Note spellings and their resolution against the chromatic table."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from chord_transposer.errors import UnknownNoteError
from chord_transposer.harmony.chromatic import DEFAULT_TABLE, ChromaticTable, EnharmonicPair

# One letter A-G, optionally followed by a single sharp or flat
NOTE_PATTERN = r"[A-G](?:#|b)?"

_NOTE_RE = re.compile(rf"^({NOTE_PATTERN})$")

FLAT_MARKER = "b"


class Accidental(str, Enum):
    """Accidental attached to a note letter."""

    SHARP = "#"
    FLAT = "b"


@dataclass(frozen=True)
class Note:
    """A single pitch class spelled as a letter plus optional accidental.

    Attributes:
        letter: Note letter (A-G).
        accidental: Sharp, flat, or None for a natural.
    """

    letter: str
    accidental: Accidental | None = None

    @property
    def spelling(self) -> str:
        """Get the note spelling (e.g., 'Eb')."""
        if self.accidental is None:
            return self.letter
        return f"{self.letter}{self.accidental.value}"

    @classmethod
    def parse(cls, text: str) -> Note:
        """Parse a note spelling.

        Args:
            text: Spelling such as 'C', 'F#' or 'Bb'.

        Returns:
            The parsed note.

        Raises:
            UnknownNoteError: If the text is not a note spelling.
        """
        match = _NOTE_RE.match(text)
        if not match:
            raise UnknownNoteError(text)

        accidental = Accidental(text[1]) if len(text) == 2 else None
        return cls(letter=text[0], accidental=accidental)

    def __str__(self) -> str:
        return self.spelling


def resolve_index(note: str | Note, table: ChromaticTable = DEFAULT_TABLE) -> int:
    """Find the chromatic index of a note, considering enharmonic equivalents.

    Args:
        note: Note spelling or Note.
        table: Chromatic table to search.

    Returns:
        Index of the first matching entry (0-11).

    Raises:
        UnknownNoteError: If no entry matches the spelling.
    """
    spelling = note.spelling if isinstance(note, Note) else note

    for index, entry in enumerate(table):
        if entry.matches(spelling):
            return index

    raise UnknownNoteError(spelling)


def spell_for_index(index: int, direction: int, table: ChromaticTable = DEFAULT_TABLE) -> str:
    """Spell the pitch class at an index for a transposition direction.

    Upward transpositions use the sharp form of an enharmonic pair.
    Downward transpositions use the flat form when it carries a flat
    marker. Everything else, including direction 0, falls back to the
    sharp form.

    Args:
        index: Chromatic index, taken modulo 12.
        direction: Sign gives the transposition direction.
        table: Chromatic table to read.

    Returns:
        The note spelling.
    """
    entry = table[index]
    if not isinstance(entry, EnharmonicPair):
        return entry.name

    if direction > 0:
        return entry.sharp
    if direction < 0 and FLAT_MARKER in entry.flat:
        return entry.flat
    return entry.sharp
