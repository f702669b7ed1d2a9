"""The chromatic scale table used to resolve and spell pitch classes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Union

from chord_transposer.errors import ChromaticTableError

# Number of pitch classes in an octave
SCALE_SIZE = 12

# Separator between the sharp and flat halves of an enharmonic entry
DEFAULT_SEPARATOR = "/"

# Index 0 = C, one semitone per step
DEFAULT_SCALE = (
    "C", "C#/Db", "D", "D#/Eb", "E", "F",
    "F#/Gb", "G", "G#/Ab", "A", "A#/Bb", "B",
)


@dataclass(frozen=True)
class NaturalSpelling:
    """A pitch class with a single spelling (e.g. 'C').

    Attributes:
        name: The note name.
    """

    name: str

    @property
    def spellings(self) -> tuple[str, ...]:
        """All spellings of this pitch class."""
        return (self.name,)

    def matches(self, spelling: str) -> bool:
        """Check whether a note spelling names this pitch class."""
        return spelling == self.name

    def to_string(self, separator: str = DEFAULT_SEPARATOR) -> str:
        """Render in the raw table format."""
        return self.name


@dataclass(frozen=True)
class EnharmonicPair:
    """A pitch class reachable by either accidental (e.g. 'C#' / 'Db').

    Attributes:
        sharp: The sharp spelling.
        flat: The flat spelling.
    """

    sharp: str
    flat: str

    @property
    def spellings(self) -> tuple[str, ...]:
        """All spellings of this pitch class, sharp form first."""
        return (self.sharp, self.flat)

    def matches(self, spelling: str) -> bool:
        """Check whether a note spelling names this pitch class."""
        return spelling == self.sharp or spelling == self.flat

    def to_string(self, separator: str = DEFAULT_SEPARATOR) -> str:
        """Render in the raw table format."""
        return f"{self.sharp}{separator}{self.flat}"


TableEntry = Union[NaturalSpelling, EnharmonicPair]


def parse_entry(raw: str, separator: str = DEFAULT_SEPARATOR) -> TableEntry:
    """Parse a raw table entry such as 'F' or 'F#/Gb'.

    Args:
        raw: The entry text.
        separator: Separator between sharp and flat spellings.

    Returns:
        The parsed table entry.

    Raises:
        ChromaticTableError: If the entry is empty or malformed.
    """
    raw = raw.strip()
    if not raw:
        raise ChromaticTableError("Empty chromatic table entry")

    if separator not in raw:
        return NaturalSpelling(raw)

    parts = [part.strip() for part in raw.split(separator)]
    if len(parts) != 2 or not all(parts):
        raise ChromaticTableError(f"Invalid enharmonic entry: {raw!r}")

    return EnharmonicPair(sharp=parts[0], flat=parts[1])


@dataclass(frozen=True)
class ChromaticTable:
    """Ordered, immutable table of the 12 pitch-class spellings.

    Index arithmetic is modulo 12, so any integer index is accepted.

    Attributes:
        entries: One entry per pitch class, starting at C.
        separator: Separator used when rendering enharmonic pairs.
    """

    entries: tuple[TableEntry, ...]
    separator: str = DEFAULT_SEPARATOR

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))

        if len(self.entries) != SCALE_SIZE:
            raise ChromaticTableError(
                f"Chromatic table needs exactly {SCALE_SIZE} entries, got {len(self.entries)}"
            )

        seen: set[str] = set()
        for entry in self.entries:
            for spelling in entry.spellings:
                if spelling in seen:
                    raise ChromaticTableError(f"Duplicate spelling in chromatic table: {spelling}")
                seen.add(spelling)

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[str],
        separator: str = DEFAULT_SEPARATOR,
    ) -> ChromaticTable:
        """Build a table from raw entry strings.

        Args:
            entries: Raw entries, e.g. ``["C", "C#/Db", ...]``.
            separator: Separator between sharp and flat spellings.

        Returns:
            The validated table.

        Raises:
            ChromaticTableError: If the entries violate the table invariants.
        """
        if not separator:
            raise ChromaticTableError("Separator must not be empty")
        parsed = tuple(parse_entry(raw, separator) for raw in entries)
        return cls(entries=parsed, separator=separator)

    def __getitem__(self, index: int) -> TableEntry:
        return self.entries[index % SCALE_SIZE]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[TableEntry]:
        return iter(self.entries)

    def raw_entries(self) -> list[str]:
        """Get the entries in their raw string form."""
        return [entry.to_string(self.separator) for entry in self.entries]


DEFAULT_TABLE = ChromaticTable.from_entries(DEFAULT_SCALE)
