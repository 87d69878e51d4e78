"""Core data types: nucleotide bases, sequences, frequency tables and options."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum


class Base(IntEnum):
    """A nucleotide symbol; the plain bases come first, then the ambiguity codes."""

    A = 0
    C = 1
    G = 2
    T = 3
    W = 4
    S = 5
    M = 6
    K = 7
    R = 8
    Y = 9
    B = 10
    D = 11
    H = 12
    V = 13
    N = 14
    GAP = 15
    NONE = 16

    @classmethod
    def from_char(cls, char: str) -> Base:
        """Map an alignment character to a base; anything unknown is a gap."""
        return _CHAR_TO_BASE.get(char, cls.GAP)

    @property
    def is_plain(self) -> bool:
        """True for A, C, G and T."""
        return self <= Base.T

    @property
    def is_informative(self) -> bool:
        """False for gaps, N and the empty placeholder."""
        return self not in (Base.GAP, Base.N, Base.NONE)


_CHAR_TO_BASE = {
    b.name: b for b in Base if b not in (Base.GAP, Base.NONE)
}

# Plain bases each ambiguity code stands for, indexed by ``code - Base.W``.
REPLACEMENTS: tuple[tuple[Base, ...], ...] = (
    (Base.A, Base.T),
    (Base.G, Base.C),
    (Base.A, Base.C),
    (Base.G, Base.T),
    (Base.A, Base.G),
    (Base.C, Base.T),
    (Base.C, Base.G, Base.T),
    (Base.A, Base.G, Base.T),
    (Base.A, Base.C, Base.T),
    (Base.A, Base.C, Base.G),
)


@dataclass(frozen=True)
class Sequence:
    """An aligned sequence; two sequences are equal when group and bases match."""

    index: int = field(compare=False)
    group: int
    name: str = field(compare=False)
    seq: tuple[Base, ...]


class Separator(Enum):
    """Field separator for the delimited output."""

    COMMA = "comma"
    SEMICOLON = "semicolon"
    TAB = "tab"

    def symbol(self) -> str:
        """The character written between fields."""
        return _SEPARATOR_SYMBOLS[self]


_SEPARATOR_SYMBOLS = {
    Separator.COMMA: ",",
    Separator.SEMICOLON: ";",
    Separator.TAB: "\t",
}


def _empty_table() -> list[list[float]]:
    return [[0.0] * 4 for _ in REPLACEMENTS]


@dataclass
class Frequencies:
    """Base counts at one site of one group and the derived ambiguity resolutions."""

    count: list[int] = field(default_factory=lambda: [0, 0, 0, 0])
    frequencies: list[list[float]] = field(default_factory=_empty_table)
    normal_count: int = 0
    ambiguous_count: int = 0
    percentage: float = 0.0

    def __getitem__(self, index: int) -> list[float]:
        return self.frequencies[index]


@dataclass
class AmbiguityInfo:
    """Per-group, per-site frequencies and the ambiguity threshold."""

    groups: list[list[Frequencies]]
    threshold: float


@dataclass
class Offset:
    """Position and number of a group's sequences in a sorted list."""

    offset: int | None = None
    count: int = 0