"""
Lexicon Duel - Game Engine Base Classes

This module defines the foundational constants, enums and value types used
throughout the game engine. All classes are immutable (frozen dataclasses) so
board, rack and bag values can be threaded through engine calls without
hidden mutation.
"""

from dataclasses import dataclass, field, replace
from enum import Enum, auto


BOARD_SIZE = 15
CENTER = (7, 7)
RACK_SIZE = 7
BINGO_BONUS = 50


class Multiplier(Enum):
    """Premium classification of a board square."""
    NONE = "none"
    DOUBLE_LETTER = "DL"
    TRIPLE_LETTER = "TL"
    DOUBLE_WORD = "DW"
    TRIPLE_WORD = "TW"
    STAR = "star"    # Center square, doubles the word

    @property
    def letter_factor(self) -> int:
        """Factor applied to a single freshly placed letter."""
        if self is Multiplier.DOUBLE_LETTER:
            return 2
        if self is Multiplier.TRIPLE_LETTER:
            return 3
        return 1

    @property
    def word_factor(self) -> int:
        """Factor applied to every word crossing a freshly placed tile."""
        if self in (Multiplier.DOUBLE_WORD, Multiplier.STAR):
            return 2
        if self is Multiplier.TRIPLE_WORD:
            return 3
        return 1


class Direction(Enum):
    """Axis along which a word is read."""
    HORIZONTAL = (0, 1)
    VERTICAL = (1, 0)

    @property
    def step(self) -> tuple[int, int]:
        """(row delta, column delta) of one step along the axis."""
        return self.value


class ErrorKind(Enum):
    """Recoverable, user-facing failure categories."""
    STRUCTURAL = auto()
    DICTIONARY_REJECTION = auto()
    VALIDATION_TRANSPORT = auto()
    RESOURCE_EXHAUSTION = auto()


@dataclass(frozen=True)
class Tile:
    """
    A single letter tile.

    Attributes:
        id: Unique identifier (e.g. "tile-12")
        letter: Display letter; "" for an unassigned blank
        value: Point value; always 0 for blanks
        is_blank: Whether the tile is a blank
    """
    id: str
    letter: str
    value: int
    is_blank: bool = False

    def __post_init__(self) -> None:
        """Validate tile fields."""
        if self.value < 0:
            raise ValueError(f"Tile value cannot be negative, got {self.value}.")
        if self.is_blank and self.value != 0:
            raise ValueError(f"Blank tile must be worth 0, got {self.value}.")

    @property
    def is_assigned(self) -> bool:
        """True once the tile carries a concrete letter."""
        return bool(self.letter)

    def assign(self, letter: str) -> "Tile":
        """Return this blank carrying ``letter`` (value stays 0)."""
        if not self.is_blank:
            raise ValueError(f"Only blank tiles can be assigned a letter, {self.id} is {self.letter}.")
        letter = letter.upper()
        if len(letter) != 1 or not ("A" <= letter <= "Z"):
            raise ValueError(f"Blank letter must be a single A-Z character, got {letter!r}.")
        return replace(self, letter=letter, value=0)

    def reset(self) -> "Tile":
        """Return the tile as it must be held on a rack or in the bag."""
        if not self.is_blank:
            return self
        return replace(self, letter="", value=0)


@dataclass(frozen=True)
class Square:
    """
    One board position.

    Attributes:
        row: Row index (0-based)
        col: Column index (0-based)
        multiplier: Premium classification
        tile: Occupying tile, if any
        is_provisional: True when the tile was placed this turn
    """
    row: int
    col: int
    multiplier: Multiplier = Multiplier.NONE
    tile: Tile | None = None
    is_provisional: bool = False

    def __post_init__(self) -> None:
        if self.tile is None and self.is_provisional:
            raise ValueError(f"Empty square ({self.row}, {self.col}) cannot be provisional.")

    @property
    def is_occupied(self) -> bool:
        return self.tile is not None

    @property
    def is_committed(self) -> bool:
        """True when the square holds a tile from an earlier turn."""
        return self.tile is not None and not self.is_provisional


class StructureViolation(Enum):
    """Structural rule violations, in the order they are checked."""
    NO_TILES = "No tiles placed."
    NOT_LINEAR = "Tiles must be placed in a straight line."
    GAPS = "There are gaps in your word."
    MISSES_CENTER = "First word must cross the center star."
    TOO_SHORT = "First word must be at least 2 letters."
    DISCONNECTED = "Word must connect to existing tiles."


@dataclass(frozen=True)
class StructureResult:
    """
    Verdict of the move structure check.

    Attributes:
        valid: Whether the provisional placement is structurally legal
        violation: The first rule broken, when invalid
    """
    valid: bool
    violation: StructureViolation | None = None

    @property
    def reason(self) -> str | None:
        """Human-readable reason, None when valid."""
        return self.violation.value if self.violation is not None else None

    @property
    def error(self) -> ErrorKind | None:
        return None if self.valid else ErrorKind.STRUCTURAL


@dataclass(frozen=True)
class WordScore:
    """
    Score of a single word formed this turn.

    Attributes:
        word: Letters of the word
        points: Final points after multipliers
        word_multiplier: Combined word factor applied
    """
    word: str
    points: int
    word_multiplier: int = 1

    def __str__(self) -> str:
        return f"{self.word} ({self.points})"


@dataclass(frozen=True)
class TurnScore:
    """
    Complete scoring result for the provisional placement.

    Attributes:
        total: Points for the turn, bingo included
        words: Per-word scores in scan order
        bingo: Whether a full rack was placed
    """
    total: int
    words: tuple[WordScore, ...] = field(default_factory=tuple)
    bingo: bool = False

    @property
    def breakdown(self) -> tuple[str, ...]:
        """Formatted "WORD (score)" entries for display."""
        lines = tuple(str(word) for word in self.words)
        if self.bingo:
            lines += (f"BINGO! (+{BINGO_BONUS})",)
        return lines

    def __str__(self) -> str:
        lines = [f"Total: {self.total} points"]
        for entry in self.breakdown:
            lines.append(f"  - {entry}")
        return "\n".join(lines)
