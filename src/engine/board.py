"""
Lexicon Duel - Board Model

The 15x15 game board with its canonical symmetric premium layout.
The board is immutable: every transition returns a new Board.
"""

from dataclasses import dataclass, replace

from src.engine.base import BOARD_SIZE, Multiplier, Square, Tile


# Canonical premium layout. "." = none, "*" = center star.
_LAYOUT: tuple[str, ...] = (
    "TW . . DL . . . TW . . . DL . . TW",
    ". DW . . . TL . . . TL . . . DW .",
    ". . DW . . . DL . DL . . . DW . .",
    "DL . . DW . . . DL . . . DW . . DL",
    ". . . . DW . . . . . DW . . . .",
    ". TL . . . TL . . . TL . . . TL .",
    ". . DL . . . DL . DL . . . DL . .",
    "TW . . DL . . . * . . . DL . . TW",
    ". . DL . . . DL . DL . . . DL . .",
    ". TL . . . TL . . . TL . . . TL .",
    ". . . . DW . . . . . DW . . . .",
    "DL . . DW . . . DL . . . DW . . DL",
    ". . DW . . . DL . DL . . . DW . .",
    ". DW . . . TL . . . TL . . . DW .",
    "TW . . DL . . . TW . . . DL . . TW",
)

_CODES: dict[str, Multiplier] = {
    ".": Multiplier.NONE,
    "DL": Multiplier.DOUBLE_LETTER,
    "TL": Multiplier.TRIPLE_LETTER,
    "DW": Multiplier.DOUBLE_WORD,
    "TW": Multiplier.TRIPLE_WORD,
    "*": Multiplier.STAR,
}

MULTIPLIER_GRID: tuple[tuple[Multiplier, ...], ...] = tuple(
    tuple(_CODES[code] for code in line.split()) for line in _LAYOUT
)


def is_in_bounds(row: int, col: int) -> bool:
    """True if (row, col) lies on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


@dataclass(frozen=True)
class Board:
    """
    Immutable N x N grid of squares.

    Attributes:
        squares: Row-major tuple of rows, each a tuple of Square
    """
    squares: tuple[tuple[Square, ...], ...]

    def __post_init__(self) -> None:
        """Validate grid shape."""
        if len(self.squares) != BOARD_SIZE:
            raise ValueError(f"Board must have {BOARD_SIZE} rows, got {len(self.squares)}")
        for r, row in enumerate(self.squares):
            if len(row) != BOARD_SIZE:
                raise ValueError(f"Row {r} has {len(row)} squares (expected {BOARD_SIZE})")

    def square(self, row: int, col: int) -> Square:
        """Square at (row, col)."""
        if not is_in_bounds(row, col):
            raise ValueError(f"Position ({row}, {col}) is off the board")
        return self.squares[row][col]

    def is_occupied(self, row: int, col: int) -> bool:
        """True if (row, col) is on the board and holds a tile."""
        return is_in_bounds(row, col) and self.squares[row][col].is_occupied

    def iter_squares(self):
        """Yield every square in row-major order."""
        for row in self.squares:
            yield from row

    def with_square(self, square: Square) -> "Board":
        """Return a copy of the board with one square replaced."""
        rows = list(self.squares)
        cells = list(rows[square.row])
        cells[square.col] = square
        rows[square.row] = tuple(cells)
        return Board(squares=tuple(rows))

    def __str__(self) -> str:
        header = "    " + " ".join(f"{c:>2}" for c in range(BOARD_SIZE))
        lines = [header, "   " + "---" * BOARD_SIZE]
        for r, row in enumerate(self.squares):
            parts = [f"{r:>2} |"]
            for sq in row:
                if sq.tile is not None:
                    letter = sq.tile.letter.lower() if sq.tile.is_blank else sq.tile.letter
                    parts.append(f" {letter} " if not sq.is_provisional else f"[{letter}]")
                elif sq.multiplier is Multiplier.NONE:
                    parts.append(" . ")
                elif sq.multiplier is Multiplier.STAR:
                    parts.append(" * ")
                else:
                    parts.append(f"{sq.multiplier.value:>3}")
            lines.append("".join(parts))
        return "\n".join(lines)


def create_board() -> Board:
    """Create an empty board with the canonical premium layout."""
    return Board(squares=tuple(
        tuple(
            Square(row=r, col=c, multiplier=MULTIPLIER_GRID[r][c])
            for c in range(BOARD_SIZE)
        )
        for r in range(BOARD_SIZE)
    ))


def has_provisional_tiles(board: Board) -> bool:
    """True if any tile was placed this turn."""
    return any(sq.is_provisional for sq in board.iter_squares())


def has_committed_tiles(board: Board) -> bool:
    """True if any tile from an earlier turn is on the board."""
    return any(sq.is_committed for sq in board.iter_squares())


def all_provisional_squares(board: Board) -> tuple[Square, ...]:
    """Provisional squares in row-major order."""
    return tuple(sq for sq in board.iter_squares() if sq.is_provisional)


def place_tile(board: Board, row: int, col: int, tile: Tile) -> Board:
    """
    Place a tile provisionally on an empty square.

    Args:
        board: Current board
        row: Target row
        col: Target column
        tile: Tile to place; blanks must already carry a letter

    Returns:
        New board with the provisional tile

    Raises:
        ValueError: If the square is off the board or occupied, or the tile
            is an unassigned blank
    """
    target = board.square(row, col)
    if target.is_occupied:
        raise ValueError(f"Square ({row}, {col}) is already occupied")
    if not tile.is_assigned:
        raise ValueError(f"Blank tile {tile.id} needs a letter before placement")
    return board.with_square(replace(target, tile=tile, is_provisional=True))


def remove_provisional_tile(board: Board, row: int, col: int) -> tuple[Board, Tile]:
    """
    Take back a tile placed this turn.

    Returns:
        Tuple of (new_board, tile) where a blank tile is reset to unassigned

    Raises:
        ValueError: If the square holds no provisional tile
    """
    target = board.square(row, col)
    if not target.is_provisional or target.tile is None:
        raise ValueError(f"Square ({row}, {col}) holds no provisional tile")
    new_board = board.with_square(replace(target, tile=None, is_provisional=False))
    return new_board, target.tile.reset()


def recall_provisional(board: Board) -> tuple[Board, tuple[Tile, ...]]:
    """
    Take back every provisional tile.

    Returns:
        Tuple of (new_board, tiles) with tiles in row-major order, blanks reset
    """
    returned: list[Tile] = []
    rows = []
    for row in board.squares:
        cells = []
        for sq in row:
            if sq.is_provisional and sq.tile is not None:
                returned.append(sq.tile.reset())
                sq = replace(sq, tile=None, is_provisional=False)
            cells.append(sq)
        rows.append(tuple(cells))
    return Board(squares=tuple(rows)), tuple(returned)


def commit_provisional(board: Board) -> Board:
    """Lock every provisional tile onto the board."""
    return Board(squares=tuple(
        tuple(replace(sq, is_provisional=False) if sq.is_provisional else sq for sq in row)
        for row in board.squares
    ))
