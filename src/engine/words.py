"""
Lexicon Duel - Word Extractor

Finds every run of tiles that includes at least one provisional tile.
Runs are keyed by (start row, start column, direction) so a word spanning
several placed tiles is reported once, and two different runs that happen
to spell the same letters are reported separately.
"""

from dataclasses import dataclass

from src.engine.base import Direction, Square
from src.engine.board import Board, all_provisional_squares


@dataclass(frozen=True)
class WordRun:
    """
    A maximal line of occupied squares.

    Attributes:
        direction: Axis the run is read along
        squares: Squares from first to last letter
    """
    direction: Direction
    squares: tuple[Square, ...]

    @property
    def key(self) -> tuple[int, int, Direction]:
        start = self.squares[0]
        return (start.row, start.col, self.direction)

    @property
    def text(self) -> str:
        return "".join(sq.tile.letter for sq in self.squares if sq.tile is not None)

    @property
    def has_provisional(self) -> bool:
        return any(sq.is_provisional for sq in self.squares)

    def __len__(self) -> int:
        return len(self.squares)


def scan_run(board: Board, row: int, col: int, direction: Direction) -> WordRun:
    """
    Collect the run through (row, col) along ``direction``.

    Walks backward while the previous square is occupied to find the
    start, then forward until an empty square or the board edge.
    """
    dr, dc = direction.step
    while board.is_occupied(row - dr, col - dc):
        row -= dr
        col -= dc

    squares: list[Square] = []
    while board.is_occupied(row, col):
        squares.append(board.square(row, col))
        row += dr
        col += dc
    return WordRun(direction=direction, squares=tuple(squares))


def find_new_runs(board: Board) -> tuple[WordRun, ...]:
    """
    Every distinct run longer than one tile that contains a provisional tile.

    Runs are returned in scan order: provisional squares row-major, each
    scanned horizontally then vertically.
    """
    seen: set[tuple[int, int, Direction]] = set()
    runs: list[WordRun] = []
    for sq in all_provisional_squares(board):
        for direction in (Direction.HORIZONTAL, Direction.VERTICAL):
            run = scan_run(board, sq.row, sq.col, direction)
            if run.key in seen:
                continue
            if len(run) > 1 and run.has_provisional:
                seen.add(run.key)
                runs.append(run)
    return tuple(runs)


def extract_new_words(board: Board) -> tuple[str, ...]:
    """Letters of each new word, one entry per distinct position."""
    return tuple(run.text for run in find_new_runs(board))
