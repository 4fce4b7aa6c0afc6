"""
Lexicon Duel - Move Structure Validator

Decides whether the tiles placed this turn form a structurally legal move:
straight line, no gaps, crossing the center on the first move, touching
existing tiles afterwards. Word legality is not checked here.
"""

from src.engine.base import CENTER, StructureResult, StructureViolation
from src.engine.board import Board, all_provisional_squares, has_committed_tiles, is_in_bounds


_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _invalid(violation: StructureViolation) -> StructureResult:
    return StructureResult(valid=False, violation=violation)


class MoveValidator:
    """
    Stateless structural validator.

    All methods are class methods operating on an immutable board.
    """

    MIN_FIRST_WORD = 2

    @classmethod
    def validate_structure(cls, board: Board) -> StructureResult:
        """
        Check the provisional placement against the structural rules.

        Checks run in order and the first failure is reported:
        non-empty, linearity, continuity, connectivity.

        Args:
            board: Board with zero or more provisional squares

        Returns:
            StructureResult, valid with no reason when every check passes
        """
        placed = all_provisional_squares(board)
        if not placed:
            return _invalid(StructureViolation.NO_TILES)

        rows = {sq.row for sq in placed}
        cols = {sq.col for sq in placed}
        is_horizontal = len(rows) == 1
        if not is_horizontal and len(cols) != 1:
            return _invalid(StructureViolation.NOT_LINEAR)

        if cls._has_gaps(board, placed, is_horizontal):
            return _invalid(StructureViolation.GAPS)

        if not has_committed_tiles(board):
            if not any((sq.row, sq.col) == CENTER for sq in placed):
                return _invalid(StructureViolation.MISSES_CENTER)
            if len(placed) < cls.MIN_FIRST_WORD:
                return _invalid(StructureViolation.TOO_SHORT)
        elif not cls._touches_committed(board, placed):
            return _invalid(StructureViolation.DISCONNECTED)

        return StructureResult(valid=True)

    @classmethod
    def _has_gaps(cls, board: Board, placed, is_horizontal: bool) -> bool:
        """True if an empty square sits between the outermost placed tiles."""
        if is_horizontal:
            row = placed[0].row
            span = [sq.col for sq in placed]
            return any(not board.is_occupied(row, c) for c in range(min(span), max(span) + 1))
        col = placed[0].col
        span = [sq.row for sq in placed]
        return any(not board.is_occupied(r, col) for r in range(min(span), max(span) + 1))

    @classmethod
    def _touches_committed(cls, board: Board, placed) -> bool:
        """True if any placed tile is orthogonally adjacent to a committed tile."""
        for sq in placed:
            for dr, dc in _NEIGHBOURS:
                r, c = sq.row + dr, sq.col + dc
                if is_in_bounds(r, c) and board.square(r, c).is_committed:
                    return True
        return False


def validate_structure(board: Board) -> StructureResult:
    """Module-level shortcut for ``MoveValidator.validate_structure``."""
    return MoveValidator.validate_structure(board)
