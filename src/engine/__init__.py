"""
Lexicon Duel Move Engine.

Pure Python game logic with zero UI/network dependencies.
Handles board layout, move structure validation, word extraction,
scoring and the tile bag.
"""

from src.engine.base import (
    BINGO_BONUS,
    BOARD_SIZE,
    CENTER,
    RACK_SIZE,
    Direction,
    ErrorKind,
    Multiplier,
    Square,
    StructureResult,
    StructureViolation,
    Tile,
    TurnScore,
    WordScore,
)
from src.engine.board import (
    Board,
    all_provisional_squares,
    create_board,
    has_provisional_tiles,
    is_in_bounds,
)
from src.engine.scoring import ScoringEngine, score_turn
from src.engine.tiles import draw, generate_bag, swap_tiles
from src.engine.validator import MoveValidator, validate_structure
from src.engine.words import extract_new_words, find_new_runs

__all__ = [
    # Constants
    "BINGO_BONUS",
    "BOARD_SIZE",
    "CENTER",
    "RACK_SIZE",
    # Data Classes
    "Board",
    "Square",
    "StructureResult",
    "Tile",
    "TurnScore",
    "WordScore",
    # Enums
    "Direction",
    "ErrorKind",
    "Multiplier",
    "StructureViolation",
    # Engines
    "MoveValidator",
    "ScoringEngine",
    # Operations
    "all_provisional_squares",
    "create_board",
    "draw",
    "extract_new_words",
    "find_new_runs",
    "generate_bag",
    "has_provisional_tiles",
    "is_in_bounds",
    "score_turn",
    "swap_tiles",
    "validate_structure",
]
