"""
Lexicon Duel - Test Configuration and Fixtures

Common fixtures and board builders for all test modules.
"""

import itertools
from typing import Callable

import pytest

from src.config.settings import get_settings
from src.dictionary.client import get_dictionary_validator
from src.engine.base import Tile
from src.engine.board import Board, commit_provisional, create_board, place_tile
from src.engine.tiles import LETTER_DISTRIBUTION

Placement = tuple[int, int, str]


def _spell(row: int, col: int, word: str, direction: str = "H") -> list[Placement]:
    dr, dc = (0, 1) if direction == "H" else (1, 0)
    return [(row + i * dr, col + i * dc, letter) for i, letter in enumerate(word)]


# =============================================================================
# TILE FIXTURES
# =============================================================================

@pytest.fixture
def tile_factory() -> Callable[..., Tile]:
    """
    Build tiles with unique ids.

    Lowercase letters produce blanks assigned to that letter (value 0).
    """
    counter = itertools.count()

    def make(letter: str, value: int | None = None) -> Tile:
        tile_id = f"test-{next(counter)}"
        if letter.islower():
            return Tile(id=tile_id, letter="", value=0, is_blank=True).assign(letter)
        if value is None:
            value = LETTER_DISTRIBUTION[letter][1]
        return Tile(id=tile_id, letter=letter, value=value)

    return make


@pytest.fixture
def blank_tile() -> Tile:
    """An unassigned blank tile."""
    return Tile(id="blank-0", letter="", value=0, is_blank=True)


# =============================================================================
# BOARD FIXTURES
# =============================================================================

@pytest.fixture
def spell() -> Callable[..., list[Placement]]:
    """Placements spelling ``word`` from (row, col) across ("H") or down ("V")."""
    return _spell


@pytest.fixture
def board_builder(tile_factory) -> Callable[..., Board]:
    """
    Build a board from committed and provisional placements.

    Each placement is (row, col, letter).
    """

    def build(
        committed: list[Placement] = (),
        provisional: list[Placement] = (),
    ) -> Board:
        board = create_board()
        for row, col, letter in committed:
            board = place_tile(board, row, col, tile_factory(letter))
        board = commit_provisional(board)
        for row, col, letter in provisional:
            board = place_tile(board, row, col, tile_factory(letter))
        return board

    return build


@pytest.fixture
def empty_board() -> Board:
    return create_board()


# =============================================================================
# SETTINGS
# =============================================================================

@pytest.fixture(autouse=True)
def clear_cached_singletons():
    """Reset cached settings and validator between tests."""
    get_settings.cache_clear()
    get_dictionary_validator.cache_clear()
    yield
    get_settings.cache_clear()
    get_dictionary_validator.cache_clear()
