"""
Lexicon Duel - Scoring Engine

Scores the provisional placement. Uses the same position-keyed run scan as
the word extractor.

Scoring Rules:
    - Letter value = tile face value (blanks are worth 0)
    - DL / TL squares multiply the letter placed on them this turn
    - DW / star squares double, TW squares triple, every word crossing a
      tile placed on them this turn
    - Premium squares under committed tiles grant nothing
    - Placing a full rack (7 tiles) adds a flat 50-point bingo bonus
"""

from src.engine.base import BINGO_BONUS, RACK_SIZE, TurnScore, WordScore
from src.engine.board import Board, all_provisional_squares
from src.engine.words import WordRun, find_new_runs


class ScoringEngine:
    """
    Stateless engine for turn scoring.

    All methods are class methods operating on immutable data.
    """

    BINGO_TILES = RACK_SIZE
    BINGO_POINTS = BINGO_BONUS

    @classmethod
    def score_run(cls, run: WordRun) -> WordScore:
        """
        Score a single word run.

        Multipliers only apply on squares holding provisional tiles.

        Args:
            run: The run to score

        Returns:
            WordScore with the letters, final points and word factor
        """
        letter_total = 0
        word_multiplier = 1
        for sq in run.squares:
            value = sq.tile.value if sq.tile is not None else 0
            if sq.is_provisional:
                value *= sq.multiplier.letter_factor
                word_multiplier *= sq.multiplier.word_factor
            letter_total += value
        return WordScore(
            word=run.text,
            points=letter_total * word_multiplier,
            word_multiplier=word_multiplier,
        )

    @classmethod
    def score_turn(cls, board: Board) -> TurnScore:
        """
        Score every new word plus the bingo bonus.

        Args:
            board: Board with the provisional placement

        Returns:
            TurnScore; total is 0 when nothing provisional is on the board
        """
        placed = all_provisional_squares(board)
        if not placed:
            return TurnScore(total=0)

        words = tuple(cls.score_run(run) for run in find_new_runs(board))
        total = sum(word.points for word in words)

        bingo = len(placed) == cls.BINGO_TILES
        if bingo:
            total += cls.BINGO_POINTS

        return TurnScore(total=total, words=words, bingo=bingo)


def score_turn(board: Board) -> TurnScore:
    """Module-level shortcut for ``ScoringEngine.score_turn``."""
    return ScoringEngine.score_turn(board)
