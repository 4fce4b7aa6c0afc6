"""
Lexicon Duel - Game Engine

Turn orchestration for a two-player game. The caller owns a single
GameState value and threads it through every call; nothing is stored here.

Turn Rules:
    - Tiles move from the current rack onto the board provisionally
    - Playing checks structure, then asks the dictionary about every new
      word, then scores, commits and refills the rack
    - A rejected play leaves the state untouched so the player can adjust
    - Swapping or passing recalls provisional tiles and ends the turn
    - Four consecutive scoreless turns end the game, as does a player
      emptying their rack once the bag is empty
"""

import random
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Iterable

from src.dictionary.validators import DictionaryValidator, check_words
from src.engine.base import RACK_SIZE, ErrorKind, Tile, TurnScore
from src.engine.board import (
    Board,
    commit_provisional,
    create_board,
    place_tile,
    recall_provisional,
    remove_provisional_tile,
)
from src.engine.scoring import ScoringEngine
from src.engine.tiles import SwapResult, draw, generate_bag, refill_rack, swap_tiles
from src.engine.validator import MoveValidator
from src.engine.words import extract_new_words


class TurnOutcome(Enum):
    """What happened when a turn action was submitted."""
    PLAYED = auto()
    REJECTED = auto()
    SWAPPED = auto()
    PASSED = auto()


@dataclass(frozen=True)
class PlayerState:
    """
    One player's score and rack.

    Attributes:
        name: Display name
        score: Banked points
        rack: Tiles held
    """
    name: str
    score: int = 0
    rack: tuple[Tile, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class GameState:
    """
    Complete state of a game.

    Attributes:
        board: Current board (may hold provisional tiles)
        bag: Undrawn tiles
        players: Exactly two players
        current_index: Index of the player to move
        consecutive_passes: Scoreless turns in a row
        is_over: Whether the game has ended
    """
    board: Board
    bag: tuple[Tile, ...]
    players: tuple[PlayerState, PlayerState]
    current_index: int = 0
    consecutive_passes: int = 0
    is_over: bool = False

    def __post_init__(self) -> None:
        if len(self.players) != 2:
            raise ValueError(f"A game needs exactly 2 players, got {len(self.players)}.")
        if self.current_index not in (0, 1):
            raise ValueError(f"Current player index must be 0 or 1, got {self.current_index}.")

    @property
    def current_player(self) -> PlayerState:
        return self.players[self.current_index]

    def with_current_player(self, player: PlayerState) -> "GameState":
        players = list(self.players)
        players[self.current_index] = player
        return replace(self, players=tuple(players))


@dataclass(frozen=True)
class TurnResult:
    """
    Result of a turn action.

    Attributes:
        outcome: What happened
        state: State after the action (the input state when rejected)
        score: Scoring of a played turn
        words: Words submitted to the dictionary
        invalid_words: Words the dictionary rejected (or an error marker)
        error: Failure category when rejected
        reason: Human-readable reason when rejected
    """
    outcome: TurnOutcome
    state: GameState
    score: TurnScore | None = None
    words: tuple[str, ...] = field(default_factory=tuple)
    invalid_words: tuple[str, ...] = field(default_factory=tuple)
    error: ErrorKind | None = None
    reason: str | None = None

    @property
    def accepted(self) -> bool:
        return self.outcome is not TurnOutcome.REJECTED


class GameEngine:
    """
    Stateless engine for game flow.

    All methods are class methods operating on immutable data.
    State is passed in and returned, never stored.
    """

    PLAYER_COUNT = 2
    MAX_SCORELESS_TURNS = 4

    @classmethod
    def new_game(
        cls,
        names: tuple[str, str] = ("Player 1", "Player 2"),
        rng: random.Random | None = None,
    ) -> GameState:
        """
        Start a game: fresh board, shuffled bag, seven tiles dealt to each
        player alternately.
        """
        bag = generate_bag(rng)
        racks: list[list[Tile]] = [[] for _ in range(cls.PLAYER_COUNT)]
        for _ in range(RACK_SIZE):
            for rack in racks:
                result = draw(bag, 1)
                rack.extend(result.drawn)
                bag = result.bag

        players = tuple(
            PlayerState(name=name, rack=tuple(rack)) for name, rack in zip(names, racks)
        )
        return GameState(board=create_board(), bag=bag, players=players)

    # -- Placement --------------------------------------------------------

    @classmethod
    def place_tile(
        cls,
        state: GameState,
        tile_id: str,
        row: int,
        col: int,
        letter: str | None = None,
    ) -> GameState:
        """
        Move a tile from the current rack onto an empty square.

        Args:
            state: Current game state
            tile_id: Id of the rack tile
            row: Target row
            col: Target column
            letter: Letter for a blank tile (ignored otherwise)

        Raises:
            ValueError: If the game is over, the tile is not on the rack,
                a blank has no letter, or the square is unavailable
        """
        cls._require_active(state)
        player = state.current_player
        tile = next((t for t in player.rack if t.id == tile_id), None)
        if tile is None:
            raise ValueError(f"Tile {tile_id} is not on {player.name}'s rack")
        if tile.is_blank:
            if letter is None:
                raise ValueError("A blank tile needs a letter")
            tile = tile.assign(letter)

        board = place_tile(state.board, row, col, tile)
        rack = tuple(t for t in player.rack if t.id != tile_id)
        return replace(state, board=board).with_current_player(replace(player, rack=rack))

    @classmethod
    def recall_tile(cls, state: GameState, row: int, col: int) -> GameState:
        """Return one provisional tile to the current rack."""
        board, tile = remove_provisional_tile(state.board, row, col)
        player = state.current_player
        return replace(state, board=board).with_current_player(
            replace(player, rack=player.rack + (tile,))
        )

    @classmethod
    def recall_all(cls, state: GameState) -> GameState:
        """Return every provisional tile to the current rack."""
        board, tiles = recall_provisional(state.board)
        if not tiles:
            return state
        player = state.current_player
        return replace(state, board=board).with_current_player(
            replace(player, rack=player.rack + tiles)
        )

    # -- Turn actions -----------------------------------------------------

    @classmethod
    def play_turn(cls, state: GameState, validator: DictionaryValidator) -> TurnResult:
        """
        Submit the provisional placement.

        Steps:
        1. Check structure
        2. Ask the dictionary about every new word (fail closed)
        3. Score, commit, refill the rack and hand over the turn

        Args:
            state: Current game state
            validator: Dictionary collaborator

        Returns:
            TurnResult; on rejection ``state`` is the unchanged input
        """
        cls._require_active(state)
        structure = MoveValidator.validate_structure(state.board)
        if not structure.valid:
            return TurnResult(
                outcome=TurnOutcome.REJECTED,
                state=state,
                error=structure.error,
                reason=structure.reason,
            )

        words = extract_new_words(state.board)
        verdict = check_words(validator, words)
        if not verdict.all_valid:
            invalid = tuple(verdict.invalid_words)
            return TurnResult(
                outcome=TurnOutcome.REJECTED,
                state=state,
                words=words,
                invalid_words=invalid,
                error=verdict.error_kind,
                reason=f"Invalid: {', '.join(invalid)}" if invalid else "Invalid move",
            )

        score = ScoringEngine.score_turn(state.board)
        player = state.current_player
        rack, bag = refill_rack(player.rack, state.bag)
        player = replace(player, score=player.score + score.total, rack=rack)

        new_state = replace(
            state,
            board=commit_provisional(state.board),
            bag=bag,
            consecutive_passes=0,
        ).with_current_player(player)
        if not rack and not bag:
            new_state = replace(new_state, is_over=True)
        else:
            new_state = cls._next_player(new_state)

        return TurnResult(outcome=TurnOutcome.PLAYED, state=new_state, score=score, words=words)

    @classmethod
    def swap_tiles(
        cls,
        state: GameState,
        tile_ids: Iterable[str],
        rng: random.Random | None = None,
    ) -> TurnResult:
        """
        Recall provisional tiles, exchange the selected ones, end the turn.

        A rejected swap leaves the state (board included) unchanged.
        """
        cls._require_active(state)
        recalled = cls.recall_all(state)
        player = recalled.current_player
        result: SwapResult = swap_tiles(player.rack, recalled.bag, tile_ids, rng)
        if not result.success:
            return TurnResult(
                outcome=TurnOutcome.REJECTED,
                state=state,
                error=result.error,
                reason=result.reason,
            )

        swapped = replace(recalled, bag=result.bag).with_current_player(
            replace(player, rack=result.rack)
        )
        return TurnResult(outcome=TurnOutcome.SWAPPED, state=cls._scoreless_turn(swapped))

    @classmethod
    def pass_turn(cls, state: GameState) -> TurnResult:
        """Recall provisional tiles and hand over the turn."""
        cls._require_active(state)
        return TurnResult(
            outcome=TurnOutcome.PASSED,
            state=cls._scoreless_turn(cls.recall_all(state)),
        )

    @classmethod
    def winner(cls, state: GameState) -> int | None:
        """
        Index of the leading player.

        Returns:
            0 or 1, None for a tie
        """
        first, second = (p.score for p in state.players)
        if first > second:
            return 0
        if second > first:
            return 1
        return None

    # -- Helpers ----------------------------------------------------------

    @classmethod
    def _require_active(cls, state: GameState) -> None:
        if state.is_over:
            raise ValueError("The game is over")

    @classmethod
    def _next_player(cls, state: GameState) -> GameState:
        return replace(state, current_index=1 - state.current_index)

    @classmethod
    def _scoreless_turn(cls, state: GameState) -> GameState:
        passes = state.consecutive_passes + 1
        state = replace(state, consecutive_passes=passes)
        if passes >= cls.MAX_SCORELESS_TURNS:
            return replace(state, is_over=True)
        return cls._next_player(state)
