"""
Lexicon Duel - Game Engine Tests

Tests for turn orchestration over an explicit GameState.
"""

import random
from unittest.mock import MagicMock

import pytest

from src.dictionary.models import COULD_NOT_VALIDATE, DictionaryVerdict
from src.dictionary.validators import WordListValidator
from src.engine.base import ErrorKind
from src.engine.board import create_board, has_committed_tiles, has_provisional_tiles
from src.engine.game import GameEngine, GameState, PlayerState, TurnOutcome


@pytest.fixture
def make_state(tile_factory):
    """Build a state where player 0 holds ``rack`` and the bag holds ``bag_size`` E tiles."""

    def build(rack: str = "CATSXYZ", other: str = "EEEEEEE", bag_size: int = 20) -> GameState:
        return GameState(
            board=create_board(),
            bag=tuple(tile_factory("E") for _ in range(bag_size)),
            players=(
                PlayerState(name="Ada", rack=tuple(tile_factory(ch) for ch in rack)),
                PlayerState(name="Bob", rack=tuple(tile_factory(ch) for ch in other)),
            ),
        )

    return build


def _tile_id(state: GameState, letter: str) -> str:
    return next(t.id for t in state.current_player.rack if t.letter == letter)


def _place_word(state: GameState, row: int, col: int, word: str) -> GameState:
    for i, letter in enumerate(word):
        state = GameEngine.place_tile(state, _tile_id(state, letter), row, col + i)
    return state


@pytest.fixture
def dictionary():
    return WordListValidator(words=["CAT", "CATS", "AT", "TA"])


class TestGameState:
    def test_requires_two_players(self):
        with pytest.raises(ValueError, match="exactly 2 players"):
            GameState(board=create_board(), bag=(), players=(PlayerState(name="Solo"),))

    def test_current_index_range(self):
        players = (PlayerState(name="A"), PlayerState(name="B"))
        with pytest.raises(ValueError, match="must be 0 or 1"):
            GameState(board=create_board(), bag=(), players=players, current_index=2)


class TestNewGame:
    def test_deal(self):
        state = GameEngine.new_game(rng=random.Random(3))
        assert [len(p.rack) for p in state.players] == [7, 7]
        assert len(state.bag) == 86
        assert state.current_index == 0
        assert not has_committed_tiles(state.board)

    def test_every_tile_has_one_owner(self):
        state = GameEngine.new_game()
        ids = [t.id for t in state.bag]
        for player in state.players:
            ids.extend(t.id for t in player.rack)
        assert len(ids) == 100
        assert len(set(ids)) == 100

    def test_player_names(self):
        state = GameEngine.new_game(names=("Ada", "Bob"))
        assert [p.name for p in state.players] == ["Ada", "Bob"]


class TestPlacement:
    def test_place_moves_tile_from_rack(self, make_state):
        state = make_state()
        tile_id = _tile_id(state, "C")
        placed = GameEngine.place_tile(state, tile_id, 7, 7)
        assert placed.board.square(7, 7).tile.id == tile_id
        assert tile_id not in {t.id for t in placed.current_player.rack}
        assert len(placed.current_player.rack) == 6

    def test_unknown_tile_raises(self, make_state):
        with pytest.raises(ValueError, match="not on Ada's rack"):
            GameEngine.place_tile(make_state(), "missing", 7, 7)

    def test_blank_needs_letter(self, make_state):
        state = make_state(rack="c")
        blank_id = state.current_player.rack[0].id
        recalled = GameEngine.recall_all(GameEngine.place_tile(state, blank_id, 7, 7, letter="Q"))
        with pytest.raises(ValueError, match="needs a letter"):
            GameEngine.place_tile(recalled, blank_id, 7, 7)

    def test_blank_assigned_on_placement(self, make_state):
        state = make_state(rack="c")
        blank_id = state.current_player.rack[0].id
        placed = GameEngine.place_tile(state, blank_id, 7, 7, letter="q")
        tile = placed.board.square(7, 7).tile
        assert tile.letter == "Q"
        assert tile.value == 0

    def test_recall_tile_resets_blank(self, make_state):
        state = make_state(rack="c")
        blank_id = state.current_player.rack[0].id
        placed = GameEngine.place_tile(state, blank_id, 7, 7, letter="Q")
        recalled = GameEngine.recall_tile(placed, 7, 7)
        tile = recalled.current_player.rack[0]
        assert tile.id == blank_id
        assert tile.letter == ""
        assert not has_provisional_tiles(recalled.board)

    def test_recall_all_round_trip(self, make_state):
        state = make_state()
        placed = _place_word(state, 7, 6, "CAT")
        recalled = GameEngine.recall_all(placed)
        assert recalled.board == state.board
        assert sorted(t.id for t in recalled.current_player.rack) == sorted(
            t.id for t in state.current_player.rack
        )

    def test_recall_all_nothing_placed(self, make_state):
        state = make_state()
        assert GameEngine.recall_all(state) is state


class TestPlayTurn:
    def test_valid_first_move(self, make_state, dictionary):
        state = _place_word(make_state(), 7, 6, "CAT")
        result = GameEngine.play_turn(state, dictionary)

        assert result.outcome is TurnOutcome.PLAYED
        assert result.accepted
        assert result.score.total == 10
        assert result.words == ("CAT",)

        new_state = result.state
        assert new_state.players[0].score == 10
        assert len(new_state.players[0].rack) == 7
        assert len(new_state.bag) == 17
        assert new_state.current_index == 1
        assert has_committed_tiles(new_state.board)
        assert not has_provisional_tiles(new_state.board)

    def test_structural_rejection_keeps_state(self, make_state, dictionary):
        state = _place_word(make_state(), 3, 3, "CAT")
        result = GameEngine.play_turn(state, dictionary)

        assert result.outcome is TurnOutcome.REJECTED
        assert result.error == ErrorKind.STRUCTURAL
        assert result.reason == "First word must cross the center star."
        assert result.state is state

    def test_dictionary_rejection_keeps_provisional_tiles(self, make_state):
        state = _place_word(make_state(), 7, 6, "CAT")
        result = GameEngine.play_turn(state, WordListValidator(words=["DOG"]))

        assert result.outcome is TurnOutcome.REJECTED
        assert result.error == ErrorKind.DICTIONARY_REJECTION
        assert result.invalid_words == ("CAT",)
        assert result.reason == "Invalid: CAT"
        assert result.state is state
        assert has_provisional_tiles(result.state.board)

    def test_validator_exception_fails_closed(self, make_state):
        validator = MagicMock()
        validator.validate.side_effect = ConnectionError("unreachable")
        state = _place_word(make_state(), 7, 6, "CAT")

        result = GameEngine.play_turn(state, validator)

        assert result.outcome is TurnOutcome.REJECTED
        assert result.error == ErrorKind.VALIDATION_TRANSPORT
        assert result.invalid_words == (COULD_NOT_VALIDATE,)
        assert result.state is state
        validator.validate.assert_called_once_with(["CAT"])

    def test_transport_failure_verdict(self, make_state):
        validator = MagicMock()
        validator.validate.return_value = DictionaryVerdict.transport_failure("timeout")
        state = _place_word(make_state(), 7, 6, "CAT")

        result = GameEngine.play_turn(state, validator)

        assert result.error == ErrorKind.VALIDATION_TRANSPORT

    def test_second_move_extends_word(self, make_state, dictionary):
        state = _place_word(make_state(), 7, 6, "CAT")
        state = GameEngine.play_turn(state, dictionary).state
        # Hand the turn back to player 0 by passing for player 1
        state = GameEngine.pass_turn(state).state
        state = GameEngine.place_tile(state, _tile_id(state, "S"), 7, 9)

        result = GameEngine.play_turn(state, dictionary)

        assert result.outcome is TurnOutcome.PLAYED
        assert result.words == ("CATS",)
        assert result.score.total == 6
        assert result.state.players[0].score == 16
        assert result.state.consecutive_passes == 0

    def test_game_ends_when_rack_and_bag_empty(self, make_state, dictionary):
        state = _place_word(make_state(rack="CAT", bag_size=0), 7, 6, "CAT")
        result = GameEngine.play_turn(state, dictionary)
        assert result.state.is_over
        assert result.state.current_index == 0


class TestSwapAndPass:
    def test_swap_passes_turn(self, make_state):
        state = make_state()
        ids = [t.id for t in state.current_player.rack[:3]]
        result = GameEngine.swap_tiles(state, ids, random.Random(5))

        assert result.outcome is TurnOutcome.SWAPPED
        assert result.state.current_index == 1
        assert result.state.consecutive_passes == 1
        assert len(result.state.players[0].rack) == 7
        assert len(result.state.bag) == 20

    def test_swap_with_short_bag_rejected(self, make_state):
        state = make_state(bag_size=2)
        ids = [t.id for t in state.current_player.rack[:3]]
        result = GameEngine.swap_tiles(state, ids)

        assert result.outcome is TurnOutcome.REJECTED
        assert result.error == ErrorKind.RESOURCE_EXHAUSTION
        assert result.state is state

    def test_swap_recalls_provisional_tiles(self, make_state):
        state = make_state()
        c_id = _tile_id(state, "C")
        state = GameEngine.place_tile(state, c_id, 7, 7)
        x_id = _tile_id(state, "X")

        result = GameEngine.swap_tiles(state, [x_id])

        assert not has_provisional_tiles(result.state.board)
        assert c_id in {t.id for t in result.state.players[0].rack}

    def test_pass_recalls_and_switches(self, make_state):
        state = make_state()
        state = GameEngine.place_tile(state, _tile_id(state, "C"), 7, 7)
        result = GameEngine.pass_turn(state)

        assert result.outcome is TurnOutcome.PASSED
        assert result.state.current_index == 1
        assert not has_provisional_tiles(result.state.board)
        assert len(result.state.players[0].rack) == 7

    def test_four_scoreless_turns_end_game(self, make_state):
        state = make_state()
        for _ in range(3):
            state = GameEngine.pass_turn(state).state
            assert not state.is_over
        state = GameEngine.pass_turn(state).state
        assert state.is_over

    def test_actions_after_game_over_raise(self, make_state, dictionary):
        state = make_state()
        for _ in range(4):
            state = GameEngine.pass_turn(state).state
        with pytest.raises(ValueError, match="game is over"):
            GameEngine.pass_turn(state)
        with pytest.raises(ValueError, match="game is over"):
            GameEngine.play_turn(state, dictionary)


class TestWinner:
    def test_leader_wins(self):
        players = (PlayerState(name="A", score=30), PlayerState(name="B", score=12))
        state = GameState(board=create_board(), bag=(), players=players)
        assert GameEngine.winner(state) == 0

    def test_second_player_wins(self):
        players = (PlayerState(name="A", score=3), PlayerState(name="B", score=12))
        state = GameState(board=create_board(), bag=(), players=players)
        assert GameEngine.winner(state) == 1

    def test_tie(self):
        players = (PlayerState(name="A", score=7), PlayerState(name="B", score=7))
        state = GameState(board=create_board(), bag=(), players=players)
        assert GameEngine.winner(state) is None
