"""
Tests for the game state model.
"""

import dataclasses

import pytest

from tictac.engine_core.rules import apply_move
from tictac.engine_core.state import (
    GameState,
    HistoryEntry,
    Mark,
    empty_board,
    initial_state,
    parse_board,
)


class TestInitialState:

    def test_starts_with_one_empty_board(self):
        state = initial_state()

        assert len(state.history) == 1
        assert state.history[0].squares == empty_board()
        assert state.step_number == 0
        assert state.x_is_next is True
        assert state.next_mark == Mark.X

    def test_default_constructor_matches(self):
        assert GameState() == initial_state()


class TestValidation:

    @pytest.mark.parametrize("size", [0, 8, 10])
    def test_board_must_have_nine_cells(self, size):
        with pytest.raises(ValueError):
            HistoryEntry((None,) * size)

    def test_step_must_index_history(self):
        with pytest.raises(ValueError):
            GameState(history=(HistoryEntry(),), step_number=1)

    def test_history_cannot_be_empty(self):
        with pytest.raises(ValueError):
            GameState(history=(), step_number=0)

    def test_list_history_becomes_tuple(self):
        state = GameState(history=[HistoryEntry()], step_number=0)

        assert isinstance(state.history, tuple)
        assert apply_move(state, 4).squares[4] == Mark.X

    def test_first_entry_must_be_empty(self):
        with pytest.raises(ValueError):
            GameState(history=(HistoryEntry(parse_board(["X"] * 9)),))

    def test_from_dict_rejects_marked_start(self):
        with pytest.raises(ValueError):
            GameState.from_dict({"history": [["X"] * 9], "step_number": 0})

    def test_state_is_frozen(self, new_game):
        with pytest.raises(dataclasses.FrozenInstanceError):
            new_game.step_number = 3


class TestHelpers:

    def test_mark_opposite(self):
        assert Mark.X.opposite() is Mark.O
        assert Mark.O.opposite() is Mark.X

    def test_parse_board(self):
        board = parse_board(["X", ".", "O", None, "", Mark.X, " ", ".", "."])
        assert board == (Mark.X, None, Mark.O, None, None, Mark.X, None, None, None)

    def test_parse_board_rejects_unknown_marks(self):
        with pytest.raises(ValueError):
            parse_board(["Z"] * 9)

    def test_empty_cells(self, mid_game_state):
        assert mid_game_state.current.empty_cells() == (4, 5, 6, 7, 8)
        assert not mid_game_state.current.is_full()

    def test_to_dict(self, mid_game_state):
        data = mid_game_state.to_dict()

        assert data["step_number"] == 4
        assert data["x_is_next"] is True
        assert data["history"][4] == ["X", "O", "X", "O", None, None, None, None, None]
