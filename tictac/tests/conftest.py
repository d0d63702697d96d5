"""
Pytest fixtures for Tictac tests.
"""

import pytest

from tictac.api import APIService, create_app
from tictac.config import Settings
from tictac.engine_core import GameState, Mark, apply_move, initial_state


# Plays out to X X X / O O . / . . . with X completing the top row.
TOP_ROW_WIN = [0, 4, 1, 3, 2]

# Fills the board with no three in a row:
#   X O X
#   X O O
#   O X X
DRAW_GAME = [0, 1, 2, 4, 3, 5, 7, 6, 8]


def play_moves(state: GameState, moves) -> GameState:
    """Apply a sequence of cell indices with the pure rules."""
    for cell in moves:
        state = apply_move(state, cell)
    return state


def assert_invariants(state: GameState):
    """Check the history invariants that every reachable state must hold."""
    assert all(cell is None for cell in state.history[0].squares)
    assert 0 <= state.step_number < len(state.history)
    assert state.x_is_next == (state.step_number % 2 == 0)

    for k in range(1, len(state.history)):
        before = state.history[k - 1].squares
        after = state.history[k].squares
        changed = [i for i in range(9) if before[i] != after[i]]
        assert len(changed) == 1
        assert before[changed[0]] is None
        assert after[changed[0]] == (Mark.X if k % 2 == 1 else Mark.O)


@pytest.fixture
def new_game() -> GameState:
    """A fresh game: empty board, X to move."""
    return initial_state()


@pytest.fixture
def x_wins_state(new_game) -> GameState:
    """X has completed the top row on move 5."""
    return play_moves(new_game, TOP_ROW_WIN)


@pytest.fixture
def drawn_state(new_game) -> GameState:
    """A full board with no winner."""
    return play_moves(new_game, DRAW_GAME)


@pytest.fixture
def mid_game_state(new_game) -> GameState:
    """Four moves in: X on 0 and 2, O on 1 and 3."""
    return play_moves(new_game, [0, 1, 2, 3])


@pytest.fixture
def service() -> APIService:
    """Create a fresh API service."""
    return APIService()


@pytest.fixture
def client(service):
    """HTTP client bound to an app with its own service."""
    from fastapi.testclient import TestClient

    app = create_app(service=service, settings=Settings())
    return TestClient(app)
