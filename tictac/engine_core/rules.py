"""
Rules - Pure transitions over GameState.

Every function here is side-effect free: (state, input) -> new state.
Expected illegal moves (occupied cell, game already won) are no-ops and
return the state unchanged. Out-of-range indices are caller errors and
raise ValueError.
"""

from __future__ import annotations
from typing import Optional, Sequence

from .state import BOARD_SIZE, GameState, HistoryEntry, Mark


# Checked in this order; the first uniform line decides the winner.
WINNING_LINES: tuple[tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


def winning_line(board: Sequence[Optional[Mark]]) -> Optional[tuple[int, int, int]]:
    """Return the first line holding three equal marks, or None."""
    for a, b, c in WINNING_LINES:
        if board[a] is not None and board[a] == board[b] == board[c]:
            return (a, b, c)
    return None


def calculate_winner(board: Sequence[Optional[Mark]]) -> Optional[Mark]:
    """
    Get the winning mark of a board.

    Returns None when no line is complete, including a full board
    with no winner.
    """
    line = winning_line(board)
    if line is None:
        return None
    return board[line[0]]


def apply_move(state: GameState, cell_index: int) -> GameState:
    """
    Place the next mark on cell_index.

    Any "future" left over from an earlier jump is discarded: the new
    entry is appended right after step_number.
    """
    if not 0 <= cell_index < BOARD_SIZE:
        raise ValueError(f"Cell index must be 0-{BOARD_SIZE - 1}, got {cell_index}")

    history = state.history[: state.step_number + 1]
    squares = list(history[-1].squares)
    if calculate_winner(squares) is not None or squares[cell_index] is not None:
        return state

    squares[cell_index] = state.next_mark
    new_history = history + (HistoryEntry(tuple(squares)),)
    return state._copy_with(history=new_history, step_number=len(new_history) - 1)


def jump_to(state: GameState, step: int) -> GameState:
    """
    Show the board as it was after `step` plies.

    History is kept up to the step shown before the jump, so earlier
    targets stay reachable; the next move overwrites everything after
    `step`.
    """
    if not 0 <= step <= state.step_number:
        raise ValueError(
            f"Step must be between 0 and {state.step_number}, got {step}"
        )
    return state._copy_with(
        history=state.history[: state.step_number + 1],
        step_number=step,
    )
