"""
Status - Presentation data derived from a GameState.

Nothing here is stored; everything is recomputed from the current
snapshot on read.
"""

from __future__ import annotations
from enum import Enum

from .state import GameState
from .rules import calculate_winner


class Outcome(Enum):
    """Where the game stands at the current step."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


def status_text(state: GameState) -> str:
    """
    The status line shown above the move list.

    A full board without a winner still reads "Next player: ..."; use
    outcome() to tell a draw apart.
    """
    winner = calculate_winner(state.squares)
    if winner is not None:
        return f"Winner: {winner.value}"
    return f"Next player: {state.next_mark.value}"


def outcome(state: GameState) -> Outcome:
    if calculate_winner(state.squares) is not None:
        return Outcome.WON
    if state.current.is_full():
        return Outcome.DRAW
    return Outcome.IN_PROGRESS


def move_description(move: int) -> str:
    """Label of the history button for `move`."""
    return f"Go to move #{move}" if move else "Go to game start"


def move_list(state: GameState) -> list[tuple[int, str]]:
    """
    (move, label) pairs for the history buttons.

    Only steps up to step_number are listed, since those are the only
    valid jump targets.
    """
    return [
        (move, move_description(move))
        for move in range(len(state.history))
        if move <= state.step_number
    ]


def legal_cells(state: GameState) -> tuple[int, ...]:
    """Cells that a move would actually change; empty once the game is won."""
    if calculate_winner(state.squares) is not None:
        return ()
    return state.current.empty_cells()
