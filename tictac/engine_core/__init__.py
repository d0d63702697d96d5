"""
Engine Core - Game state and pure state transitions.

The engine:
1. Holds the board history as immutable snapshots
2. Applies moves and time-travel jumps as pure functions
3. Detects the winner of a board
4. Derives the presentation status from a state
"""

from .state import GameState, HistoryEntry, Mark, empty_board, initial_state
from .rules import calculate_winner, winning_line, apply_move, jump_to, WINNING_LINES
from .action import Action, ActionType, ActionResult, ErrorCode
from .reducer import Reducer, apply_action
from .status import Outcome, status_text, outcome, move_description, move_list, legal_cells

__all__ = [
    "GameState",
    "HistoryEntry",
    "Mark",
    "empty_board",
    "initial_state",
    "calculate_winner",
    "winning_line",
    "apply_move",
    "jump_to",
    "WINNING_LINES",
    "Action",
    "ActionType",
    "ActionResult",
    "ErrorCode",
    "Reducer",
    "apply_action",
    "Outcome",
    "status_text",
    "outcome",
    "move_description",
    "move_list",
    "legal_cells",
]
