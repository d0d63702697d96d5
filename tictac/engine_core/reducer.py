"""
Reducer - Applies actions to game state.

The reducer is the checked front door to the rules:
- Pure function: (state, action) -> ActionResult
- Validates before applying, so the rules never see a bad index
- Rejections carry an ErrorCode instead of being silent no-ops
"""

from __future__ import annotations
from dataclasses import dataclass
import logging

from .state import BOARD_SIZE, GameState
from .action import Action, ActionType, ActionResult, ErrorCode
from .rules import apply_move, calculate_winner, jump_to
from .status import move_description

logger = logging.getLogger(__name__)


@dataclass
class Reducer:
    """
    Reducer applies actions to game state.

    Stateless - all state is in GameState.
    """

    def apply(self, state: GameState, action: Action) -> ActionResult:
        """
        Apply an action to the game state.

        Returns ActionResult with the new state, or the unchanged state
        and an error code.
        """
        handler = self._get_handler(action.action_type)
        if not handler:
            return ActionResult.failure(
                f"No handler for action type: {action.action_type}",
                error_code=ErrorCode.NO_HANDLER,
                state=state,
            )

        result = handler(state, action)
        if not result.success:
            logger.debug("Rejected %s: %s", action.action_type.value, result.error)
        return result

    def _get_handler(self, action_type: ActionType):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.PLACE_MARK: self._handle_place,
            ActionType.JUMP_TO: self._handle_jump,
        }
        return handlers.get(action_type)

    def _handle_place(self, state: GameState, action: Action) -> ActionResult:
        """Handle a cell click."""
        cell = action.cell_index
        if cell is None or not 0 <= cell < BOARD_SIZE:
            return ActionResult.failure(
                f"Cell must be 0-{BOARD_SIZE - 1}, got {cell}",
                error_code=ErrorCode.INVALID_CELL,
                state=state,
            )

        winner = calculate_winner(state.squares)
        if winner is not None:
            return ActionResult.failure(
                f"Game is over - {winner} already won",
                error_code=ErrorCode.GAME_OVER,
                state=state,
            )

        occupant = state.squares[cell]
        if occupant is not None:
            return ActionResult.failure(
                f"Cell {cell} is already taken by {occupant}",
                error_code=ErrorCode.CELL_OCCUPIED,
                state=state,
            )

        mark = state.next_mark
        new_state = apply_move(state, cell)
        changes = [f"{mark} played cell {cell}"]

        discarded = len(state.history) - (state.step_number + 1)
        if discarded:
            changes.append(f"Discarded {discarded} later move(s)")

        return ActionResult.success_with_state(new_state, changes=changes)

    def _handle_jump(self, state: GameState, action: Action) -> ActionResult:
        """Handle a history click."""
        step = action.step
        if step is None or not 0 <= step <= state.step_number:
            return ActionResult.failure(
                f"Step must be between 0 and {state.step_number}, got {step}",
                error_code=ErrorCode.INVALID_STEP,
                state=state,
            )

        new_state = jump_to(state, step)
        return ActionResult.success_with_state(
            new_state,
            changes=[move_description(step).replace("Go to", "Jumped to", 1)],
        )


def apply_action(state: GameState, action: Action) -> ActionResult:
    """
    Convenience function to apply an action.

    Creates a Reducer and applies the action.
    """
    reducer = Reducer()
    return reducer.apply(state, action)
