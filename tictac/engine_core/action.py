"""
Action System - Actions and results.

The presentation layer produces two kinds of events:
1. A cell click (place the next mark)
2. A history click (jump to an earlier step)

Both are wrapped as Actions and applied by the reducer.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ActionType(Enum):
    """Types of actions in the system."""
    PLACE_MARK = "place_mark"
    JUMP_TO = "jump_to"


class ErrorCode(str, Enum):
    """Why an action was rejected."""
    INVALID_CELL = "INVALID_CELL"
    CELL_OCCUPIED = "CELL_OCCUPIED"
    GAME_OVER = "GAME_OVER"
    INVALID_STEP = "INVALID_STEP"
    NO_HANDLER = "NO_HANDLER"


@dataclass(frozen=True)
class Action:
    """
    A single user event to apply to the game state.

    cell_index is set for PLACE_MARK, step for JUMP_TO.
    """
    action_type: ActionType
    cell_index: int | None = None
    step: int | None = None

    @classmethod
    def place(cls, cell_index: int) -> Action:
        """Factory for a cell click."""
        return cls(action_type=ActionType.PLACE_MARK, cell_index=cell_index)

    @classmethod
    def jump(cls, step: int) -> Action:
        """Factory for a history click."""
        return cls(action_type=ActionType.JUMP_TO, step=step)


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether action succeeded
    - The resulting state (unchanged state on failure)
    - Error and error code (if failed)
    - Human-readable changes for display
    """
    success: bool
    new_state: Any | None = None  # GameState
    error: str | None = None
    error_code: ErrorCode | None = None
    state_changes: list[str] = field(default_factory=list)

    @classmethod
    def failure(
        cls,
        error: str,
        error_code: ErrorCode | None = None,
        state: Any | None = None,
    ) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, new_state=state, error=error, error_code=error_code)

    @classmethod
    def success_with_state(
        cls,
        state: Any,
        changes: list[str] | None = None,
    ) -> ActionResult:
        """Create a success result with new state."""
        return cls(success=True, new_state=state, state_changes=changes or [])
