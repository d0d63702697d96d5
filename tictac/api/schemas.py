"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the contract between the single page and the engine.

Error Codes:
- INVALID_CELL: Cell index outside 0-8
- CELL_OCCUPIED: Cell already holds a mark
- GAME_OVER: The board shown already has a winner
- INVALID_STEP: Jump target is not a reachable step
- GAME_NOT_FOUND: Game does not exist or has ended
- VALIDATION_ERROR: Request body or path failed validation
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class ErrorCode(str, Enum):
    """Structured error codes."""
    INVALID_CELL = "INVALID_CELL"
    CELL_OCCUPIED = "CELL_OCCUPIED"
    GAME_OVER = "GAME_OVER"
    INVALID_STEP = "INVALID_STEP"
    GAME_NOT_FOUND = "GAME_NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"


class OutcomeValue(str, Enum):
    """Game outcome at the step shown."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


# =============================================================================
# Shared Models
# =============================================================================

class MoveInfo(BaseModel):
    """One history button."""
    move: int = Field(ge=0, description="Step to jump to")
    description: str = Field(description="'Go to game start' or 'Go to move #N'")


class GameView(BaseModel):
    """Everything the page needs to render one game."""
    game_id: str
    squares: list[Optional[str]] = Field(
        min_length=9,
        max_length=9,
        description="Row-major cells: 'X', 'O' or null",
    )
    step_number: int = Field(ge=0)
    x_is_next: bool
    status: str = Field(description="'Winner: X' or 'Next player: O'")
    winner: Optional[str] = None
    winning_line: Optional[list[int]] = None
    outcome: OutcomeValue = OutcomeValue.IN_PROGRESS
    moves: list[MoveInfo] = Field(default_factory=list)
    legal_cells: list[int] = Field(default_factory=list)
    history_length: int = Field(ge=1)


# =============================================================================
# Requests
# =============================================================================

class MoveRequest(BaseModel):
    """Click on a cell."""
    cell: int = Field(ge=0, le=8, description="Row-major cell index")


class JumpRequest(BaseModel):
    """Click on a history button."""
    step: int = Field(ge=0, description="Step to show")


# =============================================================================
# Responses
# =============================================================================

class ActionResponse(BaseModel):
    """Result of an accepted move or jump."""
    success: bool = True
    changes: list[str] = Field(default_factory=list)
    game: GameView


class GameListResponse(BaseModel):
    games: list[str] = Field(default_factory=list)
    count: int = 0


class EndGameResponse(BaseModel):
    success: bool
    game_id: str


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str


class ErrorResponse(BaseModel):
    """Standard error body."""
    error: str
    error_code: ErrorCode
    details: Optional[dict[str, Any]] = None
