"""
API Module - Web page and JSON interface.

Exposes the engine to the single page:
1. The page creates a game
2. Each cell click posts a move
3. Each history click posts a jump
4. Every response carries the full view to re-render

All state is session-scoped and in-memory.
"""

from .schemas import (
    # Requests
    MoveRequest,
    JumpRequest,
    # Responses
    ActionResponse,
    GameView,
    GameListResponse,
    EndGameResponse,
    HealthResponse,
    ErrorResponse,
    # Shared
    MoveInfo,
    ErrorCode,
    OutcomeValue,
)
from .service import APIService, ActionRejectedError, GameNotFoundError, build_game_view
from .app import create_app

__all__ = [
    # Requests
    "MoveRequest",
    "JumpRequest",
    # Responses
    "ActionResponse",
    "GameView",
    "GameListResponse",
    "EndGameResponse",
    "HealthResponse",
    "ErrorResponse",
    # Shared
    "MoveInfo",
    "ErrorCode",
    "OutcomeValue",
    # Service
    "APIService",
    "ActionRejectedError",
    "GameNotFoundError",
    "build_game_view",
    "create_app",
]
