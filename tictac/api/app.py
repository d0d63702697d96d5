"""
FastAPI Application - The single page and its JSON API.

Endpoints:
    GET    /                               The game page
    GET    /api/health                     Liveness check
    POST   /api/v1/games                   Create a game
    GET    /api/v1/games                   List games
    GET    /api/v1/games/{id}              Get game view
    DELETE /api/v1/games/{id}              End game
    POST   /api/v1/games/{id}/moves        Place the next mark
    POST   /api/v1/games/{id}/jump         Jump to an earlier step
    POST   /api/v1/games/{id}/restart      Start over

All responses are JSON with explicit Pydantic schemas, except the page.
Run with: uvicorn tictac.api.app:app
"""

from pathlib import Path
from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from .. import __version__
from ..config import Settings, get_settings
from ..session import SessionManager
from .service import APIService, ActionRejectedError, GameNotFoundError
from .schemas import (
    # Request models
    MoveRequest,
    JumpRequest,
    # Response models
    ActionResponse,
    EndGameResponse,
    ErrorResponse,
    GameListResponse,
    GameView,
    HealthResponse,
    # Enums
    ErrorCode,
)

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


def create_app(
    service: Optional[APIService] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)
        settings: Optional Settings (read from the environment if not provided)

    Returns:
        FastAPI application instance
    """
    settings = settings or get_settings()
    api_service = service or APIService(
        session_manager=SessionManager(max_age_seconds=settings.session_ttl_seconds),
    )

    app = FastAPI(
        title="Tictac API",
        description="""
Tic-tac-toe with a time-travel move history.

## Error Codes

| Code | Description |
|------|-------------|
| `INVALID_CELL` | Cell index outside 0-8 |
| `CELL_OCCUPIED` | Cell already holds a mark |
| `GAME_OVER` | The board shown already has a winner |
| `INVALID_STEP` | Jump target is not a reachable step |
| `GAME_NOT_FOUND` | Game does not exist |
| `VALIDATION_ERROR` | Request body or path failed validation |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        debug=settings.debug,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Optional[dict] = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(GameNotFoundError)
    async def game_not_found(request, exc: GameNotFoundError) -> JSONResponse:
        return make_error_response(
            ErrorCode.GAME_NOT_FOUND,
            str(exc),
            status_code=404,
            details={"game_id": exc.game_id},
        )

    @app.exception_handler(ActionRejectedError)
    async def action_rejected(request, exc: ActionRejectedError) -> JSONResponse:
        return make_error_response(
            exc.error_code,
            str(exc),
            status_code=409,
            details={"game_id": exc.game_id},
        )

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request, exc: RequestValidationError) -> JSONResponse:
        return make_error_response(
            ErrorCode.VALIDATION_ERROR,
            "Invalid request",
            status_code=422,
            details={"errors": jsonable_encoder(exc.errors())},
        )

    # =========================================================================
    # Page
    # =========================================================================

    @app.get("/", include_in_schema=False)
    async def index() -> FileResponse:
        return FileResponse(STATIC_DIR / "index.html", media_type="text/html")

    @app.get(
        "/api/health",
        response_model=HealthResponse,
        tags=["System"],
    )
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__)

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/games",
        response_model=GameView,
        status_code=201,
        tags=["Games"],
        summary="Create a new game",
    )
    async def create_game() -> GameView:
        return api_service.create_game()

    @app.get(
        "/api/v1/games",
        response_model=GameListResponse,
        tags=["Games"],
        summary="List games",
    )
    async def list_games() -> GameListResponse:
        games = api_service.list_games()
        return GameListResponse(games=games, count=len(games))

    @app.get(
        "/api/v1/games/{game_id}",
        response_model=GameView,
        responses={404: {"model": ErrorResponse}},
        tags=["Games"],
        summary="Get the current view of a game",
    )
    async def get_game(game_id: str) -> GameView:
        return api_service.get_game(game_id)

    @app.delete(
        "/api/v1/games/{game_id}",
        response_model=EndGameResponse,
        tags=["Games"],
        summary="End a game",
    )
    async def end_game(game_id: str) -> EndGameResponse:
        success = api_service.end_game(game_id)
        return EndGameResponse(success=success, game_id=game_id)

    # =========================================================================
    # Play Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/games/{game_id}/moves",
        response_model=ActionResponse,
        responses={
            404: {"model": ErrorResponse, "description": "Game not found"},
            409: {"model": ErrorResponse, "description": "Move rejected"},
        },
        tags=["Play"],
        summary="Place the next mark on a cell",
    )
    async def place_mark(game_id: str, request: MoveRequest) -> ActionResponse:
        """
        Place X or O (whoever is next) on `cell`.

        Rejected with `CELL_OCCUPIED` or `GAME_OVER` when the move would
        not change the board.
        """
        return api_service.place_mark(game_id, request)

    @app.post(
        "/api/v1/games/{game_id}/jump",
        response_model=ActionResponse,
        responses={
            404: {"model": ErrorResponse, "description": "Game not found"},
            409: {"model": ErrorResponse, "description": "Step not reachable"},
        },
        tags=["Play"],
        summary="Jump to an earlier step",
    )
    async def jump(game_id: str, request: JumpRequest) -> ActionResponse:
        """
        Show the board after `step` plies.

        Later moves stay in history but are no longer offered as jump
        targets; the next move discards them.
        """
        return api_service.jump_to(game_id, request)

    @app.post(
        "/api/v1/games/{game_id}/restart",
        response_model=GameView,
        responses={404: {"model": ErrorResponse}},
        tags=["Play"],
        summary="Start over from an empty board",
    )
    async def restart(game_id: str) -> GameView:
        return api_service.restart(game_id)

    logger.debug("App created (env=%s)", settings.env)
    return app


# For running directly: uvicorn tictac.api.app:app
app = create_app()
