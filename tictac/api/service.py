"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to session actions
2. Manages sessions
3. Builds GameView responses from engine state

This layer is framework-agnostic; the FastAPI app only maps its
exceptions to HTTP responses.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from ..engine_core import (
    ActionResult,
    GameState,
    legal_cells,
    move_list,
    outcome,
    status_text,
    calculate_winner,
    winning_line,
)
from ..session import Session, SessionManager
from .schemas import (
    ActionResponse,
    ErrorCode,
    GameView,
    JumpRequest,
    MoveInfo,
    MoveRequest,
    OutcomeValue,
)

logger = logging.getLogger(__name__)


class GameNotFoundError(LookupError):
    """No game with this id."""

    def __init__(self, game_id: str):
        super().__init__(f"Game {game_id} not found")
        self.game_id = game_id


class ActionRejectedError(ValueError):
    """The reducer refused a move or jump."""

    def __init__(self, game_id: str, result: ActionResult):
        super().__init__(result.error)
        self.game_id = game_id
        self.error_code = ErrorCode(result.error_code.value)


def build_game_view(game_id: str, state: GameState) -> GameView:
    """Render a GameState into its API view."""
    winner = calculate_winner(state.squares)
    line = winning_line(state.squares)
    return GameView(
        game_id=game_id,
        squares=[cell.value if cell else None for cell in state.squares],
        step_number=state.step_number,
        x_is_next=state.x_is_next,
        status=status_text(state),
        winner=winner.value if winner else None,
        winning_line=list(line) if line else None,
        outcome=OutcomeValue(outcome(state).value),
        moves=[MoveInfo(move=m, description=d) for m, d in move_list(state)],
        legal_cells=list(legal_cells(state)),
        history_length=len(state.history),
    )


@dataclass
class APIService:
    """
    Main API service for the single page.

    Usage:
        service = APIService()
        view = service.create_game()
        response = service.place_mark(view.game_id, MoveRequest(cell=4))
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def create_game(self) -> GameView:
        session = self.session_manager.create_session()
        return build_game_view(session.session_id, session.game_state)

    def get_game(self, game_id: str) -> GameView:
        session = self._get_session(game_id)
        return build_game_view(game_id, session.game_state)

    def place_mark(self, game_id: str, request: MoveRequest) -> ActionResponse:
        session = self._get_session(game_id)
        return self._respond(game_id, session.place(request.cell))

    def jump_to(self, game_id: str, request: JumpRequest) -> ActionResponse:
        session = self._get_session(game_id)
        return self._respond(game_id, session.jump(request.step))

    def restart(self, game_id: str) -> GameView:
        session = self._get_session(game_id)
        return build_game_view(game_id, session.reset())

    def end_game(self, game_id: str) -> bool:
        return self.session_manager.end_session(game_id)

    def list_games(self) -> list[str]:
        return self.session_manager.list_sessions()

    def _get_session(self, game_id: str) -> Session:
        session = self.session_manager.get_session(game_id)
        if session is None:
            raise GameNotFoundError(game_id)
        return session

    def _respond(self, game_id: str, result: ActionResult) -> ActionResponse:
        if not result.success:
            logger.info("Game %s: %s (%s)", game_id, result.error, result.error_code.value)
            raise ActionRejectedError(game_id, result)
        return ActionResponse(
            success=True,
            changes=result.state_changes,
            game=build_game_view(game_id, result.new_state),
        )
