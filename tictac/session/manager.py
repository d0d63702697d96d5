"""
Session Manager - Creates and manages game sessions.

LIFECYCLE:
1. Page load / CLI start -> create session with the initial state
2. Each click -> dispatch one Action; accepted actions replace the state
3. "New game" -> reset to the initial state
4. Tab closed / CLI quit -> session ended and dropped from memory

Events on one session are applied one at a time, in arrival order.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import threading
import time
import uuid

from ..engine_core import Action, ActionResult, GameState, Reducer, initial_state

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """
    A single game in progress.

    The GameState itself is immutable; the session only swaps which
    state is current.
    """
    session_id: str
    created_at: float
    last_active: float = 0.0
    game_state: GameState = field(default_factory=initial_state)
    reducer: Reducer = field(default_factory=Reducer)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __post_init__(self):
        if not self.last_active:
            self.last_active = self.created_at

    def dispatch(self, action: Action) -> ActionResult:
        """Apply an action and keep the resulting state if it was accepted."""
        with self._lock:
            self.last_active = time.time()
            result = self.reducer.apply(self.game_state, action)
            if result.success:
                self.game_state = result.new_state
            return result

    def place(self, cell_index: int) -> ActionResult:
        return self.dispatch(Action.place(cell_index))

    def jump(self, step: int) -> ActionResult:
        return self.dispatch(Action.jump(step))

    def reset(self) -> GameState:
        """Start over from an empty board."""
        with self._lock:
            self.last_active = time.time()
            self.game_state = initial_state()
            return self.game_state


class SessionManager:
    """
    Manages game sessions.

    No persistence - sessions are in-memory only. Sessions idle for
    longer than max_age_seconds are dropped whenever a new one is created.
    """

    def __init__(self, max_age_seconds: int = 3600):
        self.max_age_seconds = max_age_seconds
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()

    def create_session(self) -> Session:
        """Create a new session holding a fresh game."""
        self.cleanup_stale_sessions()
        session = Session(session_id=str(uuid.uuid4()), created_at=time.time())
        with self._lock:
            self._sessions[session.session_id] = session
        logger.info("Session created: %s", session.session_id)
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str) -> bool:
        """Drop a session. Returns False if it did not exist."""
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        logger.info(
            "Session ended: %s after %d move(s)",
            session_id,
            session.game_state.step_number,
        )
        return True

    def list_sessions(self) -> list[str]:
        """List IDs of all sessions."""
        return list(self._sessions)

    def cleanup_stale_sessions(self, max_age_seconds: int | None = None) -> int:
        """
        End sessions with no activity for max_age_seconds
        (the manager's own limit if not given).

        Returns the number of sessions removed.
        """
        if max_age_seconds is None:
            max_age_seconds = self.max_age_seconds
        now = time.time()
        stale = [
            sid for sid, session in list(self._sessions.items())
            if now - session.last_active > max_age_seconds
        ]
        for session_id in stale:
            self.end_session(session_id)
        return len(stale)
