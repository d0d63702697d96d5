"""
Tests for session management.
"""

import time

from tictac.engine_core import ErrorCode, Mark, initial_state
from tictac.session import SessionManager


class TestSession:

    def test_new_session_holds_initial_state(self):
        session = SessionManager().create_session()
        assert session.game_state == initial_state()

    def test_accepted_action_replaces_state(self):
        session = SessionManager().create_session()
        before = session.game_state

        result = session.place(4)

        assert result.success
        assert session.game_state is result.new_state
        assert session.game_state.squares[4] == Mark.X
        assert before.squares[4] is None

    def test_rejected_action_keeps_state(self):
        session = SessionManager().create_session()
        session.place(4)
        before = session.game_state

        result = session.place(4)

        assert result.error_code == ErrorCode.CELL_OCCUPIED
        assert session.game_state is before

    def test_jump_and_reset(self):
        session = SessionManager().create_session()
        for cell in [0, 1, 2]:
            session.place(cell)

        assert session.jump(1).success
        assert session.game_state.step_number == 1

        session.reset()
        assert session.game_state == initial_state()


class TestSessionManager:

    def test_lifecycle(self):
        manager = SessionManager()
        session = manager.create_session()

        assert manager.get_session(session.session_id) is session
        assert session.session_id in manager.list_sessions()

        assert manager.end_session(session.session_id)
        assert manager.get_session(session.session_id) is None
        assert not manager.end_session(session.session_id)

    def test_sessions_are_independent(self):
        manager = SessionManager()
        first = manager.create_session()
        second = manager.create_session()

        first.place(0)

        assert second.game_state.squares[0] is None
        assert len(manager.list_sessions()) == 2

    def test_cleanup_stale_sessions(self):
        manager = SessionManager()
        old = manager.create_session()
        fresh = manager.create_session()
        old.last_active = time.time() - 7200

        removed = manager.cleanup_stale_sessions(max_age_seconds=3600)

        assert removed == 1
        assert manager.list_sessions() == [fresh.session_id]

    def test_create_session_evicts_idle_sessions(self):
        manager = SessionManager(max_age_seconds=60)
        idle = manager.create_session()
        idle.last_active = time.time() - 120

        newer = manager.create_session()

        assert manager.get_session(idle.session_id) is None
        assert manager.list_sessions() == [newer.session_id]

    def test_activity_keeps_session_alive(self):
        manager = SessionManager(max_age_seconds=60)
        session = manager.create_session()
        session.last_active = time.time() - 120

        session.place(4)
        manager.create_session()

        assert manager.get_session(session.session_id) is session
