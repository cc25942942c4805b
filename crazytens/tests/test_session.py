"""
Tests for the in-memory session manager.
"""

import threading

import pytest

from ..engine_core.action import PassAction, PlayAction
from ..errors import UnknownSystem
from ..session import SessionManager, SessionState
from .helpers import card, stack_deck


@pytest.fixture
def manager():
    return SessionManager()


@pytest.fixture
def closing_session(manager, dec):
    deck = stack_deck(dec, p1="5H 3H", p2="KS 7C", top="9H")
    return manager.create_session(("P1", "P2"), "dec", initial_hand_size=2, deck=deck, random_seed=7)


class TestSessionLifecycle:

    def test_create_session(self, manager):
        session = manager.create_session(("alice", "bob"), "doz", random_seed=1)
        assert session.is_active()
        assert session.game.game_id == session.session_id
        assert manager.get_session(session.session_id) is session
        assert manager.list_active_sessions() == [session.session_id]

    def test_defaults_come_from_config(self, manager):
        session = manager.create_session(("alice", "bob"))
        assert session.game.system.id == "doz"
        assert len(session.game.round.hand("alice")) == 5

    def test_unknown_system(self, manager):
        with pytest.raises(UnknownSystem):
            manager.create_session(("alice", "bob"), "hex")
        assert manager.list_active_sessions() == []

    def test_explicit_zero_hand_size_is_rejected(self, manager):
        with pytest.raises(ValueError):
            manager.create_session(("alice", "bob"), "dec", initial_hand_size=0)
        assert manager.list_active_sessions() == []

    def test_public_state(self, closing_session):
        view = closing_session.public_state()
        assert view.game_id == closing_session.session_id
        assert view.hand_counts == {"P1": 2, "P2": 2}

    def test_end_session(self, manager, closing_session):
        sid = closing_session.session_id
        manager.end_session(sid, reason="players left")
        assert manager.get_session(sid) is None
        assert closing_session.state is SessionState.ABANDONED
        assert closing_session.ended_at is not None


class TestSubmit:

    def test_submit_success(self, manager, closing_session):
        result = manager.submit(closing_session.session_id, PlayAction("P1", card("5H")))
        assert result.success
        assert closing_session.game is result.new_state
        assert closing_session.game.round.turn == "P2"

    def test_submit_failure_keeps_state(self, manager, closing_session):
        before = closing_session.game
        result = manager.submit(closing_session.session_id, PassAction("P2"))
        assert not result.success
        assert result.error_code == "NOT_YOUR_TURN"
        assert closing_session.game is before

    def test_unknown_session(self, manager):
        result = manager.submit("nope", PassAction("P1"))
        assert not result.success
        assert result.error_code == "SESSION_NOT_FOUND"

    def test_game_over_ends_session(self, manager, closing_session):
        sid = closing_session.session_id
        closing_session.game = closing_session.game._copy_with(scores={"P1": 45, "P2": 0})

        manager.submit(sid, PlayAction("P1", card("5H")))
        manager.submit(sid, PassAction("P2"))
        result = manager.submit(sid, PlayAction("P1", card("3H")))

        assert result.success
        assert closing_session.game.is_over
        assert closing_session.state is SessionState.GAME_OVER
        assert sid not in manager.list_active_sessions()

        result = manager.submit(sid, PassAction("P1"))
        assert result.error_code == "SESSION_ENDED"

    def test_undo_reopens_finished_session(self, manager, closing_session):
        sid = closing_session.session_id
        closing_session.game = closing_session.game._copy_with(scores={"P1": 45, "P2": 0})
        manager.submit(sid, PlayAction("P1", card("5H")))
        manager.submit(sid, PassAction("P2"))
        manager.submit(sid, PlayAction("P1", card("3H")))
        assert closing_session.state is SessionState.GAME_OVER

        game = manager.undo(sid)
        assert not game.is_over
        assert closing_session.is_active()
        assert closing_session.ended_at is None
        assert game.round.hand("P1") == (card("3H"),)

    def test_undo_unknown_session(self, manager):
        assert manager.undo("nope") is None


class TestCleanup:

    def test_cleanup_drops_only_finished_sessions(self, manager, closing_session):
        live = manager.create_session(("alice", "bob"), "dec", random_seed=2)
        closing_session.game = closing_session.game._copy_with(scores={"P1": 45, "P2": 0})
        sid = closing_session.session_id
        manager.submit(sid, PlayAction("P1", card("5H")))
        manager.submit(sid, PassAction("P2"))
        manager.submit(sid, PlayAction("P1", card("3H")))

        assert manager.cleanup_stale_sessions(max_age_seconds=3600) == []
        assert manager.cleanup_stale_sessions(max_age_seconds=-1) == [sid]
        assert manager.get_session(sid) is None
        assert manager.get_session(live.session_id) is live


class TestConcurrency:

    def test_concurrent_submits_do_not_lose_updates(self, manager):
        session = manager.create_session(("P1", "P2"), "dec", random_seed=3)
        sid = session.session_id
        successes = []
        lock = threading.Lock()

        def worker(pid):
            for _ in range(50):
                result = manager.submit(sid, PassAction(pid))
                if result.success:
                    with lock:
                        successes.append(pid)

        threads = [threading.Thread(target=worker, args=(pid,)) for pid in ("P1", "P2")]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(session.game.action_log) == len(successes)
        # Passes strictly alternate
        logged = [action.player_id for action in session.game.action_log]
        assert all(a != b for a, b in zip(logged, logged[1:]))
