"""
Session Manager - Creates and manages in-memory game sessions.

LIFECYCLE:
1. Host creates a session -> a fresh GameState is dealt
2. During the match:
   - Host submits one action at a time
   - The engine validates and returns the next immutable GameState
   - The session keeps the latest state (plus the engine's undo snapshot)
3. Game ends or players leave -> host ends the session, state is dropped

CONCURRENCY:
The engine itself does no locking. Each session has its own lock and
submit() holds it across read-apply-write, so two actions on the same
session can never race and silently drop one another.

PERSISTENCE:
None. Sessions live in process memory only.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging
import threading
import time
import uuid

from .. import config
from ..engine_core.action import ActionResult, GameAction
from ..engine_core.reducer import create_game, try_apply, undo
from ..engine_core.state import Card, GameState
from ..engine_core.view import PublicStateView, get_public_state

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """State of a game session."""
    ACTIVE = "active"  # Game in progress
    GAME_OVER = "game_over"  # Game completed
    ABANDONED = "abandoned"  # Ended before completion


@dataclass
class Session:
    """
    One match hosted in memory.

    game always holds the latest snapshot; it is only replaced while
    holding lock.
    """
    session_id: str
    game: GameState
    created_at: float
    state: SessionState = SessionState.ACTIVE
    ended_at: float | None = None
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def is_active(self) -> bool:
        """Check if session is still active."""
        return self.state == SessionState.ACTIVE

    def public_state(self) -> PublicStateView:
        return get_public_state(self.game)


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions
    - Serialize actions per session
    - Track and clean up ended sessions
    """

    def __init__(self):
        self._sessions: dict[str, Session] = {}
        self._registry_lock = threading.Lock()

    def create_session(
        self,
        players: tuple[str, str] | list[str],
        base_id: str | None = None,
        initial_hand_size: int | None = None,
        random_seed: int | None = None,
        deck: list[Card] | None = None,
    ) -> Session:
        """
        Create a new game session.

        Args:
            players: The two player ids
            base_id: Numeral system id (defaults to CRAZYTENS_BASE)
            initial_hand_size: Hand size per round (defaults to CRAZYTENS_HAND_SIZE)
            random_seed: Seed for reproducible games (defaults to CRAZYTENS_SEED)
            deck: Optional stacked deck for the first round

        Returns:
            New active Session
        """
        session_id = str(uuid.uuid4())
        game = create_game(
            players,
            base_id if base_id is not None else config.DEFAULT_BASE,
            initial_hand_size=initial_hand_size if initial_hand_size is not None else config.DEFAULT_HAND_SIZE,
            deck=deck,
            game_id=session_id,
            random_seed=random_seed if random_seed is not None else config.DEFAULT_SEED,
        )
        session = Session(session_id=session_id, game=game, created_at=time.time())

        with self._registry_lock:
            self._sessions[session_id] = session
        logger.info("Session %s created", session_id)
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def submit(self, session_id: str, action: GameAction) -> ActionResult:
        """
        Apply one action to a session.

        Failures come back as ActionResult failures; the session keeps its
        previous state.
        """
        session = self._sessions.get(session_id)
        if session is None:
            return ActionResult.failure(f"Session {session_id} not found", error_code="SESSION_NOT_FOUND")

        with session.lock:
            if not session.is_active():
                return ActionResult.failure(f"Session {session_id} has ended", error_code="SESSION_ENDED")

            result = try_apply(session.game, action)
            if not result.success:
                logger.debug("Session %s rejected action: %s", session_id, result.error_code)
                return result

            session.game = result.new_state
            if session.game.is_over:
                self._finish(session, SessionState.GAME_OVER)
            return result

    def undo(self, session_id: str) -> GameState | None:
        """Step the session back one action."""
        session = self._sessions.get(session_id)
        if session is None:
            return None
        with session.lock:
            session.game = undo(session.game)
            if not session.game.is_over and session.state == SessionState.GAME_OVER:
                session.state = SessionState.ACTIVE
                session.ended_at = None
            return session.game

    def end_session(self, session_id: str, reason: str = "completed"):
        """
        End a session and drop it from memory.
        """
        with self._registry_lock:
            session = self._sessions.pop(session_id, None)
        if session:
            with session.lock:
                state = SessionState.GAME_OVER if reason == "completed" else SessionState.ABANDONED
                self._finish(session, state)
            logger.info("Session %s ended (%s)", session_id, reason)

    def list_active_sessions(self) -> list[str]:
        """List IDs of active sessions."""
        return [
            sid for sid, session in list(self._sessions.items())
            if session.is_active()
        ]

    def cleanup_stale_sessions(self, max_age_seconds: int | None = None) -> list[str]:
        """
        Drop finished sessions older than max_age_seconds.

        Returns the removed session ids.
        """
        ttl = config.SESSION_TTL_SECONDS if max_age_seconds is None else max_age_seconds
        now = time.time()
        stale = [
            sid for sid, session in list(self._sessions.items())
            if not session.is_active() and now - (session.ended_at or session.created_at) > ttl
        ]
        for sid in stale:
            self.end_session(sid, reason="stale")
        return stale

    def _finish(self, session: Session, state: SessionState):
        if session.is_active():
            session.state = state
            session.ended_at = time.time()
