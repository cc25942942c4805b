"""
Session Module - Hosts matches in memory.

A session represents one match:
- Created when two players start a game
- Holds the latest immutable GameState
- Serializes actions so only one is applied at a time
- Dropped when the match ends

Sessions are EPHEMERAL: nothing is persisted.
"""

from .manager import SessionManager, Session, SessionState

__all__ = [
    "SessionManager",
    "Session",
    "SessionState",
]
