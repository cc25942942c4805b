"""
Action System - Player actions and results.

GameAction is a closed set of four variants. Each variant carries its
ActionType tag so the dispatcher can route it through a handler table:

    PLAY(player_id, card, chosen_suit?)
    DRAW(player_id)
    PASS(player_id)
    ANSWER_CHALLENGE(player_id, answer)

Every action may carry a timestamp; the dispatcher stamps one if missing.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, ClassVar, Union
import time

from .state import Card, Suit


class ActionType(Enum):
    """Types of actions in the system."""
    PLAY = "PLAY"
    DRAW = "DRAW"
    PASS = "PASS"
    ANSWER_CHALLENGE = "ANSWER_CHALLENGE"


@dataclass(frozen=True)
class PlayAction:
    player_id: str
    card: Card
    chosen_suit: Suit | None = None
    timestamp: float | None = None

    action_type: ClassVar[ActionType] = ActionType.PLAY


@dataclass(frozen=True)
class DrawAction:
    player_id: str
    timestamp: float | None = None

    action_type: ClassVar[ActionType] = ActionType.DRAW


@dataclass(frozen=True)
class PassAction:
    player_id: str
    timestamp: float | None = None

    action_type: ClassVar[ActionType] = ActionType.PASS


@dataclass(frozen=True)
class AnswerChallengeAction:
    """answer is a decimal int, or text in the session's numerals."""
    player_id: str
    answer: int | str
    timestamp: float | None = None

    action_type: ClassVar[ActionType] = ActionType.ANSWER_CHALLENGE


GameAction = Union[PlayAction, DrawAction, PassAction, AnswerChallengeAction]

ACTION_CLASSES: tuple[type, ...] = (PlayAction, DrawAction, PassAction, AnswerChallengeAction)


def with_timestamp(action: GameAction, now: float | None = None) -> GameAction:
    """Return the action stamped with the current time unless it has one."""
    if action.timestamp is not None:
        return action
    return replace(action, timestamp=time.time() if now is None else now)


@dataclass
class ActionResult:
    """
    Result of applying an action, for callers that prefer not to catch.

    Contains:
    - Whether action succeeded
    - New state (if succeeded)
    - Error message and code (if failed)
    - Human-readable changes (for UI/logging)
    """
    success: bool
    new_state: Any | None = None  # GameState
    error: str | None = None
    error_code: str | None = None

    state_changes: list[str] = field(default_factory=list)

    @classmethod
    def failure(cls, error: str, error_code: str | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def success_with_state(cls, state: Any, changes: list[str] | None = None) -> ActionResult:
        """Create a success result with new state."""
        return cls(success=True, new_state=state, state_changes=changes or [])
