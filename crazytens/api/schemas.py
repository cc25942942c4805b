"""
Pydantic Schemas for hosts - The wire contract around the engine.

A GameAction travels as a tagged record:

    {"type": "PLAY", "playerId": "P1", "card": {"suit": "H", "rank": "10"}, "chosenSuit": "S"}
    {"type": "DRAW", "playerId": "P1"}
    {"type": "PASS", "playerId": "P1"}
    {"type": "ANSWER_CHALLENGE", "playerId": "P1", "answer": "1↊"}

plus an optional "at" timestamp. parse_action() validates a record and
returns the engine's action object.

Error Codes mirror the engine's error taxonomy; error_response() maps any
engine exception onto an ErrorResponse.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from ..engine_core.action import (
    AnswerChallengeAction,
    DrawAction,
    GameAction,
    PassAction,
    PlayAction,
)
from ..engine_core.state import Card, Suit
from ..engine_core.view import PublicStateView
from ..errors import CrazyTensError


# =============================================================================
# Enums
# =============================================================================

class ErrorCode(str, Enum):
    """Structured error codes."""
    INVALID_NUMBER_FORMAT = "INVALID_NUMBER_FORMAT"
    UNKNOWN_SYSTEM = "UNKNOWN_SYSTEM"
    INVALID_PLAYERS = "INVALID_PLAYERS"
    DECK_TOO_SMALL = "DECK_TOO_SMALL"
    NOT_YOUR_TURN = "NOT_YOUR_TURN"
    ILLEGAL_MOVE = "ILLEGAL_MOVE"
    CARD_NOT_IN_HAND = "CARD_NOT_IN_HAND"
    NEED_CHOSEN_SUIT_FOR_WILDCARD_TEN = "NEED_CHOSEN_SUIT_FOR_WILDCARD_TEN"
    DRAW_LIMIT_REACHED = "DRAW_LIMIT_REACHED"
    EMPTY_DECK = "EMPTY_DECK"
    MUST_ANSWER_CHALLENGE_FIRST = "MUST_ANSWER_CHALLENGE_FIRST"
    NO_PENDING_CHALLENGE = "NO_PENDING_CHALLENGE"
    WRONG_CHALLENGE_ANSWER = "WRONG_CHALLENGE_ANSWER"
    GAME_OVER = "GAME_OVER"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class CardModel(BaseModel):
    """A card on the wire."""
    suit: Suit
    rank: str = Field(..., min_length=1)

    @field_validator("suit", mode="before")
    @classmethod
    def _parse_suit(cls, value):
        if isinstance(value, str):
            return Suit.parse(value)
        return value

    def to_card(self) -> Card:
        return Card(suit=self.suit, rank=self.rank)


class _ActionBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    player_id: str = Field(..., alias="playerId", min_length=1)
    at: Optional[float] = Field(None, description="Client timestamp; stamped by the engine if absent")


# =============================================================================
# Request Models
# =============================================================================

class PlayRequest(_ActionBase):
    type: Literal["PLAY"]
    card: CardModel
    chosen_suit: Optional[Suit] = Field(None, alias="chosenSuit")

    @field_validator("chosen_suit", mode="before")
    @classmethod
    def _parse_chosen_suit(cls, value):
        if isinstance(value, str):
            return Suit.parse(value)
        return value

    def to_action(self) -> PlayAction:
        return PlayAction(
            player_id=self.player_id,
            card=self.card.to_card(),
            chosen_suit=self.chosen_suit,
            timestamp=self.at,
        )


class DrawRequest(_ActionBase):
    type: Literal["DRAW"]

    def to_action(self) -> DrawAction:
        return DrawAction(player_id=self.player_id, timestamp=self.at)


class PassRequest(_ActionBase):
    type: Literal["PASS"]

    def to_action(self) -> PassAction:
        return PassAction(player_id=self.player_id, timestamp=self.at)


class AnswerChallengeRequest(_ActionBase):
    type: Literal["ANSWER_CHALLENGE"]
    answer: Union[int, str] = Field(..., description="Decimal int, or text in the game's numerals")

    def to_action(self) -> AnswerChallengeAction:
        return AnswerChallengeAction(player_id=self.player_id, answer=self.answer, timestamp=self.at)


ActionRequest = Annotated[
    Union[PlayRequest, DrawRequest, PassRequest, AnswerChallengeRequest],
    Field(discriminator="type"),
]

_action_adapter = TypeAdapter(ActionRequest)


def parse_action(data: dict) -> GameAction:
    """Validate a wire record and build the engine action. Raises ValidationError."""
    return _action_adapter.validate_python(data).to_action()


class CreateGameRequest(BaseModel):
    """
    Request to start a match.

    Omitted options fall back to the session manager's configured defaults.
    """
    model_config = ConfigDict(populate_by_name=True)

    players: tuple[str, str] = Field(..., description="Two distinct player ids; first moves first")
    base_id: Optional[str] = Field(None, alias="baseId")
    initial_hand_size: Optional[int] = Field(None, alias="initialHandSize", ge=1, le=20)
    random_seed: Optional[int] = Field(None, alias="randomSeed")

    def to_kwargs(self) -> dict:
        """Keyword arguments for SessionManager.create_session()."""
        return {
            "players": self.players,
            "base_id": self.base_id,
            "initial_hand_size": self.initial_hand_size,
            "random_seed": self.random_seed,
        }


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")


class GameStateResponse(BaseModel):
    """Public state after an action."""
    state: PublicStateView
    changes: list[str] = Field(default_factory=list)


def error_response(exc: Exception) -> ErrorResponse:
    """Map an exception raised by the engine to an ErrorResponse."""
    if isinstance(exc, CrazyTensError):
        try:
            code = ErrorCode(exc.code)
        except ValueError:
            code = ErrorCode.INTERNAL_ERROR
        return ErrorResponse(error=str(exc), error_code=code)
    if isinstance(exc, ValueError):
        return ErrorResponse(error=str(exc), error_code=ErrorCode.VALIDATION_ERROR)
    return ErrorResponse(error=str(exc), error_code=ErrorCode.INTERNAL_ERROR)
