"""
API Module - Wire schemas for hosts.

Transport (HTTP, WebSocket) belongs to the host. This module only defines
the records it exchanges with the engine:
1. Tagged action records -> engine actions
2. Game creation requests
3. Public state and error responses
"""

from .schemas import (
    # Requests
    ActionRequest,
    PlayRequest,
    DrawRequest,
    PassRequest,
    AnswerChallengeRequest,
    CreateGameRequest,
    # Responses
    ErrorCode,
    ErrorResponse,
    GameStateResponse,
    # Shared
    CardModel,
    # Helpers
    parse_action,
    error_response,
)

__all__ = [
    # Requests
    "ActionRequest",
    "PlayRequest",
    "DrawRequest",
    "PassRequest",
    "AnswerChallengeRequest",
    "CreateGameRequest",
    # Responses
    "ErrorCode",
    "ErrorResponse",
    "GameStateResponse",
    # Shared
    "CardModel",
    # Helpers
    "parse_action",
    "error_response",
]
