"""
Errors - The engine's failure taxonomy.

Every failure is a local validation error raised before any state is built,
so the caller's state is never partially changed. Each class carries a
machine-readable ``code`` that hosts map to their own responses.
"""

from __future__ import annotations


class CrazyTensError(Exception):
    """Base class for all engine errors."""
    code = "ERROR"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.__class__.__name__)


# Codec / registry

class InvalidNumberFormat(CrazyTensError, ValueError):
    """Text is not a valid number in the given base, or a value can't be narrowed."""
    code = "INVALID_NUMBER_FORMAT"


class UnknownSystem(CrazyTensError, LookupError):
    code = "UNKNOWN_SYSTEM"


# Round setup

class InvalidPlayers(CrazyTensError):
    code = "INVALID_PLAYERS"


class DeckTooSmall(CrazyTensError):
    code = "DECK_TOO_SMALL"


# Player misuse

class NotYourTurn(CrazyTensError):
    code = "NOT_YOUR_TURN"


class IllegalMove(CrazyTensError):
    code = "ILLEGAL_MOVE"


class CardNotInHand(CrazyTensError):
    code = "CARD_NOT_IN_HAND"


class NeedChosenSuitForWildcardTen(CrazyTensError):
    code = "NEED_CHOSEN_SUIT_FOR_WILDCARD_TEN"


# Round mechanics

class DrawLimitReached(CrazyTensError):
    code = "DRAW_LIMIT_REACHED"


class EmptyDeck(CrazyTensError):
    code = "EMPTY_DECK"


# Challenge sub-state

class MustAnswerChallengeFirst(CrazyTensError):
    code = "MUST_ANSWER_CHALLENGE_FIRST"


class NoPendingChallenge(CrazyTensError):
    code = "NO_PENDING_CHALLENGE"


class WrongChallengeAnswer(CrazyTensError):
    code = "WRONG_CHALLENGE_ANSWER"


# Session

class GameOver(CrazyTensError):
    code = "GAME_OVER"
