"""
Engine Core - Deterministic Crazy Tens rules and session dispatch.

The engine is a pure value-to-value transformer:
1. Builds decks from a NumeralSystem
2. Deals and runs rounds (rules.py)
3. Raises and checks arithmetic challenges
4. Applies player actions via the reducer
5. Scores rounds and detects game over
6. Projects a redacted public view
"""

from .state import Card, Suit, RoundState, RoundResult, GameState, GameStatus
from .action import (
    ActionType,
    GameAction,
    PlayAction,
    DrawAction,
    PassAction,
    AnswerChallengeAction,
    ActionResult,
)
from .deck import build_deck, shuffle, draw
from .rules import (
    init_round,
    is_playable,
    playable_cards,
    apply_play,
    apply_draw,
    pass_turn,
    is_round_over,
    round_winner,
    card_count,
)
from .challenge import Operator, PendingChallenge, generate_challenge, check_answer
from .scoring import hand_points, round_gain, round_gain_text, score_breakdown
from .reducer import create_game, apply_action, try_apply, undo
from .view import PublicStateView, get_public_state

__all__ = [
    "Card",
    "Suit",
    "RoundState",
    "RoundResult",
    "GameState",
    "GameStatus",
    "ActionType",
    "GameAction",
    "PlayAction",
    "DrawAction",
    "PassAction",
    "AnswerChallengeAction",
    "ActionResult",
    "build_deck",
    "shuffle",
    "draw",
    "init_round",
    "is_playable",
    "playable_cards",
    "apply_play",
    "apply_draw",
    "pass_turn",
    "is_round_over",
    "round_winner",
    "card_count",
    "Operator",
    "PendingChallenge",
    "generate_challenge",
    "check_answer",
    "hand_points",
    "round_gain",
    "round_gain_text",
    "score_breakdown",
    "create_game",
    "apply_action",
    "try_apply",
    "undo",
    "PublicStateView",
    "get_public_state",
]
