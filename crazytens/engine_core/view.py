"""
Public View - The redacted projection of a session for broadcast.

Safe to send to both players and to spectators: it carries hand sizes but
never the cards in a hand, and a pending challenge's question but never
its answer. Numbers appear both in decimal and in the session's numerals.
"""

from __future__ import annotations
from typing import Optional

from pydantic import BaseModel, Field

from .state import Card, GameState


class CardView(BaseModel):
    suit: str = Field(description="S, H, D or C")
    rank: str = Field(description="Rank symbol in the session's numerals")

    @classmethod
    def from_card(cls, card: Card) -> CardView:
        return cls(suit=card.suit.value, rank=card.rank)


class ChallengeView(BaseModel):
    """A pending challenge without its answer."""
    player_id: str = Field(description="Who must answer")
    suit: str
    operator: str = Field(description="+, -, * or /")
    left_text: str
    right_text: str


class PublicStateView(BaseModel):
    """Everything either player may see."""
    game_id: str
    base_id: str
    status: str
    winner: Optional[str] = None
    round_number: int

    turn: str
    top_card: CardView
    forced_suit: Optional[str] = None
    free_play_for: Optional[str] = None
    draw_count: int
    pending_challenge: Optional[ChallengeView] = None

    hand_counts: dict[str, int]
    deck_count: int
    discard_count: int

    scores: dict[str, int] = Field(description="Decimal scores")
    scores_text: dict[str, str] = Field(description="Scores in the session's numerals")
    target_score: int
    target_score_text: str

    wildcard_ten_symbol: str
    wildcard_skip_symbol: str
    face_ranks: list[str]
    deck_numeric_symbols: list[str]


def get_public_state(game: GameState) -> PublicStateView:
    system = game.system
    round_state = game.round

    challenge = round_state.pending_challenge
    challenge_view = None
    if challenge is not None:
        challenge_view = ChallengeView(
            player_id=challenge.player_id,
            suit=challenge.suit.value,
            operator=challenge.operator.value,
            left_text=system.format(challenge.left),
            right_text=system.format(challenge.right),
        )

    return PublicStateView(
        game_id=game.game_id,
        base_id=system.id,
        status=game.status.value,
        winner=game.winner,
        round_number=game.round_number,
        turn=round_state.turn,
        top_card=CardView.from_card(round_state.top_card),
        forced_suit=round_state.forced_suit.value if round_state.forced_suit else None,
        free_play_for=round_state.free_play_for,
        draw_count=round_state.draw_count,
        pending_challenge=challenge_view,
        hand_counts={pid: len(round_state.hand(pid)) for pid in round_state.players},
        deck_count=len(round_state.deck),
        discard_count=len(round_state.discard),
        scores=dict(game.scores),
        scores_text={pid: system.format(score) for pid, score in game.scores.items()},
        target_score=system.target_score,
        target_score_text=system.target_score_text,
        wildcard_ten_symbol=system.wildcard_ten_symbol,
        wildcard_skip_symbol=system.wildcard_skip_symbol,
        face_ranks=list(system.face_ranks),
        deck_numeric_symbols=list(system.deck_numeric_symbols),
    )
