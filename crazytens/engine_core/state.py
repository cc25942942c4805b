"""
Game State - Immutable containers for cards, rounds and sessions.

Design principles:
- Immutable: frozen dataclasses; every change builds a new object via _copy_with
- Copy-on-write: piles and hands are tuples, the hands dict is never mutated
- Game-agnostic numerals: ranks are symbols of the session's NumeralSystem
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..systems import NumeralSystem
    from .challenge import PendingChallenge


class Suit(Enum):
    """The four suits."""
    SPADES = "S"
    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"

    @classmethod
    def parse(cls, text: str) -> Suit:
        """Accept a suit letter (any case) or a member name."""
        value = text.strip().upper()
        try:
            return cls(value)
        except ValueError:
            pass
        try:
            return cls[value]
        except KeyError:
            raise ValueError(f"Unknown suit: {text!r}") from None


class GameStatus(Enum):
    ONGOING = "ONGOING"
    GAME_OVER = "GAME_OVER"


@dataclass(frozen=True)
class Card:
    """
    A card is a (suit, rank) value; equality is structural.

    The rank is a symbol from the system's numeric or face ranks.
    """
    suit: Suit
    rank: str

    def __str__(self) -> str:
        return f"{self.rank}{self.suit.value}"


@dataclass(frozen=True)
class RoundState:
    """
    One hand-to-empty round.

    Invariant: len(deck) + len(discard) + sum of hand sizes + 1 (top card)
    equals the full deck size for the whole round.
    """
    players: tuple[str, str]
    deck: tuple[Card, ...]  # back is the next draw
    discard: tuple[Card, ...]
    top_card: Card
    hands: dict[str, tuple[Card, ...]]
    turn: str

    forced_suit: Suit | None = None  # set while a wildcard-ten is on top
    draw_count: int = 0  # draws taken this turn, 0-3
    free_play_for: str | None = None
    pending_challenge: PendingChallenge | None = None

    def hand(self, player_id: str) -> tuple[Card, ...]:
        return self.hands.get(player_id, ())

    @property
    def effective_suit(self) -> Suit:
        """The suit a normal play must follow."""
        return self.forced_suit or self.top_card.suit

    def with_hand(self, player_id: str, cards: tuple[Card, ...]) -> RoundState:
        """Return new round with one hand replaced."""
        new_hands = self.hands.copy()
        new_hands[player_id] = cards
        return self._copy_with(hands=new_hands)

    def _copy_with(self, **kwargs: Any) -> RoundState:
        return replace(self, **kwargs)


@dataclass(frozen=True)
class RoundResult:
    """Settlement of a finished round."""
    round_number: int
    winner: str
    loser: str
    gain: int  # decimal points added to the winner


@dataclass(frozen=True)
class GameState:
    """
    A match: a sequence of rounds with decimal scores carried across them.

    This is the canonical state the dispatcher operates on.
    Only the previous snapshot is kept, so undo goes back one step.
    """
    game_id: str
    system: NumeralSystem
    round: RoundState
    scores: dict[str, int]

    status: GameStatus = GameStatus.ONGOING
    winner: str | None = None

    initial_hand_size: int = 5
    round_number: int = 1
    round_history: tuple[RoundResult, ...] = ()

    # History (for undo, replay, logging)
    action_log: tuple[Any, ...] = ()
    previous: GameState | None = field(default=None, repr=False, compare=False)

    # Random seed for determinism; None means fresh entropy per draw
    random_seed: int | None = None

    @property
    def players(self) -> tuple[str, str]:
        return self.round.players

    @property
    def is_over(self) -> bool:
        return self.status == GameStatus.GAME_OVER

    def _copy_with(self, **kwargs: Any) -> GameState:
        """Create a copy with some fields replaced."""
        return replace(self, **kwargs)
