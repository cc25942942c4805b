"""
Round Rules - The state machine for a single hand-to-empty round.

Every transition is a pure function (system, round, ...) -> new round that
raises on an illegal request and never touches its input.

Legality of a play, in order:
1. It must be the player's turn and the card must be in their hand
2. A free-play grant allows any held card
3. Wildcards (ten and skip) are always playable
4. Otherwise match the effective suit, match the rank, or (two numeric
   cards) sum to the system's target
"""

from __future__ import annotations
import random

from ..errors import (
    CardNotInHand,
    DeckTooSmall,
    DrawLimitReached,
    EmptyDeck,
    IllegalMove,
    InvalidPlayers,
    NeedChosenSuitForWildcardTen,
    NotYourTurn,
)
from ..systems import NumeralSystem
from .deck import build_deck, shuffle
from .state import Card, RoundState, Suit

DRAW_LIMIT = 3
DEFAULT_HAND_SIZE = 5


def init_round(
    system: NumeralSystem,
    players: tuple[str, str],
    hand_size: int = DEFAULT_HAND_SIZE,
    deck: list[Card] | tuple[Card, ...] | None = None,
    rng: random.Random | None = None,
) -> RoundState:
    """
    Deal a new round.

    Uses the given deck as-is (back is drawn first) or a freshly shuffled
    full deck. Cards are dealt alternately, then one card is flipped as the
    top card and the first listed player moves first.
    """
    players = tuple(players)
    if len(players) != 2:
        raise InvalidPlayers(f"Exactly two players are required, got {len(players)}")
    if players[0] == players[1]:
        raise InvalidPlayers(f"Player ids must differ, got {players[0]!r} twice")
    if hand_size < 1:
        raise ValueError("hand_size must be >= 1")

    cards = list(deck) if deck is not None else shuffle(build_deck(system), rng)
    if len(cards) < 1 + 2 * hand_size:
        raise DeckTooSmall(
            f"Deck has {len(cards)} cards, need {1 + 2 * hand_size} for hands of {hand_size}"
        )

    first, second = players
    hands: dict[str, list[Card]] = {first: [], second: []}
    for _ in range(hand_size):
        hands[first].append(cards.pop())
        hands[second].append(cards.pop())
    top_card = cards.pop()

    return RoundState(
        players=players,
        deck=tuple(cards),
        discard=(),
        top_card=top_card,
        hands={pid: tuple(hand) for pid, hand in hands.items()},
        turn=first,
    )


def opponent_of(state: RoundState, player_id: str) -> str:
    first, second = state.players
    return second if player_id == first else first


def is_playable(system: NumeralSystem, state: RoundState, player_id: str, card: Card) -> bool:
    """Whether player_id may play card right now."""
    if state.turn != player_id:
        return False
    if card not in state.hand(player_id):
        return False

    if state.free_play_for == player_id:
        return True
    if system.is_wildcard(card.rank):
        return True

    if card.suit == state.effective_suit:
        return True
    if card.rank == state.top_card.rank:
        return True

    top = state.top_card
    if not system.is_face(card.rank) and not system.is_face(top.rank):
        total = system.numeric_value(card.rank) + system.numeric_value(top.rank)
        if total == system.target_sum:
            return True

    return False


def playable_cards(system: NumeralSystem, state: RoundState, player_id: str) -> list[Card]:
    """Cards in the player's hand that may be played now."""
    return [c for c in state.hand(player_id) if is_playable(system, state, player_id, c)]


def apply_play(
    system: NumeralSystem,
    state: RoundState,
    player_id: str,
    card: Card,
    chosen_suit: Suit | None = None,
) -> RoundState:
    """
    Play a card onto the discard pile.

    - wildcard-ten: forces chosen_suit; the turn stays put (the dispatcher
      decides when it passes)
    - wildcard-skip: same player keeps the turn with a free-play grant
    - anything else: the turn passes to the opponent
    """
    if state.turn != player_id:
        raise NotYourTurn(f"Not {player_id}'s turn")

    is_ten = card.rank == system.wildcard_ten_symbol
    is_skip = card.rank == system.wildcard_skip_symbol
    if is_ten and chosen_suit is None:
        raise NeedChosenSuitForWildcardTen(f"Playing {card} requires a chosen suit")

    hand = state.hand(player_id)
    if card not in hand:
        raise CardNotInHand(f"Card {card} not in {player_id}'s hand")
    if not is_playable(system, state, player_id, card):
        raise IllegalMove(f"{card} cannot be played on {state.top_card}")

    idx = hand.index(card)
    new_hand = hand[:idx] + hand[idx + 1:]

    if is_ten:
        forced_suit, free_play_for, turn = chosen_suit, None, player_id
    elif is_skip:
        forced_suit, free_play_for, turn = None, player_id, player_id
    else:
        forced_suit, free_play_for, turn = None, None, opponent_of(state, player_id)

    return state.with_hand(player_id, new_hand)._copy_with(
        discard=state.discard + (state.top_card,),
        top_card=card,
        forced_suit=forced_suit,
        free_play_for=free_play_for,
        turn=turn,
        draw_count=0,
    )


def _reshuffle_if_needed(state: RoundState, rng: random.Random | None) -> RoundState:
    """Turn the discard pile into the draw pile once the deck runs out."""
    if state.deck or not state.discard:
        return state
    return state._copy_with(deck=tuple(shuffle(list(state.discard), rng)), discard=())


def apply_draw(
    system: NumeralSystem,
    state: RoundState,
    player_id: str,
    rng: random.Random | None = None,
) -> RoundState:
    """
    Draw one card. Drawing does not end the turn.

    After the third draw of a turn, if the player still has nothing to play,
    the turn passes automatically and the opponent gets a free-play grant.
    """
    if state.turn != player_id:
        raise NotYourTurn(f"Not {player_id}'s turn")
    if state.draw_count >= DRAW_LIMIT:
        raise DrawLimitReached(f"Already drew {DRAW_LIMIT} cards this turn")

    s = _reshuffle_if_needed(state, rng)
    if not s.deck:
        raise EmptyDeck("Deck and discard pile are both empty")

    drawn = s.deck[-1]
    s = s.with_hand(player_id, s.hand(player_id) + (drawn,))._copy_with(
        deck=s.deck[:-1],
        draw_count=s.draw_count + 1,
    )

    if s.draw_count >= DRAW_LIMIT and not playable_cards(system, s, player_id):
        opponent = opponent_of(s, player_id)
        s = s._copy_with(
            turn=opponent,
            draw_count=0,
            forced_suit=None,
            free_play_for=opponent,
        )
    return s


def pass_turn(state: RoundState, player_id: str | None = None) -> RoundState:
    """Hand the turn to the opponent, clearing per-turn effects."""
    if player_id is not None and state.turn != player_id:
        raise NotYourTurn(f"Not {player_id}'s turn")
    return state._copy_with(
        turn=opponent_of(state, state.turn),
        draw_count=0,
        forced_suit=None,
        free_play_for=None,
    )


def is_round_over(state: RoundState) -> bool:
    return any(not state.hand(pid) for pid in state.players)


def round_winner(state: RoundState) -> str | None:
    """The player with an empty hand, if any."""
    for pid in state.players:
        if not state.hand(pid):
            return pid
    return None


def card_count(state: RoundState) -> int:
    """All cards in the round; constant and equal to the deck size."""
    return (
        len(state.deck)
        + len(state.discard)
        + sum(len(state.hand(pid)) for pid in state.players)
        + 1
    )
