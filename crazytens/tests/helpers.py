"""
Test helpers - Card shorthand and stacked decks.
"""

from ..engine_core.deck import build_deck
from ..engine_core.state import Card, Suit


def card(token: str) -> Card:
    """'10H' -> Card(HEARTS, '10'); the last character is the suit."""
    return Card(Suit(token[-1]), token[:-1])


def cards(tokens: str) -> list[Card]:
    return [card(t) for t in tokens.split()]


def stack_deck(system, p1: str, p2: str, top: str, draws: str = "") -> list[Card]:
    """
    A full deck arranged so init_round deals exactly these cards.

    p1/p2 are dealt alternately, then top is flipped, then draws come off
    in the order given. Every other card stays below, so the deck is
    complete and card counts are conserved.
    """
    hand1, hand2 = cards(p1), cards(p2)
    assert len(hand1) == len(hand2), "hands must be the same size"
    draw_order = cards(draws) if draws else []

    chosen = hand1 + hand2 + [card(top)] + draw_order
    assert len(set(chosen)) == len(chosen), "cards must be distinct"
    full = build_deck(system)
    assert all(c in full for c in chosen), "cards must exist in the system's deck"

    order: list[Card] = []
    for a, b in zip(hand1, hand2):
        order += [a, b]
    order.append(card(top))
    order.extend(draw_order)

    rest = [c for c in full if c not in chosen]
    return rest + list(reversed(order))
