"""
Deck - Building, shuffling and drawing cards for a numeral system.
"""

from __future__ import annotations
import random

from ..systems import NumeralSystem
from .state import Card, Suit


def build_deck(system: NumeralSystem) -> list[Card]:
    """
    One card per suit for every numeric symbol and face rank.

    Size is 4 * (numeric symbols + face ranks): 52 for decimal, 64 for dozenal.
    """
    deck: list[Card] = []
    for suit in Suit:
        for rank in system.deck_numeric_symbols:
            deck.append(Card(suit, rank))
        for rank in system.face_ranks:
            deck.append(Card(suit, rank))
    return deck


def shuffle(deck: list[Card], rng: random.Random | None = None) -> list[Card]:
    """Shuffle in place (Fisher-Yates) and return the same list."""
    (rng or random).shuffle(deck)
    return deck


def draw(deck: list[Card]) -> Card:
    """Remove and return the last card. The caller guards against empty decks."""
    return deck.pop()
