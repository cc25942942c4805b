"""
Pytest fixtures for Crazy Tens tests.
"""

import pytest

from ..systems import DECIMAL_SYSTEM, DOZENAL_SYSTEM, NumeralSystem
from ..engine_core.reducer import create_game
from ..engine_core.state import GameState
from .helpers import stack_deck


@pytest.fixture
def dec() -> NumeralSystem:
    """Decimal system."""
    return DECIMAL_SYSTEM


@pytest.fixture
def doz() -> NumeralSystem:
    """Dozenal system."""
    return DOZENAL_SYSTEM


@pytest.fixture
def decimal_closing_game(dec) -> GameState:
    """
    Decimal game with hands of two where P1 can go out in two plays.

    P1: 5H 3H   P2: KS 7C   top: 9H
    P2's hand is worth 10 + 7 = 17.
    """
    deck = stack_deck(dec, p1="5H 3H", p2="KS 7C", top="9H")
    return create_game(("P1", "P2"), "dec", initial_hand_size=2, deck=deck, random_seed=7)


@pytest.fixture
def challenge_game(dec) -> GameState:
    """
    Decimal game where P1 opens with the wildcard-ten of spades.

    P1: 10S 4H 2C   P2: 3D 8D KD   top: 5H
    """
    deck = stack_deck(dec, p1="10S 4H 2C", p2="3D 8D KD", top="5H")
    return create_game(("P1", "P2"), "dec", initial_hand_size=3, deck=deck, random_seed=11)
