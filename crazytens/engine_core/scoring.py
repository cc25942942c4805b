"""
Scoring - Points left in a loser's hand.

Points are decimal no matter which base the round was played in, so scores
from any round add up and compare directly. Face cards are worth the
system's face_points; numeric cards are worth their value in the base
(a dozenal "10" is worth 12).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable

from ..systems import NumeralSystem
from .state import Card


def card_points(card: Card, system: NumeralSystem) -> int:
    if system.is_face(card.rank):
        return system.face_points
    return system.numeric_value(card.rank)


def hand_points(hand: Iterable[Card], system: NumeralSystem) -> int:
    return sum(card_points(card, system) for card in hand)


def round_gain(loser_hand: Iterable[Card], system: NumeralSystem) -> int:
    """Decimal points the round winner collects."""
    return hand_points(loser_hand, system)


def round_gain_text(loser_hand: Iterable[Card], system: NumeralSystem) -> str:
    return system.format(round_gain(loser_hand, system))


@dataclass(frozen=True)
class ScoreLine:
    card: Card
    points: int
    running_total: int


def score_breakdown(hand: Iterable[Card], system: NumeralSystem) -> list[ScoreLine]:
    """Per-card points with the running total after each card."""
    lines = []
    total = 0
    for card in hand:
        points = card_points(card, system)
        total += points
        lines.append(ScoreLine(card=card, points=points, running_total=total))
    return lines
