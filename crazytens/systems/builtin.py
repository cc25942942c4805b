"""
Built-in Systems - Decimal and dozenal Crazy Tens.

Both decks use "10" as the wildcard-ten and "6" as the wildcard-skip.
In dozenal, "10" is worth twelve and the ranks ↊ (ten) and ↋ (eleven)
are ordinary numeric cards.

| id  | numeric ranks    | faces   | target sum    | target score  |
|-----|------------------|---------|---------------|---------------|
| dec | 1-9, 10          | J Q K   | "10" (10 dec) | "50" (50 dec) |
| doz | 1-9, 10, ↊, ↋    | J Q K C | "10" (12 dec) | "50" (60 dec) |
"""

from __future__ import annotations

from ..numerals import DECIMAL_SPEC, DOZENAL_SPEC
from .system import NumeralSystem


def create_decimal_system() -> NumeralSystem:
    return NumeralSystem(
        id="dec",
        name="Decimal",
        spec=DECIMAL_SPEC,
        deck_numeric_symbols=("1", "2", "3", "4", "5", "6", "7", "8", "9", "10"),
        face_ranks=("J", "Q", "K"),
        wildcard_ten_symbol="10",
        wildcard_skip_symbol="6",
        target_sum_text="10",
        target_score_text="50",
        face_points=10,
    )


def create_dozenal_system() -> NumeralSystem:
    return NumeralSystem(
        id="doz",
        name="Dozenal",
        spec=DOZENAL_SPEC,
        deck_numeric_symbols=("1", "2", "3", "4", "5", "6", "7", "8", "9", "10", "↊", "↋"),
        face_ranks=("J", "Q", "K", "C"),
        wildcard_ten_symbol="10",
        wildcard_skip_symbol="6",
        target_sum_text="10",
        target_score_text="50",
        face_points=10,
    )


DECIMAL_SYSTEM = create_decimal_system()
DOZENAL_SYSTEM = create_dozenal_system()
