"""
Numeral System - A base paired with the card-game constants.

Rule constants (target sum, target score) are written in the system's own
numerals and parsed on demand; scores are always compared and accumulated
in decimal.
"""

from __future__ import annotations
from dataclasses import dataclass

from ..errors import InvalidNumberFormat
from ..numerals import BaseSpec, validate_base_spec, to_integer, from_integer

SUIT_COUNT = 4


@dataclass(frozen=True)
class NumeralSystem:
    """
    A base plus the deck and rule constants that depend on it.

    Validated on construction:
    - numeric deck symbols and face ranks are disjoint
    - every numeric symbol is a number in the base
    - both wildcards are numeric deck symbols
    """
    id: str
    name: str
    spec: BaseSpec

    deck_numeric_symbols: tuple[str, ...]
    face_ranks: tuple[str, ...]

    wildcard_ten_symbol: str
    wildcard_skip_symbol: str

    # Rule constants expressed in this base
    target_sum_text: str
    target_score_text: str

    # Decimal points for any face card
    face_points: int = 10

    def __post_init__(self):
        validate_base_spec(self.spec)

        if len(set(self.deck_numeric_symbols)) != len(self.deck_numeric_symbols):
            raise ValueError(f"{self.id}: duplicate numeric deck symbol")
        if len(set(self.face_ranks)) != len(self.face_ranks):
            raise ValueError(f"{self.id}: duplicate face rank")
        overlap = set(self.deck_numeric_symbols) & set(self.face_ranks)
        if overlap:
            raise ValueError(f"{self.id}: symbols are both numeric and face: {sorted(overlap)}")

        for symbol in self.deck_numeric_symbols:
            try:
                to_integer(symbol, self.spec)
            except InvalidNumberFormat as e:
                raise ValueError(f"{self.id}: numeric symbol {symbol!r} is not a number: {e}") from e

        for name, symbol in (
            ("wildcard_ten_symbol", self.wildcard_ten_symbol),
            ("wildcard_skip_symbol", self.wildcard_skip_symbol),
        ):
            if symbol not in self.deck_numeric_symbols:
                raise ValueError(f"{self.id}: {name} {symbol!r} is not a numeric deck symbol")

        # Fail early on malformed rule constants
        to_integer(self.target_sum_text, self.spec)
        to_integer(self.target_score_text, self.spec)

    # Numbers

    def parse(self, text: str) -> int:
        """Parse a number written in this system."""
        return to_integer(text, self.spec)

    def format(self, value: int) -> str:
        """Write a decimal value in this system's numerals."""
        return from_integer(value, self.spec)

    @property
    def target_sum(self) -> int:
        return self.parse(self.target_sum_text)

    @property
    def target_score(self) -> int:
        return self.parse(self.target_score_text)

    # Ranks

    @property
    def rank_symbols(self) -> tuple[str, ...]:
        return self.deck_numeric_symbols + self.face_ranks

    @property
    def full_deck_size(self) -> int:
        return SUIT_COUNT * len(self.rank_symbols)

    def is_face(self, rank: str) -> bool:
        return rank in self.face_ranks

    def is_wildcard(self, rank: str) -> bool:
        return rank in (self.wildcard_ten_symbol, self.wildcard_skip_symbol)

    def numeric_value(self, rank: str) -> int:
        """Decimal value of a numeric rank."""
        if self.is_face(rank):
            raise ValueError(f"Face rank {rank!r} has no numeric value")
        return self.parse(rank)


