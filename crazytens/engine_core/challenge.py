"""
Arithmetic Challenge - The side-question raised by a wildcard-ten.

The operator is fixed by the suit of the wildcard-ten that was played:

    S -> addition       a, b in 1..20
    C -> subtraction    a in 1..20, b in 1..a (never negative)
    H -> multiplication a, b in 1..10
    D -> division       a = q * d with q, d in 1..10 (always exact)

Operands and the answer are decimal. The challenge blocks the table: only
its addressee may act, by answering, and a correct answer hands the turn to
resume_turn.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import random

from ..errors import InvalidNumberFormat
from ..systems import NumeralSystem
from .state import Suit


class Operator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    def apply(self, left: int, right: int) -> int:
        if self is Operator.ADD:
            return left + right
        if self is Operator.SUBTRACT:
            return left - right
        if self is Operator.MULTIPLY:
            return left * right
        quotient, remainder = divmod(left, right)
        if remainder:
            raise ValueError(f"{left} / {right} is not exact")
        return quotient


OPERATOR_BY_SUIT = {
    Suit.SPADES: Operator.ADD,
    Suit.CLUBS: Operator.SUBTRACT,
    Suit.HEARTS: Operator.MULTIPLY,
    Suit.DIAMONDS: Operator.DIVIDE,
}


@dataclass(frozen=True)
class PendingChallenge:
    """
    A question waiting for an answer.

    player_id is the addressee (who played the wildcard-ten);
    resume_turn is who moves once it is answered.
    """
    suit: Suit
    operator: Operator
    left: int
    right: int
    answer: int
    player_id: str
    resume_turn: str

    def question(self, system: NumeralSystem) -> str:
        """The question as players see it, in the session's numerals."""
        return f"{system.format(self.left)} {self.operator.value} {system.format(self.right)}"


def operator_for_suit(suit: Suit) -> Operator:
    return OPERATOR_BY_SUIT[suit]


def generate_challenge(
    suit: Suit,
    player_id: str,
    resume_turn: str,
    rng: random.Random | None = None,
) -> PendingChallenge:
    """Build a challenge whose operands satisfy the operator's domain."""
    rng = rng or random.Random()
    operator = operator_for_suit(suit)

    if operator is Operator.ADD:
        left, right = rng.randint(1, 20), rng.randint(1, 20)
    elif operator is Operator.SUBTRACT:
        left = rng.randint(1, 20)
        right = rng.randint(1, left)
    elif operator is Operator.MULTIPLY:
        left, right = rng.randint(1, 10), rng.randint(1, 10)
    else:
        quotient, divisor = rng.randint(1, 10), rng.randint(1, 10)
        left, right = quotient * divisor, divisor

    return PendingChallenge(
        suit=suit,
        operator=operator,
        left=left,
        right=right,
        answer=operator.apply(left, right),
        player_id=player_id,
        resume_turn=resume_turn,
    )


def check_answer(
    challenge: PendingChallenge,
    answer: int | str,
    system: NumeralSystem,
) -> bool:
    """
    Compare an answer with the expected decimal result.

    Ints are taken as decimal; text is read in the session's numerals,
    so "10" answers twelve in a dozenal game.
    """
    if isinstance(answer, bool):
        raise InvalidNumberFormat("Answer must be a number")
    if isinstance(answer, str):
        value = system.parse(answer)
    elif isinstance(answer, int):
        value = answer
    else:
        raise InvalidNumberFormat(f"Answer must be an int or text, got {type(answer).__name__}")
    return value == challenge.answer
