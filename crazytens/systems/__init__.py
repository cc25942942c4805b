"""
Systems - Numeral systems the game can be played in.

Each system fixes the deck (numeric ranks and face ranks), the two
wildcard ranks, and the rule constants written in that base.
"""

from .system import NumeralSystem, SUIT_COUNT
from .builtin import DECIMAL_SYSTEM, DOZENAL_SYSTEM, create_decimal_system, create_dozenal_system
from .registry import SYSTEMS, get_system, available_systems

__all__ = [
    "NumeralSystem",
    "SUIT_COUNT",
    "DECIMAL_SYSTEM",
    "DOZENAL_SYSTEM",
    "create_decimal_system",
    "create_dozenal_system",
    "SYSTEMS",
    "get_system",
    "available_systems",
]
