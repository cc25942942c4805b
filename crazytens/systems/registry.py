"""
System Registry - Lookup of the supported numeral systems by id.

The table is fixed at import time; systems are immutable and shared by
reference across sessions.
"""

from __future__ import annotations
from types import MappingProxyType

from ..errors import UnknownSystem
from .builtin import DECIMAL_SYSTEM, DOZENAL_SYSTEM
from .system import NumeralSystem

SYSTEMS = MappingProxyType({
    system.id: system
    for system in (DECIMAL_SYSTEM, DOZENAL_SYSTEM)
})


def get_system(base_id: str) -> NumeralSystem:
    """Look up a system by id."""
    try:
        return SYSTEMS[base_id]
    except KeyError:
        raise UnknownSystem(f"Unknown numeral system: {base_id!r}") from None


def available_systems() -> list[str]:
    return sorted(SYSTEMS)
