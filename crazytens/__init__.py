"""
Crazy Tens - A two-player discard card game in any numeral system.

Card ranks, target scores and the arithmetic challenge are parameterized
by a positional numeral system (decimal, dozenal, ...). The package
provides:
- A base-N number codec
- The numeral-system registry
- A pure game engine (rounds, scoring, action dispatch, undo)
- An in-memory session manager and wire schemas for hosts
"""

__version__ = "0.1.0"
