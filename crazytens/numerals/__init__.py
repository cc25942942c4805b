"""
Numerals - Positional numeral systems of any radix.

A BaseSpec describes the digit alphabet; the codec converts between
canonical digit strings and Python integers (arbitrary precision).
"""

from .base_spec import BaseSpec, validate_base_spec, DECIMAL_SPEC, DOZENAL_SPEC
from .codec import (
    MAX_SAFE_INTEGER,
    normalize,
    is_valid,
    to_integer,
    from_integer,
    to_safe_int,
    from_number,
)

__all__ = [
    "BaseSpec",
    "validate_base_spec",
    "DECIMAL_SPEC",
    "DOZENAL_SPEC",
    "MAX_SAFE_INTEGER",
    "normalize",
    "is_valid",
    "to_integer",
    "from_integer",
    "to_safe_int",
    "from_number",
]
