"""
Codec - Conversion between digit strings and integers in any base.

Conversions run on Python ints, so they never overflow. The narrowing
helpers (to_safe_int / from_number) exist for callers that exchange values
as floats, e.g. JSON numbers, and refuse anything that would lose precision.

Round-trip law: from_integer(to_integer(s), spec) == normalize(s, spec)
for every valid s.
"""

from __future__ import annotations
import math

from ..errors import InvalidNumberFormat
from .base_spec import BaseSpec, validate_base_spec

# Largest integer a float (IEEE-754 double) represents exactly, with all
# smaller integers also representable.
MAX_SAFE_INTEGER = 2**53 - 1


def normalize(text: str, spec: BaseSpec) -> str:
    """
    Canonicalize a number string.

    Returns the signed canonical digit string, e.g. "+0↊" -> "↊" in dozenal.
    Raises InvalidNumberFormat on anything that isn't a number in this base.
    """
    validate_base_spec(spec)

    if not isinstance(text, str):
        raise InvalidNumberFormat("Input must be a string")

    s = text.strip()
    if not s:
        raise InvalidNumberFormat("Empty string")
    if any(ch.isspace() for ch in s):
        raise InvalidNumberFormat("Whitespace is not allowed inside the number")

    sign = ""
    if s[0] in "+-":
        if s[0] == "+" and not spec.allow_plus_sign:
            raise InvalidNumberFormat("Leading '+' is not allowed")
        sign = "-" if s[0] == "-" else ""
        s = s[1:]
        if not s:
            raise InvalidNumberFormat("Missing digits after sign")

    canonical = set(spec.digits)
    out: list[str] = []
    for ch in s:
        if ch in canonical:
            out.append(ch)
            continue
        mapped = _lookup_alias(ch, spec)
        if mapped is None or mapped not in canonical:
            raise InvalidNumberFormat(f'Invalid digit symbol: "{ch}"')
        out.append(mapped)

    if spec.strip_leading_zeros:
        while len(out) > 1 and out[0] == spec.zero:
            out.pop(0)

    body = "".join(out)
    if all(d == spec.zero for d in out):
        # "-0" has no distinct value; keep the zero unsigned
        sign = ""
    return sign + body


def _lookup_alias(ch: str, spec: BaseSpec) -> str | None:
    for candidate in (ch, ch.upper(), ch.lower()):
        if candidate in spec.aliases:
            return spec.aliases[candidate]
    return None


def is_valid(text: str, spec: BaseSpec) -> bool:
    """Check validity without raising."""
    try:
        normalize(text, spec)
    except InvalidNumberFormat:
        return False
    return True


def to_integer(text: str, spec: BaseSpec) -> int:
    """Parse text in the given base."""
    norm = normalize(text, spec)
    negative = norm.startswith("-")
    if negative:
        norm = norm[1:]

    acc = 0
    for ch in norm:
        acc = acc * spec.radix + spec.value_of(ch)
    return -acc if negative else acc


def from_integer(n: int, spec: BaseSpec) -> str:
    """Format an integer in the given base."""
    validate_base_spec(spec)
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidNumberFormat(f"Expected an integer, got {type(n).__name__}")

    if n == 0:
        return spec.zero

    sign = "-" if n < 0 else ""
    x = abs(n)
    parts: list[str] = []
    while x > 0:
        x, r = divmod(x, spec.radix)
        parts.append(spec.digits[r])
    parts.reverse()
    return sign + "".join(parts)


def to_safe_int(text: str, spec: BaseSpec) -> int:
    """Parse text, refusing values a float can't hold exactly."""
    value = to_integer(text, spec)
    if abs(value) > MAX_SAFE_INTEGER:
        raise InvalidNumberFormat("Value exceeds the exactly representable range")
    return value


def from_number(value: int | float, spec: BaseSpec) -> str:
    """Format an int or integral float, refusing lossy inputs."""
    if isinstance(value, bool):
        raise InvalidNumberFormat("Input must be a finite integer")
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise InvalidNumberFormat("Input must be a finite integer")
        if abs(value) > MAX_SAFE_INTEGER:
            raise InvalidNumberFormat("Input exceeds the exactly representable range")
        value = int(value)
    elif not isinstance(value, int):
        raise InvalidNumberFormat(f"Expected a number, got {type(value).__name__}")
    elif abs(value) > MAX_SAFE_INTEGER:
        raise InvalidNumberFormat("Input exceeds the exactly representable range")
    return from_integer(value, spec)
