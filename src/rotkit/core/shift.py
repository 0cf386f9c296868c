"""Shift normalization.

Reduces an arbitrary shift value (negative, fractional, textual, or
outright garbage) to a canonical offset in ``[0, modulus)``.
"""

from __future__ import annotations

import math
import re

_RADIX_LITERAL = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_RADIX_BASES = {"x": 16, "o": 8, "b": 2}


def _parse_shift_text(text: str) -> int | float:
    """Parse textual shifts: decimal, exponent, or ``0x``/``0o``/``0b``.

    Surrounding whitespace is ignored and blank text counts as ``0``.
    Radix literals give an exact ``int``.  Underscore digit separators
    and signed radix literals are rejected with NaN.
    """
    stripped = text.strip()
    if not stripped:
        return 0.0
    if _RADIX_LITERAL.fullmatch(stripped):
        return int(stripped[2:], _RADIX_BASES[stripped[1].lower()])
    if "_" in stripped:
        return math.nan
    try:
        return float(stripped)
    except ValueError:
        return math.nan


def coerce_shift(shift: object) -> int:
    """Coerce *shift* to an integer, truncating toward zero.

    Integers pass through untouched (so arbitrarily large values keep
    their exact residue).  Strings are parsed by :func:`_parse_shift_text`;
    everything else goes through :func:`float`.  Values that cannot be
    converted, or that convert to NaN or an infinity, become ``0``.
    """
    if isinstance(shift, int) and not isinstance(shift, bool):
        return shift
    if shift is None:
        return 0
    if isinstance(shift, str):
        parsed = _parse_shift_text(shift)
        if isinstance(parsed, int):
            return parsed
        number = parsed
    else:
        try:
            number = float(shift)  # type: ignore[arg-type]
        except (TypeError, ValueError, OverflowError):
            return 0
    if not math.isfinite(number):
        return 0
    return math.trunc(number)


def normalize_shift(shift: object, modulus: int) -> int:
    """Return *shift* reduced into ``[0, modulus)``.

    Never raises.  A *modulus* below 1 only arises from an empty custom
    alphabet, where no rotation is possible; ``0`` is returned.
    """
    if modulus < 1:
        return 0
    # Python's % is already floored for a positive modulus.
    return coerce_shift(shift) % modulus
