"""Alphabet registry: the built-in rotation domains.

Each alphabet is an ordered string of distinct characters.  Order
defines the rotation direction and the wrap point.  The registry is
built once at import time and exposed through a read-only mapping, so
it can be shared freely between threads.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

LATIN_LOWER: str = "abcdefghijklmnopqrstuvwxyz"
LATIN_UPPER: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS: str = "0123456789"

PRINTABLE_FIRST: int = 33
"""Code point of ``!``, the first character of the printable range."""

PRINTABLE_LAST: int = 126
"""Code point of ``~``, the last character of the printable range."""


def _printable_range(first: int, last: int) -> str:
    """Build the contiguous code-point range ``first..last`` inclusive."""
    return "".join(chr(code) for code in range(first, last + 1))


ASCII_PRINTABLE: str = _printable_range(PRINTABLE_FIRST, PRINTABLE_LAST)

CHARSETS: Mapping[str, str] = MappingProxyType(
    {
        "latinLower": LATIN_LOWER,
        "latinUpper": LATIN_UPPER,
        "digits": DIGITS,
        "asciiPrintable": ASCII_PRINTABLE,
    }
)
"""Read-only registry of the built-in alphabets, keyed by name."""
