"""Domain models for rotkit.

All models are **frozen** dataclasses or string enums: immutable value
objects with no behaviour beyond data access and parsing.  Nothing here
outlives a single rotation call.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Charset selectors
# ---------------------------------------------------------------------------

class Charset(str, Enum):
    """Named charset selectors understood by the rotation engine.

    Any other string is treated as a literal custom alphabet.
    """

    LATIN = "latin"
    ASCII = "ascii"
    LATIN_LOWER = "latinLower"
    LATIN_UPPER = "latinUpper"
    DIGITS = "digits"
    ASCII_PRINTABLE = "asciiPrintable"


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------

class Preset(str, Enum):
    """Named presets with a fixed shift/charset combination."""

    ROT13 = "rot13"
    ROT5 = "rot5"
    ROT18 = "rot18"
    ROT47 = "rot47"


_ROT_N = re.compile(r"rot([0-9]+)")


def parse_preset(value: object) -> Preset | int | None:
    """Parse a preset identifier, case-insensitively.

    Returns the matching :class:`Preset`, the integer ``N`` for a
    generic ``rotN`` identifier, or ``None`` when *value* is empty or
    not recognised.
    """
    if not value:
        return None
    name = str(value.value if isinstance(value, Enum) else value).lower()
    try:
        return Preset(name)
    except ValueError:
        pass
    match = _ROT_N.fullmatch(name)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Beyond the interpreter's integer string conversion limit.
        return None


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

DEFAULT_SHIFT: int = 13
DEFAULT_CHARSET: str = Charset.LATIN.value


@dataclass(frozen=True, slots=True)
class RotateConfig:
    """Configuration form of a rotation call.

    Each field is read independently; ``None`` falls back to the
    default, mirroring a missing key in a plain mapping.
    """

    shift: object = DEFAULT_SHIFT
    """Rotation offset.  Any value; normalized by the engine."""

    charset: object = DEFAULT_CHARSET
    """Charset selector: a :class:`Charset` name or a custom alphabet."""

    preset: str | None = None
    """Optional preset identifier (``rot13``, ``rot47``, ``rot7`` ...)."""


# ---------------------------------------------------------------------------
# Resolved request
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RotationRequest:
    """The fully resolved input of one rotation call."""

    text: str
    """Stringified input text."""

    shift: int
    """Integer shift after coercion, before reduction by the alphabet length."""

    charset: object
    """Resolved charset selector (usually a string)."""

    dual: bool = False
    """``True`` when the ROT18 dual-alphabet transform applies."""
