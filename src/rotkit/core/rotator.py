"""Per-character rotation primitives.

Every function here is a total, pure transformation: a character is
either rotated within the given alphabet or returned unchanged.

Alphabets with duplicate characters are not bijective.  The first
occurrence of a character defines its position, so rotating and then
rotating back may land on a different occurrence.
"""

from __future__ import annotations

from rotkit.core.alphabets import DIGITS, LATIN_LOWER, LATIN_UPPER
from rotkit.core.shift import normalize_shift

ROT18_LETTER_SHIFT: int = 13
ROT18_DIGIT_SHIFT: int = 5


def rotate_char(ch: str, shift: object, alphabet: str) -> str:
    """Rotate a single character *ch* within *alphabet* by *shift*.

    Characters absent from *alphabet* pass through unchanged.
    """
    if len(ch) != 1:
        return ch
    index = alphabet.find(ch)
    if index == -1:
        return ch
    length = len(alphabet)
    return alphabet[(index + normalize_shift(shift, length)) % length]


def rotate_within(text: str, shift: int, alphabet: str) -> str:
    """Rotate every character of *text* against one *alphabet*."""
    return "".join(rotate_char(ch, shift, alphabet) for ch in text)


def rotate_latin(text: str, shift: int) -> str:
    """Rotate Latin letters case by case; everything else passes through."""
    out: list[str] = []
    for ch in text:
        if "A" <= ch <= "Z":
            out.append(rotate_char(ch, shift, LATIN_UPPER))
        elif "a" <= ch <= "z":
            out.append(rotate_char(ch, shift, LATIN_LOWER))
        else:
            out.append(ch)
    return "".join(out)


def rot18_transform(text: str) -> str:
    """Apply ROT13 to Latin letters and ROT5 to digits in a single pass.

    The transform is its own inverse.
    """
    out: list[str] = []
    for ch in text:
        if "A" <= ch <= "Z":
            out.append(rotate_char(ch, ROT18_LETTER_SHIFT, LATIN_UPPER))
        elif "a" <= ch <= "z":
            out.append(rotate_char(ch, ROT18_LETTER_SHIFT, LATIN_LOWER))
        elif "0" <= ch <= "9":
            out.append(rotate_char(ch, ROT18_DIGIT_SHIFT, DIGITS))
        else:
            out.append(ch)
    return "".join(out)
