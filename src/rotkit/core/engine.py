"""Rotation engine: request resolution, charset dispatch, encode/decode.

This is the central module consumed by the preset table and the CLI
layer.  It turns the loosely typed public arguments into a single
:class:`~rotkit.core.models.RotationRequest` and then rotates the text
against the resolved alphabet.

Guarantees
----------
* Pure: no I/O, no ``print()``, no shared mutable state.
* Never raises.  Odd inputs degrade to defined fallbacks:

  - ``None`` text gives ``""``;
  - a non-numeric or non-finite shift counts as ``0``;
  - an unknown preset is ignored;
  - an unknown charset name is used as a literal custom alphabet;
  - a non-string charset leaves the text unchanged.
"""

from __future__ import annotations

import dataclasses
import logging
import numbers
from collections.abc import Callable, Mapping
from enum import Enum

from rotkit.core.alphabets import ASCII_PRINTABLE, CHARSETS, LATIN_LOWER
from rotkit.core.models import (
    DEFAULT_CHARSET,
    DEFAULT_SHIFT,
    Charset,
    Preset,
    RotateConfig,
    RotationRequest,
    parse_preset,
)
from rotkit.core.rotator import rot18_transform, rotate_latin, rotate_within
from rotkit.core.shift import coerce_shift, normalize_shift

logger = logging.getLogger(__name__)

ShiftOrConfig = int | float | RotateConfig | Mapping[str, object] | None
"""A number, a :class:`RotateConfig`, or a mapping with the same keys."""


# ---------------------------------------------------------------------------
# Argument resolution
# ---------------------------------------------------------------------------

def stringify(text: object) -> str:
    """Convert *text* to ``str`` once, at the entry boundary."""
    if text is None:
        return ""
    if isinstance(text, str):
        return text
    return str(text)


def _is_config(value: object) -> bool:
    return isinstance(value, (RotateConfig, Mapping))


def _read_config(config: RotateConfig | Mapping[str, object]) -> tuple[object, object, object]:
    """Return ``(shift, charset, preset)`` with per-field defaults."""
    if isinstance(config, RotateConfig):
        shift, charset, preset = config.shift, config.charset, config.preset
    else:
        shift = config.get("shift")
        charset = config.get("charset")
        preset = config.get("preset")
    return (
        DEFAULT_SHIFT if shift is None else shift,
        DEFAULT_CHARSET if charset is None else charset,
        preset,
    )


def _resolve_request(
    text: object,
    shift_or_config: ShiftOrConfig,
    charset: object,
) -> RotationRequest:
    """Collapse the public arguments into one :class:`RotationRequest`."""
    preset: object = None
    if _is_config(shift_or_config):
        shift, resolved_charset, preset = _read_config(shift_or_config)  # type: ignore[arg-type]
    else:
        shift = DEFAULT_SHIFT if shift_or_config is None else shift_or_config
        resolved_charset = charset or DEFAULT_CHARSET

    parsed = parse_preset(preset)
    if parsed is Preset.ROT18:
        return RotationRequest(text=stringify(text), shift=0, charset=None, dual=True)
    if parsed is Preset.ROT13:
        shift, resolved_charset = 13, Charset.LATIN
    elif parsed is Preset.ROT5:
        shift, resolved_charset = 5, Charset.DIGITS
    elif parsed is Preset.ROT47:
        shift, resolved_charset = 47, Charset.ASCII
    elif isinstance(parsed, int):
        shift = parsed
    elif preset:
        logger.debug("Ignoring unrecognised preset %r", preset)

    if isinstance(resolved_charset, Enum):
        resolved_charset = resolved_charset.value

    return RotationRequest(
        text=stringify(text),
        shift=coerce_shift(shift),
        charset=resolved_charset,
    )


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def _alphabet_for(charset: object) -> str | None:
    """Return the single alphabet a charset selector rotates within.

    ``latin`` has no single alphabet (two are used, one per case) and is
    handled by the caller.  Non-string selectors give ``None``.
    """
    if not isinstance(charset, str):
        return None
    if charset == Charset.ASCII.value:
        return ASCII_PRINTABLE
    return CHARSETS.get(charset, charset)


def _apply(request: RotationRequest) -> str:
    text = request.text
    if request.dual:
        return rot18_transform(text)

    if request.charset == Charset.LATIN.value:
        shift = normalize_shift(request.shift, len(LATIN_LOWER))
        if shift == 0:
            return text
        return rotate_latin(text, shift)

    alphabet = _alphabet_for(request.charset)
    if alphabet is None:
        logger.debug(
            "Non-string charset %r; returning text unchanged", request.charset,
        )
        return text
    if not alphabet:
        logger.debug("Empty custom alphabet; returning text unchanged")
        return text

    shift = normalize_shift(request.shift, len(alphabet))
    if shift == 0:
        return text
    return rotate_within(text, shift, alphabet)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def rotate(
    text: object,
    shift_or_config: ShiftOrConfig = DEFAULT_SHIFT,
    charset: object = None,
) -> str:
    """Rotate every character of *text*.

    Parameters
    ----------
    text:
        Any value.  ``None`` yields ``""``; other values are converted
        with :func:`str`.
    shift_or_config:
        Either the shift itself (``None`` means the default of 13), or a
        :class:`RotateConfig` / mapping with ``shift``, ``charset`` and
        ``preset`` keys.
    charset:
        Charset selector used with a bare shift.  Defaults to ``latin``.
        Ignored in the configuration form.

    Returns
    -------
    str
        The rotated text, same length and ordering as the input.
    """
    return _apply(_resolve_request(text, shift_or_config, charset))


def encode(
    text: object,
    shift_or_config: ShiftOrConfig = DEFAULT_SHIFT,
    charset: object = None,
) -> str:
    """Encode *text*.  Encoding and rotating are the same operation."""
    return rotate(text, shift_or_config, charset)


def decode(
    text: object,
    shift_or_config: ShiftOrConfig = DEFAULT_SHIFT,
    charset: object = None,
) -> str:
    """Invert :func:`encode` for the same arguments.

    * Configuration form: ``rot18`` and ``rot47`` are self-inverse and
      are simply re-applied.  Otherwise the resolved shift (after any
      preset override) is negated, and the charset is kept.
    * Bare numeric shift: rotate by its negation.
    * Anything else: rotate by the negated default shift.
    """
    if _is_config(shift_or_config):
        parsed = parse_preset(_read_config(shift_or_config)[2])  # type: ignore[arg-type]
        if parsed is Preset.ROT18:
            return rot18_transform(stringify(text))
        if parsed is Preset.ROT47:
            return rotate(text, RotateConfig(preset=Preset.ROT47.value))
        request = _resolve_request(text, shift_or_config, None)
        return _apply(dataclasses.replace(request, shift=-request.shift))

    if isinstance(shift_or_config, numbers.Number) and not isinstance(shift_or_config, bool):
        return rotate(text, -shift_or_config, charset)  # type: ignore[operator]

    return rotate(text, -DEFAULT_SHIFT, charset)


def create_rot_function(
    shift: object = DEFAULT_SHIFT,
    charset: object = DEFAULT_CHARSET,
) -> Callable[[object], str]:
    """Return a reusable rotation function bound to *shift* and *charset*."""

    def rot(text: object) -> str:
        return rotate(text, shift, charset)

    return rot


def all_rotations(text: object, charset: object = DEFAULT_CHARSET) -> list[tuple[int, str]]:
    """Return ``(shift, rotated_text)`` for every shift of the charset.

    The number of candidates equals the length of the resolved alphabet
    (26 for ``latin``).  When no rotation is possible (empty or
    non-string charset) the only candidate is the unchanged text.
    """
    selector = charset or DEFAULT_CHARSET
    if isinstance(selector, Enum):
        selector = selector.value
    if selector == Charset.LATIN.value:
        length = len(LATIN_LOWER)
    else:
        alphabet = _alphabet_for(selector)
        length = len(alphabet) if alphabet else 0

    if length == 0:
        return [(0, stringify(text))]
    return [(shift, rotate(text, shift, selector)) for shift in range(length)]
