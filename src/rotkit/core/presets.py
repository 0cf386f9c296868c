"""Preset table: one-argument shortcuts over the rotation engine."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from rotkit.core.engine import rotate
from rotkit.core.models import Preset, RotateConfig


def rot13(text: object) -> str:
    """ROT13 on Latin letters, case preserved."""
    return rotate(text, RotateConfig(preset=Preset.ROT13.value))


def rot5(text: object) -> str:
    """ROT5 on decimal digits."""
    return rotate(text, RotateConfig(preset=Preset.ROT5.value))


def rot18(text: object) -> str:
    """ROT13 on letters combined with ROT5 on digits."""
    return rotate(text, RotateConfig(preset=Preset.ROT18.value))


def rot47(text: object) -> str:
    """ROT47 over the printable ASCII range ``!`` to ``~``."""
    return rotate(text, RotateConfig(preset=Preset.ROT47.value))


PRESET_FUNCTIONS: Mapping[str, Callable[[object], str]] = MappingProxyType(
    {
        Preset.ROT13.value: rot13,
        Preset.ROT5.value: rot5,
        Preset.ROT18.value: rot18,
        Preset.ROT47.value: rot47,
    }
)
"""Read-only mapping of preset name to its rotation function."""

PRESET_DESCRIPTIONS: Mapping[str, str] = MappingProxyType(
    {
        Preset.ROT13.value: "Latin letters shifted by 13",
        Preset.ROT5.value: "Digits shifted by 5",
        Preset.ROT18.value: "ROT13 on letters + ROT5 on digits",
        Preset.ROT47.value: "Printable ASCII (! to ~) shifted by 47",
    }
)
"""One-line human descriptions, used by the CLI listings."""
