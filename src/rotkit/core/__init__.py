"""Core layer: the pure rotation engine.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* Nothing here raises on bad input; every case has a defined fallback.
"""

from rotkit.core.alphabets import CHARSETS
from rotkit.core.engine import (
    all_rotations,
    create_rot_function,
    decode,
    encode,
    rotate,
)
from rotkit.core.models import Charset, Preset, RotateConfig, RotationRequest
from rotkit.core.presets import PRESET_FUNCTIONS, rot5, rot13, rot18, rot47
from rotkit.core.rotator import rot18_transform, rotate_char
from rotkit.core.shift import normalize_shift

__all__: list[str] = [
    "CHARSETS",
    "PRESET_FUNCTIONS",
    "Charset",
    "Preset",
    "RotateConfig",
    "RotationRequest",
    "all_rotations",
    "create_rot_function",
    "decode",
    "encode",
    "normalize_shift",
    "rot13",
    "rot18",
    "rot18_transform",
    "rot47",
    "rot5",
    "rotate",
    "rotate_char",
]
