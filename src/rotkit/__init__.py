"""rotkit: character-rotation (ROT) text obfuscation.

ROT13, ROT5, ROT18, ROT47 and arbitrary ``rotN`` shifts over built-in or
custom alphabets, plus a small command-line front end.
"""

from rotkit.core import (
    CHARSETS,
    PRESET_FUNCTIONS,
    Charset,
    Preset,
    RotateConfig,
    all_rotations,
    create_rot_function,
    decode,
    encode,
    normalize_shift,
    rot18_transform,
    rotate,
    rotate_char,
)
from rotkit.core import presets
from rotkit.version import __version__

__all__: list[str] = [
    "CHARSETS",
    "PRESET_FUNCTIONS",
    "Charset",
    "Preset",
    "RotateConfig",
    "__version__",
    "all_rotations",
    "create_rot_function",
    "decode",
    "encode",
    "normalize_shift",
    "presets",
    "rot18_transform",
    "rotate",
    "rotate_char",
]
