"""Infrastructure layer: interaction with files, streams and the environment.

Every raw ``OSError`` must be caught here and re-raised as a
:class:`~rotkit.exceptions.RotkitError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from rotkit.infra.dependency_probe import (
    DependencyStatus,
    detect_dependency,
    detect_optional_dependencies,
)
from rotkit.infra.text_io import read_text, write_text

__all__: list[str] = [
    "DependencyStatus",
    "detect_dependency",
    "detect_optional_dependencies",
    "read_text",
    "write_text",
]
