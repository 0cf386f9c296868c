"""Infrastructure: detection of the optional UI packages.

``rich`` and ``questionary`` are only needed by the interactive and
table-rendering CLI paths.  This module reports whether they can be
imported, and with which version, without importing them.

Rules
-----
* Detection via :func:`importlib.util.find_spec` and
  :mod:`importlib.metadata` only.
* No automatic installation.
* No ``print()``; callers handle user-facing output.
"""

from __future__ import annotations

import importlib.util
import sys
from dataclasses import dataclass
from importlib import metadata

OPTIONAL_PACKAGES: tuple[str, ...] = ("rich", "questionary")


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DependencyStatus:
    """Result of probing one optional package.

    Attributes
    ----------
    name : str
        Import (and distribution) name of the package.
    found : bool
        Whether the package can be imported.
    version : str | None
        Installed distribution version, or ``None`` if unknown.
    install_command : str
        Suggested command for installing the package.
    """

    name: str
    found: bool
    version: str | None
    install_command: str


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def _is_importable(name: str) -> bool:
    # A ``None`` entry in sys.modules blocks the import outright.
    if name in sys.modules:
        return sys.modules[name] is not None
    try:
        return importlib.util.find_spec(name) is not None
    except (ImportError, ValueError):
        return False


def detect_dependency(name: str) -> DependencyStatus:
    """Probe for *name* and return a :class:`DependencyStatus`.

    Always returns a status; the caller decides whether to abort or
    merely warn.
    """
    found = _is_importable(name)
    version: str | None = None
    if found:
        try:
            version = metadata.version(name)
        except metadata.PackageNotFoundError:
            version = None
    return DependencyStatus(
        name=name,
        found=found,
        version=version,
        install_command=f"pip install {name}",
    )


def detect_optional_dependencies() -> tuple[DependencyStatus, ...]:
    """Probe every package in :data:`OPTIONAL_PACKAGES`."""
    return tuple(detect_dependency(name) for name in OPTIONAL_PACKAGES)
