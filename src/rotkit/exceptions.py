"""Custom exception hierarchy for rotkit.

The rotation core never raises: every odd input degrades to a defined
fallback.  The exceptions below exist for the layers that touch the
outside world (file and stream I/O, optional UI packages, interactive
prompts).  Raw ``OSError`` and import failures must be caught at those
boundaries and re-raised as a typed subclass defined here.

Hierarchy
---------
RotkitError
├── InputReadError
├── OutputWriteError
├── PresetSelectionError
└── EnvironmentError
"""

from __future__ import annotations


class RotkitError(Exception):
    """Base exception for all rotkit errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Text I/O ----------------------------------------------------------------

class InputReadError(RotkitError):
    """Raised when the input text cannot be read from a file or stream."""


class OutputWriteError(RotkitError):
    """Raised when the rotated text cannot be written to its destination."""


# --- Interactive selection ---------------------------------------------------

class PresetSelectionError(RotkitError):
    """Raised when the interactive preset picker returns no choice."""


# --- Environment / tooling ---------------------------------------------------

class EnvironmentError(RotkitError):
    """Raised when an optional runtime dependency is not available."""


def append_install_suggestion(hint: str, package: str) -> str:
    """Append ``pip install`` guidance for *package* to an existing hint.

    The suggestion is appended only once and preserves the original
    hint content verbatim.
    """
    marker = f"pip install {package}"
    if marker in hint:
        return hint
    return "\n".join((hint, f"    {marker}"))
