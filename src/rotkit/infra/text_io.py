"""Infrastructure: reading input text and writing rotated output.

The rotation core only ever sees strings.  This module is the single
place where text is pulled from a file or a stream and pushed back out.

Rules
-----
* Every raw ``OSError`` / ``UnicodeError`` is re-raised as a typed
  :class:`~rotkit.exceptions.RotkitError` subclass.
* No Rich rendering. Output streams are plain text sinks.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from rotkit.exceptions import InputReadError, OutputWriteError


def read_text(
    text: str | None = None,
    *,
    path: Path | None = None,
    stream: TextIO | None = None,
    encoding: str = "utf-8",
) -> str:
    """Return the input text from the first available source.

    Precedence: explicit *text*, then *path*, then *stream* (defaults to
    :data:`sys.stdin`).

    Raises
    ------
    InputReadError
        When *path* cannot be read or decoded, or the stream fails.
    """
    if text is not None:
        return text

    if path is not None:
        try:
            return path.read_text(encoding=encoding)
        except FileNotFoundError as exc:
            raise InputReadError(
                f"Input file not found: {path}",
                hint="Check the path passed to --file.",
            ) from exc
        except UnicodeDecodeError as exc:
            raise InputReadError(
                f"Input file is not valid {encoding}: {path}",
            ) from exc
        except OSError as exc:
            raise InputReadError(f"Cannot read input file {path}: {exc}") from exc

    source = stream if stream is not None else sys.stdin
    try:
        return source.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(f"Cannot read from standard input: {exc}") from exc


def write_text(
    text: str,
    *,
    path: Path | None = None,
    stream: TextIO | None = None,
    encoding: str = "utf-8",
) -> None:
    """Write *text* to *path*, or to *stream* (defaults to stdout).

    Raises
    ------
    OutputWriteError
        When the destination cannot be written.
    """
    if path is not None:
        try:
            path.write_text(text, encoding=encoding)
        except OSError as exc:
            raise OutputWriteError(
                f"Cannot write output file {path}: {exc}",
                hint="Check that the directory exists and is writable.",
            ) from exc
        return

    sink = stream if stream is not None else sys.stdout
    try:
        sink.write(text)
        sink.flush()
    except OSError as exc:
        raise OutputWriteError(f"Cannot write to standard output: {exc}") from exc
