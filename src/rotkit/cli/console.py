"""Stderr console for rotkit messages, Rich when present.

Rotated text never passes through here; it is data and goes to stdout.
Everything the user reads about the run (tables, errors, hints) does.

Rich is imported on each call rather than at module level, so
``--help``, ``--version`` and plain encode/decode keep working when it
is not installed.  Anything that may contain user input (paths,
exception messages) must go through :func:`escape_markup` before being
embedded in a markup string.
"""

from __future__ import annotations

import sys
from typing import Any

from rotkit.exceptions import EnvironmentError, append_install_suggestion


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed.",
            hint=append_install_suggestion("Install it with:", "rich"),
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def escape_markup(text: object) -> str:
    """Neutralise Rich markup in *text*.

    ``notes[/draft].txt`` would otherwise be parsed as a closing tag.
    Without Rich nothing interprets brackets, so *text* is returned as
    a plain string.
    """
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return str(text)
    return escape(str(text))


class _ConsoleProxy:
    """``print``-compatible stderr writer with a plain fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)

    def error(self, message: object, hint: str | None = None) -> None:
        """Print an ``Error:`` line and an optional ``Hint:`` line.

        Both parts are escaped, so they are shown literally.
        """
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(f"Error: {message}", file=sys.stderr)
            if hint:
                print(f"Hint: {hint}", file=sys.stderr)
            return
        rich_console.print(f"[bold red]Error:[/bold red] {escape_markup(message)}")
        if hint:
            rich_console.print(f"[yellow]Hint:[/yellow] {escape_markup(hint)}")


console = _ConsoleProxy()
