"""Preset listing and interactive preset selection for the CLI layer.

This module is responsible for:

* Rendering Rich tables of the available presets and alphabets.
* Prompting the user to pick a preset via questionary arrow keys.
* Returning the selected preset name as a string.

All display-related logic lives here. The rotation itself is delegated
to the core preset table.
"""

from __future__ import annotations

import sys
from typing import Any

from rotkit.cli.console import console
from rotkit.core.alphabets import CHARSETS
from rotkit.core.presets import PRESET_DESCRIPTIONS, PRESET_FUNCTIONS
from rotkit.exceptions import EnvironmentError, append_install_suggestion

SAMPLE_TEXT: str = "Hello, World! 123"
"""Text shown rotated next to each preset as a preview."""


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed.",
            hint=append_install_suggestion("Install it with:", "questionary"),
        ) from exc
    return questionary


def _import_rich_table() -> type[Any] | None:
    """Import rich table lazily; ``None`` when Rich is unavailable."""
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        return None
    return Table


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms, no I/O themselves)
# ---------------------------------------------------------------------------

def _preview_alphabet(alphabet: str, width: int = 24) -> str:
    """Shorten long alphabets to ``first…last`` form."""
    if len(alphabet) <= width:
        return alphabet
    head = alphabet[: width - 4]
    return f"{head}…{alphabet[-3:]}"


def _build_choice_label(name: str) -> str:
    """Build the single-line label shown in the questionary selector.

    Format: ``"rot13   Latin letters shifted by 13   -> Uryyb, Jbeyq! 123"``
    """
    description = PRESET_DESCRIPTIONS.get(name, "")
    sample = PRESET_FUNCTIONS[name](SAMPLE_TEXT)
    return f"{name:<6}  {description:<40}  -> {sample}"


def preset_rows() -> list[tuple[str, str, str]]:
    """Return ``(name, description, sample)`` for every preset."""
    return [
        (name, PRESET_DESCRIPTIONS.get(name, ""), func(SAMPLE_TEXT))
        for name, func in PRESET_FUNCTIONS.items()
    ]


def alphabet_rows() -> list[tuple[str, str, str]]:
    """Return ``(name, length, preview)`` for every built-in alphabet."""
    return [
        (name, str(len(alphabet)), _preview_alphabet(alphabet))
        for name, alphabet in CHARSETS.items()
    ]


# ---------------------------------------------------------------------------
# Table display
# ---------------------------------------------------------------------------

def _print_plain_listing() -> None:
    """Render the preset and alphabet listing without Rich."""
    print(f"\nPresets (sample: {SAMPLE_TEXT!r})", file=sys.stderr)
    print("-" * 72, file=sys.stderr)
    for name, description, sample in preset_rows():
        print(f"{name:<8} {description:<40} {sample}", file=sys.stderr)
    print("\nAlphabets", file=sys.stderr)
    print("-" * 72, file=sys.stderr)
    for name, length, preview in alphabet_rows():
        print(f"{name:<16} {length:>4}  {preview}", file=sys.stderr)
    print(file=sys.stderr)


def display_presets() -> None:
    """Print the preset and alphabet tables, with or without Rich."""
    table_class = _import_rich_table()
    if table_class is None:
        _print_plain_listing()
        return

    presets_table = table_class(
        title="Presets",
        caption=f"sample: {SAMPLE_TEXT}",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    presets_table.add_column("Preset", style="bold", min_width=6)
    presets_table.add_column("Description", min_width=20)
    presets_table.add_column("Sample", min_width=17)
    for row in preset_rows():
        presets_table.add_row(*row)

    alphabets_table = table_class(
        title="Alphabets",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    alphabets_table.add_column("Charset", style="bold", min_width=12)
    alphabets_table.add_column("Size", justify="right", min_width=4)
    alphabets_table.add_column("Characters", min_width=24)
    for row in alphabet_rows():
        alphabets_table.add_row(*row)

    console.print()
    console.print(presets_table)
    console.print(alphabets_table)
    console.print()


# ---------------------------------------------------------------------------
# Public prompt function
# ---------------------------------------------------------------------------

def prompt_preset_selection() -> str:
    """Prompt the user to choose one of the named presets.

    Returns
    -------
    str
        The chosen preset name (``rot13``, ``rot5``, ``rot18`` or ``rot47``).

    Raises
    ------
    KeyboardInterrupt
        If the user presses Ctrl+C during selection.
    PresetSelectionError
        If the user cancels the prompt (Esc / None return).
    EnvironmentError
        If questionary is not installed.
    """
    from rotkit.exceptions import PresetSelectionError

    questionary = _import_questionary()

    choices = [
        questionary.Choice(title=_build_choice_label(name), value=name)
        for name in PRESET_FUNCTIONS
    ]

    selected: str | None = questionary.select(
        "Select a preset:",
        choices=choices,
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()  # Returns None on Ctrl+C / Esc

    if selected is None:
        raise PresetSelectionError(
            "No preset selected.",
            hint="Use arrow keys to pick a preset, then press Enter.",
        )

    return selected
