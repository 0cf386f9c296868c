"""CLI application entry point and command routing for rotkit.

This module is the **sole error boundary** for the entire application.
It catches :class:`~rotkit.exceptions.RotkitError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No rotation logic lives here; all work is delegated to the core engine
  and the infrastructure layer.
* Rotated text is data: it goes to stdout (or ``--output``).  Messages go
  to stderr through the console proxy.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rotkit.cli import exit_codes
from rotkit.cli.console import console, escape_markup
from rotkit.exceptions import RotkitError
from rotkit.version import __version__

logger = logging.getLogger(__name__)

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Text to process.  Read from --file or stdin when omitted.",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        default=None,
        help="Read the input text from this file.",
    )
    parser.add_argument(
        "-c",
        "--charset",
        default=None,
        help=(
            "Charset: latin, ascii, latinLower, latinUpper, digits, "
            "asciiPrintable, or a literal custom alphabet (default: latin)."
        ),
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Commands:
    * ``rotkit encode [TEXT]``  rotate forward
    * ``rotkit decode [TEXT]``  rotate back
    * ``rotkit brute [TEXT]``   list every rotation of the charset
    * ``rotkit presets``        list presets and alphabets
    * ``rotkit doctor``         environment diagnostics
    """
    parser = argparse.ArgumentParser(
        prog="rotkit",
        description="Character-rotation (ROT13/ROT47/...) text obfuscation.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging verbosity on stderr (default: WARNING).",
    )

    subparsers = parser.add_subparsers(dest="command")

    for name, summary in (
        ("encode", "Rotate text forward."),
        ("decode", "Invert a previous encode with the same options."),
    ):
        sub = subparsers.add_parser(name, help=summary, description=summary)
        _add_input_arguments(sub)
        sub.add_argument(
            "-s",
            "--shift",
            type=int,
            default=None,
            help="Rotation offset (default: 13).",
        )
        sub.add_argument(
            "-p",
            "--preset",
            default=None,
            help="Preset: rot13, rot5, rot18, rot47, or rotN.",
        )
        sub.add_argument(
            "-i",
            "--interactive",
            action="store_true",
            help="Pick a preset interactively.",
        )
        sub.add_argument(
            "-o",
            "--output",
            type=Path,
            default=None,
            help="Write the result to this file instead of stdout.",
        )

    brute = subparsers.add_parser(
        "brute",
        help="Show the text under every shift of the charset.",
    )
    _add_input_arguments(brute)

    subparsers.add_parser("presets", help="List presets and built-in alphabets.")
    subparsers.add_parser("doctor", help="Run environment diagnostics.")
    return parser


def _configure_logging(level_name: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level_name),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_rotate(args: argparse.Namespace, *, decoding: bool) -> int:
    """Encode or decode the input text.

    Flow:
    1. Read text from the argument, ``--file`` or stdin.
    2. Optionally pick a preset interactively.
    3. Rotate through the core engine.
    4. Write the result to stdout or ``--output``.  A result computed
       from the positional argument gets a trailing newline on stdout.
    """
    from rotkit.core.engine import decode, encode
    from rotkit.core.models import RotateConfig
    from rotkit.infra.text_io import read_text, write_text

    text = read_text(args.text, path=args.file)

    preset: str | None = args.preset
    if args.interactive:
        from rotkit.cli.preset_prompt import prompt_preset_selection

        preset = prompt_preset_selection()

    config = RotateConfig(shift=args.shift, charset=args.charset, preset=preset)
    logger.info(
        "%s %d characters (shift=%s, charset=%s, preset=%s)",
        "Decoding" if decoding else "Encoding",
        len(text),
        config.shift,
        config.charset,
        config.preset,
    )
    result = decode(text, config) if decoding else encode(text, config)
    if args.text is not None and args.output is None:
        # Terminal output; file and stdin input stay byte-exact.
        result += "\n"
    write_text(result, path=args.output)
    return exit_codes.SUCCESS


def _handle_brute(args: argparse.Namespace) -> int:
    """Print one ``shift  text`` line per possible rotation."""
    from rotkit.core.engine import all_rotations
    from rotkit.infra.text_io import read_text, write_text

    text = read_text(args.text, path=args.file).rstrip("\n")
    candidates = all_rotations(text, args.charset)
    logger.info("Listing %d rotations", len(candidates))
    lines = [f"{shift:>3}  {rotated}" for shift, rotated in candidates]
    write_text("\n".join(lines) + "\n")
    return exit_codes.SUCCESS


def _handle_presets() -> int:
    """Dispatch the ``presets`` listing command."""
    from rotkit.cli.preset_prompt import display_presets

    display_presets()
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from rotkit.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the rotkit CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command == "encode":
        return _handle_rotate(args, decoding=False)
    if args.command == "decode":
        return _handle_rotate(args, decoding=True)
    if args.command == "brute":
        return _handle_brute(args)
    if args.command == "presets":
        return _handle_presets()
    return _handle_doctor()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except RotkitError as exc:
        console.error(exc, hint=exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
