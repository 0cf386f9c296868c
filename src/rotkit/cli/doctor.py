"""``rotkit doctor``: environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment satisfies rotkit's requirements.  The
rotation engine itself only needs the standard library, so missing UI
packages are reported as warnings, not failures.
"""

from __future__ import annotations

import platform
import sys

from rotkit.cli import exit_codes
from rotkit.cli.console import console
from rotkit.infra.dependency_probe import DependencyStatus, detect_optional_dependencies
from rotkit.version import __version__

MIN_PYTHON: tuple[int, int] = (3, 10)


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = tuple(sys.version_info[:2]) >= MIN_PYTHON
    required = ".".join(str(part) for part in MIN_PYTHON)
    status = "[green]OK[/green]" if ok else f"[red]FAIL (>={required} required)[/red]"
    return "Python", version, status


def _dependency_check(dep: DependencyStatus) -> tuple[str, str, str]:
    """Return (label, value, status) for one optional package row."""
    if dep.found:
        return dep.name, dep.version or "unknown", "[green]OK[/green]"
    return dep.name, "not installed", "[yellow]WARN[/yellow]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    release = platform.release()
    machine = platform.machine()
    value = f"{system_display} {release} ({machine})"
    return "OS", value, "[green]OK[/green]"


def _rotkit_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the rotkit version row."""
    return "rotkit", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nrotkit doctor", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<32} {'Status':<8}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for label, value, status in checks:
        plain_status = _status_plain(status)
        print(f"{label:<12} {value:<32} {plain_status:<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    dependencies = detect_optional_dependencies()
    checks = [
        _rotkit_version_check(),
        _python_version_check(),
        *(_dependency_check(dep) for dep in dependencies),
        _os_check(),
    ]

    has_failure = any("FAIL" in status for _, _, status in checks)

    rich_available = True
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="rotkit doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)

        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    # Install guidance for whatever optional package is missing.
    missing = [dep for dep in dependencies if not dep.found]
    if missing:
        console.print("Optional packages are missing. Install with:\n")
        for dep in missing:
            console.print(f"  {dep.install_command}")
        console.print()

    if has_failure:
        if rich_available:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            print("Some checks failed.", file=sys.stderr)
        return exit_codes.GENERAL_ERROR

    if rich_available:
        console.print("[bold green]All checks passed.[/bold green]")
    else:
        print("All checks passed.", file=sys.stderr)
    return exit_codes.SUCCESS
