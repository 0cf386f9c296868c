"""Allow ``python -m rotkit`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m rotkit`` behaves identically to the ``rotkit`` console
script.
"""

from __future__ import annotations

from rotkit.cli.app import cli

if __name__ == "__main__":
    cli()
