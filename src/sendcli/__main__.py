"""Allow ``python -m sendcli`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m sendcli`` behaves identically to the ``sendcli``
console script.
"""

from __future__ import annotations

from sendcli.cli.app import cli

if __name__ == "__main__":
    cli()
