"""Render an :class:`UploadRequest` for the user.

Used when no upload engine is attached: the normalised request is shown
as a Rich table on stderr, or as plain text when Rich is missing.  The
password value is never displayed.
"""

from __future__ import annotations

import sys

from sendcli.cli.console import console, escape_markup
from sendcli.core.models import Secret, UploadRequest


def _describe_password(password: Secret | None) -> str:
    if password is None:
        return "none"
    return f"{password} ({password.source.value})"


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def request_rows(request: UploadRequest) -> list[tuple[str, str]]:
    """Return ``(label, value)`` pairs describing *request*."""
    return [
        ("File", request.file),
        ("Name", request.name if request.name is not None else "(unchanged)"),
        ("Host", request.host.url),
        ("Password", _describe_password(request.password)),
        ("Open", _yes_no(request.open)),
        ("Copy", _yes_no(request.copy)),
    ]


def render_request(request: UploadRequest) -> None:
    """Print *request* to stderr."""
    rows = request_rows(request)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        print("\nUpload request", file=sys.stderr)
        print("-" * 40, file=sys.stderr)
        for label, value in rows:
            print(f"{label:<10} {value}", file=sys.stderr)
        print(file=sys.stderr)
        return

    table = Table(
        title="Upload request",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Field", style="bold", min_width=10)
    table.add_column("Value", min_width=20)
    for label, value in rows:
        table.add_row(label, escape_markup(value))

    console.print()
    console.print(table)
    console.print()
