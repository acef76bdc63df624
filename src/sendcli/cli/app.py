"""CLI application entry point and command routing for sendcli.

This module is the **sole error boundary** for the entire application.
It catches :class:`~sendcli.exceptions.SendCliError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — validation is delegated to
  :class:`~sendcli.cli.upload_args.UploadArgs` and the core layer.
* Diagnostics go to stderr; stdout only ever carries the share link.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from sendcli.cli import exit_codes
from sendcli.cli.console import configure_logging, console, escape_markup
from sendcli.cli.upload_args import UploadArgs
from sendcli.cli.upload_schema import build_upload_schema, register_command
from sendcli.config import Features, detect_features
from sendcli.core.protocols import UploadEngine
from sendcli.exceptions import SendCliError
from sendcli.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser(features: Features) -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Supported invocations:
    * ``sendcli upload <FILE> [...]`` (aliases ``u``, ``up``)
    * ``sendcli --version``
    """
    parser = argparse.ArgumentParser(
        prog="sendcli",
        allow_abbrev=False,
        description="Easily and securely share files from the command line.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging on stderr.",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    register_command(subparsers, build_upload_schema(features))
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_upload(upload_args: UploadArgs, engine: UploadEngine | None) -> int:
    """Build the upload request and hand it to *engine*.

    Without an engine the request is only displayed.
    """
    request = upload_args.to_request()

    if engine is None:
        from sendcli.cli.request_view import render_request

        render_request(request)
        return exit_codes.SUCCESS

    share_url = engine.upload(request)
    print(share_url)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    engine: UploadEngine | None = None,
    features: Features | None = None,
) -> int:
    """Run the sendcli CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    engine:
        Upload engine receiving the validated request.
    features:
        Capability flags.  Detected from the environment when ``None``.

    Returns
    -------
    int
        OS process exit code.
    """
    if features is None:
        features = detect_features()

    parser = _build_parser(features)
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    upload_args = UploadArgs.parse(args, features=features)
    if upload_args is None:
        parser.print_help()
        return exit_codes.SUCCESS

    return _handle_upload(upload_args, engine)


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
    except SendCliError as exc:
        logger.debug("Command failed", exc_info=True)
        console.print(f"[bold red]Error:[/bold red] {escape_markup(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
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
