"""Interactive, echo-suppressed password prompt.

The prompt is rendered on **stderr** so that stdout stays clean for
piping the share link.  questionary (and its prompt_toolkit backend)
are imported lazily so that ``--help`` works without them.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from sendcli.exceptions import EnvironmentError, SecretReadFailureError

logger = logging.getLogger(__name__)

PASSWORD_PROMPT_MESSAGE: str = "Password:"


def _import_questionary() -> Any:
    """Import questionary lazily for the password prompt."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _stderr_output() -> Any:
    """Create a prompt_toolkit output that renders on stderr."""
    try:
        from prompt_toolkit.output import create_output
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "prompt_toolkit is not installed. Install with: pip install prompt_toolkit",
        ) from exc
    return create_output(stdout=sys.stderr)


def prompt_password(message: str = PASSWORD_PROMPT_MESSAGE) -> str:
    """Ask the user for a password without echoing it.

    Returns
    -------
    str
        The line entered by the user, verbatim.  May be empty.

    Raises
    ------
    KeyboardInterrupt
        If the user presses Ctrl+C.  There is no other way to cancel.
    SecretReadFailureError
        If the terminal cannot be read (no TTY, closed stdin, Ctrl+D).
    EnvironmentError
        If questionary is not installed.
    """
    questionary = _import_questionary()

    logger.debug("Prompting for password on stderr")
    try:
        answer = questionary.password(message, output=_stderr_output()).unsafe_ask()
    except (OSError, EOFError) as exc:
        raise SecretReadFailureError(
            "Failed to read password from the terminal.",
            hint="Pass it directly with --password <PASSWORD> when no terminal is attached.",
        ) from exc

    if answer is None:
        raise SecretReadFailureError("No password was entered.")
    return str(answer)
