"""Custom exception hierarchy for sendcli.

All exceptions that reach the CLI error boundary must inherit from
:class:`SendCliError`.  Low-level parse failures raised by the core
layer (e.g. :class:`~sendcli.core.host.HostParseError`) are translated
into a typed subclass defined here before they leave the accessor.

Hierarchy
---------
SendCliError
├── UsageError
│   ├── MissingRequiredArgumentError
│   ├── EmptyNameError
│   └── InvalidHostError
├── SecretReadFailureError
├── EnvironmentError
└── UploadFailedError
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sendcli.core.host import HostErrorKind


class SendCliError(Exception):
    """Base exception for all sendcli errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument validation ---------------------------------------------------

class UsageError(SendCliError):
    """Raised when a command argument cannot be turned into a valid value."""


class MissingRequiredArgumentError(UsageError):
    """Raised when a schema-required argument is absent from the parse result.

    The parser enforces required arguments, so this signals a broken
    contract between the schema and the parser rather than bad input.
    """

    def __init__(self, key: str) -> None:
        super().__init__(
            f"Missing required argument: {key}",
            hint="This is a bug in sendcli. Please report it.",
        )
        self.key: str = key


class EmptyNameError(UsageError):
    """Raised when the new file name is empty after trimming."""

    def __init__(self) -> None:
        super().__init__(
            "new name must not be empty",
            hint="Pass a non-blank value to --name, or omit it.",
        )


class InvalidHostError(UsageError):
    """Raised when the host value is not a usable network address."""

    def __init__(self, message: str, *, kind: HostErrorKind) -> None:
        super().__init__(message)
        self.kind: HostErrorKind = kind


# --- Secret acquisition ----------------------------------------------------

class SecretReadFailureError(SendCliError):
    """Raised when the password cannot be read from the terminal."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(SendCliError):
    """Raised when a required runtime dependency is not available."""


# --- Upload engine ---------------------------------------------------------

class UploadFailedError(SendCliError):
    """Raised by upload engines when the transfer does not complete."""
