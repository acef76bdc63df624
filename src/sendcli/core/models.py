"""Domain models for sendcli.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and serialisation.  They carry zero I/O,
zero dependencies on external packages, and must remain pure across the
entire lifecycle.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Network address
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class HostAddress:
    """A parsed, normalised absolute host URL.

    Produced exclusively by :func:`sendcli.core.host.parse_host`; a
    value of this type is always well formed.
    """

    scheme: str
    """Lowercased scheme."""

    host: str | None
    """Host, or ``None`` for URLs without an authority (``localhost:8080``).

    Special-scheme domains are lowercased ASCII; IPv4 is dotted-quad and
    IPv6 is ``[v6]``.
    """

    port: int | None = None
    """Explicit port, or ``None`` when absent or equal to the default."""

    path: str = "/"
    """Path component; opaque for URLs without an authority."""

    query: str | None = None
    """Query without the leading ``?``, or ``None`` when absent."""

    fragment: str | None = None
    """Fragment without the leading ``#``, or ``None`` when absent."""

    userinfo: str = field(default="", repr=False)
    """Raw ``user[:password]`` credentials, empty when absent."""

    @property
    def origin(self) -> str:
        """``scheme://host[:port]`` — the address without path or query.

        ``"null"`` when there is no host.
        """
        if self.host is None:
            return "null"
        origin = f"{self.scheme}://{self.host}"
        if self.port is not None:
            origin += f":{self.port}"
        return origin

    @property
    def url(self) -> str:
        """Full serialised URL."""
        if self.host is None:
            return self._with_suffix(f"{self.scheme}:{self.path}")

        authority = f"{self.userinfo}@" if self.userinfo else ""
        url = f"{self.scheme}://{authority}{self.host}"
        if self.port is not None:
            url += f":{self.port}"
        return self._with_suffix(url + self.path)

    def _with_suffix(self, url: str) -> str:
        if self.query is not None:
            url += f"?{self.query}"
        if self.fragment is not None:
            url += f"#{self.fragment}"
        return url

    def __str__(self) -> str:
        return self.url


# ---------------------------------------------------------------------------
# Password
# ---------------------------------------------------------------------------

class SecretSource(enum.Enum):
    """Where a password value came from."""

    EXPLICIT = "explicit"
    """Given verbatim on the command line (may be the empty string)."""

    PROMPTED = "prompted"
    """Entered on the interactive, echo-suppressed prompt."""


@dataclass(frozen=True, slots=True)
class Secret:
    """A password together with its origin.

    The value is excluded from ``repr`` and ``str`` so that request
    descriptions can be logged or rendered without leaking it.
    """

    value: str = field(repr=False)
    source: SecretSource

    def __str__(self) -> str:
        return "********"


# ---------------------------------------------------------------------------
# Upload request
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class UploadRequest:
    """Validated, normalised description of one upload.

    This is the only value handed to an upload engine.
    """

    file: str
    """Path of the file to upload, as given by the user."""

    host: HostAddress
    """Send host to upload to."""

    name: str | None = None
    """New name for the uploaded file, or ``None`` to keep the original."""

    password: Secret | None = None
    """Password protection, or ``None`` when the upload is unprotected."""

    open: bool = False
    """Open the share link in the user's browser."""

    copy: bool = False
    """Copy the share link to the clipboard."""
