"""Core layer — pure models and parsing.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* All functions must be fully typed and deterministic.
"""

from sendcli.core.host import HostErrorKind, HostParseError, host_error_message, parse_host
from sendcli.core.models import HostAddress, Secret, SecretSource, UploadRequest
from sendcli.core.protocols import UploadEngine

__all__: list[str] = [
    "HostAddress",
    "HostErrorKind",
    "HostParseError",
    "Secret",
    "SecretSource",
    "UploadEngine",
    "UploadRequest",
    "host_error_message",
    "parse_host",
]
