"""Host parsing — turn a raw ``--host`` string into a :class:`HostAddress`.

Any absolute URL is accepted.  The parser follows the WHATWG URL host
rules closely enough that each distinct failure is reported with its
own :class:`HostErrorKind`:

* surrounding whitespace and embedded tab/newline characters are removed;
* special schemes (``http``, ``https``, ``ws``, ``wss``, ``ftp``,
  ``file``) always carry an authority; other schemes only when the
  scheme is followed by ``//``, otherwise the rest is an opaque path;
* IPv6 literals must be bracketed and valid;
* a special-scheme host whose last label is numeric is an IPv4 address
  (1 to 4 decimal parts) and must be valid;
* special-scheme domains are percent-decoded, checked for forbidden
  code points and IDNA-encoded when non-ASCII; other hosts are kept
  verbatim after the forbidden code point check;
* ports must be decimal and at most 65535; default ports are elided.

Rules
-----
* Pure — no I/O.
* Raises :class:`HostParseError` only.
"""

from __future__ import annotations

import enum
import ipaddress
import re
from urllib.parse import unquote

from sendcli.core.models import HostAddress

SPECIAL_SCHEMES: dict[str, int | None] = {
    "ftp": 21,
    "file": None,
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
}
"""Schemes with a mandatory authority, and their default ports."""

_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*:")
_TAB_OR_NEWLINE_RE = re.compile(r"[\t\n\r]")
_DECIMAL_RE = re.compile(r"[0-9]+")
_IPV4_PART_RE = re.compile(r"0|[1-9][0-9]*")

_C0_CONTROL_OR_SPACE = "".join(chr(code) for code in range(0x21))
_FORBIDDEN_HOST_CHARS = frozenset("\x00\t\n\r #/:<>?@[\\]^|")
_FORBIDDEN_DOMAIN_CHARS = _FORBIDDEN_HOST_CHARS | frozenset(
    "".join(chr(code) for code in range(0x20)) + "%\x7f"
)


class HostErrorKind(enum.Enum):
    """Distinct reasons a host string can fail to parse."""

    EMPTY_HOST = "empty-host"
    INVALID_PORT = "invalid-port"
    INVALID_IPV4_ADDRESS = "invalid-ipv4-address"
    INVALID_IPV6_ADDRESS = "invalid-ipv6-address"
    INVALID_DOMAIN_CHARACTER = "invalid-domain-character"
    RELATIVE_URL_WITHOUT_BASE = "relative-url-without-base"
    IDNA_ERROR = "idna-error"


HOST_ERROR_MESSAGES: dict[HostErrorKind, str] = {
    HostErrorKind.EMPTY_HOST: "Empty host given",
    HostErrorKind.INVALID_PORT: "Invalid host port",
    HostErrorKind.INVALID_IPV4_ADDRESS: "Invalid IPv4 address in host",
    HostErrorKind.INVALID_IPV6_ADDRESS: "Invalid IPv6 address in host",
    HostErrorKind.INVALID_DOMAIN_CHARACTER: "Host domains contains an invalid character",
    HostErrorKind.RELATIVE_URL_WITHOUT_BASE: "Host domain doesn't contain a host",
}

GENERIC_HOST_ERROR_MESSAGE: str = "The given host is invalid"


class HostParseError(ValueError):
    """Raised by :func:`parse_host` with the reason the host was rejected."""

    def __init__(self, kind: HostErrorKind, raw: str) -> None:
        super().__init__(kind.value)
        self.kind: HostErrorKind = kind
        self.raw: str = raw


def host_error_message(kind: HostErrorKind) -> str:
    """Return the user-facing diagnostic for *kind*.

    Kinds without a dedicated message fall back to
    :data:`GENERIC_HOST_ERROR_MESSAGE`.
    """
    return HOST_ERROR_MESSAGES.get(kind, GENERIC_HOST_ERROR_MESSAGE)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_host(raw: str) -> HostAddress:
    """Parse *raw* into a :class:`HostAddress`.

    Raises
    ------
    HostParseError
        With the :class:`HostErrorKind` describing the first problem found.
    """
    text = _TAB_OR_NEWLINE_RE.sub("", raw.strip(_C0_CONTROL_OR_SPACE))

    scheme_match = _SCHEME_RE.match(text)
    if scheme_match is None:
        raise HostParseError(HostErrorKind.RELATIVE_URL_WITHOUT_BASE, raw)
    scheme = scheme_match.group()[:-1].lower()
    special = scheme in SPECIAL_SCHEMES

    rest = text[scheme_match.end():]
    rest, hash_sep, fragment = rest.partition("#")
    rest, query_sep, query = rest.partition("?")
    query_or_none = query if query_sep else None
    fragment_or_none = fragment if hash_sep else None

    if special and scheme != "file":
        rest = rest.lstrip("/")
    elif rest.startswith("//"):
        rest = rest[2:]
    elif special:
        # file: without an authority has an empty host
        rest = "/" + rest.lstrip("/")
    else:
        return HostAddress(
            scheme=scheme,
            host=None,
            path=rest,
            query=query_or_none,
            fragment=fragment_or_none,
        )

    authority, path_sep, path = rest.partition("/")
    userinfo, at_sep, host_port = authority.rpartition("@")
    if not at_sep:
        userinfo = ""

    host_text, port_text = _split_host_port(host_port, raw)
    if not host_text and special and scheme != "file":
        raise HostParseError(HostErrorKind.EMPTY_HOST, raw)

    return HostAddress(
        scheme=scheme,
        host=_parse_host_text(host_text, special, raw),
        port=_parse_port(port_text, scheme, raw),
        path="/" + path if path_sep else ("/" if special else ""),
        query=query_or_none,
        fragment=fragment_or_none,
        userinfo=userinfo,
    )


# ---------------------------------------------------------------------------
# Authority helpers
# ---------------------------------------------------------------------------

def _split_host_port(host_port: str, raw: str) -> tuple[str, str | None]:
    """Split ``host[:port]``, keeping IPv6 brackets on the host part."""
    if host_port.startswith("["):
        end = host_port.find("]")
        remainder = host_port[end + 1:] if end != -1 else ""
        if end == -1 or (remainder and not remainder.startswith(":")):
            raise HostParseError(HostErrorKind.INVALID_IPV6_ADDRESS, raw)
        return host_port[:end + 1], remainder[1:] if remainder else None

    host_text, sep, port_text = host_port.partition(":")
    return host_text, port_text if sep else None


def _parse_port(port_text: str | None, scheme: str, raw: str) -> int | None:
    if not port_text:
        return None
    if _DECIMAL_RE.fullmatch(port_text) is None:
        raise HostParseError(HostErrorKind.INVALID_PORT, raw)
    port = int(port_text)
    if port > 65535:
        raise HostParseError(HostErrorKind.INVALID_PORT, raw)
    if port == SPECIAL_SCHEMES.get(scheme):
        return None
    return port


def _parse_host_text(host_text: str, special: bool, raw: str) -> str:
    if host_text.startswith("["):
        return _parse_ipv6(host_text[1:-1], raw)

    if not special:
        if any(char in _FORBIDDEN_HOST_CHARS for char in host_text):
            raise HostParseError(HostErrorKind.INVALID_DOMAIN_CHARACTER, raw)
        return host_text

    domain = unquote(host_text)
    if any(char in _FORBIDDEN_DOMAIN_CHARS for char in domain):
        raise HostParseError(HostErrorKind.INVALID_DOMAIN_CHARACTER, raw)

    if domain.isascii():
        ascii_domain = domain.lower()
    else:
        try:
            ascii_domain = domain.lower().encode("idna").decode("ascii")
        except UnicodeError as exc:
            raise HostParseError(HostErrorKind.IDNA_ERROR, raw) from exc

    labels = ascii_domain.split(".")
    if labels[-1] == "" and len(labels) > 1:
        labels.pop()
    if _DECIMAL_RE.fullmatch(labels[-1]):
        return _parse_ipv4(labels, raw)
    return ascii_domain


# ---------------------------------------------------------------------------
# IP literals
# ---------------------------------------------------------------------------

def _parse_ipv6(literal: str, raw: str) -> str:
    # ipaddress accepts "%scope" suffixes, URLs do not.
    if "%" in literal:
        raise HostParseError(HostErrorKind.INVALID_IPV6_ADDRESS, raw)
    try:
        address = ipaddress.IPv6Address(literal)
    except ipaddress.AddressValueError as exc:
        raise HostParseError(HostErrorKind.INVALID_IPV6_ADDRESS, raw) from exc
    return f"[{address.compressed}]"


def _parse_ipv4(labels: list[str], raw: str) -> str:
    """Parse 1 to 4 decimal parts; the last part fills the remaining bytes.

    Zero-prefixed parts are octal and hex parts start with ``0x`` in
    WHATWG hosts; both are rejected rather than read as decimal.
    """
    if len(labels) > 4 or not all(_IPV4_PART_RE.fullmatch(label) for label in labels):
        raise HostParseError(HostErrorKind.INVALID_IPV4_ADDRESS, raw)

    *leading, last = [int(label) for label in labels]
    if any(number > 255 for number in leading) or last >= 256 ** (4 - len(leading)):
        raise HostParseError(HostErrorKind.INVALID_IPV4_ADDRESS, raw)

    value = last
    for index, number in enumerate(leading):
        value += number * 256 ** (3 - index)
    return str(ipaddress.IPv4Address(value))
