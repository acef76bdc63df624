"""Build- and startup-time configuration for sendcli.

Holds the well-known default host and the capability flags that decide
which arguments the ``upload`` schema registers.  Everything here is
resolved once at startup; nothing is mutated afterwards.
"""

from __future__ import annotations

import importlib.util
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

SEND_DEF_HOST: str = "https://send.firefox.com/"
"""Default Send host used when ``--host`` is omitted."""

CLIPBOARD_ENV_VAR: str = "SENDCLI_CLIPBOARD"
"""Environment override for the clipboard capability."""

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True, slots=True)
class Features:
    """Optional capabilities available in this run."""

    clipboard: bool = False
    """Whether the ``--copy`` flag is registered and honoured."""


def _clipboard_backend_installed() -> bool:
    """Return ``True`` when the optional clipboard backend is importable."""
    return importlib.util.find_spec("pyperclip") is not None


def detect_features(environ: Mapping[str, str] | None = None) -> Features:
    """Resolve capability flags from the environment and installed extras.

    ``SENDCLI_CLIPBOARD`` takes precedence when it holds a recognised
    boolean; otherwise clipboard support follows whether the
    ``sendcli[clipboard]`` extra is installed.
    """
    env = os.environ if environ is None else environ
    raw = env.get(CLIPBOARD_ENV_VAR, "").strip().lower()

    if raw in _TRUTHY:
        clipboard = True
    elif raw in _FALSY:
        clipboard = False
    else:
        if raw:
            logger.warning(
                "Ignoring unrecognised %s value %r", CLIPBOARD_ENV_VAR, raw,
            )
        clipboard = _clipboard_backend_installed()

    logger.debug("Resolved features: clipboard=%s", clipboard)
    return Features(clipboard=clipboard)
