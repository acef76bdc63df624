"""Shared pytest fixtures and configuration for the sendcli test suite.

Guidelines
----------
* No terminal or network access in any test.
* questionary must be mocked at the prompt boundary.
* Core tests must be pure — no side effects.
* Tests must not depend on environment state.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Iterator

import pytest

from sendcli.cli.app import _build_parser
from sendcli.cli.console import LOGGER_NAME
from sendcli.config import CLIPBOARD_ENV_VAR, Features


@pytest.fixture(autouse=True)
def _isolate_clipboard_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CLIPBOARD_ENV_VAR, raising=False)


@pytest.fixture
def parse_args() -> Callable[..., argparse.Namespace]:
    """Parse an argument list with the real top-level parser."""

    def _parse(argv: list[str], features: Features | None = None) -> argparse.Namespace:
        return _build_parser(features or Features()).parse_args(argv)

    return _parse


@pytest.fixture(autouse=True)
def _reset_sendcli_logger() -> Iterator[None]:
    """Drop handlers installed by ``configure_logging`` during a test."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)
