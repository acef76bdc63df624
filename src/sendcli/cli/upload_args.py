"""Typed accessor over the parse result of the ``upload`` command.

:class:`UploadArgs` keeps a reference to the argparse namespace and
validates each field on demand.  Host parsing and the password prompt
only run when their field is requested.  Every failure is raised as a
:class:`~sendcli.exceptions.SendCliError` subclass for the CLI error
boundary to render.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from typing import Any

from sendcli.cli.password_prompt import prompt_password
from sendcli.cli.upload_schema import (
    COPY,
    FILE,
    HOST,
    NAME,
    OPEN,
    PASSWORD,
    PASSWORD_PROMPT,
    UPLOAD_COMMAND,
)
from sendcli.config import Features
from sendcli.core.host import HostParseError, host_error_message, parse_host
from sendcli.core.models import HostAddress, Secret, SecretSource, UploadRequest
from sendcli.exceptions import EmptyNameError, InvalidHostError, MissingRequiredArgumentError

logger = logging.getLogger(__name__)


class UploadArgs:
    """The ``upload`` command's arguments.

    Parameters
    ----------
    matches:
        Namespace produced by the top-level parser.  It is read, never
        modified, and must outlive this accessor.
    features:
        Capabilities the schema was built with.
    prompt:
        Callable used to read a password interactively.  Defaults to
        :func:`~sendcli.cli.password_prompt.prompt_password`.
    """

    def __init__(
        self,
        matches: argparse.Namespace,
        *,
        features: Features | None = None,
        prompt: Callable[[], str] | None = None,
    ) -> None:
        self._matches = matches
        self._features: Features = features if features is not None else Features()
        self._prompt: Callable[[], str] = prompt if prompt is not None else prompt_password

    @classmethod
    def parse(
        cls,
        parent: argparse.Namespace,
        **kwargs: Any,
    ) -> UploadArgs | None:
        """Return an accessor when *parent* selected ``upload``, else ``None``."""
        if getattr(parent, "command", None) != UPLOAD_COMMAND:
            return None
        return cls(parent, **kwargs)

    def _value(self, key: str) -> Any:
        return getattr(self._matches, key, None)

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    def name(self) -> str | None:
        """The new name for the uploaded file, or ``None`` to keep it.

        Raises
        ------
        EmptyNameError
            If the given name is blank.
        """
        # TODO: reject path separators, and extension changes without --force
        name = self._value(NAME)
        if name is None:
            return None
        if not name.strip():
            raise EmptyNameError()
        return name

    def file(self) -> str:
        """The path of the file to upload."""
        file = self._value(FILE)
        if file is None:
            raise MissingRequiredArgumentError(FILE)
        return file

    def host(self) -> HostAddress:
        """The host to upload to.

        Raises
        ------
        InvalidHostError
            With a message specific to why the host could not be parsed.
        """
        raw = self._value(HOST)
        if raw is None:
            raise MissingRequiredArgumentError(HOST)

        try:
            address = parse_host(raw)
        except HostParseError as exc:
            logger.debug("Rejected host: %s", exc.kind.value)
            raise InvalidHostError(host_error_message(exc.kind), kind=exc.kind) from exc

        logger.debug("Resolved host %s", address.origin)
        return address

    def open(self) -> bool:
        """Whether to open the share link in the user's browser."""
        return bool(self._value(OPEN))

    def copy(self) -> bool | None:
        """Whether to copy the share link to the clipboard.

        ``None`` when clipboard support is unavailable.
        """
        if not self._features.clipboard:
            return None
        return bool(self._value(COPY))

    def password(self) -> Secret | None:
        """The password to protect the upload with.

        ``None`` when ``--password`` was not given.  An explicit empty
        value is returned as an empty secret, not as ``None``.
        """
        value = self._value(PASSWORD)
        if value is None:
            return None

        if value is PASSWORD_PROMPT:
            logger.debug("Password flag given without value; prompting")
            return Secret(self._prompt(), SecretSource.PROMPTED)

        return Secret(value, SecretSource.EXPLICIT)

    # ------------------------------------------------------------------
    # Aggregate
    # ------------------------------------------------------------------

    def to_request(self) -> UploadRequest:
        """Validate every field and bundle them for the upload engine.

        The host is resolved before the password so that a malformed
        host fails without prompting.
        """
        file = self.file()
        name = self.name()
        host = self.host()
        password = self.password()

        request = UploadRequest(
            file=file,
            host=host,
            name=name,
            password=password,
            open=self.open(),
            copy=bool(self.copy()),
        )
        logger.debug("Built upload request: %r", request)
        return request
