"""Protocols (interfaces) for collaborators outside sendcli.

The actual transfer, encryption, browser opening and clipboard writing
are owned by an upload engine.  sendcli only describes *what* to upload;
any object satisfying :class:`UploadEngine` structurally can consume
that description.
"""

from __future__ import annotations

from typing import Protocol

from sendcli.core.models import UploadRequest


class UploadEngine(Protocol):
    """Contract for upload backends.

    Implementations must map all backend-specific exceptions to
    :class:`~sendcli.exceptions.SendCliError` subclasses (typically
    :class:`~sendcli.exceptions.UploadFailedError`).
    """

    def upload(self, request: UploadRequest) -> str:
        """Upload the file described by *request*.

        Parameters
        ----------
        request:
            Fully validated request.  ``request.open`` and
            ``request.copy`` ask the engine to open or copy the
            resulting share link.

        Returns
        -------
        str
            The share URL of the uploaded file.

        Raises
        ------
        UploadFailedError
            When the upload fails for any reason.
        """
        ...  # pragma: no cover
