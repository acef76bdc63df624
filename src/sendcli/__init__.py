"""sendcli — argument model for the ``upload`` command of a Send client.

Captures, validates and normalises the user's upload intent into an
immutable request consumed by a separate upload engine.
"""

from sendcli.version import __version__

__all__: list[str] = ["__version__"]
