"""Declarative schema of the ``upload`` command.

The schema is a frozen value built by :func:`build_upload_schema` and
translated into an argparse sub-parser by :func:`register_command`.
Building it has no side effects; two builds with equal features compare
equal.
"""

from __future__ import annotations

import argparse
import enum
from dataclasses import dataclass
from typing import Any, Final

from sendcli.config import SEND_DEF_HOST, Features

UPLOAD_COMMAND: Final = "upload"

FILE: Final = "FILE"
NAME: Final = "name"
PASSWORD: Final = "password"
HOST: Final = "host"
OPEN: Final = "open"
COPY: Final = "copy"


class Cardinality(enum.Enum):
    """How many values an argument accepts."""

    EXACTLY_ONE = "exactly-one"
    """Positional, one value, always present."""

    SINGLE = "single"
    """Option taking one value, may be omitted."""

    OPTIONAL_VALUE = "optional-value"
    """Option taking zero or one value once present."""

    FLAG = "flag"
    """Boolean switch without a value."""


class _PromptMarker:
    """Type of :data:`PASSWORD_PROMPT`."""

    def __repr__(self) -> str:
        return "PASSWORD_PROMPT"


PASSWORD_PROMPT: Final = _PromptMarker()
"""Parsed value of ``--password`` given without a value."""


@dataclass(frozen=True, slots=True)
class ArgumentSpec:
    """One argument of a command."""

    key: str
    """Attribute name in the parse result."""

    help: str
    cardinality: Cardinality

    flags: tuple[str, ...] = ()
    """Primary option strings.  Empty for positionals."""

    aliases: tuple[str, ...] = ()
    """Alternative option strings accepted for the same argument."""

    default: str | bool | None = None

    const: object = None
    """Value stored when an ``OPTIONAL_VALUE`` option is given without one."""

    required: bool = False
    """Positionals are always required; options honour this flag."""

    value_name: str | None = None

    @property
    def positional(self) -> bool:
        return not self.flags

    @property
    def option_strings(self) -> tuple[str, ...]:
        return self.flags + self.aliases


@dataclass(frozen=True, slots=True)
class CommandSchema:
    """A named subcommand and the arguments it accepts."""

    name: str
    about: str
    aliases: tuple[str, ...]
    arguments: tuple[ArgumentSpec, ...]

    def get(self, key: str) -> ArgumentSpec | None:
        """Return the argument registered under *key*, if any."""
        return next((arg for arg in self.arguments if arg.key == key), None)

    def keys(self) -> tuple[str, ...]:
        return tuple(arg.key for arg in self.arguments)


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

def build_upload_schema(features: Features | None = None) -> CommandSchema:
    """Declare the ``upload`` command.

    ``--copy`` is only declared when *features* enables the clipboard.
    """
    if features is None:
        features = Features()

    arguments = [
        ArgumentSpec(
            key=FILE,
            help="The file to upload",
            cardinality=Cardinality.EXACTLY_ONE,
            required=True,
        ),
        ArgumentSpec(
            key=NAME,
            help="Rename the file being uploaded",
            cardinality=Cardinality.SINGLE,
            flags=("--name", "-n"),
            aliases=("--file", "-f"),
            value_name="NAME",
        ),
        ArgumentSpec(
            key=PASSWORD,
            help="Protect the file with a password",
            cardinality=Cardinality.OPTIONAL_VALUE,
            flags=("--password", "-p"),
            aliases=("--pass",),
            const=PASSWORD_PROMPT,
            value_name="PASSWORD",
        ),
        ArgumentSpec(
            key=HOST,
            help="The Send host to upload to",
            cardinality=Cardinality.SINGLE,
            flags=("--host", "-h"),
            aliases=("--server",),
            default=SEND_DEF_HOST,
            value_name="URL",
        ),
        ArgumentSpec(
            key=OPEN,
            help="Open the share link in your browser",
            cardinality=Cardinality.FLAG,
            flags=("--open", "-o"),
            default=False,
        ),
    ]

    if features.clipboard:
        arguments.append(
            ArgumentSpec(
                key=COPY,
                help="Copy the share link to your clipboard",
                cardinality=Cardinality.FLAG,
                flags=("--copy", "-c"),
                default=False,
            )
        )

    return CommandSchema(
        name=UPLOAD_COMMAND,
        about="Upload files.",
        aliases=("u", "up"),
        arguments=tuple(arguments),
    )


# ---------------------------------------------------------------------------
# argparse translation
# ---------------------------------------------------------------------------

def _argparse_kwargs(spec: ArgumentSpec) -> dict[str, Any]:
    kwargs: dict[str, Any] = {"help": spec.help}

    if spec.cardinality is Cardinality.FLAG:
        kwargs["action"] = "store_true"
        return kwargs

    if spec.value_name is not None:
        kwargs["metavar"] = spec.value_name

    if spec.cardinality is Cardinality.EXACTLY_ONE:
        return kwargs

    kwargs["dest"] = spec.key
    kwargs["default"] = spec.default
    kwargs["required"] = spec.required
    if spec.cardinality is Cardinality.OPTIONAL_VALUE:
        kwargs["nargs"] = "?"
        kwargs["const"] = spec.const
    return kwargs


def register_command(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    schema: CommandSchema,
) -> argparse.ArgumentParser:
    """Add *schema* as a sub-parser of *subparsers* and return it.

    The sub-parser has no ``-h`` help switch because ``-h`` is the
    short form of ``--host``; help stays reachable through ``--help``.
    """
    parser = subparsers.add_parser(
        schema.name,
        aliases=list(schema.aliases),
        help=schema.about,
        description=schema.about,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "--help",
        action="help",
        help="Show this help message and exit.",
    )

    for spec in schema.arguments:
        names = (spec.key,) if spec.positional else spec.option_strings
        parser.add_argument(*names, **_argparse_kwargs(spec))

    parser.set_defaults(command=schema.name)
    return parser
