"""Command line parsing for spkg."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from spkg.errors import InvalidArgument, SpkgError

_EMPTY_ARGUMENT = "Argument cannot be empty"


@dataclass
class CommandOptions:
    sandbox: bool = False
    installed: bool = False
    arch: str | None = None


class CommandKind(Enum):
    HELP = "help"
    ERR = "err"
    INSTALL = "install"
    INSTALL_BIN = "install-bin"
    INSTALL_SOURCE = "install-src"
    SYNC = "sync"
    INFO = "info"
    SPEC = "spec"
    LIST = "list"
    DOWNLOAD = "download"
    PLUGIN = "plugin"
    DUMMY = "dummy"


@dataclass
class Command:
    """A parsed command line.

    ``arguments`` holds the package names, the single package for ``info`` and
    ``spec``, or the raw arguments handed to ``plugin``.
    """

    kind: CommandKind
    arguments: tuple[str, ...] = ()
    options: CommandOptions = field(default_factory=CommandOptions)
    error: SpkgError | None = None


_PACKAGE_LIST_COMMANDS = {
    "install": CommandKind.INSTALL,
    "install-bin": CommandKind.INSTALL_BIN,
    "binstall": CommandKind.INSTALL_BIN,
    "install-src": CommandKind.INSTALL_SOURCE,
    "download": CommandKind.DOWNLOAD,
}

_SINGLE_PACKAGE_COMMANDS = {
    "info": CommandKind.INFO,
    "spec": CommandKind.SPEC,
}


def parse_args(argv: Sequence[str] | None = None) -> Command:
    """Parse the arguments that follow the program name."""
    args = list(sys.argv[1:] if argv is None else argv)
    options = CommandOptions()
    positional: list[str] = []

    remaining = iter(args)
    for arg in remaining:
        if arg in ("-s", "--sandbox"):
            options.sandbox = True
        elif arg == "--installed":
            options.installed = True
        elif arg in ("-a", "--arch"):
            value = next(remaining, None)
            if value is None:
                print("error", file=sys.stderr)
            else:
                options.arch = value
        elif not arg.startswith("-"):
            positional.append(arg)
        else:
            print(f"Warning: Unrecognized option {arg}", file=sys.stderr)

    if not positional:
        return Command(CommandKind.HELP, options=options)

    name, rest = positional[0], tuple(positional[1:])

    if name in _PACKAGE_LIST_COMMANDS:
        return Command(_PACKAGE_LIST_COMMANDS[name], rest, options)
    if name in _SINGLE_PACKAGE_COMMANDS:
        if not rest:
            return Command(CommandKind.ERR, options=options, error=InvalidArgument(_EMPTY_ARGUMENT))
        return Command(_SINGLE_PACKAGE_COMMANDS[name], rest[:1], options)
    if name == "sync":
        return Command(CommandKind.SYNC, options=options)
    if name == "list":
        return Command(CommandKind.LIST, options=options)
    if name == "plugin":
        return Command(CommandKind.PLUGIN, tuple(args[1:]), options)
    if name == "dummy":
        return Command(CommandKind.DUMMY, options=options)
    return Command(CommandKind.HELP, options=options)