"""The spkg command line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from spkg import context as _context
from spkg.cli import Command, CommandKind, parse_args
from spkg.commands import download, info, install_src, list_packages, spec
from spkg.context import ARCH, VERSION, Context
from spkg.errors import InvalidConfigError, SpkgError
from spkg.paths import SpkgDirectories
from spkg.strings import load_fallback_strings
from spkg.sync import sync

_UNSUPPORTED = {CommandKind.INSTALL_BIN, CommandKind.PLUGIN, CommandKind.DUMMY}


def _report_invalid_config(error: InvalidConfigError) -> None:
    directories = SpkgDirectories.for_mode(_context.DEVELOPMENT_MODE)
    try:
        message = error.render(load_fallback_strings(directories))
    except (OSError, ValueError):
        message = f"Invalid configuration: {error.reason}"
    print(message, file=sys.stderr)


def _dispatch(command: Command, context: Context) -> int:
    kind, args, options = command.kind, command.arguments, command.options
    if kind is CommandKind.HELP:
        print(context.strings.load_with_params("Help", [VERSION, ARCH]))
    elif kind is CommandKind.ERR:
        message = command.error.render(context.strings) if command.error else "error"
        print(message, file=sys.stderr)
        return 1
    elif kind in (CommandKind.INSTALL, CommandKind.INSTALL_SOURCE):
        install_src(list(args), options, context)
    elif kind is CommandKind.SYNC:
        sync(options, context)
    elif kind is CommandKind.INFO:
        info(args[0], options, context)
    elif kind is CommandKind.SPEC:
        spec(args[0], options, context)
    elif kind is CommandKind.LIST:
        list_packages(options, context)
    elif kind is CommandKind.DOWNLOAD:
        download(list(args), options, context)
    elif kind in _UNSUPPORTED:
        print(f"spkg: '{kind.value}' is not supported by this build", file=sys.stderr)
        return 2
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run spkg with ``argv`` (the arguments after the program name) and return the exit status."""
    command = parse_args(argv)
    try:
        context = Context.load()
    except InvalidConfigError as exc:
        _report_invalid_config(exc)
        return 1
    except OSError as exc:
        print(f"Could not read file: {exc}", file=sys.stderr)
        return 1

    try:
        return _dispatch(command, context)
    except SpkgError as exc:
        print(exc.render(context.strings))
        return 1
    except (OSError, ValueError) as exc:
        print(exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())