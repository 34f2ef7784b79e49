"""Everything spkg loads at start-up: directories, configuration and strings."""

from __future__ import annotations

import platform
from dataclasses import dataclass
from functools import cached_property

from spkg.config import Config
from spkg.paths import DEVELOPMENT_MODE, SpkgDirectories, SpkgFiles
from spkg.strings import Strings, load_fallback_strings, load_strings

VERSION = "3.0.0-b4"

_ARCH_ALIASES = {
    "x86_64": "x86_64",
    "amd64": "x86_64",
    "aarch64": "aarch64",
    "arm64": "aarch64",
}


def _detect_arch() -> str:
    machine = platform.machine().lower()
    return _ARCH_ALIASES.get(machine, machine)


ARCH = _detect_arch()


@dataclass
class Context:
    """The loaded state shared by every command."""

    directories: SpkgDirectories
    files: SpkgFiles
    config: Config
    strings: Strings

    @cached_property
    def fallback_strings(self) -> Strings:
        return load_fallback_strings(self.directories)

    @classmethod
    def load(cls, development: bool | None = None) -> Context:
        """Load the configuration and the strings of its language.

        Raises InvalidConfigError when the configuration cannot be understood
        and OSError when a required file cannot be read.
        """
        if development is None:
            development = DEVELOPMENT_MODE
        directories = SpkgDirectories.for_mode(development)
        files = SpkgFiles.from_directories(directories)
        config = Config.load(files.system_config)
        strings = load_strings(directories, config.language)
        return cls(directories=directories, files=files, config=config, strings=strings)