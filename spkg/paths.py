"""Filesystem locations used by spkg and human readable sizes."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEVELOPMENT_MODE = os.environ.get("SPKG_DEVELOPMENT_MODE", "").lower() not in (
    "",
    "0",
    "false",
    "no",
)

_KB = 1024
_MB = 1024 * _KB


@dataclass(frozen=True)
class SpkgDirectories:
    """Directories spkg reads from and writes to; every path ends with a slash."""

    system_config: str
    user_config: str
    data: str
    mirrors: str
    language_files: str

    @classmethod
    def for_mode(cls, development: bool) -> SpkgDirectories:
        """Return the directory layout for a development tree or a real system."""
        if development:
            return cls(
                system_config="./data/etc/spkg/",
                user_config="./data/userconfig/spkg/",
                data="./data/var/lib/spkg/",
                mirrors="./data/var/lib/spkg/mirrors/",
                language_files="./data/etc/spkg/lang/",
            )
        return cls(
            system_config="/etc/spkg/",
            user_config="/home/user/.config/spkg/",
            data="/var/lib/spkg/",
            mirrors="/var/lib/spkg/mirrors/",
            language_files="/etc/spkg/lang/",
        )


@dataclass(frozen=True)
class SpkgFiles:
    """Well-known files inside the spkg directories."""

    world_database: str
    package_database: str
    system_config: str
    user_config: str
    lockfile: str

    @classmethod
    def from_directories(cls, directories: SpkgDirectories) -> SpkgFiles:
        return cls(
            world_database=f"{directories.data}world.db",
            package_database=f"{directories.mirrors}main.db",
            system_config=f"{directories.system_config}config.yml",
            user_config=f"{directories.user_config}config.yml",
            lockfile=f"{directories.data}lock",
        )


def format_size(size: int) -> str:
    """Format a byte count as bytes, kilobytes or megabytes."""
    if size < _KB:
        return f"{size} B"
    if size < _MB:
        return f"{size / _KB:.1f} kB"
    return f"{size / _MB:.1f} MB"