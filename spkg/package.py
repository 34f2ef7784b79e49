"""Packages known from the synced repository databases and the world database."""

from __future__ import annotations

import sqlite3
import sys
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

import requests

from spkg.config import RepositoryInfo
from spkg.context import ARCH
from spkg.database import Database
from spkg.errors import DatabaseError, PackageNotFound
from spkg.http import file_download, remote_header
from spkg.metadata import Metadata
from spkg.paths import SpkgFiles, format_size
from spkg.spinner_frames import SpinnerName
from spkg.spinners import Spinner
from spkg.strings import Strings
from spkg.utilities import BOLD, C_RESET, CYAN, GREEN, RED, RESET, delete_last_line, get_basename


@dataclass(frozen=True)
class Package:
    name: str
    version: str
    branch: str
    arch: str
    specfile: str
    metadata: Metadata
    srcpkg_url: str

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> Package:
        """Build a package from a database row; invalid metadata raises MetadataParseError."""
        return cls(
            name=row["name"],
            version=row["version"],
            branch=row["branch"],
            arch=row["arch"],
            specfile=row["specfile"],
            metadata=Metadata.parse(row["metadata"]),
            srcpkg_url=row["srcpkg_url"],
        )

    def download(self, strings: Strings) -> bool:
        """Download the source package into the current directory.

        Returns False and reports the error when the download failed.
        """
        url = self.srcpkg_url
        size = format_size(remote_header(url))
        get = strings.load("Get")
        spinner = Spinner(
            SpinnerName.LINE,
            f"{BOLD}{get}: {CYAN}{url}{C_RESET} ({GREEN}{size}{RESET}) ({self.name}) ...{C_RESET}",
        )
        destination = get_basename(url) or self.name
        try:
            file_download(url, destination)
        except (requests.RequestException, OSError) as exc:
            spinner.stop()
            delete_last_line()
            delete_last_line()
            print(
                f"{RED}{BOLD} × {C_RESET} {BOLD}{get}: {CYAN}{url}{C_RESET} ({self.name}) ...{C_RESET}",
                file=sys.stderr,
            )
            print(f"{RED}{BOLD} ↳  {exc}{C_RESET}", file=sys.stderr)
            return False
        spinner.stop_with_message(
            f"{GREEN}{BOLD} ✓ {C_RESET} {BOLD}{get}: {CYAN}{url}{C_RESET} "
            f"({GREEN}{size}{RESET}) ({self.name}) ...{C_RESET}"
        )
        return True


@dataclass
class PackageList:
    """Packages of every configured repository, sorted by name."""

    packages: list[Package] = field(default_factory=list)

    @classmethod
    def from_repositories(
        cls,
        repositories: Mapping[str, RepositoryInfo],
        files: SpkgFiles,
        strings: Strings,
    ) -> PackageList:
        """Read every synced repository database; unsynced ones are reported and skipped."""
        packages: list[Package] = []
        for name, info in repositories.items():
            for arch in info.architectures():
                location = files.package_database.replace("main.db", f"{name}.{arch}.db")
                try:
                    db = Database(location, files.world_database)
                except DatabaseError:
                    print(
                        f"{RED}{BOLD} × {C_RESET}{CYAN}{arch}:{C_RESET} "
                        f"{strings.load('PackageDatabaseNotSynced')}",
                        file=sys.stderr,
                    )
                    continue
                with db:
                    rows = db.connection.execute("SELECT * FROM packages").fetchall()
                packages.extend(Package.from_row(row) for row in rows)
        packages.sort(key=lambda package: package.name)
        return cls(packages)

    def get(self, name: str) -> Package:
        """Return the first package called ``name``; PackageNotFound when there is none."""
        for package in self.packages:
            if package.name == name:
                return package
        raise PackageNotFound(name)

    def filter_arch(self, arch: str) -> PackageList:
        return PackageList([package for package in self.packages if package.arch == arch])

    def __iter__(self) -> Iterator[Package]:
        return iter(self.packages)

    def __len__(self) -> int:
        return len(self.packages)


@dataclass(frozen=True)
class BasePackage:
    name: str
    version: str
    branch: str
    arch: str


@dataclass
class BasePackageList:
    """Packages installed on this system, sorted by name."""

    packages: list[BasePackage] = field(default_factory=list)

    @classmethod
    def from_world(cls, files: SpkgFiles) -> BasePackageList:
        """Read the world database; WorldDatabaseNotBuilt when it does not exist."""
        with Database(files.world_database, files.world_database) as db:
            rows = db.connection.execute(
                "SELECT * FROM packages ORDER BY name GLOB '[A-Za-z]*' DESC, name"
            ).fetchall()
        packages = [
            BasePackage(name=row["name"], version=row["version"], branch=row["branch"], arch=row["arch"])
            for row in rows
        ]
        packages.sort(key=lambda package: package.name)
        return cls(packages)

    def get(self, name: str) -> BasePackage:
        for package in self.packages:
            if package.name == name:
                return package
        raise PackageNotFound(name)

    def __iter__(self) -> Iterator[BasePackage]:
        return iter(self.packages)

    def __len__(self) -> int:
        return len(self.packages)


def get_package(name: str, packages: Iterable[Package], options: Any) -> Package:
    """Find ``name`` for the requested architecture, or for ``all`` and this machine's.

    Raises PackageNotFound when no package matches.
    """
    arch = getattr(options, "arch", None)
    for package in packages:
        if package.name != name:
            continue
        if arch is not None:
            if package.arch == arch:
                return package
        elif package.arch in ("all", ARCH):
            return package
    raise PackageNotFound(name)