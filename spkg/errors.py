"""Errors spkg reports to the user."""

from __future__ import annotations

from typing import ClassVar

from spkg.strings import Strings
from spkg.utilities import BOLD, C_RESET, RED

FORMAT = f"{RED}{BOLD}E: {C_RESET}"


class SpkgError(Exception):
    """Base of every error spkg reports; ``render`` gives the translated message."""

    key: ClassVar[str] = ""

    def render(self, strings: Strings) -> str:
        return f"{FORMAT}{strings.load(self.key)}"


class InvalidArgument(SpkgError):
    key = "NoArgument"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NoPackageGiven(SpkgError):
    key = "NoPackageGiven"


class _PackageError(SpkgError):
    def __init__(self, package: str) -> None:
        super().__init__(package)
        self.package = package

    def render(self, strings: Strings) -> str:
        return f"{FORMAT}{strings.load_with_params(self.key, [self.package])}"


class PackageNotFound(_PackageError):
    key = "PackageNotFound"


class PackageNotAvailable(_PackageError):
    key = "PackageNotAvailable"


class PackageNotAvailableAsBinPkg(_PackageError):
    key = "PackageNotAvailableAsBinPkg"


class PackageNotAvailableAsSrcPkg(_PackageError):
    key = "PackageNotAvailableAsSrcPkg"


class DatabaseError(SpkgError):
    """A package database could not be opened."""

    def render(self, strings: Strings) -> str:
        return ""


class WorldDatabaseNotBuilt(DatabaseError):
    pass


class PackageDatabaseNotSynced(DatabaseError):
    pass


class PermissionsError(SpkgError):
    """spkg lacks the permissions for a filesystem operation."""

    def render(self, strings: Strings) -> str:
        return ""


class MissingPermissionsPackageDatabaseUpdate(PermissionsError):
    pass


class InvalidConfigError(SpkgError):
    """The system configuration file could not be understood."""

    key = "InvalidConfig"

    def __init__(self, reason: str = "") -> None:
        super().__init__(reason)
        self.reason = reason

    def render(self, strings: Strings) -> str:
        return strings.load(self.key)