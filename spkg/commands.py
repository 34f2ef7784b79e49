"""The package commands: info, spec, list, download and source installs."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from spkg.context import Context
from spkg.errors import NoPackageGiven, PackageNotAvailableAsSrcPkg
from spkg.package import BasePackage, BasePackageList, Package, PackageList, get_package
from spkg.specfile import Specfile, fetch_specfile
from spkg.strings import Strings
from spkg.utilities import BOLD, C_RESET, CYAN, GREEN, RED, RESET, UNDERLINE


def _package_list(context: Context) -> PackageList:
    return PackageList.from_repositories(context.config.repositories, context.files, context.strings)


def _yes_no(strings: Strings, flag: bool) -> str:
    return strings.load("Yes") if flag else f"{RED}{strings.load('No')}"


def _field(strings: Strings, key: str, value: object) -> str:
    return f"{strings.load(key)}: {GREEN}{BOLD}{value}{C_RESET}"


def info(package: str, options: Any, context: Context) -> Package:
    """Print what the repository database knows about ``package`` and return it."""
    strings = context.strings
    found = get_package(package, _package_list(context), options)

    print(
        f"{BOLD}{UNDERLINE}{CYAN}{strings.load('PackageInformationTitle')} "
        f"{found.name} ({found.version}){C_RESET}"
    )
    print(_field(strings, "Name", found.name))
    print(_field(strings, "Version", found.version))
    print(_field(strings, "Branch", found.branch))
    print(_field(strings, "Architecture", found.arch))
    print(f"{strings.load('SpecfileUrl')}: {GREEN}{BOLD}{CYAN}{found.specfile}{C_RESET}")
    source_url = f" {BOLD}({CYAN}{found.srcpkg_url}{C_RESET})" if found.metadata.srcpkg else ""
    print(f"{_field(strings, 'SrcPkgAvailable', _yes_no(strings, found.metadata.srcpkg))}{source_url}")
    print(_field(strings, "BinPkgAvailable", _yes_no(strings, found.metadata.binpkg)))
    return found


def spec(package: str, options: Any, context: Context) -> Specfile:
    """Fetch and print the specfile of ``package`` and return it."""
    strings = context.strings
    found = get_package(package, _package_list(context), options)
    data = fetch_specfile(found.specfile)

    print(
        f"{BOLD}{UNDERLINE}{CYAN}{strings.load('PackageSpecInformationTitle')} "
        f"{found.name} ({found.version}){C_RESET}"
    )
    print(_field(strings, "Name", data.package.name))
    print(_field(strings, "Version", data.package.version))
    print(_field(strings, "Description", data.package.description))
    print(_field(strings, "Author", data.package.author))
    print(_field(strings, "SrcPkgAvailable", _yes_no(strings, data.srcpkg is not None)))
    if data.srcpkg is not None:
        print(f"  {_field(strings, 'ComposeFile', data.srcpkg.compose)}")
    print(_field(strings, "BinPkgAvailable", _yes_no(strings, data.binpkg is not None)))
    if data.binpkg is not None:
        for arch, entry in (("x86_64", data.binpkg.x86_64), ("aarch64", data.binpkg.aarch64)):
            if entry is not None:
                print(f"  {arch}: {GREEN}{BOLD}{entry.url}{C_RESET}")
    return data


def _print_entry(entry: Package | BasePackage) -> None:
    print(
        f"{GREEN}{BOLD}{entry.name}{C_RESET} ({entry.version}) @{CYAN} {entry.branch}{RESET}/{entry.arch}"
    )


def list_packages(options: Any, context: Context) -> list[Package] | list[BasePackage]:
    """Print the installed packages, or the available ones optionally limited to one architecture."""
    if getattr(options, "installed", False):
        installed = list(BasePackageList.from_world(context.files))
        for entry in installed:
            _print_entry(entry)
        return installed

    packages = _package_list(context)
    arch = getattr(options, "arch", None)
    if arch is not None:
        packages = packages.filter_arch(arch)
    available = list(packages)
    for entry in available:
        _print_entry(entry)
    return available


def download(packages: Sequence[str], options: Any, context: Context) -> list[Package]:
    """Download the source package of every named package; returns the packages downloaded."""
    available = _package_list(context)
    downloaded = []
    for name in packages:
        found = get_package(name, available, options)
        if found.download(context.strings):
            downloaded.append(found)
    return downloaded


def _install_src(package: Package, data: Specfile) -> Package:
    if data.srcpkg is None:
        raise PackageNotAvailableAsSrcPkg(package.name)
    return package


def install_src(
    packages: Sequence[str],
    options: Any,
    context: Context,
    data: Specfile | None = None,
) -> list[Package]:
    """Install packages from source; ``data`` is used as the specfile of a single package.

    Raises NoPackageGiven for an empty list and PackageNotAvailableAsSrcPkg
    when a package has no source package.
    """
    if not packages:
        raise NoPackageGiven()
    available = _package_list(context)
    if len(packages) == 1:
        found = get_package(packages[0], available, options)
        specfile = data if data is not None else fetch_specfile(found.specfile)
        return [_install_src(found, specfile)]
    installed = []
    for name in packages:
        found = get_package(name, available, options)
        installed.append(_install_src(found, fetch_specfile(found.specfile)))
    return installed