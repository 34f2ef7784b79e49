"""Package specfiles describing how a package can be installed."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests
import yaml

_NULLS = {"", "~", "null", "Null", "NULL"}


@dataclass(frozen=True)
class SpecfilePackage:
    name: str
    version: str
    description: str
    author: str


@dataclass(frozen=True)
class SpecfileSrcPkg:
    compose: str


@dataclass(frozen=True)
class SpecfileBinPkgArch:
    url: str


@dataclass(frozen=True)
class SpecfileBinPkg:
    x86_64: SpecfileBinPkgArch | None = None
    aarch64: SpecfileBinPkgArch | None = None


@dataclass(frozen=True)
class Specfile:
    package: SpecfilePackage
    srcpkg: SpecfileSrcPkg | None = None
    binpkg: SpecfileBinPkg | None = None

    @classmethod
    def from_yaml(cls, text: str) -> Specfile:
        """Parse specfile text, raising ValueError when it does not fit."""
        try:
            data = yaml.load(text, Loader=yaml.BaseLoader)
        except yaml.YAMLError as exc:
            raise ValueError(f"invalid specfile: {exc}") from exc
        data = _mapping(data, "specfile")
        package = _mapping(data.get("package"), "package")
        srcpkg = _optional(data, "srcpkg")
        binpkg = _optional(data, "binpkg")
        return cls(
            package=SpecfilePackage(
                name=_text(package, "name", "package"),
                version=_text(package, "version", "package"),
                description=_text(package, "description", "package"),
                author=_text(package, "author", "package"),
            ),
            srcpkg=None
            if srcpkg is None
            else SpecfileSrcPkg(compose=_text(_mapping(srcpkg, "srcpkg"), "compose", "srcpkg")),
            binpkg=None if binpkg is None else _binpkg(_mapping(binpkg, "binpkg")),
        )

    def binpkg_available(self, arch: str) -> bool:
        return self.binpkg_url(arch) is not None

    def binpkg_url(self, arch: str) -> str | None:
        """Return the binary package URL for ``arch``, or None when there is none."""
        if self.binpkg is None:
            return None
        entry = {"x86_64": self.binpkg.x86_64, "aarch64": self.binpkg.aarch64}.get(arch)
        return entry.url if entry is not None else None


def fetch_specfile(url: str) -> Specfile:
    """Download and parse the specfile at ``url``; ConnectionError when it is not reachable."""
    response = requests.get(url)
    if not 200 <= response.status_code < 300:
        raise ConnectionError(f"Err not reachable: {url}")
    return Specfile.from_yaml(response.text)


def _mapping(value: Any, where: str) -> dict:
    if not isinstance(value, dict):
        raise ValueError(f"invalid specfile: {where} must be a mapping")
    return value


def _text(mapping: dict, key: str, where: str) -> str:
    value = mapping.get(key)
    if not isinstance(value, str):
        raise ValueError(f"invalid specfile: {where}.{key} must be a string")
    return value


def _optional(mapping: dict, key: str) -> Any:
    value = mapping.get(key)
    if value is None or (isinstance(value, str) and value in _NULLS):
        return None
    return value


def _binpkg(mapping: dict) -> SpecfileBinPkg:
    def arch_entry(key: str) -> SpecfileBinPkgArch | None:
        value = _optional(mapping, key)
        if value is None:
            return None
        return SpecfileBinPkgArch(url=_text(_mapping(value, f"binpkg.{key}"), "url", f"binpkg.{key}"))

    return SpecfileBinPkg(x86_64=arch_entry("x86_64"), aarch64=arch_entry("aarch64"))