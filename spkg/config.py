"""The system configuration file."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from spkg.errors import InvalidConfigError
from spkg.utilities import open_file


@dataclass(frozen=True)
class RepositoryInfo:
    """A configured repository and the architectures it serves."""

    url: str
    arch: str | tuple[str, ...]

    def architectures(self) -> tuple[str, ...]:
        if isinstance(self.arch, str):
            return (self.arch,)
        return tuple(self.arch)


@dataclass(frozen=True)
class Config:
    language: str
    main_url: str
    build_directory: str
    old_repo: Mapping[str, str] = field(default_factory=dict)
    repositories: Mapping[str, RepositoryInfo] = field(default_factory=dict)

    @classmethod
    def from_yaml(cls, text: str) -> Config:
        """Parse configuration text, raising InvalidConfigError when it does not fit."""
        try:
            data = yaml.load(text, Loader=yaml.BaseLoader)
        except yaml.YAMLError as exc:
            raise InvalidConfigError(str(exc)) from exc
        data = _mapping(data, "configuration")
        old_repo = {
            name: _string(value, f"old_repo.{name}")
            for name, value in _mapping(data.get("old_repo"), "old_repo").items()
        }
        repositories = {
            name: _repository(value, name)
            for name, value in _mapping(data.get("repositories"), "repositories").items()
        }
        return cls(
            language=_string(data.get("language"), "language"),
            main_url=_string(data.get("main_url"), "main_url"),
            build_directory=_string(data.get("build_directory"), "build_directory"),
            old_repo=old_repo,
            repositories=repositories,
        )

    @classmethod
    def load(cls, path: str | Path) -> Config:
        return cls.from_yaml(open_file(path))


def _mapping(value: Any, where: str) -> dict:
    if not isinstance(value, dict):
        raise InvalidConfigError(f"{where} must be a mapping")
    return value


def _string(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise InvalidConfigError(f"{where} must be a string")
    return value


def _repository(value: Any, name: str) -> RepositoryInfo:
    info = _mapping(value, f"repositories.{name}")
    arch = info.get("arch")
    if isinstance(arch, list):
        arch = tuple(_string(item, f"repositories.{name}.arch") for item in arch)
    else:
        arch = _string(arch, f"repositories.{name}.arch")
    return RepositoryInfo(url=_string(info.get("url"), f"repositories.{name}.url"), arch=arch)