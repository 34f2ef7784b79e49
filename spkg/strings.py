"""Translated user-facing strings loaded from YAML language files."""

from __future__ import annotations

import itertools
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from spkg.paths import SpkgDirectories

FALLBACK_LANGUAGE = "en_US"

_PLACEHOLDER = re.compile(r"\{(\d*)\}")


@dataclass(frozen=True)
class Strings:
    """A table of translated strings for one language.

    Templates may contain ``{}`` placeholders, filled in order, or ``{N}``
    placeholders, filled by position.
    """

    language: str
    entries: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_yaml(cls, language: str, text: str) -> Strings:
        """Parse a language file; a top-level section named after the language is used when present."""
        try:
            data = yaml.load(text, Loader=yaml.BaseLoader)
        except yaml.YAMLError as exc:
            raise ValueError(f"invalid language file: {exc}") from exc
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("language file must be a mapping")
        section = data.get(language)
        if isinstance(section, dict):
            data = section
        entries = {key: value for key, value in data.items() if isinstance(value, str)}
        return cls(language, entries)

    @classmethod
    def from_file(cls, language: str, path: str | Path) -> Strings:
        return cls.from_yaml(language, Path(path).read_text(encoding="utf-8"))

    def load(self, key: str) -> str:
        """Return the string for ``key``, or the key itself when it is missing."""
        return self.entries.get(key, key)

    def load_with_params(self, key: str, params: Iterable[object]) -> str:
        """Return the string for ``key`` with its placeholders filled from ``params``."""
        values = [str(value) for value in params]
        counter = itertools.count()

        def substitute(match: re.Match[str]) -> str:
            index = int(match.group(1)) if match.group(1) else next(counter)
            return values[index] if index < len(values) else match.group(0)

        return _PLACEHOLDER.sub(substitute, self.load(key))


def load_strings(directories: SpkgDirectories, language: str) -> Strings:
    """Load the language file for ``language`` from the language directory."""
    return Strings.from_file(language, f"{directories.language_files}{language}.yml")


def load_fallback_strings(directories: SpkgDirectories) -> Strings:
    """Load the English strings used when the configuration cannot be read."""
    return load_strings(directories, FALLBACK_LANGUAGE)