"""Package metadata flags stored as ``s1:b0`` style strings."""

from __future__ import annotations

from dataclasses import dataclass


class MetadataParseError(ValueError):
    def __init__(self, message: str = "Invalid format") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Metadata:
    """Whether a package is offered as a source and as a binary package."""

    srcpkg: bool
    binpkg: bool

    @classmethod
    def parse(cls, text: str) -> Metadata:
        """Parse strictly; any unknown part raises MetadataParseError."""
        return cls._from_parts(text, strict=True)

    @classmethod
    def from_row_value(cls, text: str) -> Metadata:
        """Parse leniently, ignoring unknown parts, as done for database rows."""
        return cls._from_parts(text, strict=False)

    @classmethod
    def _from_parts(cls, text: str, *, strict: bool) -> Metadata:
        srcpkg = binpkg = False
        for part in text.split(":"):
            if part in ("s1", "s0"):
                srcpkg = part == "s1"
            elif part in ("b1", "b0"):
                binpkg = part == "b1"
            elif strict:
                raise MetadataParseError()
        return cls(srcpkg=srcpkg, binpkg=binpkg)