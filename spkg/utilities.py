"""Small helpers for files, URLs and the terminal."""

from __future__ import annotations

import shutil
import sys
from pathlib import Path
from typing import TextIO
from urllib.parse import urlsplit

RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
CYAN = "\x1b[36m"
BOLD = "\x1b[1m"
UNDERLINE = "\x1b[4m"
RESET = "\x1b[39m"
C_RESET = "\x1b[0m"


def open_file(path: str | Path) -> str:
    """Return the whole text of a file."""
    return Path(path).read_text(encoding="utf-8")


def delete_last_line(stream: TextIO | None = None) -> None:
    """Move the cursor up one line and clear it."""
    out = stream if stream is not None else sys.stdout
    out.write("\x1b[1A")
    out.write("\x1b[2K")
    out.flush()


def get_basename(path: str) -> str | None:
    """Return the last component of ``path``, or None when there is none."""
    name = Path(path).name
    if name in ("", ".."):
        return None
    return name


def get_url_basename(url: str) -> tuple[str, str]:
    """Return ``(scheme://host, second path segment)`` of a URL.

    Raises ValueError when the URL cannot be parsed, has no host or has
    fewer than two path segments.
    """
    try:
        parsed = urlsplit(url)
        host = parsed.hostname
    except ValueError as exc:
        raise ValueError(f"Failed to parse URL: {exc}") from exc
    if not parsed.scheme:
        raise ValueError("Failed to parse URL: relative URL without a base")
    if not host:
        raise ValueError("Invalid URL: no host found")
    path = parsed.path or "/"
    segments = path[1:].split("/") if path.startswith("/") else []
    if len(segments) < 2:
        raise ValueError("Invalid URL: not enough path segments")
    return f"{parsed.scheme}://{host}", segments[1]


def copy_dir_all(src: str | Path, dst: str | Path) -> None:
    """Copy the contents of ``src`` into ``dst`` recursively, skipping ``_data`` directories."""
    target = Path(dst)
    for entry in Path(src).iterdir():
        if entry.is_dir() and entry.name == "_data":
            continue
        destination = target / entry.name
        if entry.is_file():
            shutil.copy(entry, destination)
        elif entry.is_dir():
            destination.mkdir(parents=True, exist_ok=True)
            copy_dir_all(entry, destination)