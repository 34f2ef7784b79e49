"""HTTP helpers for sizes and downloads."""

from __future__ import annotations

from pathlib import Path

import requests


def _is_success(response: requests.Response) -> bool:
    return 200 <= response.status_code < 300


def remote_header(url: str) -> int:
    """Return the Content-Length of ``url``, or 0 when it cannot be determined."""
    try:
        response = requests.head(url, allow_redirects=True)
    except requests.RequestException:
        return 0
    if not _is_success(response):
        return 0
    length = response.headers.get("Content-Length")
    if length is None:
        return 0
    try:
        value = int(length.strip())
    except ValueError:
        return 0
    return value if value >= 0 else 0


def file_download(url: str, filename: str | Path) -> bool:
    """Download ``url`` into ``filename``.

    Returns True when the file was written and False when the server did not
    answer with success. Network failures raise requests exceptions.
    """
    response = requests.get(url)
    if not _is_success(response):
        return False
    Path(filename).write_bytes(response.content)
    return True