"""Refreshing the local copies of the repository package databases."""

from __future__ import annotations

import sys
import time
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import requests

from spkg.config import RepositoryInfo
from spkg.context import Context
from spkg.errors import MissingPermissionsPackageDatabaseUpdate
from spkg.http import remote_header
from spkg.paths import format_size
from spkg.spinners import SimpleSpinner
from spkg.utilities import BOLD, C_RESET, CYAN, GREEN, RED, YELLOW, delete_last_line

_CHUNK_SIZE = 64 * 1024


def configured_databases(repositories: Mapping[str, RepositoryInfo]) -> list[str]:
    """Return the database file names the configuration asks for, ``<repo>.<arch>.db``."""
    return [
        f"{name}.{arch}.db"
        for name, info in repositories.items()
        for arch in info.architectures()
    ]


def prune_databases(mirrors: str | Path, repositories: Mapping[str, RepositoryInfo]) -> list[str]:
    """Delete database files in ``mirrors`` that no configured repository uses.

    Returns the names of the removed files.
    """
    wanted = set(configured_databases(repositories))
    removed = []
    for entry in sorted(Path(mirrors).iterdir()):
        if entry.is_file() and entry.name not in wanted:
            entry.unlink()
            removed.append(entry.name)
    return removed


def _permission_denied(spinner: SimpleSpinner, exc: OSError) -> MissingPermissionsPackageDatabaseUpdate:
    spinner.stop()
    delete_last_line()
    error = MissingPermissionsPackageDatabaseUpdate()
    error.__cause__ = exc
    return error


def _store(response: requests.Response, local: str, spinner: SimpleSpinner) -> None:
    try:
        database = open(local, "wb")
    except OSError as exc:
        raise _permission_denied(spinner, exc) from exc
    with database:
        try:
            for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
                try:
                    database.write(chunk)
                except OSError as exc:
                    raise _permission_denied(spinner, exc) from exc
        except requests.RequestException:
            spinner.stop()
            raise


def sync(options: Any, context: Context) -> tuple[int, int]:
    """Download every configured package database into the mirrors directory.

    Returns ``(succeeded, failed)``. When every download failed the failure is
    reported and SystemExit(1) is raised.
    """
    start = time.monotonic()
    strings = context.strings
    mirrors = context.directories.mirrors
    repositories = context.config.repositories
    label = strings.load("SyncingPackageDatabase")

    prune_databases(mirrors, repositories)

    succeeded = failed = 0
    for name, info in repositories.items():
        for arch in info.architectures():
            remote = f"{info.url}/packages.{arch}.db"
            local = f"{mirrors}{name}.{arch}.db"
            size = remote_header(remote)

            spinner = SimpleSpinner()
            spinner.start(f"{label} {CYAN}{BOLD}{info.url} {GREEN}{arch}{C_RESET} ({name}) ...{C_RESET}")

            try:
                response = requests.get(remote, stream=True)
            except requests.RequestException:
                spinner.stop()
                delete_last_line()
                failed += 1
                continue

            try:
                if not 200 <= response.status_code < 300:
                    spinner.stop_with_message(
                        f"{RED}{BOLD} × {C_RESET} {label} {CYAN}{BOLD}{info.url} "
                        f"{GREEN}{arch}{C_RESET} ({name}){C_RESET}"
                    )
                    failed += 1
                    continue
                _store(response, local, spinner)
            finally:
                response.close()

            spinner.stop_with_message(
                f"{GREEN}{BOLD} ✓ {C_RESET} {label} {CYAN}{BOLD}{info.url} {GREEN}{arch}{C_RESET} "
                f"({name}) ({format_size(size)}) {C_RESET}"
            )
            succeeded += 1

    if failed and not succeeded:
        print(f"{strings.load('UnsuccessfulSyncingPackageDatabase')}{C_RESET}", file=sys.stderr)
        raise SystemExit(1)
    if failed:
        print(
            f"{YELLOW}{BOLD} ! {C_RESET} {strings.load('AtLeastOneUnsuccessfulSyncingPackageDatabase')}{C_RESET}",
            file=sys.stderr,
        )

    elapsed = time.monotonic() - start
    print(strings.load_with_params("SuccessSyncingPackageDatabase", [f"{elapsed:.2f}"]))
    return succeeded, failed