"""Read access to the SQLite package databases."""

from __future__ import annotations

import sqlite3
from pathlib import Path

from spkg.errors import PackageDatabaseNotSynced, WorldDatabaseNotBuilt


class Database:
    """An open SQLite database that must already exist on disk."""

    def __init__(self, path: str | Path, world_database: str | Path | None = None) -> None:
        self.location = str(path)
        uri = Path(self.location).resolve().as_uri() + "?mode=rw"
        try:
            self.connection = sqlite3.connect(uri, uri=True)
        except sqlite3.Error as exc:
            if world_database is not None and self.location == str(world_database):
                raise WorldDatabaseNotBuilt() from exc
            raise PackageDatabaseNotSynced() from exc
        self.connection.row_factory = sqlite3.Row

    def close(self) -> None:
        self.connection.close()

    def __enter__(self) -> Database:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()