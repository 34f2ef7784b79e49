import sqlite3

import pytest

from spkg.database import Database
from spkg.errors import DatabaseError, PackageDatabaseNotSynced, WorldDatabaseNotBuilt


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "main.x86_64.db"
    connection = sqlite3.connect(path)
    connection.execute("CREATE TABLE packages (name TEXT, version TEXT)")
    connection.execute("INSERT INTO packages VALUES ('vim', '9.1')")
    connection.commit()
    connection.close()
    return path


def test_open_existing_database(db_path):
    with Database(db_path) as database:
        rows = database.connection.execute("SELECT name, version FROM packages").fetchall()
        assert [(row["name"], row["version"]) for row in rows] == [("vim", "9.1")]
        assert database.location == str(db_path)


def test_missing_package_database(tmp_path):
    with pytest.raises(PackageDatabaseNotSynced):
        Database(tmp_path / "absent.db")


def test_missing_world_database(tmp_path):
    world = str(tmp_path / "world.db")
    with pytest.raises(WorldDatabaseNotBuilt):
        Database(world, world_database=world)


def test_missing_other_database_with_world_given(tmp_path):
    with pytest.raises(PackageDatabaseNotSynced):
        Database(tmp_path / "other.db", world_database=tmp_path / "world.db")


def test_missing_database_does_not_create_file(tmp_path):
    path = tmp_path / "absent.db"
    with pytest.raises(DatabaseError):
        Database(path)
    assert not path.exists()


def test_close_closes_connection(db_path):
    database = Database(db_path)
    database.close()
    with pytest.raises(sqlite3.ProgrammingError):
        database.connection.execute("SELECT 1")