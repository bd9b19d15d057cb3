import sqlite3

import pytest

from blazestore.adapters import (
    AdapterConfigurationError,
    AdapterConnectionError,
    ConnectionConfig,
    SQLiteAdapter,
)


@pytest.fixture
def adapter():
    adapter = SQLiteAdapter()
    adapter.connect(ConnectionConfig(url="sqlite:///:memory:"))
    yield adapter
    adapter.close()


def test_connect_creates_database_file(tmp_path):
    adapter = SQLiteAdapter()
    config = ConnectionConfig(url=f"sqlite:///{tmp_path / 'connect.db'}")
    connection = adapter.connect(config)
    assert isinstance(connection, sqlite3.Connection)
    assert (tmp_path / "connect.db").exists()
    adapter.close()


def test_execute_with_parameters(adapter):
    adapter.execute("CREATE TABLE sample (value TEXT)")
    adapter.execute("INSERT INTO sample (value) VALUES (?)", ("hello",))
    row = adapter.execute("SELECT value FROM sample").fetchone()
    assert row[0] == "hello"


def test_ping(adapter):
    adapter.ping()


def test_create_and_use_database_are_noops(adapter):
    adapter.create_database("shop")
    adapter.use_database("shop")
    assert adapter.execute("SELECT 1").fetchone()[0] == 1


def test_requires_connection():
    adapter = SQLiteAdapter()
    with pytest.raises(AdapterConnectionError):
        adapter.execute("SELECT 1")
    with pytest.raises(AdapterConnectionError):
        adapter.ping()


def test_normalize_path():
    assert SQLiteAdapter._normalize_path("sqlite:///:memory:") == ":memory:"
    assert SQLiteAdapter._normalize_path("sqlite:///data/app.db") == "data/app.db"
    assert SQLiteAdapter._normalize_path("app.db") == "app.db"


def test_normalize_path_rejects_other_schemes():
    with pytest.raises(AdapterConfigurationError):
        SQLiteAdapter._normalize_path("postgres:///shop?sslmode=disable")


def test_connect_failure_is_wrapped(tmp_path):
    adapter = SQLiteAdapter()
    with pytest.raises(AdapterConnectionError) as excinfo:
        adapter.connect(ConnectionConfig(url=str(tmp_path)))
    assert isinstance(excinfo.value.__cause__, sqlite3.Error)
