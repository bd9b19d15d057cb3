import logging

import pytest

from blazestore import (
    AdapterConfigurationError,
    AdapterConnectionError,
    ConnectionConfig,
    Host,
    PostgresAdapter,
    SQLiteAdapter,
    check_connection,
    connect,
)


class FakeCursor:
    def __init__(self, connection):
        self.connection = connection

    def execute(self, sql, params=None):
        if self.connection.fail:
            raise RuntimeError("no reply")
        self.connection.executed.append(sql)

    def fetchone(self):
        return None


class FakeConnection:
    def __init__(self, dsn, fail):
        self.dsn = dsn
        self.fail = fail
        self.autocommit = False
        self.closed = False
        self.executed = []

    def cursor(self):
        return FakeCursor(self)

    def close(self):
        self.closed = True


class FakeDriver:
    def __init__(self):
        self.connections = []
        self.fail_queries = False
        self.refuse = False

    def connect(self, dsn, **options):
        if self.refuse:
            raise OSError("connection refused")
        conn = FakeConnection(dsn, self.fail_queries)
        self.connections.append(conn)
        return conn


@pytest.fixture(autouse=True)
def _quiet(monkeypatch):
    monkeypatch.delenv("BLAZESTORE_VERBOSE", raising=False)


@pytest.fixture
def fake_driver(monkeypatch):
    driver = FakeDriver()
    monkeypatch.setattr("blazestore.adapters.postgres._load_driver", lambda: driver)
    return driver


def test_sqlite_host_uses_default_database():
    with Host(SQLiteAdapter(), ConnectionConfig(url="sqlite:///:memory:")) as host:
        assert host.database == "test"
        host.ping()


def test_host_closes_on_exit():
    adapter = SQLiteAdapter()
    with Host(adapter, ConnectionConfig(url="sqlite:///:memory:")):
        pass
    with pytest.raises(AdapterConnectionError):
        adapter.ping()


def test_verbose_host_logs_database_selection(caplog):
    caplog.set_level(logging.INFO, logger="blazestore.host")
    host = Host(SQLiteAdapter(), ConnectionConfig(url="sqlite:///:memory:", verbose=True))
    host.select_database("archive")
    host.close()
    messages = [record.getMessage() for record in caplog.records]
    assert "Created database test" in messages
    assert "Using database test" in messages
    assert "Using database archive" in messages


def test_select_database_rejects_bad_names():
    with Host(SQLiteAdapter(), ConnectionConfig(url="sqlite:///:memory:")) as host:
        with pytest.raises(ValueError):
            host.select_database("shop; DROP DATABASE prod")
        assert host.database == "test"


def test_postgres_host_connects_creates_and_switches(fake_driver):
    host = Host.from_connection_string("user:pw@localhost/shop")
    first, second = fake_driver.connections
    assert first.dsn == "postgres://user:pw@localhost:5432/postgres?sslmode=disable"
    assert first.executed == [
        "SELECT 1",
        "SELECT 1 FROM pg_database WHERE datname = %s",
        "CREATE DATABASE \"shop\" ENCODING 'UTF8'",
    ]
    assert first.closed is True
    assert second.dsn == "postgres://user:pw@localhost:5432/shop?sslmode=disable"
    assert host.database == "shop"
    host.close()
    assert second.closed is True


def test_connect_defaults_to_test_database(fake_driver):
    host = connect()
    assert fake_driver.connections[0].dsn == "postgres:///postgres?sslmode=disable"
    assert fake_driver.connections[-1].dsn == "postgres:///test?sslmode=disable"
    host.close()


def test_host_ping_failure_closes_connection(fake_driver):
    fake_driver.fail_queries = True
    with pytest.raises(AdapterConnectionError):
        Host.from_connection_string("localhost/shop")
    assert fake_driver.connections[0].closed is True


def test_check_connection_ok(fake_driver, caplog):
    caplog.set_level(logging.INFO, logger="blazestore.host")
    check_connection("localhost/shop", verbose=True)
    assert fake_driver.connections[0].closed is True
    assert "Ping: ok" in [record.getMessage() for record in caplog.records]


def test_check_connection_failure(fake_driver, caplog):
    caplog.set_level(logging.INFO, logger="blazestore.host")
    fake_driver.refuse = True
    with pytest.raises(AdapterConnectionError):
        check_connection("localhost/shop", adapter=PostgresAdapter(), verbose=True)
    assert "Ping: failed" in [record.getMessage() for record in caplog.records]


def test_check_connection_is_quiet_by_default(fake_driver, caplog):
    caplog.set_level(logging.INFO, logger="blazestore.host")
    check_connection()
    assert not [record for record in caplog.records if record.name == "blazestore.host"]


def test_connect_rejects_connection_string_for_sqlite():
    with pytest.raises(AdapterConfigurationError):
        connect("/shop", adapter=SQLiteAdapter())
