from blazestore.dialects import SQLiteDialect


def test_sqlite_identifier_quoting():
    dialect = SQLiteDialect()
    assert dialect.quote_identifier("table") == '"table"'
    assert dialect.quote_identifier('bad"name') == '"bad""name"'


def test_sqlite_limit_clause():
    dialect = SQLiteDialect()
    assert dialect.limit_clause(10) == "LIMIT 10"
    assert dialect.limit_clause(1) == "LIMIT 1"


def test_sqlite_table_fragments():
    dialect = SQLiteDialect()
    assert dialect.text_type(42) == "TEXT"
    assert dialect.autoincrement_primary_key("id") == '"id" INTEGER PRIMARY KEY AUTOINCREMENT'
    assert dialect.truncate_sql("events") == 'DELETE FROM "events"'
    rendered = dialect.render_column_definition("name", "TEXT", nullable=False)
    assert rendered == '"name" TEXT NOT NULL'
