"""Shared pytest fixtures for sqltemplate unit and integration tests."""
from __future__ import annotations

import sqlite3

import pytest

from sqltemplate import SQL, RawPolicy, Statement
from tests.fixtures import BOOKS, load_ddl


@pytest.fixture()
def simple() -> Statement:
    """``SELECT * FROM table WHERE column = ?`` bound to ``1234``."""
    return SQL(["SELECT * FROM table WHERE column = ", ""], 1234)


@pytest.fixture()
def nested_three() -> Statement:
    """Three levels of nesting, each level contributing one value."""
    s1 = SQL(["SELECT id FROM table WHERE key=", ""], "value1")
    s2 = SQL(["SELECT id FROM table2 WHERE key=", " AND key2 IN (", ")"], "value0", s1)
    return SQL(["SELECT id FROM table3 WHERE key=", " AND key3 IN (", ")"], "value2", s2)


@pytest.fixture()
def quoting_policy() -> RawPolicy:
    """Policy that quotes identifiers with double quotes."""
    return RawPolicy(quote_identifiers=True)


@pytest.fixture()
def db() -> sqlite3.Connection:
    conn = sqlite3.connect(":memory:")
    conn.executescript(load_ddl("sqlite"))
    conn.executemany("INSERT INTO books VALUES (?,?,?,?,?,?)", BOOKS)
    conn.executemany(
        "INSERT INTO reviews VALUES (?,?,?,?)",
        [
            (1, 1, 5, "2024-01-01 10:30"),
            (2, 1, 4, "2024-01-02 11:00"),
            (3, 2, 5, "2024-01-03 09:15"),
        ],
    )
    yield conn
    conn.close()
