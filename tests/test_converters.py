"""Unit tests for sqltemplate.converters.to_sqlalchemy."""

from __future__ import annotations

import pytest
from sqlalchemy import TextClause, create_engine, text
from sqlalchemy.engine import Engine

from sqltemplate import SQL, keyword, sql
from sqltemplate.converters import SQLAlchemyTextStyle, to_sqlalchemy
from tests.fixtures import BOOKS, load_ddl


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def engine() -> Engine:
    """In-memory SQLite engine seeded with the books fixture."""
    engine = create_engine("sqlite:///:memory:")
    with engine.begin() as conn:
        for statement in load_ddl("sqlite").split(";"):
            if statement.strip():
                conn.execute(text(statement))
        conn.execute(
            text(
                "INSERT INTO books VALUES "
                "(:book_id, :title, :author, :year, :in_print, :rating)"
            ),
            [
                dict(zip(("book_id", "title", "author", "year", "in_print", "rating"), row))
                for row in BOOKS
            ],
        )
    return engine


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def test_returns_text_clause():
    clause = to_sqlalchemy(SQL(["SELECT * FROM books WHERE book_id = ", ""], 1))
    assert isinstance(clause, TextClause)
    assert set(clause._bindparams) == {"p1"}


def test_statement_without_values():
    clause = to_sqlalchemy(SQL("SELECT 1"))
    assert str(clause) == "SELECT 1"
    assert clause._bindparams == {}


def test_colons_in_literals_are_escaped():
    style = SQLAlchemyTextStyle()
    rendered = style.render(["SELECT '10:30' = ", ""], ["x"])
    assert rendered.sql == "SELECT '10\\:30' = :p1"
    assert rendered.params == {"p1": "x"}


def test_colon_before_placeholder_keeps_parameter():
    clause = to_sqlalchemy(SQL(["SELECT ARRAY[1,2][1:", "]"], 2))
    assert set(clause._bindparams) == {"p1"}
    assert str(clause) == "SELECT ARRAY[1,2][1: :p1]"


@pytest.mark.parametrize(
    "segments, expected",
    [
        (["SELECT x", ""], "SELECT x :p1"),
        (["SELECT \\", ""], "SELECT \\ :p1"),
        (["SELECT ", "AS y"], "SELECT :p1 AS y"),
    ],
)
def test_adjacent_literal_text_is_separated(segments, expected):
    rendered = SQLAlchemyTextStyle().render(segments, [1])
    assert rendered.sql == expected
    clause = to_sqlalchemy(SQL(segments, 1))
    assert set(clause._bindparams) == {"p1"}


def test_adjacent_placeholders_keep_both_parameters():
    clause = to_sqlalchemy(SQL(["VALUES (", "", ")"], 1, 2))
    assert set(clause._bindparams) == {"p1", "p2"}


def test_custom_prefix():
    clause = to_sqlalchemy(SQL(["a = ", ""], 1), prefix="arg")
    assert set(clause._bindparams) == {"arg1"}


# ---------------------------------------------------------------------------
# Execution
# ---------------------------------------------------------------------------


class TestExecution:
    def test_bound_values(self, engine):
        query = sql(
            "SELECT title FROM books WHERE author = {} ORDER BY year {}",
            "J. R. R. Tolkien",
            keyword("asc"),
        )
        with engine.connect() as conn:
            rows = conn.execute(to_sqlalchemy(query)).all()
        assert [r[0] for r in rows] == ["The Hobbit", "Silmarillion"]

    def test_literal_colon_survives(self, engine):
        query = SQL(["SELECT '10:30' AS t, title FROM books WHERE book_id = ", ""], 2)
        with engine.connect() as conn:
            row = conn.execute(to_sqlalchemy(query)).one()
        assert row == ("10:30", "The Hobbit")

    def test_bind_mode_statement(self, engine):
        query = SQL(["SELECT COUNT(*) FROM books WHERE in_print = ", ""], 0).set_bind_mode()
        with engine.connect() as conn:
            assert conn.execute(to_sqlalchemy(query)).scalar() == 2

    def test_keyword_directly_after_placeholder(self, engine):
        query = SQL(["SELECT title FROM books WHERE book_id =", "AND in_print = 1"], 2)
        with engine.connect() as conn:
            assert conn.execute(to_sqlalchemy(query)).scalar() == "The Hobbit"

    def test_falsy_value(self, engine):
        query = SQL(["SELECT title FROM books WHERE rating = ", ""], 0.0)
        with engine.connect() as conn:
            assert conn.execute(to_sqlalchemy(query)).scalar() == "100% Pure"
