"""Utilities for handing statements to external query APIs.

SQLAlchemy converter
--------------------
:func:`to_sqlalchemy` renders a :class:`~sqltemplate.statement.statement.Statement`
with ``:name`` placeholders and wraps it in a :func:`sqlalchemy.text` clause
with the values attached as bound parameters.

Install the optional dependency before using this module::

    pip install "sqltemplate[sqlalchemy]"

Example::

    from sqlalchemy import create_engine
    from sqltemplate import SQL
    from sqltemplate.converters import to_sqlalchemy

    engine = create_engine("sqlite:///books.db")
    query = SQL(["SELECT * FROM books WHERE author = ", ""], author)
    with engine.connect() as conn:
        rows = conn.execute(to_sqlalchemy(query)).all()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqltemplate.render.named import NamedStyle
from sqltemplate.statement.statement import Statement

if TYPE_CHECKING:
    from sqlalchemy import TextClause


class SQLAlchemyTextStyle(NamedStyle):
    """Named style whose literal colons survive :func:`sqlalchemy.text`.

    ``text()`` treats any ``:word`` as a bind parameter, so colons in the
    literal segments (``'10:30'``, ``::int`` casts) are escaped as ``\\:``.
    ``text()`` also ignores a ``:name`` preceded by a backslash, so that
    character is separated from the generated name as well::

        SQL(["SELECT ARRAY[1,2][1:", "]"], 2)   # SELECT ARRAY[1,2][1\\: :p1]
    """

    def escape_literal(self, segment: str) -> str:
        return segment.replace(":", "\\:")

    def joins_preceding(self, char: str) -> bool:
        return char == "\\" or super().joins_preceding(char)


def to_sqlalchemy(statement: Statement, *, prefix: str = "p") -> TextClause:
    """Return ``statement`` as a SQLAlchemy ``TextClause``.

    Args:
        statement: The statement to convert; its mode does not matter.
        prefix: Prefix for the generated bind parameter names
            (``:p1``, ``:p2``, …).

    Returns:
        A :class:`sqlalchemy.sql.expression.TextClause` with every value
        attached through :meth:`~sqlalchemy.sql.expression.TextClause.bindparams`.
    """
    from sqlalchemy import text

    rendered = statement.render(SQLAlchemyTextStyle(prefix))
    clause = text(rendered.sql)
    if rendered.params:
        clause = clause.bindparams(**rendered.params)
    return clause
