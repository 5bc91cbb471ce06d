"""sqltemplate – composable SQL statements from templates.

Bind values, don't format them.

Public API
----------
``SQL``
    Build a :class:`Statement` from literal segments and interpolated values
    (or from a template object such as a PEP 750 t-string).

``sql``
    Build a :class:`Statement` from a ``str.format``-style template.

``raw`` / ``keyword`` / ``identifier``
    Produce :class:`RawFragment` objects that are spliced verbatim instead of
    bound; ``keyword`` and ``identifier`` validate against a
    :class:`RawPolicy` first.

Every statement renders lazily in several placeholder conventions::

    query = SQL(["SELECT * FROM books WHERE author = ", " AND year > ", ""],
                author, 2000)
    cursor.execute(query.sql, query.values)        # '?' drivers
    await conn.fetch(query.text, *query.values)    # '$n' drivers
    cursor.execute(*query.render("format").as_tuple())  # '%s' drivers

Extensibility
-------------
New placeholder styles can be registered via::

    from sqltemplate.render.registry import StyleFactory

    @StyleFactory.register("oracle")
    class OracleStyle(PlaceholderStyle):
        ...

After registration, ``Statement.render("oracle")`` picks it up.
"""

from __future__ import annotations

import logging

from sqltemplate.converters import to_sqlalchemy
from sqltemplate.errors import (
    InvalidIdentifierError,
    InvalidKeywordError,
    InvalidValueError,
    SQLTemplateError,
    TemplateShapeError,
    UnknownStyleError,
)
from sqltemplate.render.base import PlaceholderStyle, RenderedSQL
from sqltemplate.render.format import FormatStyle
from sqltemplate.render.named import NamedStyle
from sqltemplate.render.numeric import NumericStyle
from sqltemplate.render.qmark import QmarkStyle
from sqltemplate.render.registry import StyleFactory
from sqltemplate.schema.policy import DEFAULT_POLICY, RawPolicy
from sqltemplate.statement.builder import StatementBuilder
from sqltemplate.statement.fragments import RawFragment
from sqltemplate.statement.raw import identifier, keyword, raw
from sqltemplate.statement.statement import Statement
from sqltemplate.statement.template import SQL, sql
from sqltemplate.statement.values import ValueMode

logging.getLogger(__name__).addHandler(logging.NullHandler())

# ---------------------------------------------------------------------------
# Register built-in placeholder styles with StyleFactory
# ---------------------------------------------------------------------------

StyleFactory.register_class("qmark", QmarkStyle)
StyleFactory.register_class("numeric", NumericStyle)
StyleFactory.register_class("format", FormatStyle)
StyleFactory.register_class("named", NamedStyle)

__all__ = [
    # Construction
    "SQL",
    "sql",
    "Statement",
    "StatementBuilder",
    "ValueMode",
    # Raw fragments
    "raw",
    "keyword",
    "identifier",
    "RawFragment",
    "RawPolicy",
    "DEFAULT_POLICY",
    # Rendering
    "RenderedSQL",
    "PlaceholderStyle",
    "StyleFactory",
    "QmarkStyle",
    "NumericStyle",
    "FormatStyle",
    "NamedStyle",
    # Converters
    "to_sqlalchemy",
    # Errors
    "SQLTemplateError",
    "TemplateShapeError",
    "InvalidValueError",
    "InvalidKeywordError",
    "InvalidIdentifierError",
    "UnknownStyleError",
]
