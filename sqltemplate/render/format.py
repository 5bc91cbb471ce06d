"""Printf-style placeholder style."""
from __future__ import annotations

from sqltemplate.render.base import PlaceholderStyle


class FormatStyle(PlaceholderStyle):
    """Renders placeholders as ``%s``.

    Parameter style: ``format`` – compatible with ``psycopg``, ``psycopg2``,
    ``PyMySQL`` and ``mysql-connector-python`` positional execution.

    Note: these drivers treat every ``%`` in the query as a format directive,
    so literal ``%`` characters (e.g. in ``LIKE 'a%'``) are doubled.
    """

    @property
    def style_name(self) -> str:
        return "format"

    def placeholder(self, index: int) -> str:
        return "%s"

    def escape_literal(self, segment: str) -> str:
        return segment.replace("%", "%%")
