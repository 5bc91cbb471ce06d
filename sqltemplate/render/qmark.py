"""Question-mark placeholder style."""
from __future__ import annotations

from sqltemplate.render.base import PlaceholderStyle


class QmarkStyle(PlaceholderStyle):
    """Renders every placeholder as a bare ``?``.

    Parameter style: ``qmark`` – compatible with ``sqlite3``, ``mysql`` /
    ``mysql2`` style drivers and ODBC.  Placeholders carry no index; the
    driver binds values strictly by position.
    """

    @property
    def style_name(self) -> str:
        return "qmark"

    def placeholder(self, index: int) -> str:
        return "?"
