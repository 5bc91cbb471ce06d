"""Colon-named placeholder style."""
from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from sqltemplate.render.base import PlaceholderStyle

# Characters a driver may read as part of a ``:name`` token.
_NAME_CHAR = re.compile(r"[\w$]")


class NamedStyle(PlaceholderStyle):
    """Renders placeholders as ``:p1``, ``:p2``, … with dict parameters.

    Parameter style: ``named`` – compatible with ``sqlite3`` named-parameter
    execution (``cursor.execute(sql, dict)``), ``oracledb`` and SQLAlchemy
    ``text()`` clauses.

    A name token only ends at a character that cannot continue it, so when
    the neighbouring literal text would run into the token (``"x = :p1AND"``,
    ``"[1::p1]"``) a single space is rendered between them.  Whitespace
    between tokens does not change the statement.

    Args:
        prefix: Name prefix for generated parameters.  Must be a valid
            identifier start so the driver recognises ``:prefixN``.
    """

    def __init__(self, prefix: str = "p") -> None:
        self.prefix = prefix

    @property
    def style_name(self) -> str:
        return "named"

    def param_name(self, index: int) -> str:
        """Return the parameter name for the ``index``-th value (1-based)."""
        return f"{self.prefix}{index}"

    def placeholder(self, index: int) -> str:
        return f":{self.param_name(index)}"

    def joins_preceding(self, char: str) -> bool:
        """Whether ``char`` right before ``:name`` would change how it is read."""
        return char == ":" or _NAME_CHAR.match(char) is not None

    def joins_following(self, char: str) -> bool:
        """Whether ``char`` right after ``:name`` would be read as part of it."""
        return _NAME_CHAR.match(char) is not None

    def render_text(self, segments: Sequence[str]) -> str:
        rendered = self.escape_literal(segments[0])
        for index, segment in enumerate(segments[1:], start=1):
            literal = self.escape_literal(segment)
            token = self.placeholder(index)
            if rendered and self.joins_preceding(rendered[-1]):
                token = " " + token
            if literal and self.joins_following(literal[0]):
                token += " "
            rendered += token + literal
        return rendered

    def build_params(self, values: Sequence[Any]) -> dict[str, Any]:
        return {
            self.param_name(index): value
            for index, value in enumerate(values, start=1)
        }
