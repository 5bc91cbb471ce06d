"""The Statement entity: literal segments plus ordered bound values.

A statement keeps one internal representation — ``segments`` and the bound
values between them — and derives every rendering from it on read::

    query = SQL(["SELECT author FROM books WHERE name = ", " AND author = ", ""],
                book, author)
    query.sql     # 'SELECT author FROM books WHERE name = ? AND author = ?'
    query.text    # 'SELECT author FROM books WHERE name = $1 AND author = $2'
    query.values  # [book, author]

Statements are mutable builders: :meth:`Statement.append`,
:meth:`Statement.append_all`, :meth:`Statement.set_name` and
:meth:`Statement.set_bind_mode` change the instance in place and return it,
so calls chain::

    query.append(SQL([" AND genre = ", ""], genre)).append(" ORDER BY rating")
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any, Union

from sqltemplate.errors import TemplateShapeError
from sqltemplate.render.base import PlaceholderStyle, RenderedSQL
from sqltemplate.render.numeric import NumericStyle
from sqltemplate.render.qmark import QmarkStyle
from sqltemplate.render.registry import StyleFactory
from sqltemplate.statement.fragments import (
    Interpolation,
    Literal,
    Nested,
    Raw,
    RawFragment,
    splice,
)
from sqltemplate.statement.values import BoundValues, ValueMode

logger = logging.getLogger(__name__)

_POSITIONAL = QmarkStyle()
_INDEXED = NumericStyle()

#: Anything :meth:`Statement.append` accepts.
Appendable = Union["Statement", RawFragment, str, int, float]


class Statement:
    """Composable SQL text with bound values.

    Usually created through :func:`~sqltemplate.SQL` or
    :func:`~sqltemplate.sql` rather than instantiated directly.

    Args:
        segments: Literal text pieces; must hold exactly one more item than
            ``values``.
        values: Bound values in placeholder order.
        name: Prepared-statement name (``""`` for none).

    Raises:
        TemplateShapeError: If the segment/value counts do not line up.
    """

    def __init__(
        self,
        segments: Sequence[str],
        values: Sequence[Any] = (),
        *,
        name: str = "",
    ) -> None:
        if len(segments) != len(values) + 1:
            raise TemplateShapeError(
                f"A statement needs {len(values) + 1} segments for {len(values)} values, "
                f"got {len(segments)}.",
                segments=len(segments),
                interpolations=len(values),
            )
        self._segments: list[str] = list(segments)
        self._values = BoundValues(ValueMode.VALUES, list(values))
        self.name = name

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    @property
    def segments(self) -> tuple[str, ...]:
        """The literal pieces between placeholders."""
        return tuple(self._segments)

    @property
    def mode(self) -> ValueMode:
        """Which accessor currently exposes the bound values."""
        return self._values.mode

    @property
    def bound(self) -> bool:
        """``True`` when bind mode is on."""
        return self._values.mode is ValueMode.BIND

    # ------------------------------------------------------------------
    # Renderings (computed on every read)
    # ------------------------------------------------------------------

    @property
    def sql(self) -> str:
        """The SQL with ``?`` placeholders (mysql, sqlite3)."""
        return _POSITIONAL.render_text(self._segments)

    @property
    def text(self) -> str:
        """The SQL with ``$1``, ``$2``, … placeholders (postgres)."""
        return _INDEXED.render_text(self._segments)

    @property
    def query(self) -> str:
        """:attr:`text` in bind mode, :attr:`sql` otherwise."""
        return self.text if self.bound else self.sql

    @property
    def values(self) -> list[Any] | None:
        """The bound values, or ``None`` while bind mode is on."""
        return self._values.values

    @property
    def bind(self) -> list[Any] | None:
        """The bound values while bind mode is on, otherwise ``None``."""
        return self._values.bind

    @property
    def parameters(self) -> list[Any]:
        """The bound values whichever accessor currently exposes them."""
        return list(self._values.items)

    def render(self, style: str | PlaceholderStyle = "qmark") -> RenderedSQL:
        """Render with any placeholder style.

        Args:
            style: A registered style name (see
                :meth:`~sqltemplate.render.registry.StyleFactory.registered_styles`)
                or a :class:`PlaceholderStyle` instance.

        Returns:
            :class:`RenderedSQL` carrying the SQL, the parameters and
            :attr:`name`.

        Raises:
            UnknownStyleError: If ``style`` names no registered style.
        """
        if isinstance(style, str):
            style = StyleFactory.create(style)
        return style.render(self._segments, self._values.items, name=self.name)

    # ------------------------------------------------------------------
    # Mutation (fluent: every method returns ``self``)
    # ------------------------------------------------------------------

    def append(self, part: Appendable) -> Statement:
        """Append a statement, raw fragment or plain text.

        Statements are spliced with their placeholders and values; strings,
        raw fragments and numbers are concatenated onto the last segment::

            query = SQL(["SELECT * FROM books"])
            if params.name:
                query.append(SQL([" WHERE name = ", ""], params.name))
            query.append(SQL([" LIMIT 10 OFFSET ", ""], params.offset or 0))

        Raises:
            TypeError: If ``part`` is of an unsupported type.
        """
        splice(self._segments, self._values.items, _as_interpolation(part))
        return self

    def append_all(
        self, parts: Iterable[Appendable], delimiter: str = ""
    ) -> Statement:
        """Append every item of ``parts`` with ``delimiter`` between them.

        Equivalent to alternating :meth:`append` calls for the parts and the
        delimiter.  An empty iterable leaves the statement unchanged.
        """
        for index, part in enumerate(parts):
            if index and delimiter:
                self.append(delimiter)
            self.append(part)
        return self

    def set_name(self, name: str) -> Statement:
        """Set the prepared-statement name (postgres named statements)."""
        self.name = name
        return self

    def set_bind_mode(self, bound: bool = True) -> Statement:
        """Switch between ``values`` and ``bind`` exposure.

        In bind mode :attr:`query` uses ``$n`` placeholders and the values
        move to :attr:`bind`, leaving :attr:`values` as ``None``.  Turning it
        off moves them back.  Repeating the same flag is a no-op and the
        segments never change.
        """
        mode = ValueMode.BIND if bound else ValueMode.VALUES
        if self._values.switch(mode):
            logger.debug("Statement switched to %s mode", mode.value)
        return self

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(sql={self.sql!r}, "
            f"{self._values.mode.value}={self._values.items!r})"
        )


def _as_interpolation(part: Appendable) -> Interpolation:
    """Classify an :meth:`Statement.append` argument."""
    if isinstance(part, Statement):
        return Nested(part)
    if isinstance(part, RawFragment):
        return Raw(part.text)
    if isinstance(part, str):
        return Literal(part)
    if isinstance(part, (int, float)) and not isinstance(part, bool):
        return Literal(str(part))
    raise TypeError(
        f"Cannot append {type(part).__name__}; expected Statement, RawFragment, str or number."
    )
