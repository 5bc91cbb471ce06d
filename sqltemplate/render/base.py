"""Rendering abstractions: RenderedSQL and the PlaceholderStyle ABC.

The Template Method pattern is used:
- ``PlaceholderStyle`` defines the skeleton for joining literal segments with
  placeholders and shaping the parameter container.
- ``QmarkStyle``, ``NumericStyle``, ``FormatStyle`` and ``NamedStyle``
  override the driver-specific steps (placeholder token, literal escaping,
  list vs. dict parameters).
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from sqltemplate.errors import TemplateShapeError


@dataclass
class RenderedSQL:
    """The output of rendering a statement in one placeholder style.

    Attributes:
        sql: The SQL string with style-specific placeholders.
        params: Values for the placeholders, in placeholder order.  A list for
            positional styles, a dict keyed by placeholder name for named
            styles.
        style: The style name used to render (e.g. ``'qmark'``).
        name: Prepared-statement name carried over from the statement, or
            ``""`` when none was set.
    """

    sql: str
    params: list[Any] | dict[str, Any]
    style: str
    name: str = ""

    def as_tuple(self) -> tuple[str, list[Any] | dict[str, Any]]:
        """Return ``(sql, params)`` ready for ``cursor.execute(*rendered.as_tuple())``."""
        return self.sql, self.params


class PlaceholderStyle(ABC):
    """Abstract base for driver-specific placeholder conventions.

    Subclasses implement :meth:`placeholder`; the literal escaping and
    parameter shaping hooks default to pass-through behaviour.
    """

    @property
    @abstractmethod
    def style_name(self) -> str:
        """Return the canonical style name (e.g. ``'qmark'``)."""

    @abstractmethod
    def placeholder(self, index: int) -> str:
        """Return the placeholder token for the ``index``-th bound value.

        Args:
            index: 1-based position of the value in the statement.

        Returns:
            Style-specific placeholder string.
        """

    def escape_literal(self, segment: str) -> str:
        """Return ``segment`` escaped for the driver's placeholder parser.

        Args:
            segment: A literal text piece between two placeholders.

        Returns:
            The segment as it must appear in the rendered SQL.
        """
        return segment

    def build_params(self, values: Sequence[Any]) -> list[Any] | dict[str, Any]:
        """Return the parameter container the driver expects.

        Args:
            values: Bound values in placeholder order.

        Returns:
            A fresh list (default) or mapping of the values.
        """
        return list(values)

    def render_text(self, segments: Sequence[str]) -> str:
        """Join ``segments`` with one placeholder between each pair.

        Placeholders are numbered once per boundary, left to right, so the
        count always equals ``len(segments) - 1``.
        """
        parts = [self.escape_literal(segments[0])]
        for index, segment in enumerate(segments[1:], start=1):
            parts.append(self.placeholder(index))
            parts.append(self.escape_literal(segment))
        return "".join(parts)

    def render(
        self,
        segments: Sequence[str],
        values: Sequence[Any],
        name: str = "",
    ) -> RenderedSQL:
        """Render a ``(segments, values)`` pair.

        Args:
            segments: Literal text pieces; one more than ``values``.
            values: Bound values in placeholder order.
            name: Optional prepared-statement name to carry along.

        Returns:
            :class:`RenderedSQL` with the SQL text and the parameters.

        Raises:
            TemplateShapeError: If ``len(segments) != len(values) + 1``.
        """
        if len(segments) != len(values) + 1:
            raise TemplateShapeError(
                f"Expected {len(values) + 1} segments for {len(values)} values, "
                f"got {len(segments)}.",
                segments=len(segments),
                interpolations=len(values),
            )
        return RenderedSQL(
            sql=self.render_text(segments),
            params=self.build_params(values),
            style=self.style_name,
            name=name,
        )
