"""Python front ends that turn templates into statements.

``SQL``
    The literal/interpolation boundary: segments first, then one positional
    argument per interpolation.  A template object that exposes ``strings``
    and ``values`` (such as a PEP 750 ``string.templatelib.Template``) is also
    accepted::

        SQL(["SELECT * FROM books WHERE id = ", ""], book_id)
        SQL(t"SELECT * FROM books WHERE id = {book_id}")   # Python 3.14+

``sql``
    A ``str.format``-style front end.  Every replacement field becomes a
    bound value (or a spliced statement / raw fragment)::

        sql("SELECT * FROM books WHERE author = {} AND year > {year}",
            author, year=2000)
"""
from __future__ import annotations

import string
from collections.abc import Sequence
from typing import Any

from sqltemplate.errors import TemplateShapeError
from sqltemplate.statement.builder import StatementBuilder
from sqltemplate.statement.statement import Statement

_BUILDER = StatementBuilder()


def SQL(segments: Sequence[str] | Any, *values: Any) -> Statement:  # noqa: N802
    """Build a statement from literal segments and interpolated values.

    Args:
        segments: Literal text pieces (one more than ``values``), a single
            string for a statement without values, or a template object with
            ``strings`` and ``values`` attributes.
        *values: The interpolated values, in template order.

    Returns:
        A new :class:`Statement`.

    Raises:
        TemplateShapeError: If the segment and value counts do not line up.
    """
    if not values and _is_template(segments):
        return _BUILDER.build(list(segments.strings), list(segments.values))
    if isinstance(segments, str):
        segments = [segments]
    return _BUILDER.build(list(segments), list(values))


def sql(fmt: str, /, *args: Any, **kwargs: Any) -> Statement:
    """Build a statement from a ``str.format``-style template.

    Fields are resolved exactly like :meth:`str.format` resolves them
    (``{}``, ``{0}``, ``{name}``, ``{name.attr}``, ``{items[0]}``) but the
    value is bound instead of formatted.  ``{{`` and ``}}`` produce literal
    braces.

    Raises:
        TemplateShapeError: If a field carries a format spec or conversion,
            or automatic and manual field numbering are mixed.
        IndexError, KeyError, AttributeError: If a field cannot be resolved,
            as with :meth:`str.format`.
    """
    formatter = string.Formatter()
    segments: list[str] = [""]
    interpolations: list[Any] = []
    auto_index = 0
    numbering: str | None = None

    for literal_text, field_name, format_spec, conversion in formatter.parse(fmt):
        segments[-1] += literal_text
        if field_name is None:
            continue
        if format_spec or conversion:
            raise TemplateShapeError(
                f"Field {{{field_name}}} uses a format spec or conversion; "
                "bound values cannot be formatted."
            )

        head = field_name.split(".", 1)[0].split("[", 1)[0]
        if head == "":
            kind: str | None = "auto"
            field_name = f"{auto_index}{field_name}"
            auto_index += 1
        elif head.isdigit():
            kind = "manual"
        else:
            kind = None  # keyword fields mix freely with either numbering
        if kind is not None:
            if numbering not in (None, kind):
                raise TemplateShapeError(
                    "Cannot switch between automatic and manual field numbering."
                )
            numbering = kind

        value, _ = formatter.get_field(field_name, args, kwargs)
        interpolations.append(value)
        segments.append("")

    return _BUILDER.build(segments, interpolations)


def _is_template(obj: Any) -> bool:
    return (
        not isinstance(obj, (str, Statement))
        and hasattr(obj, "strings")
        and hasattr(obj, "values")
    )
