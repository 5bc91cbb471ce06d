"""Core template → Statement construction.

``StatementBuilder`` folds a template — literal segments alternating with
interpolated values — into a single flat ``(segments, values)`` pair::

    StatementBuilder().build(["SELECT * FROM t WHERE c1 = ", ""], [1234])
    # segments ('SELECT * FROM t WHERE c1 = ', ''), values [1234]

Each interpolation is classified once (see
:mod:`sqltemplate.statement.fragments`) and spliced at the position it
occupies in the template:

* raw fragments join the surrounding literals without a placeholder;
* nested statements contribute their own segments and values in place, so
  the flattened value order always matches the textual placeholder order
  (pre-order, left to right) however deep the nesting goes;
* everything else is bound through exactly one new placeholder.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from sqltemplate.errors import TemplateShapeError
from sqltemplate.statement.fragments import (
    Interpolation,
    Nested,
    Raw,
    RawFragment,
    Scalar,
    splice,
)
from sqltemplate.statement.statement import Statement

logger = logging.getLogger(__name__)


def classify(value: Any) -> Interpolation:
    """Return the interpolation variant for a template value.

    Strings are ordinary values here; only :meth:`Statement.append` treats a
    ``str`` as literal SQL.
    """
    if isinstance(value, RawFragment):
        return Raw(value.text)
    if isinstance(value, Statement):
        return Nested(value)
    return Scalar(value)


class StatementBuilder:
    """Builds :class:`Statement` objects from literal/interpolation pairs."""

    def build(
        self, segments: Sequence[str], interpolations: Sequence[Any]
    ) -> Statement:
        """Fold a template into a new statement.

        Args:
            segments: Literal text pieces of the template.
            interpolations: Values between the pieces; exactly one fewer than
                ``segments``.

        Returns:
            A fresh :class:`Statement` in values mode.  The inputs (and any
            nested statements) are copied, not referenced.

        Raises:
            TemplateShapeError: If ``len(segments) != len(interpolations) + 1``.
        """
        if len(segments) != len(interpolations) + 1:
            raise TemplateShapeError(
                f"A template with {len(interpolations)} interpolations needs "
                f"{len(interpolations) + 1} literal segments, got {len(segments)}.",
                segments=len(segments),
                interpolations=len(interpolations),
            )

        out_segments: list[str] = [segments[0]]
        out_values: list[Any] = []
        for value, following in zip(interpolations, segments[1:]):
            part = classify(value)
            if isinstance(part, Nested):
                logger.debug(
                    "Splicing nested statement with %d values at value position %d",
                    len(part.statement.parameters),
                    len(out_values),
                )
            splice(out_segments, out_values, part, following)

        logger.debug(
            "Built statement: %d segments, %d values", len(out_segments), len(out_values)
        )
        return Statement(out_segments, out_values)
