"""Interpolation variants and the splice step shared by build and append.

Every interpolated value is classified once into one of four closed
variants before it touches a statement:

``Literal``
    Text appended through :meth:`Statement.append` (a plain ``str``).
``Raw``
    A :class:`RawFragment`; its text is spliced verbatim.
``Nested``
    Another statement whose segments and values are spliced in place.
``Scalar``
    Anything else, including ``False``, ``None``, ``0`` and ``""``; bound
    through a placeholder.

:func:`splice` applies one variant to a ``(segments, values)`` pair while
keeping ``len(segments) == len(values) + 1``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from sqltemplate.statement.statement import Statement


@dataclass(frozen=True)
class RawFragment:
    """Text that must be spliced into the SQL instead of bound.

    Raw fragments never produce a placeholder or a value entry.  Only wrap
    text you trust; use :func:`~sqltemplate.statement.raw.keyword` or
    :func:`~sqltemplate.statement.raw.identifier` for checked input.

    Attributes:
        text: The verbatim SQL text.
    """

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Literal:
    """Plain text appended to a statement."""

    text: str


@dataclass(frozen=True)
class Raw:
    """Verbatim text coming from a :class:`RawFragment`."""

    text: str


@dataclass(frozen=True)
class Nested:
    """A statement interpolated inside another statement."""

    statement: Statement


@dataclass(frozen=True)
class Scalar:
    """An ordinary value bound through a placeholder."""

    value: Any


Interpolation = Union[Literal, Raw, Nested, Scalar]


def splice(
    segments: list[str],
    values: list[Any],
    part: Interpolation,
    following: str = "",
) -> None:
    """Apply ``part`` to ``segments`` / ``values`` in place.

    Args:
        segments: Literal pieces accumulated so far (never empty).
        values: Bound values accumulated so far.
        part: The classified interpolation.
        following: Literal text that comes right after ``part`` in the
            template (``""`` when appending).
    """
    if isinstance(part, (Literal, Raw)):
        segments[-1] += part.text + following
    elif isinstance(part, Nested):
        nested_segments = part.statement.segments
        segments[-1] += nested_segments[0]
        segments.extend(nested_segments[1:])
        values.extend(part.statement.parameters)
        segments[-1] += following
    elif isinstance(part, Scalar):
        values.append(part.value)
        segments.append(following)
    else:
        raise TypeError(f"Unknown interpolation variant: {type(part).__name__}")
