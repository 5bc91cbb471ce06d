"""Pydantic model for the RawPolicy used by the constrained raw constructors.

Raw fragments bypass placeholders entirely, so the constructors that accept
user-influenced input — :func:`~sqltemplate.statement.raw.keyword` and
:func:`~sqltemplate.statement.raw.identifier` — check it against a policy
first.  The policy is plain configuration; enforcement lives in
:class:`~sqltemplate.validate.raw_validator.RawValueValidator`.

Example — allow ``ILIKE`` as a keyword and quote identifiers::

    from sqltemplate import DEFAULT_POLICY, RawPolicy

    policy = DEFAULT_POLICY.with_keywords("ILIKE").model_copy(
        update={"quote_identifiers": True}
    )

    # or from scratch
    policy = RawPolicy(keywords={"asc", "desc"}, max_identifier_length=30)
"""
from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

#: Keywords accepted by :data:`DEFAULT_POLICY` (ordering, joins, set ops).
DEFAULT_KEYWORDS: frozenset[str] = frozenset(
    {
        "ASC", "DESC",
        "NULLS FIRST", "NULLS LAST",
        "ASC NULLS FIRST", "ASC NULLS LAST",
        "DESC NULLS FIRST", "DESC NULLS LAST",
        "AND", "OR",
        "INNER", "LEFT", "RIGHT", "FULL", "CROSS",
        "UNION", "UNION ALL", "INTERSECT", "EXCEPT",
        "DISTINCT", "ALL",
    }
)

#: Unquoted SQL identifier syntax (letters, digits, ``_`` and ``$``).
DEFAULT_IDENTIFIER_PATTERN = r"[A-Za-z_][A-Za-z0-9_$]*"


def normalize_keyword(value: str) -> str:
    """Upper-case ``value`` and collapse internal whitespace."""
    return " ".join(value.split()).upper()


class RawPolicy(BaseModel):
    """Allow-lists for raw keyword and identifier fragments.

    Attributes:
        keywords: Keywords :func:`keyword` accepts; stored normalised
            (upper case, single spaces).
        identifier_pattern: Regular expression every identifier part must
            match in full.
        max_identifier_length: Upper bound on each identifier part
            (63 = PostgreSQL ``NAMEDATALEN - 1``).
        allow_qualified: Accept dotted names such as ``schema.table``.
        quote_identifiers: Wrap each identifier part in :attr:`quote_char`.
        quote_char: Quote character used when :attr:`quote_identifiers` is on.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    keywords: frozenset[str] = Field(default=DEFAULT_KEYWORDS)
    identifier_pattern: str = DEFAULT_IDENTIFIER_PATTERN
    max_identifier_length: int = Field(default=63, gt=0)
    allow_qualified: bool = True
    quote_identifiers: bool = False
    quote_char: str = Field(default='"', min_length=1, max_length=1)

    @field_validator("keywords", mode="before")
    @classmethod
    def _normalize_keywords(cls, value: Any) -> Any:
        if isinstance(value, str):
            raise ValueError("keywords must be a collection of strings, not a single string")
        if isinstance(value, Iterable):
            return frozenset(
                normalize_keyword(item) if isinstance(item, str) else item
                for item in value
            )
        return value

    @field_validator("identifier_pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"identifier_pattern is not a valid regular expression: {exc}") from exc
        return value

    def with_keywords(self, *extra: str) -> RawPolicy:
        """Return a copy that also accepts ``extra`` keywords."""
        added = frozenset(normalize_keyword(k) for k in extra)
        return self.model_copy(update={"keywords": self.keywords | added})


#: Policy used when a constructor is called without one.
DEFAULT_POLICY = RawPolicy()
