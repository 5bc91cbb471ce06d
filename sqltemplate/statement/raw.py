"""Constructors for raw (verbatim) SQL fragments.

``raw`` trusts its input.  ``keyword`` and ``identifier`` check theirs
against a :class:`~sqltemplate.schema.policy.RawPolicy` and raise
:class:`~sqltemplate.errors.InvalidValueError` subclasses on failure::

    direction = keyword(request.args["dir"])           # 'ASC' / 'DESC' only
    column = identifier(request.args["sort"])
    query = SQL(["SELECT * FROM books ORDER BY ", " ", ""], column, direction)
"""
from __future__ import annotations

from sqltemplate.schema.policy import RawPolicy
from sqltemplate.statement.fragments import RawFragment
from sqltemplate.validate.raw_validator import RawValueValidator


def raw(text: str) -> RawFragment:
    """Wrap ``text`` for verbatim splicing; no validation is performed."""
    if not isinstance(text, str):
        raise TypeError(f"raw() expects str, got {type(text).__name__}")
    return RawFragment(text)


def keyword(value: str, policy: RawPolicy | None = None) -> RawFragment:
    """Return ``value`` as a raw keyword if the policy allows it.

    The keyword is normalised (upper case, single spaces) before the check
    and spliced in that normalised form.

    Raises:
        InvalidKeywordError: If the keyword is not allowed.
    """
    return RawFragment(RawValueValidator(policy).check_keyword(value))


def identifier(name: str, policy: RawPolicy | None = None) -> RawFragment:
    """Return ``name`` as a raw identifier if it passes the policy.

    Dotted names are checked part by part.  With
    :attr:`RawPolicy.quote_identifiers` each part is quoted::

        identifier("public.books")                                  # public.books
        identifier("public.books", RawPolicy(quote_identifiers=True))  # "public"."books"

    Raises:
        InvalidIdentifierError: If ``name`` fails the policy.
    """
    validator = RawValueValidator(policy)
    parts = validator.check_identifier(name)
    if validator.policy.quote_identifiers:
        parts = [validator.quote(part) for part in parts]
    return RawFragment(".".join(parts))
