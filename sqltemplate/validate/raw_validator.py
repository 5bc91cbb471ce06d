"""Raw-value validation.

``RawValueValidator`` applies a :class:`~sqltemplate.schema.policy.RawPolicy`
to keyword and identifier input before it may become a
:class:`~sqltemplate.statement.fragments.RawFragment`.  The first violation
is raised as a subclass of :class:`~sqltemplate.errors.InvalidValueError`;
nothing is ever silently passed through.
"""
from __future__ import annotations

import logging
import re
from typing import Any, NoReturn

from sqltemplate.errors import InvalidIdentifierError, InvalidKeywordError
from sqltemplate.schema.policy import DEFAULT_POLICY, RawPolicy, normalize_keyword

logger = logging.getLogger(__name__)


class RawValueValidator:
    """Checks keyword and identifier input against a policy.

    Args:
        policy: The allow-lists to enforce.  Defaults to
            :data:`~sqltemplate.schema.policy.DEFAULT_POLICY`.
    """

    def __init__(self, policy: RawPolicy | None = None) -> None:
        self._policy = policy or DEFAULT_POLICY

    @property
    def policy(self) -> RawPolicy:
        return self._policy

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def check_keyword(self, value: Any) -> str:
        """Return the normalised keyword or raise.

        Raises:
            InvalidKeywordError: If ``value`` is not a string or not in
                :attr:`RawPolicy.keywords`.
        """
        normalized = normalize_keyword(value) if isinstance(value, str) else None
        if normalized is None or normalized not in self._policy.keywords:
            logger.debug("Rejected raw keyword of type %s", type(value).__name__)
            raise InvalidKeywordError(value, sorted(self._policy.keywords))
        return normalized

    def check_identifier(self, name: Any) -> list[str]:
        """Return the identifier parts (split on ``.`` when allowed) or raise.

        Raises:
            InvalidIdentifierError: If ``name`` is not a string, is empty,
                is qualified while the policy forbids it, or any part is too
                long or fails :attr:`RawPolicy.identifier_pattern`.
        """
        if not isinstance(name, str):
            self._reject(name, f"expected str, got {type(name).__name__}")
        if not name:
            self._reject(name, "identifier is empty")
        if "." in name and not self._policy.allow_qualified:
            self._reject(name, "qualified names are not allowed")

        parts = name.split(".") if self._policy.allow_qualified else [name]
        for part in parts:
            self._check_part(name, part)
        return parts

    def quote(self, part: str) -> str:
        """Quote one identifier part, doubling embedded quote characters."""
        q = self._policy.quote_char
        return f"{q}{part.replace(q, q + q)}{q}"

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_part(self, name: str, part: str) -> None:
        if not part:
            self._reject(name, "identifier has an empty part")
        if len(part) > self._policy.max_identifier_length:
            self._reject(
                name,
                f"part {part!r} exceeds {self._policy.max_identifier_length} characters",
            )
        if re.fullmatch(self._policy.identifier_pattern, part) is None:
            self._reject(name, f"part {part!r} does not match the identifier pattern")

    def _reject(self, name: Any, reason: str) -> NoReturn:
        logger.debug("Rejected raw identifier of type %s", type(name).__name__)
        raise InvalidIdentifierError(
            name,
            reason,
            pattern=self._policy.identifier_pattern,
            max_length=self._policy.max_identifier_length,
        )
