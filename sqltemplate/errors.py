"""Custom exception hierarchy for sqltemplate.

All public errors inherit from SQLTemplateError so callers can catch the base
class for any sqltemplate-specific failure.
"""
from __future__ import annotations

from typing import Any


class SQLTemplateError(Exception):
    """Base exception for all sqltemplate errors."""


class TemplateShapeError(SQLTemplateError, AssertionError):
    """Raised when a literal/interpolation pair is malformed.

    Well-formed callers always pass one more literal segment than
    interpolations, so this signals a programming error rather than a
    recoverable runtime condition.

    Args:
        message: Human-readable description.
        segments: Number of literal segments received.
        interpolations: Number of interpolated values received.
    """

    def __init__(
        self,
        message: str,
        segments: int | None = None,
        interpolations: int | None = None,
    ) -> None:
        super().__init__(message)
        self.segments = segments
        self.interpolations = interpolations


class InvalidValueError(SQLTemplateError):
    """Raised when a constrained raw value fails its allow-list or syntax check.

    Raw fragments are spliced verbatim into the rendered SQL, so a value that
    fails validation must never be turned into one.

    Args:
        message: Human-readable description.
        value: The rejected input.
        code: Machine-readable error code (e.g. ``INVALID_KEYWORD``).
        details: Extra context describing what would have been accepted.
    """

    def __init__(
        self,
        message: str,
        value: Any,
        code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.value = value
        self.code = code
        self.details: dict[str, Any] = details or {}

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response suitable for API callers."""
        return {
            "error": self.code,
            "message": str(self),
            "details": self.details,
        }


class InvalidKeywordError(InvalidValueError):
    """Raised when a keyword is not in the policy allow-list."""

    def __init__(self, value: Any, allowed_keywords: list[str]) -> None:
        super().__init__(
            f"Keyword {value!r} is not allowed.",
            value=value,
            code="INVALID_KEYWORD",
            details={"keyword": value, "allowed_keywords": allowed_keywords},
        )


class InvalidIdentifierError(InvalidValueError):
    """Raised when an identifier fails the policy syntax check."""

    def __init__(
        self,
        value: Any,
        reason: str,
        pattern: str,
        max_length: int,
    ) -> None:
        super().__init__(
            f"Identifier {value!r} is not valid: {reason}.",
            value=value,
            code="INVALID_IDENTIFIER",
            details={
                "identifier": value,
                "reason": reason,
                "pattern": pattern,
                "max_length": max_length,
            },
        )


class UnknownStyleError(SQLTemplateError):
    """Raised when rendering with a placeholder style nobody registered.

    Args:
        message: Human-readable description.
        style: The requested style name.
    """

    def __init__(self, message: str, style: str | None = None) -> None:
        super().__init__(message)
        self.style = style
