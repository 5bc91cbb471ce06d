"""Test fixtures: sample schema DDL and seed rows."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

_FIXTURES_DIR = Path(__file__).parent

#: ``(book_id, title, author, year, in_print, rating)`` rows for the books table.
BOOKS: list[tuple] = [
    (1, "Harry Potter", "J. K. Rowling", 1997, 1, 4.5),
    (2, "The Hobbit", "J. R. R. Tolkien", 1937, 1, 4.7),
    (3, "Silmarillion", "J. R. R. Tolkien", 1977, 0, None),
    (4, "100% Pure", "Anon", 2001, 0, 0.0),
    (5, "", "Anon", 0, 1, 3.0),
]


def load_ddl(target: Literal["sqlite"] = "sqlite") -> str:
    """Return the sample DDL SQL string for the given backend.

    Args:
        target: ``'sqlite'`` (the only backend the suite runs against).

    Returns:
        DDL string ready to execute against the target backend.
    """
    filename = f"ddl_{target}.sql"
    return (_FIXTURES_DIR / filename).read_text()
