"""Bound-value container with an explicit mode tag.

A statement exposes its values either as a plain ``values`` list or as a
``bind`` list for binding-style query APIs, never both.  Instead of toggling
attribute presence, the list and its mode travel together in
:class:`BoundValues`; the accessor for the inactive mode reports ``None``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

class ValueMode(str, Enum):
    """Which accessor currently owns the bound values."""

    VALUES = "values"
    BIND = "bind"

@dataclass
class BoundValues:
    """Ordered bound values tagged with the accessor that exposes them.

    Attributes:
        mode: :attr:`ValueMode.VALUES` or :attr:`ValueMode.BIND`.
        items: Values in placeholder order.
    """

    mode: ValueMode = ValueMode.VALUES
    items: list[Any] = field(default_factory=list)

    @property
    def values(self) -> list[Any] | None:
        """Copy of the items in VALUES mode, ``None`` in BIND mode."""
        return list(self.items) if self.mode is ValueMode.VALUES else None

    @property
    def bind(self) -> list[Any] | None:
        """Copy of the items in BIND mode, ``None`` in VALUES mode."""
        return list(self.items) if self.mode is ValueMode.BIND else None

    def switch(self, mode: ValueMode) -> bool:
        """Move the items under ``mode``.

        Returns:
            ``True`` if the mode changed, ``False`` if it was already ``mode``.
        """
        if self.mode is mode:
            return False
        self.mode = mode
        return True
