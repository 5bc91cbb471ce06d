"""Dollar-numbered placeholder style."""
from __future__ import annotations

from sqltemplate.render.base import PlaceholderStyle


class NumericStyle(PlaceholderStyle):
    """Renders placeholders as ``$1``, ``$2``, … in textual order.

    Parameter style: ``numeric`` with a ``$`` prefix – compatible with
    ``asyncpg``, node-postgres style servers and Sequelize-style ``bind``
    parameters.  The index increases once per placeholder regardless of how
    deeply the originating statement was nested.
    """

    @property
    def style_name(self) -> str:
        return "numeric"

    def placeholder(self, index: int) -> str:
        return f"${index}"
