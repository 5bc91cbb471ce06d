"""Lookup of placeholder styles by paramstyle name.

:meth:`Statement.render <sqltemplate.statement.statement.Statement.render>`
accepts either a :class:`~sqltemplate.render.base.PlaceholderStyle` instance
or a short name such as ``"qmark"`` or ``"named"``.  Names resolve here.
The four built-in styles are registered when :mod:`sqltemplate` is imported;
a driver with its own convention only needs a subclass and a name::

    @StyleFactory.register("oracle_numeric")
    class OracleNumericStyle(PlaceholderStyle):
        style_name = "oracle_numeric"

        def placeholder(self, index):
            return f":{index}"

    rendered = statement.render("oracle_numeric")
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ClassVar

from sqltemplate.errors import UnknownStyleError
from sqltemplate.render.base import PlaceholderStyle


class StyleFactory:
    """Class-level mapping of paramstyle names to style classes.

    Registration replaces any earlier class under the same name, so an
    application can swap a built-in style (for example a ``named`` style with
    a different prefix) before rendering.
    """

    _styles: ClassVar[dict[str, type[PlaceholderStyle]]] = {}

    @classmethod
    def register(
        cls, name: str
    ) -> Callable[[type[PlaceholderStyle]], type[PlaceholderStyle]]:
        """Class decorator form of :meth:`register_class`."""

        def decorator(style_cls: type[PlaceholderStyle]) -> type[PlaceholderStyle]:
            cls.register_class(name, style_cls)
            return style_cls

        return decorator

    @classmethod
    def register_class(cls, name: str, style_cls: type[PlaceholderStyle]) -> None:
        """Make ``style_cls`` available as ``statement.render(name)``."""
        cls._styles[name] = style_cls

    @classmethod
    def unregister(cls, name: str) -> None:
        """Forget ``name``; unknown names are ignored."""
        cls._styles.pop(name, None)

    @classmethod
    def create(cls, name: str, **options: Any) -> PlaceholderStyle:
        """Build a style instance for ``name``.

        Args:
            name: A registered paramstyle name.
            **options: Passed to the style's constructor, e.g.
                ``StyleFactory.create("named", prefix="arg")``.

        Raises:
            UnknownStyleError: ``name`` was never registered.  The message
                lists the names that are.
        """
        try:
            style_cls = cls._styles[name]
        except KeyError:
            raise UnknownStyleError(
                f"No placeholder style named {name!r}; "
                f"choose one of {', '.join(cls.registered_styles())}.",
                style=name,
            ) from None
        return style_cls(**options)

    @classmethod
    def registered_styles(cls) -> list[str]:
        """Registered names in alphabetical order."""
        return sorted(cls._styles)
