"""sqltemplate rendering layer: (segments, values) → driver-ready SQL."""
from sqltemplate.render.base import PlaceholderStyle, RenderedSQL
from sqltemplate.render.format import FormatStyle
from sqltemplate.render.named import NamedStyle
from sqltemplate.render.numeric import NumericStyle
from sqltemplate.render.qmark import QmarkStyle
from sqltemplate.render.registry import StyleFactory

__all__ = [
    "RenderedSQL",
    "PlaceholderStyle",
    "StyleFactory",
    "FormatStyle",
    "NamedStyle",
    "NumericStyle",
    "QmarkStyle",
]
