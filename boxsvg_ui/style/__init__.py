"""Style records, attribute formatting and stylesheets."""

from .record import (
    EMPTY_STYLE,
    DominantBaseline,
    FontStyle,
    FontWeight,
    StrokeLinecap,
    StrokeLinejoin,
    StyleRecord,
    TextAnchor,
    format_style,
)
from .stylesheet import StyleRule, StyleSheet, default_stylesheet

__all__ = [
    "DominantBaseline",
    "EMPTY_STYLE",
    "FontStyle",
    "FontWeight",
    "StrokeLinecap",
    "StrokeLinejoin",
    "StyleRecord",
    "StyleRule",
    "StyleSheet",
    "TextAnchor",
    "default_stylesheet",
    "format_style",
]
