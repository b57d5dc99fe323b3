"""Presentation building blocks for boxsvg: styles, elements and definitions."""

from .errors import ColorParseError
from .style.record import EMPTY_STYLE, StyleRecord, format_style
from .style.stylesheet import StyleRule, StyleSheet, default_stylesheet

__all__ = [
    "ColorParseError",
    "EMPTY_STYLE",
    "StyleRecord",
    "StyleRule",
    "StyleSheet",
    "default_stylesheet",
    "format_style",
]
