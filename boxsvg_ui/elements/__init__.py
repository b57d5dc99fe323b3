"""Standalone SVG element constructors."""

from .shapes import (
    circle,
    ellipse,
    group,
    group_with_clip_path,
    line,
    line_with_markers,
    path,
    path_with_markers,
    polygon,
    polyline,
    rect,
    rounded_rect,
)
from .text import escape_xml, text, text_path, text_with_spans, tspan

__all__ = [
    "circle",
    "ellipse",
    "escape_xml",
    "group",
    "group_with_clip_path",
    "line",
    "line_with_markers",
    "path",
    "path_with_markers",
    "polygon",
    "polyline",
    "rect",
    "rounded_rect",
    "text",
    "text_path",
    "text_with_spans",
    "tspan",
]
