from __future__ import annotations

from typing import Iterable
from xml.sax.saxutils import escape

from boxsvg_ui.style.record import StyleRecord, format_style

_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def escape_xml(value: str) -> str:
    return escape(value, _QUOTE_ENTITIES)


def text(content: str, x: float, y: float, style: StyleRecord) -> str:
    return f'<text x="{x:.2f}" y="{y:.2f}"{format_style(style)}>{escape_xml(content)}</text>'


def tspan(content: str, style: StyleRecord, dx: float = 0.0, dy: float = 0.0) -> str:
    """Inline span for use inside `text_with_spans`; zero offsets are omitted."""

    pos = ""
    if dx != 0:
        pos += f' dx="{dx:.2f}"'
    if dy != 0:
        pos += f' dy="{dy:.2f}"'
    return f"<tspan{pos}{format_style(style)}>{escape_xml(content)}</tspan>"


def text_with_spans(x: float, y: float, style: StyleRecord, spans: Iterable[str]) -> str:
    return f'<text x="{x:.2f}" y="{y:.2f}"{format_style(style)}>{"".join(spans)}</text>'


def text_path(content: str, path_id: str, style: StyleRecord, start_offset: str = "") -> str:
    offset = f' startOffset="{start_offset}"' if start_offset else ""
    return f'<textPath href="#{path_id}"{offset}{format_style(style)}>{escape_xml(content)}</textPath>'
