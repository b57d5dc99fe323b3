from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable

from boxsvg_ui.style.record import StyleRecord
from boxsvg_ui.style.stylesheet import StyleSheet, default_stylesheet

from .tree import BoxNode

StyleFunc = Callable[[BoxNode, int], StyleRecord]
RenderFunc = Callable[[BoxNode, int], str]

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


@dataclass(frozen=True)
class RenderOptions:
    """Inputs for one render pass. Never shared between concurrent renders."""

    width: float = 800.0
    height: float = 600.0
    view_box: str = ""
    stylesheet: StyleSheet | None = None
    include_xml_declaration: bool = False
    namespace: bool = False
    preserve_aspect_ratio: str = ""
    background_color: str = ""
    definitions: tuple[str, ...] = ()
    style_func: StyleFunc | None = None
    render_func: RenderFunc | None = None

    def resolved_view_box(self) -> str:
        return self.view_box or f"0 0 {self.width:.0f} {self.height:.0f}"


def default_render_options() -> RenderOptions:
    return RenderOptions(
        width=800.0,
        height=600.0,
        stylesheet=default_stylesheet(),
        namespace=True,
        preserve_aspect_ratio="xMidYMid meet",
    )


def with_size(width: float, height: float) -> RenderOptions:
    return replace(default_render_options(), width=width, height=height)


def with_stylesheet(stylesheet: StyleSheet | None) -> RenderOptions:
    return replace(default_render_options(), stylesheet=stylesheet)
