from __future__ import annotations

import logging
from typing import Iterable

from boxsvg_core.geometry.transform import transform_attribute
from boxsvg_ui.elements.shapes import rect as rect_element
from boxsvg_ui.style.record import StyleRecord

from .clip_paths import ClipPathRegistry
from .options import SVG_NAMESPACE, RenderOptions
from .tree import BoxNode

LOGGER = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
DEFAULT_NODE_STYLE = StyleRecord(fill="#e0e0e0", stroke="#333")
INDENT = "  "


class TreeRenderer:
    """Renders a computed layout tree to one SVG document.

    Rendering is two-phase: the tree is walked into a content buffer first,
    which may register clip paths as a side effect, and only then is the
    `<defs>` section assembled so every definition precedes its first use.
    A renderer owns its clip-path registry and serves a single render pass;
    a second `render` or `render_many` call raises RuntimeError.
    """

    def __init__(
        self,
        options: RenderOptions,
        *,
        clip_paths: ClipPathRegistry | None = None,
        default_style: StyleRecord = DEFAULT_NODE_STYLE,
    ) -> None:
        self._options = options
        self._clip_paths = clip_paths if clip_paths is not None else ClipPathRegistry()
        self.default_style = default_style
        self._visited = 0
        self._rendered = False

    @property
    def options(self) -> RenderOptions:
        return self._options

    @property
    def clip_paths(self) -> ClipPathRegistry:
        return self._clip_paths

    def render(self, root: BoxNode | None) -> str:
        roots = [] if root is None else [root]
        return self.render_many(roots)

    def render_many(self, nodes: Iterable[BoxNode]) -> str:
        if self._rendered:
            raise RuntimeError("TreeRenderer already rendered a document; create a new renderer per pass")
        self._rendered = True
        self._visited = 0
        content = "".join(self.render_node(node, 0) for node in nodes)
        document = self._assemble(content)
        LOGGER.debug(
            "rendered svg document; nodes=%d clip_paths=%d chars=%d",
            self._visited,
            len(self._clip_paths),
            len(document),
        )
        return document

    def render_node(self, node: BoxNode | None, depth: int) -> str:
        """Markup for one node and its subtree at `depth`.

        A non-empty `render_func` result replaces the subtree. Only its first
        line receives the depth indent; the rest is emitted as returned.
        """
        if node is None:
            return ""
        self._visited += 1
        opts = self._options
        indent = INDENT * depth

        if opts.render_func is not None:
            custom = opts.render_func(node, depth)
            if custom:
                return indent + custom + ("" if custom.endswith("\n") else "\n")

        style = opts.style_func(node, depth) if opts.style_func is not None else self.default_style
        transform = transform_attribute(node.transform)
        children = list(node.children)
        wrap = bool(transform) or bool(children)

        parts: list[str] = []
        if wrap:
            parts.append(f'{indent}<g transform="{transform}">\n' if transform else f"{indent}<g>\n")

        box = node.rect
        if box.has_area:
            parts.append(f"{indent}{INDENT}{rect_element(box.x, box.y, box.width, box.height, style)}\n")

        for child in children:
            parts.append(self.render_node(child, depth + 1))

        if wrap:
            parts.append(f"{indent}</g>\n")
        return "".join(parts)

    def _assemble(self, content: str) -> str:
        opts = self._options
        parts: list[str] = []
        if opts.include_xml_declaration:
            parts.append(XML_DECLARATION + "\n")

        header = f'<svg width="{opts.width:.0f}" height="{opts.height:.0f}" viewBox="{opts.resolved_view_box()}"'
        if opts.namespace:
            header += f' xmlns="{SVG_NAMESPACE}"'
        if opts.preserve_aspect_ratio:
            header += f' preserveAspectRatio="{opts.preserve_aspect_ratio}"'
        parts.append(header + ">\n")

        parts.append("<defs>\n")
        if opts.stylesheet is not None:
            parts.append(opts.stylesheet.to_svg() + "\n")
        for block in (*opts.definitions, self._clip_paths.flush_definitions()):
            if block:
                parts.extend(f"{INDENT * 2}{line}\n" for line in block.split("\n"))
        parts.append("</defs>\n")

        if opts.background_color:
            parts.append(
                f'<rect width="{opts.width:.0f}" height="{opts.height:.0f}" fill="{opts.background_color}"/>\n'
            )

        parts.append(content)
        parts.append("</svg>")
        return "".join(parts)


def render_to_svg(root: BoxNode | None, options: RenderOptions) -> str:
    return TreeRenderer(options).render(root)


def render_nodes(nodes: Iterable[BoxNode], options: RenderOptions) -> str:
    """Render several already-positioned roots side by side in one document."""
    return TreeRenderer(options).render_many(nodes)
