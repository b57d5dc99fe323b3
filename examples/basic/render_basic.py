from __future__ import annotations

from dataclasses import replace

from boxsvg_core.geometry.curves import smooth_area_path, smooth_line_path
from boxsvg_core.geometry.points import Point, Rect
from boxsvg_core.render.clip_paths import ClipPathRegistry
from boxsvg_core.render.options import with_size
from boxsvg_core.render.renderer import TreeRenderer
from boxsvg_core.render.tree import BoxNode, LayoutBox
from boxsvg_ui.defs.markers import arrow_marker, marker_url
from boxsvg_ui.elements.shapes import group_with_clip_path, path, path_with_markers
from boxsvg_ui.style.record import StyleRecord

CHART_POINTS = (
    Point(30, 120),
    Point(60, 70),
    Point(90, 100),
    Point(120, 40),
    Point(150, 80),
)


def build_demo_tree() -> LayoutBox:
    """Row of two 100x100 boxes inside a padded 400x200 container."""

    return LayoutBox(
        rect=Rect(0, 0, 400, 200),
        children=(
            LayoutBox(rect=Rect(20, 50, 100, 100), name="left"),
            LayoutBox(rect=Rect(280, 50, 100, 100), name="right"),
        ),
    )


def render_demo() -> str:
    clip_paths = ClipPathRegistry()

    def style_func(node: BoxNode, depth: int) -> StyleRecord:
        if depth == 0:
            return StyleRecord(fill="none", stroke="#dee2e6")
        return StyleRecord(fill="#6366f1", stroke="#4f46e5", stroke_width=2)

    def render_func(node: BoxNode, depth: int) -> str:
        if getattr(node, "name", "") != "right":
            return ""
        box = node.rect
        clip_id = clip_paths.add_rounded_rect(box.x, box.y, box.width, box.height, 12)
        area = path(
            smooth_area_path(_fit(CHART_POINTS, box), box.y + box.height, 0.2),
            StyleRecord(fill="#10b981", fill_opacity=0.3),
        )
        trend = path_with_markers(
            smooth_line_path(_fit(CHART_POINTS, box), 0.2),
            StyleRecord(fill="none", stroke="#3b82f6", stroke_width=2),
            marker_end=marker_url("arrow"),
        )
        return group_with_clip_path(area + trend, clip_id)

    options = replace(
        with_size(400, 200),
        background_color="#f8f9fa",
        definitions=(arrow_marker("arrow", "#3b82f6"),),
        style_func=style_func,
        render_func=render_func,
    )
    return TreeRenderer(options, clip_paths=clip_paths).render(build_demo_tree())


def _fit(points: tuple[Point, ...], box: Rect) -> list[Point]:
    # Chart coordinates span x 30..150, y 40..120.
    return [Point(box.x + (p.x - 30) / 120 * box.width, box.y + (p.y - 40) / 80 * box.height) for p in points]


if __name__ == "__main__":
    print(render_demo())
