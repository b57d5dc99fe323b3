from __future__ import annotations

from typing import Iterable

from boxsvg_core.geometry.points import PointLike, as_points
from boxsvg_core.render.clip_paths import clip_path_url
from boxsvg_ui.style.record import StyleRecord, format_style


def rect(x: float, y: float, width: float, height: float, style: StyleRecord) -> str:
    return f'<rect x="{x:.2f}" y="{y:.2f}" width="{width:.2f}" height="{height:.2f}"{format_style(style)}/>'


def rounded_rect(
    x: float,
    y: float,
    width: float,
    height: float,
    rx: float,
    ry: float,
    style: StyleRecord,
) -> str:
    if ry == 0:
        ry = rx
    return (
        f'<rect x="{x:.2f}" y="{y:.2f}" width="{width:.2f}" height="{height:.2f}" '
        f'rx="{rx:.2f}" ry="{ry:.2f}"{format_style(style)}/>'
    )


def circle(cx: float, cy: float, r: float, style: StyleRecord) -> str:
    return f'<circle cx="{cx:.2f}" cy="{cy:.2f}" r="{r:.2f}"{format_style(style)}/>'


def ellipse(cx: float, cy: float, rx: float, ry: float, style: StyleRecord) -> str:
    return f'<ellipse cx="{cx:.2f}" cy="{cy:.2f}" rx="{rx:.2f}" ry="{ry:.2f}"{format_style(style)}/>'


def line(x1: float, y1: float, x2: float, y2: float, style: StyleRecord) -> str:
    return f'<line x1="{x1:.2f}" y1="{y1:.2f}" x2="{x2:.2f}" y2="{y2:.2f}"{format_style(style)}/>'


def line_with_markers(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    style: StyleRecord,
    marker_start: str = "",
    marker_end: str = "",
) -> str:
    markers = _marker_attrs(marker_start, "", marker_end)
    return (
        f'<line x1="{x1:.2f}" y1="{y1:.2f}" x2="{x2:.2f}" y2="{y2:.2f}"'
        f"{format_style(style)}{markers}/>"
    )


def polyline(points: Iterable[PointLike], style: StyleRecord) -> str:
    return f'<polyline points="{_points_attr(points)}"{format_style(style)}/>'


def polygon(points: Iterable[PointLike], style: StyleRecord) -> str:
    return f'<polygon points="{_points_attr(points)}"{format_style(style)}/>'


def path(d: str, style: StyleRecord) -> str:
    return f'<path d="{d}"{format_style(style)}/>'


def path_with_markers(
    d: str,
    style: StyleRecord,
    marker_start: str = "",
    marker_mid: str = "",
    marker_end: str = "",
) -> str:
    return f'<path d="{d}"{format_style(style)}{_marker_attrs(marker_start, marker_mid, marker_end)}/>'


def group(content: str, transform: str = "", style: StyleRecord | None = None) -> str:
    attrs = f' transform="{transform}"' if transform else ""
    if style is not None:
        attrs += format_style(style)
    return f"<g{attrs}>{content}</g>"


def group_with_clip_path(content: str, clip_id: str, style: StyleRecord | None = None) -> str:
    base = style if style is not None else StyleRecord()
    return group(content, "", base.with_overrides(clip_path=clip_path_url(clip_id)))


def _points_attr(points: Iterable[PointLike]) -> str:
    return " ".join(f"{p.x:.2f},{p.y:.2f}" for p in as_points(points))


def _marker_attrs(start: str, mid: str, end: str) -> str:
    out = ""
    if start:
        out += f' marker-start="{start}"'
    if mid:
        out += f' marker-mid="{mid}"'
    if end:
        out += f' marker-end="{end}"'
    return out
