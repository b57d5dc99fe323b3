from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

MarkerUnits = Literal["strokeWidth", "userSpaceOnUse"]

MARKER_ORIENT_AUTO = "auto"
MARKER_ORIENT_AUTO_START_REVERSE = "auto-start-reverse"
MARKER_UNITS_STROKE_WIDTH: MarkerUnits = "strokeWidth"
MARKER_UNITS_USER_SPACE: MarkerUnits = "userSpaceOnUse"

_PRESET_VIEW_BOX = "0 0 10 10"


@dataclass(frozen=True)
class MarkerDef:
    """A `<marker>` definition. Orient is "auto", "auto-start-reverse" or an angle."""

    marker_id: str
    content: str
    view_box: str = ""
    ref_x: float = 0.0
    ref_y: float = 0.0
    marker_width: float = 0.0
    marker_height: float = 0.0
    orient: str = ""
    marker_units: MarkerUnits | Literal[""] = ""


def marker(defn: MarkerDef) -> str:
    attrs = f'id="{defn.marker_id}"'
    if defn.view_box:
        attrs += f' viewBox="{defn.view_box}"'
    attrs += f' refX="{defn.ref_x:.2f}" refY="{defn.ref_y:.2f}"'
    if defn.marker_width > 0:
        attrs += f' markerWidth="{defn.marker_width:.2f}"'
    if defn.marker_height > 0:
        attrs += f' markerHeight="{defn.marker_height:.2f}"'
    if defn.orient:
        attrs += f' orient="{defn.orient}"'
    if defn.marker_units:
        attrs += f' markerUnits="{defn.marker_units}"'
    return f"<marker {attrs}>{defn.content}</marker>"


def marker_url(marker_id: str) -> str:
    return f"url(#{marker_id})"


def arrow_marker(marker_id: str, color: str) -> str:
    return _preset(
        marker_id,
        f'<path d="M 0 0 L 10 5 L 0 10 z" fill="{color}"/>',
        ref_x=5.0,
        orient=MARKER_ORIENT_AUTO_START_REVERSE,
    )


def circle_marker(marker_id: str, color: str) -> str:
    return _preset(marker_id, f'<circle cx="5" cy="5" r="4" fill="{color}"/>')


def square_marker(marker_id: str, color: str) -> str:
    return _preset(marker_id, f'<rect x="1" y="1" width="8" height="8" fill="{color}"/>')


def diamond_marker(marker_id: str, color: str) -> str:
    return _preset(marker_id, f'<path d="M 5 0 L 10 5 L 5 10 L 0 5 z" fill="{color}"/>')


def triangle_marker(marker_id: str, color: str) -> str:
    return _preset(marker_id, f'<path d="M 5 0 L 10 10 L 0 10 z" fill="{color}"/>')


def cross_marker(marker_id: str, color: str, stroke_width: float) -> str:
    return _preset(
        marker_id,
        f'<path d="M 5 1 L 5 9 M 1 5 L 9 5" stroke="{color}" stroke-width="{stroke_width:.1f}" fill="none"/>',
    )


def x_marker(marker_id: str, color: str, stroke_width: float) -> str:
    return _preset(
        marker_id,
        f'<path d="M 2 2 L 8 8 M 8 2 L 2 8" stroke="{color}" stroke-width="{stroke_width:.1f}" fill="none"/>',
    )


def dot_marker(marker_id: str, color: str, radius: float) -> str:
    return _preset(marker_id, f'<circle cx="5" cy="5" r="{radius:.2f}" fill="{color}"/>')


def _preset(marker_id: str, content: str, *, ref_x: float = 5.0, orient: str = MARKER_ORIENT_AUTO) -> str:
    return marker(
        MarkerDef(
            marker_id=marker_id,
            content=content,
            view_box=_PRESET_VIEW_BOX,
            ref_x=ref_x,
            ref_y=5.0,
            marker_width=6.0,
            marker_height=6.0,
            orient=orient,
            marker_units=MARKER_UNITS_STROKE_WIDTH,
        )
    )
