from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .color_space import ColorSpace, interpolate_colors, parse_color, rgb_to_hex

GradientUnits = Literal["userSpaceOnUse", "objectBoundingBox"]
SpreadMethod = Literal["pad", "reflect", "repeat"]

_ANGLE_COORDINATES: dict[float, tuple[str, str, str, str]] = {
    0: ("0%", "0%", "100%", "0%"),
    45: ("0%", "100%", "100%", "0%"),
    90: ("0%", "100%", "0%", "0%"),
    135: ("100%", "100%", "0%", "0%"),
    180: ("100%", "0%", "0%", "0%"),
    225: ("100%", "0%", "0%", "100%"),
    270: ("0%", "0%", "0%", "100%"),
    315: ("0%", "0%", "100%", "100%"),
}


@dataclass(frozen=True)
class GradientStop:
    offset: str
    color: str
    opacity: float = 1.0


@dataclass(frozen=True)
class LinearGradientDef:
    gradient_id: str
    stops: tuple[GradientStop, ...] = ()
    x1: str = ""
    y1: str = ""
    x2: str = ""
    y2: str = ""
    units: GradientUnits | Literal[""] = ""
    spread_method: SpreadMethod | Literal[""] = ""


@dataclass(frozen=True)
class RadialGradientDef:
    gradient_id: str
    stops: tuple[GradientStop, ...] = ()
    cx: str = ""
    cy: str = ""
    r: str = ""
    fx: str = ""
    fy: str = ""
    fr: str = ""
    units: GradientUnits | Literal[""] = ""
    spread_method: SpreadMethod | Literal[""] = ""


def linear_gradient(defn: LinearGradientDef) -> str:
    attrs = _optional_attrs(
        ("x1", defn.x1),
        ("y1", defn.y1),
        ("x2", defn.x2),
        ("y2", defn.y2),
        ("gradientUnits", defn.units),
        ("spreadMethod", defn.spread_method),
    )
    return f'<linearGradient id="{defn.gradient_id}"{attrs}>\n{_stops(defn.stops)}</linearGradient>'


def radial_gradient(defn: RadialGradientDef) -> str:
    attrs = _optional_attrs(
        ("cx", defn.cx),
        ("cy", defn.cy),
        ("r", defn.r),
        ("fx", defn.fx),
        ("fy", defn.fy),
        ("fr", defn.fr),
        ("gradientUnits", defn.units),
        ("spreadMethod", defn.spread_method),
    )
    return f'<radialGradient id="{defn.gradient_id}"{attrs}>\n{_stops(defn.stops)}</radialGradient>'


def gradient_url(gradient_id: str) -> str:
    return f"url(#{gradient_id})"


def angle_to_coordinates(angle: float) -> tuple[str, str, str, str]:
    """Map one of the eight compass angles (degrees) to x1, y1, x2, y2.

    0 runs left to right, 90 bottom to top. Other angles fall back to 0.
    """

    return _ANGLE_COORDINATES.get(angle % 360, _ANGLE_COORDINATES[0])


def simple_linear_gradient(gradient_id: str, start_color: str, end_color: str, angle: float = 0.0) -> str:
    x1, y1, x2, y2 = angle_to_coordinates(angle)
    return linear_gradient(
        LinearGradientDef(
            gradient_id=gradient_id,
            x1=x1,
            y1=y1,
            x2=x2,
            y2=y2,
            stops=(GradientStop("0%", start_color), GradientStop("100%", end_color)),
        )
    )


def simple_radial_gradient(gradient_id: str, center_color: str, edge_color: str) -> str:
    return radial_gradient(
        RadialGradientDef(
            gradient_id=gradient_id,
            cx="50%",
            cy="50%",
            r="50%",
            stops=(GradientStop("0%", center_color), GradientStop("100%", edge_color)),
        )
    )


def interpolated_linear_gradient(
    gradient_id: str,
    start_color: str,
    end_color: str,
    angle: float = 0.0,
    steps: int = 8,
    color_space: ColorSpace = "oklch",
) -> str:
    """Linear gradient whose stops are mixed in `color_space` and written as sRGB hex.

    Raises ColorParseError if either colour cannot be parsed.
    """

    stops = _interpolated_stops(start_color, end_color, steps, color_space, ("start color", "end color"))
    x1, y1, x2, y2 = angle_to_coordinates(angle)
    return linear_gradient(LinearGradientDef(gradient_id=gradient_id, x1=x1, y1=y1, x2=x2, y2=y2, stops=stops))


def interpolated_radial_gradient(
    gradient_id: str,
    center_color: str,
    edge_color: str,
    steps: int = 8,
    color_space: ColorSpace = "oklch",
) -> str:
    stops = _interpolated_stops(center_color, edge_color, steps, color_space, ("center color", "edge color"))
    return radial_gradient(RadialGradientDef(gradient_id=gradient_id, cx="50%", cy="50%", r="50%", stops=stops))


def oklch_linear_gradient(gradient_id: str, start_color: str, end_color: str, angle: float = 0.0, steps: int = 8) -> str:
    return interpolated_linear_gradient(gradient_id, start_color, end_color, angle, steps, "oklch")


def oklch_radial_gradient(gradient_id: str, center_color: str, edge_color: str, steps: int = 8) -> str:
    return interpolated_radial_gradient(gradient_id, center_color, edge_color, steps, "oklch")


def _interpolated_stops(
    first: str,
    last: str,
    steps: int,
    color_space: ColorSpace,
    roles: tuple[str, str],
) -> tuple[GradientStop, ...]:
    steps = max(2, steps)
    start = parse_color(first, roles[0])
    end = parse_color(last, roles[1])
    colors = interpolate_colors(start, end, steps, color_space)
    return tuple(
        GradientStop(offset=f"{(i / (steps - 1)) * 100:.1f}%", color=rgb_to_hex(rgb))
        for i, rgb in enumerate(colors)
    )


def _stops(stops: tuple[GradientStop, ...]) -> str:
    lines = []
    for stop in stops:
        opacity = f' stop-opacity="{stop.opacity:.2f}"' if 0.0 < stop.opacity < 1.0 else ""
        lines.append(f'  <stop offset="{stop.offset}" stop-color="{stop.color}"{opacity}/>\n')
    return "".join(lines)


def _optional_attrs(*pairs: tuple[str, str]) -> str:
    return "".join(f' {name}="{value}"' for name, value in pairs if value)
