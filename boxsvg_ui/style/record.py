from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal

StrokeLinecap = Literal["butt", "round", "square"]
StrokeLinejoin = Literal["miter", "round", "bevel"]
TextAnchor = Literal["start", "middle", "end"]
DominantBaseline = Literal[
    "auto",
    "middle",
    "hanging",
    "text-top",
    "text-bottom",
    "alphabetic",
    "mathematical",
]
FontWeight = Literal[
    "normal",
    "bold",
    "bolder",
    "lighter",
    "100",
    "200",
    "300",
    "400",
    "500",
    "600",
    "700",
    "800",
    "900",
]
FontStyle = Literal["normal", "italic", "oblique"]


@dataclass(frozen=True)
class StyleRecord:
    """Presentation attributes for one SVG element.

    Every field has an "unset" value that suppresses its attribute: "" for
    text, 0 for numbers. Opacities are only emitted strictly inside (0, 1).
    """

    fill: str = ""
    stroke: str = ""
    stroke_width: float = 0.0
    stroke_linecap: StrokeLinecap | Literal[""] = ""
    stroke_linejoin: StrokeLinejoin | Literal[""] = ""
    opacity: float = 0.0
    fill_opacity: float = 0.0
    stroke_opacity: float = 0.0
    css_class: str = ""
    clip_path: str = ""
    text_anchor: TextAnchor | Literal[""] = ""
    dominant_baseline: DominantBaseline | Literal[""] = ""
    font_family: str = ""
    font_size: float = 0.0
    font_size_unit: str = ""
    font_weight: FontWeight | Literal[""] = ""
    font_style: FontStyle | Literal[""] = ""

    def with_overrides(self, **changes: object) -> "StyleRecord":
        return replace(self, **changes)


EMPTY_STYLE = StyleRecord()


def format_style(style: StyleRecord) -> str:
    """Serialize a StyleRecord to an attribute string with one leading space."""

    attrs: list[str] = []
    _text(attrs, "fill", style.fill)
    _text(attrs, "stroke", style.stroke)
    if style.stroke_width > 0:
        attrs.append(f'stroke-width="{style.stroke_width:.2f}"')
    _text(attrs, "stroke-linecap", style.stroke_linecap)
    _text(attrs, "stroke-linejoin", style.stroke_linejoin)
    _opacity(attrs, "opacity", style.opacity)
    _opacity(attrs, "fill-opacity", style.fill_opacity)
    _opacity(attrs, "stroke-opacity", style.stroke_opacity)
    _text(attrs, "class", style.css_class)
    _text(attrs, "clip-path", style.clip_path)
    _text(attrs, "text-anchor", style.text_anchor)
    _text(attrs, "dominant-baseline", style.dominant_baseline)
    _text(attrs, "font-family", style.font_family)
    if style.font_size > 0:
        attrs.append(f'font-size="{style.font_size:.2f}{style.font_size_unit}"')
    _text(attrs, "font-weight", style.font_weight)
    _text(attrs, "font-style", style.font_style)
    if not attrs:
        return ""
    return " " + " ".join(attrs)


def _text(attrs: list[str], name: str, value: str) -> None:
    if value:
        attrs.append(f'{name}="{value}"')


def _opacity(attrs: list[str], name: str, value: float) -> None:
    if 0.0 < value < 1.0:
        attrs.append(f'{name}="{value:.2f}"')
