from __future__ import annotations

import argparse
from dataclasses import replace
import json
import logging
from pathlib import Path
from typing import Callable, Sequence

from boxsvg_core.config import load_render_options
from boxsvg_core.geometry.curves import (
    DEFAULT_TENSION,
    area_path,
    polygon_path,
    polyline_path,
    smooth_area_path,
    smooth_line_path,
)
from boxsvg_core.geometry.points import Point
from boxsvg_core.render.options import RenderOptions, default_render_options
from boxsvg_core.render.renderer import render_to_svg
from boxsvg_core.render.tree import BoxNode, LayoutBox
from boxsvg_ui.style.record import StyleRecord

PATH_KINDS = ("polyline", "polygon", "smooth-line", "area", "smooth-area")


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="boxsvg")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    tree = sub.add_parser("render-tree", help="Render a JSON layout tree to SVG.")
    tree.add_argument("tree_json", type=Path)
    tree.add_argument("--options", type=Path, default=None, help="TOML render options file.")
    tree.add_argument("--width", type=float, default=None)
    tree.add_argument("--height", type=float, default=None)
    tree.add_argument("--background", default=None, help="Background fill, e.g. #f8f9fa.")
    tree.add_argument(
        "--depth-fills",
        default=None,
        help="Comma-separated fills by tree depth; the last one repeats for deeper nodes.",
    )
    tree.add_argument("--out", type=Path, default=None, help="Write to file instead of stdout.")

    path = sub.add_parser("path", help="Print SVG path data for a point sequence.")
    path.add_argument("kind", choices=PATH_KINDS)
    path.add_argument("--points", required=True, help='Space-separated "x,y" pairs.')
    path.add_argument("--tension", type=float, default=DEFAULT_TENSION)
    path.add_argument("--baseline", type=float, default=0.0)
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.command == "render-tree":
        options = _build_options(args)
        payload = json.loads(args.tree_json.read_text(encoding="utf-8"))
        root = LayoutBox.from_dict(payload)
        svg = render_to_svg(root, options)
        if args.out is not None:
            args.out.write_text(svg, encoding="utf-8")
            print(f"wrote {args.out}")
        else:
            print(svg)
        return

    if args.command == "path":
        points = parse_points(args.points)
        print(build_path(args.kind, points, tension=args.tension, baseline=args.baseline))
        return

    raise RuntimeError(f"unsupported command: {args.command}")


def parse_points(raw: str) -> list[Point]:
    points: list[Point] = []
    for token in raw.split():
        parts = token.split(",")
        if len(parts) != 2:
            raise ValueError(f"point must use `x,y` format: {token!r}")
        points.append(Point(float(parts[0]), float(parts[1])))
    return points


def build_path(kind: str, points: Sequence[Point], *, tension: float, baseline: float) -> str:
    if kind == "polyline":
        return polyline_path(points)
    if kind == "polygon":
        return polygon_path(points)
    if kind == "smooth-line":
        return smooth_line_path(points, tension)
    if kind == "area":
        return area_path(points, baseline)
    if kind == "smooth-area":
        return smooth_area_path(points, baseline, tension)
    raise ValueError(f"unsupported path kind: {kind}")


def depth_style_func(fills: Sequence[str]) -> Callable[[BoxNode, int], StyleRecord]:
    if not fills:
        raise ValueError("at least one fill is required")

    def style_for(node: BoxNode, depth: int) -> StyleRecord:
        return StyleRecord(fill=fills[min(depth, len(fills) - 1)], stroke="#333")

    return style_for


def _build_options(args: argparse.Namespace) -> RenderOptions:
    options = default_render_options()
    if args.options is not None:
        options = load_render_options(args.options, options)
    if args.width is not None:
        if args.width <= 0:
            raise ValueError("width must be > 0")
        options = replace(options, width=args.width)
    if args.height is not None:
        if args.height <= 0:
            raise ValueError("height must be > 0")
        options = replace(options, height=args.height)
    if args.background is not None:
        options = replace(options, background_color=args.background)
    if args.depth_fills:
        fills = [f.strip() for f in args.depth_fills.split(",") if f.strip()]
        options = replace(options, style_func=depth_style_func(fills))
    return options


if __name__ == "__main__":
    main()
