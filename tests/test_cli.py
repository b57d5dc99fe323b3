from __future__ import annotations

import contextlib
import io
import json
from pathlib import Path
import tempfile
import unittest

from boxsvg_core.geometry.curves import smooth_area_path, smooth_line_path
from boxsvg_core.geometry.points import Point
from boxsvg_core.render.tree import LayoutBox
from main import PATH_KINDS, build_path, depth_style_func, main, parse_points

TREE = {
    "rect": {"x": 0, "y": 0, "width": 200, "height": 100},
    "children": [
        {"rect": {"x": 10, "y": 10, "width": 50, "height": 50}},
        {"rect": {"x": 80, "y": 10, "width": 50, "height": 50}},
    ],
}


def _run(argv: list[str]) -> str:
    out = io.StringIO()
    with contextlib.redirect_stdout(out):
        main(argv)
    return out.getvalue()


class CommandLineTests(unittest.TestCase):
    def test_parse_points(self) -> None:
        self.assertEqual(parse_points("0,0 10,5.5"), [Point(0.0, 0.0), Point(10.0, 5.5)])
        self.assertEqual(parse_points(""), [])
        with self.assertRaises(ValueError):
            parse_points("1,2,3")

    def test_path_command_matches_library(self) -> None:
        points = parse_points("0,0 10,10 20,0 30,10")
        printed = _run(["path", "smooth-line", "--points", "0,0 10,10 20,0 30,10", "--tension", "0.25"])
        self.assertEqual(printed.strip(), smooth_line_path(points, 0.25))
        printed = _run(["path", "smooth-area", "--points", "0,0 10,10 20,0", "--baseline", "40"])
        self.assertEqual(printed.strip(), smooth_area_path(points[:3], 40))

    def test_every_path_kind_builds(self) -> None:
        points = parse_points("0,0 5,5 10,0")
        for kind in PATH_KINDS:
            self.assertTrue(build_path(kind, points, tension=0.3, baseline=20).startswith("M "), kind)
        with self.assertRaises(ValueError):
            build_path("spiral", points, tension=0.3, baseline=0)

    def test_render_tree_to_stdout(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            tree_path = Path(td) / "tree.json"
            tree_path.write_text(json.dumps(TREE))
            printed = _run(["render-tree", str(tree_path), "--width", "200", "--height", "100", "--depth-fills", "#fff,#abc"])
        self.assertIn('<svg width="200" height="100"', printed)
        self.assertEqual(printed.count("<rect"), 3)
        self.assertEqual(printed.count('fill="#abc"'), 2)
        self.assertTrue(printed.rstrip().endswith("</svg>"))

    def test_render_tree_with_options_file_and_out(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            (root / "tree.json").write_text(json.dumps(TREE))
            (root / "opts.toml").write_text('stylesheet = "none"\nbackground_color = "#f8f9fa"\n')
            out_path = root / "out.svg"
            printed = _run(
                [
                    "render-tree",
                    str(root / "tree.json"),
                    "--options",
                    str(root / "opts.toml"),
                    "--out",
                    str(out_path),
                ]
            )
            svg = out_path.read_text(encoding="utf-8")
        self.assertEqual(printed.strip(), f"wrote {out_path}")
        self.assertNotIn("<style>", svg)
        self.assertIn('fill="#f8f9fa"', svg)

    def test_rejects_non_positive_size(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            tree_path = Path(td) / "tree.json"
            tree_path.write_text(json.dumps(TREE))
            with self.assertRaises(ValueError):
                main(["render-tree", str(tree_path), "--width", "0"])

    def test_depth_style_func_repeats_last_fill(self) -> None:
        style_for = depth_style_func(["#111", "#222"])
        node = LayoutBox.from_dict(TREE)
        self.assertEqual(style_for(node, 0).fill, "#111")
        self.assertEqual(style_for(node, 5).fill, "#222")
        with self.assertRaises(ValueError):
            depth_style_func([])


if __name__ == "__main__":
    unittest.main()
