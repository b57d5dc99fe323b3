from __future__ import annotations

import unittest

import numpy as np

from boxsvg_core.geometry.curves import (
    area_path,
    polygon_path,
    polyline_path,
    smooth_area_path,
    smooth_line_path,
    smoothing_control_points,
)
from boxsvg_core.geometry.points import Point

ZIGZAG = [Point(0, 0), Point(10, 10), Point(20, 0), Point(30, 10)]


class CurveSynthesizerTests(unittest.TestCase):
    def test_polyline_starts_with_move_and_has_n_minus_one_lines(self) -> None:
        for n in range(1, 6):
            pts = ZIGZAG[:n] if n <= len(ZIGZAG) else ZIGZAG + [Point(40, 0)]
            d = polyline_path(pts)
            tokens = d.split()
            self.assertEqual(tokens[:3], ["M", f"{pts[0].x:.2f}", f"{pts[0].y:.2f}"])
            self.assertEqual(tokens.count("L"), len(pts) - 1)
            self.assertNotIn("Z", tokens)

    def test_polyline_empty_and_single_point(self) -> None:
        self.assertEqual(polyline_path([]), "")
        self.assertEqual(polyline_path([(5, 7)]), "M 5.00 7.00")

    def test_polygon_is_polyline_plus_close(self) -> None:
        self.assertEqual(polygon_path(ZIGZAG), polyline_path(ZIGZAG) + " Z")
        self.assertEqual(polygon_path([(1, 2)]), "M 1.00 2.00 Z")
        self.assertEqual(polygon_path([]), "")

    def test_smooth_line_with_two_points_equals_polyline(self) -> None:
        pts = [(0, 0), (100, 50)]
        for tension in (0.0, 0.3, 1.0, -2.5):
            self.assertEqual(smooth_line_path(pts, tension), polyline_path(pts))
        self.assertEqual(smooth_line_path([(3, 4)]), polyline_path([(3, 4)]))
        self.assertEqual(smooth_line_path([]), "")

    def test_smooth_line_control_points(self) -> None:
        d = smooth_line_path(ZIGZAG[:3], 0.3)
        self.assertEqual(
            d,
            "M 0.00 0.00 C 3.00 3.00, 4.00 10.00, 10.00 10.00 C 16.00 10.00, 17.00 3.00, 20.00 0.00",
        )

    def test_smooth_line_has_one_curve_per_segment(self) -> None:
        d = smooth_line_path(ZIGZAG)
        self.assertEqual(d.split().count("C"), len(ZIGZAG) - 1)
        self.assertNotIn("L", d.split())

    def test_zero_tension_puts_controls_on_segment_ends(self) -> None:
        arr = np.asarray([(p.x, p.y) for p in ZIGZAG], dtype=np.float64)
        cp1, cp2 = smoothing_control_points(arr, 1, 0.0)
        np.testing.assert_allclose(cp1, arr[1])
        np.testing.assert_allclose(cp2, arr[2])

    def test_area_path_framing(self) -> None:
        d = area_path(ZIGZAG, 50)
        self.assertTrue(d.startswith("M 0.00 50.00 L 0.00 0.00"))
        self.assertTrue(d.endswith("L 30.00 50.00 Z"))
        self.assertEqual(d.split().count("L"), len(ZIGZAG) + 1)
        self.assertEqual(area_path([], 50), "")

    def test_smooth_area_shares_framing_with_curved_interior(self) -> None:
        d = smooth_area_path(ZIGZAG, 50, 0.3)
        tokens = d.split()
        self.assertEqual(tokens[:3], ["M", "0.00", "50.00"])
        self.assertEqual(tokens[-1], "Z")
        self.assertEqual(tokens.count("C"), len(ZIGZAG) - 1)
        # only the two baseline legs are straight
        self.assertEqual(tokens.count("L"), 2)

    def test_smooth_area_with_two_points_uses_lines(self) -> None:
        pts = [(0, 10), (20, 30)]
        self.assertEqual(smooth_area_path(pts, 0), area_path(pts, 0))

    def test_accepts_tuples_and_points(self) -> None:
        self.assertEqual(polyline_path([(0, 0), (1, 1)]), polyline_path([Point(0, 0), Point(1, 1)]))


if __name__ == "__main__":
    unittest.main()
