from __future__ import annotations

import unittest

from boxsvg_core.geometry.path_builder import PathBuilder, PathCommand


class PathBuilderTests(unittest.TestCase):
    def test_empty_builder_serializes_to_empty_string(self) -> None:
        self.assertEqual(PathBuilder().serialize(), "")
        self.assertEqual(len(PathBuilder()), 0)

    def test_move_and_line_commands(self) -> None:
        pb = PathBuilder().move_to(10, 20).line_to(30, 40)
        self.assertEqual(pb.serialize(), "M 10.00 20.00 L 30.00 40.00")

    def test_horizontal_and_vertical_lines(self) -> None:
        pb = PathBuilder().move_to(0, 0).horizontal_line_to(50).vertical_line_to(25)
        self.assertEqual(pb.serialize(), "M 0.00 0.00 H 50.00 V 25.00")

    def test_cubic_curve_uses_comma_separated_points(self) -> None:
        pb = PathBuilder().move_to(0, 0).cubic_curve_to(10, 20, 30, 40, 50, 60)
        self.assertEqual(pb.serialize(), "M 0.00 0.00 C 10.00 20.00, 30.00 40.00, 50.00 60.00")

    def test_smooth_cubic_and_quadratic(self) -> None:
        pb = PathBuilder().smooth_cubic_curve_to(1, 2, 3, 4).quadratic_curve_to(5, 6, 7, 8)
        self.assertEqual(pb.serialize(), "S 1.00 2.00, 3.00 4.00 Q 5.00 6.00, 7.00 8.00")

    def test_arc_formats_flags_as_integers(self) -> None:
        pb = PathBuilder().arc_to(25, 25, 0, True, False, 50, 25)
        self.assertEqual(pb.serialize(), "A 25.00 25.00 0.00 1 0 50.00 25.00")
        pb = PathBuilder().arc_to(5, 10, 30, 0, 1, 1, 2)
        self.assertEqual(pb.serialize(), "A 5.00 10.00 30.00 0 1 1.00 2.00")

    def test_close_command(self) -> None:
        pb = PathBuilder().move_to(0, 0).line_to(10, 0).close()
        self.assertEqual(pb.serialize(), "M 0.00 0.00 L 10.00 0.00 Z")

    def test_each_call_appends_one_command_and_chains(self) -> None:
        pb = PathBuilder()
        returned = pb.move_to(1, 1)
        self.assertIs(returned, pb)
        pb.line_to(2, 2).line_to(3, 3).close()
        self.assertEqual(len(pb), 4)
        self.assertEqual([c.letter for c in pb.commands], ["M", "L", "L", "Z"])

    def test_serialize_is_idempotent(self) -> None:
        pb = PathBuilder().move_to(1.234, 5.678).cubic_curve_to(1, 2, 3, 4, 5, 6).close()
        first = pb.serialize()
        second = pb.serialize()
        self.assertEqual(first, second)
        self.assertEqual(str(pb), first)
        self.assertEqual(len(pb), 3)

    def test_rounds_to_two_decimals(self) -> None:
        self.assertEqual(PathBuilder().move_to(1.005, 2.3333).serialize(), "M 1.00 2.33")

    def test_non_finite_values_are_accepted_and_logged(self) -> None:
        with self.assertLogs("boxsvg_core.geometry.path_builder", level="WARNING"):
            pb = PathBuilder().move_to(float("nan"), float("inf"))
        self.assertEqual(pb.serialize(), "M nan inf")

    def test_path_command_to_svg(self) -> None:
        self.assertEqual(PathCommand("L", (1.0, 2.0)).to_svg(), "L 1.00 2.00")
        self.assertEqual(PathCommand("Z").to_svg(), "Z")


if __name__ == "__main__":
    unittest.main()
