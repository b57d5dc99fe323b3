from __future__ import annotations

import re
import unittest

from boxsvg_ui.defs.color_space import interpolate_colors, parse_color, rgb_to_hex
from boxsvg_ui.defs.gradients import (
    GradientStop,
    LinearGradientDef,
    RadialGradientDef,
    angle_to_coordinates,
    gradient_url,
    interpolated_linear_gradient,
    interpolated_radial_gradient,
    linear_gradient,
    oklch_linear_gradient,
    radial_gradient,
    simple_linear_gradient,
    simple_radial_gradient,
)
from boxsvg_ui.defs.markers import (
    MarkerDef,
    arrow_marker,
    circle_marker,
    cross_marker,
    dot_marker,
    marker,
    marker_url,
    x_marker,
)
from boxsvg_ui.errors import ColorParseError

_STOP_COLOR = re.compile(r'stop-color="(#[0-9a-f]{6})"')


def _hex_to_rgb(value: str) -> tuple[int, int, int]:
    return (int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16))


class MarkerTests(unittest.TestCase):
    def test_marker_omits_empty_attributes(self) -> None:
        self.assertEqual(
            marker(MarkerDef(marker_id="m", content="<circle/>")),
            '<marker id="m" refX="0.00" refY="0.00"><circle/></marker>',
        )

    def test_marker_with_all_attributes(self) -> None:
        defn = MarkerDef(
            marker_id="m",
            content="",
            view_box="0 0 4 4",
            ref_x=2,
            ref_y=2,
            marker_width=3,
            marker_height=3,
            orient="45",
            marker_units="userSpaceOnUse",
        )
        self.assertEqual(
            marker(defn),
            '<marker id="m" viewBox="0 0 4 4" refX="2.00" refY="2.00" markerWidth="3.00" markerHeight="3.00"'
            ' orient="45" markerUnits="userSpaceOnUse"></marker>',
        )

    def test_arrow_preset(self) -> None:
        self.assertEqual(
            arrow_marker("arrow", "#000"),
            '<marker id="arrow" viewBox="0 0 10 10" refX="5.00" refY="5.00" markerWidth="6.00" markerHeight="6.00"'
            ' orient="auto-start-reverse" markerUnits="strokeWidth"><path d="M 0 0 L 10 5 L 0 10 z" fill="#000"/></marker>',
        )

    def test_other_presets(self) -> None:
        self.assertIn('orient="auto"', circle_marker("c", "red"))
        self.assertIn('stroke-width="1.5"', cross_marker("x", "red", 1.5))
        self.assertIn('d="M 2 2 L 8 8 M 8 2 L 2 8"', x_marker("x", "red", 2))
        self.assertIn('r="3.00"', dot_marker("d", "red", 3))
        self.assertEqual(marker_url("arrow"), "url(#arrow)")


class GradientTests(unittest.TestCase):
    def test_linear_gradient_stops(self) -> None:
        defn = LinearGradientDef(
            gradient_id="g",
            x1="0%",
            x2="100%",
            stops=(GradientStop("0%", "red"), GradientStop("100%", "blue", opacity=0.5)),
        )
        self.assertEqual(
            linear_gradient(defn),
            '<linearGradient id="g" x1="0%" x2="100%">\n'
            '  <stop offset="0%" stop-color="red"/>\n'
            '  <stop offset="100%" stop-color="blue" stop-opacity="0.50"/>\n'
            "</linearGradient>",
        )

    def test_stop_opacity_only_inside_unit_interval(self) -> None:
        for opacity in (0.0, 1.0):
            out = radial_gradient(RadialGradientDef("r", stops=(GradientStop("0%", "red", opacity),)))
            self.assertNotIn("stop-opacity", out)

    def test_simple_gradients(self) -> None:
        out = simple_linear_gradient("g", "red", "blue", 90)
        self.assertIn('x1="0%" y1="100%" x2="0%" y2="0%"', out)
        self.assertEqual(out.count("<stop"), 2)
        self.assertIn('cx="50%" cy="50%" r="50%"', simple_radial_gradient("r", "white", "black"))
        self.assertEqual(gradient_url("g"), "url(#g)")

    def test_angle_fallback(self) -> None:
        self.assertEqual(angle_to_coordinates(33), angle_to_coordinates(0))
        self.assertEqual(angle_to_coordinates(405), angle_to_coordinates(45))

    def test_rgb_interpolation_hits_endpoints_exactly(self) -> None:
        out = interpolated_linear_gradient("g", "#000000", "#ffffff", steps=3, color_space="rgb")
        self.assertEqual(_STOP_COLOR.findall(out), ["#000000", "#808080", "#ffffff"])
        self.assertIn('offset="50.0%"', out)

    def test_oklch_endpoints_within_one_unit(self) -> None:
        out = oklch_linear_gradient("g", "#ff0000", "#0000ff", steps=5)
        colors = _STOP_COLOR.findall(out)
        self.assertEqual(len(colors), 5)
        for got, want in ((colors[0], (255, 0, 0)), (colors[-1], (0, 0, 255))):
            for channel, expected in zip(_hex_to_rgb(got), want):
                self.assertLessEqual(abs(channel - expected), 1)

    def test_every_color_space_round_trips_endpoints(self) -> None:
        for space in ("rgb", "hsl", "lab", "lch", "oklab", "oklch"):
            colors = interpolate_colors((10, 120, 200), (250, 200, 20), 4, space)
            self.assertEqual(len(colors), 4)
            for channel, expected in zip(colors[0], (10, 120, 200)):
                self.assertLessEqual(abs(channel - expected), 1, space)

    def test_steps_below_two_are_raised(self) -> None:
        out = interpolated_radial_gradient("r", "white", "black", steps=0, color_space="rgb")
        self.assertEqual(out.count("<stop"), 2)

    def test_unknown_color_space(self) -> None:
        with self.assertRaises(ValueError):
            interpolate_colors((0, 0, 0), (1, 1, 1), 3, "cmyk")  # type: ignore[arg-type]

    def test_parse_error_propagates_with_role(self) -> None:
        with self.assertRaises(ColorParseError) as ctx:
            interpolated_linear_gradient("g", "#ff0000", "not-a-color")
        self.assertEqual(ctx.exception.value, "not-a-color")
        self.assertEqual(ctx.exception.role, "end color")
        with self.assertRaises(ValueError):
            oklch_linear_gradient("g", "", "#fff")

    def test_parse_color_and_hex(self) -> None:
        self.assertEqual(parse_color("#0f0"), (0, 255, 0))
        self.assertEqual(parse_color("rebeccapurple"), (102, 51, 153))
        self.assertEqual(rgb_to_hex((255, 16, 0)), "#ff1000")


if __name__ == "__main__":
    unittest.main()
