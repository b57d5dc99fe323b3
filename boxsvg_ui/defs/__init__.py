"""Marker and gradient definitions for `<defs>`."""

from .color_space import COLOR_SPACES, ColorSpace, interpolate_colors, parse_color, rgb_to_hex
from .gradients import (
    GradientStop,
    LinearGradientDef,
    RadialGradientDef,
    angle_to_coordinates,
    gradient_url,
    interpolated_linear_gradient,
    interpolated_radial_gradient,
    linear_gradient,
    oklch_linear_gradient,
    oklch_radial_gradient,
    radial_gradient,
    simple_linear_gradient,
    simple_radial_gradient,
)
from .markers import (
    MARKER_ORIENT_AUTO,
    MARKER_ORIENT_AUTO_START_REVERSE,
    MARKER_UNITS_STROKE_WIDTH,
    MARKER_UNITS_USER_SPACE,
    MarkerDef,
    arrow_marker,
    circle_marker,
    cross_marker,
    diamond_marker,
    dot_marker,
    marker,
    marker_url,
    square_marker,
    triangle_marker,
    x_marker,
)

__all__ = [
    "COLOR_SPACES",
    "ColorSpace",
    "GradientStop",
    "LinearGradientDef",
    "MARKER_ORIENT_AUTO",
    "MARKER_ORIENT_AUTO_START_REVERSE",
    "MARKER_UNITS_STROKE_WIDTH",
    "MARKER_UNITS_USER_SPACE",
    "MarkerDef",
    "RadialGradientDef",
    "angle_to_coordinates",
    "arrow_marker",
    "circle_marker",
    "cross_marker",
    "diamond_marker",
    "dot_marker",
    "gradient_url",
    "interpolate_colors",
    "interpolated_linear_gradient",
    "interpolated_radial_gradient",
    "linear_gradient",
    "marker",
    "marker_url",
    "oklch_linear_gradient",
    "oklch_radial_gradient",
    "parse_color",
    "radial_gradient",
    "rgb_to_hex",
    "simple_linear_gradient",
    "simple_radial_gradient",
    "square_marker",
    "triangle_marker",
    "x_marker",
]
