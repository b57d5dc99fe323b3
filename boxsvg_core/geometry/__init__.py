from .curves import (
    DEFAULT_TENSION,
    area_path,
    polygon_path,
    polyline_path,
    smooth_area_path,
    smooth_line_path,
    smoothing_control_points,
)
from .path_builder import PathBuilder, PathCommand
from .points import Point, PointLike, Rect, as_points, bounds, neighbour_window, polyline_length, to_array
from .transform import IDENTITY, AffineTransform, transform_attribute

__all__ = [
    "AffineTransform",
    "DEFAULT_TENSION",
    "IDENTITY",
    "PathBuilder",
    "PathCommand",
    "Point",
    "PointLike",
    "Rect",
    "area_path",
    "as_points",
    "bounds",
    "neighbour_window",
    "polygon_path",
    "polyline_length",
    "polyline_path",
    "smooth_area_path",
    "smooth_line_path",
    "smoothing_control_points",
    "to_array",
    "transform_attribute",
]
