from __future__ import annotations

from typing import Iterable

import numpy as np

from .path_builder import PathBuilder
from .points import PointLike, neighbour_window, to_array

DEFAULT_TENSION = 0.3


def polyline_path(points: Iterable[PointLike]) -> str:
    arr = to_array(points)
    if arr.shape[0] == 0:
        return ""
    pb = PathBuilder().move_to(arr[0, 0], arr[0, 1])
    _append_lines(pb, arr[1:])
    return pb.serialize()


def polygon_path(points: Iterable[PointLike]) -> str:
    arr = to_array(points)
    if arr.shape[0] == 0:
        return ""
    pb = PathBuilder().move_to(arr[0, 0], arr[0, 1])
    _append_lines(pb, arr[1:])
    return pb.close().serialize()


def smooth_line_path(points: Iterable[PointLike], tension: float = DEFAULT_TENSION) -> str:
    """Cubic spline through every point, Catmull-Rom style.

    `tension` scales the neighbour-derived control handles: 0 gives straight
    segments, larger values bow the curve further. Fewer than three points
    produce the same output as `polyline_path`.
    """

    arr = to_array(points)
    if arr.shape[0] < 3:
        return polyline_path(arr)
    pb = PathBuilder().move_to(arr[0, 0], arr[0, 1])
    _append_smooth_segments(pb, arr, tension)
    return pb.serialize()


def area_path(points: Iterable[PointLike], baseline_y: float) -> str:
    arr = to_array(points)
    if arr.shape[0] == 0:
        return ""
    pb = _open_area(arr, baseline_y)
    _append_lines(pb, arr[1:])
    return _close_area(pb, arr, baseline_y)


def smooth_area_path(
    points: Iterable[PointLike],
    baseline_y: float,
    tension: float = DEFAULT_TENSION,
) -> str:
    arr = to_array(points)
    if arr.shape[0] == 0:
        return ""
    pb = _open_area(arr, baseline_y)
    if arr.shape[0] < 3:
        _append_lines(pb, arr[1:])
    else:
        _append_smooth_segments(pb, arr, tension)
    return _close_area(pb, arr, baseline_y)


def smoothing_control_points(arr: np.ndarray, index: int, tension: float) -> tuple[np.ndarray, np.ndarray]:
    """Control points for the cubic segment `index -> index + 1`."""

    p0, p1, p2, p3 = neighbour_window(arr, index)
    cp1 = p1 + (p2 - p0) * tension
    cp2 = p2 - (p3 - p1) * tension
    return cp1, cp2


def _append_lines(pb: PathBuilder, arr: np.ndarray) -> None:
    for x, y in arr:
        pb.line_to(x, y)


def _append_smooth_segments(pb: PathBuilder, arr: np.ndarray, tension: float) -> None:
    for i in range(arr.shape[0] - 1):
        cp1, cp2 = smoothing_control_points(arr, i, tension)
        end = arr[i + 1]
        pb.cubic_curve_to(cp1[0], cp1[1], cp2[0], cp2[1], end[0], end[1])


def _open_area(arr: np.ndarray, baseline_y: float) -> PathBuilder:
    pb = PathBuilder().move_to(arr[0, 0], baseline_y)
    return pb.line_to(arr[0, 0], arr[0, 1])


def _close_area(pb: PathBuilder, arr: np.ndarray, baseline_y: float) -> str:
    return pb.line_to(arr[-1, 0], baseline_y).close().serialize()
