from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Iterable, Sequence, TypeAlias, Union

import numpy as np


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def has_area(self) -> bool:
        return self.width > 0 and self.height > 0


PointLike: TypeAlias = Union[Point, tuple[float, float]]


def as_points(points: Iterable[PointLike]) -> tuple[Point, ...]:
    """Coerce `(x, y)` pairs to Points, keeping order."""

    out: list[Point] = []
    for p in points:
        if isinstance(p, Point):
            out.append(p)
        else:
            x, y = p
            out.append(Point(float(x), float(y)))
    return tuple(out)


def to_array(points: Iterable[PointLike]) -> np.ndarray:
    pts = as_points(points)
    if not pts:
        return np.zeros((0, 2), dtype=np.float64)
    return np.asarray([(p.x, p.y) for p in pts], dtype=np.float64)


def bounds(points: Iterable[PointLike]) -> Rect:
    arr = to_array(points)
    if arr.shape[0] == 0:
        return Rect(0.0, 0.0, 0.0, 0.0)
    lo = arr.min(axis=0)
    hi = arr.max(axis=0)
    return Rect(float(lo[0]), float(lo[1]), float(hi[0] - lo[0]), float(hi[1] - lo[1]))


def polyline_length(points: Iterable[PointLike]) -> float:
    arr = to_array(points)
    if arr.shape[0] < 2:
        return 0.0
    deltas = np.diff(arr, axis=0)
    return float(np.sum(np.hypot(deltas[:, 0], deltas[:, 1])))


def neighbour_window(arr: np.ndarray, index: int) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Return (p0, p1, p2, p3) around segment `index -> index + 1`.

    Neighbours past either end duplicate the nearest point.
    """

    n = arr.shape[0]
    p1 = arr[index]
    p2 = arr[index + 1]
    p0 = arr[index - 1] if index > 0 else p1
    p3 = arr[index + 2] if index + 2 < n else p2
    return p0, p1, p2, p3


def is_finite_sequence(values: Sequence[float]) -> bool:
    return all(math.isfinite(v) for v in values)
