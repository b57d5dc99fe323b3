from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np

from .points import Point, PointLike, as_points


@dataclass(frozen=True)
class AffineTransform:
    """2D affine transform in SVG `matrix(a b c d e f)` order.

    Maps (x, y) to (a*x + c*y + e, b*x + d*y + f).
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def translation(cls, tx: float, ty: float) -> "AffineTransform":
        return cls(1.0, 0.0, 0.0, 1.0, tx, ty)

    @classmethod
    def scaling(cls, sx: float, sy: float | None = None) -> "AffineTransform":
        return cls(sx, 0.0, 0.0, sx if sy is None else sy, 0.0, 0.0)

    @classmethod
    def rotation(cls, degrees: float, cx: float = 0.0, cy: float = 0.0) -> "AffineTransform":
        rad = math.radians(degrees)
        cos_t = math.cos(rad)
        sin_t = math.sin(rad)
        rotate = cls(cos_t, sin_t, -sin_t, cos_t, 0.0, 0.0)
        if cx == 0.0 and cy == 0.0:
            return rotate
        return cls.translation(cx, cy).compose(rotate).compose(cls.translation(-cx, -cy))

    @classmethod
    def from_matrix(cls, matrix: np.ndarray) -> "AffineTransform":
        m = np.asarray(matrix, dtype=np.float64)
        if m.shape != (3, 3):
            raise ValueError("affine matrix must be 3x3")
        return cls(
            float(m[0, 0]),
            float(m[1, 0]),
            float(m[0, 1]),
            float(m[1, 1]),
            float(m[0, 2]),
            float(m[1, 2]),
        )

    def as_matrix(self) -> np.ndarray:
        return np.array(
            [
                [self.a, self.c, self.e],
                [self.b, self.d, self.f],
                [0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )

    def compose(self, other: "AffineTransform") -> "AffineTransform":
        """Return the transform applying `other` first, then `self`."""
        return AffineTransform.from_matrix(self.as_matrix() @ other.as_matrix())

    def apply(self, point: PointLike) -> Point:
        (p,) = as_points([point])
        return Point(self.a * p.x + self.c * p.y + self.e, self.b * p.x + self.d * p.y + self.f)

    def is_identity(self) -> bool:
        return (self.a, self.b, self.c, self.d, self.e, self.f) == (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

    def is_zero(self) -> bool:
        # An all-zero transform is an uninitialised value, not a collapse to a point.
        return (self.a, self.b, self.c, self.d, self.e, self.f) == (0.0, 0.0, 0.0, 0.0, 0.0, 0.0)

    def is_translation(self) -> bool:
        return (self.a, self.b, self.c, self.d) == (1.0, 0.0, 0.0, 1.0)

    def to_svg(self) -> str:
        if self.is_translation():
            return f"translate({self.e:.2f} {self.f:.2f})"
        return (
            f"matrix({self.a:.2f} {self.b:.2f} {self.c:.2f} "
            f"{self.d:.2f} {self.e:.2f} {self.f:.2f})"
        )


IDENTITY = AffineTransform()


def transform_attribute(transform: AffineTransform | None) -> str:
    """SVG transform attribute value, or "" when nothing needs emitting."""

    if transform is None or transform.is_identity() or transform.is_zero():
        return ""
    return transform.to_svg()
