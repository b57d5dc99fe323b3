from __future__ import annotations

import colorsys
from typing import Literal

import numpy as np
from PIL import ImageColor

from boxsvg_ui.errors import ColorParseError

ColorSpace = Literal["rgb", "hsl", "lab", "lch", "oklab", "oklch"]
COLOR_SPACES: tuple[str, ...] = ("rgb", "hsl", "lab", "lch", "oklab", "oklch")

RGB = tuple[int, int, int]

_D65_WHITE = np.array([0.95047, 1.0, 1.08883])
_LINEAR_TO_XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ]
)
_XYZ_TO_LINEAR = np.linalg.inv(_LINEAR_TO_XYZ)
_OKLAB_M1 = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ]
)
_OKLAB_M2 = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ]
)
_LAB_EPSILON = 216.0 / 24389.0
_LAB_KAPPA = 24389.0 / 27.0


def parse_color(value: str, role: str = "color") -> RGB:
    """Parse any CSS colour Pillow understands into an (r, g, b) triple."""

    try:
        parsed = ImageColor.getrgb(value.strip())
    except (ValueError, AttributeError) as exc:
        raise ColorParseError(value, role) from exc
    r, g, b = parsed[0], parsed[1], parsed[2]
    return (int(r), int(g), int(b))


def rgb_to_hex(rgb: RGB) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def interpolate_colors(start: RGB, end: RGB, steps: int, space: ColorSpace = "oklch") -> list[RGB]:
    """Evenly spaced colours from `start` to `end` (inclusive) mixed in `space`."""

    if space not in COLOR_SPACES:
        raise ValueError(f"unsupported color space: {space}")
    steps = max(2, steps)
    a = _from_rgb(start, space)
    b = _from_rgb(end, space)
    hue_index = _hue_index(space)
    out: list[RGB] = []
    for i in range(steps):
        t = i / (steps - 1)
        mixed = a + (b - a) * t
        if hue_index is not None:
            mixed[hue_index] = _mix_hue(a[hue_index], b[hue_index], t)
        out.append(_to_rgb(mixed, space))
    return out


def _hue_index(space: str) -> int | None:
    if space == "hsl":
        return 0
    if space in ("lch", "oklch"):
        return 2
    return None


def _mix_hue(h0: float, h1: float, t: float) -> float:
    delta = ((h1 - h0 + 180.0) % 360.0) - 180.0
    return (h0 + delta * t) % 360.0


def _srgb_to_linear(c: np.ndarray) -> np.ndarray:
    return np.where(c <= 0.04045, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)


def _linear_to_srgb(c: np.ndarray) -> np.ndarray:
    c = np.clip(c, 0.0, 1.0)
    return np.where(c <= 0.0031308, c * 12.92, 1.055 * np.power(c, 1.0 / 2.4) - 0.055)


def _from_rgb(rgb: RGB, space: str) -> np.ndarray:
    srgb = np.asarray(rgb, dtype=np.float64) / 255.0
    if space == "rgb":
        return srgb
    if space == "hsl":
        h, l, s = colorsys.rgb_to_hls(*srgb)
        return np.array([h * 360.0, s, l])
    linear = _srgb_to_linear(srgb)
    if space in ("oklab", "oklch"):
        lab = _OKLAB_M2 @ np.cbrt(_OKLAB_M1 @ linear)
    else:
        lab = _xyz_to_lab(_LINEAR_TO_XYZ @ linear)
    if space in ("oklab", "lab"):
        return lab
    return _lab_to_lch(lab)


def _to_rgb(values: np.ndarray, space: str) -> RGB:
    if space == "rgb":
        srgb = values
    elif space == "hsl":
        h, s, l = values
        srgb = np.asarray(colorsys.hls_to_rgb((h % 360.0) / 360.0, l, s))
    else:
        lab = _lch_to_lab(values) if space in ("lch", "oklch") else values
        if space in ("oklab", "oklch"):
            linear = np.linalg.solve(_OKLAB_M1, np.linalg.solve(_OKLAB_M2, lab) ** 3)
        else:
            linear = _XYZ_TO_LINEAR @ _lab_to_xyz(lab)
        srgb = _linear_to_srgb(linear)
    clipped = np.clip(np.round(np.asarray(srgb) * 255.0), 0, 255).astype(int)
    return (int(clipped[0]), int(clipped[1]), int(clipped[2]))


def _xyz_to_lab(xyz: np.ndarray) -> np.ndarray:
    r = xyz / _D65_WHITE
    f = np.where(r > _LAB_EPSILON, np.cbrt(r), (_LAB_KAPPA * r + 16.0) / 116.0)
    return np.array([116.0 * f[1] - 16.0, 500.0 * (f[0] - f[1]), 200.0 * (f[1] - f[2])])


def _lab_to_xyz(lab: np.ndarray) -> np.ndarray:
    fy = (lab[0] + 16.0) / 116.0
    fx = fy + lab[1] / 500.0
    fz = fy - lab[2] / 200.0
    f = np.array([fx, fy, fz])
    cubed = f**3
    r = np.where(cubed > _LAB_EPSILON, cubed, (116.0 * f - 16.0) / _LAB_KAPPA)
    return r * _D65_WHITE


def _lab_to_lch(lab: np.ndarray) -> np.ndarray:
    chroma = float(np.hypot(lab[1], lab[2]))
    hue = float(np.degrees(np.arctan2(lab[2], lab[1]))) % 360.0
    return np.array([lab[0], chroma, hue])


def _lch_to_lab(lch: np.ndarray) -> np.ndarray:
    rad = np.radians(lch[2])
    return np.array([lch[0], lch[1] * np.cos(rad), lch[1] * np.sin(rad)])
