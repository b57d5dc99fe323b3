from __future__ import annotations

from dataclasses import dataclass
import logging

from .points import is_finite_sequence

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathCommand:
    letter: str
    values: tuple[float, ...] = ()

    def to_svg(self) -> str:
        v = [f"{value:.2f}" for value in self.values]
        if self.letter in ("M", "L"):
            return f"{self.letter} {v[0]} {v[1]}"
        if self.letter in ("H", "V"):
            return f"{self.letter} {v[0]}"
        if self.letter == "C":
            return f"C {v[0]} {v[1]}, {v[2]} {v[3]}, {v[4]} {v[5]}"
        if self.letter in ("S", "Q"):
            return f"{self.letter} {v[0]} {v[1]}, {v[2]} {v[3]}"
        if self.letter == "A":
            large = int(self.values[3])
            sweep = int(self.values[4])
            return f"A {v[0]} {v[1]} {v[2]} {large} {sweep} {v[5]} {v[6]}"
        return self.letter


class PathBuilder:
    """Chainable accumulator of SVG path-data commands.

    Every call appends one command and returns the builder. Numbers are not
    validated; callers own the finiteness of their coordinates.
    """

    def __init__(self) -> None:
        self._commands: list[PathCommand] = []

    @property
    def commands(self) -> tuple[PathCommand, ...]:
        return tuple(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __str__(self) -> str:
        return self.serialize()

    def move_to(self, x: float, y: float) -> "PathBuilder":
        return self._append("M", x, y)

    def line_to(self, x: float, y: float) -> "PathBuilder":
        return self._append("L", x, y)

    def horizontal_line_to(self, x: float) -> "PathBuilder":
        return self._append("H", x)

    def vertical_line_to(self, y: float) -> "PathBuilder":
        return self._append("V", y)

    def cubic_curve_to(
        self,
        c1x: float,
        c1y: float,
        c2x: float,
        c2y: float,
        x: float,
        y: float,
    ) -> "PathBuilder":
        return self._append("C", c1x, c1y, c2x, c2y, x, y)

    def smooth_cubic_curve_to(self, c2x: float, c2y: float, x: float, y: float) -> "PathBuilder":
        return self._append("S", c2x, c2y, x, y)

    def quadratic_curve_to(self, cx: float, cy: float, x: float, y: float) -> "PathBuilder":
        return self._append("Q", cx, cy, x, y)

    def arc_to(
        self,
        rx: float,
        ry: float,
        rotation: float,
        large_arc: bool | int,
        sweep: bool | int,
        x: float,
        y: float,
    ) -> "PathBuilder":
        return self._append("A", rx, ry, rotation, 1 if large_arc else 0, 1 if sweep else 0, x, y)

    def close(self) -> "PathBuilder":
        return self._append("Z")

    def serialize(self) -> str:
        return " ".join(command.to_svg() for command in self._commands)

    def _append(self, letter: str, *values: float) -> "PathBuilder":
        coords = tuple(float(v) for v in values)
        if not is_finite_sequence(coords):
            LOGGER.warning("PathBuilder accepted non-finite values; command=%s values=%s", letter, coords)
        self._commands.append(PathCommand(letter, coords))
        return self
