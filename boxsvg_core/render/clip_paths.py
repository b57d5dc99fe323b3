from __future__ import annotations

from dataclasses import dataclass
import threading

DEFAULT_ID_PREFIX = "clip"


class IdentifierSource:
    """Lock-guarded counter issuing `prefix-N` identifiers, N strictly increasing."""

    def __init__(self, prefix: str = DEFAULT_ID_PREFIX, start: int = 0) -> None:
        if not prefix:
            raise ValueError("identifier prefix must be non-empty")
        self._prefix = prefix
        self._lock = threading.Lock()
        self._last = start

    @property
    def prefix(self) -> str:
        return self._prefix

    def next_id(self) -> str:
        with self._lock:
            self._last += 1
            value = self._last
        return f"{self._prefix}-{value}"


# Shared by every registry that is not handed its own source.
PROCESS_IDENTIFIERS = IdentifierSource()


@dataclass(frozen=True)
class ClipDefinition:
    clip_id: str
    shape_markup: str

    def to_svg(self) -> str:
        return f'<clipPath id="{self.clip_id}">{self.shape_markup}</clipPath>'


class ClipPathRegistry:
    """Collects clipPath definitions discovered while rendering one document.

    Definitions are kept in insertion order and never removed; the renderer
    flushes them into `<defs>` once the tree has been walked.
    """

    def __init__(self, id_source: IdentifierSource | None = None) -> None:
        self._ids = id_source if id_source is not None else PROCESS_IDENTIFIERS
        self._definitions: list[ClipDefinition] = []

    @property
    def definitions(self) -> tuple[ClipDefinition, ...]:
        return tuple(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def generate_id(self) -> str:
        return self._ids.next_id()

    def add_rounded_rect(self, x: float, y: float, width: float, height: float, radius: float) -> str:
        return self.add_custom(
            f'<rect x="{x:.2f}" y="{y:.2f}" width="{width:.2f}" height="{height:.2f}" '
            f'rx="{radius:.2f}" ry="{radius:.2f}"/>'
        )

    def add_rect(self, x: float, y: float, width: float, height: float) -> str:
        return self.add_custom(f'<rect x="{x:.2f}" y="{y:.2f}" width="{width:.2f}" height="{height:.2f}"/>')

    def add_circle(self, cx: float, cy: float, r: float) -> str:
        return self.add_custom(f'<circle cx="{cx:.2f}" cy="{cy:.2f}" r="{r:.2f}"/>')

    def add_custom(self, shape_markup: str) -> str:
        clip_id = self.generate_id()
        self._definitions.append(ClipDefinition(clip_id=clip_id, shape_markup=shape_markup))
        return clip_id

    def flush_definitions(self) -> str:
        return "\n".join(definition.to_svg() for definition in self._definitions)


def clip_path_url(clip_id: str) -> str:
    return f"url(#{clip_id})"
