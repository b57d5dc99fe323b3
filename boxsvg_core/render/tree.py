from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol, Sequence

from boxsvg_core.geometry.points import Rect
from boxsvg_core.geometry.transform import AffineTransform


class BoxNode(Protocol):
    """Read-only view of one computed layout box.

    The renderer reads exactly these three facets, once per node.
    """

    @property
    def rect(self) -> Rect:
        ...

    @property
    def transform(self) -> AffineTransform | None:
        ...

    @property
    def children(self) -> Sequence["BoxNode"]:
        ...


@dataclass(frozen=True)
class LayoutBox:
    rect: Rect
    transform: AffineTransform | None = None
    children: tuple["LayoutBox", ...] = ()
    name: str = ""

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "LayoutBox":
        """Build a tree from `{"rect": {...}, "transform": [a..f], "children": [...]}`."""

        if not isinstance(payload, Mapping):
            raise ValueError(f"layout box must be an object, got {type(payload).__name__}")
        raw_rect = payload.get("rect")
        if not isinstance(raw_rect, Mapping):
            raise ValueError("layout box requires a `rect` object")
        try:
            rect = Rect(
                x=float(raw_rect.get("x", 0.0)),
                y=float(raw_rect.get("y", 0.0)),
                width=float(raw_rect["width"]),
                height=float(raw_rect["height"]),
            )
        except KeyError as exc:
            raise ValueError(f"layout box rect missing field: {exc.args[0]}") from exc
        except (TypeError, ValueError) as exc:
            raise ValueError(f"layout box rect fields must be numbers: {exc}") from exc

        transform: AffineTransform | None = None
        raw_transform = payload.get("transform")
        if raw_transform is not None:
            if not isinstance(raw_transform, (list, tuple)) or len(raw_transform) != 6:
                raise ValueError("layout box transform must be a list of 6 numbers [a, b, c, d, e, f]")
            try:
                transform = AffineTransform(*(float(v) for v in raw_transform))
            except (TypeError, ValueError) as exc:
                raise ValueError(f"layout box transform values must be numbers: {exc}") from exc

        raw_children = payload.get("children", [])
        if not isinstance(raw_children, (list, tuple)):
            raise ValueError("layout box children must be a list")
        children = tuple(cls.from_dict(child) for child in raw_children)
        return cls(rect=rect, transform=transform, children=children, name=str(payload.get("name", "")))


def count_nodes(node: BoxNode) -> int:
    return 1 + sum(count_nodes(child) for child in node.children)
