from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

_SANS_STACK = (
    '-apple-system, BlinkMacSystemFont, "Segoe UI", Helvetica, Arial, sans-serif, '
    '"Apple Color Emoji", "Segoe UI Emoji"'
)
_MONO_STACK = 'ui-monospace, SFMono-Regular, "SF Mono", Menlo, Consolas, "Liberation Mono", monospace'


@dataclass(frozen=True)
class StyleRule:
    selector: str
    properties: Mapping[str, str]

    def __post_init__(self) -> None:
        if not self.selector.strip():
            raise ValueError("style rule selector must be non-empty")


@dataclass
class StyleSheet:
    """CSS rules emitted as a `<style>` block inside `<defs>`."""

    rules: list[StyleRule] = field(default_factory=list)

    def add_rule(self, selector: str, properties: Mapping[str, str]) -> None:
        self.rules.append(StyleRule(selector=selector, properties=dict(properties)))

    def selectors(self) -> list[str]:
        return [rule.selector for rule in self.rules]

    def to_svg(self) -> str:
        parts = ["<style>"]
        for rule in self.rules:
            parts.append(f"\n    {rule.selector} {{")
            for prop, value in rule.properties.items():
                parts.append(f"\n        {prop}: {value};")
            parts.append("\n    }")
        parts.append("\n</style>")
        return "".join(parts)


def default_stylesheet() -> StyleSheet:
    sheet = StyleSheet()
    sheet.add_rule(".sans", {"font-family": _SANS_STACK})
    sheet.add_rule(".mono", {"font-family": _MONO_STACK, "font-size": "12px", "letter-spacing": "-0.5px"})
    sheet.add_rule(".bold", {"font-weight": "500"})
    sheet.add_rule(".medium", {"font-size": "16px"})
    sheet.add_rule(".small", {"font-size": "14px"})
    sheet.add_rule(".smaller", {"font-size": "12px"})
    sheet.add_rule(".pre", {"white-space": "pre"})
    sheet.add_rule(".glow", {"paint-order": "stroke"})
    return sheet
