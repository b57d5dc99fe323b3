from __future__ import annotations

from dataclasses import replace
from pathlib import Path
import tomllib
from typing import Any, Mapping

from boxsvg_ui.style.stylesheet import StyleSheet, default_stylesheet

from .render.options import RenderOptions, default_render_options

_STRING_FIELDS = ("view_box", "preserve_aspect_ratio", "background_color")
_BOOL_FIELDS = ("include_xml_declaration", "namespace")
_KNOWN_KEYS = frozenset({"width", "height", "stylesheet", "rules", *_STRING_FIELDS, *_BOOL_FIELDS})


def load_render_options(path: str | Path, base: RenderOptions | None = None) -> RenderOptions:
    """Load RenderOptions from a TOML file, layered over `base` (defaults if None)."""

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"render options file not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    return render_options_from_mapping(raw, base)


def render_options_from_mapping(raw: Mapping[str, Any], base: RenderOptions | None = None) -> RenderOptions:
    unknown = sorted(set(raw) - _KNOWN_KEYS)
    if unknown:
        raise ValueError(f"unknown render option(s): {', '.join(unknown)}")

    opts = base if base is not None else default_render_options()
    changes: dict[str, Any] = {}
    for key in ("width", "height"):
        if key in raw:
            changes[key] = _coerce_positive(raw[key], key)
    for key in _STRING_FIELDS:
        if key in raw:
            if not isinstance(raw[key], str):
                raise ValueError(f"`{key}` must be a string")
            changes[key] = raw[key]
    for key in _BOOL_FIELDS:
        if key in raw:
            if not isinstance(raw[key], bool):
                raise ValueError(f"`{key}` must be a boolean")
            changes[key] = raw[key]

    stylesheet = _resolve_stylesheet(raw.get("stylesheet"), opts.stylesheet)
    rules = raw.get("rules", [])
    if not isinstance(rules, list):
        raise ValueError("`rules` must be an array of tables")
    if rules:
        stylesheet = StyleSheet(rules=list(stylesheet.rules)) if stylesheet is not None else StyleSheet()
        for index, rule in enumerate(rules):
            selector, properties = _coerce_rule(rule, index)
            stylesheet.add_rule(selector, properties)
    changes["stylesheet"] = stylesheet
    return replace(opts, **changes)


def _coerce_positive(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"`{name}` must be a number")
    if float(value) <= 0:
        raise ValueError(f"`{name}` must be > 0")
    return float(value)


def _resolve_stylesheet(value: Any, current: StyleSheet | None) -> StyleSheet | None:
    if value is None:
        return current
    if value == "default":
        return default_stylesheet()
    if value == "none":
        return None
    raise ValueError('`stylesheet` must be "default" or "none"')


def _coerce_rule(rule: Any, index: int) -> tuple[str, dict[str, str]]:
    if not isinstance(rule, Mapping):
        raise ValueError(f"rules[{index}] must be a table")
    selector = rule.get("selector")
    if not isinstance(selector, str) or not selector.strip():
        raise ValueError(f"rules[{index}].selector must be a non-empty string")
    properties = rule.get("properties", {})
    if not isinstance(properties, Mapping):
        raise ValueError(f"rules[{index}].properties must be a table")
    return selector, {str(k): str(v) for k, v in properties.items()}
