"""
Restriction-surface classification.

Upstream tile features carry free-text properties (facility and surface
names, mostly in Japanese). The classifier maps them onto a fixed set of
surface kinds with ordered substring rules and injects the display style
used by the map layer.
"""

from dataclasses import dataclass
from typing import Any

from ..constants import SURFACE_STYLES, SurfaceKind, SurfaceProperty


@dataclass(frozen=True)
class Classification:
    kind: str
    label: str
    label_en: str


# Evaluated in order. Longer labels must precede the labels they contain:
# extended approach before approach, outer horizontal before horizontal.
SURFACE_RULES: list[tuple[str, str, str]] = [
    ("延長進入表面", "extended approach", SurfaceKind.EXTENDED_APPROACH),
    ("進入表面", "approach", SurfaceKind.APPROACH),
    ("転移表面", "transitional", SurfaceKind.TRANSITIONAL),
    ("外側水平表面", "outer horizontal", SurfaceKind.OUTER_HORIZONTAL),
    ("水平表面", "horizontal", SurfaceKind.HORIZONTAL),
    ("円錐表面", "conical", SurfaceKind.CONICAL),
]


def _haystack(properties: dict[str, Any]) -> str:
    name = properties.get("name")
    parts = [name if isinstance(name, str) else ""]
    parts.extend(v for v in properties.values() if isinstance(v, str))
    return " ".join(parts)


def _classification(kind: str) -> Classification:
    style = SURFACE_STYLES[kind]
    return Classification(kind=kind, label=style["label"], label_en=style["label_en"])


def classify(properties: dict[str, Any] | None) -> Classification:
    """Classify a feature by its properties; unmatched features are 'other'."""
    text = _haystack(properties or {})
    lowered = text.lower()
    for japanese, english, kind in SURFACE_RULES:
        if japanese in text or english in lowered:
            return _classification(kind)
    return _classification(SurfaceKind.OTHER)


def enrich_feature(feature: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of the feature with classification and style properties."""
    props = dict(feature.get("properties") or {})
    result = classify(props)
    style = SURFACE_STYLES[result.kind]
    props.update(
        {
            SurfaceProperty.KIND: result.kind,
            SurfaceProperty.LABEL: result.label,
            SurfaceProperty.FILL_COLOR: style["fill_color"],
            SurfaceProperty.LINE_COLOR: style["line_color"],
            SurfaceProperty.FILL_OPACITY: style["fill_opacity"],
            SurfaceProperty.LINE_WIDTH: style["line_width"],
        }
    )
    return {**feature, "type": "Feature", "properties": props}


def layer_styles() -> dict[str, dict[str, Any]]:
    """Map paint expressions reading the injected properties, falling back to 'other'."""
    fallback = SURFACE_STYLES[SurfaceKind.OTHER]
    return {
        "fill_paint": {
            "fill-color": ["coalesce", ["get", SurfaceProperty.FILL_COLOR], fallback["fill_color"]],
            "fill-opacity": [
                "coalesce",
                ["get", SurfaceProperty.FILL_OPACITY],
                fallback["fill_opacity"],
            ],
        },
        "line_paint": {
            "line-color": ["coalesce", ["get", SurfaceProperty.LINE_COLOR], fallback["line_color"]],
            "line-width": ["coalesce", ["get", SurfaceProperty.LINE_WIDTH], fallback["line_width"]],
        },
    }
