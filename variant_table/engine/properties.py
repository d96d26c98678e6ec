"""Property extraction: names, ordered domains and per-variant property maps."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field

from variant_table.engine.states import StateClassifier, default_classifier
from variant_table.models.document import Component, ComponentSet

logger = logging.getLogger(__name__)

ICON_PROPERTY = "icon"
FLAGS_PROPERTY = "properties"

_NAME_SPLIT_RE = re.compile(r"[\s\-_]+")
_ICON_LAYER_HINTS = ("icon", "left", "right")


@dataclass
class PropertyCatalog:
    """Everything discovered about the properties of one variant set."""

    # Property names in first-seen order
    names: list[str] = field(default_factory=list)
    # name -> sorted distinct values
    domains: dict[str, list[str]] = field(default_factory=dict)
    # variant id -> resolved property map (declared plus inferred values)
    resolved: dict[str, dict[str, str]] = field(default_factory=dict)
    max_width: float = 0.0
    max_height: float = 0.0

    def props_of(self, item: Component) -> dict[str, str]:
        return self.resolved.get(item.id, {})


# ---------------------------------------------------------------------------
# Component-property inference
# ---------------------------------------------------------------------------


def _name_parts(item: Component) -> list[str]:
    return _NAME_SPLIT_RE.split(item.name.lower())


def _has_icon_layer(item: Component) -> bool:
    return any(h in child.lower() for child in item.children for h in _ICON_LAYER_HINTS)


def signals_icon(item: Component) -> bool:
    parts = _name_parts(item)
    return _has_icon_layer(item) or any(p in parts for p in ("icon", "withicon", "noicon"))


def icon_value(item: Component) -> str:
    parts = _name_parts(item)
    if _has_icon_layer(item) or "icon" in parts or "withicon" in parts:
        return "visible"
    if "noicon" in parts or "withouticon" in parts:
        return "hidden"
    return "unknown"


def signals_flags(item: Component) -> bool:
    lowered = item.name.lower()
    return any(k in lowered for k in ("has", "with", "without"))


def flags_value(item: Component) -> str:
    lowered = item.name.lower()
    if "has" in lowered:
        return "boolean"
    # "without" contains "with"; test it first
    if "without" in lowered:
        return "without"
    if "with" in lowered:
        return "with"
    return "default"


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------


def extract_properties(
    variant_set: ComponentSet,
    classifier: StateClassifier | None = None,
    infer_component_properties: bool = False,
) -> PropertyCatalog:
    """Scan the variants of ``variant_set`` and build a PropertyCatalog.

    Declared domains on the set win per property; observed values fill in
    the properties it omits.
    """
    classifier = classifier or default_classifier
    variants = variant_set.variants
    catalog = PropertyCatalog()

    seen: dict[str, None] = {}
    for v in variants:
        for name in (v.variant_properties or {}):
            seen.setdefault(name, None)
        catalog.max_width = max(catalog.max_width, v.width)
        catalog.max_height = max(catalog.max_height, v.height)

    inferred: list[tuple[str, Callable[[Component], str]]] = []
    if infer_component_properties:
        if ICON_PROPERTY not in seen and any(signals_icon(v) for v in variants):
            inferred.append((ICON_PROPERTY, icon_value))
        if FLAGS_PROPERTY not in seen and any(signals_flags(v) for v in variants):
            inferred.append((FLAGS_PROPERTY, flags_value))
        for name, _ in inferred:
            seen.setdefault(name, None)
            logger.debug("Inferred component property %r", name)

    catalog.names = list(seen)

    for v in variants:
        props = dict(v.variant_properties or {})
        for name, value_of in inferred:
            props[name] = value_of(v)
        catalog.resolved[v.id] = props

    declared = variant_set.declared_domains()
    for name in catalog.names:
        if name in declared:
            values = list(dict.fromkeys(declared[name]))
        else:
            values = list(dict.fromkeys(
                catalog.resolved[v.id][name] for v in variants if catalog.resolved[v.id].get(name)
            ))
        catalog.domains[name] = classifier.sort_values(name, values)

    logger.debug(
        "Extracted %d properties from %d variants: %s",
        len(catalog.names),
        len(variants),
        ", ".join(f"{n}({len(catalog.domains[n])})" for n in catalog.names),
    )
    return catalog
