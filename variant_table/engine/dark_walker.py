"""Dark-mode duplicate — clone a table and swap light colors for their dark pairs.

Color pairs come from one variable collection: each COLOR variable
contributes (light-mode value -> dark-mode value). A solid paint matches a
pair when every RGB channel is within ``tolerance`` of the light value. The
first matching pair in store order wins; several variables sharing a light
value are resolved by that order alone.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Union

import numpy as np

from variant_table.canvas.base import Canvas
from variant_table.canvas.nodes import (
    Color,
    ContainerNode,
    InstanceNode,
    Node,
    NodeKind,
    Paint,
    ShapeNode,
    TextNode,
)
from variant_table.errors import LookupNotFoundError
from variant_table.variables.store import VariableStore, resolve_value

logger = logging.getLogger(__name__)

DARK_SUFFIX = " (Dark)"
DEFAULT_TOLERANCE = 0.01


@dataclass
class ColorMapping:
    variable_id: str
    variable_name: str
    light: tuple[float, float, float]
    dark: tuple[float, float, float]
    # Alpha of the dark value, when it carries one
    opacity: float | None = None


def _rgba(value: Any) -> tuple[tuple[float, float, float], float | None] | None:
    if not isinstance(value, dict):
        return None
    try:
        rgb = (float(value["r"]), float(value["g"]), float(value["b"]))
    except (KeyError, TypeError, ValueError):
        return None
    alpha = value.get("a")
    return rgb, (float(alpha) if alpha is not None else None)


def load_color_mappings(
    store: VariableStore,
    collection_name: str,
    light_mode_name: str,
    dark_mode_name: str,
) -> list[ColorMapping]:
    """Light/dark color pairs from ``collection_name``, in store iteration order."""
    collections = store.list_collections()
    collection = next((c for c in collections if c.name == collection_name), None)
    if collection is None:
        raise LookupNotFoundError("collection", collection_name, [c.name for c in collections])

    mode_names = [m.name for m in collection.modes]
    light_mode = collection.find_mode(light_mode_name)
    if light_mode is None:
        raise LookupNotFoundError("mode", light_mode_name, mode_names, f'collection "{collection.name}"')
    dark_mode = collection.find_mode(dark_mode_name)
    if dark_mode is None:
        raise LookupNotFoundError("mode", dark_mode_name, mode_names, f'collection "{collection.name}"')

    mappings: list[ColorMapping] = []
    for variable in store.list_variables():
        if variable.variable_collection_id != collection.id or variable.resolved_type != "COLOR":
            continue
        light = _rgba(resolve_value(store, variable, light_mode.mode_id))
        dark = _rgba(resolve_value(store, variable, dark_mode.mode_id))
        if light is None or dark is None:
            logger.debug("Variable %s has no color in both modes", variable.name or variable.id)
            continue
        mappings.append(ColorMapping(
            variable_id=variable.id,
            variable_name=variable.name,
            light=light[0],
            dark=dark[0],
            opacity=dark[1],
        ))

    logger.info(
        "Loaded %d color mappings from %s (%s -> %s)",
        len(mappings),
        collection.name,
        light_mode.name,
        dark_mode.name,
    )
    return mappings


# ---------------------------------------------------------------------------
# Walk results
# ---------------------------------------------------------------------------


@dataclass
class Cloned:
    node: Node
    recolored: int = 0


@dataclass
class Skipped:
    source: object
    reason: str


WalkResult = Union[Cloned, Skipped]


@dataclass
class WalkReport:
    root: Node | None = None
    cloned: int = 0
    recolored: int = 0
    skipped: list[Skipped] = field(default_factory=list)

    def record(self, result: WalkResult) -> None:
        if isinstance(result, Cloned):
            self.cloned += 1
            self.recolored += result.recolored
        else:
            self.skipped.append(result)

    @property
    def summary(self) -> str:
        return f"Created dark mode table: {self.recolored} colors replaced."


# ---------------------------------------------------------------------------
# Walker
# ---------------------------------------------------------------------------


class DarkModeWalker:
    """Rebuilds a node tree through a canvas, recoloring solid paints."""

    def __init__(
        self,
        canvas: Canvas,
        mappings: list[ColorMapping],
        tolerance: float = DEFAULT_TOLERANCE,
        placement_gap: float = 100.0,
    ) -> None:
        self.canvas = canvas
        self.mappings = mappings
        self.tolerance = tolerance
        self.placement_gap = placement_gap
        self._light = np.array([m.light for m in mappings], dtype=np.float64).reshape(-1, 3)
        self._handlers: dict[NodeKind, Callable[[Node, WalkReport], Node]] = {
            NodeKind.CONTAINER: self._clone_container,
            NodeKind.TEXT: self._clone_text,
            NodeKind.SHAPE: self._clone_shape,
            NodeKind.INSTANCE: self._clone_instance,
        }
        missing = set(NodeKind) - set(self._handlers)
        if missing:
            raise TypeError(f"No clone handler for node kinds: {sorted(k.value for k in missing)}")

    def duplicate(self, root: Node) -> WalkReport:
        """Clone ``root`` as a dark-mode copy placed to its right."""
        start = time.perf_counter()
        report = WalkReport()
        result = self._walk(root, report)
        if isinstance(result, Cloned):
            copy_root = result.node
            copy_root.name = f"{root.name}{DARK_SUFFIX}"
            self.canvas.layout(copy_root)
            copy_root.x = root.x + root.width + self.placement_gap
            copy_root.y = root.y
            report.root = copy_root

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Dark duplicate: %d nodes cloned, %d skipped, %d paints recolored in %.1fms",
            report.cloned,
            len(report.skipped),
            report.recolored,
            elapsed,
        )
        return report

    def find_mapping(self, color: Color) -> ColorMapping | None:
        """First mapping whose light value is within tolerance on every channel."""
        if not self.mappings:
            return None
        diff = np.abs(self._light - np.array(color.as_tuple(), dtype=np.float64))
        hits = np.flatnonzero(np.all(diff <= self.tolerance, axis=1))
        return self.mappings[int(hits[0])] if hits.size else None

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _walk(self, node: object, report: WalkReport) -> WalkResult:
        kind = getattr(node, "kind", None)
        handler = self._handlers.get(kind) if isinstance(kind, NodeKind) else None
        if handler is None:
            result: WalkResult = Skipped(node, f"unsupported node {type(node).__name__}")
            report.record(result)
            return result

        try:
            clone = handler(node, report)
            recolored = self._recolor(clone)
        except Exception as e:
            logger.warning("Skipping %s %r: %s", kind.value, getattr(node, "name", ""), e)
            # Children already counted stay counted; this node contributes nothing
            result = Skipped(node, str(e))
            report.record(result)
            return result

        result = Cloned(clone, recolored)
        report.record(result)
        return result

    def _recolor(self, node: Node) -> int:
        count = 0
        for paints in (node.fills, node.strokes):
            for i, paint in enumerate(paints):
                if not paint.is_solid:
                    continue
                mapping = self.find_mapping(paint.color)
                if mapping is None:
                    continue
                paints[i] = Paint(
                    type="SOLID",
                    color=Color(*mapping.dark),
                    opacity=mapping.opacity if mapping.opacity is not None else paint.opacity,
                    visible=paint.visible,
                )
                count += 1
        return count

    # ------------------------------------------------------------------
    # Handlers, one per node kind
    # ------------------------------------------------------------------

    def _clone_container(self, node: ContainerNode, report: WalkReport) -> Node:
        clone = self.canvas.create_container(node.name)
        node.copy_style_to(clone)
        node.copy_layout_to(clone)
        for child in node.children:
            result = self._walk(child, report)
            if isinstance(result, Cloned):
                self.canvas.append(clone, result.node)
        return clone

    def _clone_text(self, node: TextNode, report: WalkReport) -> Node:
        clone = self.canvas.create_text(node.characters, font_size=node.font_size, font=node.font)
        node.copy_style_to(clone)
        return clone

    def _clone_shape(self, node: ShapeNode, report: WalkReport) -> Node:
        clone = self.canvas.create_shape(node.name, node.shape)
        node.copy_style_to(clone)
        clone.dash_pattern = list(node.dash_pattern)
        return clone

    def _clone_instance(self, node: InstanceNode, report: WalkReport) -> Node:
        if node.component is None:
            raise ValueError("instance has no main component")
        clone = self.canvas.create_instance_of(node.component)
        node.copy_style_to(clone)
        return clone
