"""Canvas capability: scene nodes, the Canvas protocol and its implementations."""

from variant_table.canvas.base import Canvas
from variant_table.canvas.memory import MemoryCanvas
from variant_table.canvas.nodes import (
    Color,
    ContainerNode,
    FontName,
    InstanceNode,
    Node,
    NodeKind,
    Paint,
    ShapeNode,
    TextNode,
    solid,
)
from variant_table.canvas.svg import render_svg

__all__ = [
    "Canvas",
    "MemoryCanvas",
    "Color",
    "ContainerNode",
    "FontName",
    "InstanceNode",
    "Node",
    "NodeKind",
    "Paint",
    "ShapeNode",
    "TextNode",
    "solid",
    "render_svg",
]
