"""In-memory canvas — a self-contained stand-in for a design tool's scene graph.

Nodes live on a single page. Freshly created nodes sit at the page's top
level until appended to a container. Text is measured with a fixed average
glyph width so layouts are deterministic.
"""

from __future__ import annotations

import itertools
import logging
from typing import TYPE_CHECKING

from variant_table.canvas.nodes import (
    DEFAULT_FONT,
    ContainerNode,
    FontName,
    InstanceNode,
    Node,
    ShapeNode,
    TextNode,
)
from variant_table.errors import FontUnavailableError

if TYPE_CHECKING:
    from variant_table.models.document import Component

logger = logging.getLogger(__name__)

# Average advance width as a fraction of font size; bold glyphs run wider.
_GLYPH_WIDTH = 0.55
_BOLD_GLYPH_WIDTH = 0.6
_LINE_HEIGHT = 1.2


class MemoryCanvas:
    """Canvas backed by plain node objects.

    ``available_fonts=None`` accepts every typeface; otherwise only the listed
    (family, style) pairs load and texts fall back to ``DEFAULT_FONT``.
    """

    def __init__(self, available_fonts: set[tuple[str, str]] | None = None) -> None:
        self.available_fonts = available_fonts
        self.loaded_fonts: set[tuple[str, str]] = {(DEFAULT_FONT.family, DEFAULT_FONT.style)}
        self.nodes: dict[str, Node] = {}
        self._page: list[Node] = []
        self._ids = itertools.count(1)

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------

    def load_font(self, font: FontName) -> None:
        key = (font.family, font.style)
        if self.available_fonts is not None and key not in self.available_fonts:
            raise FontUnavailableError(f"Font {font.family} {font.style} is not available")
        self.loaded_fonts.add(key)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    def _register(self, node: Node) -> None:
        self.nodes[node.id] = node
        self._page.append(node)

    def _next_id(self) -> str:
        return f"N{next(self._ids)}"

    def create_container(self, name: str = "") -> ContainerNode:
        node = ContainerNode(id=self._next_id(), name=name or "Frame")
        # Fresh frames start at 100x100 like most design tools
        node.resize(100, 100)
        self._register(node)
        return node

    def create_text(
        self,
        characters: str = "",
        *,
        font_size: float = 12.0,
        font: FontName | None = None,
    ) -> TextNode:
        font = font or DEFAULT_FONT
        if (font.family, font.style) not in self.loaded_fonts:
            logger.debug("Font %s %s not loaded, using %s", font.family, font.style, DEFAULT_FONT.family)
            font = DEFAULT_FONT
        node = TextNode(
            id=self._next_id(),
            name=characters,
            characters=characters,
            font_size=font_size,
            font=font,
        )
        self._measure_text(node)
        self._register(node)
        return node

    def create_shape(self, name: str = "", shape: str = "RECTANGLE") -> ShapeNode:
        node = ShapeNode(id=self._next_id(), name=name or shape.title(), shape=shape)
        node.resize(100, 100)
        self._register(node)
        return node

    def create_instance_of(self, component: Component) -> InstanceNode:
        node = InstanceNode(
            id=self._next_id(),
            name=component.name,
            width=component.width,
            height=component.height,
            component=component,
        )
        self._register(node)
        return node

    @staticmethod
    def _measure_text(node: TextNode) -> None:
        advance = _BOLD_GLYPH_WIDTH if node.font.style.lower() == "bold" else _GLYPH_WIDTH
        node.width = len(node.characters) * node.font_size * advance
        node.height = node.font_size * _LINE_HEIGHT if node.characters else 0.0

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def append(self, parent: ContainerNode, child: Node) -> None:
        if child.parent is not None:
            child.parent.children.remove(child)
        elif child in self._page:
            self._page.remove(child)
        child.parent = parent
        parent.children.append(child)

    def remove(self, node: Node) -> None:
        if node.parent is not None:
            node.parent.children.remove(node)
            node.parent = None
        elif node in self._page:
            self._page.remove(node)
        stack = [node]
        while stack:
            current = stack.pop()
            self.nodes.pop(current.id, None)
            if isinstance(current, ContainerNode):
                stack.extend(current.children)

    def top_level(self) -> list[Node]:
        return list(self._page)

    # ------------------------------------------------------------------
    # Auto layout
    # ------------------------------------------------------------------

    def layout(self, root: Node) -> None:
        if isinstance(root, ContainerNode):
            _layout_container(root)


def _layout_container(node: ContainerNode) -> None:
    """Size and place children of an auto-layout container, bottom up."""
    for child in node.children:
        if isinstance(child, ContainerNode):
            _layout_container(child)

    if node.layout_mode not in ("HORIZONTAL", "VERTICAL"):
        return

    horizontal = node.layout_mode == "HORIZONTAL"
    children = node.children
    gaps = node.item_spacing * max(len(children) - 1, 0)

    if horizontal:
        main_pad = (node.padding_left, node.padding_right)
        cross_pad = (node.padding_top, node.padding_bottom)
        main_sizes = [c.width for c in children]
        cross_sizes = [c.height for c in children]
    else:
        main_pad = (node.padding_top, node.padding_bottom)
        cross_pad = (node.padding_left, node.padding_right)
        main_sizes = [c.height for c in children]
        cross_sizes = [c.width for c in children]

    content_main = sum(main_sizes) + gaps
    content_cross = max(cross_sizes, default=0.0)

    main = node.width if horizontal else node.height
    cross = node.height if horizontal else node.width
    if node.primary_axis_sizing == "AUTO":
        main = content_main + sum(main_pad)
    if node.counter_axis_sizing == "AUTO":
        cross = content_cross + sum(cross_pad)
    if horizontal:
        node.resize(main, cross)
    else:
        node.resize(cross, main)

    cursor = main_pad[0]
    if node.primary_axis_align == "CENTER":
        cursor += max(main - sum(main_pad) - content_main, 0.0) / 2
    inner_cross = cross - sum(cross_pad)
    for child, child_main, child_cross in zip(children, main_sizes, cross_sizes):
        offset = cross_pad[0]
        if node.counter_axis_align == "CENTER":
            offset += (inner_cross - child_cross) / 2
        if horizontal:
            child.x, child.y = cursor, offset
        else:
            child.x, child.y = offset, cursor
        cursor += child_main + node.item_spacing
