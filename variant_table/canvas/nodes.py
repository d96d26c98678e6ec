"""Scene nodes produced by a canvas — containers, text, shapes and instances.

Every node carries its kind tag so consumers can dispatch on a closed set of
variants instead of probing attributes.
"""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from variant_table.models.document import Component


class NodeKind(enum.Enum):
    CONTAINER = "container"
    TEXT = "text"
    SHAPE = "shape"
    INSTANCE = "instance"


@dataclass
class Color:
    """RGB color on a 0-1 scale."""

    r: float
    g: float
    b: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        return "#" + "".join(f"{round(max(0.0, min(1.0, c)) * 255):02x}" for c in self.as_tuple())


@dataclass
class Paint:
    """A fill or stroke. Only SOLID paints carry a color."""

    type: str = "SOLID"
    color: Color | None = None
    opacity: float = 1.0
    visible: bool = True

    @property
    def is_solid(self) -> bool:
        return self.type == "SOLID" and self.color is not None


def solid(r: float, g: float, b: float, opacity: float = 1.0) -> Paint:
    return Paint(type="SOLID", color=Color(r, g, b), opacity=opacity)


@dataclass
class FontName:
    family: str
    style: str


DEFAULT_FONT = FontName("Roboto", "Regular")


@dataclass(eq=False)
class Node:
    kind: ClassVar[NodeKind]

    id: str
    name: str = ""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    fills: list[Paint] = field(default_factory=list)
    strokes: list[Paint] = field(default_factory=list)
    stroke_weight: float = 0.0
    stroke_align: str = "CENTER"
    corner_radius: float = 0.0
    parent: ContainerNode | None = field(default=None, repr=False)

    def resize(self, width: float, height: float) -> None:
        self.width = float(width)
        self.height = float(height)

    def paints(self) -> list[Paint]:
        return [*self.fills, *self.strokes]

    def copy_style_to(self, other: Node) -> None:
        """Copy geometry and paint attributes (not identity, not parent) onto ``other``."""
        other.name = self.name
        other.x, other.y = self.x, self.y
        other.width, other.height = self.width, self.height
        other.fills = copy.deepcopy(self.fills)
        other.strokes = copy.deepcopy(self.strokes)
        other.stroke_weight = self.stroke_weight
        other.stroke_align = self.stroke_align
        other.corner_radius = self.corner_radius


@dataclass(eq=False)
class ContainerNode(Node):
    kind: ClassVar[NodeKind] = NodeKind.CONTAINER

    layout_mode: str = "NONE"  # NONE, HORIZONTAL, VERTICAL
    primary_axis_sizing: str = "AUTO"  # AUTO hugs content, FIXED keeps the size
    counter_axis_sizing: str = "AUTO"
    primary_axis_align: str = "MIN"  # MIN, CENTER
    counter_axis_align: str = "MIN"
    item_spacing: float = 0.0
    padding_left: float = 0.0
    padding_right: float = 0.0
    padding_top: float = 0.0
    padding_bottom: float = 0.0
    children: list[Node] = field(default_factory=list, repr=False)

    def set_padding(self, value: float) -> None:
        self.padding_left = self.padding_right = value
        self.padding_top = self.padding_bottom = value

    def copy_layout_to(self, other: ContainerNode) -> None:
        for attr in (
            "layout_mode",
            "primary_axis_sizing",
            "counter_axis_sizing",
            "primary_axis_align",
            "counter_axis_align",
            "item_spacing",
            "padding_left",
            "padding_right",
            "padding_top",
            "padding_bottom",
        ):
            setattr(other, attr, getattr(self, attr))

    def walk(self):
        """Yield every descendant, depth first."""
        for child in self.children:
            yield child
            if isinstance(child, ContainerNode):
                yield from child.walk()


@dataclass(eq=False)
class TextNode(Node):
    kind: ClassVar[NodeKind] = NodeKind.TEXT

    characters: str = ""
    font_size: float = 12.0
    font: FontName = field(default_factory=lambda: DEFAULT_FONT)


@dataclass(eq=False)
class ShapeNode(Node):
    kind: ClassVar[NodeKind] = NodeKind.SHAPE

    shape: str = "RECTANGLE"
    dash_pattern: list[float] = field(default_factory=list)


@dataclass(eq=False)
class InstanceNode(Node):
    kind: ClassVar[NodeKind] = NodeKind.INSTANCE

    component: Component | None = field(default=None, repr=False)

    @property
    def component_id(self) -> str | None:
        return self.component.id if self.component is not None else None
