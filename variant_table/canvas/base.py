"""Canvas capability, the only way the core creates or arranges nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from variant_table.canvas.nodes import ContainerNode, FontName, InstanceNode, Node, ShapeNode, TextNode

if TYPE_CHECKING:
    from variant_table.models.document import Component


class Canvas(Protocol):
    """Node factory plus structural operations.

    Implementations measure text on creation, so ``create_text(...).width``
    is meaningful immediately. ``layout`` resolves auto-layout sizes and
    positions for a subtree once it is fully assembled.
    """

    def load_font(self, font: FontName) -> None:
        """Raise FontUnavailableError when the typeface cannot be used."""
        ...

    def create_container(self, name: str = "") -> ContainerNode: ...

    def create_text(
        self,
        characters: str = "",
        *,
        font_size: float = 12.0,
        font: FontName | None = None,
    ) -> TextNode: ...

    def create_shape(self, name: str = "", shape: str = "RECTANGLE") -> ShapeNode: ...

    def create_instance_of(self, component: Component) -> InstanceNode: ...

    def append(self, parent: ContainerNode, child: Node) -> None: ...

    def remove(self, node: Node) -> None: ...

    def layout(self, root: Node) -> None: ...

    def top_level(self) -> list[Node]: ...
