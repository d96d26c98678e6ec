"""Document — an indexed page of nodes plus the current selection.

Resolves the selection to the component set whose variants get organized.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from variant_table.errors import DocumentError, EmptyVariantSetError, SelectionError, StructureError
from variant_table.models.document import Component, ComponentSet, DocumentFile, Instance, NodeBase

logger = logging.getLogger(__name__)

_SELECTABLE = (ComponentSet, Component, Instance)


class Document:
    def __init__(self, nodes: list[NodeBase] | None = None, selection: list[str] | None = None) -> None:
        self.nodes: list[NodeBase] = list(nodes or [])
        self._by_id: dict[str, NodeBase] = {}
        self._parent_of: dict[str, ComponentSet] = {}
        for node in self.nodes:
            self._index(node)
        self.selection_ids: list[str] = list(selection or [])

    def _index(self, node: NodeBase) -> None:
        self._by_id[node.id] = node
        if isinstance(node, ComponentSet):
            for child in node.children:
                self._by_id[child.id] = child
                self._parent_of[child.id] = node

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Document:
        try:
            parsed = DocumentFile.model_validate(data)
        except ValidationError as e:
            raise DocumentError(f"Invalid document: {e}") from e
        return cls(parsed.nodes, parsed.selection)

    @classmethod
    def load(cls, path: str | Path) -> Document:
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise DocumentError(f"Cannot read document {path}: {e}") from e
        doc = cls.from_dict(data)
        logger.info("Loaded %d nodes from %s", len(doc._by_id), path)
        return doc

    def get(self, node_id: str) -> NodeBase | None:
        return self._by_id.get(node_id)

    def parent_of(self, node: NodeBase) -> ComponentSet | None:
        return self._parent_of.get(node.id)

    @property
    def selection(self) -> list[NodeBase]:
        return [n for n in (self.get(i) for i in self.selection_ids) if n is not None]

    def select(self, *node_ids: str) -> None:
        self.selection_ids = list(node_ids)

    def main_component_of(self, instance: Instance) -> Component | None:
        if not instance.main_component_id:
            return None
        node = self.get(instance.main_component_id)
        return node if isinstance(node, Component) else None

    def resolve_variant_set(self) -> tuple[ComponentSet, NodeBase]:
        """Component set for the current selection, plus the selected node.

        Accepts exactly one selected component set, variant, or instance of a
        variant. Raises SelectionError, StructureError or EmptyVariantSetError.
        """
        selection = self.selection
        if len(selection) != 1 or not isinstance(selection[0], _SELECTABLE):
            raise SelectionError("Select a single Component, Instance, or Component Set.")

        selected = selection[0]
        variant_set: ComponentSet | None = None
        if isinstance(selected, ComponentSet):
            variant_set = selected
        elif isinstance(selected, Component):
            variant_set = self.parent_of(selected)
        else:
            main = self.main_component_of(selected)
            if main is not None:
                variant_set = self.parent_of(main)

        if variant_set is None:
            raise StructureError("Selected node is not part of a Component Set.")
        if not variant_set.variants:
            raise EmptyVariantSetError("No variants found in the Component Set.")
        return variant_set, selected
