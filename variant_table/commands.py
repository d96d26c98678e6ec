"""Command handling — one inbound message, processed to completion, one notice out."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from variant_table.canvas.base import Canvas
from variant_table.canvas.nodes import ContainerNode, Node
from variant_table.config import Settings, settings as default_settings
from variant_table.document import Document
from variant_table.engine.config import LayoutConfig
from variant_table.engine.dark_walker import DarkModeWalker, WalkReport, load_color_mappings
from variant_table.engine.pipeline import Organizer
from variant_table.engine.table_builder import TABLE_SUFFIX, TableResult
from variant_table.errors import (
    EmptyVariantSetError,
    LookupNotFoundError,
    NoTableError,
    SelectionError,
    StructureError,
)
from variant_table.models.messages import (
    CreateDarkModeMessage,
    Message,
    OrganizeVariantsMessage,
    message_adapter,
)
from variant_table.variables.store import MemoryVariableStore, VariableStore

logger = logging.getLogger(__name__)


@dataclass
class Host:
    """Capabilities the core uses: document, canvas, variable store and notices."""

    document: Document
    canvas: Canvas
    variables: VariableStore = field(default_factory=MemoryVariableStore)
    on_notice: Callable[[str], None] | None = None
    notices: list[str] = field(default_factory=list)

    def notify(self, message: str) -> None:
        logger.info("Notice: %s", message)
        self.notices.append(message)
        if self.on_notice is not None:
            self.on_notice(message)


class CommandHandler:
    """Dispatches UI messages. Keeps only the most recent table between calls."""

    def __init__(
        self,
        host: Host,
        organizer: Organizer | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.host = host
        self.settings = settings or default_settings
        self.organizer = organizer or Organizer(
            config=LayoutConfig(font_family=self.settings.font_family),
            infer_component_properties=self.settings.infer_component_properties,
        )
        self.last_table: TableResult | None = None
        self.last_dark: WalkReport | None = None

    def handle(self, message: Message | dict[str, Any]) -> str | None:
        """Run one command; returns the notice shown, or None for unknown messages."""
        if isinstance(message, dict):
            try:
                message = message_adapter.validate_python(message)
            except ValidationError as e:
                logger.warning("Ignoring unknown message %r: %s", message.get("type"), e)
                return None

        if isinstance(message, OrganizeVariantsMessage):
            notice = self.organize_variants()
        elif isinstance(message, CreateDarkModeMessage):
            notice = self.create_dark_mode(message)
        else:
            logger.warning("Ignoring unknown message %r", message)
            return None
        self.host.notify(notice)
        return notice

    def organize_variants(self) -> str:
        try:
            variant_set, selected = self.host.document.resolve_variant_set()
        except (SelectionError, StructureError, EmptyVariantSetError) as e:
            logger.info("Organize aborted: %s", e)
            return str(e)

        result = self.organizer.run(variant_set, self.host.canvas, anchor=selected)
        self.last_table = result
        return result.summary

    def create_dark_mode(self, message: CreateDarkModeMessage) -> str:
        collection = message.collection_name or self.settings.default_collection_name
        light = message.light_mode_name or self.settings.default_light_mode_name
        dark = message.dark_mode_name or self.settings.default_dark_mode_name

        try:
            source = self._latest_table()
            mappings = load_color_mappings(self.host.variables, collection, light, dark)
        except (NoTableError, LookupNotFoundError) as e:
            logger.info("Dark mode aborted: %s", e)
            return str(e)

        walker = DarkModeWalker(
            self.host.canvas,
            mappings,
            tolerance=self.settings.color_tolerance,
            placement_gap=self.organizer.config.placement_gap,
        )
        report = walker.duplicate(source)
        self.last_dark = report
        return report.summary

    def _latest_table(self) -> Node:
        if self.last_table is not None:
            return self.last_table.root
        # Tables from earlier sessions are recognized by name
        for node in reversed(self.host.canvas.top_level()):
            if isinstance(node, ContainerNode) and node.name.endswith(TABLE_SUFFIX):
                return node
        raise NoTableError("No variants table found. Run Organize Variants first.")
