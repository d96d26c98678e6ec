"""Table builder — lays out one panel per group combination as a labeled grid.

Layout per panel:

    [group label]
    [spacer] [col: a] [col: b] ...
    [row: x] [cell]   [cell]   ...
    [row: y] [cell]   [cell]   ...

Cells hold an instance of the matching variant, or a dashed "Missing"
placeholder when no variant has that combination.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field

from variant_table.canvas.base import Canvas
from variant_table.canvas.nodes import ContainerNode, FontName, TextNode, solid
from variant_table.engine.combinations import GroupCombo, key_for
from variant_table.engine.config import RGB, LayoutConfig
from variant_table.engine.context import OrganizeContext
from variant_table.engine.dark_context import DarkContextDetector, default_detector
from variant_table.errors import FontUnavailableError
from variant_table.models.document import Component, NodeBase

logger = logging.getLogger(__name__)

TABLE_SUFFIX = " • Variants Table"


@dataclass
class CellRecord:
    group_key: str
    row_value: str
    column_value: str
    item: Component | None
    dark: bool
    node: ContainerNode | None = field(default=None, repr=False)

    @property
    def missing(self) -> bool:
        return self.item is None


@dataclass
class TableResult:
    root: ContainerNode
    item_count: int = 0
    property_count: int = 0
    panels: list[ContainerNode] = field(default_factory=list)
    cells: list[CellRecord] = field(default_factory=list)

    @property
    def instance_count(self) -> int:
        return sum(1 for c in self.cells if not c.missing)

    @property
    def placeholder_count(self) -> int:
        return sum(1 for c in self.cells if c.missing)

    @property
    def summary(self) -> str:
        return f"Rendered {self.item_count} variants across {self.property_count} properties."


def axis_label(prop: str | None, value: str) -> str:
    return f"{prop}: {value}" if prop else ""


class TableBuilder:
    def __init__(
        self,
        canvas: Canvas,
        config: LayoutConfig | None = None,
        detector: DarkContextDetector | None = None,
    ) -> None:
        self.canvas = canvas
        self.config = config or LayoutConfig()
        self.detector = detector or default_detector

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def build(self, ctx: OrganizeContext, anchor: NodeBase | None = None) -> TableResult:
        """Render the table for ``ctx``; place it right of ``anchor`` when given."""
        start = time.perf_counter()
        cfg = self.config
        self._load_fonts()

        root = self.canvas.create_container(f"{ctx.variant_set.name}{TABLE_SUFFIX}")
        root.layout_mode = "VERTICAL"
        root.item_spacing = cfg.root_spacing
        root.set_padding(cfg.root_padding)
        root.fills = [solid(*cfg.panel_fill_light)]
        title = self._text(ctx.variant_set.name, cfg.title_font_size, cfg.label_style, cfg.text_light)
        self.canvas.append(root, title)

        row_label_width = self._row_label_width(ctx)
        cell_width = self._cell_width(ctx)

        result = TableResult(
            root=root,
            item_count=len(ctx.variants),
            property_count=len(ctx.property_names),
        )
        for combo in ctx.group_combos:
            panel = self._build_panel(ctx, combo, row_label_width, cell_width, result)
            self.canvas.append(root, panel)
            result.panels.append(panel)

        self.canvas.layout(root)
        if anchor is not None:
            root.x = anchor.x + anchor.width + cfg.placement_gap
            root.y = anchor.y

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Table %r: %d panels, %d instances, %d placeholders in %.1fms",
            root.name,
            len(result.panels),
            result.instance_count,
            result.placeholder_count,
            elapsed,
        )
        return result

    # ------------------------------------------------------------------
    # Panels
    # ------------------------------------------------------------------

    def _build_panel(
        self,
        ctx: OrganizeContext,
        combo: GroupCombo,
        row_label_width: float,
        cell_width: float,
        result: TableResult,
    ) -> ContainerNode:
        cfg = self.config
        group_dark = self.detector.is_on_dark_props(combo.values)
        label = combo.label

        panel = self.canvas.create_container(label or "All Variants")
        panel.layout_mode = "VERTICAL"
        panel.item_spacing = cfg.panel_spacing
        panel.set_padding(cfg.panel_padding)
        panel.stroke_weight = 1
        panel.stroke_align = "INSIDE"
        panel.corner_radius = cfg.panel_radius
        if group_dark:
            panel.fills = [solid(*cfg.panel_fill_dark)]
            panel.strokes = [solid(*cfg.stroke_dark)]
        else:
            panel.fills = [solid(*cfg.panel_fill_light)]
            panel.strokes = [solid(*cfg.panel_stroke_light)]

        if label:
            heading = self._text(
                label,
                cfg.panel_label_font_size,
                cfg.heading_style,
                cfg.text_dark if group_dark else cfg.text_light,
            )
            self.canvas.append(panel, heading)

        self.canvas.append(panel, self._header_row(ctx, row_label_width, cell_width))

        for row_value in ctx.row_values:
            row = self._grid_row(ctx, combo, group_dark, row_value, row_label_width, cell_width, result)
            self.canvas.append(panel, row)
        return panel

    def _header_row(self, ctx: OrganizeContext, row_label_width: float, cell_width: float) -> ContainerNode:
        cfg = self.config
        header = self._strip("Header", cfg.row_spacing)
        header.counter_axis_sizing = "FIXED"
        header.resize(header.width, cfg.header_height)

        spacer = self.canvas.create_container("Spacer")
        spacer.layout_mode = "HORIZONTAL"
        spacer.primary_axis_sizing = "FIXED"
        spacer.counter_axis_sizing = "FIXED"
        spacer.resize(row_label_width, cfg.header_height)
        self.canvas.append(header, spacer)

        for column_value in ctx.column_values:
            dark = self.detector.is_on_dark(column_value)
            cell = self._label_cell(
                axis_label(ctx.plan.column_property, column_value), cell_width, dark
            )
            cell.counter_axis_sizing = "FIXED"
            cell.resize(cell_width, cfg.header_height)
            self.canvas.append(header, cell)
        return header

    def _grid_row(
        self,
        ctx: OrganizeContext,
        combo: GroupCombo,
        group_dark: bool,
        row_value: str,
        row_label_width: float,
        cell_width: float,
        result: TableResult,
    ) -> ContainerNode:
        row = self._strip(axis_label(ctx.plan.row_property, row_value) or "Row", self.config.row_spacing)
        row_dark = self.detector.is_on_dark(row_value)
        self.canvas.append(
            row,
            self._label_cell(axis_label(ctx.plan.row_property, row_value), row_label_width, row_dark),
        )

        names = ctx.plan.ordered_names
        for column_value in ctx.column_values:
            dark = group_dark or row_dark or self.detector.is_on_dark(column_value)
            item = ctx.lookup.get(key_for(ctx.combination(row_value, column_value, combo), names))
            cell = self._grid_cell(ctx, item, cell_width, dark)
            self.canvas.append(row, cell)
            result.cells.append(CellRecord(
                group_key=combo.key,
                row_value=row_value,
                column_value=column_value,
                item=item,
                dark=dark,
                node=cell,
            ))
        return row

    def _grid_cell(
        self,
        ctx: OrganizeContext,
        item: Component | None,
        cell_width: float,
        dark: bool,
    ) -> ContainerNode:
        cfg = self.config
        cell = self.canvas.create_container("Cell")
        cell.layout_mode = "HORIZONTAL"
        cell.primary_axis_sizing = "FIXED"
        cell.primary_axis_align = "CENTER"
        cell.counter_axis_align = "CENTER"
        cell.set_padding(cfg.cell_padding)
        cell.resize(cell_width, cell.height)
        cell.stroke_weight = 1
        cell.stroke_align = "INSIDE"
        cell.corner_radius = cfg.cell_radius
        if dark:
            cell.fills = [solid(*cfg.cell_fill_dark)]
            cell.strokes = [solid(*cfg.stroke_dark)]
        else:
            cell.fills = [solid(*cfg.cell_fill_light)]
            cell.strokes = [solid(*cfg.cell_stroke_light)]

        if item is not None:
            self.canvas.append(cell, self.canvas.create_instance_of(item))
            return cell

        placeholder = self.canvas.create_shape("Missing")
        placeholder.resize(
            ctx.catalog.max_width or cfg.placeholder_size,
            ctx.catalog.max_height or cfg.placeholder_size,
        )
        placeholder.fills = []
        placeholder.strokes = [
            solid(*(cfg.placeholder_stroke_dark if dark else cfg.placeholder_stroke_light))
        ]
        placeholder.stroke_weight = 1
        placeholder.dash_pattern = list(cfg.placeholder_dash)
        self.canvas.append(cell, placeholder)
        return cell

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _strip(self, name: str, spacing: float) -> ContainerNode:
        strip = self.canvas.create_container(name)
        strip.layout_mode = "HORIZONTAL"
        strip.item_spacing = spacing
        return strip

    def _label_cell(self, text: str, width: float, dark: bool) -> ContainerNode:
        cfg = self.config
        cell = self.canvas.create_container(text or "Label")
        cell.layout_mode = "HORIZONTAL"
        cell.primary_axis_sizing = "FIXED"
        cell.counter_axis_align = "CENTER"
        cell.resize(width, cell.height)
        if dark:
            cell.fills = [solid(*cfg.cell_fill_dark)]
            cell.strokes = [solid(*cfg.stroke_dark)]
            cell.stroke_weight = 1
            cell.corner_radius = cfg.cell_radius
        label = self._text(
            text, cfg.label_font_size, cfg.label_style, cfg.text_dark if dark else cfg.text_light
        )
        self.canvas.append(cell, label)
        return cell

    def _text(self, characters: str, size: float, style: str, color: RGB) -> TextNode:
        node = self.canvas.create_text(
            characters,
            font_size=size,
            font=FontName(self.config.font_family, style),
        )
        node.fills = [solid(*color)]
        return node

    def _measure(self, characters: str) -> float:
        probe = self._text(characters, self.config.label_font_size, self.config.label_style, self.config.text_light)
        width = probe.width
        self.canvas.remove(probe)
        return width

    def _row_label_width(self, ctx: OrganizeContext) -> float:
        widest = max(
            (self._measure(axis_label(ctx.plan.row_property, v)) for v in ctx.row_values),
            default=0.0,
        )
        return math.ceil(widest) + self.config.row_label_padding

    def _cell_width(self, ctx: OrganizeContext) -> float:
        widest_label = max(
            (self._measure(axis_label(ctx.plan.column_property, v)) for v in ctx.column_values),
            default=0.0,
        )
        return math.ceil(max(ctx.catalog.max_width, widest_label)) + self.config.cell_extra_width

    def _load_fonts(self) -> None:
        for style in (self.config.label_style, self.config.heading_style):
            font = FontName(self.config.font_family, style)
            try:
                self.canvas.load_font(font)
            except FontUnavailableError as e:
                # Canvas substitutes its default typeface
                logger.debug("Font fallback: %s", e)
