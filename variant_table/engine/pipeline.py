"""Organizer — runs extraction, axis planning and indexing, then builds the table."""

from __future__ import annotations

import logging
import time

from variant_table.canvas.base import Canvas
from variant_table.engine.axes import plan_axes
from variant_table.engine.combinations import build_lookup, discover_group_combos
from variant_table.engine.config import LayoutConfig
from variant_table.engine.context import OrganizeContext
from variant_table.engine.dark_context import DarkContextDetector, default_detector
from variant_table.engine.properties import extract_properties
from variant_table.engine.states import StateClassifier, default_classifier
from variant_table.engine.table_builder import TableBuilder, TableResult
from variant_table.errors import EmptyVariantSetError
from variant_table.models.document import ComponentSet, NodeBase

logger = logging.getLogger(__name__)


class Organizer:
    """Turns a component set into a variants table on a canvas."""

    def __init__(
        self,
        classifier: StateClassifier | None = None,
        detector: DarkContextDetector | None = None,
        config: LayoutConfig | None = None,
        infer_component_properties: bool = False,
    ) -> None:
        self.classifier = classifier or default_classifier
        self.detector = detector or default_detector
        self.config = config or LayoutConfig()
        self.infer_component_properties = infer_component_properties

    def prepare(self, variant_set: ComponentSet) -> OrganizeContext:
        """Everything short of rendering: properties, axes, lookup and group combos."""
        variants = variant_set.variants
        if not variants:
            raise EmptyVariantSetError("No variants found in the Component Set.")

        ctx = OrganizeContext(variant_set=variant_set, variants=variants)
        ctx.catalog = extract_properties(
            variant_set,
            classifier=self.classifier,
            infer_component_properties=self.infer_component_properties,
        )
        ctx.plan = plan_axes(ctx.catalog.names, ctx.catalog.domains, classifier=self.classifier)
        ctx.lookup = build_lookup(variants, ctx.catalog.props_of, ctx.plan.ordered_names)
        ctx.group_combos = discover_group_combos(
            variants, ctx.catalog.props_of, ctx.plan.group_properties
        )
        return ctx

    def run(
        self,
        variant_set: ComponentSet,
        canvas: Canvas,
        anchor: NodeBase | None = None,
    ) -> TableResult:
        start = time.perf_counter()
        ctx = self.prepare(variant_set)
        logger.info(
            "Organizing %r: %d variants, %d properties, %d groups",
            variant_set.name,
            len(ctx.variants),
            len(ctx.property_names),
            len(ctx.group_combos),
        )
        builder = TableBuilder(canvas, config=self.config, detector=self.detector)
        result = builder.build(ctx, anchor=anchor)
        total = (time.perf_counter() - start) * 1000
        logger.info("Organize complete in %.0fms", total)
        return result


def create_organizer(
    config: LayoutConfig | None = None,
    infer_component_properties: bool = False,
) -> Organizer:
    """Factory function for creating an organizer instance."""
    return Organizer(config=config, infer_component_properties=infer_component_properties)
