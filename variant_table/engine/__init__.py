"""Variant classification and table layout engine."""

from variant_table.engine.axes import AxisPlan, plan_axes
from variant_table.engine.combinations import GroupCombo, build_lookup, discover_group_combos, key_for
from variant_table.engine.context import OrganizeContext
from variant_table.engine.dark_context import DarkContextDetector, DarkPolicy
from variant_table.engine.dark_walker import ColorMapping, DarkModeWalker, WalkReport, load_color_mappings
from variant_table.engine.pipeline import Organizer, create_organizer
from variant_table.engine.properties import PropertyCatalog, extract_properties
from variant_table.engine.states import StateClassifier, StatePolicy
from variant_table.engine.table_builder import TableBuilder, TableResult

__all__ = [
    "AxisPlan",
    "plan_axes",
    "GroupCombo",
    "build_lookup",
    "discover_group_combos",
    "key_for",
    "OrganizeContext",
    "DarkContextDetector",
    "DarkPolicy",
    "ColorMapping",
    "DarkModeWalker",
    "WalkReport",
    "load_color_mappings",
    "Organizer",
    "create_organizer",
    "PropertyCatalog",
    "extract_properties",
    "StateClassifier",
    "StatePolicy",
    "TableBuilder",
    "TableResult",
]
