"""OrganizeContext — the state flowing from extraction through table building.

Built fresh for every organize run; nothing in it outlives the run.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from variant_table.engine.axes import AxisPlan
from variant_table.engine.combinations import GroupCombo
from variant_table.engine.properties import PropertyCatalog
from variant_table.models.document import Component, ComponentSet


@dataclass
class OrganizeContext:
    variant_set: ComponentSet
    variants: list[Component] = field(default_factory=list)
    catalog: PropertyCatalog = field(default_factory=PropertyCatalog)
    plan: AxisPlan = field(default_factory=AxisPlan)
    # full-combination key -> variant
    lookup: dict[str, Component] = field(default_factory=dict)
    group_combos: list[GroupCombo] = field(default_factory=list)

    @property
    def property_names(self) -> list[str]:
        return self.catalog.names

    @property
    def row_values(self) -> list[str]:
        """Row-axis domain; a single empty value when there is no row property."""
        if self.plan.row_property is None:
            return [""]
        return self.catalog.domains.get(self.plan.row_property, [])

    @property
    def column_values(self) -> list[str]:
        if self.plan.column_property is None:
            return [""]
        return self.catalog.domains.get(self.plan.column_property, [])

    def combination(self, row_value: str, column_value: str, combo: GroupCombo) -> dict[str, str]:
        """Full property map for one cell: row + column + the panel's fixed values."""
        values = dict(combo.values)
        if self.plan.row_property is not None:
            values[self.plan.row_property] = row_value
        if self.plan.column_property is not None:
            values[self.plan.column_property] = column_value
        return values
