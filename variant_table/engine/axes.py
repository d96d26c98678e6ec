"""Axis planning: which properties become rows, columns and group panels."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from variant_table.engine.states import StateClassifier, default_classifier

logger = logging.getLogger(__name__)


@dataclass
class AxisPlan:
    row_property: str | None = None
    column_property: str | None = None
    group_properties: list[str] = field(default_factory=list)

    @property
    def ordered_names(self) -> list[str]:
        """Row, column, then groups; the name order used for every combination key."""
        axes = [self.row_property, self.column_property]
        return [n for n in axes if n is not None] + list(self.group_properties)


def plan_axes(
    names: Sequence[str],
    domains: Mapping[str, Sequence[str]],
    classifier: StateClassifier | None = None,
) -> AxisPlan:
    """Assign every discovered property exactly one axis role.

    A state-like property is pinned to the column axis so interaction states
    read left to right; the first other property takes the rows. Without a
    state-like property the first two names become row and column.
    """
    classifier = classifier or default_classifier
    names = list(names)

    state_name = next(
        (n for n in names if classifier.is_state_property(n, domains.get(n, []))),
        None,
    )
    if state_name is not None:
        others = [n for n in names if n != state_name]
        plan = AxisPlan(
            row_property=others[0] if others else None,
            column_property=state_name,
            group_properties=others[1:],
        )
    else:
        plan = AxisPlan(
            row_property=names[0] if names else None,
            column_property=names[1] if len(names) > 1 else None,
            group_properties=names[2:],
        )

    logger.debug(
        "Axis plan: rows=%s columns=%s groups=%s",
        plan.row_property,
        plan.column_property,
        plan.group_properties,
    )
    return plan
