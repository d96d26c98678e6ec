"""Combination keys, the full-combination lookup and group discovery.

Keys join ``name=value`` segments with ``|`` in an explicit name order.
Neither separator is escaped: a property value containing ``|`` or ``=``
can make two distinct combinations collide. ``build_lookup`` logs such
collisions and keeps the first variant.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

SEPARATOR = "|"

T = TypeVar("T")


def key_for(values: Mapping[str, str | None], ordered_names: Sequence[str]) -> str:
    """Canonical key over exactly ``ordered_names``; other keys in ``values`` are ignored."""
    return SEPARATOR.join(f"{name}={values.get(name) or ''}" for name in ordered_names)


def project(values: Mapping[str, str | None], names: Sequence[str]) -> dict[str, str]:
    return {name: values.get(name) or "" for name in names}


def build_lookup(
    items: Iterable[T],
    props_of: Callable[[T], Mapping[str, str]],
    ordered_names: Sequence[str],
) -> dict[str, T]:
    """Map full-combination key -> item. First item wins on a collision."""
    lookup: dict[str, T] = {}
    for item in items:
        key = key_for(props_of(item), ordered_names)
        if key in lookup:
            logger.warning("Duplicate combination %r; keeping the first variant", key)
            continue
        lookup[key] = item
    return lookup


@dataclass
class GroupCombo:
    """Fixed values of the group properties shared by one panel."""

    key: str = ""
    values: dict[str, str] = field(default_factory=dict)

    @property
    def label(self) -> str:
        return ", ".join(f"{k}: {v}" for k, v in self.values.items() if v)


def discover_group_combos(
    items: Iterable[T],
    props_of: Callable[[T], Mapping[str, str]],
    group_names: Sequence[str],
) -> list[GroupCombo]:
    """Distinct projections onto ``group_names`` in discovery order."""
    if not group_names:
        return [GroupCombo()]
    combos: dict[str, GroupCombo] = {}
    for item in items:
        values = project(props_of(item), group_names)
        key = key_for(values, group_names)
        if key not in combos:
            combos[key] = GroupCombo(key=key, values=values)
    return list(combos.values())
