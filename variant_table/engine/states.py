"""State-rank classification and property value ordering.

Interaction states sort in a fixed order (default < hover < focus <
disabled) with synonyms mapped onto those four; everything else sorts in
natural reading order, digit runs compared numerically.
"""

from __future__ import annotations

import math
import re
import unicodedata
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from variant_table.engine.tokens import clean, normalize_token, tokenize

_DIGITS_RE = re.compile(r"(\d+)")


def _frozen(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class StatePolicy:
    """Read-only tables driving state detection."""

    order: Mapping[str, int] = field(
        default_factory=lambda: _frozen({"default": 0, "hover": 1, "focus": 2, "disabled": 3})
    )
    aliases: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: _frozen({
            "default": ("default", "base", "rest", "enabled", "normal"),
            "hover": ("hover", "hovered"),
            "focus": ("focus", "focused", "focus-visible", "focusvisible"),
            "disabled": ("disabled", "inactive", "not-enabled", "notenabled"),
        })
    )
    property_hints: frozenset[str] = frozenset(
        {"state", "interaction", "status", "behavior", "behaviour", "pseudo", "ui state", "mode"}
    )


def natural_key(value: str) -> tuple:
    """Case- and accent-insensitive key where embedded numbers compare numerically."""
    folded = unicodedata.normalize("NFKD", value.casefold())
    folded = "".join(ch for ch in folded if not unicodedata.combining(ch))
    parts = []
    for part in _DIGITS_RE.split(folded):
        if part.isdigit():
            parts.append((0, int(part), ""))
        elif part:
            parts.append((1, 0, part))
    return tuple(parts)


class StateClassifier:
    """Ranks values against a StatePolicy."""

    def __init__(self, policy: StatePolicy | None = None) -> None:
        self.policy = policy or StatePolicy()

    def rank(self, value: str | None) -> float:
        """Ordinal of the state ``value`` denotes, or +inf when it is not a state."""
        cleaned = clean(value)
        if not cleaned:
            return math.inf
        if cleaned in self.policy.order:
            return self.policy.order[cleaned]

        # Whole-value aliases before tokens: "not-enabled" ranks disabled, unlike token-only matching
        for canonical, aliases in self.policy.aliases.items():
            if cleaned in aliases:
                return self.policy.order[canonical]

        tokens = set(tokenize(value))
        for canonical, aliases in self.policy.aliases.items():
            if tokens.intersection(aliases):
                return self.policy.order[canonical]
        return math.inf

    def is_state_value(self, value: str | None) -> bool:
        return self.rank(value) != math.inf

    def is_state_property(self, name: str, values: Iterable[str]) -> bool:
        if normalize_token(name) in self.policy.property_hints:
            return True
        return any(self.is_state_value(v) for v in values)

    def sort_values(self, name: str, values: Iterable[str]) -> list[str]:
        """Stable sort: state rank first when the property looks like a state, then natural order."""
        values = list(values)
        if self.is_state_property(name, values):
            return sorted(values, key=lambda v: (self.rank(v), natural_key(v)))
        return sorted(values, key=natural_key)


default_classifier = StateClassifier()
