"""Detect strings that denote an on-dark (inverted palette) context."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field

_WORD_SPLIT_RE = re.compile(r"[\s\-_]+")


@dataclass(frozen=True)
class DarkPolicy:
    """Lexical and symbolic cues for dark appearance."""

    phrases: frozenset[str] = frozenset({"dark", "dark mode", "darkmode", "on dark", "ondark"})
    patterns: tuple[re.Pattern, ...] = field(
        default_factory=lambda: tuple(
            re.compile(p, re.IGNORECASE)
            for p in (
                r"dark\s*mode",
                r"on\s*dark",
                r"dark\s*theme",
                r"dark\s*appearance",
                r"dark\s*variant",
                r"dark\s*style",
                r"dark\s*color",
                r"dark\s*background",
            )
        )
    )
    glyphs: tuple[str, ...] = ("\U0001F319", "\U0001F311", "⚫", "⬛")  # moon, new moon, circle, square
    word: str = "dark"


class DarkContextDetector:
    def __init__(self, policy: DarkPolicy | None = None) -> None:
        self.policy = policy or DarkPolicy()

    def is_on_dark(self, value: str | None) -> bool:
        if not value:
            return False
        normalized = value.strip().lower()
        if normalized in self.policy.phrases:
            return True
        if any(p.search(normalized) for p in self.policy.patterns):
            return True
        if any(g in value for g in self.policy.glyphs):
            return True
        # Standalone word only: "darken" and "darkroom" stay light
        return self.policy.word in _WORD_SPLIT_RE.split(normalized)

    def is_on_dark_props(self, mapping: Mapping[str, str | None]) -> bool:
        return any(self.is_on_dark(k) or self.is_on_dark(v) for k, v in mapping.items())


default_detector = DarkContextDetector()
