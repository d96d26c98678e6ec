"""Token normalization for free-form property names and values."""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def clean(value: str | None) -> str:
    """Trim, lowercase and drop one leading ':' (pseudo-class style values)."""
    if not value:
        return ""
    text = value.strip().lower()
    if text.startswith(":"):
        text = text[1:]
    return text


def normalize_token(value: str | None) -> str:
    """Cleaned string with internal whitespace runs collapsed to one space."""
    return _WHITESPACE_RE.sub(" ", clean(value))


def tokenize(value: str | None) -> list[str]:
    """Split on runs of non-alphanumeric characters. ':focus-visible' -> ['focus', 'visible']."""
    return [t for t in _NON_ALNUM_RE.split(clean(value)) if t]
