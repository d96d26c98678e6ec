"""Exception hierarchy for the organizer and the dark-mode duplicator.

Every error carries a user-facing message; the command handler turns the
recoverable ones into a single notice instead of a failure.
"""

from __future__ import annotations


class VariantTableError(Exception):
    """Base class for all expected failures."""


class SelectionError(VariantTableError):
    """Wrong number or kind of nodes selected."""


class StructureError(VariantTableError):
    """Selected node has no enclosing component set."""


class EmptyVariantSetError(VariantTableError):
    """Component set has no variants."""


class FontUnavailableError(VariantTableError):
    """Requested typeface could not be loaded by the canvas."""


class LookupNotFoundError(VariantTableError):
    """Variable collection or mode not found; message lists the alternatives."""

    def __init__(self, kind: str, name: str, available: list[str], scope: str = "") -> None:
        self.kind = kind
        self.name = name
        self.available = available
        where = f" in {scope}" if scope else ""
        listing = ", ".join(available) if available else "none"
        super().__init__(f'{kind.capitalize()} "{name}" not found{where}. Available: {listing}')


class NoTableError(VariantTableError):
    """Dark mode requested before any variants table exists."""


class DocumentError(VariantTableError):
    """Malformed document or variables file."""
