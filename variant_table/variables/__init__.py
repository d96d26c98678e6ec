"""Design-variable store used for light/dark color lookup."""

from variant_table.variables.store import MemoryVariableStore, VariableStore, resolve_value

__all__ = ["MemoryVariableStore", "VariableStore", "resolve_value"]
