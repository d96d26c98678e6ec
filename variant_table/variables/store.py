"""Design variables grouped into collections with named modes."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol

from pydantic import ValidationError

from variant_table.errors import DocumentError
from variant_table.models.variables import Collection, Variable, VariablesFile

logger = logging.getLogger(__name__)

# Alias chains longer than this are treated as unresolvable
_MAX_ALIAS_DEPTH = 8


class VariableStore(Protocol):
    def list_collections(self) -> list[Collection]: ...

    def list_variables(self) -> list[Variable]: ...

    def get_variable(self, variable_id: str) -> Variable | None: ...


class MemoryVariableStore:
    """Store over fixed lists; iteration order is the order given."""

    def __init__(
        self,
        collections: list[Collection] | None = None,
        variables: list[Variable] | None = None,
    ) -> None:
        self._collections = list(collections or [])
        self._variables = list(variables or [])
        self._by_id = {v.id: v for v in self._variables}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MemoryVariableStore:
        try:
            parsed = VariablesFile.model_validate(data)
        except ValidationError as e:
            raise DocumentError(f"Invalid variables file: {e}") from e
        return cls(parsed.collections, parsed.variables)

    @classmethod
    def load(cls, path: str | Path) -> MemoryVariableStore:
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise DocumentError(f"Cannot read variables file {path}: {e}") from e
        store = cls.from_dict(data)
        logger.info(
            "Loaded %d variables in %d collections from %s",
            len(store._variables),
            len(store._collections),
            path,
        )
        return store

    def list_collections(self) -> list[Collection]:
        return list(self._collections)

    def list_variables(self) -> list[Variable]:
        return list(self._variables)

    def get_variable(self, variable_id: str) -> Variable | None:
        return self._by_id.get(variable_id)


def resolve_value(store: VariableStore, variable: Variable, mode_id: str) -> Any:
    """Value of ``variable`` in ``mode_id``, following VARIABLE_ALIAS references.

    An alias is followed in the same mode id first, then in the target's
    only mode when the target lives in a single-mode collection. Returns
    None for missing values, dangling aliases and cycles.
    """
    value = variable.value_for_mode(mode_id)
    seen = {variable.id}
    depth = 0
    while isinstance(value, dict) and value.get("type") == "VARIABLE_ALIAS":
        depth += 1
        target_id = value.get("id")
        if depth > _MAX_ALIAS_DEPTH or target_id in seen:
            logger.debug("Alias cycle at %s", variable.id)
            return None
        target = store.get_variable(target_id) if target_id else None
        if target is None:
            return None
        seen.add(target.id)
        value = target.value_for_mode(mode_id)
        if value is None and len(target.values_by_mode) == 1:
            value = next(iter(target.values_by_mode.values()))
    return value
