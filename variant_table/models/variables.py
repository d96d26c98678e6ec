"""Design-variable models: collections, modes and per-mode values."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Mode(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    mode_id: str = Field(alias="modeId")
    name: str

    @model_validator(mode="before")
    @classmethod
    def _accept_plain_id(cls, data: Any) -> Any:
        if isinstance(data, dict) and "modeId" not in data and "mode_id" not in data and "id" in data:
            data = {**data, "modeId": data["id"]}
        return data


class Collection(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    modes: list[Mode] = Field(default_factory=list)
    variable_ids: list[str] = Field(default_factory=list, alias="variableIds")

    def find_mode(self, name: str) -> Mode | None:
        for mode in self.modes:
            if mode.name == name:
                return mode
        return None


class Variable(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str = ""
    resolved_type: str = Field(default="COLOR", alias="resolvedType")
    variable_collection_id: str = Field(default="", alias="variableCollectionId")
    values_by_mode: dict[str, Any] = Field(default_factory=dict, alias="valuesByMode")

    def value_for_mode(self, mode_id: str) -> Any:
        return self.values_by_mode.get(mode_id)


class VariablesFile(BaseModel):
    collections: list[Collection] = Field(default_factory=list)
    variables: list[Variable] = Field(default_factory=list)
