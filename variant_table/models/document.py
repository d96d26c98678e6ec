"""Design document model — component sets, variants, instances and frames."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class NodeBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str = ""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


class Component(NodeBase):
    """One variant: a component tagged with property/value pairs."""

    type: Literal["COMPONENT"] = "COMPONENT"
    variant_properties: dict[str, str] | None = Field(default=None, alias="variantProperties")
    children: list[str] = Field(default_factory=list, description="Names of the child layers")


class Frame(NodeBase):
    type: Literal["FRAME"] = "FRAME"


class Instance(NodeBase):
    type: Literal["INSTANCE"] = "INSTANCE"
    main_component_id: str | None = Field(default=None, alias="mainComponentId")


SetChild = Annotated[Union[Component, Frame], Field(discriminator="type")]


class ComponentSet(NodeBase):
    """Variant set: the container holding every variant of one component."""

    type: Literal["COMPONENT_SET"] = "COMPONENT_SET"
    children: list[SetChild] = Field(default_factory=list)
    # Authoritative property domains, either {name: [values]} or {name: {"values": [...]}}
    variant_group_properties: dict[str, Any] | None = Field(
        default=None, alias="variantGroupProperties"
    )

    @property
    def variants(self) -> list[Component]:
        return [c for c in self.children if isinstance(c, Component)]

    def declared_domains(self) -> dict[str, list[str]]:
        """Property domains declared on the set, skipping entries of unknown shape."""
        domains: dict[str, list[str]] = {}
        for name, spec in (self.variant_group_properties or {}).items():
            if isinstance(spec, list):
                domains[name] = [str(v) for v in spec]
            elif isinstance(spec, dict) and isinstance(spec.get("values"), list):
                domains[name] = [str(v) for v in spec["values"]]
        return domains


DocumentNode = Annotated[
    Union[ComponentSet, Component, Instance, Frame], Field(discriminator="type")
]


class DocumentFile(BaseModel):
    """On-disk JSON form of a page: top-level nodes plus the current selection."""

    name: str = "Page 1"
    nodes: list[DocumentNode] = Field(default_factory=list)
    selection: list[str] = Field(default_factory=list)
