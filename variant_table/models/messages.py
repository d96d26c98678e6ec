"""Inbound command messages from the UI panel."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class OrganizeVariantsMessage(BaseModel):
    type: Literal["organize-variants"] = "organize-variants"


class CreateDarkModeMessage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: Literal["create-dark-mode"] = "create-dark-mode"
    collection_name: str | None = Field(default=None, alias="collectionName")
    light_mode_name: str | None = Field(default=None, alias="lightModeName")
    dark_mode_name: str | None = Field(default=None, alias="darkModeName")


Message = Annotated[
    Union[OrganizeVariantsMessage, CreateDarkModeMessage], Field(discriminator="type")
]

message_adapter: TypeAdapter[Message] = TypeAdapter(Message)
