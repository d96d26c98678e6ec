"""Shared test fixtures."""

from __future__ import annotations

import pytest

from variant_table.canvas.memory import MemoryCanvas
from variant_table.models.document import Component, ComponentSet, Frame
from variant_table.variables.store import MemoryVariableStore

STATES = ["default", "hover", "focus", "disabled"]
SIZES = ["sm", "lg"]


def make_variant(
    variant_id: str,
    props: dict[str, str],
    width: float = 100.0,
    height: float = 40.0,
    name: str | None = None,
    children: list[str] | None = None,
) -> Component:
    return Component(
        id=variant_id,
        name=name if name is not None else ", ".join(f"{k}={v}" for k, v in props.items()),
        variant_properties=props,
        width=width,
        height=height,
        children=children or [],
    )


def make_set(variants: list[Component], name: str = "Button", set_id: str = "set-1", **kwargs) -> ComponentSet:
    return ComponentSet(id=set_id, name=name, children=variants, **kwargs)


def button_variants(missing: tuple[tuple[str, str], ...] = ()) -> list[Component]:
    """state x size grid, skipping (state, size) pairs listed in ``missing``."""
    variants = []
    for state in STATES:
        for size in SIZES:
            if (state, size) in missing:
                continue
            variants.append(make_variant(f"v-{state}-{size}", {"state": state, "size": size}))
    return variants


# Document in the on-disk JSON form
BUTTON_DOCUMENT = {
    "name": "Components",
    "nodes": [
        {
            "type": "COMPONENT_SET",
            "id": "set-1",
            "name": "Button",
            "x": 0,
            "y": 0,
            "width": 400,
            "height": 300,
            "children": [
                {
                    "type": "COMPONENT",
                    "id": f"v-{state}-{size}",
                    "name": f"State={state}, Size={size}",
                    "variantProperties": {"state": state, "size": size},
                    "width": 120,
                    "height": 40,
                }
                for state in STATES
                for size in SIZES
                if (state, size) != ("disabled", "lg")
            ],
        },
        {"type": "INSTANCE", "id": "inst-1", "name": "Button", "mainComponentId": "v-hover-sm"},
        {"type": "COMPONENT", "id": "loose-1", "name": "Loose", "variantProperties": {}},
        {"type": "COMPONENT_SET", "id": "empty-set", "name": "Empty", "children": []},
        {"type": "FRAME", "id": "frame-1", "name": "Frame"},
    ],
    "selection": ["set-1"],
}

VARIABLES = {
    "collections": [
        {
            "id": "col-general",
            "name": "General",
            "modes": [{"modeId": "m-light", "name": "VD"}, {"modeId": "m-dark", "name": "Dark"}],
        },
        {"id": "col-brand", "name": "Brand", "modes": [{"id": "m-brand", "name": "Default"}]},
    ],
    "variables": [
        {
            "id": "var-surface",
            "name": "surface",
            "resolvedType": "COLOR",
            "variableCollectionId": "col-general",
            "valuesByMode": {
                "m-light": {"r": 1, "g": 1, "b": 1, "a": 1},
                "m-dark": {"r": 0.1, "g": 0.1, "b": 0.12, "a": 1},
            },
        },
        {
            "id": "var-text",
            "name": "text",
            "resolvedType": "COLOR",
            "variableCollectionId": "col-general",
            "valuesByMode": {
                "m-light": {"r": 0, "g": 0, "b": 0},
                "m-dark": {"r": 0.95, "g": 0.95, "b": 0.95},
            },
        },
        {
            "id": "var-radius",
            "name": "radius",
            "resolvedType": "FLOAT",
            "variableCollectionId": "col-general",
            "valuesByMode": {"m-light": 4, "m-dark": 4},
        },
    ],
}


@pytest.fixture
def canvas() -> MemoryCanvas:
    return MemoryCanvas()


@pytest.fixture
def button_set() -> ComponentSet:
    return make_set(button_variants())


@pytest.fixture
def button_set_missing_one() -> ComponentSet:
    return make_set(button_variants(missing=(("disabled", "lg"),)))


@pytest.fixture
def variables() -> MemoryVariableStore:
    return MemoryVariableStore.from_dict(VARIABLES)


@pytest.fixture
def frame_only_set() -> ComponentSet:
    return ComponentSet(id="set-frames", name="Frames", children=[Frame(id="f-1", name="Note")])
