"""Tests for combination keys, the lookup table and group discovery."""

from variant_table.engine.combinations import (
    GroupCombo,
    build_lookup,
    discover_group_combos,
    key_for,
)
from tests.conftest import button_variants, make_variant


def _props(item):
    return item.variant_properties


def test_key_ignores_map_order():
    assert key_for({"a": "1", "b": "2"}, ["a", "b"]) == key_for({"b": "2", "a": "1"}, ["a", "b"])


def test_key_depends_on_name_order():
    assert key_for({"a": "1", "b": "2"}, ["a", "b"]) != key_for({"a": "1", "b": "2"}, ["b", "a"])


def test_key_format_and_missing_values():
    assert key_for({"a": "1", "extra": "x"}, ["a", "b"]) == "a=1|b="
    assert key_for({"a": None}, ["a"]) == "a="
    assert key_for({}, []) == ""


def test_lookup_round_trip():
    variants = button_variants()
    names = ["size", "state"]
    lookup = build_lookup(variants, _props, names)
    assert len(lookup) == len(variants)
    for v in variants:
        assert lookup[key_for(v.variant_properties, names)] is v


def test_lookup_keeps_first_on_collision(caplog):
    first = make_variant("a", {"state": "hover"})
    second = make_variant("b", {"state": "hover"})
    lookup = build_lookup([first, second], _props, ["state"])
    assert lookup == {"state=hover": first}
    assert "Duplicate combination" in caplog.text


def test_separator_collision_is_possible():
    # Unescaped separators: distinct maps, same key
    assert key_for({"a": "1|b=2", "b": ""}, ["a", "b"]) == "a=1|b=2|b="
    assert key_for({"a": "1", "b": "2|b="}, ["a", "b"]) == "a=1|b=2|b="


def test_group_combos_in_discovery_order():
    variants = [
        make_variant("1", {"state": "default", "size": "sm", "tone": "brand", "theme": "light"}),
        make_variant("2", {"state": "hover", "size": "sm", "tone": "neutral", "theme": "light"}),
        make_variant("3", {"state": "focus", "size": "lg", "tone": "brand", "theme": "light"}),
        make_variant("4", {"state": "default", "size": "lg", "tone": "brand", "theme": "dark"}),
    ]
    combos = discover_group_combos(variants, _props, ["tone", "theme"])
    assert [c.values for c in combos] == [
        {"tone": "brand", "theme": "light"},
        {"tone": "neutral", "theme": "light"},
        {"tone": "brand", "theme": "dark"},
    ]
    assert combos[0].key == "tone=brand|theme=light"


def test_single_empty_combo_without_group_properties():
    combos = discover_group_combos(button_variants(), _props, [])
    assert len(combos) == 1
    assert combos[0].values == {}
    assert combos[0].label == ""


def test_combo_label_skips_empty_values():
    combo = GroupCombo(key="k", values={"tone": "brand", "theme": ""})
    assert combo.label == "tone: brand"
