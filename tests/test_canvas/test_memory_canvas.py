"""Tests for the in-memory canvas: factories, structure and auto layout."""

import pytest

from variant_table.canvas.memory import MemoryCanvas
from variant_table.canvas.nodes import DEFAULT_FONT, ContainerNode, FontName, NodeKind, solid
from variant_table.errors import FontUnavailableError
from tests.conftest import make_variant


class TestFactories:
    def test_ids_and_defaults(self, canvas):
        frame = canvas.create_container("Panel")
        shape = canvas.create_shape()
        assert (frame.id, shape.id) == ("N1", "N2")
        assert (frame.width, frame.height) == (100, 100)
        assert shape.name == "Rectangle"
        assert frame.kind is NodeKind.CONTAINER
        assert canvas.top_level() == [frame, shape]

    def test_text_measurement(self, canvas):
        text = canvas.create_text("Hello", font_size=10)
        assert text.width == pytest.approx(27.5)
        assert text.height == pytest.approx(12)
        assert canvas.create_text("", font_size=10).height == 0

    def test_bold_text_is_wider(self, canvas):
        canvas.load_font(FontName("Inter", "Bold"))
        bold = canvas.create_text("Hello", font_size=10, font=FontName("Inter", "Bold"))
        assert bold.width == pytest.approx(30)

    def test_unloaded_font_falls_back(self, canvas):
        text = canvas.create_text("Hi", font=FontName("Inter", "Medium"))
        assert text.font == DEFAULT_FONT

    def test_restricted_fonts(self):
        canvas = MemoryCanvas(available_fonts={("Inter", "Medium")})
        canvas.load_font(FontName("Inter", "Medium"))
        with pytest.raises(FontUnavailableError):
            canvas.load_font(FontName("Inter", "Bold"))
        assert canvas.create_text("x", font=FontName("Inter", "Medium")).font.family == "Inter"

    def test_instance_takes_component_size(self, canvas):
        variant = make_variant("v1", {"size": "sm"}, width=80, height=32)
        instance = canvas.create_instance_of(variant)
        assert instance.component_id == "v1"
        assert (instance.width, instance.height) == (80, 32)
        assert instance.name == variant.name


class TestStructure:
    def test_append_moves_node(self, canvas):
        a = canvas.create_container("A")
        b = canvas.create_container("B")
        child = canvas.create_shape("Child")
        canvas.append(a, child)
        assert child.parent is a
        assert canvas.top_level() == [a, b]
        canvas.append(b, child)
        assert a.children == []
        assert b.children == [child]

    def test_remove_subtree(self, canvas):
        root = canvas.create_container("Root")
        child = canvas.create_container("Child")
        leaf = canvas.create_text("leaf")
        canvas.append(root, child)
        canvas.append(child, leaf)
        canvas.remove(child)
        assert root.children == []
        assert child.parent is None
        assert leaf.id not in canvas.nodes
        assert root.id in canvas.nodes

    def test_remove_top_level(self, canvas):
        root = canvas.create_container("Root")
        canvas.remove(root)
        assert canvas.top_level() == []

    def test_walk_is_depth_first(self, canvas):
        root = canvas.create_container("Root")
        a = canvas.create_container("A")
        a1 = canvas.create_shape("A1")
        b = canvas.create_shape("B")
        canvas.append(root, a)
        canvas.append(a, a1)
        canvas.append(root, b)
        assert [n.name for n in root.walk()] == ["A", "A1", "B"]


class TestLayout:
    def test_horizontal_hug(self, canvas):
        row = canvas.create_container("Row")
        row.layout_mode = "HORIZONTAL"
        row.item_spacing = 8
        row.set_padding(4)
        for size in (20, 30):
            shape = canvas.create_shape()
            shape.resize(size, size)
            canvas.append(row, shape)
        canvas.layout(row)
        assert (row.width, row.height) == (20 + 8 + 30 + 8, 30 + 8)
        assert [c.x for c in row.children] == [4, 32]
        assert [c.y for c in row.children] == [4, 4]

    def test_vertical_hug(self, canvas):
        col = canvas.create_container("Column")
        col.layout_mode = "VERTICAL"
        col.item_spacing = 10
        for size in (20, 40):
            shape = canvas.create_shape()
            shape.resize(size, 10)
            canvas.append(col, shape)
        canvas.layout(col)
        assert (col.width, col.height) == (40, 30)
        assert [c.y for c in col.children] == [0, 20]

    def test_fixed_and_centered(self, canvas):
        cell = canvas.create_container("Cell")
        cell.layout_mode = "HORIZONTAL"
        cell.primary_axis_sizing = "FIXED"
        cell.primary_axis_align = "CENTER"
        cell.counter_axis_align = "CENTER"
        cell.set_padding(8)
        cell.resize(120, 0)
        shape = canvas.create_shape()
        shape.resize(40, 20)
        canvas.append(cell, shape)
        canvas.layout(cell)
        assert (cell.width, cell.height) == (120, 36)
        assert (shape.x, shape.y) == (40, 8)

    def test_nested_layout_bottom_up(self, canvas):
        outer = canvas.create_container("Outer")
        outer.layout_mode = "VERTICAL"
        inner = canvas.create_container("Inner")
        inner.layout_mode = "HORIZONTAL"
        shape = canvas.create_shape()
        shape.resize(50, 10)
        canvas.append(inner, shape)
        canvas.append(outer, inner)
        canvas.layout(outer)
        assert (inner.width, inner.height) == (50, 10)
        assert (outer.width, outer.height) == (50, 10)

    def test_no_layout_mode_keeps_size(self, canvas):
        frame = canvas.create_container("Free")
        frame.fills = [solid(1, 1, 1)]
        canvas.append(frame, canvas.create_shape())
        canvas.layout(frame)
        assert (frame.width, frame.height) == (100, 100)

    def test_empty_container_hugs_padding(self):
        canvas = MemoryCanvas()
        empty = canvas.create_container("Empty")
        empty.layout_mode = "HORIZONTAL"
        empty.set_padding(6)
        canvas.layout(empty)
        assert (empty.width, empty.height) == (12, 12)
        assert isinstance(empty, ContainerNode)
