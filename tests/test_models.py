"""Tests for ninny.core.models."""

import pytest

from ninny.core.models import Array, Section, Value, item_kind, lookup, to_plain


class TestSection:
    def test_defaults_empty(self):
        s = Section()
        assert s.entries == {}
        assert len(s) == 0

    def test_mapping_helpers(self):
        s = Section({"k": Value("v")})
        assert s["k"] == Value("v")
        assert "k" in s
        assert s.get("missing") is None
        assert len(s) == 1

    def test_equality_ignores_insertion_order(self):
        a = Section({"x": Value("1"), "y": Value("2")})
        b = Section({"y": Value("2"), "x": Value("1")})
        assert a == b


class TestToPlain:
    def test_nested(self):
        tree = {
            "a": Value("1"),
            "s": Section({"t": Section({"k": Value("v")})}),
        }
        assert to_plain(tree) == {"a": "1", "s": {"t": {"k": "v"}}}

    def test_array(self):
        assert to_plain({"xs": Array(["a", "b"])}) == {"xs": ["a", "b"]}

    def test_rejects_foreign_values(self):
        with pytest.raises(TypeError):
            to_plain({"x": "raw"})


class TestLookup:
    tree = {"a": Section({"b": Section({"c": Value("deep")}), "v": Value("1")})}

    def test_value(self):
        assert lookup(self.tree, ["a", "b", "c"]) == Value("deep")

    def test_section(self):
        assert isinstance(lookup(self.tree, ["a", "b"]), Section)

    def test_missing(self):
        with pytest.raises(KeyError):
            lookup(self.tree, ["a", "nope"])

    def test_through_value(self):
        with pytest.raises(KeyError):
            lookup(self.tree, ["a", "v", "x"])

    def test_empty_path(self):
        with pytest.raises(KeyError):
            lookup(self.tree, [])


def test_item_kind():
    assert item_kind(Value("x")) == "Value"
    assert item_kind(Array()) == "Array"
    assert item_kind(Section()) == "Section"
