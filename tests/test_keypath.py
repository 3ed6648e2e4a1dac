"""Tests for core/keypath.py and core/casting.py modules."""

from collections import namedtuple
from dataclasses import dataclass, field
from decimal import Decimal
from fractions import Fraction
from types import MappingProxyType

import pytest

from motionkit.core.casting import is_boxed_value, is_struct_value, to_number
from motionkit.core.exceptions import CastError, KeypathError
from motionkit.core.keypath import (
    assign,
    join_keypath,
    last_component,
    resolve,
    resolve_parent,
    split_keypath,
)

Point = namedtuple("Point", ["x", "y"])


@dataclass
class Layer:
    opacity: float = 1.0
    frame: Point = field(default_factory=lambda: Point(0, 0))
    style: dict = field(default_factory=lambda: {"border": {"width": 2}})


class TestSplitKeypath:
    """Tests for keypath splitting and joining."""

    def test_split(self):
        assert split_keypath("frame.origin.x") == ["frame", "origin", "x"]

    @pytest.mark.parametrize("path", ["", "a..b", ".a", "a."])
    def test_split_rejects_empty_segments(self, path):
        with pytest.raises(KeypathError):
            split_keypath(path)

    def test_join_skips_empty_parts(self):
        assert join_keypath("frame", "", None, "x") == "frame.x"
        assert join_keypath("", "x") == "x"

    def test_last_component(self):
        assert last_component("frame.origin.x") == "x"
        assert last_component("x") == "x"


class TestResolve:
    """Tests for resolve and resolve_parent."""

    def test_attributes(self):
        assert resolve(Layer(), "frame.x") == 0

    def test_mapping_keys(self):
        assert resolve(Layer(), "style.border.width") == 2

    def test_missing_attribute(self):
        with pytest.raises(KeypathError, match="frame.z"):
            resolve(Layer(), "frame.z")

    def test_missing_key(self):
        with pytest.raises(KeypathError):
            resolve(Layer(), "style.shadow")

    def test_resolve_parent(self):
        layer = Layer()

        parent, segment = resolve_parent(layer, "frame.x")

        assert parent is layer.frame
        assert segment == "x"

    def test_resolve_parent_single_segment(self):
        layer = Layer()

        assert resolve_parent(layer, "opacity") == (layer, "opacity")


class TestAssign:
    """Tests for assign."""

    def test_sets_attribute(self):
        layer = Layer()

        assign(layer, "opacity", 0.5)

        assert layer.opacity == 0.5

    def test_sets_mapping_key(self):
        layer = Layer()

        assign(layer, "style.border.width", 4)

        assert layer.style["border"]["width"] == 4

    def test_replaces_struct(self):
        layer = Layer()

        assign(layer, "frame", Point(3, 4))

        assert layer.frame == Point(3, 4)

    def test_struct_fields_are_not_settable(self):
        with pytest.raises(KeypathError):
            assign(Layer(), "frame.x", 3)

    def test_read_only_mapping(self):
        with pytest.raises(KeypathError):
            assign({"style": MappingProxyType({"a": 1})}, "style.a", 2)


class TestToNumber:
    """Tests for to_number."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (3, 3.0),
            (2.5, 2.5),
            (True, 1.0),
            (False, 0.0),
            (Fraction(1, 4), 0.25),
            (Decimal("1.5"), 1.5),
            ("  0.75 ", 0.75),
            ("1e2", 100.0),
        ],
    )
    def test_converts(self, value, expected):
        assert to_number(value) == expected

    @pytest.mark.parametrize("value", ["abc", "", "nan", None, Point(1, 2), object()])
    def test_rejects(self, value):
        with pytest.raises(CastError):
            to_number(value)


class TestBoxedValues:
    """Tests for is_boxed_value and is_struct_value."""

    @pytest.mark.parametrize("value", [1, 2.5, Fraction(1, 3), Point(1, 2)])
    def test_boxed(self, value):
        assert is_boxed_value(value) is True

    @pytest.mark.parametrize("value", [True, "1", (1, 2), Layer(), None])
    def test_not_boxed(self, value):
        assert is_boxed_value(value) is False

    def test_struct_value(self):
        assert is_struct_value(Point(1, 2)) is True
        assert is_struct_value((1, 2)) is False
