"""Tests for the structural delta engine."""

from __future__ import annotations

import pytest

from models.diff import DiffOptions
from services.delta_engine import DeltaEngine, diff, values_equal


class TestValuesEqual:
    """Tests for deep equality."""

    @pytest.mark.parametrize(
        "a, b",
        [
            (1, 1.0),
            ({"a": [1, {"b": None}]}, {"a": [1, {"b": None}]}),
            ({"x": 1, "y": 2}, {"y": 2, "x": 1}),
            ([], []),
        ],
    )
    def test_equal(self, a, b):
        assert values_equal(a, b)

    @pytest.mark.parametrize(
        "a, b",
        [
            (True, 1),
            (False, 0),
            (None, 0),
            ("1", 1),
            ([1, 2], [2, 1]),
            ({"a": 1}, {"a": 1, "b": 2}),
            ({}, []),
        ],
    )
    def test_not_equal(self, a, b):
        assert not values_equal(a, b)

    def test_ignore_case_only_affects_strings(self):
        assert values_equal({"k": "Hello"}, {"k": "hELLO"}, ignore_case=True)
        assert not values_equal({"k": "Hello"}, {"K": "Hello"}, ignore_case=True)

    def test_handles_deep_nesting_without_recursion(self):
        a = b = "leaf"
        for _ in range(5000):
            a = [a]
            b = [b]
        assert values_equal(a, b)


class TestObjectDelta:
    """Tests for object deltas."""

    def test_equal_values_produce_no_delta(self):
        assert diff({"a": 1, "b": [1, 2]}, {"b": [1, 2], "a": 1}) is None

    def test_addition(self):
        assert diff({"a": 1}, {"a": 1, "b": 2}) == {"b": [2]}

    def test_deletion_uses_sentinel(self):
        assert diff({"a": 1, "b": 2}, {"a": 1}) == {"b": [2, 0, 0]}

    def test_modification(self):
        assert diff({"a": 1}, {"a": 2}) == {"a": [1, 2]}

    def test_modification_to_zero_is_not_a_deletion(self):
        assert diff({"a": 5}, {"a": 0}) == {"a": [5, 0]}

    def test_type_change_is_modification(self):
        assert diff({"a": 1}, {"a": "1"}) == {"a": [1, "1"]}
        assert diff({"a": {"x": 1}}, {"a": [1]}) == {"a": [{"x": 1}, [1]]}

    def test_bool_and_number_differ(self):
        assert diff({"a": True}, {"a": 1}) == {"a": [True, 1]}

    def test_nested_delta(self):
        original = {"user": {"name": "A", "age": 3}, "ok": True}
        modified = {"user": {"name": "B", "age": 3}, "ok": True}
        assert diff(original, modified) == {"user": {"name": ["A", "B"]}}

    def test_key_order_original_then_additions(self):
        delta = diff({"b": 1, "a": 1}, {"c": 1, "a": 2})
        assert list(delta) == ["b", "a", "c"]


class TestArrayDelta:
    """Tests for array deltas."""

    def test_index_aligned(self):
        assert diff([1, 2, 3], [1, 5]) == {"_t": "a", "1": [2, 5], "2": [3, 0, 0]}

    def test_index_aligned_growth(self):
        assert diff([1], [1, 2]) == {"_t": "a", "1": [2]}

    def test_nested_array_in_object(self):
        delta = diff({"items": [{"id": 1}, {"id": 2}]}, {"items": [{"id": 1}, {"id": 3}]})
        assert delta == {"items": {"_t": "a", "1": {"id": [2, 3]}}}

    def test_reordered_array_differs_by_default(self):
        assert diff([1, 2], [2, 1]) == {"_t": "a", "0": [1, 2], "1": [2, 1]}

    def test_ignore_array_order_moves_are_not_changes(self):
        engine = DeltaEngine(ignore_array_order=True)
        assert engine.diff([1, 2, 3], [3, 1, 2]) is None
        assert engine.diff([{"a": 1}, {"b": 2}], [{"b": 2}, {"a": 1}]) is None

    def test_ignore_array_order_multiset(self):
        engine = DeltaEngine(ignore_array_order=True)
        assert engine.diff([1, 2], [2, 3]) == {"_t": "a", "_0": [1, 0, 0], "1": [3]}

    def test_ignore_array_order_counts_duplicates(self):
        engine = DeltaEngine(ignore_array_order=True)
        assert engine.diff([1, 1, 2], [2, 1]) == {"_t": "a", "_1": [1, 0, 0]}


class TestOptionsAndLimits:
    """Tests for options and the depth guard."""

    def test_ignore_case(self):
        options = DiffOptions(ignore_case=True)
        assert diff({"a": "Hello"}, {"a": "hELLO"}, options) is None
        assert diff({"a": "Hello"}, {"a": "World"}, options) == {"a": ["Hello", "World"]}

    def test_root_scalar_change(self):
        assert diff(1, 2) == [1, 2]
        assert diff({"a": 1}, [1]) == [{"a": 1}, [1]]
        assert diff(None, None) is None

    def test_depth_cap_replaces_subtree(self):
        engine = DeltaEngine(max_depth=1)
        assert engine.diff({"a": {"b": 1}}, {"a": {"b": 2}}) == {"a": [{"b": 1}, {"b": 2}]}

    def test_depth_cap_keeps_equal_subtrees_silent(self):
        engine = DeltaEngine(max_depth=1)
        assert engine.diff({"a": {"b": 1}, "c": 1}, {"a": {"b": 1}, "c": 2}) == {"c": [1, 2]}

    def test_from_options(self):
        engine = DeltaEngine.from_options(DiffOptions(ignore_array_order=True, ignore_case=True), max_depth=7)
        assert engine.ignore_array_order
        assert engine.ignore_case
        assert engine.max_depth == 7
