"""Tests for change navigation."""

from __future__ import annotations

from services.comparison_service import compare_json
from services.navigation import DiffNavigator, next_index, previous_index


class TestIndexContract:
    """Tests for next_index / previous_index."""

    def test_next_wraps(self):
        assert next_index(0, 3) == 1
        assert next_index(2, 3) == 0

    def test_previous_wraps(self):
        assert previous_index(1, 3) == 0
        assert previous_index(0, 3) == 2

    def test_empty(self):
        assert next_index(-1, 0) == -1
        assert previous_index(-1, 0) == -1


class TestDiffNavigator:
    """Tests for DiffNavigator."""

    def test_starts_at_first_change(self, simple_pair):
        navigator = DiffNavigator.for_comparison(compare_json(*simple_pair))
        assert navigator.state.current_index == 0
        assert navigator.state.total_count == 3
        assert navigator.state.highlighted_change_id == "diff-0"

    def test_cycles_through_changes(self, simple_pair):
        navigator = DiffNavigator.for_comparison(compare_json(*simple_pair))
        assert navigator.next().id == "diff-1"
        assert navigator.next().id == "diff-2"
        assert navigator.next().id == "diff-0"
        assert navigator.previous().id == "diff-2"
        assert navigator.state.highlighted_change_id == "diff-2"

    def test_no_changes_is_inert(self):
        navigator = DiffNavigator.for_comparison(compare_json("{}", "{}"))
        assert navigator.state.current_index == -1
        assert navigator.current is None
        assert navigator.next() is None
        assert navigator.previous() is None
        assert navigator.state.current_index == -1

    def test_missing_comparison(self):
        navigator = DiffNavigator.for_comparison(None)
        assert navigator.state.total_count == 0
        assert navigator.state.current_index == -1
