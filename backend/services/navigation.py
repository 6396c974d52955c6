"""Navigation over a comparison's change list"""

from __future__ import annotations

from models.diff import Comparison, DiffChange, NavigationState


def next_index(current_index: int, total_count: int) -> int:
    """Wraps past the last change; -1 when there is nothing to visit"""
    if total_count <= 0:
        return -1
    return (current_index + 1) % total_count


def previous_index(current_index: int, total_count: int) -> int:
    """Wraps before the first change; -1 when there is nothing to visit"""
    if total_count <= 0:
        return -1
    return total_count - 1 if current_index == 0 else current_index - 1


class DiffNavigator:
    """Track the highlighted change while stepping through a comparison"""

    def __init__(self, changes: list[DiffChange] | None = None):
        self.changes = changes or []
        self.state = NavigationState(total_count=len(self.changes))
        if self.changes:
            self._move_to(0)

    @classmethod
    def for_comparison(cls, comparison: Comparison | None) -> "DiffNavigator":
        """Fresh navigator; resets to the first change (or -1) per comparison"""
        return cls(comparison.differences if comparison is not None else None)

    @property
    def current(self) -> DiffChange | None:
        if self.state.current_index < 0:
            return None
        return self.changes[self.state.current_index]

    def next(self) -> DiffChange | None:
        if self.state.total_count == 0:
            return None
        self._move_to(next_index(self.state.current_index, self.state.total_count))
        return self.current

    def previous(self) -> DiffChange | None:
        if self.state.total_count == 0:
            return None
        self._move_to(previous_index(self.state.current_index, self.state.total_count))
        return self.current

    def _move_to(self, index: int):
        self.state.current_index = index
        self.state.highlighted_change_id = self.changes[index].id
