"""
Delta Engine - Structural diff between two parsed JSON values

Delta shape:
    {"key": [new]}            addition
    {"key": [old, new]}       modification
    {"key": [old, 0, 0]}      deletion
    {"key": {...}}            nested delta
Array deltas carry {"_t": "a"} and are keyed by index.
"""

from __future__ import annotations

import logging
from typing import Any

from models.delta import ARRAY_MARKER, ARRAY_TYPE, DELETED_INDEX_PREFIX
from models.diff import DiffOptions
from services.json_validator import MAX_NESTING_DEPTH

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = MAX_NESTING_DEPTH


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def values_equal(a: Any, b: Any, ignore_case: bool = False) -> bool:
    """Deep structural equality over JSON values.

    Booleans never equal numbers; int and float compare numerically.
    Iterative, so arbitrarily deep values do not exhaust the stack.
    """
    stack = [(a, b)]
    while stack:
        left, right = stack.pop()
        if _is_number(left) and _is_number(right):
            if left != right:
                return False
            continue
        if type(left) is not type(right):
            return False
        if isinstance(left, dict):
            if left.keys() != right.keys():
                return False
            stack.extend((left[key], right[key]) for key in left)
        elif isinstance(left, list):
            if len(left) != len(right):
                return False
            stack.extend(zip(left, right))
        elif isinstance(left, str) and ignore_case:
            if left.casefold() != right.casefold():
                return False
        elif left != right:
            return False
    return True


class DeltaEngine:
    """Compute structural deltas between JSON values"""

    def __init__(
        self,
        ignore_array_order: bool = False,
        ignore_case: bool = False,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        self.ignore_array_order = ignore_array_order
        self.ignore_case = ignore_case
        self.max_depth = max_depth

    @classmethod
    def from_options(cls, options: DiffOptions, max_depth: int = DEFAULT_MAX_DEPTH) -> "DeltaEngine":
        return cls(
            ignore_array_order=options.ignore_array_order,
            ignore_case=options.ignore_case,
            max_depth=max_depth,
        )

    def diff(self, original: Any, modified: Any) -> dict[str, Any] | list[Any] | None:
        """Delta between two values, or None when they are deeply equal.

        Two containers of the same kind yield a dict delta; anything else
        that differs yields a root-level [old, new] entry.
        """
        return self._diff_node(original, modified, 0)

    def _diff_node(self, original: Any, modified: Any, depth: int) -> dict[str, Any] | list[Any] | None:
        if depth >= self.max_depth:
            if values_equal(original, modified, self.ignore_case):
                return None
            logger.debug("[DeltaEngine] Depth cap %d reached, replacing subtree", self.max_depth)
            return [original, modified]

        if isinstance(original, dict) and isinstance(modified, dict):
            return self._diff_objects(original, modified, depth) or None

        if isinstance(original, list) and isinstance(modified, list):
            if self.ignore_array_order:
                entries = self._diff_arrays_unordered(original, modified)
            else:
                entries = self._diff_arrays_by_index(original, modified, depth)
            if not entries:
                return None
            return {ARRAY_MARKER: ARRAY_TYPE, **entries}

        if values_equal(original, modified, self.ignore_case):
            return None
        return [original, modified]

    def _diff_objects(self, original: dict, modified: dict, depth: int) -> dict[str, Any]:
        delta: dict[str, Any] = {}

        for key, old_value in original.items():
            if key not in modified:
                delta[key] = [old_value, 0, 0]
                continue
            entry = self._diff_node(old_value, modified[key], depth + 1)
            if entry is not None:
                delta[key] = entry

        for key, new_value in modified.items():
            if key not in original:
                delta[key] = [new_value]

        return delta

    def _diff_arrays_by_index(self, original: list, modified: list, depth: int) -> dict[str, Any]:
        entries: dict[str, Any] = {}

        for index in range(max(len(original), len(modified))):
            if index >= len(original):
                entries[str(index)] = [modified[index]]
            elif index >= len(modified):
                entries[str(index)] = [original[index], 0, 0]
            else:
                entry = self._diff_node(original[index], modified[index], depth + 1)
                if entry is not None:
                    entries[str(index)] = entry

        return entries

    def _diff_arrays_unordered(self, original: list, modified: list) -> dict[str, Any]:
        """Multiset difference: position is ignored, equal elements always match"""
        unmatched = list(range(len(modified)))
        removed: list[int] = []

        for index, item in enumerate(original):
            match = next(
                (j for j in unmatched if values_equal(item, modified[j], self.ignore_case)),
                None,
            )
            if match is None:
                removed.append(index)
            else:
                unmatched.remove(match)

        entries: dict[str, Any] = {}
        for index in removed:
            entries[f"{DELETED_INDEX_PREFIX}{index}"] = [original[index], 0, 0]
        for index in unmatched:
            entries[str(index)] = [modified[index]]
        return entries


def diff(original: Any, modified: Any, options: DiffOptions | None = None) -> dict[str, Any] | list[Any] | None:
    """Convenience wrapper around DeltaEngine"""
    return DeltaEngine.from_options(options or DiffOptions()).diff(original, modified)
