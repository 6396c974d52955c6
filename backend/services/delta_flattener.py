"""
Delta Flattener - Turn a delta tree into an ordered list of DiffChange
"""

from __future__ import annotations

import json
import logging
from typing import Any

from models.delta import (
    ARRAY_MARKER,
    DELETED_INDEX_PREFIX,
    Addition,
    Deletion,
    Modification,
    NestedDelta,
    classify_delta_entry,
)
from models.diff import DiffChange, DiffChangeType, DiffLineNumber

logger = logging.getLogger(__name__)

ROOT_LABEL = "(root)"


def render_value(value: Any) -> str:
    """Compact JSON rendering for display text"""
    try:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError):
        return repr(value)


class DeltaFlattener:
    """Walk a delta depth-first and emit one DiffChange per leaf entry.

    Line numbers come from a counter that advances once per emitted change;
    they approximate position in pretty-printed output and are not a source map.
    """

    def __init__(self):
        self.changes: list[DiffChange] = []
        self._line = 1

    def flatten(self, delta: dict[str, Any] | list[Any] | None) -> list[DiffChange]:
        self.changes = []
        self._line = 1

        if delta is None:
            return self.changes

        if isinstance(delta, list):
            # Root-level replacement of a non-container value
            self._emit(classify_delta_entry(delta), [], delta)
        elif isinstance(delta, dict):
            self._traverse(delta, [], is_array=False)
        else:
            logger.warning("[DeltaFlattener] Ignoring delta of type %s", type(delta).__name__)

        return self.changes

    def _traverse(self, node: dict[str, Any], path: list[str], is_array: bool):
        for key, value in node.items():
            if is_array and key == ARRAY_MARKER:
                continue

            if is_array and key.startswith(DELETED_INDEX_PREFIX):
                key = key[len(DELETED_INDEX_PREFIX):]

            entry = classify_delta_entry(value)
            if isinstance(entry, NestedDelta):
                self._traverse(entry.delta, path + [key], entry.is_array)
            else:
                self._emit(entry, path + [key], value)

    def _emit(self, entry, path: list[str], raw: Any):
        key_path = ".".join(path)
        label = key_path or ROOT_LABEL
        change_id = f"diff-{len(self.changes)}"

        if isinstance(entry, Addition):
            change = DiffChange(
                id=change_id,
                type=DiffChangeType.ADDITION,
                key_path=key_path,
                modified_value=entry.new,
                line_number=DiffLineNumber(modified=self._line),
                display_text=f"{label}: {render_value(entry.new)} (added)",
            )
        elif isinstance(entry, Deletion):
            change = DiffChange(
                id=change_id,
                type=DiffChangeType.DELETION,
                key_path=key_path,
                original_value=entry.old,
                line_number=DiffLineNumber(original=self._line),
                display_text=f"{label}: {render_value(entry.old)} (removed)",
            )
        elif isinstance(entry, Modification):
            change = DiffChange(
                id=change_id,
                type=DiffChangeType.MODIFICATION,
                key_path=key_path,
                original_value=entry.old,
                modified_value=entry.new,
                line_number=DiffLineNumber(original=self._line, modified=self._line),
                display_text=f"{label}: {render_value(entry.old)} → {render_value(entry.new)}",
            )
        else:
            logger.warning(
                "[DeltaFlattener] Skipping malformed delta entry at %r: %s",
                label,
                render_value(raw),
            )
            return

        self.changes.append(change)
        self._line += 1


def flatten(delta: dict[str, Any] | list[Any] | None, original: Any = None, modified: Any = None) -> list[DiffChange]:
    """Flatten a delta into DiffChange records.

    original/modified are accepted for symmetry with the comparison pipeline;
    every value needed for display is carried by the delta itself.
    """
    return DeltaFlattener().flatten(delta)
