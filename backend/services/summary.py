"""Summary Aggregator - Count changes by type"""

from __future__ import annotations

from typing import Any

from models.diff import DiffChange, DiffChangeType, DiffSummary
from services.delta_engine import values_equal


def count_unchanged_keys(original: Any, modified: Any, ignore_case: bool = False) -> int:
    """Top-level keys present on both sides with equal values (objects only)"""
    if not isinstance(original, dict) or not isinstance(modified, dict):
        return 0
    return sum(
        1
        for key, value in original.items()
        if key in modified and values_equal(value, modified[key], ignore_case)
    )


def summarize(
    changes: list[DiffChange],
    original: Any = None,
    modified: Any = None,
    ignore_case: bool = False,
) -> DiffSummary:
    """Reduce a change list to counts"""
    additions = deletions = modifications = 0
    for change in changes:
        if change.type == DiffChangeType.ADDITION:
            additions += 1
        elif change.type == DiffChangeType.DELETION:
            deletions += 1
        elif change.type == DiffChangeType.MODIFICATION:
            modifications += 1

    return DiffSummary(
        total_changes=additions + deletions + modifications,
        addition_count=additions,
        deletion_count=deletions,
        modification_count=modifications,
        unchanged_keys=count_unchanged_keys(original, modified, ignore_case),
    )
