"""
Comparison Service - Validate, diff, flatten and summarize a JSON text pair
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import Any

from models.diff import (
    Comparison,
    DiffError,
    DiffErrorCode,
    DiffOptions,
    DiffStatus,
)
from services.delta_engine import DEFAULT_MAX_DEPTH, DeltaEngine
from services.delta_flattener import DeltaFlattener
from services.json_validator import format_json, validate_json
from services.summary import summarize

logger = logging.getLogger(__name__)


def merge_options(options: DiffOptions | dict[str, Any] | None = None) -> DiffOptions:
    """Merge partial options over the defaults"""
    if options is None:
        return DiffOptions()
    if isinstance(options, DiffOptions):
        return options
    return DiffOptions(**{**DiffOptions().model_dump(), **options})


class ComparisonService:
    """Build Comparison snapshots. Holds no state between calls."""

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        self.max_depth = max_depth

    def compare_json(
        self,
        original_json: str,
        modified_json: str,
        options: DiffOptions | dict[str, Any] | None = None,
    ) -> Comparison:
        """Compare two JSON texts.

        Parse and calculation failures land in Comparison.error; only invalid
        options (pydantic.ValidationError) propagate.
        """
        merged = merge_options(options)
        comparison_id = str(uuid.uuid4())

        if not original_json.strip() or not modified_json.strip():
            return Comparison(
                id=comparison_id,
                original_json=original_json,
                modified_json=modified_json,
                options=merged,
                status=DiffStatus.IDLE,
            )

        start_time = time.perf_counter()

        original = validate_json(original_json)
        if not original.is_valid:
            return self._error(
                comparison_id,
                original_json,
                modified_json,
                merged,
                DiffErrorCode.PARSE_ERROR_ORIGINAL,
                original.error or "Invalid JSON",
            )

        modified = validate_json(modified_json)
        if not modified.is_valid:
            return self._error(
                comparison_id,
                original_json,
                modified_json,
                merged,
                DiffErrorCode.PARSE_ERROR_MODIFIED,
                modified.error or "Invalid JSON",
            )

        try:
            engine = DeltaEngine.from_options(merged, max_depth=self.max_depth)
            delta = engine.diff(original.parsed, modified.parsed)
            differences = DeltaFlattener().flatten(delta)
            summary = summarize(differences, original.parsed, modified.parsed, merged.ignore_case)

            formatted_original = formatted_modified = None
            if merged.format_before_diff:
                formatted_original = format_json(original.parsed)
                formatted_modified = format_json(modified.parsed)
        except Exception as e:
            logger.exception("[ComparisonService] Diff calculation failed")
            return self._error(
                comparison_id,
                original_json,
                modified_json,
                merged,
                DiffErrorCode.CALCULATION_ERROR,
                f"Diff calculation failed: {type(e).__name__}",
                original_parsed=original.parsed,
                modified_parsed=modified.parsed,
            )

        truncated = len(differences) > merged.max_differences
        if truncated:
            differences = differences[: merged.max_differences]

        calculation_time = (time.perf_counter() - start_time) * 1000
        logger.debug(
            "[ComparisonService] %d changes in %.2fms",
            summary.total_changes,
            calculation_time,
        )

        return Comparison(
            id=comparison_id,
            original_json=original_json,
            modified_json=modified_json,
            original_parsed=original.parsed,
            modified_parsed=modified.parsed,
            delta=delta,
            differences=differences,
            summary=summary,
            options=merged,
            status=DiffStatus.COMPLETED,
            calculation_time=calculation_time,
            truncated=truncated,
            formatted_original=formatted_original,
            formatted_modified=formatted_modified,
        )

    async def calculate_diff(
        self,
        original_json: str,
        modified_json: str,
        options: DiffOptions | dict[str, Any] | None = None,
    ) -> Comparison:
        """Async entry point; defers to the synchronous path"""
        return self.compare_json(original_json, modified_json, options)

    def _error(
        self,
        comparison_id: str,
        original_json: str,
        modified_json: str,
        options: DiffOptions,
        code: DiffErrorCode,
        message: str,
        original_parsed: Any = None,
        modified_parsed: Any = None,
    ) -> Comparison:
        logger.info("[ComparisonService] %s: %s", code.value, message)
        return Comparison(
            id=comparison_id,
            original_json=original_json,
            modified_json=modified_json,
            original_parsed=original_parsed,
            modified_parsed=modified_parsed,
            options=options,
            status=DiffStatus.ERROR,
            error=DiffError(code=code, message=message),
        )


def compare_json(
    original_json: str,
    modified_json: str,
    options: DiffOptions | dict[str, Any] | None = None,
) -> Comparison:
    """Compare two JSON texts with a default ComparisonService"""
    return ComparisonService().compare_json(original_json, modified_json, options)
