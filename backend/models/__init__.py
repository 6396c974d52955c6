"""Models module - Pydantic data models"""

from .compare import CharDiffRequest, CompareRequest, ExportFormat, StreamEvent, ValidateRequest
from .delta import Addition, Deletion, Modification, NestedDelta, classify_delta_entry
from .diff import (
    CharChange,
    CharChangeType,
    CharLevelDiffResult,
    Comparison,
    DiffChange,
    DiffChangeType,
    DiffError,
    DiffErrorCode,
    DiffLineNumber,
    DiffOptions,
    DiffPreferences,
    DiffStatus,
    DiffSummary,
    DiffViewMode,
    ErrorLocation,
    NavigationState,
    ValidationResult,
)

__all__ = [
    # Request models
    "CharDiffRequest",
    "CompareRequest",
    "ExportFormat",
    "StreamEvent",
    "ValidateRequest",
    # Delta entries
    "Addition",
    "Deletion",
    "Modification",
    "NestedDelta",
    "classify_delta_entry",
    # Diff models
    "CharChange",
    "CharChangeType",
    "CharLevelDiffResult",
    "Comparison",
    "DiffChange",
    "DiffChangeType",
    "DiffError",
    "DiffErrorCode",
    "DiffLineNumber",
    "DiffOptions",
    "DiffPreferences",
    "DiffStatus",
    "DiffSummary",
    "DiffViewMode",
    "ErrorLocation",
    "NavigationState",
    "ValidationResult",
]
