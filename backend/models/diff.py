"""Diff-related data models"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DiffChangeType(str, Enum):
    """Classification of a single structural change"""

    ADDITION = "addition"
    DELETION = "deletion"
    MODIFICATION = "modification"


class DiffStatus(str, Enum):
    """Comparison lifecycle: idle -> calculating -> completed | error"""

    IDLE = "idle"
    CALCULATING = "calculating"
    COMPLETED = "completed"
    ERROR = "error"


class DiffErrorCode(str, Enum):
    """Error vocabulary exposed to callers"""

    PARSE_ERROR_ORIGINAL = "PARSE_ERROR_ORIGINAL"
    PARSE_ERROR_MODIFIED = "PARSE_ERROR_MODIFIED"
    CALCULATION_ERROR = "CALCULATION_ERROR"
    TIMEOUT = "TIMEOUT"  # Reserved, not enforced


class CharChangeType(str, Enum):
    """Character-level run type"""

    ADD = "add"
    REMOVE = "remove"
    EQUAL = "equal"


class DiffViewMode(str, Enum):
    """View modes the UI shell may persist"""

    SIDE_BY_SIDE = "side-by-side"
    UNIFIED = "unified"
    SPLIT = "split"


class DiffOptions(BaseModel):
    """Comparison options"""

    model_config = ConfigDict(extra="forbid")

    ignore_whitespace: bool = False  # Character-level diff only
    ignore_array_order: bool = False
    ignore_case: bool = False
    max_differences: int = Field(default=500, ge=1)
    format_before_diff: bool = True  # Display only


class DiffLineNumber(BaseModel):
    """Approximate line numbers (counter-based, not a source map)"""

    original: int | None = None
    modified: int | None = None


class DiffChange(BaseModel):
    """A single flattened change, ready for display and navigation"""

    id: str  # "diff-<n>", emission order
    type: DiffChangeType
    key_path: str
    original_value: Any = None  # deletion / modification
    modified_value: Any = None  # addition / modification
    line_number: DiffLineNumber
    display_text: str


class DiffSummary(BaseModel):
    """Counts by change type"""

    total_changes: int = 0
    addition_count: int = 0
    deletion_count: int = 0
    modification_count: int = 0
    unchanged_keys: int | None = None


class DiffError(BaseModel):
    """Structured comparison error"""

    code: DiffErrorCode
    message: str
    details: str | None = None
    timestamp: datetime = Field(default_factory=datetime.now)


class Comparison(BaseModel):
    """One comparison of an original/modified JSON pair"""

    id: str
    original_json: str
    modified_json: str
    original_parsed: Any = None
    modified_parsed: Any = None
    delta: dict[str, Any] | list[Any] | None = None  # list for a root-level change
    differences: list[DiffChange] = []
    summary: DiffSummary = Field(default_factory=DiffSummary)
    options: DiffOptions = Field(default_factory=DiffOptions)
    status: DiffStatus = DiffStatus.IDLE
    error: DiffError | None = None
    created_at: datetime = Field(default_factory=datetime.now)
    calculation_time: float | None = None  # milliseconds
    truncated: bool = False  # max_differences cut the list
    formatted_original: str | None = None
    formatted_modified: str | None = None


class CharChange(BaseModel):
    """A run of equal, added or removed characters"""

    type: CharChangeType
    value: str
    start_index: int  # -1 for additions
    length: int


class CharLevelDiffResult(BaseModel):
    """Character-level diff for one output line"""

    line_index: int  # 0-based
    original_line: str
    modified_line: str
    char_changes: list[CharChange]
    has_changes: bool


class ErrorLocation(BaseModel):
    """1-indexed position of a parse error"""

    line: int
    column: int


class ValidationResult(BaseModel):
    """Result of parsing raw JSON text"""

    is_valid: bool
    parsed: Any = None
    error: str | None = None
    error_location: ErrorLocation | None = None


class NavigationState(BaseModel):
    """Position within a comparison's change list"""

    current_index: int = -1  # -1 when there are no changes
    total_count: int = 0
    highlighted_change_id: str | None = None


class DiffPreferences(BaseModel):
    """UI shell state persisted through a preferences store"""

    original_json: str = ""
    modified_json: str = ""
    view_mode: DiffViewMode = DiffViewMode.SIDE_BY_SIDE
    options: DiffOptions = Field(default_factory=DiffOptions)
