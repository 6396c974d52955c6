"""Compare/export API request models"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel

from .diff import Comparison


class ExportFormat(str, Enum):
    """Supported export formats"""

    HTML = "html"
    JSON_PATCH = "json-patch"
    TEXT = "text"


class CompareRequest(BaseModel):
    """Request to compare two JSON documents"""

    original_json: str
    modified_json: str
    options: dict[str, Any] = {}  # Partial DiffOptions, merged over defaults


class ValidateRequest(BaseModel):
    """Request to validate a single JSON document"""

    text: str


class CharDiffRequest(BaseModel):
    """Request for a line/character-level diff"""

    original_text: str
    modified_text: str
    ignore_whitespace: bool = False
    format_before_diff: bool = False  # Pretty-print valid JSON before diffing


class StreamEvent(BaseModel):
    """SSE stream event for a comparison"""

    type: str  # "status", "result", "error"
    status: str | None = None
    comparison: Comparison | None = None
    error: str | None = None
