"""Comparison API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError
from sse_starlette.sse import EventSourceResponse

from models.compare import CharDiffRequest, CompareRequest, StreamEvent, ValidateRequest
from models.diff import CharLevelDiffResult, Comparison, DiffOptions, DiffStatus, ValidationResult
from services.comparison_service import ComparisonService, merge_options
from services.config_manager import ConfigManager
from services.diff_generator import DiffGenerator
from services.json_validator import format_json, validate_json, validate_size

router = APIRouter()
diff_generator = DiffGenerator()


def check_input_size(*texts: str):
    """Reject inputs over the configured byte limit"""
    limit = ConfigManager.get_instance().get_limit("maxInputBytes")
    for text in texts:
        if not validate_size(text, limit):
            raise HTTPException(status_code=413, detail=f"Input exceeds {limit} bytes")


def resolve_options(partial: dict) -> DiffOptions:
    """Request options merged over configured defaults"""
    defaults = ConfigManager.get_instance().get("diff", {})
    try:
        return merge_options({**defaults, **partial})
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))


def build_service() -> ComparisonService:
    return ComparisonService(max_depth=ConfigManager.get_instance().get_limit("maxDepth"))


async def run_comparison(request: CompareRequest) -> Comparison:
    """Validate request limits and compute the comparison off the event loop"""
    check_input_size(request.original_json, request.modified_json)
    options = resolve_options(request.options)
    service = build_service()
    return await run_in_threadpool(
        service.compare_json, request.original_json, request.modified_json, options
    )


@router.post("", response_model=Comparison)
async def compare(request: CompareRequest) -> Comparison:
    """Compare two JSON documents"""
    return await run_comparison(request)


async def comparison_events(request: CompareRequest):
    """Yield status events, then the comparison result or its error"""
    event = StreamEvent(type="status", status=DiffStatus.CALCULATING.value)
    yield {"event": "message", "data": event.model_dump_json()}

    try:
        comparison = await run_comparison(request)
    except HTTPException as e:
        event = StreamEvent(type="error", status=DiffStatus.ERROR.value, error=str(e.detail))
        yield {"event": "message", "data": event.model_dump_json()}
        return

    if comparison.status == DiffStatus.ERROR:
        event = StreamEvent(
            type="error",
            status=comparison.status.value,
            comparison=comparison,
            error=comparison.error.message if comparison.error else None,
        )
    else:
        event = StreamEvent(type="result", status=comparison.status.value, comparison=comparison)
    yield {"event": "message", "data": event.model_dump_json()}


@router.post("/stream")
async def compare_stream(request: CompareRequest):
    """Compare two JSON documents and report progress over SSE"""
    return EventSourceResponse(comparison_events(request))


@router.post("/validate", response_model=ValidationResult)
async def validate(request: ValidateRequest) -> ValidationResult:
    """Validate a single JSON document"""
    check_input_size(request.text)
    return validate_json(request.text)


@router.post("/char-diff", response_model=list[CharLevelDiffResult])
async def char_diff(request: CharDiffRequest) -> list[CharLevelDiffResult]:
    """Line and character level diff of two raw texts"""
    check_input_size(request.original_text, request.modified_text)

    original_text = request.original_text
    modified_text = request.modified_text
    if request.format_before_diff:
        # Only texts that parse are re-formatted
        original = validate_json(original_text)
        modified = validate_json(modified_text)
        if original.is_valid:
            original_text = format_json(original.parsed)
        if modified.is_valid:
            modified_text = format_json(modified.parsed)

    return await run_in_threadpool(
        diff_generator.multi_line_char_diff,
        original_text,
        modified_text,
        request.ignore_whitespace,
    )
