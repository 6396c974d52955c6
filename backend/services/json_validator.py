"""
JSON Validator - Parse raw JSON text into values or a precise failure
"""

from __future__ import annotations

import json
import logging
from typing import Any

from models.diff import ErrorLocation, ValidationResult

logger = logging.getLogger(__name__)

MAX_INPUT_BYTES = 1024 * 1024  # 1 MiB
# Deepest container nesting a Comparison response can still serialize
MAX_NESTING_DEPTH = 200


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unexpected token {name} is not valid JSON")


def nesting_depth(value: Any) -> int:
    """Deepest container nesting of a parsed value; scalars are 0"""
    deepest = 0
    stack = [(value, 1)]
    while stack:
        node, depth = stack.pop()
        if isinstance(node, dict):
            children = node.values()
        elif isinstance(node, list):
            children = node
        else:
            continue
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in children)
    return deepest


def validate_json(text: str, max_depth: int = MAX_NESTING_DEPTH) -> ValidationResult:
    """Parse JSON text. Never raises; failures are reported in the result.

    Documents nested deeper than max_depth are rejected.
    """
    try:
        parsed = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        return ValidationResult(
            is_valid=False,
            error=str(e),
            error_location=ErrorLocation(line=e.lineno, column=e.colno),
        )
    except ValueError as e:
        return ValidationResult(is_valid=False, error=str(e))
    except RecursionError:
        logger.warning("[JsonValidator] Document nesting exceeds decoder depth")
        return ValidationResult(is_valid=False, error="Maximum nesting depth exceeded")

    if nesting_depth(parsed) > max_depth:
        return ValidationResult(
            is_valid=False,
            error=f"Maximum nesting depth of {max_depth} exceeded",
        )

    return ValidationResult(is_valid=True, parsed=parsed)


def format_json(value: Any, indent: int = 2) -> str:
    """Pretty-print a parsed value for display"""
    return json.dumps(value, indent=indent, ensure_ascii=False)


def calculate_byte_size(text: str) -> int:
    """UTF-8 byte size of a string"""
    return len(text.encode("utf-8", errors="surrogatepass"))


def validate_size(text: str, max_size_in_bytes: int = MAX_INPUT_BYTES) -> bool:
    """Check that input fits within the size limit"""
    return calculate_byte_size(text) <= max_size_in_bytes
