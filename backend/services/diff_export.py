"""
Diff Export Service - Render a comparison as text, JSON Patch (RFC 6902) or HTML
"""

from __future__ import annotations

import logging
from datetime import datetime
from html import escape
from typing import Any

import jsonpatch

from models.diff import Comparison, DiffStatus

logger = logging.getLogger(__name__)

_HTML_STYLE = """
    body {
      font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
      max-width: 1200px;
      margin: 0 auto;
      padding: 20px;
      background-color: #f5f5f5;
    }
    .header {
      background-color: #2c3e50;
      color: white;
      padding: 20px;
      border-radius: 8px;
      margin-bottom: 20px;
    }
    .summary {
      background-color: white;
      padding: 20px;
      border-radius: 8px;
      margin-bottom: 20px;
      box-shadow: 0 2px 4px rgba(0,0,0,0.1);
    }
    .change {
      background-color: white;
      padding: 15px;
      margin-bottom: 10px;
      border-radius: 4px;
      border-left: 4px solid #ccc;
    }
    .change.addition { border-left-color: #28a745; background-color: #d4f4dd; }
    .change.deletion { border-left-color: #dc3545; background-color: #ffd7d5; }
    .change.modification { border-left-color: #ffc107; background-color: #fff3cd; }
    .change-type { font-weight: bold; text-transform: uppercase; font-size: 12px; margin-bottom: 5px; }
    .change-path { font-family: 'Courier New', monospace; color: #333; margin-bottom: 5px; }
    .change-details { color: #666; font-size: 14px; }
"""


class DiffExporter:
    """Export completed comparisons"""

    def to_json_patch(self, comparison: Comparison) -> list[dict[str, Any]]:
        """RFC 6902 operations turning the original document into the modified one"""
        if comparison.status != DiffStatus.COMPLETED:
            return []

        try:
            patch = jsonpatch.make_patch(comparison.original_parsed, comparison.modified_parsed)
        except (jsonpatch.JsonPatchException, TypeError, RecursionError) as e:
            logger.warning("[DiffExporter] Patch generation failed: %s", e)
            return []
        return list(patch.patch)

    def to_text(self, comparison: Comparison) -> str:
        """Plain-text report"""
        summary = comparison.summary
        lines = [
            "=" * 60,
            "JSON Diff Result",
            "=" * 60,
            "",
            f"Total Changes: {summary.total_changes}",
            f"  Additions: {summary.addition_count}",
            f"  Deletions: {summary.deletion_count}",
            f"  Modifications: {summary.modification_count}",
            "",
            "-" * 60,
        ]

        if comparison.error is not None:
            lines.append(f"Error ({comparison.error.code.value}): {comparison.error.message}")
            lines.append("")

        for index, change in enumerate(comparison.differences, start=1):
            lines.append(f"[{index}] {change.type.value.upper()}: {change.key_path}")
            lines.append(f"    {change.display_text}")
            lines.append("")

        if comparison.truncated:
            lines.append(f"(showing first {len(comparison.differences)} of {summary.total_changes} changes)")

        return "\n".join(lines)

    def to_html(self, comparison: Comparison) -> bytes:
        """Standalone styled HTML document, UTF-8 encoded"""
        summary = comparison.summary
        generated = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

        changes_html = "".join(
            f"""
  <div class="change {escape(change.type.value)}">
    <div class="change-type">{escape(change.type.value)}</div>
    <div class="change-path">{escape(change.key_path)}</div>
    <div class="change-details">{escape(change.display_text)}</div>
  </div>"""
            for change in comparison.differences
        )

        error_html = ""
        if comparison.error is not None:
            error_html = (
                f'\n  <div class="summary"><h2>Error</h2>'
                f"<p>{escape(comparison.error.code.value)}: {escape(comparison.error.message)}</p></div>"
            )

        document = f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>JSON Diff Result</title>
  <style>{_HTML_STYLE}  </style>
</head>
<body>
  <div class="header">
    <h1>JSON Diff Result</h1>
    <p>Generated: {generated}</p>
  </div>
{error_html}
  <div class="summary">
    <h2>Summary</h2>
    <p>Total Changes: <strong>{summary.total_changes}</strong></p>
    <ul>
      <li>Additions: {summary.addition_count}</li>
      <li>Deletions: {summary.deletion_count}</li>
      <li>Modifications: {summary.modification_count}</li>
    </ul>
  </div>

  <h2>Changes</h2>{changes_html}
</body>
</html>
"""
        return document.encode("utf-8")
