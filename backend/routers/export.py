"""Export API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from models.compare import CompareRequest, ExportFormat
from routers.compare import run_comparison
from services.diff_export import DiffExporter

router = APIRouter()
exporter = DiffExporter()


@router.post("/{export_format}")
async def export_comparison(export_format: str, request: CompareRequest) -> Response:
    """Compare two JSON documents and export the result"""
    try:
        fmt = ExportFormat(export_format)
    except ValueError:
        supported = ", ".join(f.value for f in ExportFormat)
        raise HTTPException(status_code=400, detail=f"Unsupported export format (use one of: {supported})")

    comparison = await run_comparison(request)

    if fmt == ExportFormat.JSON_PATCH:
        return JSONResponse(
            content=exporter.to_json_patch(comparison),
            headers={"Content-Disposition": 'attachment; filename="json-diff.patch.json"'},
        )
    if fmt == ExportFormat.TEXT:
        return PlainTextResponse(
            exporter.to_text(comparison),
            headers={"Content-Disposition": 'attachment; filename="json-diff.txt"'},
        )
    return Response(
        content=exporter.to_html(comparison),
        media_type="text/html; charset=utf-8",
        headers={"Content-Disposition": 'attachment; filename="json-diff.html"'},
    )
