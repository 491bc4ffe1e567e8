"""
Export Routes

REST endpoints the dashboard calls to export a meeting report it already
holds. The report is posted in full; nothing is fetched or stored.

- POST /export/report          rendered content + filename as JSON
- POST /export/download        rendered content as a file attachment
- POST /export/summary/parse   summary markup -> block structure
- GET  /export/capabilities    supported formats and active options
"""

import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel, Field

from meeting_report.core.config import settings
from meeting_report.core.logging import setup_logger
from meeting_report.export import ExportFormat, ExportResult, UnsupportedFormatError, export_report
from meeting_report.markup import blocks_to_dicts, parse_markup
from meeting_report.models.report import Report

logger = setup_logger(settings.LOG_LEVEL, __name__)

router = APIRouter(prefix="/export", tags=["Export"])


class ExportRequest(BaseModel):
    """Request model for report export."""
    report: Report = Field(..., description="Meeting report to export")
    format: str = Field(
        default="markdown",
        description="Export format: markdown (md), html, csv or json"
    )
    structured_summary: Optional[bool] = Field(
        default=None,
        description="HTML only: render summary headings, bold text and lists"
    )


class ExportResponse(BaseModel):
    """Response model for export."""
    success: bool
    format: str
    filename: str
    media_type: str
    content: str
    metadata: Dict[str, Any]


class ParseSummaryRequest(BaseModel):
    text: str = Field(..., description="Summary markup text")


class ParseSummaryResponse(BaseModel):
    blocks: List[Dict[str, Any]]
    block_count: int


def _run_export(request: ExportRequest) -> ExportResult:
    try:
        return export_report(
            request.report,
            request.format,
            structured_summary=request.structured_summary
        )
    except UnsupportedFormatError as e:
        raise HTTPException(status_code=400, detail=e.to_dict())


@router.post("/report", response_model=ExportResponse)
async def export_report_content(request: ExportRequest):
    """
    Export a meeting report and return the content in the response body.

    Example:
        POST /export/report
        {
            "report": {"meeting": {...}, "summary": "...", ...},
            "format": "csv"
        }

    Returns 400 with error_type UNSUPPORTED_FORMAT for unknown formats.
    """
    start_time = time.time()

    result = _run_export(request)

    export_latency = int((time.time() - start_time) * 1000)
    metadata = {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "meeting_title": request.report.meeting.title,
        "requested_format": request.format,
        "content_size_chars": len(result.content),
        "export_latency_ms": export_latency,
        "cached_report": request.report.cached
    }

    return ExportResponse(
        success=True,
        format=result.format.value,
        filename=result.suggested_filename,
        media_type=result.media_type,
        content=result.content,
        metadata=metadata
    )


@router.post("/download")
async def download_report(request: ExportRequest):
    """Export a meeting report as a downloadable file."""
    result = _run_export(request)

    logger.info(f"Serving download {result.suggested_filename} ({len(result.content)} chars)")

    return Response(
        content=result.content,
        media_type=result.media_type,
        headers={
            "Content-Disposition": f'attachment; filename="{result.suggested_filename}"'
        }
    )


@router.post("/summary/parse", response_model=ParseSummaryResponse)
async def parse_summary(request: ParseSummaryRequest):
    """Parse summary markup into headings, paragraphs and lists."""
    blocks = parse_markup(request.text)
    return ParseSummaryResponse(blocks=blocks_to_dicts(blocks), block_count=len(blocks))


@router.get("/capabilities")
async def get_export_capabilities():
    """
    Get information about export capabilities.

    Example response:
        {
            "supported_formats": ["markdown", "html", "csv", "json"],
            "formats": {"csv": {"file_suffix": "_terms.csv", ...}, ...},
            "csv": {"legacy_line_terminator": true},
            "html": {"structured_summary": false}
        }
    """
    return {
        "supported_formats": [fmt.value for fmt in ExportFormat],
        "formats": {
            fmt.value: {
                "file_suffix": fmt.file_suffix,
                "media_type": fmt.media_type,
                "lossless": fmt == ExportFormat.JSON
            }
            for fmt in ExportFormat
        },
        "csv": {"legacy_line_terminator": settings.CSV_LEGACY_LINE_TERMINATOR},
        "html": {"structured_summary": settings.HTML_STRUCTURED_SUMMARY}
    }
