"""
Export Package

Exports meeting reports as Markdown, HTML, CSV (key terms) and JSON,
each paired with a date-stamped download filename.
"""

from meeting_report.export.export_schema import (
    ExportFormat,
    ExportResult,
    UnsupportedFormatError
)

from meeting_report.export.filename import derive_filename

from meeting_report.export.report_builder import (
    export_report,
    build_markdown_report,
    build_csv_terms,
    build_json_report
)

from meeting_report.export.html_report import build_html_report

__all__ = [
    "ExportFormat",
    "ExportResult",
    "UnsupportedFormatError",
    "derive_filename",
    "export_report",
    "build_markdown_report",
    "build_html_report",
    "build_csv_terms",
    "build_json_report"
]
