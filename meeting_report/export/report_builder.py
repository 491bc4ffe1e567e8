"""
Report Builder — meeting report exports.

Renders a Report aggregate into the download formats offered by the
dashboard:
- Markdown: full report, summary kept in its native markup
- HTML: standalone styled page (see html_report.py)
- CSV: key terms table only
- JSON: the report itself, lossless

All builders are pure: the same report, timestamp and options give the
same string.
"""

import csv
import io
from datetime import date, datetime
from typing import Optional, Union

from meeting_report.core.config import settings
from meeting_report.core.logging import setup_logger
from meeting_report.models.report import KeyTerm, Report, TranscriptSegment
from .export_schema import ExportFormat, ExportResult, UnsupportedFormatError
from .filename import derive_filename
from .formatting import (
    format_confidence,
    format_cost,
    format_count,
    format_date,
    format_time,
    format_timestamp
)
from .html_report import build_html_report

logger = setup_logger(settings.LOG_LEVEL, __name__)

MEETING_CONTEXT_SOURCE = "meeting-context"

CSV_HEADER = "Term,Frequency,Definition"
# Row separator written by the original dashboard: a backslash followed by "n"
LEGACY_CSV_TERMINATOR = "\\n"


def _format_sources(term: KeyTerm) -> str:
    return ", ".join(
        source.title if source.url == MEETING_CONTEXT_SOURCE
        else f"[{source.title}]({source.url})"
        for source in term.sources
    )


def _format_segment_markdown(segment: TranscriptSegment) -> str:
    confidence = f" ({format_confidence(segment.confidence)})" if segment.confidence else ""
    return f"**[{format_time(segment.timestamp)}]{confidence}** {segment.text}"


def build_markdown_report(report: Report, generated_at: Optional[datetime] = None) -> str:
    """
    Generate the Markdown export of a meeting report.

    Args:
        report: Meeting report aggregate
        generated_at: Generation timestamp for the footer (defaults to now)

    Returns:
        Markdown formatted report

    The summary is copied verbatim: Markdown is its native format.
    """
    generated_at = generated_at or datetime.now()
    meeting = report.meeting
    stats = report.statistics

    report_md = f"""# {meeting.title}

**Date:** {format_date(meeting.start_time)}
**Duration:** {meeting.duration}
**Words:** {format_count(stats.word_count)} | **Terms:** {stats.unique_terms}

"""

    if report.has_costs:
        costs = report.costs
        report_md += "## API Usage Costs\n\n"
        report_md += f"- **LLM Processing:** {format_cost(costs.llm)}\n"
        report_md += f"- **Transcription:** {format_cost(costs.transcription)}\n"
        report_md += f"- **Knowledge Retrieval:** {format_cost(costs.knowledge)}\n"
        report_md += f"- **Total:** {format_cost(costs.total)}\n\n"

    report_md += f"## Executive Summary\n\n{report.summary}\n\n"

    if report.key_terms:
        report_md += "## Key Terms & Definitions\n\n"
        for term in report.key_terms:
            report_md += f"### {term.term} ({term.frequency}x)\n\n"
            report_md += f"{term.definition}\n\n"
            if term.sources:
                report_md += f"**Sources:** {_format_sources(term)}\n\n"

    report_md += "## Full Transcript\n\n"
    for segment in report.full_transcript:
        report_md += f"{_format_segment_markdown(segment)}\n\n"

    report_md += f"---\n\n*Generated on {format_timestamp(generated_at)}*\n"

    return report_md


def _clean_definition(definition: str) -> str:
    # Literal "\n" sequences and real line breaks both collapse to one space
    cleaned = definition.replace("\\n", " ")
    return cleaned.replace("\r\n", " ").replace("\n", " ").replace("\r", " ")


def build_csv_terms(report: Report, legacy_line_terminator: Optional[bool] = None) -> str:
    """
    Generate the key terms CSV table.

    Args:
        report: Meeting report aggregate
        legacy_line_terminator: Terminate rows with the two characters "\\n"
            as the dashboard always has; None uses the configured default

    Returns:
        CSV text: header "Term,Frequency,Definition" then one row per term

    Example row:
        "Kubernetes",4,"Container ""orchestration"" platform"
    """
    if legacy_line_terminator is None:
        legacy_line_terminator = settings.CSV_LEGACY_LINE_TERMINATOR
    terminator = LEGACY_CSV_TERMINATOR if legacy_line_terminator else "\n"

    buffer = io.StringIO()
    buffer.write(CSV_HEADER + terminator)

    # Text fields quoted with internal quotes doubled, frequency left bare
    writer = csv.writer(buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator=terminator)
    for term in report.key_terms:
        writer.writerow([term.term, term.frequency, _clean_definition(term.definition)])

    return buffer.getvalue()


def build_json_report(report: Report) -> str:
    """
    Serialize the report verbatim as JSON.

    Only the fields that were supplied are written, in data-model order,
    with camelCase keys. Report.model_validate_json() on the output
    gives back an equal report.
    """
    return report.model_dump_json(by_alias=True, exclude_unset=True, indent=2)


def export_report(
    report: Report,
    export_format: Union[str, ExportFormat],
    generated_at: Optional[datetime] = None,
    today: Optional[date] = None,
    structured_summary: Optional[bool] = None,
    legacy_csv_terminator: Optional[bool] = None
) -> ExportResult:
    """
    Export a meeting report in the requested format.

    Args:
        report: Meeting report aggregate
        export_format: "markdown" (or "md"), "html", "csv" or "json"
        generated_at: Footer timestamp for markdown/html (defaults to now)
        today: Date stamp for the filename (defaults to current UTC date)
        structured_summary: HTML only, render the summary through the
            markup parser instead of one paragraph per line
        legacy_csv_terminator: CSV only, see build_csv_terms()

    Returns:
        ExportResult with content and suggested filename

    Raises:
        UnsupportedFormatError: If export_format is unknown
    """
    try:
        fmt = ExportFormat.parse(export_format)
    except UnsupportedFormatError:
        logger.warning(f"Rejected export of '{report.meeting.title}': unsupported format {export_format!r}")
        raise

    logger.info(f"Exporting report '{report.meeting.title}' as {fmt.value}")

    if fmt == ExportFormat.MARKDOWN:
        content = build_markdown_report(report, generated_at=generated_at)
    elif fmt == ExportFormat.HTML:
        content = build_html_report(
            report,
            generated_at=generated_at,
            structured_summary=structured_summary
        )
    elif fmt == ExportFormat.CSV:
        content = build_csv_terms(report, legacy_line_terminator=legacy_csv_terminator)
    else:
        content = build_json_report(report)

    return ExportResult(
        content=content,
        suggested_filename=derive_filename(report.meeting.title, fmt, today=today),
        format=fmt
    )
