"""
HTML Report — standalone, styled meeting report page.

Layout:
- header: title, duration, date, word/term/segment counts
- API usage costs grid (only when costs.total > 0)
- summary: one <p> per summary line, or the parsed block structure when
  structured_summary is enabled
- key terms and definitions
- full transcript
- generation timestamp

All report text is HTML-escaped before interpolation.
"""

from datetime import datetime
from html import escape
from typing import Optional

from meeting_report.core.config import settings
from meeting_report.markup import parse_markup, render_blocks_html, split_lines
from meeting_report.models.report import CostBreakdown, Report
from .formatting import (
    format_cost,
    format_count,
    format_date,
    format_time,
    format_timestamp
)

REPORT_STYLES = """
        body { font-family: Arial, sans-serif; margin: 40px; line-height: 1.6; }
        .header { border-bottom: 2px solid #007bff; padding-bottom: 20px; margin-bottom: 30px; }
        .summary { background: #f8f9fa; padding: 20px; border-radius: 5px; margin: 20px 0; }
        .term { border: 1px solid #dee2e6; padding: 15px; margin: 10px 0; border-radius: 5px; }
        .transcript { background: #f1f3f4; padding: 10px; margin: 5px 0; border-radius: 3px; }
        .costs { background: #fff3cd; padding: 20px; border-radius: 5px; margin: 20px 0; border: 1px solid #ffeaa7; }
        .cost-grid { display: grid; grid-template-columns: 1fr 1fr 1fr 1fr; gap: 15px; margin: 15px 0; }
        .cost-item { background: white; padding: 15px; border-radius: 5px; text-align: center; border: 1px solid #ffeaa7; }
        .cost-total { background: #f8d7da; border: 2px solid #dc3545; }
        .cost-label { font-size: 12px; color: #856404; text-transform: uppercase; font-weight: bold; margin-bottom: 5px; }
        .cost-total .cost-label { color: #721c24; }
        .cost-value { font-size: 20px; font-weight: bold; color: #495057; }
        .cost-total .cost-value { color: #721c24; }
"""


def _cost_item(label: str, amount: float, css_class: str = "cost-item") -> str:
    return f"""
            <div class="{css_class}">
                <div class="cost-label">{label}</div>
                <div class="cost-value">{format_cost(amount)}</div>
            </div>"""


def _render_costs(costs: CostBreakdown) -> str:
    last_updated = ""
    if costs.last_updated:
        last_updated = (
            '\n        <p class="cost-updated">'
            f"Last updated: {format_timestamp(costs.last_updated)}</p>"
        )

    grid = "".join([
        _cost_item("LLM Processing", costs.llm),
        _cost_item("Transcription", costs.transcription),
        _cost_item("Knowledge Retrieval", costs.knowledge),
        _cost_item("Total Cost", costs.total, css_class="cost-item cost-total"),
    ])

    return f"""
    <div class="costs">
        <h2>API Usage Costs</h2>
        <p>Estimated costs based on API provider pricing</p>
        <div class="cost-grid">{grid}
        </div>{last_updated}
    </div>
"""


def render_summary_html(summary: str, structured: bool = False) -> str:
    """
    Render the summary body.

    Args:
        summary: Summary markup text
        structured: Parse headings, bold runs and lists; otherwise every
            non-empty line becomes one plain paragraph

    Returns:
        HTML fragment
    """
    if structured:
        return render_blocks_html(parse_markup(summary))

    return "".join(
        f"<p>{escape(line)}</p>"
        for line in split_lines(summary)
        if line.strip()
    )


def build_html_report(
    report: Report,
    generated_at: Optional[datetime] = None,
    structured_summary: Optional[bool] = None
) -> str:
    """
    Generate the standalone HTML export of a meeting report.

    Args:
        report: Meeting report aggregate
        generated_at: Footer timestamp (defaults to now)
        structured_summary: Summary rendering mode, None uses the
            HTML_STRUCTURED_SUMMARY setting

    Returns:
        Complete HTML document
    """
    generated_at = generated_at or datetime.now()
    if structured_summary is None:
        structured_summary = settings.HTML_STRUCTURED_SUMMARY

    meeting = report.meeting
    stats = report.statistics
    title = escape(meeting.title)

    costs_html = _render_costs(report.costs) if report.has_costs else ""

    terms_html = "".join(
        f"""
        <div class="term">
            <h3>{escape(term.term)} <small>({term.frequency} mentions)</small></h3>
            <p>{escape(term.definition)}</p>
        </div>"""
        for term in report.key_terms
    )

    transcript_html = "".join(
        f"""
        <div class="transcript">
            <small>{format_time(segment.timestamp)}</small><br>
            {escape(segment.text)}
        </div>"""
        for segment in report.full_transcript
    )

    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>{title} - Meeting Report</title>
    <style>{REPORT_STYLES}    </style>
</head>
<body>
    <div class="header">
        <h1>{title}</h1>
        <p><strong>Duration:</strong> {escape(meeting.duration)} | <strong>Date:</strong> {format_date(meeting.start_time)}</p>
        <p><strong>Words:</strong> {format_count(stats.word_count)} | <strong>Terms:</strong> {stats.unique_terms} | <strong>Segments:</strong> {stats.transcript_segments}</p>
    </div>
{costs_html}
    <div class="summary">
        <h2>Summary</h2>
        {render_summary_html(report.summary, structured=structured_summary)}
    </div>

    <h2>Key Terms &amp; Definitions ({len(report.key_terms)})</h2>{terms_html}

    <h2>Full Transcript</h2>{transcript_html}

    <p><em>Generated on {format_timestamp(generated_at)}</em></p>
</body>
</html>
"""
