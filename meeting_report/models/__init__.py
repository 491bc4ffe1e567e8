"""Data models for meeting reports."""

from meeting_report.models.report import (
    CostBreakdown,
    KeyTerm,
    MeetingInfo,
    Report,
    ReportStatistics,
    TermSource,
    TranscriptSegment
)

__all__ = [
    "CostBreakdown",
    "KeyTerm",
    "MeetingInfo",
    "Report",
    "ReportStatistics",
    "TermSource",
    "TranscriptSegment"
]
