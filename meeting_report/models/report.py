"""
Report data model — the meeting report aggregate handed to the exporter.

Reports arrive as JSON from the backend "generate/regenerate report"
endpoint with camelCase keys. Models accept both camelCase and snake_case
and dump camelCase. Field declaration order is the JSON key order; keys
the backend adds beyond the declared fields are kept as they arrived.
"""

from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ReportModel(BaseModel):
    """Base for immutable, camelCase-aliased report models."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True
    )


class MeetingInfo(ReportModel):
    title: str = Field(..., description="Meeting title")
    start_time: datetime = Field(..., description="Meeting start instant")
    duration: str = Field(..., description="Human-readable duration, e.g. '1h 5m'")
    
    # Carried through from the backend when present
    id: Optional[str] = None
    description: Optional[str] = None
    end_time: Optional[datetime] = None
    status: Optional[str] = None


class TermSource(ReportModel):
    title: str
    url: str  # "meeting-context" when the definition came from the meeting itself


class KeyTerm(ReportModel):
    term: str
    frequency: int = Field(..., ge=1, description="Mentions in the transcript")
    definition: str
    sources: Tuple[TermSource, ...] = ()


class TranscriptSegment(ReportModel):
    timestamp: datetime
    text: str
    confidence: Optional[float] = Field(default=None, ge=0.0, le=1.0)


class ReportStatistics(ReportModel):
    word_count: int = Field(..., ge=0)
    unique_terms: int = Field(..., ge=0)
    total_definitions: int = Field(..., ge=0)
    transcript_segments: int = Field(..., ge=0)


class CostBreakdown(ReportModel):
    """
    API usage costs in dollars.
    
    total is trusted as computed upstream (llm + transcription + knowledge)
    and is not re-verified.
    """
    llm: float = Field(..., ge=0.0)
    transcription: float = Field(..., ge=0.0)
    knowledge: float = Field(..., ge=0.0)
    total: float = Field(..., ge=0.0)
    last_updated: Optional[datetime] = None
    # Per-call usage records keyed by service, passed through untouched
    breakdown: Optional[Dict[str, Any]] = None


class Report(ReportModel):
    """Meeting report aggregate: metadata, summary, terms, transcript, costs."""
    meeting: MeetingInfo
    summary: str = ""
    key_terms: Tuple[KeyTerm, ...] = ()
    full_transcript: Tuple[TranscriptSegment, ...] = ()
    statistics: ReportStatistics
    costs: Optional[CostBreakdown] = None
    cached: bool = False
    generated_at: Optional[datetime] = None
    
    @property
    def has_costs(self) -> bool:
        """True when a cost section should be rendered."""
        return self.costs is not None and self.costs.total > 0
