"""
Tests for the report data model and export schema.
"""

import pytest
from pydantic import ValidationError

from meeting_report.export import ExportFormat, UnsupportedFormatError
from meeting_report.models import CostBreakdown, Report


class TestReportModel:
    """Test parsing backend report payloads."""

    def test_camel_case_payload(self, sample_report):
        assert sample_report.meeting.title == "Q3 Planning / Review!"
        assert sample_report.statistics.word_count == 12345
        assert sample_report.key_terms[0].sources[1].url == "meeting-context"
        assert sample_report.full_transcript[1].confidence is None

    def test_snake_case_construction(self):
        """Models accept field names as well as aliases."""
        costs = CostBreakdown(llm=0.1, transcription=0.2, knowledge=0.3, total=0.6)

        assert costs.last_updated is None

    def test_report_is_immutable(self, sample_report):
        with pytest.raises(ValidationError):
            sample_report.summary = "changed"

    def test_sequences_are_tuples(self, sample_report):
        assert isinstance(sample_report.key_terms, tuple)
        assert isinstance(sample_report.full_transcript, tuple)

    def test_optional_fields_default(self, report_payload):
        for key in ("costs", "keyTerms", "fullTranscript", "summary", "cached"):
            del report_payload[key]

        report = Report.model_validate(report_payload)

        assert report.costs is None
        assert report.key_terms == ()
        assert report.summary == ""
        assert report.cached is False

    def test_frequency_must_be_positive(self, report_payload):
        report_payload["keyTerms"][0]["frequency"] = 0

        with pytest.raises(ValidationError):
            Report.model_validate(report_payload)

    def test_confidence_range(self, report_payload):
        report_payload["fullTranscript"][0]["confidence"] = 1.5

        with pytest.raises(ValidationError):
            Report.model_validate(report_payload)

    def test_has_costs(self, sample_report, report_without_costs, report_with_zero_costs):
        assert sample_report.has_costs
        assert not report_without_costs.has_costs
        assert not report_with_zero_costs.has_costs


class TestExportFormat:
    """Test format resolution."""

    @pytest.mark.parametrize("value,expected", [
        ("markdown", ExportFormat.MARKDOWN),
        ("MD", ExportFormat.MARKDOWN),
        (" html ", ExportFormat.HTML),
        ("csv", ExportFormat.CSV),
        ("Json", ExportFormat.JSON),
        (ExportFormat.CSV, ExportFormat.CSV),
    ])
    def test_parse(self, value, expected):
        assert ExportFormat.parse(value) is expected

    @pytest.mark.parametrize("value", ["pdf", "", "xml", None, 3])
    def test_unsupported(self, value):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            ExportFormat.parse(value)

        error = exc_info.value.to_dict()
        assert error["error_type"] == "UNSUPPORTED_FORMAT"
        assert error["details"]["supported_formats"] == ["markdown", "html", "csv", "json"]

    def test_media_types(self):
        assert ExportFormat.CSV.media_type.startswith("text/csv")
        assert ExportFormat.JSON.file_suffix == ".json"
