"""
Shared fixtures for the meeting report test suite.

Provides report payloads shaped like the backend "generate report"
response (camelCase keys) and the parsed Report models.
"""

import copy
from datetime import date, datetime
from typing import Any, Dict

import pytest

from meeting_report.models.report import Report


REPORT_PAYLOAD: Dict[str, Any] = {
    "meeting": {
        "title": "Q3 Planning / Review!",
        "startTime": "2024-05-01T14:30:00Z",
        "duration": "1h 5m",
    },
    "summary": (
        "## Overview\n"
        "The team reviewed **Q3 goals** and blockers.\n"
        "\n"
        "- Ship the exporter\n"
        "- Fix the CSV quirk\n"
        "1. Draft roadmap"
    ),
    "keyTerms": [
        {
            "term": "Kubernetes",
            "frequency": 4,
            "definition": "Container orchestration platform",
            "sources": [
                {"title": "Kubernetes Docs", "url": "https://kubernetes.io/docs"},
                {"title": "Discussed in meeting", "url": "meeting-context"},
            ],
        },
        {
            "term": "OKR",
            "frequency": 3,
            "definition": 'He said "hi"\\nthen left',
            "sources": [],
        },
    ],
    "fullTranscript": [
        {"timestamp": "2024-05-01T14:30:05Z", "text": "Welcome everyone.", "confidence": 0.956},
        {"timestamp": "2024-05-01T14:31:10Z", "text": "Let's start with Kubernetes."},
    ],
    "statistics": {
        "wordCount": 12345,
        "uniqueTerms": 2,
        "totalDefinitions": 2,
        "transcriptSegments": 2,
    },
    "costs": {
        "llm": 0.001234,
        "transcription": 0.05,
        "knowledge": 0.0,
        "total": 0.051234,
        "lastUpdated": "2024-05-01T15:40:00Z",
    },
    "cached": False,
}

GENERATED_AT = datetime(2024, 5, 1, 16, 0, 0)
EXPORT_DAY = date(2024, 5, 1)


@pytest.fixture
def report_payload() -> Dict[str, Any]:
    """Deep copy of the backend report payload, safe to mutate."""
    return copy.deepcopy(REPORT_PAYLOAD)


@pytest.fixture
def sample_report(report_payload) -> Report:
    return Report.model_validate(report_payload)


@pytest.fixture
def report_without_costs(report_payload) -> Report:
    del report_payload["costs"]
    return Report.model_validate(report_payload)


@pytest.fixture
def report_with_zero_costs(report_payload) -> Report:
    report_payload["costs"] = {"llm": 0.0, "transcription": 0.0, "knowledge": 0.0, "total": 0.0}
    return Report.model_validate(report_payload)


@pytest.fixture
def generated_at() -> datetime:
    return GENERATED_AT


@pytest.fixture
def export_day() -> date:
    return EXPORT_DAY
