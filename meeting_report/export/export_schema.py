"""
Export Schema — formats, results and errors shared by all exporters.

Every export produces an ExportResult:
- content: rendered report text
- suggested_filename: safe, date-stamped download name
- format: ExportFormat that produced it
- media_type: MIME type for downloads
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union


class UnsupportedFormatError(Exception):
    """Structured error for export formats the exporter does not know."""

    def __init__(self, requested_format: Any, message: Optional[str] = None):
        self.error_type = "UNSUPPORTED_FORMAT"
        self.requested_format = requested_format
        self.message = message or f"Unsupported export format: {requested_format!r}"
        self.details = {
            "requested_format": str(requested_format),
            "supported_formats": [fmt.value for fmt in ExportFormat]
        }
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            "error_type": self.error_type,
            "message": self.message,
            "details": self.details
        }


class ExportFormat(str, Enum):
    """Export output formats."""
    MARKDOWN = "markdown"
    HTML = "html"
    CSV = "csv"
    JSON = "json"

    @classmethod
    def parse(cls, value: Union[str, "ExportFormat"]) -> "ExportFormat":
        """
        Resolve a format name (case-insensitive, "md" accepted for markdown).

        Raises:
            UnsupportedFormatError: If the value names no known format
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnsupportedFormatError(value)

        normalized = value.strip().lower()
        normalized = _FORMAT_ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError:
            raise UnsupportedFormatError(value) from None

    @property
    def file_suffix(self) -> str:
        """Text appended to the filename stem, extension included."""
        return _FILE_SUFFIXES[self]

    @property
    def media_type(self) -> str:
        return _MEDIA_TYPES[self]


_FORMAT_ALIASES = {"md": "markdown", "htm": "html"}

_FILE_SUFFIXES = {
    ExportFormat.MARKDOWN: ".md",
    ExportFormat.HTML: ".html",
    ExportFormat.CSV: "_terms.csv",
    ExportFormat.JSON: ".json",
}

_MEDIA_TYPES = {
    ExportFormat.MARKDOWN: "text/markdown; charset=utf-8",
    ExportFormat.HTML: "text/html; charset=utf-8",
    ExportFormat.CSV: "text/csv; charset=utf-8",
    ExportFormat.JSON: "application/json; charset=utf-8",
}


@dataclass(frozen=True)
class ExportResult:
    """Rendered export paired with its download filename."""
    content: str
    suggested_filename: str
    format: ExportFormat

    @property
    def media_type(self) -> str:
        return self.format.media_type

    def to_dict(self) -> Dict[str, Any]:
        return {
            "format": self.format.value,
            "filename": self.suggested_filename,
            "media_type": self.media_type,
            "content": self.content
        }
