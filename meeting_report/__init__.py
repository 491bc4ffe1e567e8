"""
Meeting Report Exporter

Parses AI-generated meeting summaries and exports meeting reports
as Markdown, HTML, CSV and JSON.
"""

__version__ = "1.0.0"
