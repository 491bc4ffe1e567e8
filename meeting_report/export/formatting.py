"""
Value formatting shared by the Markdown and HTML report builders.

Formatting is locale-independent: ISO dates, 24-hour times, comma
thousands separators, dollar amounts with six decimals.
"""

import math
from datetime import datetime


def format_date(value: datetime) -> str:
    return value.strftime("%Y-%m-%d")


def format_time(value: datetime) -> str:
    return value.strftime("%H:%M:%S")


def format_timestamp(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S")


def format_count(value: int) -> str:
    return f"{value:,}"


def format_cost(amount: float) -> str:
    return f"${amount:.6f}"


def format_confidence(confidence: float) -> str:
    """0.956 -> '96%' (halves round up)."""
    return f"{math.floor(confidence * 100 + 0.5)}%"
