"""
Filename derivation for report downloads.

"Q3 Planning / Review!" exported as markdown on 2024-05-01 becomes
"q3_planning___review__2024-05-01.md".
"""

import re
from datetime import date, datetime, timezone
from typing import Optional, Union

from .export_schema import ExportFormat

_UNSAFE_CHARACTERS = re.compile(r"[^a-z0-9]")


def slugify_title(title: str) -> str:
    """Lower-case the title and replace every character outside [a-z0-9] with '_'."""
    return _UNSAFE_CHARACTERS.sub("_", title.lower())


def derive_filename(
    title: str,
    export_format: Union[str, ExportFormat],
    today: Optional[date] = None
) -> str:
    """
    Build a safe, date-stamped export filename.

    Args:
        title: Meeting title
        export_format: Target format (csv gets a "_terms" suffix)
        today: Date stamp, defaults to the current UTC date

    Returns:
        Filename such as "weekly_sync_2024-05-01.html"

    Raises:
        UnsupportedFormatError: If export_format is unknown
    """
    fmt = ExportFormat.parse(export_format)
    stamp = today or datetime.now(timezone.utc).date()
    if isinstance(stamp, datetime):
        stamp = stamp.date()
    return f"{slugify_title(title)}_{stamp.isoformat()}{fmt.file_suffix}"
