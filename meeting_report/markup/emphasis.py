"""
Inline emphasis splitting for summary lines.

Bold text in AI summaries is marked with ``**``. A line is split on the
delimiter and the fragments alternate plain/emphasized, starting plain.
"""

from typing import Tuple

from .blocks import TextRun

EMPHASIS_DELIMITER = "**"


def split_emphasis(line: str) -> Tuple[TextRun, ...]:
    """
    Split a line into plain and emphasized runs.
    
    Fragments at odd positions are emphasized. An unterminated delimiter
    is tolerated (the trailing fragment keeps its positional state), and
    empty fragments are kept so the run order matches the source.
    
    Args:
        line: Single line of summary text
        
    Returns:
        Tuple of TextRun in source order
        
    Example:
        >>> split_emphasis("a**b**c")
        (TextRun('a', False), TextRun('b', True), TextRun('c', False))
    """
    fragments = line.split(EMPHASIS_DELIMITER)
    return tuple(
        TextRun(text=fragment, emphasized=index % 2 == 1)
        for index, fragment in enumerate(fragments)
    )
