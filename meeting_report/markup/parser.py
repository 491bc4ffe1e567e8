"""
Summary markup parser — AI summary text to block structure.

Line-oriented, single pass, no lookahead. Each line is classified by its
prefix (first matching rule wins):

1. "### ", "## ", "# "   -> Heading (closes an open list)
2. contains "**"         -> Paragraph of emphasis runs (closes an open list)
3. "- " or "* "          -> unordered list item
4. "<digits>. "          -> ordered list item
5. any other non-blank   -> Paragraph with one plain run (closes an open list)
6. blank                 -> ignored, an open list stays open

List items extend the open list when it has the same kind, otherwise they
start a new list.
"""

import re
from functools import reduce
from typing import Any, List, NamedTuple, Optional

from meeting_report.core.config import settings
from meeting_report.core.logging import setup_logger
from .blocks import Block, Heading, ListBlock, Paragraph, TextRun
from .emphasis import EMPHASIS_DELIMITER, split_emphasis

logger = setup_logger(settings.LOG_LEVEL, __name__)

# Longest prefix first so "### " is not read as "# "
HEADING_PREFIXES = (("### ", 3), ("## ", 2), ("# ", 1))
BULLET_PREFIXES = ("- ", "* ")
ORDERED_ITEM_PATTERN = re.compile(r"^\d+\. ")


def split_lines(text: str) -> List[str]:
    """Split on "\\n" only, dropping one trailing "\\r" per line."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


# Chains are (newest, rest) pairs ending in None: push is O(1), the
# sequence is rebuilt once when the chain is unwound.
def _push(chain: Optional[tuple], value: Any) -> tuple:
    return (value, chain)


def _unwind(chain: Optional[tuple]) -> tuple:
    values = []
    while chain is not None:
        value, chain = chain
        values.append(value)
    values.reverse()
    return tuple(values)


class _ParseState(NamedTuple):
    """Accumulator threaded through the fold over lines."""
    blocks: Optional[tuple]
    list_ordered: Optional[bool]  # None while no list is open
    list_items: Optional[tuple]

    def close_list(self) -> "_ParseState":
        if self.list_ordered is None:
            return self
        block = ListBlock(ordered=self.list_ordered, items=_unwind(self.list_items))
        return _ParseState(_push(self.blocks, block), None, None)

    def emit(self, block: Block) -> "_ParseState":
        closed = self.close_list()
        return _ParseState(_push(closed.blocks, block), None, None)

    def add_item(self, ordered: bool, text: str) -> "_ParseState":
        item = (TextRun(text=text),)
        if self.list_ordered == ordered:
            return _ParseState(self.blocks, ordered, _push(self.list_items, item))
        closed = self.close_list()
        return _ParseState(closed.blocks, ordered, _push(None, item))


_EMPTY_STATE = _ParseState(blocks=None, list_ordered=None, list_items=None)


def _consume_line(state: _ParseState, line: str) -> _ParseState:
    for prefix, level in HEADING_PREFIXES:
        if line.startswith(prefix):
            return state.emit(Heading(level=level, text=line[len(prefix):]))

    if EMPHASIS_DELIMITER in line:
        return state.emit(Paragraph(runs=split_emphasis(line)))

    if line.startswith(BULLET_PREFIXES):
        return state.add_item(ordered=False, text=line[2:])

    match = ORDERED_ITEM_PATTERN.match(line)
    if match:
        return state.add_item(ordered=True, text=line[match.end():])

    if line.strip():
        return state.emit(Paragraph(runs=(TextRun(text=line),)))

    # Blank lines between list items keep the list open
    return state


def parse_markup(text: str) -> List[Block]:
    """
    Parse summary markup into an ordered list of blocks.

    Args:
        text: Free-form summary text (may be empty)

    Returns:
        List of Heading, Paragraph and ListBlock in source order

    Never raises for malformed markup: unterminated emphasis and mixed
    list markers degrade to the closest matching block.
    """
    if not text:
        return []

    final_state = reduce(_consume_line, split_lines(text), _EMPTY_STATE).close_list()
    blocks = list(_unwind(final_state.blocks))

    logger.debug(f"Parsed summary markup into {len(blocks)} blocks")
    return blocks
