"""
Markup Package — parsing of AI-generated meeting summaries.

Turns free-form summary text (headings, bold runs, bullet and numbered
lists) into a block-structured document and renders it as HTML.
"""

from meeting_report.markup.blocks import (
    Block,
    Heading,
    ListBlock,
    Paragraph,
    TextRun,
    blocks_to_dicts
)

from meeting_report.markup.emphasis import split_emphasis
from meeting_report.markup.parser import parse_markup, split_lines
from meeting_report.markup.render import render_blocks_html

__all__ = [
    "Block",
    "Heading",
    "ListBlock",
    "Paragraph",
    "TextRun",
    "blocks_to_dicts",
    "split_emphasis",
    "parse_markup",
    "split_lines",
    "render_blocks_html"
]
