"""
HTML rendering of parsed summary blocks.

Heading levels are shifted down by one (level 1 -> <h2>) because the
report page owns the <h1> title.
"""

from html import escape
from typing import Iterable, Tuple

from .blocks import Block, Heading, ListBlock, Paragraph, TextRun


def render_runs_html(runs: Tuple[TextRun, ...]) -> str:
    """Render runs as inline HTML, emphasized runs wrapped in <strong>."""
    parts = []
    for run in runs:
        text = escape(run.text)
        parts.append(f"<strong>{text}</strong>" if run.emphasized else text)
    return "".join(parts)


def render_block_html(block: Block) -> str:
    if isinstance(block, Heading):
        tag = f"h{block.level + 1}"
        return f"<{tag}>{escape(block.text)}</{tag}>"
    
    if isinstance(block, Paragraph):
        return f"<p>{render_runs_html(block.runs)}</p>"
    
    if isinstance(block, ListBlock):
        tag = "ol" if block.ordered else "ul"
        items = "".join(f"<li>{render_runs_html(item)}</li>" for item in block.items)
        return f"<{tag}>{items}</{tag}>"
    
    raise TypeError(f"Unknown block type: {type(block).__name__}")


def render_blocks_html(blocks: Iterable[Block]) -> str:
    """
    Render parsed blocks as an HTML fragment, one block per line.
    
    Args:
        blocks: Output of parse_markup()
        
    Returns:
        HTML fragment (no surrounding container)
    """
    return "\n".join(render_block_html(block) for block in blocks)
