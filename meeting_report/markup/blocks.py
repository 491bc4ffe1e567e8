"""
Document Model — block structure produced by the summary markup parser.

A parsed summary is an ordered list of blocks:
- Heading: level 1-3 title line
- Paragraph: one source line split into text runs
- ListBlock: consecutive list items of the same kind (ordered/unordered)

All types are immutable; sequences are tuples.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple, Union


@dataclass(frozen=True)
class TextRun:
    """Contiguous span of text sharing one emphasis state."""
    text: str
    emphasized: bool = False
    
    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "emphasized": self.emphasized}


@dataclass(frozen=True)
class Heading:
    level: int  # 1, 2 or 3
    text: str
    
    def to_dict(self) -> Dict[str, Any]:
        return {"type": "heading", "level": self.level, "text": self.text}


@dataclass(frozen=True)
class Paragraph:
    runs: Tuple[TextRun, ...]
    
    def to_dict(self) -> Dict[str, Any]:
        return {"type": "paragraph", "runs": [run.to_dict() for run in self.runs]}


@dataclass(frozen=True)
class ListBlock:
    """
    List of items, each item an ordered sequence of runs.
    
    Adjacent source lines of the same kind are merged into one ListBlock
    by the parser.
    """
    ordered: bool
    items: Tuple[Tuple[TextRun, ...], ...]
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "list",
            "ordered": self.ordered,
            "items": [[run.to_dict() for run in item] for item in self.items]
        }


Block = Union[Heading, Paragraph, ListBlock]


def blocks_to_dicts(blocks: List[Block]) -> List[Dict[str, Any]]:
    """Convert parsed blocks to JSON-ready dicts."""
    return [block.to_dict() for block in blocks]
