from __future__ import annotations

from typing import List, Optional

from src.textbuffer.api import TextSnapshot
from .lineselector import LineSelector, SelectionError
from .model import CandidateLine, Selection


def resolve_range(line_count: int, selection: Optional[Selection] = None) -> range:
    """Public API (LineSelector)

    Contract:
    - selection None or an empty (caret-only) selection -> whole document.
    - Selection(n, n) is the single line n.
    - Otherwise start..end INCLUSIVE, end clamped, reversed selection swapped.
    - start outside the document -> SelectionError.
    """
    return LineSelector().resolve_range(line_count, selection)


def select_lines(snap: TextSnapshot, selection: Optional[Selection] = None) -> List[CandidateLine]:
    """Public API (LineSelector)

    Contract:
    - Lines of the resolved range, in document order.
    - Pre-filter: only lines containing at least one space.
    """
    return LineSelector().select_lines(snap, selection)


__all__ = ["CandidateLine", "Selection", "SelectionError", "resolve_range", "select_lines"]
