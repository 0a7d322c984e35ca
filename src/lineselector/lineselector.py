from __future__ import annotations

from typing import List, Optional

from src.textbuffer.api import TextSnapshot
from .model import CandidateLine, Selection


class SelectionError(ValueError):
    pass


class LineSelector:
    def resolve_range(self, line_count: int, selection: Optional[Selection]) -> range:
        if line_count <= 0:
            return range(0)

        # no selection / bare caret -> whole document
        if selection is None or selection.empty:
            return range(0, line_count)

        start, end = selection.start_line, selection.end_line
        if start > end:
            start, end = end, start
        if start < 0 or start >= line_count:
            raise SelectionError(f"selection start {start} outside document (0..{line_count - 1})")

        end = min(end, line_count - 1)
        return range(start, end + 1)

    def select_lines(self, snap: TextSnapshot, selection: Optional[Selection]) -> List[CandidateLine]:
        out: List[CandidateLine] = []
        for i in self.resolve_range(snap.line_count, selection):
            text = snap.lines[i].text
            # nothing to convert without a space
            if " " in text:
                out.append(CandidateLine(index=i, text=text))
        return out
