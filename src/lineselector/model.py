from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Selection:
    start_line: int  # zero-based
    end_line: int    # zero-based, inclusive
    empty: bool = False  # caret only, nothing selected

    @classmethod
    def caret(cls, line: int) -> Selection:
        return cls(start_line=line, end_line=line, empty=True)


@dataclass(frozen=True)
class CandidateLine:
    index: int
    text: str
