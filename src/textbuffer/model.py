from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class TextLine:
    index: int
    text: str        # without terminator
    terminator: str  # "\r\n" | "\n" | "\r" | "" (last line)
    start: int       # offset in the document


@dataclass(frozen=True)
class TextSnapshot:
    text: str
    lines: List[TextLine]

    @property
    def line_count(self) -> int:
        return len(self.lines)
