from __future__ import annotations

import logging
import re
from typing import Dict, List

from .model import TextLine, TextSnapshot

logger = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class TextEditError(RuntimeError):
    pass


class TextBuffer:
    def snapshot(self, text: str) -> TextSnapshot:
        lines: List[TextLine] = []
        pos = 0
        for m in _LINE_BREAK_RE.finditer(text):
            lines.append(TextLine(index=len(lines), text=text[pos:m.start()], terminator=m.group(), start=pos))
            pos = m.end()
        # last line (empty if the text ends with a line break)
        lines.append(TextLine(index=len(lines), text=text[pos:], terminator="", start=pos))
        return TextSnapshot(text=text, lines=lines)


class TextEdit:
    def __init__(self, snapshot: TextSnapshot) -> None:
        self.snapshot = snapshot
        self._replacements: Dict[int, str] = {}
        self._closed = False

    @property
    def has_changes(self) -> bool:
        return bool(self._replacements)

    @property
    def changed_lines(self) -> List[int]:
        return sorted(self._replacements)

    def replace(self, line_index: int, new_text: str) -> bool:
        if self._closed:
            raise TextEditError("edit already applied or cancelled")
        if not 0 <= line_index < self.snapshot.line_count:
            logger.warning("replace rejected: line %d out of range", line_index)
            return False
        if line_index in self._replacements:
            logger.warning("replace rejected: line %d already edited", line_index)
            return False
        if _LINE_BREAK_RE.search(new_text):
            logger.warning("replace rejected: line break in replacement for line %d", line_index)
            return False
        self._replacements[line_index] = new_text
        return True

    def apply(self) -> str:
        if self._closed:
            raise TextEditError("edit already applied or cancelled")
        self._closed = True

        parts: List[str] = []
        for line in self.snapshot.lines:
            parts.append(self._replacements.get(line.index, line.text))
            parts.append(line.terminator)
        return "".join(parts)

    def cancel(self) -> None:
        self._closed = True
        self._replacements.clear()
