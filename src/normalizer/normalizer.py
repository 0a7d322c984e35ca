from __future__ import annotations

import logging
from typing import List, Optional

from .model import Run

logger = logging.getLogger(__name__)

COMMENT_MARKER = "//"


class InvalidConfiguration(ValueError):
    pass


def check_tab_width(tab_width: int) -> int:
    # bool is an int subclass; True is not a tab width
    if isinstance(tab_width, bool) or not isinstance(tab_width, int):
        raise InvalidConfiguration(f"tab_width must be an integer, got {tab_width!r}")
    if tab_width <= 0:
        raise InvalidConfiguration(f"tab_width must be positive, got {tab_width}")
    return tab_width


class Normalizer:
    def __init__(self, tab_width: int) -> None:
        self.tab_width = check_tab_width(tab_width)

    def calc_tabs(self, space_count: int) -> int:
        if space_count < 0:
            raise ValueError(f"space_count must not be negative, got {space_count}")
        num = space_count // self.tab_width
        # any remainder costs a whole tab
        if space_count % self.tab_width > 0:
            num += 1
        return num

    def normalize_line(self, line: str) -> str:
        if not line:
            return line

        result = line

        run = self.leading_run(result)
        if run is not None:
            result = self._tabify_run(result, run)

        logger.debug("check: %r", result)
        run = self.comment_run(result)
        if run is not None:
            result = self._tabify_run(result, run)
            logger.debug("fixed: %r", result)

        return result

    def normalize_lines(self, lines: List[str]) -> List[str]:
        out: List[str] = []
        for line in lines:
            out.append(self.normalize_line(line))
        return out

    def leading_run(self, line: str) -> Optional[Run]:
        """Space run starting at offset 0, or None if the line does not start with a space."""
        if not line or line[0] != " ":
            return None
        count = 0
        for ch in line:
            if ch != " ":
                break
            count += 1
        return Run(start=0, count=count)

    def comment_run(self, line: str) -> Optional[Run]:
        """Space run directly in front of the first comment marker.

        Only the first marker counts, wherever it is (string literals included).
        The backward scan stops at the first non-space character.
        """
        comm_start = line.find(COMMENT_MARKER)
        logger.debug("comment marker at: %d", comm_start)
        if comm_start <= 0:
            return None

        count = 0
        for i in range(comm_start - 1, -1, -1):
            if line[i] != " ":
                break
            count += 1
        logger.debug("spaces before comment: %d", count)

        if count == 0:
            return None
        return Run(start=comm_start - count, count=count)

    def _tabify_run(self, line: str, run: Run) -> str:
        return line[:run.start] + "\t" * self.calc_tabs(run.count) + line[run.end:]
