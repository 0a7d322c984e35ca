from __future__ import annotations

from typing import List

from .model import Run
from .normalizer import InvalidConfiguration, Normalizer, check_tab_width


def calc_tabs(space_count: int, tab_width: int) -> int:
    """Public API (Normalizer)

    Contract:
    - tabs = space_count // tab_width, +1 on ANY remainder (ceiling).
    - space_count == 0 -> 0.
    """
    return Normalizer(tab_width).calc_tabs(space_count)


def normalize_line(line: str, tab_width: int) -> str:
    """Public API (Normalizer)

    Contract:
    - Empty line -> unchanged.
    - Leading space run (only if line[0] == " ") -> calc_tabs(n) tabs at offset 0.
    - Then: FIRST "//" at offset > 0 -> the space run directly before it -> calc_tabs(n) tabs.
    - "//" inside string literals counts as a marker (known limitation).
    - Pure, idempotent. tab_width <= 0 -> InvalidConfiguration.
    """
    return Normalizer(tab_width).normalize_line(line)


def normalize_lines(lines: List[str], tab_width: int) -> List[str]:
    """Public API (Normalizer)

    Contract:
    - tab_width validated once, before any line.
    - Line count unchanged.
    """
    return Normalizer(tab_width).normalize_lines(lines)


__all__ = ["InvalidConfiguration", "Run", "calc_tabs", "check_tab_width", "normalize_line", "normalize_lines"]
