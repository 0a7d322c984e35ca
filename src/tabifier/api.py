from __future__ import annotations

from typing import Optional

from src.lineselector.api import Selection
from .model import JobResult, TabifyResult
from .tabifier import Tabifier, TabifierError


def tabify_text(text: str, tab_width: int, selection: Optional[Selection] = None) -> TabifyResult:
    """Public API (Tabifier)

    Contract:
    - tab_width checked first (InvalidConfiguration).
    - Candidate lines = selection (or whole document), lines with a space only.
    - Only lines whose normalized text differs are replaced; one atomic edit.
    - Line terminators preserved.
    """
    return Tabifier().tabify_text(text, tab_width, selection)


def tabify_file(
    path: str,
    tab_width: int,
    selection: Optional[Selection] = None,
    dry_run: bool = False,
    encoding: str = "utf-8",
) -> JobResult:
    """Public API (Tabifier)

    Contract:
    - missing file -> FAILED {"error": "file_not_found"}
    - lock file .<name>.tabify.lock beside the target (create-exclusive); held -> SKIPPED
    - nothing to change -> UNCHANGED; dry_run -> WOULD_CHANGE (file untouched)
    - else temp file + os.replace -> CHANGED
    - processing errors -> FAILED {"error": ...}; InvalidConfiguration is raised
    """
    return Tabifier().tabify_file(path, tab_width, selection, dry_run=dry_run, encoding=encoding)


__all__ = ["JobResult", "TabifierError", "TabifyResult", "tabify_file", "tabify_text"]
