from __future__ import annotations

from .model import TextLine, TextSnapshot
from .textbuffer import TextBuffer, TextEdit, TextEditError


def snapshot(text: str) -> TextSnapshot:
    """Public API (TextBuffer)

    Contract:
    - Split on \\r\\n | \\n | \\r; line text never contains the terminator.
    - At least one line; a trailing terminator yields a final empty line.
    - Joining text + terminator of all lines gives back the input exactly.
    """
    return TextBuffer().snapshot(text)


def create_edit(snap: TextSnapshot) -> TextEdit:
    """Public API (TextBuffer)

    Contract:
    - replace(line_index, new_text) -> False on bad index, double edit or line break in new_text.
    - apply() -> new document text, terminators preserved; all replacements or none.
    - apply()/replace() after apply() or cancel() -> TextEditError.
    """
    return TextEdit(snap)


__all__ = ["TextEdit", "TextEditError", "TextLine", "TextSnapshot", "create_edit", "snapshot"]
