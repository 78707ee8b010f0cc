from __future__ import annotations

from headinghandler.models.editor import CursorPosition, SelectionRange, TextEdit
from headinghandler.models.line import MAX_HEADING, ListMarker, ParsedLine

__all__ = [
    # line
    "MAX_HEADING",
    "ListMarker",
    "ParsedLine",
    # editor
    "CursorPosition",
    "SelectionRange",
    "TextEdit",
]
