"""Protocol interface for the host text surface.

The batch and the commands reference this protocol, not a concrete editor.
This allows:
- Tests and the CLI to use the in-memory TextBuffer
- Editor integrations to adapt their own buffer without changing core code
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from headinghandler.models.editor import CursorPosition, SelectionRange, TextEdit


class EditorProtocol(Protocol):
    """Interface for the editor that owns the document text."""

    def get_line_text(self, row: int) -> str: ...

    def line_count(self) -> int: ...

    def get_cursor_position(self) -> CursorPosition: ...

    def set_cursor_position(self, position: CursorPosition) -> None: ...

    def list_selection_ranges(self) -> list[SelectionRange]: ...

    def has_active_selection(self) -> bool: ...

    def apply_atomic_replace(self, edits: Sequence[TextEdit]) -> None:
        """Apply every edit as one undo step. Failures propagate to the caller."""
        ...
