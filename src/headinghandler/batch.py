"""Per-command batch: line cache, update staging and the atomic commit.

One Batch spans exactly one command invocation. Within it:
- ``at_row`` returns the same Line object for repeated lookups of a row, so
  an edit staged on a line is visible to every later reader of that row,
  including another line's parent resolution.
- ``stage_update`` queues new content and reparses it into the line at once,
  without touching the host document.
- ``commit`` flushes every queued edit in one host transaction and clears
  the batch.

State is never shared between batches. Entering the batch as a context
manager clears leftovers on the way in and discards everything on the way
out, committed or not.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from headinghandler.config import Settings
from headinghandler.hierarchy import resolve_parent
from headinghandler.line import Line
from headinghandler.models.editor import CursorPosition, TextEdit

if TYPE_CHECKING:
    from collections.abc import Callable

    from headinghandler.protocols import EditorProtocol

log = structlog.get_logger()


class Batch:
    """Row-keyed line cache and update queue for one command."""

    def __init__(self, editor: EditorProtocol, settings: Settings | None = None) -> None:
        self.editor = editor
        self.settings = settings or Settings()
        self._lines: dict[int, Line] = {}
        self._updates: dict[Line, str] = {}

    def __enter__(self) -> Batch:
        self.begin()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.clear()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def begin(self) -> None:
        """Start from an empty batch, dropping anything a failed run left behind."""
        if self._lines or self._updates:
            log.warning(
                "batch_stale_state_cleared",
                cached_lines=len(self._lines),
                pending_updates=len(self._updates),
            )
        self.clear()

    def clear(self) -> None:
        self._lines.clear()
        self._updates.clear()

    @property
    def pending(self) -> dict[int, str]:
        """Staged content keyed by row, in row order."""
        return {line.row: content for line, content in self._sorted_updates()}

    # ------------------------------------------------------------------
    # Line lookup
    # ------------------------------------------------------------------

    def at_row(self, row: int) -> Line:
        line = self._lines.get(row)
        if line is None:
            line = Line(
                row,
                self.editor.get_line_text(row),
                batch=self,
                fmt=self.settings.format,
            )
            self._lines[row] = line
        return line

    def at_cursor(self) -> Line:
        return self.at_row(self.editor.get_cursor_position().row)

    def iterate_over_selected_lines(self, callback: Callable[[Line], None]) -> None:
        """Call ``callback`` for every selected row, top to bottom.

        Does nothing when nothing is selected. Rows covered by several
        selections are visited once.
        """
        if not self.editor.has_active_selection():
            return

        ranges = sorted(self.editor.list_selection_ranges(), key=lambda r: r.first_row)
        visited: set[int] = set()
        for selection in ranges:
            for row in range(selection.first_row, selection.last_row + 1):
                if row in visited:
                    continue
                visited.add(row)
                callback(self.at_row(row))

    line_at_row = at_row
    line_at_cursor = at_cursor
    for_each_selected_line = iterate_over_selected_lines

    def resolve_parent(self, line: Line) -> Line:
        return resolve_parent(
            line,
            self.at_row,
            prefix_mismatch=self.settings.hierarchy.prefix_mismatch,
        )

    # ------------------------------------------------------------------
    # Staging and commit
    # ------------------------------------------------------------------

    def stage_update(self, line: Line, content: str) -> None:
        self._updates[line] = content
        line.apply_staged(content)

    def apply_updates(self) -> None:
        """Flush staged edits to the host as a single transaction.

        Host failures propagate; the queue is then left as it was.
        """
        if not self._updates:
            self._lines.clear()
            return

        edits = [
            TextEdit(
                row=line.row,
                from_col=0,
                to_col=len(line.original_content),
                new_text=content,
            )
            for line, content in self._sorted_updates()
        ]
        self.editor.apply_atomic_replace(edits)

        if len(edits) == 1 and not self.editor.has_active_selection():
            edit = edits[0]
            self.editor.set_cursor_position(
                CursorPosition(row=edit.row, column=len(edit.new_text))
            )

        log.info("batch_committed", rows=[edit.row for edit in edits])
        self.clear()

    def commit(self) -> None:
        self.apply_updates()

    def _sorted_updates(self) -> list[tuple[Line, str]]:
        return sorted(self._updates.items(), key=lambda item: item[0].row)
