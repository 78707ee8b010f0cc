"""In-memory text buffer implementing EditorProtocol.

A simple list-of-lines document with one cursor, any number of selections,
and an undo stack holding one entry per atomic replace. Used by the CLI and
the test suite; editor integrations supply their own implementation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from headinghandler.errors import ErrorCode, HeadingHandlerError
from headinghandler.models.editor import CursorPosition, SelectionRange, TextEdit

if TYPE_CHECKING:
    from collections.abc import Sequence


@dataclass
class TextBuffer:
    _lines: list[str] = field(default_factory=lambda: [""])
    cursor: CursorPosition = field(default_factory=lambda: CursorPosition(row=0))
    selections: list[SelectionRange] = field(default_factory=list)
    version: int = 0
    _undo_stack: list[list[str]] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> TextBuffer:
        lines = text.split("\n")
        return cls(_lines=lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    # ------------------------------------------------------------------
    # Cursor and selection helpers
    # ------------------------------------------------------------------

    def select(self, first_row: int, last_row: int) -> None:
        """Replace all selections with whole rows ``first_row..last_row``."""
        self._check_row(first_row)
        self._check_row(last_row)
        self.selections = [
            SelectionRange(
                anchor_row=first_row,
                anchor_col=0,
                head_row=last_row,
                head_col=len(self._lines[last_row]),
            )
        ]
        self.cursor = CursorPosition(row=last_row, column=len(self._lines[last_row]))

    def add_selection(self, selection: SelectionRange) -> None:
        self._check_row(selection.anchor_row)
        self._check_row(selection.head_row)
        self.selections.append(selection)

    def clear_selections(self) -> None:
        self.selections = []

    # ------------------------------------------------------------------
    # EditorProtocol
    # ------------------------------------------------------------------

    def get_line_text(self, row: int) -> str:
        self._check_row(row)
        return self._lines[row]

    def line_count(self) -> int:
        return len(self._lines)

    def get_cursor_position(self) -> CursorPosition:
        return self.cursor

    def set_cursor_position(self, position: CursorPosition) -> None:
        self._check_row(position.row)
        column = min(position.column, len(self._lines[position.row]))
        self.cursor = CursorPosition(row=position.row, column=column)

    def list_selection_ranges(self) -> list[SelectionRange]:
        if not self.selections:
            # Hosts always report at least the caret as an empty range.
            return [
                SelectionRange(
                    anchor_row=self.cursor.row,
                    anchor_col=self.cursor.column,
                    head_row=self.cursor.row,
                    head_col=self.cursor.column,
                )
            ]
        return list(self.selections)

    def has_active_selection(self) -> bool:
        return any(not selection.is_empty for selection in self.selections)

    def apply_atomic_replace(self, edits: Sequence[TextEdit]) -> None:
        """Apply all edits or none. Edits on one row must not overlap."""
        for edit in edits:
            self._check_edit(edit)

        by_row: dict[int, list[TextEdit]] = {}
        for edit in edits:
            by_row.setdefault(edit.row, []).append(edit)
        for row_edits in by_row.values():
            row_edits.sort(key=lambda e: e.from_col)
            for before, after in zip(row_edits, row_edits[1:]):
                if after.from_col < before.to_col:
                    raise HeadingHandlerError(
                        code=ErrorCode.INVALID_EDIT,
                        message=f"Overlapping edits on row {before.row}",
                        suggestion="Submit at most one edit per column range.",
                    )

        self._undo_stack.append(list(self._lines))
        for row, row_edits in by_row.items():
            line = self._lines[row]
            # Right to left so earlier columns stay valid.
            for edit in reversed(row_edits):
                line = line[: edit.from_col] + edit.new_text + line[edit.to_col :]
            self._lines[row] = line
        self.version += 1

    def undo(self) -> bool:
        """Revert the last atomic replace. Returns False when there is none."""
        if not self._undo_stack:
            return False
        self._lines = self._undo_stack.pop()
        self.version += 1
        row = min(self.cursor.row, len(self._lines) - 1)
        self.cursor = CursorPosition(row=row, column=min(self.cursor.column, len(self._lines[row])))
        return True

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _check_row(self, row: int) -> None:
        if not 0 <= row < len(self._lines):
            raise HeadingHandlerError(
                code=ErrorCode.ROW_OUT_OF_RANGE,
                message=f"Row {row} is outside the document (0..{len(self._lines) - 1})",
                suggestion="Use a 0-based row number within the document.",
                recoverable=True,
            )

    def _check_edit(self, edit: TextEdit) -> None:
        if not 0 <= edit.row < len(self._lines):
            raise HeadingHandlerError(
                code=ErrorCode.INVALID_EDIT,
                message=f"Edit targets row {edit.row} outside the document",
                suggestion="Edits must target existing rows.",
            )
        width = len(self._lines[edit.row])
        if edit.from_col > edit.to_col or edit.to_col > width:
            raise HeadingHandlerError(
                code=ErrorCode.INVALID_EDIT,
                message=(
                    f"Edit columns {edit.from_col}..{edit.to_col} invalid for row "
                    f"{edit.row} of width {width}"
                ),
                suggestion="Edit ranges must lie within the current line.",
            )
