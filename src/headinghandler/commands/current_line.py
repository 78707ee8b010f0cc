"""Commands acting on the line under the cursor."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from headinghandler.batch import Batch
    from headinghandler.line import Line


def increase_heading(batch: Batch) -> None:
    batch.at_cursor().increase_heading()


def decrease_heading(batch: Batch) -> None:
    batch.at_cursor().decrease_heading()


def convert_indent_to_heading(batch: Batch) -> None:
    batch.at_cursor().convert_indent_to_heading()


def set_heading_to_indent(batch: Batch) -> None:
    batch.at_cursor().set_heading_to_indent()


def remove_heading(batch: Batch) -> None:
    batch.at_cursor().remove_heading()


def promote_heading(batch: Batch) -> None:
    """Floor-aware promote on the cursor line, or on every selected heading."""
    if not batch.editor.has_active_selection():
        batch.at_cursor().promote_heading()
        return

    def _promote(line: Line) -> None:
        if line.heading:
            line.promote_heading()

    batch.iterate_over_selected_lines(_promote)


def demote_heading(batch: Batch) -> None:
    if not batch.editor.has_active_selection():
        batch.at_cursor().demote_heading()
        return

    def _demote(line: Line) -> None:
        if line.heading:
            line.demote_heading()

    batch.iterate_over_selected_lines(_demote)
