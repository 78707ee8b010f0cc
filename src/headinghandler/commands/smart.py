"""Smart promote/demote commands.

With a bare cursor these look at the line's parent to pick a level; with a
selection they only touch lines that already carry a heading, each on its
own, top to bottom.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from headinghandler.batch import Batch
    from headinghandler.line import Line


def smart_promote_heading(batch: Batch) -> None:
    if not batch.editor.has_active_selection():
        line = batch.at_cursor()
        parent = line.parent
        if not line.heading and not parent.is_root:
            # Nest under the parent by as many levels as the indent adds.
            indent_offset = line.indent - parent.indent
            line.set_heading(max(1, parent.heading + indent_offset))
        else:
            line.increase_heading()
        return

    def _promote(line: Line) -> None:
        if line.heading:
            line.increase_heading()

    batch.iterate_over_selected_lines(_promote)


def smart_demote_heading(batch: Batch) -> None:
    if not batch.editor.has_active_selection():
        line = batch.at_cursor()
        if not line.heading:
            return
        # A line level with its parent stops being a heading at all.
        if line.heading - 1 < line.parent.heading:
            line.remove_heading()
        else:
            line.set_heading(line.heading - 1)
        return

    def _demote(line: Line) -> None:
        if not line.heading:
            return
        # Never shallower than the parent's level shifted by the indent step.
        parent = line.parent
        indent_offset = line.indent - parent.indent
        line.set_heading(max(line.heading - 1, parent.heading + indent_offset))

    batch.iterate_over_selected_lines(_demote)
