"""Diagnostic command: log how each line parses. Stages nothing."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from headinghandler.batch import Batch
    from headinghandler.line import Line


def debug_lines(batch: Batch) -> None:
    log = structlog.get_logger().bind(command="debug-lines")

    def _describe(line: Line) -> None:
        log.info(
            "line_parsed",
            row=line.row,
            indent=line.indent,
            prefix=line.prefix,
            marker=str(line.marker),
            heading=line.heading,
            text=line.text,
            parent_row=line.parent.row,
            minimum_heading=line.minimum_heading(),
        )

    if batch.editor.has_active_selection():
        batch.iterate_over_selected_lines(_describe)
    else:
        _describe(batch.at_cursor())
