"""Heading level transitions for a single line.

Pure business logic on top of the parser and the line's resolved parent.
Every operation renders the new content and stages it on the line; nothing
here talks to the host editor. Lines whose marker cannot carry a heading
(checkbox and ordered items) are left untouched, and requested levels are
clamped to ``[0, MAX_HEADING]`` rather than rejected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from headinghandler.models.line import MAX_HEADING, ListMarker
from headinghandler.parser import render_line

if TYPE_CHECKING:
    from headinghandler.line import Line

log = structlog.get_logger()

_HEADING_MARKERS = frozenset({ListMarker.NONE, ListMarker.BULLET})


def clamp_heading(level: int) -> int:
    return max(0, min(MAX_HEADING, level))


def accepts_heading(line: Line) -> bool:
    """Only plain bullets and unmarked lines may carry a heading."""
    return line.marker in _HEADING_MARKERS


def _stage(line: Line, content: str) -> None:
    if content == line.content:
        return
    log.debug("heading_staged", row=line.row, content=content)
    line.stage(content)


def _guard(line: Line, operation: str) -> bool:
    if accepts_heading(line):
        return True
    log.debug("heading_ineligible", row=line.row, marker=line.marker, operation=operation)
    return False


def set_heading(line: Line, level: int) -> None:
    if not _guard(line, "set_heading"):
        return
    level = clamp_heading(level)
    _stage(line, render_line(line.indent, line.prefix, level, line.text, line.format))


def increase_heading(line: Line) -> None:
    if not _guard(line, "increase_heading"):
        return
    if line.heading >= MAX_HEADING:
        return
    set_heading(line, line.heading + 1)


def decrease_heading(line: Line) -> None:
    if not _guard(line, "decrease_heading"):
        return
    if line.heading <= 0:
        return
    if line.heading == 1:
        remove_heading(line)
        return
    set_heading(line, line.heading - 1)


def remove_heading(line: Line) -> None:
    set_heading(line, 0)


def convert_indent_to_heading(line: Line) -> None:
    """Turn indentation depth into heading depth, dropping indent and prefix."""
    if not _guard(line, "convert_indent_to_heading"):
        return
    level = clamp_heading(line.indent + 1)
    _stage(line, render_line(0, "", level, line.text, line.format))


def set_heading_to_indent(line: Line) -> None:
    """Like convert_indent_to_heading, but the indent and list prefix stay."""
    set_heading(line, line.indent + 1)


def minimum_heading(line: Line) -> int:
    """Shallowest level the line may take: one under its parent, and no
    shallower than its own indentation depth.

    May exceed MAX_HEADING when the parent already sits at the deepest level.
    """
    return max(line.indent + 1, line.parent.heading + 1)


def promote_heading(line: Line) -> None:
    """Go at least one level deeper, and never stay above the floor."""
    if not _guard(line, "promote_heading"):
        return
    set_heading(line, max(line.heading + 1, minimum_heading(line)))


def demote_heading(line: Line) -> None:
    """Go one level shallower, or leave heading mode at the floor."""
    if not _guard(line, "demote_heading"):
        return
    floor = minimum_heading(line)
    desired = line.heading - 1
    if desired >= floor:
        set_heading(line, desired)
    elif line.heading == floor and floor < MAX_HEADING:
        remove_heading(line)
    elif 0 < line.heading < floor:
        # Already beneath the floor (e.g. the parent moved): exit heading mode.
        remove_heading(line)
