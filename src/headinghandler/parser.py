"""Line parser and renderer.

Single-pass decomposition of a raw outline line into its structural fields,
always in the same order: indentation, list marker, heading marker, text.
``render_line`` is the inverse. Neither function raises: a structural
element that is absent (or malformed) simply yields its zero value.
"""

from __future__ import annotations

import re
from functools import lru_cache

from headinghandler.config import FormatSettings
from headinghandler.models.line import MAX_HEADING, ListMarker, ParsedLine

_DEFAULT_FORMAT = FormatSettings()

_WHITESPACE_RE = re.compile(r"\s*")

# Markers only count when followed by whitespace or end of line.
# Checkbox is tried before bullet so "- [ ]" is not read as a plain "-".
_MARKER_PATTERNS: tuple[tuple[ListMarker, re.Pattern[str]], ...] = (
    (ListMarker.CHECKBOX, re.compile(r"-\s+\[[ xX]\](?=\s|$)")),
    (ListMarker.BULLET, re.compile(r"[-*+](?=\s|$)")),
    (ListMarker.ORDERED, re.compile(r"\d+\.(?=\s|$)")),
)


@lru_cache(maxsize=8)
def _heading_re(heading_char: str) -> re.Pattern[str]:
    return re.compile(rf"({re.escape(heading_char)}+)\s*")


def parse_line(raw: str, fmt: FormatSettings | None = None) -> ParsedLine:
    """Split ``raw`` into indent, list prefix, heading level and text."""
    fmt = fmt or _DEFAULT_FORMAT

    # Stage 1: indentation. Only whole indent units are counted; any other
    # leading whitespace is not kept and is dropped when the line is re-rendered.
    ws_end = _WHITESPACE_RE.match(raw).end()
    indent = raw[:ws_end].count(fmt.indent_unit)
    pos = ws_end

    # Stage 2: list marker, keeping the whitespace that follows it
    prefix = ""
    marker = ListMarker.NONE
    for kind, pattern in _MARKER_PATTERNS:
        match = pattern.match(raw, pos)
        if match is None:
            continue
        prefix_end = _WHITESPACE_RE.match(raw, match.end()).end()
        prefix = raw[pos:prefix_end]
        marker = kind
        pos = prefix_end
        break

    # Stage 3: heading marker (runs longer than MAX_HEADING are plain text)
    heading = 0
    match = _heading_re(fmt.heading_char).match(raw, pos)
    if match is not None and len(match.group(1)) <= MAX_HEADING:
        heading = len(match.group(1))
        pos = match.end()

    # Stage 4: text
    return ParsedLine(
        indent=indent,
        prefix=prefix,
        marker=marker,
        heading=heading,
        text=raw[pos:],
        original_content=raw,
    )


def render_line(
    indent: int,
    prefix: str,
    heading: int,
    text: str,
    fmt: FormatSettings | None = None,
) -> str:
    """Rebuild a raw line from structural fields.

    With ``heading == 0`` no heading marker and no separating space is
    emitted, whatever the prefix.
    """
    fmt = fmt or _DEFAULT_FORMAT

    parts = [fmt.indent_unit * indent, prefix]
    if heading > 0:
        # A marker at end of line ("-") has no trailing space of its own.
        if prefix and not prefix[-1].isspace():
            parts.append(" ")
        parts.append(fmt.heading_char * heading)
        parts.append(" ")
    parts.append(text)
    return "".join(parts)
