"""Parent heading resolution.

Walks upward from a line to the nearest heading that structurally dominates
it. Candidate rows are fetched through the caller's lookup (normally
``Batch.at_row``) so that edits staged earlier in the same batch are seen.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Literal

from headinghandler.line import ROOT, Line

PrefixMismatchPolicy = Literal["stop", "skip"]


def resolve_parent(
    line: Line,
    lookup: Callable[[int], Line],
    *,
    prefix_mismatch: PrefixMismatchPolicy = "stop",
) -> Line:
    """Return the nearest qualifying ancestor of ``line``, or ROOT.

    Scan order is ``line.row - 1`` down to ``0``; the first match wins:
      1. Rows with empty text are skipped.
      2. If ``line`` has a list prefix and the candidate belongs to another
         marker family, ``"stop"`` ends the scan and ``"skip"`` ignores it.
      3. Rows without a heading are skipped.
      4. A candidate qualifies when it is indented no deeper than ``line`` and,
         if ``line`` has a heading, its heading is no deeper either.
    """
    for row in range(line.row - 1, -1, -1):
        candidate = lookup(row)
        if not candidate.text:
            continue

        if line.prefix and candidate.marker != line.marker:
            if prefix_mismatch == "stop":
                return ROOT
            continue

        if candidate.heading == 0:
            continue

        if candidate.indent <= line.indent and (
            line.heading == 0 or candidate.heading <= line.heading
        ):
            return candidate

    return ROOT
