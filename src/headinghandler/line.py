"""Line entity and the ROOT sentinel.

A Line is the live, batch-scoped view of one document row. Its structural
fields always reflect the *pending* content: when an edit is staged the new
content is reparsed in place, so later reads within the same batch (including
another line's parent lookup) see the edit before it is committed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from headinghandler import headings
from headinghandler.config import FormatSettings
from headinghandler.models.line import ListMarker, ParsedLine
from headinghandler.parser import parse_line

if TYPE_CHECKING:
    from headinghandler.batch import Batch


class Line:
    """One row of the document, owned by a Batch."""

    def __init__(
        self,
        row: int,
        content: str,
        *,
        batch: Batch | None,
        fmt: FormatSettings | None = None,
    ) -> None:
        self.row = row
        self.original_content = content
        self.staged_content: str | None = None
        self.format = fmt or FormatSettings()
        self.parsed: ParsedLine = parse_line(content, self.format)
        self._batch = batch
        self._parent: Line | None = None

    def __repr__(self) -> str:
        return f"Line(row={self.row}, content={self.content!r})"

    # ------------------------------------------------------------------
    # Structural fields (pending values)
    # ------------------------------------------------------------------

    @property
    def indent(self) -> int:
        return self.parsed.indent

    @property
    def prefix(self) -> str:
        return self.parsed.prefix

    @property
    def marker(self) -> ListMarker:
        return self.parsed.marker

    @property
    def heading(self) -> int:
        return self.parsed.heading

    @property
    def text(self) -> str:
        return self.parsed.text

    @property
    def content(self) -> str:
        """Staged content if any, otherwise the committed host text."""
        if self.staged_content is not None:
            return self.staged_content
        return self.original_content

    @property
    def is_root(self) -> bool:
        return False

    @property
    def parent(self) -> Line:
        """Nearest structural ancestor. Resolved once, then cached for the batch."""
        if self._parent is None:
            if self._batch is None:
                self._parent = ROOT
            else:
                self._parent = self._batch.resolve_parent(self)
        return self._parent

    # ------------------------------------------------------------------
    # Staging
    # ------------------------------------------------------------------

    def stage(self, content: str) -> None:
        """Queue ``content`` for this row through the owning batch."""
        if self._batch is None:
            self.apply_staged(content)
            return
        self._batch.stage_update(self, content)

    def apply_staged(self, content: str) -> None:
        self.staged_content = content
        self.parsed = parse_line(content, self.format)

    # ------------------------------------------------------------------
    # Heading operations
    # ------------------------------------------------------------------

    def set_heading(self, level: int) -> None:
        headings.set_heading(self, level)

    def increase_heading(self) -> None:
        headings.increase_heading(self)

    def decrease_heading(self) -> None:
        headings.decrease_heading(self)

    def remove_heading(self) -> None:
        headings.remove_heading(self)

    def convert_indent_to_heading(self) -> None:
        headings.convert_indent_to_heading(self)

    def set_heading_to_indent(self) -> None:
        headings.set_heading_to_indent(self)

    def minimum_heading(self) -> int:
        return headings.minimum_heading(self)

    def promote_heading(self) -> None:
        headings.promote_heading(self)

    def demote_heading(self) -> None:
        headings.demote_heading(self)


class _RootLine(Line):
    """Universal ancestor used when no qualifying heading exists above a line.

    Heading 0 and indent 0, so ``parent.heading + 1`` and ``parent.indent``
    are always defined. It is its own parent and never stages anything.
    """

    def __init__(self) -> None:
        super().__init__(-1, "", batch=None)

    def __repr__(self) -> str:
        return "ROOT"

    @property
    def is_root(self) -> bool:
        return True

    @property
    def parent(self) -> Line:
        return self

    def stage(self, content: str) -> None:
        return None


ROOT: Line = _RootLine()
