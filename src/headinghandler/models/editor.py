from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CursorPosition(BaseModel):
    model_config = ConfigDict(frozen=True)

    row: int = Field(ge=0)
    column: int = Field(default=0, ge=0)


class SelectionRange(BaseModel):
    """One selection as reported by the host. Anchor may sit below head."""

    model_config = ConfigDict(frozen=True)

    anchor_row: int = Field(ge=0)
    anchor_col: int = Field(default=0, ge=0)
    head_row: int = Field(ge=0)
    head_col: int = Field(default=0, ge=0)

    @property
    def first_row(self) -> int:
        return min(self.anchor_row, self.head_row)

    @property
    def last_row(self) -> int:
        return max(self.anchor_row, self.head_row)

    @property
    def is_empty(self) -> bool:
        return self.anchor_row == self.head_row and self.anchor_col == self.head_col


class TextEdit(BaseModel):
    """Replace columns ``[from_col, to_col)`` of ``row`` with ``new_text``."""

    model_config = ConfigDict(frozen=True)

    row: int = Field(ge=0)
    from_col: int = Field(ge=0)
    to_col: int = Field(ge=0)
    new_text: str
