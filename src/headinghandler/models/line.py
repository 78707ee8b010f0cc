from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

MAX_HEADING = 6


class ListMarker(StrEnum):
    """Marker family of a line's list prefix."""

    NONE = "none"
    BULLET = "bullet"  # "-", "*" or "+"
    CHECKBOX = "checkbox"  # "- [ ]", "- [x]"
    ORDERED = "ordered"  # "1."


class ParsedLine(BaseModel):
    """Structural fields of one raw line."""

    model_config = ConfigDict(frozen=True)

    indent: int = Field(default=0, ge=0)  # Count of indent units, not width
    prefix: str = ""  # Marker token plus the whitespace after it
    marker: ListMarker = ListMarker.NONE
    heading: int = Field(default=0, ge=0, le=MAX_HEADING)
    text: str = ""
    original_content: str = ""
