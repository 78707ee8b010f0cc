"""Shared test fixtures for the headinghandler test suite."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import pytest

from headinghandler.batch import Batch
from headinghandler.buffer import TextBuffer
from headinghandler.config import FormatSettings, HierarchySettings, LoggingSettings, Settings

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from headinghandler.models.editor import TextEdit


@dataclass
class RecordingBuffer(TextBuffer):
    """TextBuffer that remembers every atomic replace it receives."""

    transactions: list[list[TextEdit]] = field(default_factory=list)

    def apply_atomic_replace(self, edits: Sequence[TextEdit]) -> None:
        self.transactions.append(list(edits))
        super().apply_atomic_replace(edits)


@pytest.fixture()
def settings() -> Settings:
    """Default settings, independent of any local config file or env vars."""
    return Settings(
        format=FormatSettings(),
        hierarchy=HierarchySettings(),
        logging=LoggingSettings(),
    )


@pytest.fixture()
def make_buffer() -> Callable[..., RecordingBuffer]:
    """Build a RecordingBuffer from lines, optionally placing the cursor."""

    def _make(*lines: str, cursor_row: int = 0) -> RecordingBuffer:
        buffer = RecordingBuffer.from_text("\n".join(lines))
        buffer.cursor = buffer.cursor.model_copy(update={"row": cursor_row})
        return buffer

    return _make


@pytest.fixture()
def make_batch(
    make_buffer: Callable[..., RecordingBuffer], settings: Settings
) -> Callable[..., Batch]:
    """Open a Batch over a fresh buffer holding ``lines``."""

    def _make(*lines: str, cursor_row: int = 0) -> Batch:
        batch = Batch(make_buffer(*lines, cursor_row=cursor_row), settings)
        batch.begin()
        return batch

    return _make
