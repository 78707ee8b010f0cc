"""Command registry.

Each command receives an open Batch and stages edits on it; ``run_command``
owns the batch lifecycle and commits exactly once. Host keybinding and menu
registration live in the editor integration, not here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from headinghandler.batch import Batch
from headinghandler.commands import current_line, debug, smart
from headinghandler.errors import ErrorCode, HeadingHandlerError

if TYPE_CHECKING:
    from collections.abc import Callable

    from headinghandler.config import Settings
    from headinghandler.protocols import EditorProtocol


@dataclass(frozen=True)
class Command:
    id: str
    name: str
    callback: Callable[[Batch], None]
    repeatable: bool = False


COMMANDS: dict[str, Command] = {
    command.id: command
    for command in (
        Command("smart-promote-heading", "Smart Promote Heading", smart.smart_promote_heading, True),
        Command("smart-demote-heading", "Smart Demote Heading", smart.smart_demote_heading, True),
        Command(
            "increase-heading-at-current-line",
            "Increase Heading at Current Line",
            current_line.increase_heading,
        ),
        Command(
            "decrease-heading-at-current-line",
            "Decrease Heading at Current Line",
            current_line.decrease_heading,
        ),
        Command(
            "convert-indent-to-heading",
            "Convert indentation to heading level",
            current_line.convert_indent_to_heading,
        ),
        Command(
            "set-heading-indent",
            "Set heading level to indentation level",
            current_line.set_heading_to_indent,
        ),
        Command("remove-heading", "Remove heading", current_line.remove_heading),
        Command("promote-heading", "Promote Heading", current_line.promote_heading, True),
        Command("demote-heading", "Demote Heading", current_line.demote_heading, True),
        Command("debug-lines", "Log parsed lines", debug.debug_lines),
    )
}


def run_command(
    command_id: str,
    editor: EditorProtocol,
    settings: Settings | None = None,
) -> None:
    """Run one command in a fresh batch and commit its edits atomically.

    Host failures during commit propagate to the caller.
    """
    command = COMMANDS.get(command_id)
    if command is None:
        raise HeadingHandlerError(
            code=ErrorCode.UNKNOWN_COMMAND,
            message=f"Unknown command: {command_id!r}",
            suggestion=f"Use one of: {', '.join(sorted(COMMANDS))}.",
            recoverable=False,
        )

    log = structlog.get_logger().bind(command=command_id)
    log.info("command_called")
    with Batch(editor, settings) as batch:
        command.callback(batch)
        batch.commit()
    log.info("command_complete")


__all__ = ["COMMANDS", "Command", "run_command"]
