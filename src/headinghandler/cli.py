"""Command-line entrypoint.

Responsibilities (and nothing more):
- Configure structlog
- Load Settings
- Read the document from stdin into a TextBuffer, place cursor and selections
- Run one command and write the resulting document to stdout
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

import structlog

from headinghandler import __version__
from headinghandler.buffer import TextBuffer
from headinghandler.commands import COMMANDS, run_command
from headinghandler.config import Settings
from headinghandler.errors import ErrorCode, HeadingHandlerError
from headinghandler.models.editor import CursorPosition, SelectionRange

log = structlog.get_logger()


# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------


def _setup_logging(settings: Settings) -> None:
    """Configure structlog for a stdin/stdout filter.

    Everything goes to stderr. The text format is a plain, uncoloured line
    per event without a timestamp, meant for a terminal or editor output
    pane; the json format keeps an ISO timestamp for machine consumers.
    """
    log_level = logging.getLevelNamesMapping()[settings.logging.level]

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
    ]
    if settings.logging.format == "json":
        processors += [
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        # stdout carries the edited document
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _invalid_input(message: str) -> HeadingHandlerError:
    return HeadingHandlerError(
        code=ErrorCode.INVALID_INPUT,
        message=message,
        suggestion="Rows and columns are 0-based integers: --cursor ROW[:COL], --select FIRST:LAST.",
        recoverable=False,
    )


def parse_position(value: str) -> CursorPosition:
    """Parse ``ROW`` or ``ROW:COL``."""
    row, _, column = value.partition(":")
    try:
        return CursorPosition(row=int(row), column=int(column or 0))
    except ValueError as exc:
        raise _invalid_input(f"Invalid cursor position: {value!r}") from exc


def parse_selection(value: str) -> tuple[int, int]:
    """Parse ``FIRST:LAST`` (inclusive rows, either order)."""
    first, sep, last = value.partition(":")
    try:
        first_row = int(first)
        last_row = int(last) if sep else first_row
    except ValueError as exc:
        raise _invalid_input(f"Invalid selection: {value!r}") from exc
    if first_row < 0 or last_row < 0:
        raise _invalid_input(f"Invalid selection: {value!r}")
    return first_row, last_row


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="headinghandler",
        description="Change heading levels in a markdown outline read from stdin.",
    )
    parser.add_argument("command", nargs="?", help="Command id, see --list")
    parser.add_argument(
        "--cursor",
        default="0",
        help="Cursor position as ROW or ROW:COL (0-based, default 0); --select moves it",
    )
    parser.add_argument(
        "--select",
        action="append",
        default=[],
        metavar="FIRST:LAST",
        help="Select whole rows FIRST..LAST; may be repeated",
    )
    parser.add_argument("--list", action="store_true", help="List available commands and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _place_cursor(buffer: TextBuffer, cursor: str, selections: list[str]) -> None:
    buffer.set_cursor_position(parse_position(cursor))
    for value in selections:
        first_row, last_row = parse_selection(value)
        if first_row > buffer.line_count() - 1 or last_row > buffer.line_count() - 1:
            raise _invalid_input(f"Selection {value!r} is outside the document")
        head_col = len(buffer.get_line_text(last_row))
        buffer.add_selection(
            SelectionRange(
                anchor_row=first_row,
                anchor_col=0,
                head_row=last_row,
                head_col=head_col,
            )
        )
        # The caret sits at the selection head; a range over an empty row is
        # just a caret, so commands fall back to this row rather than --cursor.
        buffer.set_cursor_position(CursorPosition(row=last_row, column=head_col))


# ---------------------------------------------------------------------------
# Entrypoint
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = Settings()
    _setup_logging(settings)

    if args.list:
        for command in COMMANDS.values():
            print(f"{command.id}\t{command.name}")
        return 0

    try:
        if not args.command:
            raise HeadingHandlerError(
                code=ErrorCode.INVALID_INPUT,
                message="No command given",
                suggestion="Pass a command id; run with --list to see them.",
            )
        buffer = TextBuffer.from_text(sys.stdin.read())
        _place_cursor(buffer, args.cursor, args.select)
        run_command(args.command, buffer, settings)
    except HeadingHandlerError as exc:
        log.warning("command_error", code=exc.code, message=exc.message)
        print(json.dumps(exc.to_dict()), file=sys.stderr)
        return 2

    sys.stdout.write(buffer.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
