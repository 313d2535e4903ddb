"""Handlers for the focustask subcommands.

Each handler takes the app and the parsed arguments and returns an exit
code. Board mutations that turn out to be no-ops (blank title, unknown
id, last column) are reported as information, not as failures.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable
from pathlib import Path

from ..app import FocusTaskApp
from ..exceptions import ImportRejectedError
from ..models import Board
from . import output

Handler = Callable[[FocusTaskApp, argparse.Namespace], int]


def _report(before: Board, after: Board, message: str) -> int:
    if after is before:
        output.info("Nothing changed")
    else:
        output.success(message)
    return 0


def cmd_show(app: FocusTaskApp, args: argparse.Namespace) -> int:
    output.show_board(app.board_service.board)
    return 0


def cmd_add_section(app: FocusTaskApp, args: argparse.Namespace) -> int:
    before = app.board_service.board
    after = app.board_service.add_section()
    section = after.sections[-1]
    return _report(before, after, f"Added section {section.title} [{section.id}]")


def cmd_delete_section(app: FocusTaskApp, args: argparse.Namespace) -> int:
    before = app.board_service.board
    after = app.board_service.delete_section(args.section)
    return _report(before, after, f"Deleted section {args.section}")


def cmd_rename_section(app: FocusTaskApp, args: argparse.Namespace) -> int:
    before = app.board_service.board
    after = app.board_service.rename_section(args.section, args.title)
    return _report(before, after, f"Renamed section {args.section}")


def cmd_clear_completed(app: FocusTaskApp, args: argparse.Namespace) -> int:
    before = app.board_service.board
    after = app.board_service.clear_completed_tasks(args.section)
    removed = before.task_count() - after.task_count()
    return _report(before, after, f"Cleared {removed} completed task(s)")


def cmd_add_column(app: FocusTaskApp, args: argparse.Namespace) -> int:
    before = app.board_service.board
    after = app.board_service.add_column(args.section)
    return _report(before, after, f"Added column to section {args.section}")


def cmd_remove_column(app: FocusTaskApp, args: argparse.Namespace) -> int:
    before = app.board_service.board
    after = app.board_service.remove_column(args.section)
    return _report(before, after, f"Removed last column of section {args.section}")


def cmd_rename_column(app: FocusTaskApp, args: argparse.Namespace) -> int:
    before = app.board_service.board
    after = app.board_service.rename_column(args.section, args.column, args.title)
    return _report(before, after, f"Renamed column {args.column}")


def cmd_add_task(app: FocusTaskApp, args: argparse.Namespace) -> int:
    before = app.board_service.board
    after = app.board_service.add_task(args.section, args.column, args.title)
    return _report(before, after, f"Added task {args.title!r}")


def cmd_delete_task(app: FocusTaskApp, args: argparse.Namespace) -> int:
    before = app.board_service.board
    after = app.board_service.delete_task(args.section, args.column, args.task)
    return _report(before, after, f"Deleted task {args.task}")


def cmd_toggle_task(app: FocusTaskApp, args: argparse.Namespace) -> int:
    before = app.board_service.board
    after = app.board_service.toggle_task_completion(args.section, args.column, args.task)
    return _report(before, after, f"Toggled task {args.task}")


def cmd_rename_task(app: FocusTaskApp, args: argparse.Namespace) -> int:
    before = app.board_service.board
    after = app.board_service.rename_task(args.section, args.column, args.task, args.title)
    return _report(before, after, f"Renamed task {args.task}")


def cmd_move_task(app: FocusTaskApp, args: argparse.Namespace) -> int:
    service = app.board_service
    # Read the task from the current board so the moved value is up to date.
    task = service.find_task(args.section, args.column, args.task)
    if task is None:
        output.error(f"Task {args.task} not found in {args.section}/{args.column}")
        return 1
    if service.find_column(args.to_section, args.to_column) is None:
        output.error(f"Column {args.to_section}/{args.to_column} not found")
        return 1

    before = service.board
    after = service.move_task(task, args.section, args.column, args.to_section, args.to_column)
    return _report(before, after, f"Moved task {task.title!r}")


def cmd_export(app: FocusTaskApp, args: argparse.Namespace) -> int:
    try:
        path = app.transfer_service.export_board(app.board_service.board)
    except OSError as e:
        output.error(f"Export failed: {e}")
        return 1
    output.success(f"Exported board to {path}")
    return 0


def cmd_import(app: FocusTaskApp, args: argparse.Namespace) -> int:
    transfer = app.transfer_service
    try:
        board = transfer.import_board(transfer.read_import_file(Path(args.file)))
    except ImportRejectedError as e:
        output.error(str(e))
        return 1
    app.board_service.replace_board(board)
    output.success(f"Imported {len(board.sections)} section(s) from {args.file}")
    return 0


def cmd_copy(app: FocusTaskApp, args: argparse.Namespace) -> int:
    if app.board_service.find_section(args.section) is None:
        output.error(f"Section {args.section} not found")
        return 1
    markdown = app.markdown_service.copy_section_as_markdown(
        app.board_service.board, args.section
    )
    if markdown is not None:
        output.success(f"Copied section {args.section} to clipboard")
    # Clipboard failures are logged only.
    return 0


COMMANDS: dict[str, Handler] = {
    "show": cmd_show,
    "add-section": cmd_add_section,
    "delete-section": cmd_delete_section,
    "rename-section": cmd_rename_section,
    "clear-completed": cmd_clear_completed,
    "add-column": cmd_add_column,
    "remove-column": cmd_remove_column,
    "rename-column": cmd_rename_column,
    "add-task": cmd_add_task,
    "delete-task": cmd_delete_task,
    "toggle-task": cmd_toggle_task,
    "rename-task": cmd_rename_task,
    "move-task": cmd_move_task,
    "export": cmd_export,
    "import": cmd_import,
    "copy": cmd_copy,
}


def run_command(app: FocusTaskApp, args: argparse.Namespace) -> int:
    """Dispatch to the handler for args.command."""
    return COMMANDS[args.command](app, args)
