"""CLI entry point for focustask."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per board operation."""
    parser = argparse.ArgumentParser(
        prog="focustask",
        description="Sectioned task board with local persistence",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory holding focustask.yml and the saved board",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    sub.add_parser("show", help="Print the board")

    sub.add_parser("add-section", help="Append a new section")
    p = sub.add_parser("delete-section", help="Delete a section and everything in it")
    p.add_argument("section")
    p = sub.add_parser("rename-section", help="Rename a section")
    p.add_argument("section")
    p.add_argument("title")
    p = sub.add_parser("clear-completed", help="Remove completed tasks from a section")
    p.add_argument("section")

    p = sub.add_parser("add-column", help="Append a column to a section")
    p.add_argument("section")
    p = sub.add_parser("remove-column", help="Remove the last column of a section")
    p.add_argument("section")
    p = sub.add_parser("rename-column", help="Rename a column")
    p.add_argument("section")
    p.add_argument("column")
    p.add_argument("title")

    p = sub.add_parser("add-task", help="Append a task to a column")
    p.add_argument("section")
    p.add_argument("column")
    p.add_argument("title")
    for name, help_text in (
        ("delete-task", "Delete a task"),
        ("toggle-task", "Flip a task's completed flag"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("section")
        p.add_argument("column")
        p.add_argument("task")
    p = sub.add_parser("rename-task", help="Rename a task")
    p.add_argument("section")
    p.add_argument("column")
    p.add_argument("task")
    p.add_argument("title")
    p = sub.add_parser("move-task", help="Move a task to the end of another column")
    p.add_argument("section")
    p.add_argument("column")
    p.add_argument("task")
    p.add_argument("to_section")
    p.add_argument("to_column")

    sub.add_parser("export", help="Write the board to a dated JSON export file")
    p = sub.add_parser("import", help="Replace the board with an export file")
    p.add_argument("file")
    p = sub.add_parser("copy", help="Copy a section to the clipboard as Markdown")
    p.add_argument("section")

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    args = build_parser().parse_args(argv)
    if args.command is None:
        args.command = "show"
    return args


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    settings_kwargs: dict = {}
    if args.data_dir:
        settings_kwargs["data_dir"] = args.data_dir
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file

    settings = Settings(**settings_kwargs)

    setup_logging(settings.verbose, settings.log_file)

    # Import here so --help and --version stay fast
    from .app import FocusTaskApp
    from .cli.commands import run_command

    app = FocusTaskApp(settings)
    raise SystemExit(run_command(app, args))


if __name__ == "__main__":
    main()
