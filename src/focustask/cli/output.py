"""Colorful CLI output helpers."""

import sys

from ..models import Board

# ANSI color codes
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
RED = "\033[31m"
RESET = "\033[0m"
CHECK = "\u2713"  # ✓
BULLET = "\u2022"  # •
CROSS = "\u2717"  # ✗


def _supports_color() -> bool:
    """Check if terminal supports color output."""
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _colorize(text: str, color: str) -> str:
    """Apply color to text if terminal supports it."""
    if _supports_color():
        return f"{color}{text}{RESET}"
    return text


def success(message: str) -> None:
    """Print success message with green checkmark."""
    check = _colorize(CHECK, GREEN)
    print(f"{check} {message}")


def info(message: str) -> None:
    """Print info message with yellow bullet."""
    bullet = _colorize(BULLET, YELLOW)
    print(f"{bullet} {message}")


def header(message: str) -> None:
    """Print header message in blue."""
    print(_colorize(message, BLUE))


def error(message: str) -> None:
    """Print error message with red cross."""
    cross = _colorize(CROSS, RED)
    print(f"{cross} {message}", file=sys.stderr)


def format_board(board: Board) -> list[str]:
    """Plain-text outline of the board, ids in brackets."""
    lines: list[str] = []
    for section in board.sections:
        lines.append(f"{section.title} [{section.id}]")
        for column in section.columns:
            lines.append(f"  {column.title} [{column.id}]")
            if not column.tasks:
                lines.append("    (empty)")
            for task in column.tasks:
                mark = "x" if task.completed else " "
                lines.append(f"    [{mark}] {task.title} [{task.id}]")
    return lines


def show_board(board: Board) -> None:
    """Print the board outline, section titles highlighted."""
    if not board.sections:
        info("Board is empty")
        return
    for line in format_board(board):
        if line.startswith(" "):
            print(line)
        else:
            header(line)
