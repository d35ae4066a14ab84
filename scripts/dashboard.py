#!/usr/bin/env python3
"""
Plain-text Taskboard Rendering

Box-drawn snapshot of the board for terminals where the interactive UI is
not wanted (``taskboard.py --once``), plus a one-line summary.

Usage:
    dashboard.py              Full board
    dashboard.py --compact    Compact single-line summary
    dashboard.py --no-color   Disable ANSI colors
"""

import sys
from datetime import date
from pathlib import Path

SCRIPT_DIR = Path(__file__).resolve().parent
if str(SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR))

from dates import LABEL_OVERDUE, LABEL_TODAY, LABEL_TOMORROW, normalize  # noqa: E402
from store import load_board  # noqa: E402
from tasks import Board, Task  # noqa: E402

# Box drawing characters
BOX_H = "─"
BOX_V = "│"
BOX_TL = "┌"
BOX_TR = "┐"
BOX_BL = "└"
BOX_BR = "┘"
BOX_L = "├"
BOX_R = "┤"

TASK_ICONS = {
    "open": "○",
    "done": "✓",
}

LABEL_COLORS = {
    LABEL_OVERDUE: "\033[91m",   # Red
    LABEL_TODAY: "\033[93m",     # Yellow
    LABEL_TOMORROW: "\033[96m",  # Cyan
}
DONE_COLOR = "\033[90m"  # Gray
RESET = "\033[0m"
BOLD = "\033[1m"

SELECTED_MARK = ">>"


def box_line(left: str, fill: str, right: str, width: int) -> str:
    """Create a box line."""
    return left + fill * (width - 2) + right


def box_text(text: str, width: int, align: str = "left") -> str:
    """Create a box line with text.

    Truncation and padding count visible characters only, so callers pass
    uncolored text and color is applied by ``colorize`` afterwards.
    """
    content_width = width - 4  # Account for borders and padding
    if len(text) > content_width:
        text = text[:content_width - 1] + "…"

    if align == "center":
        padded = text.center(content_width)
    elif align == "right":
        padded = text.rjust(content_width)
    else:
        padded = text.ljust(content_width)

    return f"{BOX_V} {padded} {BOX_V}"


def colorize(line: str, color_code: str, use_color: bool) -> str:
    """Color the inside of a box_text line, keeping the borders plain."""
    if not use_color or not color_code:
        return line
    return f"{BOX_V} {color_code}{line[2:-2]}{RESET} {BOX_V}"


def task_line(task: Task, selected: bool) -> str:
    icon = TASK_ICONS["done" if task.done else "open"]
    mark = SELECTED_MARK if selected else "  "
    return f"{mark} {icon} {task.title or '(untitled)'}  [{task.label}]"


def render_board(board: Board, use_color: bool = True, width: int = 72) -> str:
    """Render every list, top to bottom, in one box."""
    lines = []

    def c(color_code: str) -> str:
        return color_code if use_color else ""

    lines.append(box_line(BOX_TL, BOX_H, BOX_TR, width))
    lines.append(colorize(box_text("TASKBOARD", width, "center"), c(BOLD), use_color))

    if not board.lists:
        lines.append(box_line(BOX_L, BOX_H, BOX_R, width))
        lines.append(box_text("No Lists", width, "center"))
        lines.append(box_line(BOX_BL, BOX_H, BOX_BR, width))
        return "\n".join(lines)

    for task_list in board.lists:
        active = task_list.id == board.active_list
        heading = f"List {task_list.id}: {task_list.title or '(untitled)'}"
        if active:
            heading += " *"

        lines.append(box_line(BOX_L, BOX_H, BOX_R, width))
        lines.append(colorize(box_text(heading, width), c(BOLD), use_color))
        lines.append(box_line(BOX_L, BOX_H, BOX_R, width))

        if not task_list.tasks:
            lines.append(box_text("(no tasks)", width))
            continue

        for index, task in enumerate(task_list.tasks):
            selected = active and index == task_list.selected
            row = box_text(task_line(task, selected), width)
            color_code = DONE_COLOR if task.done else LABEL_COLORS.get(task.label, "")
            lines.append(colorize(row, color_code, use_color))

    lines.append(box_line(BOX_BL, BOX_H, BOX_BR, width))
    return "\n".join(lines)


def render_compact(board: Board) -> str:
    """Render compact single-line summary."""
    tasks = [t for task_list in board.lists for t in task_list.tasks]
    done = sum(1 for t in tasks if t.done)
    overdue = sum(1 for t in tasks if t.label == LABEL_OVERDUE and not t.done)
    due_today = sum(1 for t in tasks if t.label == LABEL_TODAY and not t.done)

    parts = [
        f"[{board.list_count} list{'s' if board.list_count != 1 else ''}]",
        f"{done}/{len(tasks)} done",
    ]

    if due_today:
        parts.append(f"{due_today} due today")
    if overdue:
        parts.append(f"{overdue} overdue")

    return " | ".join(parts)


def main():
    compact = "--compact" in sys.argv
    no_color = "--no-color" in sys.argv or not sys.stdout.isatty()

    board = load_board()
    normalize(board, date.today())

    if compact:
        print(render_compact(board))
    else:
        print(render_board(board, use_color=not no_color))


if __name__ == "__main__":
    main()
