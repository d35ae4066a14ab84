#!/usr/bin/env python3
"""
Taskboard

Terminal task board: named lists of tasks, edited inline from the keyboard
and kept in a single JSON file.

Usage:
    taskboard.py              Launch interactive TUI
    taskboard.py --once       Print the board once and exit (no TUI)
    taskboard.py --json       Print a JSON summary and exit

Requirements:
    pip install textual jsonschema
"""

import argparse
import json
import logging
import sys
from datetime import date
from logging.handlers import RotatingFileHandler
from pathlib import Path

SCRIPT_DIR = Path(__file__).resolve().parent
if str(SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR))

from dashboard import render_board, render_compact  # noqa: E402
from dates import LABEL_OVERDUE, normalize  # noqa: E402
from store import load_board, resolve_db_path  # noqa: E402

DEFAULT_LOG_FILE = Path("data") / "taskboard.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_file: Path, level: str = "WARNING") -> logging.Logger:
    """Send the ``taskboard`` logger to a rotating file.

    The TUI owns the terminal, so nothing is logged to stdout/stderr.
    """
    logger = logging.getLogger("taskboard")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=2, encoding="utf-8")
    handler.setLevel(getattr(logging, level.upper(), logging.WARNING))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger


def print_board_once(db_file: Path | None = None, use_color: bool = True) -> int:
    """Print the board and exit."""
    board = load_board(db_file)
    normalize(board, date.today())

    print(render_board(board, use_color=use_color))
    print(render_compact(board))
    return 0


def print_board_json(db_file: Path | None = None) -> int:
    """Print a JSON summary and exit."""
    board = load_board(db_file)
    normalize(board, date.today())

    output = {
        "db_file": str(resolve_db_path(db_file)),
        "active_list": board.active_list if board.lists else None,
        "lists": [
            {
                "id": task_list.id,
                "title": task_list.title,
                "tasks": len(task_list.tasks),
                "done": sum(1 for t in task_list.tasks if t.done),
                "overdue": sum(
                    1 for t in task_list.tasks
                    if t.label == LABEL_OVERDUE and not t.done
                ),
            }
            for task_list in board.lists
        ],
    }

    print(json.dumps(output, indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Taskboard - terminal task lists",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Print the board once and exit (no TUI)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON summary and exit",
    )
    parser.add_argument(
        "--db",
        type=Path,
        help="Path to lists.json (default: $TASKBOARD_DB or ./data/lists.json)",
    )
    parser.add_argument(
        "--checkpoint",
        action="store_true",
        help="Save after every committed change, not only on quit",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors for --once",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=DEFAULT_LOG_FILE,
        help=f"Log file (default: {DEFAULT_LOG_FILE})",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for the log file (default: WARNING)",
    )

    args = parser.parse_args(argv)

    try:
        configure_logging(args.log_file, args.log_level)
    except OSError as e:
        print(f"Warning: cannot open log file {args.log_file}: {e}", file=sys.stderr)

    if args.json:
        return print_board_json(args.db)

    if args.once:
        use_color = not args.no_color and sys.stdout.isatty()
        return print_board_once(args.db, use_color=use_color)

    from taskboard_tui.app import run

    run(db_file=args.db, checkpoint=args.checkpoint)
    return 0


if __name__ == "__main__":
    sys.exit(main())
