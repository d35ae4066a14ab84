#!/usr/bin/env python3
"""
Persistence for the taskboard.

The board lives in one JSON file: a top-level array of lists, each with its
tasks. It is read once at start-up and written on clean exit (or after each
change when checkpointing is enabled).

Loading never fails: a missing, unreadable, unparseable or schema-invalid
file yields an empty board. Saving never raises: failures are logged and
reported as False.

Usage:
    store.py path          Show the data file in use
    store.py check [path]  Validate a data file against the schema
"""

import json
import logging
import os
import sys
from pathlib import Path

from jsonschema import ValidationError, validate

from tasks import Board, TaskList

log = logging.getLogger("taskboard.store")

DB_ENV_VAR = "TASKBOARD_DB"
DEFAULT_DB_FILE = Path("data") / "lists.json"

LISTS_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "array",
    "items": {
        "type": "object",
        "required": ["title", "tasks"],
        "properties": {
            "id": {"type": "integer"},
            "title": {"type": "string"},
            "selected": {"type": "integer", "minimum": 0},
            "tasks": {
                "type": "array",
                "items": {
                    "type": "object",
                    "required": ["title"],
                    "properties": {
                        "title": {"type": "string"},
                        "due": {"type": "string", "pattern": r"^\d{4}-\d{2}-\d{2}$"},
                        "label": {"type": "string"},
                        "done": {"type": "boolean"},
                    },
                },
            },
        },
    },
}


def resolve_db_path(explicit: Path | None = None) -> Path:
    """Pick the data file: explicit argument, then $TASKBOARD_DB, then ./data/lists.json."""
    if explicit is not None:
        return Path(explicit)
    env_path = os.environ.get(DB_ENV_VAR)
    if env_path:
        return Path(env_path)
    return DEFAULT_DB_FILE


def validate_lists(data) -> tuple[bool, str]:
    """Validate a decoded document. Returns (valid, error_message)."""
    try:
        validate(instance=data, schema=LISTS_SCHEMA)
        return True, ""
    except ValidationError as e:
        path = " -> ".join(str(p) for p in e.absolute_path) if e.absolute_path else "root"
        return False, f"Validation error at '{path}': {e.message}"


def load_lists(path: Path | None = None) -> list[TaskList]:
    """Load all lists from disk, or [] if there is nothing usable."""
    db_file = resolve_db_path(path)
    if not db_file.exists():
        log.info("No data file at %s, starting empty", db_file)
        return []

    try:
        data = json.loads(db_file.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
        log.warning("Could not read %s: %s", db_file, e)
        return []

    valid, error = validate_lists(data)
    if not valid:
        log.warning("Ignoring %s: %s", db_file, error)
        return []

    try:
        return Board.from_list(data).lists
    except ValueError as e:
        # Dates that match the pattern but not the calendar, e.g. 2025-02-30
        log.warning("Ignoring %s: %s", db_file, e)
        return []


def save_lists(lists: list[TaskList], path: Path | None = None) -> bool:
    """Write all lists to disk. Returns False (and logs) on failure."""
    db_file = resolve_db_path(path)
    payload = [task_list.to_dict() for task_list in lists]
    try:
        db_file.parent.mkdir(parents=True, exist_ok=True)
        db_file.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    except (OSError, TypeError, ValueError) as e:
        log.error("Could not save %s: %s", db_file, e)
        return False
    log.debug("Saved %d list(s) to %s", len(lists), db_file)
    return True


def load_board(path: Path | None = None) -> Board:
    return Board(lists=load_lists(path))


def save_board(board: Board, path: Path | None = None) -> bool:
    return save_lists(board.lists, path)


def main() -> int:
    if len(sys.argv) < 2 or sys.argv[1] not in ("path", "check"):
        print(__doc__)
        return 1

    cmd = sys.argv[1]
    target = Path(sys.argv[2]) if len(sys.argv) > 2 else None

    if cmd == "path":
        print(resolve_db_path(target))
        return 0

    db_file = resolve_db_path(target)
    if not db_file.exists():
        print(f"No data file at {db_file}", file=sys.stderr)
        return 1
    try:
        data = json.loads(db_file.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as e:
        print(f"Error: {db_file} is not valid JSON: {e}", file=sys.stderr)
        return 1
    valid, error = validate_lists(data)
    if not valid:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print(f"{db_file}: {len(data)} list(s), OK")
    return 0


if __name__ == "__main__":
    sys.exit(main())
