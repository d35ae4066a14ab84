"""
Concrete BoardStore using store.py, and the snapshot builder for views.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add scripts to path for imports
SCRIPT_DIR = Path(__file__).resolve().parent.parent
if str(SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR))

from modes import MODE_LABELS, InputMachine  # noqa: E402
from store import load_lists, resolve_db_path, save_lists  # noqa: E402
from tasks import Task, TaskList  # noqa: E402
from taskboard_tui.providers import BoardView, ListView, TaskView  # noqa: E402


class FileBoardStore:
    """BoardStore implementation that reads and writes lists.json."""

    def __init__(self, db_file: Path | None = None):
        self._db_file = resolve_db_path(db_file)

    @property
    def path(self) -> Path:
        return self._db_file

    def load(self) -> list[TaskList]:
        return load_lists(self._db_file)

    def save(self, lists: list[TaskList]) -> bool:
        return save_lists(lists, self._db_file)


def _task_view(
    task: Task,
    selected: bool,
    machine: InputMachine,
) -> TaskView:
    editing = machine.edit_task is task
    editing_title = editing and machine.edit_field == "task_title"
    editing_due = editing and machine.edit_field == "task_due"

    title = task.title
    label = task.label
    if editing_title:
        title = machine.edit_text or ""
    elif editing_due:
        label = machine.edit_text or ""

    return TaskView(
        title=title,
        label=label,
        done=task.done,
        selected=selected,
        editing_title=editing_title,
        editing_due=editing_due,
    )


def _list_view(task_list: TaskList, machine: InputMachine) -> ListView:
    active = task_list.id == machine.board.active_list
    editing_title = (
        machine.edit_list is task_list and machine.edit_field == "list_title"
    )
    return ListView(
        id=task_list.id,
        title=(machine.edit_text or "") if editing_title else task_list.title,
        tasks=tuple(
            _task_view(task, active and index == task_list.selected, machine)
            for index, task in enumerate(task_list.tasks)
        ),
        active=active,
        editing_title=editing_title,
    )


def build_view(machine: InputMachine) -> BoardView:
    """Snapshot the machine's board and mode for rendering."""
    return BoardView(
        lists=tuple(_list_view(tl, machine) for tl in machine.board.lists),
        active_list=machine.board.active_list,
        mode=machine.mode.value,
        mode_label=MODE_LABELS[machine.mode],
        edit_field=machine.edit_field,
        edit_text=machine.edit_text,
        diagnostic=machine.diagnostic,
    )
