#!/usr/bin/env python3
"""
Board model for the terminal taskboard.

Single owner of board state. All list/task mutations go through the Board
methods here; the input state machine (modes.py) decides *when* to call
them, this module decides *how* identities and selections stay valid.

Invariants:
    - list identities are always 1..len(lists), matching position
    - active_list is in 1..len(lists) whenever lists exist
    - each list's selected index is < len(tasks), or 0 when empty
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

PLACEHOLDER_DUE = date(9999, 12, 31)
PLACEHOLDER_LABEL = "No due date"


@dataclass
class Task:
    """A single to-do item.

    ``label`` is a display cache derived from ``due``; see dates.normalize.
    """

    title: str = ""
    due: date = PLACEHOLDER_DUE
    label: str = PLACEHOLDER_LABEL
    done: bool = False

    @property
    def has_due_date(self) -> bool:
        return self.due != PLACEHOLDER_DUE

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "due": self.due.isoformat(),
            "label": self.label,
            "done": self.done,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        due = date.fromisoformat(data["due"]) if data.get("due") else PLACEHOLDER_DUE
        return cls(
            title=data.get("title", ""),
            due=due,
            label=data.get("label", PLACEHOLDER_LABEL),
            done=bool(data.get("done", False)),
        )


@dataclass
class TaskList:
    """Named, ordered collection of tasks with a remembered cursor."""

    id: int
    title: str = ""
    tasks: list[Task] = field(default_factory=list)
    selected: int = 0

    @property
    def selected_task(self) -> Task | None:
        if not self.tasks:
            return None
        return self.tasks[self.selected]

    def clamp_selection(self) -> None:
        """Pull the cursor back into range after tasks were removed."""
        if not self.tasks:
            self.selected = 0
        elif self.selected >= len(self.tasks):
            self.selected = len(self.tasks) - 1
        elif self.selected < 0:
            self.selected = 0

    def add_task(self, task: Task) -> Task:
        self.tasks.append(task)
        self.selected = len(self.tasks) - 1
        return task

    def remove_task(self, task: Task) -> bool:
        """Remove this exact task object. Returns False if it is not here."""
        for index, candidate in enumerate(self.tasks):
            if candidate is task:
                del self.tasks[index]
                self.clamp_selection()
                return True
        return False

    def delete_selected(self) -> Task | None:
        """Delete the selected task. No-op on an empty list."""
        if not self.tasks:
            return None
        task = self.tasks.pop(self.selected)
        self.clamp_selection()
        return task

    def move_selection(self, step: int) -> None:
        if not self.tasks:
            self.selected = 0
            return
        self.selected = max(0, min(self.selected + step, len(self.tasks) - 1))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "selected": self.selected,
            "tasks": [t.to_dict() for t in self.tasks],
        }

    @classmethod
    def from_dict(cls, data: dict, list_id: int) -> "TaskList":
        task_list = cls(
            id=list_id,
            title=data.get("title", ""),
            tasks=[Task.from_dict(t) for t in data.get("tasks", [])],
            selected=data.get("selected", 0),
        )
        task_list.clamp_selection()
        return task_list


@dataclass
class Board:
    """All lists plus which one is active."""

    lists: list[TaskList] = field(default_factory=list)
    active_list: int = 1

    def __post_init__(self) -> None:
        self.renumber()
        if self.lists:
            self.active_list = max(1, min(self.active_list, len(self.lists)))
        else:
            self.active_list = 1

    @property
    def list_count(self) -> int:
        return len(self.lists)

    @property
    def active(self) -> TaskList | None:
        """Active list, or None when the board is empty."""
        if not self.lists:
            return None
        return self.lists[self.active_list - 1]

    def get(self, list_id: int) -> TaskList | None:
        if 1 <= list_id <= len(self.lists):
            return self.lists[list_id - 1]
        return None

    def renumber(self) -> None:
        """Reassign identities so they stay dense and positional."""
        for position, task_list in enumerate(self.lists, start=1):
            task_list.id = position

    # ------------------------------------------------------------------
    # List lifecycle
    # ------------------------------------------------------------------

    def add_list(self, title: str = "") -> TaskList:
        task_list = TaskList(id=len(self.lists) + 1, title=title)
        self.lists.append(task_list)
        self.active_list = task_list.id
        return task_list

    def remove_list(self, list_id: int) -> TaskList | None:
        """Remove a list by identity and renumber the rest.

        active_list is left alone when it pointed before the removed list,
        otherwise it moves down by one (never below 1).
        """
        task_list = self.get(list_id)
        if task_list is None:
            return None
        self.lists.remove(task_list)
        self.renumber()
        if self.active_list >= list_id:
            self.active_list = max(self.active_list - 1, 1)
        return task_list

    def delete_active(self) -> TaskList | None:
        """Delete the active list. No-op when the board is empty."""
        if not self.lists:
            return None
        return self.remove_list(self.active_list)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def select_list(self, list_id: int) -> bool:
        """Jump to a list by identity. Returns False when out of range."""
        if not 1 <= list_id <= len(self.lists):
            return False
        self.active_list = list_id
        return True

    def step_list(self, step: int) -> None:
        """Move to the previous/next list, clamped, resetting its cursor."""
        if not self.lists:
            return
        target = max(1, min(self.active_list + step, len(self.lists)))
        if target != self.active_list:
            self.active_list = target
            self.lists[target - 1].selected = 0

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_list(self) -> list[dict]:
        return [task_list.to_dict() for task_list in self.lists]

    @classmethod
    def from_list(cls, data: list[dict], active_list: int = 1) -> "Board":
        lists = [
            TaskList.from_dict(raw, position)
            for position, raw in enumerate(data, start=1)
        ]
        return cls(lists=lists, active_list=active_list)
