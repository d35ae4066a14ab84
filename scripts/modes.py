"""
Modal input handling for the taskboard.

One key press in, one Signal out. The machine owns the Board for the whole
session; the presentation layer only ever reads it between keys.

Modes:
    BROWSING      navigate, create and delete lists/tasks; only mode that can quit
    NAMING_LIST   typing the title of a just-created list
    TITLING_TASK  typing the title of a just-created task
    DATING_TASK   typing the due date (YYYY/MM/DD) of that task

Enter commits the field being edited, Escape aborts the whole creation and
removes the half-entered list or task.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from dates import DateParseError, format_due, parse_due
from editing import EditBuffer
from tasks import Board, Task, TaskList

log = logging.getLogger("taskboard.modes")

ENTER = "enter"
ESCAPE = "escape"
BACKSPACE = "backspace"
LEFT = "left"
RIGHT = "right"
UP = "up"
DOWN = "down"


class Mode(Enum):
    BROWSING = "browsing"
    NAMING_LIST = "naming_list"
    TITLING_TASK = "titling_task"
    DATING_TASK = "dating_task"


class Signal(Enum):
    CONTINUE = "continue"
    QUIT = "quit"


# Field under edit for each editing mode
EDIT_FIELDS = {
    Mode.NAMING_LIST: "list_title",
    Mode.TITLING_TASK: "task_title",
    Mode.DATING_TASK: "task_due",
}

MODE_LABELS = {
    Mode.BROWSING: "BROWSE",
    Mode.NAMING_LIST: "NEW LIST: title",
    Mode.TITLING_TASK: "NEW TASK: title",
    Mode.DATING_TASK: "NEW TASK: due date (YYYY/MM/DD)",
}


@dataclass(frozen=True)
class Key:
    """A key press.

    Printable keys carry ``char``; control keys (enter, escape, backspace,
    arrows) only carry ``name``.
    """

    name: str
    char: str | None = None

    @classmethod
    def of(cls, char: str) -> "Key":
        return cls(name=char, char=char)

    @property
    def printable(self) -> bool:
        return self.char is not None and len(self.char) == 1 and self.char.isprintable()


class InputMachine:
    """Keyboard-driven state machine over a Board."""

    def __init__(
        self,
        board: Board,
        on_change: Callable[[Board], None] | None = None,
    ) -> None:
        self.board = board
        self.mode = Mode.BROWSING
        self.diagnostic = ""
        self._on_change = on_change
        self._buffer: EditBuffer | None = None
        self._list: TaskList | None = None
        self._task: Task | None = None
        self._prior_active = 1

        self._dispatch = {
            Mode.BROWSING: self._browse,
            Mode.NAMING_LIST: self._naming_list,
            Mode.TITLING_TASK: self._titling_task,
            Mode.DATING_TASK: self._dating_task,
        }
        self._browse_keys = {
            "n": self._new_list,
            "a": self._new_task,
            "d": self._delete_task,
            "D": self._delete_list,
            "c": self._cross_task,
            "j": lambda: self._move(1),
            DOWN: lambda: self._move(1),
            "k": lambda: self._move(-1),
            UP: lambda: self._move(-1),
            "h": lambda: self.board.step_list(-1),
            LEFT: lambda: self.board.step_list(-1),
            "l": lambda: self.board.step_list(1),
            RIGHT: lambda: self.board.step_list(1),
        }

    # ------------------------------------------------------------------
    # Read-only view for the presentation layer
    # ------------------------------------------------------------------

    @property
    def editing(self) -> bool:
        return self.mode is not Mode.BROWSING

    @property
    def edit_field(self) -> str | None:
        return EDIT_FIELDS.get(self.mode)

    @property
    def edit_text(self) -> str | None:
        """In-progress text with its cursor glyph, or None when browsing."""
        if self._buffer is None:
            return None
        return self._buffer.render()

    @property
    def edit_list(self) -> TaskList | None:
        return self._list if self.editing else None

    @property
    def edit_task(self) -> Task | None:
        return self._task if self.editing else None

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def handle(self, key: Key) -> Signal:
        """Process one key to completion."""
        self.diagnostic = ""
        return self._dispatch[self.mode](key)

    # ------------------------------------------------------------------
    # BROWSING
    # ------------------------------------------------------------------

    def _browse(self, key: Key) -> Signal:
        token = key.char if key.char is not None else key.name
        if token == "q":
            return Signal.QUIT
        if key.char is not None and key.char.isdigit():
            self._jump(int(key.char))
            return Signal.CONTINUE
        action = self._browse_keys.get(token)
        if action is not None:
            action()
        return Signal.CONTINUE

    def _new_list(self) -> None:
        self._prior_active = self.board.active_list
        self._list = self.board.add_list()
        self._task = None
        self._buffer = EditBuffer()
        self.mode = Mode.NAMING_LIST
        log.debug("Created list %d", self._list.id)

    def _new_task(self) -> None:
        task_list = self.board.active
        if task_list is None:
            return
        self._list = task_list
        self._task = task_list.add_task(Task())
        self._buffer = EditBuffer()
        self.mode = Mode.TITLING_TASK
        log.debug("Created task in list %d", task_list.id)

    def _delete_task(self) -> None:
        task_list = self.board.active
        if task_list is None:
            return
        task = task_list.delete_selected()
        if task is not None:
            log.debug("Deleted task %r from list %d", task.title, task_list.id)
            self._changed()

    def _delete_list(self) -> None:
        task_list = self.board.delete_active()
        if task_list is not None:
            log.debug("Deleted list %r", task_list.title)
            self._changed()

    def _cross_task(self) -> None:
        task_list = self.board.active
        if task_list is None or task_list.selected_task is None:
            return
        task = task_list.selected_task
        task.done = not task.done
        self._changed()

    def _move(self, step: int) -> None:
        task_list = self.board.active
        if task_list is not None:
            task_list.move_selection(step)

    def _jump(self, list_id: int) -> None:
        if not self.board.select_list(list_id):
            self.diagnostic = f"No list {list_id} (have {self.board.list_count})"

    # ------------------------------------------------------------------
    # Editing modes
    # ------------------------------------------------------------------

    def _edit(self, key: Key, on_enter: Callable[[], None], on_escape: Callable[[], None]) -> Signal:
        if self._buffer is None:
            # Nothing to edit: fall back to browsing.
            self._finish()
            return Signal.CONTINUE
        if key.name == ENTER:
            on_enter()
        elif key.name == ESCAPE:
            on_escape()
        elif key.name == BACKSPACE:
            self._buffer.backspace()
        elif key.printable:
            self._buffer.insert(key.char)
        return Signal.CONTINUE

    def _naming_list(self, key: Key) -> Signal:
        return self._edit(key, self._commit_list_title, self._abort_list)

    def _titling_task(self, key: Key) -> Signal:
        return self._edit(key, self._commit_task_title, self._abort_task)

    def _dating_task(self, key: Key) -> Signal:
        return self._edit(key, self._commit_task_due, self._abort_task)

    def _commit_list_title(self) -> None:
        title = self._buffer.commit()
        if self._list is not None:
            self._list.title = title
        self._finish()
        self._changed()

    def _abort_list(self) -> None:
        if self._list is not None:
            self.board.remove_list(self._list.id)
            if self.board.lists:
                self.board.active_list = max(1, min(self._prior_active, self.board.list_count))
            else:
                self.board.active_list = 1
        self._finish()

    def _commit_task_title(self) -> None:
        title = self._buffer.commit()
        if self._task is None:
            self._finish()
            return
        self._task.title = title
        self._buffer = EditBuffer()
        self.mode = Mode.DATING_TASK

    def _commit_task_due(self) -> None:
        text = self._buffer.commit()
        task = self._task
        if task is not None:
            try:
                due = parse_due(text)
            except DateParseError as e:
                self.diagnostic = str(e)
                log.info("Kept placeholder due date for %r: %s", task.title, e)
            else:
                task.due = due
                task.label = format_due(due)
        self._finish()
        self._changed()

    def _abort_task(self) -> None:
        if self._list is not None and self._task is not None:
            self._list.remove_task(self._task)
        self._finish()
        self._changed()

    def _finish(self) -> None:
        self._buffer = None
        self._list = None
        self._task = None
        self.mode = Mode.BROWSING

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change(self.board)
