"""Reusable widgets for the board screen."""

from textual.app import ComposeResult
from textual.widgets import Label, Static

from taskboard_tui.providers import BoardView, ListView, TaskView

# (key, description) pairs shown in the command legend
LEGEND = (
    ("<num>", "Select List"),
    ("n", "New List"),
    ("D", "Delete List"),
    ("a", "Add Task"),
    ("d", "Delete Task"),
    ("c", "Cross Task"),
    ("h/l", "Prev/Next List"),
    ("j/k", "Down/Up"),
    ("q", "Quit"),
)


class LegendPanel(Static):
    """Panel listing the browse-mode commands."""

    DEFAULT_CSS = """
    LegendPanel {
        height: 3;
        border: solid $primary;
        padding: 0 1;
        content-align: center middle;
    }
    """

    def compose(self) -> ComposeResult:
        yield Label(
            "  ".join(f"[b]{key}[/b] {description}" for key, description in LEGEND)
        )


class TaskRow(Static):
    """Single row in a list panel."""

    DEFAULT_CSS = """
    TaskRow {
        height: 1;
        width: 100%;
    }

    TaskRow.selected {
        background: $accent;
    }

    TaskRow .task-done {
        color: $text-muted;
        text-style: strike;
    }

    TaskRow .label-overdue {
        color: $error;
    }

    TaskRow .label-today {
        color: $warning;
    }

    TaskRow .label-tomorrow {
        color: $success;
    }

    TaskRow .editing {
        text-style: italic;
    }
    """

    LABEL_CLASSES = {
        "Overdue": "label-overdue",
        "Today": "label-today",
        "Tomorrow": "label-tomorrow",
    }

    def __init__(self, task: TaskView, **kwargs) -> None:
        super().__init__(**kwargs)
        self._task_view = task
        if task.selected:
            self.add_class("selected")

    def compose(self) -> ComposeResult:
        marker = ">>" if self._task_view.selected else "  "
        classes = []
        if self._task_view.done:
            classes.append("task-done")
        else:
            classes.append(self.LABEL_CLASSES.get(self._task_view.label, ""))
        if self._task_view.editing_title or self._task_view.editing_due:
            classes.append("editing")

        yield Label(
            f"{marker} {self._task_view.title}  ({self._task_view.label})",
            classes=" ".join(c for c in classes if c),
            markup=False,
        )


class ListPanel(Static):
    """One list: title box above its tasks."""

    DEFAULT_CSS = """
    ListPanel {
        width: 1fr;
        height: 100%;
        border: solid $primary;
        padding: 0 1;
    }

    ListPanel.active {
        border: solid $warning;
    }

    ListPanel .title {
        text-style: bold;
        width: 100%;
        content-align: center middle;
        border-bottom: solid $primary;
        margin-bottom: 1;
    }

    ListPanel .empty {
        color: $text-muted;
    }
    """

    def __init__(self, task_list: ListView, **kwargs) -> None:
        super().__init__(**kwargs)
        self._list = task_list
        self.border_title = f"List {task_list.id}"
        if task_list.active:
            self.add_class("active")

    def compose(self) -> ComposeResult:
        yield Label(self._list.title or " ", classes="title", markup=False)

        if not self._list.tasks:
            yield Label("No tasks", classes="empty")
            return

        for task in self._list.tasks:
            yield TaskRow(task)


class StatusPanel(Static):
    """Footer region: current mode, in-progress edit and diagnostics."""

    DEFAULT_CSS = """
    StatusPanel {
        height: auto;
        border: solid $primary;
        padding: 0 1;
    }

    StatusPanel .mode {
        text-style: bold;
    }

    StatusPanel .diagnostic {
        color: $error;
    }

    StatusPanel .credits {
        color: $text-muted;
    }
    """

    def __init__(self, view: BoardView, **kwargs) -> None:
        super().__init__(**kwargs)
        self._view = view

    def compose(self) -> ComposeResult:
        mode_line = f"Mode: {self._view.mode_label}"
        if self._view.edit_text is not None:
            mode_line += f"  > {self._view.edit_text}"
        yield Label(mode_line, classes="mode", markup=False)

        if self._view.diagnostic:
            yield Label(self._view.diagnostic, classes="diagnostic", markup=False)

        yield Label(
            f"taskboard - {self._view.list_count} list(s)", classes="credits"
        )
