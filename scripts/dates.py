"""Due-date parsing and the per-tick relabel/sort pass."""

from __future__ import annotations

from datetime import date, datetime

from tasks import Board, TaskList

DUE_FORMAT = "%Y/%m/%d"

LABEL_TODAY = "Today"
LABEL_TOMORROW = "Tomorrow"
LABEL_OVERDUE = "Overdue"


class DateParseError(ValueError):
    """Due-date text did not match YYYY/MM/DD."""


def parse_due(text: str) -> date:
    """Parse user-entered due-date text (``YYYY/MM/DD``)."""
    cleaned = text.strip()
    if not cleaned:
        raise DateParseError("empty due date")
    try:
        return datetime.strptime(cleaned, DUE_FORMAT).date()
    except ValueError as e:
        raise DateParseError(f"invalid due date {cleaned!r}: expected YYYY/MM/DD") from e


def format_due(value: date) -> str:
    return value.strftime(DUE_FORMAT)


def relative_label(due: date, today: date, current: str) -> str:
    """Label for a due date relative to today.

    Only imminent and overdue dates are relabeled; anything two or more
    days out keeps ``current``.
    """
    delta = (due - today).days
    if delta < 0:
        return LABEL_OVERDUE
    if delta == 0:
        return LABEL_TODAY
    if delta == 1:
        return LABEL_TOMORROW
    return current


def sort_list(task_list: TaskList) -> None:
    """Stable ascending sort by due date; the selected task stays selected."""
    selected = task_list.selected_task
    task_list.tasks.sort(key=lambda t: t.due)
    if selected is not None:
        task_list.selected = next(
            i for i, t in enumerate(task_list.tasks) if t is selected
        )


def normalize(board: Board, today: date | None = None) -> None:
    """Relabel every task and re-sort every list. Idempotent."""
    if today is None:
        today = date.today()
    for task_list in board.lists:
        for task in task_list.tasks:
            task.label = relative_label(task.due, today, task.label)
        sort_list(task_list)
