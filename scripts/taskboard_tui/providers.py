"""
Data providers for the TUI.

Protocols define the interface; implementations can be swapped
for testing or alternative data sources.
"""

from dataclasses import dataclass
from typing import Protocol

from tasks import TaskList


@dataclass(frozen=True)
class TaskView:
    """Immutable snapshot of one task row."""

    title: str
    label: str
    done: bool
    selected: bool
    editing_title: bool = False
    editing_due: bool = False


@dataclass(frozen=True)
class ListView:
    """Immutable snapshot of one list panel."""

    id: int
    title: str
    tasks: tuple[TaskView, ...]
    active: bool
    editing_title: bool = False


@dataclass(frozen=True)
class BoardView:
    """Complete render state: board, mode and in-progress edit."""

    lists: tuple[ListView, ...]
    active_list: int
    mode: str
    mode_label: str
    edit_field: str | None = None
    edit_text: str | None = None
    diagnostic: str = ""

    @property
    def list_count(self) -> int:
        return len(self.lists)


class BoardStore(Protocol):
    """Protocol for loading and saving the board's lists."""

    def load(self) -> list[TaskList]:
        """Load all lists; never raises."""
        ...

    def save(self, lists: list[TaskList]) -> bool:
        """Save all lists; returns False on failure."""
        ...
