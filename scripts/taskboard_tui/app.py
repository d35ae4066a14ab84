"""
Taskboard TUI Application.

Main entry point for the terminal user interface.
"""

from __future__ import annotations

import logging
import sys
from datetime import date
from pathlib import Path

# Ensure scripts directory is in path
SCRIPT_DIR = Path(__file__).resolve().parent.parent
if str(SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR))

from textual.app import App  # noqa: E402

from dates import normalize  # noqa: E402
from modes import InputMachine, Key, Signal  # noqa: E402
from tasks import Board  # noqa: E402
from taskboard_tui.board_provider import FileBoardStore, build_view  # noqa: E402
from taskboard_tui.providers import BoardStore  # noqa: E402
from taskboard_tui.views.board_screen import BoardScreen  # noqa: E402

log = logging.getLogger("taskboard.app")


class TaskboardApp(App):
    """Main Taskboard TUI application."""

    TITLE = "Taskboard"
    SUB_TITLE = "Lists & Tasks"

    CSS = """
    Screen {
        background: $surface;
    }
    """

    def __init__(
        self,
        db_file: Path | None = None,
        checkpoint: bool = False,
        store: BoardStore | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._board_store = store if store is not None else FileBoardStore(db_file)
        self.board = Board(lists=self._board_store.load())
        self.machine = InputMachine(
            self.board,
            on_change=self._save_checkpoint if checkpoint else None,
        )
        self._board_saved = False

    def on_mount(self) -> None:
        """Called when app is mounted."""
        normalize(self.board, date.today())
        self.push_screen(BoardScreen(build_view(self.machine)))

    def handle_key(self, key: Key) -> None:
        """Run one key through the state machine and redraw."""
        signal = self.machine.handle(key)
        normalize(self.board, date.today())
        if signal is Signal.QUIT:
            self.action_quit()
            return
        if isinstance(self.screen, BoardScreen):
            self.screen.view = build_view(self.machine)

    def save(self) -> bool:
        """Persist the board; failures are logged and never block exit."""
        ok = self._board_store.save(self.board.lists)
        if not ok:
            log.error("Board was not saved")
        return ok

    def _save_checkpoint(self, board: Board) -> None:
        self.save()

    def action_quit(self) -> None:
        """Save and exit."""
        if not self._board_saved:
            self.save()
            self._board_saved = True
        self.exit()


def run(db_file: Path | None = None, checkpoint: bool = False) -> None:
    """Run the TUI application."""
    app = TaskboardApp(db_file=db_file, checkpoint=checkpoint)
    app.run()


if __name__ == "__main__":
    run()
