"""Main board view: command legend, list panels, status footer."""

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Footer, Header, Label

from modes import BACKSPACE, DOWN, ENTER, ESCAPE, LEFT, RIGHT, UP, Key
from taskboard_tui.providers import BoardView
from taskboard_tui.views.widgets import LegendPanel, ListPanel, StatusPanel

CONTROL_KEYS = frozenset({ENTER, ESCAPE, BACKSPACE, LEFT, RIGHT, UP, DOWN})


def to_machine_key(event: events.Key) -> Key | None:
    """Translate a textual key event, or None for keys the board ignores."""
    if event.is_printable and event.character:
        return Key.of(event.character)
    if event.key in CONTROL_KEYS:
        return Key(event.key)
    return None


class BoardScreen(Screen):
    """Main board screen."""

    DEFAULT_CSS = """
    BoardScreen {
        layout: vertical;
    }

    #lists {
        height: 1fr;
    }

    .no-lists {
        height: 1fr;
        width: 100%;
        content-align: center middle;
        border: solid $primary;
        color: $warning;
    }
    """

    view: reactive[BoardView | None] = reactive(None, recompose=True)

    def __init__(self, view: BoardView, **kwargs) -> None:
        super().__init__(**kwargs)
        self.set_reactive(BoardScreen.view, view)

    def compose(self) -> ComposeResult:
        yield Header()
        yield LegendPanel()

        if not self.view or not self.view.lists:
            yield Label("No Lists", classes="no-lists")
        else:
            with Horizontal(id="lists"):
                for list_view in self.view.lists:
                    yield ListPanel(list_view)

        if self.view:
            yield StatusPanel(self.view)
        yield Footer()

    def on_key(self, event: events.Key) -> None:
        key = to_machine_key(event)
        if key is None:
            return
        event.stop()
        event.prevent_default()
        self.app.handle_key(key)
