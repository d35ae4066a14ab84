"""In-place text editing for list titles, task titles and due dates."""

from __future__ import annotations

CURSOR_GLYPH = "▏"


class EditError(Exception):
    """Raised when a buffer is used after it was committed."""


class EditBuffer:
    """Text being edited plus an insertion point.

    The insertion point always sits at the end of the text here; it is kept
    as an integer rather than a marker character so any typed character,
    the cursor glyph included, is stored verbatim.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._cursor = len(text)
        self._committed = False

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def committed(self) -> bool:
        return self._committed

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"EditBuffer({self._text!r}, cursor={self._cursor})"

    def _check_open(self) -> None:
        if self._committed:
            raise EditError("buffer already committed")

    def insert(self, char: str) -> None:
        self._check_open()
        self._text = self._text[: self._cursor] + char + self._text[self._cursor :]
        self._cursor += len(char)

    def backspace(self) -> None:
        """Drop the character before the cursor. No-op on empty text."""
        self._check_open()
        if self._cursor == 0:
            return
        self._text = self._text[: self._cursor - 1] + self._text[self._cursor :]
        self._cursor -= 1

    def commit(self) -> str:
        """Finalize the edit and return the authoritative value."""
        self._check_open()
        self._committed = True
        return self._text

    def render(self, glyph: str = CURSOR_GLYPH) -> str:
        """Text with a visible cursor at the insertion point."""
        return self._text[: self._cursor] + glyph + self._text[self._cursor :]
