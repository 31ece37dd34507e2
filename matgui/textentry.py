"""A single-line text entry view that edits text from key and text input."""

from __future__ import annotations

from matgui.keys import Keys
from matgui.signals import Signal
from matgui.view import View

__all__ = ["TextEntry"]

_CTRL_MODIFIERS = 64 | 128
_SPACES = frozenset(" \t\n\v\f\r")


class TextEntry(View):
    """An editable line of text.

    Backspace erases one character; with ctrl held it erases the previous
    word. Return emits ``submit``.
    """

    def __init__(self) -> None:
        super().__init__()
        self._text = ""
        self._cursor_position = 0
        self.submit = Signal()
        self.style.line.color(1, 1, 1, 0.3)
        self.focus_style.line.color(1, 1, 1, 0.8)
        self.update_style()

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value
        self._cursor_position = len(self._text)

    @property
    def cursor_position(self) -> int:
        return self._cursor_position

    def _erase_one(self) -> None:
        """Erase from the character left of the cursor to the end."""
        if self._cursor_position > 0:
            self._text = self._text[: self._cursor_position - 1]
            self._cursor_position -= 1

    def _delete_one(self) -> None:
        """Erase from the cursor to the end."""
        self._text = self._text[: self._cursor_position]

    def _char_before_cursor(self) -> str:
        return self._text[self._cursor_position - 1]

    def on_key_down(self, sym: int, scancode: int, modifiers: int, repeat: int) -> bool:
        if scancode == Keys.BACKSPACE:
            if modifiers & _CTRL_MODIFIERS:
                while self._cursor_position > 0 and self._char_before_cursor() in _SPACES:
                    self._erase_one()
                while (
                    self._cursor_position > 0
                    and self._char_before_cursor() not in _SPACES
                ):
                    self._erase_one()
            else:
                self._erase_one()
        elif scancode == Keys.RETURN:
            self.submit.emit()
        return True

    def on_key_up(self, sym: int, scancode: int, modifiers: int, repeat: int) -> bool:
        return True

    def on_text_input(self, text: str) -> bool:
        self._text += text
        self._cursor_position = len(self._text)
        return True

    def on_focus(self) -> None:
        super().on_focus()

    def on_unfocus(self) -> None:
        super().on_unfocus()