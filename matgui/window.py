"""The top-level view: tracks keyboard focus, redraw requests and resizes."""

from __future__ import annotations

from dataclasses import dataclass

from matgui.layout import LinearLayout
from matgui.signals import Signal
from matgui.view import View

__all__ = ["WindowResizeArguments", "Window"]


@dataclass
class WindowResizeArguments:
    width: int = 0
    height: int = 0


class Window(LinearLayout):
    """A root layout that owns keyboard focus and routes key input to it.

    ``close_signal`` is called directly; ``frame_update`` carries the time
    since the previous frame; ``resized`` reports the new size.
    """

    def __init__(
        self,
        title: str = "",
        width: int = 512,
        height: int = 512,
        resizable: bool = False,
    ) -> None:
        self._invalid = True
        self._focused_view: View | None = None
        super().__init__()
        self.title = title
        self.resizable = resizable
        self.scale = 1.0
        self.close_signal = Signal()
        self.frame_update = Signal()
        self.resized = Signal()
        self.location(0, 0, width, height)

    def root(self) -> Window:
        return self

    def invalidate(self) -> None:
        """Mark the window as needing a redraw."""
        self._invalid = True

    @property
    def invalid(self) -> bool:
        return self._invalid

    @invalid.setter
    def invalid(self, state: bool) -> None:
        self._invalid = bool(state)

    @property
    def focused_view(self) -> View | None:
        return self._focused_view

    def focus_view(self, view: View | None) -> None:
        """Give ``view`` keyboard focus, or clear focus with None."""
        current = self._focused_view
        if current is not None:
            if current is view:
                return
            current.on_unfocus()
        self._focused_view = view
        if view is not None:
            view.on_focus()

    def unfocus_view(self, view: View | None) -> None:
        """Clear focus only if ``view`` holds it."""
        if self._focused_view is view:
            self.focus_view(None)

    def on_request_close(self) -> bool:
        """Ask the close handlers; True from the last one aborts closing."""
        return bool(self.close_signal.direct_call())

    def on_resize(self, width: int, height: int) -> bool:
        super().location(0, 0, width / self.scale, height / self.scale)
        self.resized.emit(WindowResizeArguments(width, height))
        return True

    def _focused_other(self) -> View | None:
        view = self._focused_view
        return view if view is not self else None

    def on_key_down(self, sym: int, scancode: int, modifiers: int, repeat: int) -> bool:
        view = self._focused_other()
        if view is not None and view.on_key_down(sym, scancode, modifiers, repeat):
            return True
        return View.on_key_down(self, sym, scancode, modifiers, repeat)

    def on_key_up(self, sym: int, scancode: int, modifiers: int, repeat: int) -> bool:
        view = self._focused_other()
        if view is not None and view.on_key_up(sym, scancode, modifiers, repeat):
            return True
        return View.on_key_up(self, sym, scancode, modifiers, repeat)

    def on_text_input(self, text: str) -> bool:
        view = self._focused_other()
        if view is not None and view.on_text_input(text):
            return True
        return View.on_text_input(self, text)