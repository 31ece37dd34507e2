"""The base view: geometry, styles, focus and pointer/key event signals."""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from matgui.paint import Paint
from matgui.signals import Signal

if TYPE_CHECKING:
    from matgui.layout import Layout

__all__ = [
    "MouseButton",
    "SizeFlag",
    "PointerArgument",
    "ScrollArgument",
    "KeyArgument",
    "View",
]


class MouseButton(enum.IntFlag):
    """Mouse buttons as bits of a pointer state."""

    LEFT = 1
    MIDDLE = 1 << 1
    RIGHT = 1 << 2
    X1 = 1 << 3
    X2 = 1 << 4


class SizeFlag(enum.IntEnum):
    """How a view's width or height is decided by its layout."""

    MATCH_PARENT = -1
    WRAP_CONTENT = -2
    WEIGHTED = 0
    FIXED = 1


@dataclass
class PointerArgument:
    """A pointer event in coordinates local to the view."""

    pointer_id: int
    x: float
    y: float
    state: int


@dataclass
class ScrollArgument:
    """A scroll event."""

    pointer_id: int
    x: float
    y: float


@dataclass
class KeyArgument:
    """A key event; ``repeats`` is 0 for the first press."""

    symbol: int
    scan_code: int
    modifier: int
    repeats: int


class View:
    """A rectangular element that reacts to input and reports it through signals.

    Sizes of zero or less are layout flags (see ``SizeFlag``); positive sizes
    are fixed.
    """

    def __init__(self) -> None:
        self.name = ""
        self.parent: Layout | None = None
        self.focusable = True
        self._highlight = False

        self.clicked = Signal()
        self.pointer_moved = Signal()
        self.pointer_down = Signal()
        self.pointer_up = Signal()
        self.pointer_enter = Signal()
        self.focused = Signal()
        self.unfocused = Signal()
        self.pointer_leave = Signal()
        self.scroll = Signal()
        self.key_down = Signal()
        self.key_up = Signal()
        self.text_input = Signal()

        self.style = Paint()
        self.hover_style = Paint()
        self.focus_style = Paint()
        self.current_style = Paint()

        self._place(0, 0, SizeFlag.WEIGHTED, SizeFlag.WEIGHTED, 1)
        self.hover_style.enabled = False
        self.focus_style.enabled = False
        self.update_style()

    def _place(self, x: float, y: float, w: float, h: float, weight: float) -> None:
        self.x = float(x)
        self.y = float(y)
        self.width = float(w)
        self.height = float(h)
        self.weight = float(weight)
        self.width_flags = int(w) if w <= 0 else int(SizeFlag.FIXED)
        self.height_flags = int(h) if h <= 0 else int(SizeFlag.FIXED)

    def invalidate(self) -> None:
        """Ask the root window for a redraw."""
        root = self.root()
        if root is not None:
            root.invalidate()

    def refresh(self) -> None:
        """Recalculate dependent geometry; nothing to do for a plain view."""

    def update_style(self) -> None:
        """Rebuild the current style from the base, hover and focus styles."""
        current = copy.deepcopy(self.style)
        current.push(self.hover_style)
        current.push(self.focus_style)
        self.current_style = current

    def focus(self) -> None:
        """Give this view keyboard focus in its window."""
        window = self.root()
        if window is not None:
            window.focus_view(self)

    def unfocus(self) -> None:
        """Drop keyboard focus if this view holds it."""
        window = self.root()
        if window is not None:
            window.unfocus_view(self)

    def location(
        self, x: float, y: float, w: float, h: float, weight: float = 1
    ) -> None:
        """Set position, size (or size flags) and layout weight."""
        self._place(x, y, w, h, weight)

    def is_pointer_inside(self, x: float, y: float) -> bool:
        """Whether the point, in parent coordinates, is inside the view."""
        return (
            self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height
        )

    def is_pointer_inside_local(self, x: float, y: float) -> bool:
        """Whether the point, in local coordinates, is inside the view."""
        return 0 <= x <= self.width and 0 <= y <= self.height

    def on_pointer_down(
        self, pointer_id: int, button: int, x: float, y: float
    ) -> bool:
        if self.focusable:
            self.focus()
        self.pointer_down.emit(PointerArgument(pointer_id, x, y, int(button)))
        return True

    def on_pointer_up(self, pointer_id: int, button: int, x: float, y: float) -> bool:
        argument = PointerArgument(pointer_id, x, y, int(button))
        self.pointer_up.emit(argument)
        if self.is_pointer_inside_local(x, y):
            self.clicked.emit(argument)
        return True

    def on_pointer_move(self, pointer_id: int, x: float, y: float, state: int) -> bool:
        self.pointer_moved.emit(PointerArgument(pointer_id, x, y, state))
        return True

    def on_pointer_enter(self, pointer_id: int, x: float, y: float, state: int) -> None:
        self.highlight = True
        self.pointer_enter.emit(PointerArgument(pointer_id, x, y, state))

    def on_pointer_leave(self) -> None:
        self.highlight = False
        self.pointer_leave.emit()

    def on_scroll(self, pointer_id: int, x: float, y: float) -> None:
        self.scroll.emit(ScrollArgument(pointer_id, x, y))

    def on_focus(self) -> None:
        self.focused.emit()
        self.focus_style.enabled = True
        self.update_style()

    def on_unfocus(self) -> None:
        self.unfocused.emit()
        self.focus_style.enabled = False
        self.update_style()

    def on_key_down(self, sym: int, scancode: int, modifiers: int, repeat: int) -> bool:
        """Report a key press; returns False when nothing listens."""
        if not self.key_down:
            return False
        if self.focusable:
            self.focus()
        self.key_down.emit(KeyArgument(sym, scancode, modifiers, repeat))
        return True

    def on_key_up(self, sym: int, scancode: int, modifiers: int, repeat: int) -> bool:
        """Report a key release; returns False when nothing listens."""
        if not self.key_up:
            return False
        self.key_up.emit(KeyArgument(sym, scancode, modifiers, repeat))
        return True

    def on_text_input(self, text: str) -> bool:
        """Report entered text; returns False when nothing listens."""
        if not self.text_input:
            return False
        self.text_input.emit(text)
        return True

    def root(self) -> Any:
        """Return the window this view belongs to, or None."""
        return self.parent.root() if self.parent is not None else None

    @property
    def highlight(self) -> bool:
        return self._highlight

    @highlight.setter
    def highlight(self, value: bool) -> None:
        if self._highlight == value:
            return
        self._highlight = value
        self.hover_style.enabled = value
        self.update_style()

    def right(self) -> float:
        return self.x + self.width

    def bottom(self) -> float:
        return self.y + self.height