"""A view that shows a linear layout larger than itself, offset by a scroll position."""

from __future__ import annotations

from matgui.layout import LayoutOrientation, LinearLayout
from matgui.view import View

__all__ = ["ScrollView"]


class ScrollView(View):
    """A view wrapping a ``LinearLayout`` whose size is at least the view's own."""

    def __init__(self) -> None:
        self._layout = LinearLayout()
        self.scroll_width = 0.0
        self.scroll_height = 0.0
        self._scroll_x = 0.0
        self._scroll_y = 0.0
        super().__init__()

    @property
    def layout(self) -> LinearLayout:
        return self._layout

    @property
    def scroll_offset(self) -> tuple[float, float]:
        return (self._scroll_x, self._scroll_y)

    @property
    def orientation(self) -> LayoutOrientation:
        return self._layout.orientation

    @orientation.setter
    def orientation(self, value: LayoutOrientation) -> None:
        self._layout.orientation = value

    def refresh(self) -> None:
        super().refresh()
        self.scroll_width = max(self.width, self.scroll_width)
        self.scroll_height = max(self.height, self.scroll_height)
        self._layout.location(0, 0, self.scroll_width, self.scroll_height)

    def add_child(self, view: View | None) -> View | None:
        """Add ``view`` to the inner layout and return it."""
        return self._layout.add_child(view)

    def location(
        self, x: float, y: float, w: float, h: float, weight: float = 1
    ) -> None:
        """Size the inner layout to ``w`` by ``h`` at the origin."""
        self._layout.location(0, 0, w, h)

    def scroll_y(self, value: float) -> None:
        """Move the inner layout to the current vertical scroll position."""
        self._layout.y = self._scroll_y
        self._layout.refresh()

    def invalidate(self) -> None:
        self._layout.invalidate()

    def on_pointer_down(
        self, pointer_id: int, button: int, x: float, y: float
    ) -> bool:
        return self._layout.on_pointer_down(
            pointer_id, button, x - self._scroll_x, y - self._scroll_y
        )

    def on_pointer_up(self, pointer_id: int, button: int, x: float, y: float) -> bool:
        return self._layout.on_pointer_up(
            pointer_id, button, x - self._scroll_x, y - self._scroll_y
        )

    def on_pointer_move(self, pointer_id: int, x: float, y: float, state: int) -> bool:
        return self._layout.on_pointer_move(
            pointer_id, x - self._scroll_x, self.y - self._scroll_y, state
        )

    def on_pointer_enter(self, pointer_id: int, x: float, y: float, state: int) -> None:
        self._layout.on_pointer_enter(
            pointer_id, x - self._scroll_x, y - self._scroll_y, state
        )