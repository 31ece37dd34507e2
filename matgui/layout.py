"""Layouts that own child views, size them by flags and weights, and route pointer events."""

from __future__ import annotations

import enum
from collections.abc import Iterator

from matgui.view import SizeFlag, View

__all__ = ["LayoutOrientation", "Layout", "LinearLayout"]


class LayoutOrientation(enum.Enum):
    HORIZONTAL = 0
    VERTICAL = 1


class Layout(View):
    """A view holding child views in order."""

    def __init__(self) -> None:
        self.children: list[View] = []
        self.pointer_focused_child: View | None = None
        self._orientation = LayoutOrientation.VERTICAL
        self._padding = 4.0
        super().__init__()
        self.focusable = False

    def __iter__(self) -> Iterator[View]:
        return iter(list(self.children))

    def __len__(self) -> int:
        return len(self.children)

    @property
    def orientation(self) -> LayoutOrientation:
        return self._orientation

    @orientation.setter
    def orientation(self, value: LayoutOrientation) -> None:
        if value != self._orientation:
            self._orientation = value
            self.refresh()
            self.refresh_children()

    @property
    def padding(self) -> float:
        return self._padding

    @padding.setter
    def padding(self, value: float) -> None:
        self._padding = float(value)
        self.refresh()

    def refresh_children(self) -> None:
        for child in list(self.children):
            child.refresh()

    def add_child(self, view: View | None) -> View | None:
        """Add ``view`` last, lay out again and return it."""
        if view is None:
            return None
        view.parent = self
        self.children.append(view)
        self.refresh()
        self.refresh_children()
        return view

    def add_child_after(self, view: View, after: View | None) -> None:
        """Insert ``view`` after ``after``, or last if ``after`` is not a child."""
        view.parent = self
        for index, child in enumerate(self.children):
            if child is after:
                self.children.insert(index + 1, view)
                return
        self.children.append(view)

    def calculate_weights(self) -> None:
        """Share the space left by sized children among weighted ones."""
        rest_width = self.width
        rest_height = self.height
        total_x_weight = 0.0
        total_y_weight = 0.0
        for child in self.children:
            if child.width_flags == SizeFlag.WEIGHTED:
                total_x_weight += child.weight
            else:
                rest_width -= child.width
            if child.height_flags == SizeFlag.WEIGHTED:
                total_y_weight += child.weight
            else:
                rest_height -= child.height
        correction = self._padding * (len(self.children) + 1)
        rest_height -= correction
        rest_width -= correction

        for child in self.children:
            if self._orientation == LayoutOrientation.HORIZONTAL:
                if child.width_flags == SizeFlag.WEIGHTED and total_x_weight:
                    child.width = rest_width * child.weight / total_x_weight
            else:
                child.width = self.width - self._padding * 2
            if self._orientation == LayoutOrientation.VERTICAL:
                if child.height_flags == SizeFlag.WEIGHTED and total_y_weight:
                    child.height = rest_height * child.weight / total_y_weight
            else:
                child.height = self.height - self._padding * 2

    def refresh(self) -> None:
        weighted = False
        for child in self.children:
            if child.width_flags == SizeFlag.MATCH_PARENT:
                child.width = self.width
            elif child.width_flags == SizeFlag.WEIGHTED:
                weighted = True
            if child.height_flags == SizeFlag.MATCH_PARENT:
                child.height = self.height
            elif child.height_flags == SizeFlag.WEIGHTED:
                weighted = True
        if weighted:
            self.calculate_weights()

    def location(
        self, x: float, y: float, w: float, h: float, weight: float = 0
    ) -> None:
        super().location(x, y, w, h, weight)
        self.refresh()
        self.refresh_children()

    def remove_child(self, view: View | None) -> View | None:
        """Detach ``view`` and return it, or None if it is not a child."""
        if view is None:
            return None
        if view is self.pointer_focused_child:
            self.pointer_focused_child = None
        for index, child in enumerate(self.children):
            if child is view:
                view.unfocus()
                view.parent = None
                del self.children[index]
                self.refresh()
                self.refresh_children()
                return view
        return None

    def delete_all(self) -> None:
        """Detach every child."""
        for child in self.children:
            if child.parent is self:
                child.parent = None
        self.children.clear()
        self.pointer_focused_child = None
        self.refresh()

    def get_child(self, key: int | str) -> View | None:
        """Return a child by index, or by name searching nested layouts too."""
        if isinstance(key, int):
            if 0 <= key < len(self.children):
                return self.children[key]
            return None
        if isinstance(key, str):
            for child in self.children:
                if child.name and child.name == key:
                    return child
            for child in self.children:
                if isinstance(child, Layout):
                    found = child.get_child(key)
                    if found is not None:
                        return found
            return None
        raise TypeError(f"child key must be int or str, not {type(key).__name__}")

    def replace_child(self, index: int, view: View) -> None:
        """Put ``view`` in place of the child at ``index``; out of range is ignored."""
        if not 0 <= index < len(self.children):
            return
        old = self.children[index]
        self.children[index] = view
        if old is self.pointer_focused_child:
            self.pointer_focused_child = None
        if old.parent is self:
            old.parent = None

    def on_pointer_down(
        self, pointer_id: int, button: int, x: float, y: float
    ) -> bool:
        wx = x + self.x
        wy = y + self.y
        for child in list(self.children):
            if child.is_pointer_inside(wx, wy) and child.on_pointer_down(
                pointer_id, button, wx - child.x, wy - child.y
            ):
                return True
        return super().on_pointer_down(pointer_id, button, x, y)

    def on_pointer_up(self, pointer_id: int, button: int, x: float, y: float) -> bool:
        wx = x + self.x
        wy = y + self.y
        focused = self.pointer_focused_child
        if focused is not None and not focused.is_pointer_inside(wx, wy):
            focused.on_pointer_leave()
            self.pointer_focused_child = None
            return True
        for child in list(self.children):
            if child.is_pointer_inside(wx, wy) and child.on_pointer_up(
                pointer_id, button, wx - child.x, wy - child.y
            ):
                return True
        return super().on_pointer_up(pointer_id, button, x, y)

    def _enter_child(
        self, child: View, pointer_id: int, wx: float, wy: float, state: int
    ) -> None:
        if self.pointer_focused_child is not None:
            self.pointer_focused_child.on_pointer_leave()
        self.pointer_focused_child = child
        child.on_pointer_enter(pointer_id, wx - child.x, wy - child.y, state)

    def on_pointer_move(self, pointer_id: int, x: float, y: float, state: int) -> bool:
        wx = x + self.x
        wy = y + self.y
        focused = self.pointer_focused_child
        if state and focused is not None:
            return focused.on_pointer_move(
                pointer_id, wx - focused.x, wy - focused.y, state
            )
        for child in list(self.children):
            if child.is_pointer_inside(wx, wy):
                if child is not self.pointer_focused_child:
                    self._enter_child(child, pointer_id, wx, wy, state)
                if child.on_pointer_move(
                    pointer_id, wx - child.x, wy - child.y, state
                ):
                    return True
        focused = self.pointer_focused_child
        if focused is not None and not focused.is_pointer_inside(wx, wy):
            focused.on_pointer_leave()
            self.pointer_focused_child = None
        return super().on_pointer_move(pointer_id, x, y, state)

    def on_pointer_enter(self, pointer_id: int, x: float, y: float, state: int) -> None:
        wx = x + self.x
        wy = y + self.y
        for child in list(self.children):
            if child.is_pointer_inside(wx, wy) and child is not self.pointer_focused_child:
                self._enter_child(child, pointer_id, wx, wy, state)
                return
        super().on_pointer_enter(pointer_id, x, y, state)

    def on_pointer_leave(self) -> None:
        if self.pointer_focused_child is not None:
            self.pointer_focused_child.on_pointer_leave()
            self.pointer_focused_child = None
        super().on_pointer_leave()


class LinearLayout(Layout):
    """A layout that places its children one after another."""

    def refresh(self) -> None:
        super().refresh()
        if self._orientation == LayoutOrientation.HORIZONTAL:
            position = self.x + self._padding
            for child in list(self.children):
                child.x = position
                position += child.width + self._padding
                child.y = self.y + self._padding
                child.refresh()
        else:
            position = self.y + self._padding
            for child in list(self.children):
                child.y = position
                position += child.height + self._padding
                child.x = self.x + self._padding
                child.refresh()