"""Views that hold a numeric value: sliders, toggles, push buttons and progress bars."""

from __future__ import annotations

import enum

from matgui.mathutil import round_down
from matgui.paint import Paint
from matgui.signals import Signal
from matgui.view import View

__all__ = [
    "ControllerView",
    "SliderView",
    "ToggleView",
    "PushControllerView",
    "ProgressOrientation",
    "ProgressView",
]

_MIDDLE_WIDTH = 0.1
_HANDLE_HEIGHT = 0.1


class ControllerView(View):
    """A view with a value kept between ``minimum`` and ``maximum``.

    ``changed`` only keeps the latest queued value.
    """

    def __init__(self, element: int = -1, controller: int = -1) -> None:
        super().__init__()
        self.changed = Signal(only_save_last=True)
        self._value = 0.0
        self.minimum = 0.0
        self.maximum = 1.0
        self.step = 0.0
        self.element_id = element
        self.controller_id = controller

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, v: float) -> None:
        v = min(max(float(v), self.minimum), self.maximum)
        if v != self._value:
            self._value = v
            self.invalidate()

    def amount(self, v: float) -> ControllerView:
        """Set the value from a fraction 0..1 of the range, snapped to ``step``."""
        v = min(max(float(v), 0.0), 1.0)
        new_value = self.minimum + v * (self.maximum - self.minimum)
        if self.step:
            new_value = round_down(new_value, self.step)
        self.value = new_value
        return self

    def linear(
        self, minimum: float, maximum: float, step: float = 0
    ) -> ControllerView:
        """Set the range and step; a step of zero means no snapping."""
        self.minimum = float(minimum)
        self.maximum = float(maximum)
        self.step = float(step)
        return self


class SliderView(ControllerView):
    """A vertical slider whose handle follows the pointer while pressed."""

    def __init__(self, element: int = -1, controller: int = -1) -> None:
        super().__init__(element, controller)
        self.indicator_style = Paint()
        self.indicator_style.fill.color(1, 1, 1, 0.5)

    def on_pointer_down(
        self, pointer_id: int, button: int, x: float, y: float
    ) -> bool:
        self.on_pointer_move(pointer_id, x, y, int(button))
        return True

    def on_pointer_up(self, pointer_id: int, button: int, x: float, y: float) -> bool:
        return True

    def on_pointer_move(self, pointer_id: int, x: float, y: float, state: int) -> bool:
        if not state:
            return False
        track = self.height * (1 - _HANDLE_HEIGHT)
        if track:
            self.amount(1.0 - (y - self.height * _HANDLE_HEIGHT / 2.0) / track)
        self.changed.emit(self.value)
        return True


class ToggleView(ControllerView):
    """A switch that flips between 0 and 1 on each press."""

    def __init__(self, element: int = -1, controller: int = -1) -> None:
        super().__init__(element, controller)
        self.indicator_style = Paint()
        self.indicator_style.fill.color(1, 1, 1, 0.5)
        self.hover_style.fill.color(1, 1, 1, 0.1)
        self.focus_style.line.color(1, 1, 1, 0.8)
        self.style.line.color(1, 1, 1, 0.3)
        self.update_style()

    def on_pointer_down(
        self, pointer_id: int, button: int, x: float, y: float
    ) -> bool:
        self.on_pointer_move(pointer_id, x, y, int(button))
        self.value = 0.0 if self.value else 1.0
        self.changed.emit(self.value)
        return True

    def on_pointer_up(self, pointer_id: int, button: int, x: float, y: float) -> bool:
        self.on_pointer_move(pointer_id, x, y, int(button))
        return True


class PushControllerView(ControllerView):
    """A button that is 1 while pressed and 0 when released."""

    def __init__(self, element: int = -1, controller: int = -1) -> None:
        super().__init__(element, controller)
        self.indicator_style = Paint()

    def on_pointer_down(
        self, pointer_id: int, button: int, x: float, y: float
    ) -> bool:
        self.on_pointer_move(pointer_id, x, y, 1)
        self.value = 1
        self.changed.emit(self.value)
        return True

    def on_pointer_up(self, pointer_id: int, button: int, x: float, y: float) -> bool:
        self.on_pointer_move(pointer_id, x, y, 1)
        self.value = 0
        self.changed.emit(self.value)
        return True


class ProgressOrientation(enum.Enum):
    HORIZONTAL = 0
    VERTICAL = 1


class ProgressView(ControllerView):
    """A bar showing how far the value is through its range."""

    def __init__(self, element: int = -1, controller: int = -1) -> None:
        super().__init__(element, controller)
        self.indicator_style = Paint()
        self.indicator_style.fill.color(1, 1, 1, 0.5)
        self.style.line.color(1, 1, 1, 0.3)
        self.update_style()
        self.orientation = ProgressOrientation.HORIZONTAL