import pytest

from matgui.controllers import (
    ControllerView,
    ProgressOrientation,
    ProgressView,
    PushControllerView,
    SliderView,
    ToggleView,
)
from matgui.mathutil import round_down
from matgui.signals import flush_signals


def _collect(signal):
    received = []
    signal.connect(received.append)
    return received


def test_defaults():
    view = ControllerView()
    assert view.value == 0.0
    assert view.minimum == 0.0
    assert view.maximum == 1.0
    assert view.step == 0.0


def test_element_and_controller_ids():
    view = ControllerView(3, 7)
    assert (view.element_id, view.controller_id) == (3, 7)


def test_value_is_clamped():
    view = ControllerView().linear(-2, 10)
    view.value = 50
    assert view.value == 10
    view.value = -50
    assert view.value == -2


def test_amount_clamps_to_range():
    view = ControllerView().linear(2, 10)
    view.amount(3)
    assert view.value == 10
    view.amount(-1)
    assert view.value == 2


def test_amount_is_monotonic():
    view = ControllerView().linear(0, 10)
    values = []
    for fraction in (0.1, 0.4, 0.7, 0.9):
        view.amount(fraction)
        values.append(view.value)
    assert values == sorted(values)
    assert all(0 <= v <= 10 for v in values)


def test_amount_snaps_to_step():
    view = ControllerView().linear(0, 10, 3)
    view.amount(0.5)
    assert view.value == round_down(5.0, 3)
    assert view.value % 3 == 0


def test_amount_returns_self():
    view = ControllerView()
    assert view.amount(0.2) is view
    assert view.linear(0, 1) is view


def test_changed_keeps_only_last():
    view = ControllerView()
    received = _collect(view.changed)
    view.changed.emit(1.0)
    view.changed.emit(2.0)
    flush_signals()
    assert received == [2.0]


def test_slider_move_to_top_gives_maximum():
    slider = SliderView().linear(0, 4)
    slider.height = 100
    assert slider.on_pointer_move(0, 0, 5, 1) is True
    assert slider.value == 4


def test_slider_move_to_bottom_gives_minimum():
    slider = SliderView().linear(0, 4)
    slider.height = 100
    slider.value = 2
    slider.on_pointer_move(0, 0, 100, 1)
    assert slider.value == 0


def test_slider_move_without_state_ignored():
    slider = SliderView()
    slider.height = 100
    slider.value = 0.5
    assert slider.on_pointer_move(0, 0, 5, 0) is False
    assert slider.value == 0.5


def test_slider_pointer_down_emits_changed():
    slider = SliderView()
    slider.height = 100
    received = _collect(slider.changed)
    assert slider.on_pointer_down(0, 1, 0, 5) is True
    flush_signals()
    assert received == [slider.maximum]


def test_slider_pointer_up_keeps_value():
    slider = SliderView()
    slider.value = 0.25
    assert slider.on_pointer_up(0, 1, 0, 0) is True
    assert slider.value == 0.25


def test_toggle_flips_value():
    toggle = ToggleView()
    received = _collect(toggle.changed)
    toggle.on_pointer_down(0, 1, 0, 0)
    assert toggle.value == 1.0
    flush_signals()
    toggle.on_pointer_down(0, 1, 0, 0)
    assert toggle.value == 0.0
    flush_signals()
    assert received == [1.0, 0.0]


def test_toggle_pointer_up_does_not_flip():
    toggle = ToggleView()
    toggle.on_pointer_up(0, 1, 0, 0)
    assert toggle.value == 0.0


def test_toggle_styles():
    toggle = ToggleView()
    assert toggle.style.line.a == pytest.approx(0.3)
    assert toggle.indicator_style.fill.a == pytest.approx(0.5)
    assert toggle.current_style.line.a == pytest.approx(0.3)


def test_push_controller_press_and_release():
    push = PushControllerView()
    received = _collect(push.changed)
    push.on_pointer_down(0, 1, 0, 0)
    assert push.value == 1.0
    flush_signals()
    push.on_pointer_up(0, 1, 0, 0)
    assert push.value == 0.0
    flush_signals()
    assert received == [1.0, 0.0]


def test_progress_defaults():
    progress = ProgressView()
    assert progress.orientation is ProgressOrientation.HORIZONTAL
    assert progress.indicator_style.fill.a == pytest.approx(0.5)
    progress.orientation = ProgressOrientation.VERTICAL
    assert progress.orientation is ProgressOrientation.VERTICAL