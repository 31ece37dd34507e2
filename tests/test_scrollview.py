from matgui.layout import LayoutOrientation
from matgui.scrollview import ScrollView
from matgui.signals import flush_signals
from matgui.view import MouseButton, View


def test_add_child_goes_to_layout():
    scroll = ScrollView()
    child = View()
    assert scroll.add_child(child) is child
    assert child.parent is scroll.layout
    assert list(scroll.layout) == [child]


def test_add_none_returns_none():
    scroll = ScrollView()
    assert scroll.add_child(None) is None
    assert len(scroll.layout) == 0


def test_location_sizes_layout():
    scroll = ScrollView()
    scroll.location(10, 20, 100, 200)
    assert scroll.layout.x == 0
    assert scroll.layout.y == 0
    assert scroll.layout.width == 100
    assert scroll.layout.height == 200


def test_refresh_uses_larger_of_view_and_scroll_size():
    scroll = ScrollView()
    scroll.width = 50
    scroll.height = 80
    scroll.scroll_height = 300
    scroll.refresh()
    assert scroll.scroll_width == 50
    assert scroll.scroll_height == 300
    assert scroll.layout.width == 50
    assert scroll.layout.height == 300


def test_orientation_forwards_to_layout():
    scroll = ScrollView()
    scroll.orientation = LayoutOrientation.HORIZONTAL
    assert scroll.layout.orientation == LayoutOrientation.HORIZONTAL
    assert scroll.orientation == LayoutOrientation.HORIZONTAL


def test_pointer_down_reaches_child_in_local_coordinates():
    scroll = ScrollView()
    scroll.location(0, 0, 100, 200)
    child = View()
    scroll.add_child(child)
    received = []
    child.pointer_down.connect(received.append)
    assert scroll.on_pointer_down(0, MouseButton.LEFT, 10, 10) is True
    flush_signals()
    assert len(received) == 1
    assert received[0].x == 10 - child.x
    assert received[0].y == 10 - child.y


def test_pointer_up_inside_child_clicks_it():
    scroll = ScrollView()
    scroll.location(0, 0, 100, 200)
    child = View()
    scroll.add_child(child)
    clicks = []
    child.clicked.connect(clicks.append)
    assert scroll.on_pointer_up(0, MouseButton.LEFT, 20, 20) is True
    flush_signals()
    assert [c.state for c in clicks] == [int(MouseButton.LEFT)]


def test_scroll_y_keeps_layout_at_scroll_position():
    scroll = ScrollView()
    scroll.location(0, 0, 100, 200)
    scroll.scroll_y(30)
    assert scroll.layout.y == scroll.scroll_offset[1]
    assert scroll.scroll_offset == (0.0, 0.0)