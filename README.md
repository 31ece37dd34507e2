# matgui

The toolkit-independent core of a small GUI library. It has queued signals and a view tree that handles pointer, key and focus events. It also has linear layouts with weighted sizing, controller widgets (slider, toggle, push button, progress bar), a text entry, a scroll view and paint styles. Separate modules cover bitmap font data and a shader source translator.

## Install

```
pip install .
pip install ".[test]"   # with the test dependencies
```

## Signals (`matgui.signals`)

When a `Signal` is emitted, it queues the call. Nothing runs until `flush_signals()` is called, normally once per main-loop step. `flush_signals()` also marks the calling thread as the main thread, and `assert_main_thread()` raises `RuntimeError` when it is called from any other thread.

```python
from matgui.signals import Signal, flush_signals

changed = Signal()
changed.connect(lambda value: print("value", value), None)
changed.emit(23)
flush_signals()          # prints: value 23

answer = Signal()
answer.connect(lambda: 24, None)
assert answer.direct_call() == 24   # runs at once and returns the last result
```

- A callable that takes no positional arguments is called without the signal's arguments.
- If no reference is given, a bound method is identified by its object. Any other callable is identified by itself.
- `disconnect(reference)` removes the matching connections. `disconnect_all()` removes every connection, and `clear_queue()` drops pending calls.
- `Signal(only_save_last=True)` keeps only the latest queued arguments.
- A signal is true when something is connected to it.

## Views and layouts (`matgui.view`, `matgui.layout`)

`View` holds:

- its position and size;
- its size flags (`SizeFlag`);
- its styles: `style`, `hover_style`, `focus_style` and `current_style`;
- its event signals: `clicked`, `pointer_down`, `pointer_up`, `pointer_moved`, `pointer_enter`, `pointer_leave`, `scroll`, `focused`, `unfocused`, `key_down`, `key_up` and `text_input`.

A size of zero or less is read as a flag; a positive size is fixed.

`Layout` owns child views and passes pointer events on to the child under the pointer. `LinearLayout` places its children one after another.

```python
from matgui.layout import LinearLayout, LayoutOrientation
from matgui.view import View

row = LinearLayout()
row.orientation = LayoutOrientation.HORIZONTAL
left = row.add_child(View())
right = row.add_child(View())
row.location(0, 0, 200, 100, 0)   # children share the width by weight, with padding
```

Children can be looked up with `get_child(index)`, or with `get_child(name)`, which also searches nested layouts. They can be changed with `remove_child`, `add_child_after`, `replace_child` and `delete_all`.

## Window (`matgui.window`)

`Window` is a root `LinearLayout`. It does the following:

- tracks keyboard focus with `focus_view` and `unfocus_view`;
- sends key and text input to the focused view;
- records redraw requests in `invalid`;
- handles `on_resize` and emits `resized`.

`on_request_close()` calls `close_signal` directly and returns its last result.

## Widgets

- `matgui.controllers`: `ControllerView` holds a `value` clamped between `minimum` and `maximum`. `linear(minimum, maximum, step)` sets the range and step. `amount(v)` sets the value from a fraction between 0 and 1, snapped down to `step`.
- Built on `ControllerView`:
  - `SliderView` follows the pointer while it is pressed.
  - `ToggleView` flips between 0 and 1 on each press.
  - `PushControllerView` is 1 while pressed and 0 after release.
  - These three emit `changed` with the new value. `ProgressView` only holds a value and an `orientation`.
- `matgui.textentry`: `TextEntry` appends text input. Backspace erases a character, and ctrl+backspace erases the previous word. Return emits `submit`.
- `matgui.scrollview`: `ScrollView` wraps a `LinearLayout` at least as large as itself and passes pointer events on to it.

## Other modules

- `matgui.paint`: `Paint`, `ColorStyle`, `LineStyle`, `ShadowStyle` and `DrawStyle`. Pushing one style onto another replaces the lower style, unless the pushed style still has `inherit` set.
- `matgui.bitmapfont`: `BitmapFontData.from_text` reads glyph art made of `x` and space characters, where `l` marks the baseline row. `BitmapFont` turns that data into an RGBA pixel buffer.
- `matgui.shader_translate`: `translate_shader(source, shader_type=None)` rewrites desktop GLSL for GLSL ES 3.00. It:
  - swaps the version line for an ES header;
  - strips layout qualifiers and leading whitespace;
  - turns `texture2D` into `texture`.
- `matgui.mathutil`: `round_down` and `round_middle`.
- `matgui.keys`: `Keys`, the scancode constants.

## What this package does not do

It does not open operating-system windows, draw anything, render fonts, load textures or compile shaders, and it has no application main loop. Views keep their geometry, styles and state, but no code paints them. A program that wants to show them on screen must call the event handlers itself and call `flush_signals()` regularly.