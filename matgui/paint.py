"""Colour, line and shadow styles combined into a paint for drawing views."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

__all__ = ["DrawStyle", "ColorStyle", "LineStyle", "ShadowStyle", "Paint"]


class DrawStyle(enum.IntFlag):
    """How a shape is drawn; values can be combined."""

    NONE = 0
    FILLED = 1
    LINES = 2
    ORIGO_TOP_LEFT = 0
    CENTER_ORIGO = 4
    INHERIT = 1024


class ColorStyle:
    """An RGBA colour with a draw style and an inherit flag.

    A style that still has ``inherit`` set is ignored when pushed onto
    another style; setting a colour or a style clears the flag.
    """

    def __init__(
        self,
        red: float | None = None,
        green: float = 0.0,
        blue: float = 0.0,
        alpha: float = 1.0,
    ) -> None:
        self.r = 0.0
        self.g = 0.0
        self.b = 0.0
        self.a = 1.0
        self.inherit = True
        self._style = DrawStyle.FILLED
        if red is not None:
            self.color(red, green, blue, alpha)

    def color(
        self, red: float, green: float, blue: float, alpha: float = 1.0
    ) -> ColorStyle:
        """Set the colour and clear the inherit flag."""
        self.r = float(red)
        self.g = float(green)
        self.b = float(blue)
        self.a = float(alpha)
        if self._style == DrawStyle.NONE:
            self._style = DrawStyle.FILLED
        self.inherit = False
        return self

    def color_hex(self, value: int, alpha: float = 1.0) -> ColorStyle:
        """Set the colour from a 0xRRGGBBxx integer and clear the inherit flag."""
        return self.color(
            ((value & 0xFF000000) >> 24) / 255.0,
            ((value & 0x00FF0000) >> 16) / 255.0,
            ((value & 0x0000FF00) >> 8) / 255.0,
            alpha,
        )

    def set_style(self, value: DrawStyle) -> ColorStyle:
        """Set the draw style and clear the inherit flag."""
        self._style = DrawStyle(value)
        self.inherit = False
        return self

    @property
    def style(self) -> DrawStyle:
        return self._style

    def __bool__(self) -> bool:
        return self._style != DrawStyle.NONE

    def _assign(self, other: ColorStyle) -> None:
        self.r = other.r
        self.g = other.g
        self.b = other.b
        self.a = other.a
        self.inherit = other.inherit
        self._style = other._style

    def __iadd__(self, other: ColorStyle) -> ColorStyle:
        if not other.inherit:
            self._assign(other)
        return self

    def _key(self) -> tuple:
        return (self.r, self.g, self.b, self.a, self.inherit, self._style)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorStyle) or type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(r={self.r}, g={self.g}, b={self.b}, "
            f"a={self.a}, style={self._style!r}, inherit={self.inherit})"
        )


class LineStyle(ColorStyle):
    """A colour style for outlines, with a line width."""

    def __init__(
        self,
        red: float | None = None,
        green: float = 0.0,
        blue: float = 0.0,
        alpha: float = 1.0,
    ) -> None:
        super().__init__(red, green, blue, alpha)
        self._width = 1.0

    @property
    def width(self) -> float:
        return self._width

    @width.setter
    def width(self, value: float) -> None:
        self._width = float(value)
        self.inherit = False

    def _key(self) -> tuple:
        return super()._key() + (self._width,)


class ShadowStyle(ColorStyle):
    """A colour style for shadows, with a size and an offset."""

    def __init__(
        self,
        red: float | None = None,
        green: float = 0.0,
        blue: float = 0.0,
        alpha: float = 1.0,
    ) -> None:
        super().__init__(red, green, blue, alpha)
        self._offset: tuple[float, float] = (0.0, 0.0)
        self._size: tuple[float, float] = (0.0, 0.0)

    @property
    def size(self) -> tuple[float, float]:
        return self._size

    @size.setter
    def size(self, value: tuple[float, float]) -> None:
        x, y = value
        self._size = (float(x), float(y))
        self.inherit = False

    @property
    def offset(self) -> tuple[float, float]:
        return self._offset

    @offset.setter
    def offset(self, value: tuple[float, float]) -> None:
        x, y = value
        self._offset = (float(x), float(y))
        self.inherit = False

    def _key(self) -> tuple:
        return super()._key() + (self._offset, self._size)


def _no_fill() -> ColorStyle:
    return ColorStyle().set_style(DrawStyle.NONE)


@dataclass
class Paint:
    """A fill, line and shadow style that can be layered onto another paint."""

    fill: ColorStyle = field(default_factory=_no_fill)
    line: LineStyle = field(default_factory=LineStyle)
    shadow: ShadowStyle = field(default_factory=ShadowStyle)
    enabled: bool = True

    def push(self, other: Paint) -> None:
        """Layer the non-inheriting fill and line of an enabled paint onto this one."""
        if not other.enabled:
            return
        self.fill += other.fill
        self.line += other.line

    def __iadd__(self, other: Paint) -> Paint:
        self.push(other)
        return self