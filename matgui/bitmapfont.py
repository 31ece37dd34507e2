"""Bitmap glyph data written as text, and RGBA pixel buffers built from it."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["ColorType", "BitmapFontData", "BitmapFont"]


@dataclass(frozen=True)
class ColorType:
    """One RGBA pixel with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int


@dataclass
class BitmapFontData:
    """A grid of characters describing a glyph: 'x' is ink, ' ' is empty.

    An 'l' in the text marks the baseline row and is stored as empty.
    """

    cells: list[str] = field(default_factory=list)
    width: int = 0
    height: int = 0
    line_height: int = 0
    line_depth: int = 0
    line_pos: int = 0

    @classmethod
    def from_text(cls, data: str) -> BitmapFontData:
        """Build glyph data from rows of text separated by newlines."""
        data = data.split("\0", 1)[0]
        width = 0
        w = 0
        h = 1
        for char in data:
            if char == "\n":
                h += 1
                width = max(width, w)
                w = 0
            w += 1

        font = cls(width=width, height=h)
        font.cells = [" "] * (width * h)

        x = 0
        y = 0
        for char in data:
            if char == "\n":
                x = 0
                y += 1
            elif char == "l":
                font[x, y] = " "
                font.line_pos = y
                x += 1
            else:
                font[x, y] = char
                x += 1
        font.line_height = font.line_pos
        font.line_depth = font.height - font.line_pos
        return font

    def set_dimensions(self, width: int, height: int) -> None:
        """Resize the grid, keeping existing cells and padding with NUL."""
        self.width = width
        self.height = height
        size = width * height
        if size < len(self.cells):
            del self.cells[size:]
        else:
            self.cells.extend("\0" * (size - len(self.cells)))

    def _index(self, x: int, y: int) -> int:
        index = x + y * self.width
        if not 0 <= index < len(self.cells):
            raise IndexError(f"cell ({x}, {y}) is outside the glyph data")
        return index

    def get(self, x: int, y: int) -> str:
        """Return the character at column ``x`` and row ``y``."""
        return self.cells[self._index(x, y)]

    def __getitem__(self, position: tuple[int, int]) -> str:
        x, y = position
        return self.get(x, y)

    def __setitem__(self, position: tuple[int, int], value: str) -> None:
        x, y = position
        self.cells[self._index(x, y)] = value

    def __len__(self) -> int:
        return len(self.cells)

    def fill(self, value: str = " ") -> None:
        """Set every cell to ``value``."""
        self.cells[:] = [value] * len(self.cells)


_INK = b"\xff\xff\xff\xff"
_EMPTY = b"\x00\x00\x00\x00"


class BitmapFont:
    """An RGBA pixel buffer rendered from glyph data."""

    def __init__(self, data: BitmapFontData | None = None) -> None:
        self.w = 0
        self.h = 0
        self.line_height = 0
        self.pixels = bytearray()
        if data is not None:
            self.set_content(data)

    def clear(self) -> None:
        """Drop the pixel buffer."""
        self.pixels.clear()

    def create(self, width: int, height: int) -> None:
        """Allocate a transparent buffer of ``width`` by ``height`` pixels."""
        self.clear()
        self.w = width
        self.h = height
        self.pixels = bytearray(width * height * 4)

    def set_content(self, data: BitmapFontData) -> None:
        """Render glyph data: 'x' becomes opaque white, ' ' transparent black."""
        self.line_height = data.line_height
        size = data.width * data.height
        if data.width != self.w or data.height != self.h or len(self.pixels) != size * 4:
            self.create(data.width, data.height)

        for index, char in enumerate(data.cells[:size]):
            start = index * 4
            if char == "x":
                self.pixels[start : start + 4] = _INK
            elif char == " ":
                self.pixels[start : start + 4] = _EMPTY

    def colors(self) -> list[ColorType]:
        """Return a snapshot of the buffer as a list of pixels."""
        channels = iter(self.pixels)
        return [ColorType(*quad) for quad in zip(channels, channels, channels, channels)]