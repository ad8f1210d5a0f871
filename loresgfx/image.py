"""Image interface and the two in-memory pixel stores (RGBA and paletted)."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from typing import ClassVar

from PIL import Image as _PILImage

from .colour import Colour, ColourIndex
from .palette import TRANSPARENT_INDEX, Palette


class Image(ABC):
    """A rectangle of colours that can be read, written and resized."""

    @abstractmethod
    def set_size(self, w: int, h: int) -> None:
        """Resize the image, as an alternative to loading it from a file."""

    @abstractmethod
    def load(self, png_file_name: str) -> None:
        """Load a PNG image; raises OSError if it cannot be read."""

    @abstractmethod
    def set_colour(self, x: int, y: int, c: Colour) -> None:
        """Set the colour at (x, y)."""

    @abstractmethod
    def get_colour(self, x: int, y: int) -> Colour:
        """Return the colour at (x, y)."""

    @abstractmethod
    def clear(self, c: Colour) -> None:
        """Set every pixel to c."""

    @property
    @abstractmethod
    def width(self) -> int:
        """Width in pixels."""

    @property
    @abstractmethod
    def height(self) -> int:
        """Height in pixels."""


class _PixelGrid(Image):
    """Image stored as a byte array of `channels` bytes per pixel."""

    channels: ClassVar[int] = 1

    def __init__(self, w: int = 0, h: int = 0) -> None:
        self._data = bytearray()
        self._width = 0
        self._height = 0
        self.set_size(w, h)

    def set_size(self, w: int, h: int) -> None:
        if w < 0 or h < 0:
            raise ValueError(f"invalid image size {w}x{h}")
        size = w * h * self.channels
        if size < len(self._data):
            del self._data[size:]
        else:
            self._data.extend(bytes(size - len(self._data)))
        self._width = w
        self._height = h

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) outside {self._width}x{self._height} image")
        return self.channels * (y * self._width + x)

    @staticmethod
    def _read_rgba(png_file_name: str) -> tuple[int, int, bytes]:
        with _PILImage.open(png_file_name) as pic:
            rgba = pic.convert("RGBA")
            w, h = rgba.size
            return w, h, rgba.tobytes()


class Image32(_PixelGrid):
    """Image stored as 32-bit RGBA values."""

    channels = 4

    def set_size(self, w: int, h: int) -> None:
        super().set_size(w, h)

    def load(self, png_file_name: str) -> None:
        w, h, raw = self._read_rgba(png_file_name)
        self._data = bytearray(raw)
        self._width = w
        self._height = h

    def save(self, png_file_name: str) -> None:
        """Write the image as a PNG file."""
        if self._width == 0 or self._height == 0:
            raise ValueError("cannot save an empty image")
        pic = _PILImage.frombytes("RGBA", (self._width, self._height), bytes(self._data))
        pic.save(png_file_name, format="PNG")

    def get_colour(self, x: int, y: int) -> Colour:
        i = self._index(x, y)
        return Colour(*self._data[i : i + 4])

    def set_colour(self, x: int, y: int, c: Colour) -> None:
        i = self._index(x, y)
        self._data[i : i + 4] = bytes((c.r, c.g, c.b, c.a))

    def clear(self, c: Colour) -> None:
        self._data[:] = bytes((c.r, c.g, c.b, c.a)) * (self._width * self._height)

    @property
    def data(self) -> bytes:
        """Raw RGBA bytes, row by row."""
        return bytes(self._data)


class Image8(_PixelGrid):
    """Image stored as 8-bit indices into a palette shared by all Image8s."""

    channels = 1
    TRANSPARENT: ClassVar[ColourIndex] = TRANSPARENT_INDEX
    palette: ClassVar[Palette] = Palette()

    _TRANSPARENT_LIMIT = 128
    _MAGENTA = (255, 0, 255)

    def set_size(self, w: int, h: int) -> None:
        super().set_size(w, h)

    def load(self, png_file_name: str) -> None:
        """Load a PNG, adding its colours to the shared palette."""
        w, h, raw = self._read_rgba(png_file_name)
        indices = bytearray()
        for r, g, b, a in struct.iter_unpack("4B", raw):
            if a < self._TRANSPARENT_LIMIT or (r, g, b) == self._MAGENTA:
                indices.append(self.TRANSPARENT)
                continue
            index = self.palette.add_colour(Colour(r, g, b))
            if index > 0xFF:
                raise ValueError("palette is full: more than 256 colours")
            indices.append(index)
        self._data = indices
        self._width = w
        self._height = h

    def set_colour(self, x: int, y: int, c: Colour) -> None:
        self._data[self._index(x, y)] = self.palette.get_index(c)

    def get_colour(self, x: int, y: int) -> Colour:
        return self.palette.get_colour(self._data[self._index(x, y)])

    def clear(self, c: Colour) -> None:
        index = self.palette.get_index(c)
        self._data[:] = bytes((index,)) * len(self._data)