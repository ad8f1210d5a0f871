"""Sprite sheets, animated sprites, bitmap fonts and double buffering."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from itertools import product
from typing import Optional

from .blend import Blender, blit_region, overwrite
from .colour import Colour, zero_alpha
from .image import Image


class PixIntResult(Enum):
    """Result of a pixel-perfect intersection test."""

    YES_COLLIDE = "yes_collide"
    NO_AND_DISJOINT = "no_and_disjoint"
    NO_AND_NOT_DISJOINT = "no_and_not_disjoint"


class SpriteSheet:
    """An image divided into a grid of equally sized cells."""

    def __init__(self, image: Optional[Image] = None) -> None:
        self.image = image
        self.cells_x = 1
        self.cells_y = 1
        self.cell_w = 1
        self.cell_h = 1

    @property
    def num_cells(self) -> int:
        return self.cells_x * self.cells_y

    def _require_image(self) -> Image:
        if self.image is None:
            raise ValueError("sprite sheet has no image; set the image first")
        return self.image

    def cell_origin(self, cell: int) -> tuple[int, int]:
        """Top-left pixel of the given cell on the sheet image."""
        if not 0 <= cell < self.num_cells:
            raise IndexError(f"cell {cell} out of range 0..{self.num_cells - 1}")
        return (cell % self.cells_x * self.cell_w, cell // self.cells_x * self.cell_h)

    def draw_cell(
        self, dest: Image, cell: int, dest_x: int, dest_y: int, blender: Blender = overwrite
    ) -> None:
        """Blend one cell of the sheet onto dest at (dest_x, dest_y)."""
        cell_x, cell_y = self.cell_origin(cell)
        blit_region(
            self._require_image(), dest, dest_x, dest_y,
            cell_x, cell_y, self.cell_w, self.cell_h, blender,
        )

    def draw_into_cell(self, src: Image, cell: int, blender: Blender = overwrite) -> None:
        """Blend the top-left cell-sized region of src into the given cell."""
        cell_x, cell_y = self.cell_origin(cell)
        blit_region(
            src, self._require_image(), cell_x, cell_y,
            0, 0, self.cell_w, self.cell_h, blender,
        )

    def set_num_cells(self, x: int, y: int) -> None:
        """Divide the image into x by y cells."""
        self._require_image()
        if x <= 0 or y <= 0:
            raise ValueError(f"invalid cell grid {x}x{y}")
        self.cells_x = x
        self.cells_y = y
        self.recalc_cell_size()

    def recalc_cell_size(self) -> None:
        """Recompute the cell size from the image size and the cell grid."""
        image = self._require_image()
        self.cell_w = image.width // self.cells_x
        self.cell_h = image.height // self.cells_y


def pixel_intersect(
    ss1: SpriteSheet,
    cell1: int,
    x1: int,
    y1: int,
    ss2: SpriteSheet,
    cell2: int,
    x2: int,
    y2: int,
    is_transparent: Callable[[Colour], bool] = zero_alpha,
) -> PixIntResult:
    """Test whether two placed sprite cells have an overlapping pair of opaque pixels."""
    w1, h1 = ss1.cell_w, ss1.cell_h
    w2, h2 = ss2.cell_w, ss2.cell_h

    xmin = max(x1, x2)
    xmax = min(x1 + w1, x2 + w2)
    ymin = max(y1, y2)
    ymax = min(y1 + h1, y2 + h2)

    if xmin >= xmax or ymin >= ymax:
        return PixIntResult.NO_AND_DISJOINT

    cell_x1, cell_y1 = ss1.cell_origin(cell1)
    cell_x2, cell_y2 = ss2.cell_origin(cell2)
    image1 = ss1._require_image()
    image2 = ss2._require_image()

    for x, y in product(range(xmin, xmax), range(ymin, ymax)):
        c1 = image1.get_colour(cell_x1 + x - x1, cell_y1 + y - y1)
        c2 = image2.get_colour(cell_x2 + x - x2, cell_y2 + y - y2)
        if not is_transparent(c1) and not is_transparent(c2):
            return PixIntResult.YES_COLLIDE
    return PixIntResult.NO_AND_NOT_DISJOINT


@dataclass
class Sprite:
    """An animation running through a range of cells on a sprite sheet.

    cell_time is how long each cell is shown. In bounce mode the direction
    reverses at either end of the range; otherwise the animation wraps.
    """

    sprite_sheet: SpriteSheet = field(default_factory=SpriteSheet)
    cell: int = 0
    cell_time: float = 0.1
    min_cell: int = 0
    max_cell: int = 0
    cell_dir: int = 1
    bounce_mode: bool = False
    _elapsed: float = field(default=0.0, repr=False)

    def draw(self, dest: Image, dest_x: int, dest_y: int, blender: Blender = overwrite) -> None:
        """Draw the current cell onto dest."""
        self.sprite_sheet.draw_cell(dest, self.cell, dest_x, dest_y, blender)

    def update(self, dt: float) -> None:
        """Advance time by dt, moving on at most one cell."""
        self._elapsed += dt
        if self._elapsed <= self.cell_time:
            return
        self._elapsed -= self.cell_time
        self.cell += self.cell_dir
        if self.cell > self.max_cell:
            if self.bounce_mode:
                self.cell = self.max_cell
                self.cell_dir = -self.cell_dir
            else:
                self.cell = self.min_cell
        elif self.cell < self.min_cell:
            if self.bounce_mode:
                self.cell = self.min_cell
                self.cell_dir = -self.cell_dir
            else:
                self.cell = self.max_cell

    def set_cell_range(self, min_cell: int, max_cell: int) -> None:
        """Set the range of cells to animate, clamping the current cell into it."""
        if self.cell < min_cell:
            self.cell = min_cell
        if self.cell > max_cell:
            self.cell = max_cell
        self.min_cell = min_cell
        self.max_cell = max_cell


class Font(SpriteSheet):
    """A sprite sheet whose cells are glyphs, starting at the space character."""

    def draw(
        self, dest: Image, dest_x: int, dest_y: int, text: str, blender: Blender = overwrite
    ) -> None:
        """Draw text at (dest_x, dest_y); unknown characters use the first glyph."""
        x, y = dest_x, dest_y
        for ch in text:
            if ch == "\n":
                x = dest_x
                y += self.cell_h + 1
                continue
            cell = ord(ch) - ord(" ")
            if not 0 <= cell < self.num_cells:
                cell = 0
            self.draw_cell(dest, cell, x, y, blender)
            x += self.cell_w


class DoubleBuffer:
    """Two images, one in front and one behind, swapped by flip()."""

    def __init__(self, front: Optional[Image] = None, back: Optional[Image] = None) -> None:
        self._images: list[Optional[Image]] = [front, back]
        self._front = 0

    @property
    def front(self) -> Optional[Image]:
        return self._images[self._front]

    @front.setter
    def front(self, image: Optional[Image]) -> None:
        self._images[self._front] = image

    @property
    def back(self) -> Optional[Image]:
        return self._images[1 - self._front]

    @back.setter
    def back(self, image: Optional[Image]) -> None:
        self._images[1 - self._front] = image

    def flip(self) -> None:
        """Swap the front and back images."""
        self._front = 1 - self._front