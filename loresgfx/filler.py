"""Fill whole images with colours produced per pixel."""

from __future__ import annotations

import random
from collections.abc import Callable

from .colour import Colour
from .image import Image

Filler = Callable[[int, int, int, int], Colour]


def solid_colour(c: Colour) -> Filler:
    """Make a filler that gives the same colour everywhere."""

    def filler(x: int, y: int, w: int, h: int) -> Colour:
        return Colour(c.r, c.g, c.b, c.a)

    return filler


def noise_colour(x: int, y: int, w: int, h: int) -> Colour:
    """Random opaque colour."""
    return Colour(random.randrange(256), random.randrange(256), random.randrange(256), 0xFF)


def noise_greyscale(x: int, y: int, w: int, h: int) -> Colour:
    """Random opaque grey."""
    n = random.randrange(256)
    return Colour(n, n, n, 0xFF)


def fill(im: Image, filler: Filler) -> None:
    """Set each pixel of im to filler(x, y, width, height)."""
    w, h = im.width, im.height
    for y in range(h):
        for x in range(w):
            im.set_colour(x, y, filler(x, y, w, h))