"""Images built from several child images."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import replace
from functools import reduce
from typing import Optional

from .blend import BlendFunc
from .colour import Colour, colour_to_normal, zero_alpha
from .image import Image


class ImageComposite(Image):
    """Holds child images; plain operations go to the active child."""

    def __init__(self, *children: Image) -> None:
        self.children: list[Image] = list(children)
        self.active_child = 0

    def add_child(self, child: Image) -> None:
        self.children.append(child)

    def _active(self) -> Image:
        try:
            return self.children[self.active_child]
        except IndexError:
            raise IndexError(f"no child image at index {self.active_child}") from None

    def set_size(self, w: int, h: int) -> None:
        self._active().set_size(w, h)

    def load(self, png_file_name: str) -> None:
        self._active().load(png_file_name)

    def set_colour(self, x: int, y: int, c: Colour) -> None:
        self._active().set_colour(x, y, c)

    def get_colour(self, x: int, y: int) -> Colour:
        return self._active().get_colour(x, y)

    def clear(self, c: Colour) -> None:
        self._active().clear(c)

    @property
    def width(self) -> int:
        return self._active().width

    @property
    def height(self) -> int:
        return self._active().height


class ImageCombine(ImageComposite):
    """Fold the children's colours together, first to last, with a blend function."""

    def __init__(self, blend_func: BlendFunc, *children: Image) -> None:
        super().__init__(*children)
        self.blend_func = blend_func

    def get_colour(self, x: int, y: int) -> Colour:
        if not self.children:
            raise IndexError("no child images to combine")
        first, *rest = self.children
        return reduce(
            lambda acc, child: self.blend_func(acc, child.get_colour(x, y)),
            rest,
            first.get_colour(x, y),
        )


class ImageMask(ImageComposite):
    """Child 0 is the source; where child 1 is transparent, the transparent colour is shown."""

    def __init__(
        self,
        src: Optional[Image] = None,
        mask: Optional[Image] = None,
        is_transparent: Callable[[Colour], bool] = zero_alpha,
    ) -> None:
        super().__init__(*(child for child in (src, mask) if child is not None))
        self.is_transparent = is_transparent
        self.transparent_colour = Colour(0, 0, 0, 0)

    def get_colour(self, x: int, y: int) -> Colour:
        if self.is_transparent(self.children[1].get_colour(x, y)):
            return self.transparent_colour
        return self.children[0].get_colour(x, y)


def _normalise(v: tuple[float, float, float]) -> tuple[float, float, float]:
    length = math.sqrt(sum(c * c for c in v))
    if length == 0:
        return v
    x, y, z = (c / length for c in v)
    return (x, y, z)


class ImageSphereMap(ImageComposite):
    """Child 0 is a normal map, child 1 a spherical environment map looked up by it."""

    def __init__(self, normal_map: Optional[Image] = None, env_map: Optional[Image] = None) -> None:
        super().__init__(*(child for child in (normal_map, env_map) if child is not None))

    def get_colour(self, x: int, y: int) -> Colour:
        c = self.children[0].get_colour(x, y)
        nx, ny, nz = colour_to_normal(c)
        nx, ny, _ = _normalise((nx, ny, nz + 1.0))
        x1 = nx * 0.5 + 0.5
        y1 = ny * 0.5 + 0.5
        env = self.children[1]
        w, h = env.width, env.height
        ex = max(0, min(w - 1, int(x1 * w)))
        ey = max(0, min(h - 1, int(y1 * h)))
        return replace(env.get_colour(ex, ey), a=c.a)