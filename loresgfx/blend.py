"""Blend operations and blitting of rectangular regions between images.

A blender is a callable taking the source colour and the current destination
colour and returning the new destination colour, or None to leave the
destination pixel untouched.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional

from .colour import Colour, FColour, HColour, zero_alpha
from .image import Image

Blender = Callable[[Colour, Colour], Optional[Colour]]
BlendFunc = Callable[[Colour, Colour], Colour]


def calc_add_blend(src: Colour, dest: Colour) -> Colour:
    """Channel-wise sum, clamped to 0..255."""
    return (HColour.from_colour(src) + HColour.from_colour(dest)).to_colour()


def calc_sub_blend(src: Colour, dest: Colour) -> Colour:
    """Channel-wise src - dest, clamped to 0..255."""
    return (HColour.from_colour(src) - HColour.from_colour(dest)).to_colour()


def calc_mult_blend(src: Colour, dest: Colour) -> Colour:
    """Channel-wise product in 0..1 space."""
    return (FColour.from_colour(src) * FColour.from_colour(dest)).to_colour()


def calc_alpha_blend(src: Colour, dest: Colour) -> Colour:
    """Blend like (SRC_ALPHA, ONE_MINUS_SRC_ALPHA)."""
    src_part = HColour.from_colour(src) * float(src.a) * (1.0 / 255.0)
    dest_part = HColour.from_colour(dest) * (1.0 - float(src.a) * (1.0 / 255.0))
    return (src_part + dest_part).to_colour()


def overwrite(src: Colour, dest: Colour) -> Colour:
    """Replace the destination with a copy of the source, as if blending were disabled."""
    return Colour(src.r, src.g, src.b, src.a)


def mask(is_transparent: Callable[[Colour], bool]) -> Blender:
    """Make a blender that copies only source pixels that are not transparent."""

    def blender(src: Colour, dest: Colour) -> Optional[Colour]:
        return None if is_transparent(src) else src

    return blender


def mask_zero_alpha(src: Colour, dest: Colour) -> Optional[Colour]:
    """Copy the source pixel unless its alpha is zero."""
    return None if zero_alpha(src) else src


def add_blend(src: Colour, dest: Colour) -> Colour:
    """dest = dest + src."""
    return calc_add_blend(src, dest)


def sub_blend(src: Colour, dest: Colour) -> Colour:
    """dest = dest - src."""
    return calc_sub_blend(dest, src)


def mult_blend(src: Colour, dest: Colour) -> Colour:
    """dest = dest * src."""
    return calc_mult_blend(src, dest)


def alpha_blend(src: Colour, dest: Colour) -> Colour:
    """Blend src over dest using the source alpha."""
    return calc_alpha_blend(src, dest)


def blit_region(
    src: Image,
    dest: Image,
    dest_x: int,
    dest_y: int,
    src_x: int,
    src_y: int,
    src_w: int,
    src_h: int,
    blender: Blender = overwrite,
) -> None:
    """Blend a src_w x src_h region of src at (src_x, src_y) onto dest at (dest_x, dest_y).

    Pixels that would fall outside dest are clipped.
    """
    x_min = max(0, -dest_x)
    x_max = min(src_w, dest.width - dest_x)
    y_min = max(0, -dest_y)
    y_max = min(src_h, dest.height - dest_y)

    for y in range(y_min, y_max):
        for x in range(x_min, x_max):
            dx, dy = x + dest_x, y + dest_y
            result = blender(src.get_colour(x + src_x, y + src_y), dest.get_colour(dx, dy))
            if result is not None:
                dest.set_colour(dx, dy, result)


def blit(src: Image, dest: Image, dest_x: int, dest_y: int, blender: Blender = overwrite) -> None:
    """Blend the whole of src onto dest at (dest_x, dest_y)."""
    blit_region(src, dest, dest_x, dest_y, 0, 0, src.width, src.height, blender)