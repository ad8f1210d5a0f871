"""Drawing primitives: points, lines, ellipses, edges and sphere normal maps."""

from __future__ import annotations

import math
from dataclasses import replace
from enum import Enum

from .colour import Colour, FColour
from .image import Image


class Outline(Enum):
    """Where draw_edge puts its edge: within the shape or just around it."""

    INSIDE = "inside"
    OUTSIDE = "outside"


def draw_point(dest: Image, x: int, y: int, c: Colour) -> None:
    """Set one pixel, ignoring positions outside the image."""
    if 0 <= x < dest.width and 0 <= y < dest.height:
        dest.set_colour(x, y, c)


def draw_line(dest: Image, x1: int, y1: int, x2: int, y2: int, c: Colour) -> None:
    """Bresenham line; the end point with the larger major coordinate is not drawn."""
    steep = abs(y2 - y1) > abs(x2 - x1)
    if steep:
        x1, y1 = y1, x1
        x2, y2 = y2, x2
    if x1 > x2:
        x1, x2 = x2, x1
        y1, y2 = y2, y1

    dx = float(x2 - x1)
    dy = float(abs(y2 - y1))
    error = dx / 2.0
    ystep = 1 if y1 < y2 else -1
    y = y1

    for x in range(x1, x2):
        if steep:
            draw_point(dest, y, x, c)
        else:
            draw_point(dest, x, y, c)
        error -= dy
        if error < 0:
            y += ystep
            error += dx


def _next_half_width(x0: int, dx: int, y: int, hh: int, ww: int, hhww: int) -> int:
    """Largest x1 <= x0 - (dx - 1) inside the ellipse on row y (0 if none)."""
    x1 = x0 - (dx - 1)
    while x1 > 0 and x1 * x1 * hh + y * y * ww > hhww:
        x1 -= 1
    return x1


def draw_ellipse_outline(
    dest: Image, centre_x: int, centre_y: int, radius_x: int, radius_y: int, c: Colour
) -> None:
    """Draw the outline of an axis-aligned ellipse."""
    hh = radius_y * radius_y
    ww = radius_x * radius_x
    hhww = hh * ww
    x0 = radius_x
    dx = 0

    draw_point(dest, centre_x - radius_x, centre_y, c)
    draw_point(dest, centre_x + radius_x, centre_y, c)

    for y in range(1, radius_y + 1):
        x1 = _next_half_width(x0, dx, y, hh, ww, hhww)
        dx = x0 - x1
        if x0 > x1 + 1:
            x0 -= 1
        else:
            x1 += 1
        for x in (*range(-x0, -x1), *range(x1, x0)):
            draw_point(dest, centre_x + x, centre_y - y, c)
            draw_point(dest, centre_x + x, centre_y + y, c)
        x0 = x1


def draw_ellipse_solid(
    dest: Image, centre_x: int, centre_y: int, radius_x: int, radius_y: int, c: Colour
) -> None:
    """Draw a filled axis-aligned ellipse."""
    hh = radius_y * radius_y
    ww = radius_x * radius_x
    hhww = hh * ww
    x0 = radius_x
    dx = 0

    for x in range(-radius_x, radius_x + 1):
        draw_point(dest, centre_x + x, centre_y, c)

    for y in range(1, radius_y + 1):
        x1 = _next_half_width(x0, dx, y, hh, ww, hhww)
        dx = x0 - x1
        x0 = x1
        for x in range(-x0, x0 + 1):
            draw_point(dest, centre_x + x, centre_y - y, c)
            draw_point(dest, centre_x + x, centre_y + y, c)


def draw_edge(src: Image, dest: Image, edge_colour: Colour, in_or_out: Outline) -> None:
    """Detect colour changes in src and draw edge pixels to dest.

    Each row and column is assumed to start outside the shape; a pixel differing
    from that starting colour is inside it.
    """
    inside = in_or_out is Outline.INSIDE
    w, h = src.width, src.height

    for y in range(h):
        start_col = src.get_colour(0, y)
        is_inside = False
        for x in range(1, w):
            col = src.get_colour(x, y)
            if is_inside and col == start_col:
                dest.set_colour(x - 1 if inside else x, y, edge_colour)
                is_inside = False
            elif not is_inside and col != start_col:
                dest.set_colour(x if inside else x - 1, y, edge_colour)
                is_inside = True

    for x in range(w):
        start_col = src.get_colour(x, 0)
        is_inside = False
        for y in range(1, h):
            col = src.get_colour(x, y)
            if is_inside and col == start_col:
                dest.set_colour(x, y - 1 if inside else y, edge_colour)
                is_inside = False
            elif not is_inside and col != start_col:
                dest.set_colour(x, y if inside else y - 1, edge_colour)
                is_inside = True


def make_sphere_normals(dest: Image, convex: bool = True) -> None:
    """Fill dest with a normal map of a hemisphere; pixels outside the circle get alpha 0."""
    w, h = dest.width, dest.height
    for x in range(w):
        for y in range(h):
            u = x / w * 2.0 - 1.0
            v = (1.0 - y / h) * 2.0 - 1.0
            if not convex:
                u, v = -u, -v
            r2 = u * u + v * v
            z_sq = 1.0 - r2
            # Outside the unit circle there is no z; the blue channel falls to zero.
            nz = math.sqrt(z_sq) * 0.5 + 0.5 if z_sq >= 0.0 else 0.0
            col = FColour(u * 0.5 + 0.5, v * 0.5 + 0.5, nz).to_colour()
            dest.set_colour(x, y, replace(col, a=0 if r2 >= 0.99 else 0xFF))