"""Images that wrap a single child image and change how it is read or written."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import replace
from typing import Optional, Union

from .colour import UV, Colour, FColour, HColour, Vec3, colour_to_normal, normal_to_colour
from .image import Image

Matrix3 = tuple[tuple[float, float, float], tuple[float, float, float], tuple[float, float, float]]
OffsetWeight = tuple[UV, float]

IDENTITY_2D: Matrix3 = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))

_FILTER_EPSILON = 0.001


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _as_matrix(m: Sequence[Sequence[float]]) -> Matrix3:
    rows = tuple(tuple(float(v) for v in row) for row in m)
    if len(rows) != 3 or any(len(row) != 3 for row in rows):
        raise ValueError("a 3x3 matrix is required")
    return rows  # type: ignore[return-value]


def _mat_vec(m: Matrix3, v: Sequence[float]) -> Vec3:
    x, y, z = (sum(a * b for a, b in zip(row, v)) for row in m)
    return (x, y, z)


def _inverse(m: Matrix3) -> Matrix3:
    (a, b, c), (d, e, f), (g, h, i) = m
    co_a = e * i - f * h
    co_b = -(d * i - f * g)
    co_c = d * h - e * g
    det = a * co_a + b * co_b + c * co_c
    if det == 0:
        raise ValueError("matrix is not invertible")
    co_d = -(b * i - c * h)
    co_e = a * i - c * g
    co_f = -(a * h - b * g)
    co_g = b * f - c * e
    co_h = -(a * f - c * d)
    co_i = a * e - b * d
    return (
        (co_a / det, co_d / det, co_g / det),
        (co_b / det, co_e / det, co_h / det),
        (co_c / det, co_f / det, co_i / det),
    )


def _as_fcolour(c: Union[Colour, FColour]) -> FColour:
    if isinstance(c, Colour):
        return FColour.from_colour(c)
    return FColour(c.r, c.g, c.b, c.a)


class ImageDecorator(Image):
    """Base class for images that pass every operation on to a child image."""

    def __init__(self, child: Optional[Image] = None) -> None:
        self.child = child

    def _require_child(self) -> Image:
        if self.child is None:
            raise ValueError(f"{type(self).__name__} has no child image")
        return self.child

    def set_size(self, w: int, h: int) -> None:
        self._require_child().set_size(w, h)

    def load(self, png_file_name: str) -> None:
        self._require_child().load(png_file_name)

    def set_colour(self, x: int, y: int, c: Colour) -> None:
        self._require_child().set_colour(x, y, c)

    def get_colour(self, x: int, y: int) -> Colour:
        return self._require_child().get_colour(x, y)

    def clear(self, c: Colour) -> None:
        self._require_child().clear(c)

    @property
    def width(self) -> int:
        return self._require_child().width

    @property
    def height(self) -> int:
        return self._require_child().height


class ImageColourTransform(ImageDecorator):
    """Multiply each channel of the child by a factor, then add a colour."""

    def __init__(
        self,
        child: Optional[Image] = None,
        mult: Optional[FColour] = None,
        add: Optional[Colour] = None,
    ) -> None:
        super().__init__(child)
        self.mult = mult if mult is not None else FColour(1.0, 1.0, 1.0, 1.0)
        self.add = add if add is not None else Colour(0, 0, 0, 0)

    def get_colour(self, x: int, y: int) -> Colour:
        c = self._require_child().get_colour(x, y)
        m = self.mult
        scaled = HColour(int(c.r * m.r), int(c.g * m.g), int(c.b * m.b), int(c.a * m.a))
        return (scaled + HColour.from_colour(self.add)).to_colour()


class ImageFilter(ImageDecorator):
    """Weighted mean of child texels at a set of offsets around each position."""

    def __init__(
        self, child: Optional[Image] = None, filter_: Iterable[OffsetWeight] = ()
    ) -> None:
        super().__init__(child)
        self.filter: list[OffsetWeight] = list(filter_)

    def get_colour(self, x: int, y: int) -> Colour:
        child = self._require_child()
        w, h = self.width, self.height
        res = HColour()
        total_weight = 0.0
        here = UV(x, y)
        for offset, weight in self.filter:
            pos = offset + here
            if 0 <= pos.u < w and 0 <= pos.v < h:
                total_weight += weight
                res = res + HColour.from_colour(child.get_colour(pos.u, pos.v)) * weight
        if abs(total_weight) > _FILTER_EPSILON:
            res = res * (1.0 / total_weight)
        return res.to_colour()


class ImageRegion(ImageDecorator):
    """A rectangular window onto the child image."""

    def __init__(
        self,
        child: Optional[Image] = None,
        x: int = 0,
        y: int = 0,
        w: Optional[int] = None,
        h: Optional[int] = None,
    ) -> None:
        super().__init__(child)
        self._x = x
        self._y = y
        self._w = w if w is not None else (child.width if child is not None else 0)
        self._h = h if h is not None else (child.height if child is not None else 0)

    def set_region(self, x: int, y: int, w: Optional[int] = None, h: Optional[int] = None) -> None:
        """Move the window to (x, y) and, if given, resize it to w x h."""
        self._x = x
        self._y = y
        if w is not None:
            self._w = w
        if h is not None:
            self._h = h

    @property
    def width(self) -> int:
        return self._w

    @property
    def height(self) -> int:
        return self._h

    def get_colour(self, x: int, y: int) -> Colour:
        return self._require_child().get_colour(x + self._x, y + self._y)

    def set_colour(self, x: int, y: int, c: Colour) -> None:
        self._require_child().set_colour(x + self._x, y + self._y, c)


class ImageScale(ImageDecorator):
    """Nearest-neighbour scaling of the child image."""

    def __init__(
        self, child: Optional[Image] = None, scale_x: float = 1.0, scale_y: Optional[float] = None
    ) -> None:
        super().__init__(child)
        self.scale_x = 1.0
        self.scale_y = 1.0
        self.set_scale(scale_x, scale_y)

    def set_scale(self, scale_x: float, scale_y: Optional[float] = None) -> None:
        """Set the scale factors; one value scales both axes alike."""
        self.scale_x = float(scale_x)
        self.scale_y = float(scale_x if scale_y is None else scale_y)

    def get_colour(self, x: int, y: int) -> Colour:
        return self._require_child().get_colour(int(x / self.scale_x), int(y / self.scale_y))

    @property
    def width(self) -> int:
        return int(self.scale_x * self._require_child().width)

    @property
    def height(self) -> int:
        return int(self.scale_y * self._require_child().height)


class ImageUVTransform(ImageDecorator):
    """Read the child through a 2D homogeneous transform of texel coordinates."""

    OUT_OF_RANGE = Colour(1, 1, 1, 1)

    def __init__(
        self, child: Optional[Image] = None, matrix: Sequence[Sequence[float]] = IDENTITY_2D
    ) -> None:
        super().__init__(child)
        self._matrix = IDENTITY_2D
        self._inverse = IDENTITY_2D
        self.set_transform(matrix)

    def set_transform(self, matrix: Sequence[Sequence[float]]) -> None:
        """Set the transform; raises ValueError if it cannot be inverted."""
        m = _as_matrix(matrix)
        inverse = _inverse(m)
        self._matrix = m
        self._inverse = inverse

    @property
    def matrix(self) -> Matrix3:
        return self._matrix

    def get_colour(self, x: int, y: int) -> Colour:
        child = self._require_child()
        su, sv, _ = _mat_vec(self._inverse, (float(x), float(y), 1.0))
        u1, v1 = int(su), int(sv)
        if u1 < 0 or v1 < 0 or u1 >= child.width or v1 >= child.height:
            return self.OUT_OF_RANGE
        return child.get_colour(u1, v1)

    @property
    def width(self) -> int:
        child = self._require_child()
        row = self._matrix[0]
        return int(abs(row[0] * child.width) + abs(row[1] * child.height))

    @property
    def height(self) -> int:
        child = self._require_child()
        row = self._matrix[1]
        return int(abs(row[0] * child.width) + abs(row[1] * child.height))


class ImageLighting(ImageDecorator):
    """Light a child normal map with ambient, diffuse and specular terms."""

    def __init__(self, child: Optional[Image] = None) -> None:
        super().__init__(child)
        self._light_dir: Vec3 = (0.707, 0.707, 0.707)
        self._ambient = FColour(0.0, 0.0, 0.0, 1.0)
        self._diffuse = FColour(0.5, 0.5, 0.5, 1.0)
        self._specular = FColour(1.0, 1.0, 1.0, 1.0)
        self.specular_power = 100.0

    @property
    def light_dir(self) -> Vec3:
        return self._light_dir

    @light_dir.setter
    def light_dir(self, direction: Sequence[float]) -> None:
        x, y, z = (float(v) for v in direction)
        length = math.sqrt(x * x + y * y + z * z)
        if length == 0:
            raise ValueError("light direction must not be the zero vector")
        self._light_dir = (x / length, y / length, z / length)

    @property
    def ambient_colour(self) -> FColour:
        return self._ambient

    @ambient_colour.setter
    def ambient_colour(self, c: Union[Colour, FColour]) -> None:
        self._ambient = _as_fcolour(c)

    @property
    def diffuse_colour(self) -> FColour:
        return self._diffuse

    @diffuse_colour.setter
    def diffuse_colour(self, c: Union[Colour, FColour]) -> None:
        self._diffuse = _as_fcolour(c)

    @property
    def specular_colour(self) -> FColour:
        return self._specular

    @specular_colour.setter
    def specular_colour(self, c: Union[Colour, FColour]) -> None:
        self._specular = _as_fcolour(c)

    def get_colour(self, x: int, y: int) -> Colour:
        c = self._require_child().get_colour(x, y)
        n = colour_to_normal(c)
        dot = _clamp(sum(a * b for a, b in zip(n, self._light_dir)), 0.0, 1.0)

        diffuse = replace(self._diffuse * dot, a=self._diffuse.a)
        if dot == 0.0 and self.specular_power < 0:
            sp = 1.0
        else:
            sp = _clamp(dot**self.specular_power, 0.0, 1.0)
        spec = self._specular * sp

        final = self._ambient + diffuse + spec
        final = replace(final, a=final.a * c.a / 255.0)
        return final.to_colour()


class ImageNormalMap(ImageDecorator):
    """Rotate the normals stored in a child normal map; alpha passes through."""

    def __init__(
        self, child: Optional[Image] = None, rotation: Sequence[Sequence[float]] = IDENTITY_2D
    ) -> None:
        super().__init__(child)
        self.rotation: Matrix3 = _as_matrix(rotation)

    def get_colour(self, x: int, y: int) -> Colour:
        c = self._require_child().get_colour(x, y)
        n = _mat_vec(self.rotation, colour_to_normal(c))
        return replace(normal_to_colour(n), a=c.a)