"""Colour types, normal-map conversion and small helpers for pixel maths."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

ColourIndex = int
"""Index of a colour in a palette (0..255)."""

Vec3 = tuple[float, float, float]

APPROX_EQUAL_DEFAULT_EPSILON = 0.0001
APPROX_EQUAL_DEFAULT_COLOUR_EPSILON = 1


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


@dataclass(frozen=True)
class Colour:
    """An (r, g, b, a) colour with 8 bits per channel."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0xFF

    def __post_init__(self) -> None:
        for name, value in zip("rgba", self):
            if not 0 <= value <= 0xFF:
                raise ValueError(f"channel {name}={value} is outside 0..255")

    def __iter__(self):
        return iter((self.r, self.g, self.b, self.a))


@dataclass
class FColour:
    """Floating point colour, channels nominally in 0..1."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    @classmethod
    def from_colour(cls, c: Colour) -> FColour:
        return cls(c.r / 255.0, c.g / 255.0, c.b / 255.0, c.a / 255.0)

    def to_colour(self) -> Colour:
        return Colour(
            *(_clamp(int(v * 255.0), 0, 0xFF) for v in (self.r, self.g, self.b, self.a))
        )

    def __add__(self, other: FColour) -> FColour:
        if not isinstance(other, FColour):
            return NotImplemented
        return FColour(self.r + other.r, self.g + other.g, self.b + other.b, self.a + other.a)

    def __sub__(self, other: FColour) -> FColour:
        if not isinstance(other, FColour):
            return NotImplemented
        return FColour(self.r - other.r, self.g - other.g, self.b - other.b, self.a - other.a)

    def __mul__(self, other: Union[FColour, float]) -> FColour:
        if isinstance(other, FColour):
            return FColour(self.r * other.r, self.g * other.g, self.b * other.b, self.a * other.a)
        if isinstance(other, (int, float)):
            return FColour(self.r * other, self.g * other, self.b * other, self.a * other)
        return NotImplemented


@dataclass
class HColour:
    """Integer colour without the 0..255 limit, so sums do not overflow."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0xFF

    @classmethod
    def from_colour(cls, c: Colour) -> HColour:
        return cls(c.r, c.g, c.b, c.a)

    def to_colour(self) -> Colour:
        return Colour(*(_clamp(v, 0, 0xFF) for v in (self.r, self.g, self.b, self.a)))

    def __add__(self, other: HColour) -> HColour:
        if not isinstance(other, HColour):
            return NotImplemented
        return HColour(self.r + other.r, self.g + other.g, self.b + other.b, self.a + other.a)

    def __sub__(self, other: HColour) -> HColour:
        if not isinstance(other, HColour):
            return NotImplemented
        return HColour(self.r - other.r, self.g - other.g, self.b - other.b, self.a - other.a)

    def __mul__(self, other: Union[HColour, float]) -> HColour:
        if isinstance(other, HColour):
            return HColour(self.r * other.r, self.g * other.g, self.b * other.b, self.a * other.a)
        if isinstance(other, (int, float)):
            return HColour(*(int(other * float(v)) for v in (self.r, self.g, self.b, self.a)))
        return NotImplemented


@dataclass(frozen=True)
class UV:
    """Integer texel coordinate or offset."""

    u: int = 0
    v: int = 0

    def __add__(self, other: UV) -> UV:
        if not isinstance(other, UV):
            return NotImplemented
        return UV(self.u + other.u, self.v + other.v)


def colour_to_normal(c: Colour) -> Vec3:
    """Map a normal-map colour to a vector with components in -1..1."""
    return (c.r / 127.5 - 1.0, c.g / 127.5 - 1.0, c.b / 127.5 - 1.0)


def normal_to_colour(n: Sequence[float]) -> Colour:
    """Map a vector with components in -1..1 to an opaque normal-map colour."""
    r, g, b = (_clamp(int((v + 1.0) * 128.0 + 0.5), 0, 0xFF) for v in n[:3])
    return Colour(r, g, b)


def approx_equal(a, b, epsilon=None) -> bool:
    """True if numbers, vectors or colours differ by less than epsilon per component."""
    if isinstance(a, Colour) and isinstance(b, Colour):
        eps = APPROX_EQUAL_DEFAULT_COLOUR_EPSILON if epsilon is None else epsilon
        return all(abs(x - y) < eps for x, y in zip(a, b))
    eps = APPROX_EQUAL_DEFAULT_EPSILON if epsilon is None else epsilon
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return abs(a - b) < eps
    if isinstance(a, Sequence) and isinstance(b, Sequence):
        return len(a) == len(b) and all(abs(x - y) < eps for x, y in zip(a, b))
    raise TypeError(f"cannot compare {type(a).__name__} with {type(b).__name__}")


def zero_alpha(c: Colour) -> bool:
    """Transparency test: a colour is transparent when its alpha is zero."""
    return c.a == 0