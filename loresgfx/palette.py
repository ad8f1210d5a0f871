"""Palette of colours addressed by 8-bit index."""

from __future__ import annotations

from .colour import Colour, ColourIndex

TRANSPARENT_INDEX: ColourIndex = 0
_TRANSPARENT_COLOUR = Colour(255, 0, 255, 0)
_ALPHA_LIMIT = 128


class Palette:
    """Ordered list of distinct colours. Index 0 is reserved for transparency."""

    def __init__(self) -> None:
        self._colours: list[Colour] = [_TRANSPARENT_COLOUR]

    def __len__(self) -> int:
        return len(self._colours)

    def add_colour(self, col: Colour) -> int:
        """Return the index of col, adding it if new. Translucent colours map to 0."""
        if col.a < _ALPHA_LIMIT:
            return TRANSPARENT_INDEX
        try:
            return self._colours.index(col)
        except ValueError:
            self._colours.append(col)
            return len(self._colours) - 1

    def get_colour(self, index: ColourIndex) -> Colour:
        if not 0 <= index < len(self._colours):
            raise IndexError(f"palette index {index} out of range")
        return self._colours[index]

    def get_index(self, col: Colour) -> ColourIndex:
        """Return the index of col; raise ValueError if it is not in the palette."""
        if col.a < _ALPHA_LIMIT:
            return TRANSPARENT_INDEX
        try:
            return self._colours.index(col)
        except ValueError:
            raise ValueError(f"colour {tuple(col)} is not in the palette") from None