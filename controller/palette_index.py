"""Cyclic palette index for the albedo cycle."""

from __future__ import annotations

from typing import Sequence

from shared.palette import DEFAULT_PALETTE, FALLBACK_COLOR, PaletteColor


class PaletteIndex:
    """Bounded cyclic counter selecting the active palette color.

    The index runs over ``0..len(palette)`` inclusive. ``len(palette)`` is a
    wrap sentinel: it is held for one full step (``current()`` returns the
    fallback color) and the following ``advance()`` resets to 0. A full cycle
    is therefore ``len(palette) + 1`` advances long.
    """

    def __init__(
        self,
        palette: Sequence[PaletteColor] = DEFAULT_PALETTE,
        fallback: PaletteColor = FALLBACK_COLOR,
    ):
        if not palette:
            raise ValueError("PaletteIndex requires at least one color.")
        self.palette: tuple[PaletteColor, ...] = tuple(palette)
        self.fallback = fallback
        self.index = 0

    def __len__(self) -> int:
        return len(self.palette)

    @property
    def cycle_length(self) -> int:
        """Number of advances after which the index is back at 0."""
        return len(self.palette) + 1

    @property
    def at_sentinel(self) -> bool:
        return self.index == len(self.palette)

    def current(self) -> PaletteColor:
        if 0 <= self.index < len(self.palette):
            return self.palette[self.index]
        return self.fallback

    def advance(self) -> int:
        """Step to the next index and return it."""
        if self.index == len(self.palette):
            self.index = 0
        else:
            self.index += 1
        return self.index
