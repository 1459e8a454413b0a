"""Palette colors for the albedo cycle.

The palette is an ordered, immutable tuple. Index ``len(palette)`` is the
wrap sentinel of :class:`controller.palette_index.PaletteIndex` and renders
as :data:`FALLBACK_COLOR`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class PaletteColor:
    name: str
    rgba: Tuple[float, float, float, float]

    def __str__(self) -> str:
        return self.name


BLACK = PaletteColor("Black", (0.0, 0.0, 0.0, 1.0))
WHITE = PaletteColor("White", (1.0, 1.0, 1.0, 1.0))
RED = PaletteColor("Red", (1.0, 0.0, 0.0, 1.0))
GREEN = PaletteColor("Green", (0.0, 1.0, 0.0, 1.0))
BLUE = PaletteColor("Blue", (0.0, 0.0, 1.0, 1.0))

DEFAULT_PALETTE: tuple[PaletteColor, ...] = (BLACK, WHITE, RED, GREEN, BLUE)

# Shown while the index sits on the wrap sentinel
FALLBACK_COLOR = BLACK
