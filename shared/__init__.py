"""Shared utility package for cross-layer value objects and interfaces."""

from .interfaces import (  # noqa: F401
    IColorAttribute,
    IRenderer,
    IRendererFactory,
    ISceneLoader,
    ISceneNode,
    LoadRequest,
)
from .palette import PaletteColor, DEFAULT_PALETTE, FALLBACK_COLOR  # noqa: F401
