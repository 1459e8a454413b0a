"""Factory helpers for assembling the color-cycle demo."""

from factory.color_cycle_factory import ColorCycleFactory

__all__ = ["ColorCycleFactory"]
