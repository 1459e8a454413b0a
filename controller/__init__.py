"""Controller module for the albedo color cycle.

Contains the cycle controller, its drivers and the frame loop.
"""

from controller.color_cycle_controller import ColorCycleController

__all__ = ["ColorCycleController"]
