import logging
import math
import sys

from typing import Any, Callable, Iterable

import simplepbr
from direct.showbase.ShowBase import ShowBase
from direct.task import Task
from panda3d.core import (
    AmbientLight,
    BitMask32,
    ClockObject,
    DirectionalLight,
    TextNode,
    WindowProperties,
    loadPrcFileData,
)

from shared.constants import (
    EDGE_HELD,
    EDGE_PRESSED,
    EDGE_RELEASED,
    SCENE_LOAD_FAILED_EVENT,
)


logger = logging.getLogger(__name__)


class PandaRenderer(ShowBase):
    """Window, camera and lighting around the color-cycle scene.

    Input events for the configured buttons are forwarded to the input
    callback as ``(button, edge)``; ``<button>-repeat`` events map to the
    ``held`` edge.
    """

    # Shadow configuration
    SHADOW_MAP_RESOLUTION = 4096

    # Camera at (10, 10, 35) in a Y-up frame looking at the origin
    CAMERA_POS = (10.0, -35.0, 10.0)

    # Light heading speed (radians per second) and fixed pitch
    LIGHT_ROTATION_SPEED = math.pi / 5
    LIGHT_PITCH = -math.pi / 4

    def __init__(self, buttons: Iterable[str] = ("mouse1", "mouse3", "space")):
        # Configure OpenGL version before initializing ShowBase
        loadPrcFileData("", "gl-version 3 2")
        super().__init__()

        props = WindowProperties()
        props.setTitle("Albedo cycle")
        self.win.requestProperties(props)

        self.pipeline = simplepbr.init()
        self.pipeline.enable_shadows = True
        self.pipeline.use_330 = True

        self._input_callback: Callable[[str, str], Any] | None = None
        self._buttons = tuple(buttons)

        self.accept("escape", sys.exit)  # Escape quits
        self.disableMouse()  # Disable mouse camera control
        self._accept_buttons()
        self.accept(SCENE_LOAD_FAILED_EVENT, self._on_scene_load_failed)

        self.setup_lights()
        self._setup_camera()
        self._create_status_text()

        # Renderer update task (sort=50, runs after the cycle loop task at sort=49)
        self.task = self.taskMgr.add(self.update, "cycleRendererUpdate", sort=50)

    def _accept_buttons(self) -> None:
        for button in self._buttons:
            self.accept(button, self._on_input, [button, EDGE_PRESSED])
            self.accept(f"{button}-up", self._on_input, [button, EDGE_RELEASED])
            self.accept(f"{button}-repeat", self._on_input, [button, EDGE_HELD])

    def _on_input(self, button: str, edge: str) -> None:
        if self._input_callback is not None:
            self._input_callback(button, edge)

    def _on_scene_load_failed(self, load_id) -> None:
        self.report_status(f"Failed to load scene (request {load_id}).")

    def set_input_callback(self, callback: Callable[[str, str], Any] | None) -> None:
        self._input_callback = callback

    def attach_update_loop(
        self, update_fn: Callable[[float], bool], interval: float
    ) -> bool:
        """Run ``update_fn`` once per frame with the frame's clock delta.

        ``interval`` is ignored: frames are paced by the window, and timers
        inside the controller consume the real delta.
        """
        clock = ClockObject.getGlobalClock()

        def _task(task):
            if update_fn(clock.getDt()):
                return Task.done
            return Task.cont

        self.taskMgr.add(_task, "cycleLoop", sort=49)
        return True

    def update(self, task):
        """Rotate the sun around the vertical axis."""
        heading = math.degrees(task.time * self.LIGHT_ROTATION_SPEED)
        self.sun_node.setHpr(heading, math.degrees(self.LIGHT_PITCH), 0)
        return task.cont

    def setup_lights(self):
        """Setup a rotating shadow-casting sun and an ambient fill."""
        sun = DirectionalLight("sun")
        sun.setColor((1, 1, 1, 1))
        sun.setShadowCaster(True, self.SHADOW_MAP_RESOLUTION, self.SHADOW_MAP_RESOLUTION)

        # Single cascade covering only the area right around the model
        lens = sun.getLens()
        lens.setFilmSize(8, 8)
        lens.setNearFar(-10, 10)

        self.sun_node = self.render.attachNewNode(sun)
        self.sun_node.setHpr(0, math.degrees(self.LIGHT_PITCH), 0)
        self.sun_node.hide(BitMask32(1))
        self.render.setLight(self.sun_node)

        a_light = AmbientLight("a_light")
        a_light.setColor((0.25, 0.25, 0.25, 1.0))
        a_node = self.render.attachNewNode(a_light)
        a_node.hide(BitMask32(1))
        self.render.setLight(a_node)

    def _setup_camera(self) -> None:
        self.camera.setPos(*self.CAMERA_POS)
        self.camera.lookAt(0, 0, 0)

    def report_status(self, message: str) -> None:
        """Show the latest status line on screen."""
        logger.debug("Status: %s", message)
        if hasattr(self, "status_text"):
            self.status_text.setText(message)

    def _create_status_text(self) -> None:
        """Create on-screen text showing the latest status line."""
        from direct.gui.OnscreenText import OnscreenText

        self.status_text = OnscreenText(
            text="Loading...",
            pos=(-1.3, -0.9),  # Bottom-left corner
            scale=0.065,
            fg=(1, 1, 1, 1),
            align=TextNode.ALeft,
            mayChange=True,
            shadow=(0, 0, 0, 1),
            shadowOffset=(0.04, 0.04),
        )
