"""Shared constants for cross-layer coordination."""

from __future__ import annotations

# Messenger event emitted when an async scene load fails (argument: load id)
SCENE_LOAD_FAILED_EVENT: str = "scene-load-failed"

# Readiness-gate key of the scene spawned at startup
PRIMARY_TARGET: str = "color_change_cube"

DEFAULT_MODEL_PATH: str = "cube.glb#Scene0"

# Timer intervals (seconds) used by the shipped presets
CONTINUOUS_INTERVAL: float = 0.25
COUNTDOWN_INTERVAL: float = 0.125
SLOW_COUNTDOWN_INTERVAL: float = 1.0 / 3.0
SCREEN_INTERVAL: float = 1.0

# Loader-assigned structural ids of the screen face in the shipped assets.
# They depend on node order in the exported file.
MONITOR_SCREEN_ID: int = 60
TABLET_SCREEN_ID: int = 64

# Input actions understood by the controller
ACTION_APPLY_ONCE: str = "apply_once"
ACTION_START_COUNTDOWN: str = "start_countdown"

# Input edges delivered by input sources
EDGE_PRESSED: str = "pressed"
EDGE_RELEASED: str = "released"
EDGE_HELD: str = "held"
INPUT_EDGES: tuple[str, str, str] = (EDGE_PRESSED, EDGE_RELEASED, EDGE_HELD)
