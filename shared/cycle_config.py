"""Color-cycle configuration system."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from shared.constants import (
    ACTION_APPLY_ONCE,
    ACTION_START_COUNTDOWN,
    CONTINUOUS_INTERVAL,
    COUNTDOWN_INTERVAL,
    DEFAULT_MODEL_PATH,
    EDGE_PRESSED,
    EDGE_RELEASED,
    MONITOR_SCREEN_ID,
    SCREEN_INTERVAL,
    SLOW_COUNTDOWN_INTERVAL,
)

CycleMode = Literal["continuous", "countdown", "click", "combined"]
TargetKind = Literal["material", "id", "marker"]

CYCLE_MODES: tuple[str, ...] = ("continuous", "countdown", "click", "combined")


def default_bindings() -> dict[tuple[str, str], str]:
    """Default (button, edge) -> action bindings."""
    return {
        ("mouse1", EDGE_RELEASED): ACTION_APPLY_ONCE,
        ("mouse3", EDGE_PRESSED): ACTION_START_COUNTDOWN,
        ("space", EDGE_PRESSED): ACTION_START_COUNTDOWN,
    }


@dataclass
class CycleConfig:
    """Configuration for one color-cycle demo.

    Attributes:
        mode: Which drivers are wired ('continuous', 'countdown', 'click' or
              'combined' for click and countdown together)
        interval: Timer interval in seconds (repeating for continuous,
                  per-step one-shot for countdown; unused by click)
        total_steps: Countdown length (None = palette length + 1)
        target: How nodes are selected ('material', 'id' or 'marker')
        target_id: Structural id matched when target == 'id'
        target_marker: Marker name matched when target == 'marker'
        model_path: Scene file, optionally with '#SubResource'
        bindings: Input (button, edge) -> action map
    """

    mode: CycleMode = "click"
    interval: float = CONTINUOUS_INTERVAL
    total_steps: int | None = None
    target: TargetKind = "material"
    target_id: int | None = None
    target_marker: str | None = None
    model_path: str = DEFAULT_MODEL_PATH
    bindings: dict[tuple[str, str], str] = field(default_factory=default_bindings)

    def __post_init__(self) -> None:
        if self.mode not in CYCLE_MODES:
            raise ValueError(
                f"Invalid cycle mode: {self.mode}. Must be one of {', '.join(CYCLE_MODES)}"
            )
        if self.interval < 0:
            raise ValueError(f"Interval must be non-negative, got {self.interval}")
        if self.total_steps is not None and self.total_steps < 1:
            raise ValueError(f"Countdown steps must be at least 1, got {self.total_steps}")
        if self.target == "id" and self.target_id is None:
            raise ValueError("Target 'id' requires a structural id")
        if self.target == "marker" and not self.target_marker:
            raise ValueError("Target 'marker' requires a marker name")

    @property
    def uses_countdown(self) -> bool:
        return self.mode in ("countdown", "combined")

    @property
    def uses_click(self) -> bool:
        return self.mode in ("click", "combined")

    @property
    def scene_path(self) -> tuple[str, str | None]:
        """Split ``model_path`` into (path, sub_resource)."""
        path, sep, sub = self.model_path.partition("#")
        return path, (sub if sep and sub else None)

    @classmethod
    def click(cls) -> CycleConfig:
        """Recolor every mesh once per left-button release."""
        return cls(mode="click")

    @classmethod
    def continuous(cls, interval: float = CONTINUOUS_INTERVAL) -> CycleConfig:
        """Recolor every mesh on a repeating timer."""
        return cls(mode="continuous", interval=interval)

    @classmethod
    def countdown(
        cls, interval: float = COUNTDOWN_INTERVAL, *, steps: int | None = None
    ) -> CycleConfig:
        """Run one bounded palette sweep per start press."""
        return cls(mode="countdown", interval=interval, total_steps=steps)

    @classmethod
    def combined(cls, interval: float = SLOW_COUNTDOWN_INTERVAL) -> CycleConfig:
        """Two-button variant: click recolors once, right click runs a sweep."""
        return cls(mode="combined", interval=interval)

    @classmethod
    def screen(
        cls, structural_id: int = MONITOR_SCREEN_ID, interval: float = SCREEN_INTERVAL
    ) -> CycleConfig:
        """Cycle only the screen face of a display model."""
        return cls(
            mode="continuous",
            interval=interval,
            target="id",
            target_id=structural_id,
        )


def parse_cycle_spec(spec: str, model_path: str | None = None) -> CycleConfig:
    """Parse a cycle specification string into a CycleConfig.

    Format:
        MODE[:PARAM=VALUE,PARAM=VALUE,...]

    Examples:
        "click" -> Recolor on left click
        "continuous:interval=0.25" -> Repeating 0.25s cycle
        "countdown:interval=0.125,steps=6" -> Bounded sweep on start press
        "continuous:interval=1.0,id=64" -> Cycle only the node with structural id 64
        "countdown:marker=screen" -> Cycle nodes tagged 'screen'

    Supported parameters:
        - interval (float): Timer interval in seconds
        - steps (int): Countdown length
        - id (int): Structural id target
        - marker (str): Marker name target
        - target (str): 'material' to select every material-bearing node
    """
    parts = spec.split(":", 1)
    mode = parts[0].strip().lower()

    if mode not in CYCLE_MODES:
        raise ValueError(
            f"Invalid cycle mode: {mode}. Must be one of {', '.join(CYCLE_MODES)}"
        )

    params: dict = {}
    if len(parts) == 2:
        for param_pair in parts[1].split(","):
            param_pair = param_pair.strip()
            if not param_pair:
                continue
            if "=" not in param_pair:
                raise ValueError(f"Invalid parameter format: {param_pair}. Expected PARAM=VALUE")
            key, value = param_pair.split("=", 1)
            key = key.strip()
            value = value.strip()

            if key in ["steps", "id"]:
                params[key] = int(value)
            elif key == "interval":
                params[key] = float(value)
            elif key in ["marker", "target"]:
                params[key] = value
            else:
                raise ValueError(f"Unknown parameter: {key}")

    target: TargetKind = "material"
    if "id" in params and "marker" in params:
        raise ValueError("Parameters 'id' and 'marker' are mutually exclusive")
    if "id" in params:
        target = "id"
    elif "marker" in params:
        target = "marker"
    elif params.get("target", "material") != "material":
        raise ValueError(f"Unknown target: {params['target']}")

    default_interval = {
        "continuous": CONTINUOUS_INTERVAL,
        "countdown": COUNTDOWN_INTERVAL,
        "click": CONTINUOUS_INTERVAL,
        "combined": SLOW_COUNTDOWN_INTERVAL,
    }[mode]

    kwargs = {
        "mode": mode,
        "interval": params.get("interval", default_interval),
        "total_steps": params.get("steps"),
        "target": target,
        "target_id": params.get("id"),
        "target_marker": params.get("marker"),
    }
    if model_path is not None:
        kwargs["model_path"] = model_path
    return CycleConfig(**kwargs)
