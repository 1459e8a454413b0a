"""Shared protocol definitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Protocol,
    Callable,
    Any,
    Hashable,
    Sequence,
    TYPE_CHECKING,
    runtime_checkable,
)

if TYPE_CHECKING:  # pragma: no cover - used for type hints only
    from controller.color_cycle_controller import ColorCycleController


@runtime_checkable
class IColorAttribute(Protocol):
    """Mutable albedo color carried by a scene node."""

    def get_color(self) -> tuple[float, float, float, float]: ...

    def set_color(self, rgba: tuple[float, float, float, float]) -> None: ...


@runtime_checkable
class ISceneNode(Protocol):
    """Capability view of a node in an externally owned scene tree."""

    def children(self) -> Sequence[ISceneNode]: ...

    def color_attribute(self) -> IColorAttribute | None: ...

    def structural_id(self) -> int | None: ...

    def has_marker(self, name: str) -> bool: ...


@dataclass(frozen=True)
class LoadRequest:
    """Handle returned by a scene loader.

    Attributes:
        load_id: Opaque identity carried by the completion event
        root: Node the loaded scene is spawned under; empty until loading completes
        path: Requested file path
        sub_resource: Optional named sub-resource (e.g. ``Scene0``)
    """

    load_id: Hashable
    root: ISceneNode
    path: str
    sub_resource: str | None = None


@runtime_checkable
class ISceneLoader(Protocol):
    """Protocol describing the asynchronous scene loader."""

    def load(self, path: str, sub_resource: str | None = None) -> LoadRequest: ...

    def add_listener(self, callback: Callable[[Hashable], None]) -> None: ...

    def update(self) -> None: ...


@runtime_checkable
class IRenderer(Protocol):
    """Protocol describing renderer capabilities required by the controller."""

    def run(self) -> None: ...

    def attach_update_loop(
        self, update_fn: Callable[[float], bool], interval: float
    ) -> bool: ...

    def report_status(self, message: str) -> None: ...

    def set_input_callback(
        self, callback: Callable[[str, str], Any] | None
    ) -> None: ...


@runtime_checkable
class IRendererFactory(Protocol):
    """Protocol for factories that produce renderers for a controller."""

    def __call__(self, controller: ColorCycleController) -> IRenderer: ...
