"""Headless scene loader.

Reads JSON scene descriptions and completes each load request after a
configurable number of ``update()`` calls, emitting the request's load id to
every listener. A description is either a single node object or a file with
named scenes::

    {
        "scenes": {"Scene0": {"name": "Cube", "children": [...]}},
        "default_scene": "Scene0"
    }

Node objects accept ``name``, ``color`` (RGBA list; marks the node as
material-bearing), ``material`` (bool, white when no color is given),
``id`` (structural id override), ``markers`` (list of tags) and
``children``. Structural ids are otherwise assigned in pre-order starting
at 0.
"""

from __future__ import annotations

import itertools
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Hashable

from scene.scene_node import ColorAttribute, SceneNode
from shared.interfaces import LoadRequest

logger = logging.getLogger(__name__)


class SceneLoadError(ValueError):
    """Raised when a scene description cannot be read."""


# Stand-in for the demo cube asset so headless runs need no files
BUILTIN_SCENES: dict[str, dict] = {
    "cube.glb": {
        "scenes": {
            "Scene0": {
                "name": "Scene0",
                "children": [
                    {
                        "name": "Cube",
                        "children": [
                            {"name": "Cube.mesh", "color": [0.8, 0.8, 0.8, 1.0]},
                        ],
                    }
                ],
            }
        },
        "default_scene": "Scene0",
    },
}


@dataclass
class _PendingLoad:
    request: LoadRequest
    scene: SceneNode
    remaining_ticks: int


class HeadlessSceneLoader:
    """Scene loader for runs without a renderer."""

    def __init__(
        self,
        base_dir: str | Path | None = None,
        load_delay_ticks: int = 1,
        builtin_scenes: dict[str, dict] | None = None,
    ):
        """Initialize the loader.

        Args:
            base_dir: Directory relative paths are resolved against
            load_delay_ticks: update() calls needed to complete a request (0 behaves like 1)
            builtin_scenes: Descriptions served by path without touching disk
                            (defaults to the demo cube)
        """
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.load_delay_ticks = max(load_delay_ticks, 0)
        self._builtin = dict(BUILTIN_SCENES if builtin_scenes is None else builtin_scenes)
        self._ids = itertools.count(1)
        self._pending: list[_PendingLoad] = []
        self._listeners: list[Callable[[Hashable], None]] = []

    def add_listener(self, callback: Callable[[Hashable], None]) -> None:
        self._listeners.append(callback)

    def load(self, path: str, sub_resource: str | None = None) -> LoadRequest:
        """Request a scene; the returned root is populated on completion."""
        description = self._read_description(path)
        scene_description = self._select_scene(description, path, sub_resource)
        scene = self._build_tree(scene_description)
        self._assign_structural_ids(scene)

        label = f"{path}#{sub_resource}" if sub_resource else path
        request = LoadRequest(
            load_id=next(self._ids),
            root=SceneNode(label),
            path=path,
            sub_resource=sub_resource,
        )
        self._pending.append(_PendingLoad(request, scene, self.load_delay_ticks))
        logger.debug("Queued load %s for %s", request.load_id, label)
        return request

    def is_pending(self) -> bool:
        return len(self._pending) > 0

    def update(self) -> None:
        """Advance pending loads; completed ones are attached and announced."""
        completed = []
        for pending in self._pending:
            if pending.remaining_ticks > 0:
                pending.remaining_ticks -= 1
                if pending.remaining_ticks > 0:
                    continue
            completed.append(pending)

        for pending in completed:
            self._pending.remove(pending)
            pending.request.root.add_child(pending.scene)
            logger.debug("Load %s complete", pending.request.load_id)
            for listener in list(self._listeners):
                listener(pending.request.load_id)

    def _read_description(self, path: str) -> dict:
        if path in self._builtin:
            return self._builtin[path]

        file_path = Path(path)
        if self.base_dir is not None and not file_path.is_absolute():
            file_path = self.base_dir / file_path
        try:
            with file_path.open("r", encoding="utf-8") as f:
                description = json.load(f)
        except OSError as e:
            raise SceneLoadError(f"Cannot read scene file {file_path}: {e}") from e
        except json.JSONDecodeError as e:
            raise SceneLoadError(f"Malformed scene file {file_path}: {e}") from e

        if not isinstance(description, dict):
            raise SceneLoadError(f"Scene file {file_path} must contain a JSON object")
        return description

    @staticmethod
    def _select_scene(description: dict, path: str, sub_resource: str | None) -> dict:
        scenes = description.get("scenes")
        if scenes is None:
            if sub_resource is not None:
                raise SceneLoadError(f"{path} has no named scenes (requested {sub_resource})")
            return description

        name = sub_resource or description.get("default_scene")
        if name is None:
            if len(scenes) != 1:
                raise SceneLoadError(f"{path} has several scenes; name one with '#'")
            name = next(iter(scenes))
        if name not in scenes:
            raise SceneLoadError(f"Scene {name} not found in {path}")
        return scenes[name]

    def _build_tree(self, description: dict) -> SceneNode:
        if not isinstance(description, dict):
            raise SceneLoadError(f"Scene node must be an object, got {type(description).__name__}")

        color = None
        if "color" in description:
            rgba = description["color"]
            if not isinstance(rgba, list) or len(rgba) not in (3, 4):
                raise SceneLoadError(f"Invalid color {rgba!r}; expected RGB or RGBA list")
            if len(rgba) == 3:
                rgba = [*rgba, 1.0]
            try:
                color = ColorAttribute(tuple(float(c) for c in rgba))
            except (TypeError, ValueError) as e:
                raise SceneLoadError(f"Invalid color {rgba!r}: {e}") from e
        elif description.get("material", False):
            color = ColorAttribute()

        structural_id = description.get("id")
        # bool is an int subclass but never a valid id
        if structural_id is not None and (
            not isinstance(structural_id, int) or isinstance(structural_id, bool)
        ):
            raise SceneLoadError(f"Invalid id {structural_id!r}; expected an integer")

        markers = description.get("markers", [])
        if not isinstance(markers, list) or not all(isinstance(m, str) for m in markers):
            raise SceneLoadError(f"Invalid markers {markers!r}; expected a list of strings")

        children = description.get("children", [])
        if not isinstance(children, list):
            raise SceneLoadError(f"Invalid children {children!r}; expected a list")

        node = SceneNode(
            str(description.get("name", "")),
            color=color,
            structural_id=structural_id,
            markers=markers,
        )
        for child in children:
            node.add_child(self._build_tree(child))
        return node

    @staticmethod
    def _assign_structural_ids(scene: SceneNode) -> None:
        for ordinal, node in enumerate(scene.walk()):
            if node.id is None:
                node.id = ordinal
