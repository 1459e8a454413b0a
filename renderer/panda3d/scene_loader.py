"""Asynchronous scene loading through the Panda3D model loader."""

from __future__ import annotations

import itertools
import logging
from typing import Callable, Hashable

from panda3d.core import NodePath

from renderer.panda3d.scene_node import PandaSceneNode, assign_structural_ids
from shared.constants import SCENE_LOAD_FAILED_EVENT
from shared.interfaces import LoadRequest

logger = logging.getLogger(__name__)


class PandaSceneLoader:
    """Loads model files asynchronously under placeholder roots.

    ``load()`` returns immediately with an empty root parented to
    ``parent``. When the model arrives it is reparented under that root,
    its nodes are numbered in pre-order and every listener receives the
    load id. A failed load sends ``SCENE_LOAD_FAILED_EVENT`` via the
    messenger instead, and the target never becomes ready.
    """

    def __init__(self, base, parent=None):
        """Initialize the loader.

        Args:
            base: ShowBase instance (provides loader and messenger)
            parent: NodePath new scenes are attached to (defaults to base.render)
        """
        self.base = base
        self.parent = parent if parent is not None else base.render
        self._ids = itertools.count(1)
        self._listeners: list[Callable[[Hashable], None]] = []
        self._structural_ids: dict[int, int] = {}

    def add_listener(self, callback: Callable[[Hashable], None]) -> None:
        self._listeners.append(callback)

    def load(self, path: str, sub_resource: str | None = None) -> LoadRequest:
        load_id = next(self._ids)
        root_np = NodePath(f"scene_root_{load_id}")
        root_np.reparentTo(self.parent)

        if sub_resource is not None:
            # The model loader always instantiates the file's default scene
            logger.debug("Sub-resource %s of %s resolves to the default scene", sub_resource, path)

        self.base.loader.loadModel(
            path,
            callback=self._on_model_loaded,
            extraArgs=[load_id, root_np],
        )
        logger.debug("Requested load %s for %s", load_id, path)
        return LoadRequest(
            load_id=load_id,
            root=PandaSceneNode(root_np, self._structural_ids),
            path=path,
            sub_resource=sub_resource,
        )

    def update(self) -> None:
        """Completion is delivered by the task manager; nothing to poll."""
        pass

    def _on_model_loaded(self, model, load_id, root_np) -> None:
        if model is None or model.isEmpty():
            logger.error("Failed to load scene for request %s", load_id)
            self.base.messenger.send(SCENE_LOAD_FAILED_EVENT, [load_id])
            return

        model.reparentTo(root_np)
        assign_structural_ids(model, self._structural_ids)
        logger.debug("Load %s complete (%s)", load_id, model.getName())

        for listener in list(self._listeners):
            listener(load_id)
