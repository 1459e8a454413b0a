"""Panda3D NodePath adapters implementing the scene-node protocol."""

from __future__ import annotations

from renderer.panda3d.material_manager import MaterialManager


class PandaColorAttribute:
    """Albedo color of a material-bearing NodePath."""

    def __init__(self, nodepath):
        self.nodepath = nodepath

    def get_color(self):
        return MaterialManager.get_base_color(self.nodepath)

    def set_color(self, rgba) -> None:
        MaterialManager.set_base_color(self.nodepath, rgba)


class PandaSceneNode:
    """View of a NodePath as an ``ISceneNode``.

    Children are read live from the scene graph. Structural ids come from the
    ``structural_ids`` registry filled by the loader (keyed by
    ``NodePath.getKey()``); nodes added after loading have none.
    """

    def __init__(self, nodepath, structural_ids: dict[int, int] | None = None):
        self.nodepath = nodepath
        self._structural_ids = structural_ids if structural_ids is not None else {}

    def children(self) -> list[PandaSceneNode]:
        return [
            PandaSceneNode(child, self._structural_ids)
            for child in self.nodepath.getChildren()
        ]

    def color_attribute(self) -> PandaColorAttribute | None:
        if MaterialManager.has_material(self.nodepath):
            return PandaColorAttribute(self.nodepath)
        return None

    def structural_id(self) -> int | None:
        return self._structural_ids.get(self.nodepath.getKey())

    def has_marker(self, name: str) -> bool:
        return self.nodepath.hasTag(name)

    def __repr__(self) -> str:
        return f"PandaSceneNode({self.nodepath.getName()!r}, id={self.structural_id()})"


def assign_structural_ids(nodepath, structural_ids: dict[int, int], start: int = 0) -> int:
    """Number ``nodepath`` and its descendants in pre-order.

    Returns:
        int: The next unused ordinal
    """
    ordinal = start
    stack = [nodepath]
    while stack:
        current = stack.pop()
        structural_ids[current.getKey()] = ordinal
        ordinal += 1
        stack.extend(reversed(list(current.getChildren())))
    return ordinal
