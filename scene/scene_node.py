"""In-memory scene nodes for headless runs and tests."""

from __future__ import annotations

from typing import Iterable, Iterator, Tuple

RGBA = Tuple[float, float, float, float]


class ColorAttribute:
    """Mutable albedo color of a material-bearing node."""

    def __init__(self, rgba: RGBA = (1.0, 1.0, 1.0, 1.0)):
        self.rgba: RGBA = tuple(rgba)
        self.history: list[RGBA] = []

    def get_color(self) -> RGBA:
        return self.rgba

    def set_color(self, rgba: RGBA) -> None:
        self.rgba = tuple(rgba)
        self.history.append(self.rgba)

    def __repr__(self) -> str:
        return f"ColorAttribute({self.rgba})"


class SceneNode:
    """Plain scene-graph node implementing ``ISceneNode``."""

    def __init__(
        self,
        name: str = "",
        *,
        color: ColorAttribute | None = None,
        structural_id: int | None = None,
        markers: Iterable[str] = (),
        children: Iterable[SceneNode] = (),
    ):
        self.name = name
        self.color = color
        self.id = structural_id
        self.markers: set[str] = set(markers)
        self._children: list[SceneNode] = list(children)

    def children(self) -> list[SceneNode]:
        return list(self._children)

    def color_attribute(self) -> ColorAttribute | None:
        return self.color

    def structural_id(self) -> int | None:
        return self.id

    def has_marker(self, name: str) -> bool:
        return name in self.markers

    def add_child(self, child: SceneNode) -> SceneNode:
        self._children.append(child)
        return child

    def walk(self) -> Iterator[SceneNode]:
        """Yield this node and its descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node._children))

    def find(self, name: str) -> SceneNode | None:
        for node in self.walk():
            if node.name == name:
                return node
        return None

    def __repr__(self) -> str:
        return f"SceneNode({self.name!r}, id={self.id}, children={len(self._children)})"
