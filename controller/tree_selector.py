"""Scene-tree traversal that recolors matching nodes."""

from __future__ import annotations

import logging
from typing import Callable

from shared.interfaces import ISceneNode
from shared.palette import PaletteColor

logger = logging.getLogger(__name__)

NodePredicate = Callable[[ISceneNode], bool]


def has_color_attribute(node: ISceneNode) -> bool:
    """Select every material-bearing node."""
    return node.color_attribute() is not None


def structural_id_equals(structural_id: int) -> NodePredicate:
    """Select the node whose loader-assigned id equals ``structural_id``."""

    def _predicate(node: ISceneNode) -> bool:
        return node.structural_id() == structural_id

    return _predicate


def has_marker(name: str) -> NodePredicate:
    """Select nodes tagged with ``name`` when the asset was authored."""

    def _predicate(node: ISceneNode) -> bool:
        return node.has_marker(name)

    return _predicate


class TreeSelector:
    """Applies a color to every descendant of a root that matches a predicate.

    Traversal is depth-first pre-order over the descendants of ``root`` (the
    root itself is not a candidate). Matching never prunes: children of a
    matched node are still visited. Uses an explicit stack so depth is only
    bounded by memory.
    """

    def apply_color(
        self,
        root: ISceneNode,
        predicate: NodePredicate,
        color: PaletteColor,
    ) -> int:
        """Recolor matching descendants of ``root``.

        Args:
            root: Node whose descendants are visited
            predicate: Selection predicate; nodes without a color attribute
                       are skipped even when they match
            color: Palette color to apply

        Returns:
            Number of nodes whose color attribute was set
        """
        applied = 0
        # holds references so ids cannot be reused mid-walk
        visited: dict[int, ISceneNode] = {id(root): root}
        stack = list(reversed(root.children()))

        while stack:
            node = stack.pop()
            if id(node) in visited:
                continue
            visited[id(node)] = node

            attribute = node.color_attribute()
            if attribute is not None and predicate(node):
                attribute.set_color(color.rgba)
                applied += 1

            stack.extend(reversed(node.children()))

        logger.debug("Applied %s to %d node(s)", color.name, applied)
        return applied
