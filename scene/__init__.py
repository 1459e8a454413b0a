"""In-memory scene graph and headless scene loading."""

from .scene_node import SceneNode, ColorAttribute  # noqa: F401
from .scene_loader import HeadlessSceneLoader, SceneLoadError  # noqa: F401
