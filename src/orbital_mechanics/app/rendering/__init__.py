from .base import DisplayOptions, Renderer
from ..widgets.scene_view import SceneView as Renderer2D

__all__ = [
    "DisplayOptions",
    "Renderer",
    "Renderer2D",
]
