from .renderer import SceneRenderer

__all__ = ["SceneRenderer"]
