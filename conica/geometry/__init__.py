from .drag import DragGeometry

__all__ = ["DragGeometry"]
