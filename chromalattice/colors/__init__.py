from .rgb import ColorRGB, ColorLike, BLACK

__all__ = ["ColorRGB", "ColorLike", "BLACK"]
