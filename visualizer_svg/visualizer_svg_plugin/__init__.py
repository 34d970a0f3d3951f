from .plugin import SvgVisualizer

__all__ = ["SvgVisualizer"]
