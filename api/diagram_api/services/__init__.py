"""Service-level plugin contracts for diagram_api."""

from .visualizer_plugin import RenderOption, VisualizerPlugin

__all__ = ["RenderOption", "VisualizerPlugin"]
