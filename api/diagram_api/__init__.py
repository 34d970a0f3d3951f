"""Public API exports for the diagram model and plugin contracts."""

from .model import Point, Connection, Node, NetworkGraph, NEAR_TOLERANCE
from .services import RenderOption, VisualizerPlugin

__all__ = [
    "Point",
    "Connection",
    "Node",
    "NetworkGraph",
    "NEAR_TOLERANCE",
    "RenderOption",
    "VisualizerPlugin",
]
