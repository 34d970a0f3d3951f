"""Diagram platform: workspace state, command engine and plugin discovery."""

from .engine import DiagramEngine
from .registry import PluginRegistry
from .workspace import Workspace

__all__ = ["DiagramEngine", "PluginRegistry", "Workspace"]
