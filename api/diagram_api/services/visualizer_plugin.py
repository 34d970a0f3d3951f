"""Visualizer plugin interface definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, NamedTuple
from ..model import NetworkGraph


class RenderOption(NamedTuple):
    """One keyword a visualizer accepts in ``render``: accepted types and default value."""

    types: tuple
    default: Any


class VisualizerPlugin(ABC):
    """
    Contract for plugins that draw a diagram and return HTML output.

    A visualizer reads node positions and, per link, the destination position and
    optional curve control point. It must not mutate the graph.
    """

    @property
    @abstractmethod
    def plugin_id(self) -> str:
        """Return a unique, stable plugin identifier."""

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Return a human-readable plugin name for UI and logs."""

    def render_options_schema(self) -> dict[str, RenderOption]:
        """Return the keywords ``render`` accepts. Plugins without options accept none."""
        return {}

    def resolve_options(self, options: dict[str, Any]) -> dict[str, Any]:
        """
        Fill in defaults for ``options`` and check them against the schema.

        Raises ValueError for a keyword the plugin does not know or a value of the
        wrong type.
        """
        schema = self.render_options_schema()
        unknown = sorted(set(options) - set(schema))
        if unknown:
            raise ValueError(f"Unknown render option(s) for '{self.plugin_id}': {', '.join(unknown)}")

        resolved = {}
        for name, option in schema.items():
            value = options.get(name, option.default)
            # bool is an int subclass; only accept it where bool is declared
            if not isinstance(value, option.types) or (isinstance(value, bool) and bool not in option.types):
                raise ValueError(f"Render option '{name}' has invalid value {value!r}")
            resolved[name] = value
        return resolved

    @abstractmethod
    def render(self, graph: "NetworkGraph", **options: Any) -> str:
        """Render the provided diagram and return HTML output."""
