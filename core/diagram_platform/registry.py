import logging
from importlib.metadata import entry_points
from api.diagram_api.services import VisualizerPlugin
from typing import Dict, Type

logger = logging.getLogger(__name__)

VISUALIZER_GROUP = "diagram_platform.visualizer"


class PluginRegistry:
    """
    Process-wide catalogue of visualizers, keyed by the name callers render with.

    Installed plugins come from the ``diagram_platform.visualizer`` entry-point
    group; scripts and tests may add more with ``register_visualizer``.
    """

    _instance = None
    _visualizers: Dict[str, Type[VisualizerPlugin]]

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._visualizers = {}
            cls._instance._load_plugins()
        return cls._instance

    def _load_plugins(self):
        for ep in entry_points().select(group=VISUALIZER_GROUP):
            self.register_visualizer(ep.name, ep.load())

    def register_visualizer(self, name: str, visualizer_cls: Type[VisualizerPlugin]) -> None:
        if not (isinstance(visualizer_cls, type) and issubclass(visualizer_cls, VisualizerPlugin)):
            raise TypeError(f"Visualizer '{name}' must be a VisualizerPlugin subclass, got {visualizer_cls!r}")
        self._visualizers[name] = visualizer_cls
        logger.debug("Registered visualizer '%s' (%s)", name, visualizer_cls.__name__)

    def get_visualizer(self, name: str) -> Type[VisualizerPlugin] | None:
        return self._visualizers.get(name)

    def create_visualizer(self, name: str) -> VisualizerPlugin:
        visualizer_cls = self.get_visualizer(name)
        if visualizer_cls is None:
            known = ", ".join(sorted(self._visualizers)) or "none"
            raise ValueError(f"Visualizer '{name}' not found. Available: {known}.")
        return visualizer_cls()

    def list_visualizers(self) -> list[str]:
        return sorted(self._visualizers)
