import logging
from typing import List, Optional

from api.diagram_api.model import NetworkGraph, Node
from api.diagram_api.model.node import PointLike
from api.diagram_api.services import VisualizerPlugin
from .registry import PluginRegistry
from .workspace import Workspace, EdgeEntry

logger = logging.getLogger(__name__)


class DiagramEngine:
    """
    High-level orchestration layer.

    Responsibilities:
    - Translate raw pointer coordinates into graph operations
    - Graph lifecycle management (clear / undo)
    - Rendering through registered visualizer plugins
    - Delegation to Workspace
    """

    def __init__(self, graph: Optional[NetworkGraph] = None):
        self.registry = PluginRegistry()
        self.workspace = Workspace()
        self.workspace.set_graph(graph if graph is not None else NetworkGraph())

    @property
    def graph(self) -> NetworkGraph:
        return self.workspace.get_graph()

    # ==========================================================
    # POINT-DRIVEN COMMANDS
    # ==========================================================

    def add_node(self, point: PointLike) -> Node:
        return self.graph.add_node(point)

    def pick(self, point: PointLike) -> Optional[Node]:
        """Return the node under the pointer, if any."""
        return self.graph.get_near_point(point)

    def add_edge(self, from_point: PointLike, to_point: PointLike) -> bool:
        endpoints = self._resolve(from_point, to_point)
        if endpoints is None:
            return False
        self.graph.add_edge(*endpoints)
        return True

    def add_curve(self, from_point: PointLike, to_point: PointLike, control: PointLike) -> bool:
        endpoints = self._resolve(from_point, to_point)
        if endpoints is None:
            return False
        self.graph.add_curve(*endpoints, control)
        return True

    def remove_edge(self, from_point: PointLike, to_point: PointLike) -> bool:
        endpoints = self._resolve(from_point, to_point)
        if endpoints is None:
            return False
        self.graph.remove_edge(*endpoints)
        return True

    def remove_node_at(self, point: PointLike) -> bool:
        node = self.graph.get_near_point(point)
        if node is None:
            logger.info("No node near %s to remove", tuple(point))
            return False
        self.graph.remove_node(node)
        return True

    def _resolve(self, from_point: PointLike, to_point: PointLike):
        """Snap both clicks to the node under the pointer."""
        source = self.graph.get_near_point(from_point)
        target = self.graph.get_near_point(to_point)
        if source is None or target is None:
            logger.info("Cannot resolve link endpoints %s -> %s", tuple(from_point), tuple(to_point))
            return None
        return source, target

    # ==========================================================
    # LIFECYCLE
    # ==========================================================

    def get_current_graph(self) -> NetworkGraph:
        return self.graph

    def clear(self) -> None:
        """Start a fresh diagram; the previous one stays reachable through undo()."""
        self.workspace.set_graph(NetworkGraph())

    def undo(self) -> Optional[NetworkGraph]:
        return self.workspace.undo()

    # ==========================================================
    # RENDERING
    # ==========================================================

    def render(self, visualizer_name: str, **options) -> str:
        visualizer: VisualizerPlugin = self.registry.create_visualizer(visualizer_name)
        return visualizer.render(self.graph, **options)

    # ==========================================================
    # WORKSPACE DELEGATION API
    # ==========================================================

    def list_nodes(self) -> List[Node]:
        return self.workspace.list_nodes()

    def list_edges(self) -> List[EdgeEntry]:
        return self.workspace.list_edges()

    def find_node(self, name: str) -> Optional[Node]:
        return self.workspace.find_node_by_name(name)

    def filter_nodes(self, predicate):
        return self.workspace.filter_nodes(predicate)

    def filter_edges(self, predicate):
        return self.workspace.filter_edges(predicate)

    # -----------------
    # SEARCH / FILTER DELEGATION
    # -----------------
    def search_nodes_in_region(self, corner_a: PointLike, corner_b: PointLike):
        return self.workspace.find_nodes_in_region(corner_a, corner_b)

    def search_isolated_nodes(self):
        return self.workspace.find_isolated_nodes()

    def search_nodes_by_degree(self, operator_symbol: str, value: int):
        return self.workspace.find_nodes_by_degree(operator_symbol, value)

    def search_curved_edges(self):
        return self.workspace.find_curved_edges()
