import logging
import operator
from collections import deque
from typing import Deque, Optional, List, Callable, Tuple
from api.diagram_api.model import NetworkGraph, Node, Connection, Point
from api.diagram_api.model.node import PointLike
from .config import HISTORY_LIMIT

logger = logging.getLogger(__name__)

EdgeEntry = Tuple[Node, Connection]

_COMPARISONS = {
    "==": operator.eq,
    "!=": operator.ne,
    ">": operator.gt,
    ">=": operator.ge,
    "<": operator.lt,
    "<=": operator.le,
}


class Workspace:
    """
    Central application state container.

    Responsibilities:
    - Hold the diagram being edited
    - Keep the diagrams it replaced, newest last, for undo
    - Provide search/filter capabilities over nodes and links

    Diagrams are kept by reference; undo brings back the replaced graph object
    itself, with whatever edits it had when it was replaced.
    """

    def __init__(self, history_limit: int = HISTORY_LIMIT):
        self._current_graph: Optional[NetworkGraph] = None
        # oldest diagrams fall off once the limit is reached
        self._history: Deque[NetworkGraph] = deque(maxlen=history_limit)

    # ==========================================================
    # DIAGRAM STATE MANAGEMENT
    # ==========================================================

    def set_graph(self, graph: NetworkGraph) -> None:
        """Make ``graph`` the edited diagram. Setting the current one again keeps history as is."""
        if graph is self._current_graph:
            return
        if self._current_graph is not None:
            self._history.append(self._current_graph)
        self._current_graph = graph
        logger.debug("Workspace now edits a diagram of %d node(s); %d in history",
                     len(graph), len(self._history))

    def get_graph(self) -> Optional[NetworkGraph]:
        return self._current_graph

    def has_graph(self) -> bool:
        return self._current_graph is not None

    def clear(self) -> None:
        self._current_graph = None
        self._history.clear()

    def undo(self) -> Optional[NetworkGraph]:
        """Go back to the previously edited diagram; None when there is nothing to go back to."""
        if not self._history:
            return None
        self._current_graph = self._history.pop()
        logger.debug("Restored diagram of %d node(s)", len(self._current_graph))
        return self._current_graph

    def history_size(self) -> int:
        return len(self._history)

    # ==========================================================
    # NODE OPERATIONS
    # ==========================================================

    def list_nodes(self) -> List[Node]:
        if self._current_graph is None:
            return []
        return self._current_graph.node_list()

    def find_node_by_name(self, name: str) -> Optional[Node]:
        if self._current_graph is None:
            return None
        return self._current_graph.get_node(name)

    def filter_nodes(self, predicate: Callable[[Node], bool]) -> List[Node]:
        return [node for node in self.list_nodes() if predicate(node)]

    # ==========================================================
    # EDGE OPERATIONS
    # ==========================================================

    def list_edges(self) -> List[EdgeEntry]:
        if self._current_graph is None:
            return []
        return self._current_graph.edge_list()

    def filter_edges(self, predicate: Callable[[Node, Connection], bool]) -> List[EdgeEntry]:
        return [(owner, conn) for owner, conn in self.list_edges() if predicate(owner, conn)]

    # -----------------
    # PREDEFINED NODE FILTERS / SEARCH
    # -----------------
    def find_nodes_in_region(self, corner_a: PointLike, corner_b: PointLike) -> List[Node]:
        """Return nodes inside the rectangle spanned by two corners, borders included."""
        a, b = Point(*corner_a), Point(*corner_b)
        left, right = min(a.x, b.x), max(a.x, b.x)
        top, bottom = min(a.y, b.y), max(a.y, b.y)
        return self.filter_nodes(lambda n: left <= n.x <= right and top <= n.y <= bottom)

    def find_isolated_nodes(self) -> List[Node]:
        return self.filter_nodes(lambda n: n.degree == 0)

    def find_nodes_by_degree(self, operator_symbol: str, value: int) -> List[Node]:
        op_fn = _COMPARISONS.get(operator_symbol)
        if op_fn is None:
            raise ValueError(f"Unsupported operator: {operator_symbol}")
        return self.filter_nodes(lambda n: op_fn(n.degree, value))

    # -----------------
    # PREDEFINED EDGE FILTERS / SEARCH
    # -----------------
    def find_curved_edges(self) -> List[EdgeEntry]:
        return self.filter_edges(lambda owner, conn: conn.is_curve)

    def find_edges_touching(self, node: Node) -> List[EdgeEntry]:
        """Return links with ``node`` at either end."""
        return self.filter_edges(lambda owner, conn: owner == node or conn.destination == node)
