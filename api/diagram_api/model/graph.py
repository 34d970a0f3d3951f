import logging
from collections import Counter
from typing import Iterator, List, Optional, Tuple

from .connection import Connection
from .node import Node, PointLike
from .point import Point

logger = logging.getLogger(__name__)

# Half-width of the square neighbourhood searched by get_near_point.
NEAR_TOLERANCE = 5.0


class NetworkGraph:
    """
    Container for the nodes of a diagram.

    The graph mints node names from a counter that only grows, so a name is never
    handed out twice for the lifetime of the instance. Edges are stored on the
    nodes themselves; every link is kept as two connections, one on each end.
    """

    def __init__(self):
        self.nodes: List[Node] = []
        self.next_id = 0

    def node_list(self) -> List[Node]:
        return self.nodes

    def __len__(self):
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __contains__(self, node):
        return node in self.nodes

    # -----------------
    # NODE OPERATIONS
    # -----------------

    def add_node(self, position: PointLike) -> Node:
        node = Node(str(self.next_id), position)
        self.nodes.append(node)
        self.next_id += 1
        logger.debug("Added node %s at %s", node.name, node.position)
        return node

    def remove_node(self, node_ref: Node) -> None:
        """Remove ``node_ref`` and every connection pointing at it. Absent nodes are ignored."""
        for node in self.nodes:
            node.disconnect(node_ref)

        remaining = [node for node in self.nodes if node != node_ref]
        if len(remaining) != len(self.nodes):
            self.nodes[:] = remaining
            logger.debug("Removed node %s", node_ref.name)

    def get_node(self, name: str) -> Optional[Node]:
        for node in self.nodes:
            if node.name == name:
                return node
        return None

    def clear(self) -> None:
        """Drop every node. The id counter keeps running."""
        for node in self.nodes:
            node.edges.clear()
        self.nodes.clear()

    # -----------------
    # EDGE OPERATIONS
    # -----------------

    def add_edge(self, node_src: Node, node_dst: Node) -> None:
        Node.connect(node_src, node_dst)

    def add_curve(self, node_src: Node, node_dst: Node, control: PointLike) -> None:
        Node.connect(node_src, node_dst, control=control)

    def remove_edge(self, node_src: Node, node_dst: Node) -> None:
        """Remove every link between the two nodes, from both edge lists."""
        node_src.disconnect(node_dst)
        node_dst.disconnect(node_src)

    def edge_list(self) -> List[Tuple[Node, Connection]]:
        """
        Every link once, as ``(owner, connection)``.

        A link is reported from whichever end comes first in storage order. When
        the later end holds more halves towards the earlier one than it gets back
        (after a one-sided ``disconnect``), the surplus is reported from the later
        end. A self-loop is reported once per ``connect`` call.
        """
        order = {node: index for index, node in enumerate(self.nodes)}
        edges = []
        for index, node in enumerate(self.nodes):
            loops = 0
            seen_back = Counter()
            for conn in node.edges:
                peer = order.get(conn.destination)
                if peer is None or peer > index:
                    edges.append((node, conn))
                elif peer == index:
                    # both halves of a self-loop sit in this list
                    if loops % 2 == 0:
                        edges.append((node, conn))
                    loops += 1
                else:
                    earlier = self.nodes[peer]
                    reported = sum(1 for back in earlier.edges if back.destination == node)
                    if seen_back[peer] >= reported:
                        edges.append((node, conn))
                    seen_back[peer] += 1
        return edges

    # -----------------
    # SPATIAL QUERIES
    # -----------------

    def get_exact_point(self, pos: PointLike) -> Optional[Node]:
        pos = Point(*pos)
        for node in self.nodes:
            if node.position == pos:
                return node
        return None

    def get_near_point(self, pos: PointLike) -> Optional[Node]:
        """First node, in insertion order, inside the square of half-width NEAR_TOLERANCE."""
        x, y = pos
        for node in self.nodes:
            if abs(node.x - x) < NEAR_TOLERANCE and abs(node.y - y) < NEAR_TOLERANCE:
                return node
        return None
