from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple, Union

from .connection import Connection
from .point import Point

logger = logging.getLogger(__name__)

PointLike = Union[Point, Tuple[float, float]]


class Node:
    """
    A named point in the plane together with the connections it owns.

    Two nodes are the same node when both name and position match.
    """

    def __init__(self, name: str, position: PointLike):
        self._name = name
        self._position = Point(*position)
        self._edges: List[Connection] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def position(self) -> Point:
        return self._position

    @property
    def x(self) -> float:
        return self._position.x

    @property
    def y(self) -> float:
        return self._position.y

    @property
    def edges(self) -> List[Connection]:
        """The live edge list; the graph mutates it in place."""
        return self._edges

    @property
    def degree(self) -> int:
        return len(self._edges)

    def neighbours(self) -> Iterator["Node"]:
        return (conn.destination for conn in self._edges)

    # -----------------
    # CONNECT / DISCONNECT
    # -----------------

    @staticmethod
    def connect(source: "Node", destination: "Node",
                control: Optional[PointLike] = None,
                weight: Optional[float] = None) -> None:
        """
        Link two nodes. Both halves carry the same control point and weight.

        A node may be connected to itself; both halves then land in its own list.
        """
        source._edges.append(Connection(destination, weight, control))
        destination._edges.append(Connection(source, weight, control))
        logger.debug("Connected %s <-> %s (control=%s)", source.name, destination.name, control)

    def disconnect(self, other: "Node") -> None:
        """Drop every connection from this node to ``other``. Parallel links all go."""
        kept = [conn for conn in self._edges if conn.destination != other]
        removed = len(self._edges) - len(kept)
        if removed:
            self._edges[:] = kept
            logger.debug("Disconnected %s from %s (%d connection(s))", self.name, other.name, removed)

    # -----------------
    # IDENTITY
    # -----------------

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return self._name == other._name and self._position == other._position

    def __hash__(self):
        return hash((self._name, self._position))

    def __repr__(self):
        return f"Node({self._name!r}, ({self.x}, {self.y}), edges={len(self._edges)})"
