from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .point import Point

if TYPE_CHECKING:
    from .node import Node


class Connection:
    """
    One half of a symmetric link, stored in the edge list of the node that owns it.

    The owner is implicit; ``destination`` is the peer node. When ``control`` is set
    the link is drawn as a quadratic curve through that point.
    """

    __slots__ = ("destination", "weight", "control")

    def __init__(self, destination: "Node",
                 weight: Optional[float] = None,
                 control: Optional[Point] = None):
        self.destination = destination
        self.weight = weight
        self.control = Point(*control) if control is not None else None

    @property
    def is_curve(self) -> bool:
        return self.control is not None

    def __repr__(self):
        return (f"Connection(-> {self.destination.name}, "
                f"weight={self.weight}, control={self.control})")
