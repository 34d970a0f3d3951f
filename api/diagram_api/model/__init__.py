"""
Core diagram domain model (Point, Node, Connection, NetworkGraph).
"""

from .point import Point
from .connection import Connection
from .node import Node
from .graph import NetworkGraph, NEAR_TOLERANCE

__all__ = ["Point", "Connection", "Node", "NetworkGraph", "NEAR_TOLERANCE"]
