"""
Shared constants for the diagram platform.

Exports:
    NEAR_TOLERANCE (float): Half-width of the square used for point picking.
    HISTORY_LIMIT (int): Number of replaced diagrams the workspace keeps for undo.
    OUTPUT_DIR (str): Directory that developer scripts write rendered pages to.
"""
from api.diagram_api.model import NEAR_TOLERANCE

HISTORY_LIMIT: int = 20

OUTPUT_DIR: str = "out"

__all__ = ["NEAR_TOLERANCE", "HISTORY_LIMIT", "OUTPUT_DIR"]
